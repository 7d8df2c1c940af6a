"""Pytest fixtures: environment isolation and shared test doubles."""

from __future__ import annotations

import os

import pytest

from catalyst_stats.config.settings import Settings
from helpers import PROPOSALS_URL, STATUS_URL, TRIGGER_URL, FakeSession, RecordingSleep


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep INPUT_* variables from the host out of every test."""
    for key in list(os.environ):
        if key.startswith("INPUT_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        project_ids=("1100001", "1100002"),
        output_file=str(tmp_path / "out" / "stats.json"),
        trigger_url=TRIGGER_URL,
        status_url=STATUS_URL,
        proposals_url=PROPOSALS_URL,
        max_retries=5,
        interval=2.0,
    )
