"""Job status parsing and the completion predicate."""

from __future__ import annotations

import pytest

from catalyst_stats.domain.models import JobStatus


@pytest.mark.parametrize(
    ("payload", "complete"),
    [
        ({"status": "completed", "hasData": True}, True),
        ({"status": "partial", "hasData": True}, True),
        ({"status": "pending", "hasData": True}, False),
        ({"status": "completed", "hasData": False}, False),
        ({"status": "completed", "hasData": "true"}, False),
        ({"status": "completed"}, False),
        ({"hasData": True}, False),
        ({}, False),
    ],
)
def test_is_complete(payload: dict, complete: bool) -> None:
    assert JobStatus.from_payload(payload).is_complete is complete


def test_missing_status_defaults_to_pending() -> None:
    assert JobStatus.from_payload({}).status == "pending"


def test_results_are_carried_through() -> None:
    status = JobStatus.from_payload({"status": "completed", "hasData": True, "results": [1, 2]})
    assert status.results == [1, 2]


def test_unknown_status_is_kept_verbatim() -> None:
    status = JobStatus.from_payload({"status": "failed", "hasData": True})
    assert status.status == "failed"
    assert not status.is_complete


@pytest.mark.parametrize(
    ("payload", "finished"),
    [
        ({"status": "completed"}, True),
        ({"status": "completed", "hasData": False}, True),
        ({"status": "partial", "hasData": True}, False),
        ({"status": "pending"}, False),
    ],
)
def test_is_finished_ignores_has_data(payload: dict, finished: bool) -> None:
    assert JobStatus.from_payload(payload).is_finished is finished
