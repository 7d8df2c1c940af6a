"""Test doubles shared across the suite.

FakeSession stands in for requests.Session so no test touches the network;
RecordingSleep keeps the poller off the wall clock.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

import requests

TRIGGER_URL = "https://catalyst.test/.netlify/functions/catalyst-proposals-background"
STATUS_URL = "https://catalyst.test/api/catalyst/status"
PROPOSALS_URL = "https://catalyst.test/api/catalyst/proposals"


class FakeResponse:
    def __init__(self, status_code: int = 200, text: str = "") -> None:
        self.status_code = status_code
        self.text = text
        self.reason = "OK" if status_code < 400 else "Error"

    @classmethod
    def json_body(cls, data: Any, status_code: int = 200) -> FakeResponse:
        return cls(status_code, json.dumps(data))

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} {self.reason}", response=self)


@dataclass
class FakeSession:
    """Replays queued responses per (method, url) and records every call.

    A queued exception is raised instead of returned. The last queued item
    for a route is repeated once the queue is down to one.
    """

    routes: dict[tuple[str, str], list[Any]] = field(default_factory=dict)
    calls: list[dict[str, Any]] = field(default_factory=list)
    closed: bool = False

    def add(self, method: str, url: str, *items: Any) -> FakeSession:
        self.routes.setdefault((method, url), []).extend(items)
        return self

    def request(self, method, url, params=None, json=None, headers=None, timeout=None):
        self.calls.append(
            {"method": method, "url": url, "params": params, "json": json, "headers": headers, "timeout": timeout}
        )
        queue = self.routes.get((method, url))
        if not queue:
            raise requests.ConnectionError(f"no route for {method} {url}")
        item = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(item, BaseException):
            raise item
        return item

    def calls_to(self, url: str) -> list[dict[str, Any]]:
        return [c for c in self.calls if c["url"] == url]

    def close(self) -> None:
        self.closed = True


@dataclass
class RecordingSleep:
    calls: list[float] = field(default_factory=list)

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


def sample_proposals() -> list[dict[str, Any]]:
    return [
        {
            "id": 1,
            "title": "Open Source Wallet",
            "budget": 50000,
            "milestones_qty": 4,
            "funds_distributed": 25000,
            "project_id": 1100001,
            "challenges": "F10: Developer Ecosystem",
            "name": "Wallet Team",
            "category": "Developer Tools",
            "url": "https://projectcatalyst.io/funds/10/1100001",
            "status": "in_progress",
            "finished": False,
            "voting": {"yes": 120, "no": 3},
            "milestones_completed": 2,
            "internal_notes": "dropped",
        },
        {
            "id": 2,
            "title": "Education Hub",
            "budget": 30000,
            "completed_milestones": 1,
        },
        {"id": 3, "title": "No Milestones Yet"},
    ]
