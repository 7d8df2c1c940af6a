# catalyst_stats/domain/models.py

from dataclasses import dataclass
from typing import Any, Dict

STATUS_PENDING = "pending"
STATUS_PARTIAL = "partial"
STATUS_COMPLETED = "completed"

# Partial results are accepted as final.
TERMINAL_STATUSES = (STATUS_COMPLETED, STATUS_PARTIAL)


@dataclass(frozen=True)
class JobStatus:
    status: str
    has_data: bool
    results: Any = None

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "JobStatus":
        return cls(
            status=str(payload.get("status") or STATUS_PENDING),
            has_data=payload.get("hasData") is True,
            results=payload.get("results"),
        )

    @property
    def is_complete(self) -> bool:
        return self.has_data and self.status in TERMINAL_STATUSES

    @property
    def is_finished(self) -> bool:
        """Single-endpoint jobs report completion only; hasData is not sent."""
        return self.status == STATUS_COMPLETED
