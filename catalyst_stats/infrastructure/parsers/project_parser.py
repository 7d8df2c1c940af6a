# catalyst_stats/infrastructure/parsers/project_parser.py

from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Optional

PROJECT_DETAIL_FIELDS = (
    "id",
    "title",
    "budget",
    "milestones_qty",
    "funds_distributed",
    "project_id",
    "challenges",
    "name",
    "category",
    "url",
    "status",
    "finished",
    "voting",
)


def iso_timestamp(now: Optional[datetime] = None) -> str:
    """UTC timestamp with millisecond precision, e.g. 2025-01-31T12:00:00.000Z"""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_project_record(project: Dict[str, Any]) -> Dict[str, Any]:
    # Either key may carry the count; 0/None fall through to the next.
    milestones_completed = project.get("milestones_completed") or project.get("completed_milestones") or 0

    return {
        "projectDetails": {field: project.get(field) for field in PROJECT_DETAIL_FIELDS},
        "milestonesCompleted": milestones_completed,
    }


def transform_projects(raw_projects: Iterable[Dict[str, Any]], now: Optional[datetime] = None) -> Dict[str, Any]:
    return {
        "timestamp": iso_timestamp(now),
        "projects": [build_project_record(p) for p in raw_projects],
    }
