# catalyst_stats/config/settings.py

import os
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional, Tuple

from dotenv import find_dotenv, load_dotenv

from catalyst_stats.domain.errors import ConfigurationError

# --- Netlify function endpoints ---
BASE_URL = "https://glittering-chebakia-09bd42.netlify.app"
DEFAULT_TRIGGER_URL = f"{BASE_URL}/.netlify/functions/catalyst-proposals-background"
DEFAULT_STATUS_URL = f"{BASE_URL}/api/catalyst/status"
DEFAULT_PROPOSALS_URL = f"{BASE_URL}/api/catalyst/proposals"

DEFAULT_OUTPUT_FILE = os.path.join("data", "catalyst-stats", "stats.json")
DEFAULT_MAX_RETRIES = 30
DEFAULT_INTERVAL = 10.0  # seconds

ID_ENCODINGS = ("query", "body")


@dataclass(frozen=True)
class Settings:
    project_ids: Tuple[str, ...]
    output_file: str = DEFAULT_OUTPUT_FILE
    trigger_url: str = DEFAULT_TRIGGER_URL
    status_url: str = DEFAULT_STATUS_URL
    # Empty selects the single-endpoint flow: the status payload carries `results`.
    proposals_url: str = DEFAULT_PROPOSALS_URL
    id_encoding: str = "query"
    max_retries: int = DEFAULT_MAX_RETRIES
    interval: float = DEFAULT_INTERVAL
    request_timeout: Optional[float] = None
    verbose: bool = False

    @property
    def project_ids_csv(self) -> str:
        return ",".join(self.project_ids)

    @property
    def uses_proposals_endpoint(self) -> bool:
        return bool(self.proposals_url)

    def with_overrides(self, **overrides: Any) -> "Settings":
        changes = {k: v for k, v in overrides.items() if v is not None}
        return validate(replace(self, **changes))


def split_project_ids(value: Optional[str]) -> Tuple[str, ...]:
    """Split a comma-separated id list, keeping order and duplicates."""
    if value is None or not value.strip():
        raise ConfigurationError(
            "INPUT_PROJECT_IDS must be set",
            hint="Pass a comma-separated list, e.g. INPUT_PROJECT_IDS=1100001,1100002",
        )
    return tuple(value.strip().split(","))


def _as_int(name: str, raw: Optional[str], default: int) -> int:
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


def _as_float(name: str, raw: Optional[str], default: Optional[float]) -> Optional[float]:
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from None


def _as_bool(raw: Optional[str]) -> bool:
    return (raw or "").strip().lower() in ("1", "true", "yes", "on")


def validate(settings: Settings) -> Settings:
    if not settings.project_ids:
        raise ConfigurationError("INPUT_PROJECT_IDS must be set")
    if settings.max_retries < 1:
        raise ConfigurationError(f"max_retries must be at least 1, got {settings.max_retries}")
    if settings.interval < 0:
        raise ConfigurationError(f"interval must not be negative, got {settings.interval}")
    if settings.id_encoding not in ID_ENCODINGS:
        raise ConfigurationError(
            f"Unknown id encoding {settings.id_encoding!r}",
            hint=f"Use one of: {', '.join(ID_ENCODINGS)}",
        )
    if not settings.output_file:
        raise ConfigurationError("INPUT_OUTPUT_FILE must not be empty")
    return settings


def load_settings(environ: Optional[Mapping[str, str]] = None, **overrides: Any) -> Settings:
    """
    Build Settings from GitHub Action style INPUT_* variables.

    When no mapping is given, a local .env file is loaded first and the process
    environment is used. Non-None keyword overrides take precedence.
    """
    if environ is None:
        load_dotenv(find_dotenv(usecwd=True))
        environ = os.environ

    raw_ids = overrides.pop("project_ids", None)
    if isinstance(raw_ids, str) or raw_ids is None:
        project_ids = split_project_ids(raw_ids if raw_ids is not None else environ.get("INPUT_PROJECT_IDS"))
    else:
        project_ids = tuple(raw_ids)

    settings = Settings(
        project_ids=project_ids,
        output_file=environ.get("INPUT_OUTPUT_FILE") or DEFAULT_OUTPUT_FILE,
        trigger_url=environ.get("INPUT_TRIGGER_URL") or DEFAULT_TRIGGER_URL,
        status_url=environ.get("INPUT_STATUS_URL") or DEFAULT_STATUS_URL,
        proposals_url=environ.get("INPUT_PROPOSALS_URL", DEFAULT_PROPOSALS_URL),
        id_encoding=(environ.get("INPUT_ID_ENCODING") or "query").strip().lower(),
        max_retries=_as_int("INPUT_MAX_RETRIES", environ.get("INPUT_MAX_RETRIES"), DEFAULT_MAX_RETRIES),
        interval=_as_float("INPUT_POLL_INTERVAL", environ.get("INPUT_POLL_INTERVAL"), DEFAULT_INTERVAL),
        request_timeout=_as_float("INPUT_REQUEST_TIMEOUT", environ.get("INPUT_REQUEST_TIMEOUT"), None),
        verbose=_as_bool(environ.get("INPUT_VERBOSE")),
    )
    return settings.with_overrides(**overrides)
