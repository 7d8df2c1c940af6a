# catalyst_stats/domain/errors.py

"""Exception hierarchy for catalyst-stats.

Every fatal error ends the run with exit status 1; only
``TransientPollError`` is recovered from, inside the poller.
"""

from typing import Optional


class CatalystStatsError(Exception):
    """Base exception for all catalyst-stats errors."""

    def __init__(self, message: str, *, hint: Optional[str] = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(CatalystStatsError):
    """A required input is missing or invalid."""


class TriggerError(CatalystStatsError):
    """The background job could not be triggered. Never retried."""

    def __init__(self, message: str, *, hint: Optional[str] = None, status_code: Optional[int] = None) -> None:
        super().__init__(message, hint=hint)
        self.status_code = status_code


class TransientPollError(CatalystStatsError):
    """A single polling attempt failed and may be retried."""

    def __init__(self, message: str, *, hint: Optional[str] = None, attempt: Optional[int] = None) -> None:
        super().__init__(message, hint=hint)
        self.attempt = attempt


class PollTimeoutError(CatalystStatsError):
    """The attempt cap was exhausted before the job reported data."""

    def __init__(
        self,
        message: str,
        *,
        hint: Optional[str] = None,
        attempts: int = 0,
        last_error: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.attempts = attempts
        self.last_error = last_error


class WriteError(CatalystStatsError):
    """The output file could not be written."""
