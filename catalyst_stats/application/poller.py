# catalyst_stats/application/poller.py

import time
from typing import Any, Callable, Dict, List, Optional, Protocol, Sequence

import requests

from catalyst_stats.config.settings import DEFAULT_INTERVAL, DEFAULT_MAX_RETRIES
from catalyst_stats.domain.errors import PollTimeoutError, TransientPollError
from catalyst_stats.domain.models import JobStatus


class PollingClient(Protocol):
    def fetch_status(self, project_ids: Sequence[str]) -> JobStatus: ...

    def fetch_proposals(self, project_ids: Sequence[str]) -> List[Dict[str, Any]]: ...


def poll_until_complete(
    client: PollingClient,
    project_ids: Sequence[str],
    *,
    max_retries: int = DEFAULT_MAX_RETRIES,
    interval: float = DEFAULT_INTERVAL,
    sleep: Callable[[float], Any] = time.sleep,
    fetch_proposals: bool = True,
) -> Any:
    """
    Poll the status endpoint until the job is done.

    With fetch_proposals, done means data is available and the status is
    completed or partial, and the proposals list is returned. Without it,
    done means status "completed" (hasData is not consulted) and the status
    payload's `results` is returned. A failed attempt is logged and retried
    after `interval` seconds; failing on the last attempt, or never seeing a
    finished status, raises PollTimeoutError.
    """
    print(f"[INFO] Starting polling with {max_retries} max attempts and {interval}s intervals")
    last_error: Optional[BaseException] = None

    for attempt in range(1, max_retries + 1):
        print(f"[INFO] Polling attempt {attempt}/{max_retries}...")
        try:
            status = client.fetch_status(project_ids)
            print(f"[INFO] Job status: {status.status} (hasData={status.has_data})")

            if not fetch_proposals:
                if status.is_finished:
                    print("[INFO] Results are available")
                    return status.results
            elif status.is_complete:
                print("[INFO] Data is available, fetching full proposals...")
                proposals = client.fetch_proposals(project_ids)
                print(f"[INFO] Received {len(proposals)} proposals")
                return proposals

            last_error = None
            print(f"[INFO] Waiting for results... (attempt {attempt}/{max_retries})")
        except (requests.RequestException, TransientPollError) as e:
            last_error = e
            print(f"[ERROR] Polling attempt {attempt} failed: {e}")
            if attempt == max_retries:
                raise PollTimeoutError(
                    "Polling timed out after all attempts.",
                    attempts=attempt,
                    last_error=e,
                ) from e

        if attempt < max_retries:
            sleep(interval)

    raise PollTimeoutError("Polling timed out.", attempts=max_retries, last_error=last_error)
