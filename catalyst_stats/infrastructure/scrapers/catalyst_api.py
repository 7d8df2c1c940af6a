# catalyst_stats/infrastructure/scrapers/catalyst_api.py

"""
Client for the Catalyst proposals background function and its status /
proposals endpoints. Ids travel as one comma-separated `projectIds` query
parameter, or as a JSON body `{"projectIds": [...]}` on the trigger call.
"""

import json
from typing import Any, Dict, List, Optional, Sequence

import requests

from catalyst_stats.config.settings import Settings
from catalyst_stats.domain.errors import TransientPollError, TriggerError
from catalyst_stats.domain.models import JobStatus
from catalyst_stats.infrastructure.services.http_client import ResponseBody, make_request


def id_params(project_ids: Sequence[str]) -> Dict[str, str]:
    return {"projectIds": ",".join(project_ids)}


class CatalystClient:
    def __init__(self, settings: Settings, session: Optional[requests.Session] = None) -> None:
        self.settings = settings
        self.session = session or requests.Session()

    def __enter__(self) -> "CatalystClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def _dump(self, label: str, data: Any) -> None:
        if self.settings.verbose:
            print(f"[INFO] {label}: {json.dumps(data, indent=2, ensure_ascii=False)}")

    def trigger(self, project_ids: Sequence[str]) -> ResponseBody:
        """POST the trigger endpoint once. Any failure is fatal."""
        if self.settings.id_encoding == "body":
            params, body = None, {"projectIds": list(project_ids)}
        else:
            params, body = id_params(project_ids), None

        try:
            response = make_request(
                self.session,
                "POST",
                self.settings.trigger_url,
                params=params,
                json_body=body,
                timeout=self.settings.request_timeout,
            )
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise TriggerError(f"Trigger failed: HTTP {status if status is not None else 'N/A'}", status_code=status) from e
        except requests.RequestException as e:
            raise TriggerError(f"Trigger failed: {e}") from e

        if response.kind == "json":
            self._dump("Function response", response.value)
        return response

    def fetch_status(self, project_ids: Sequence[str]) -> JobStatus:
        response = make_request(
            self.session,
            "GET",
            self.settings.status_url,
            params=id_params(project_ids),
            timeout=self.settings.request_timeout,
        )
        if response.kind != "json" or not isinstance(response.value, dict):
            raise TransientPollError(f"Status endpoint returned a {response.kind} body instead of a JSON object")
        self._dump("Status response", response.value)
        return JobStatus.from_payload(response.value)

    def fetch_proposals(self, project_ids: Sequence[str]) -> List[Dict[str, Any]]:
        response = make_request(
            self.session,
            "GET",
            self.settings.proposals_url,
            params=id_params(project_ids),
            timeout=self.settings.request_timeout,
        )
        if response.kind != "json" or not isinstance(response.value, dict):
            raise TransientPollError(f"Proposals endpoint returned a {response.kind} body instead of a JSON object")
        proposals = response.value.get("proposals")
        if not isinstance(proposals, list):
            raise TransientPollError("Proposals response has no 'proposals' list")
        bad = [i for i, p in enumerate(proposals) if not isinstance(p, dict)]
        if bad:
            raise TransientPollError(f"Proposals at positions {bad} are not JSON objects")
        self._dump("Full proposals data", proposals)
        return proposals
