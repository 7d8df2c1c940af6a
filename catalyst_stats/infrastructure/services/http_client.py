# catalyst_stats/infrastructure/services/http_client.py

"""
Thin wrapper over requests that classifies response bodies.

Background functions may answer with an empty body or plain text, so the
body is returned as one of JsonBody / RawBody / EmptyBody and callers branch
on ``kind`` instead of guessing at the shape.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union
from urllib.parse import urlencode

import requests

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


@dataclass(frozen=True)
class JsonBody:
    value: Any
    kind: str = "json"


@dataclass(frozen=True)
class RawBody:
    text: str
    kind: str = "raw"


@dataclass(frozen=True)
class EmptyBody:
    kind: str = "empty"


ResponseBody = Union[JsonBody, RawBody, EmptyBody]


def classify_body(text: Optional[str]) -> ResponseBody:
    if not text or not text.strip():
        return EmptyBody()
    try:
        return JsonBody(json.loads(text))
    except ValueError:
        return RawBody(text)


def make_request(
    session: requests.Session,
    method: str,
    url: str,
    *,
    params: Optional[Dict[str, str]] = None,
    json_body: Any = None,
    timeout: Optional[float] = None,
) -> ResponseBody:
    """
    Send one request and classify its body.

    Raises requests.HTTPError on a non-2xx status; connection errors surface
    as other requests.RequestException subclasses.
    """
    query = f"?{urlencode(params)}" if params else ""
    print(f"[INFO] {method} {url}{query}")
    r = session.request(
        method,
        url,
        params=params,
        json=json_body,
        headers=DEFAULT_HEADERS,
        timeout=timeout,
    )
    r.raise_for_status()

    body = classify_body(r.text)
    if body.kind == "empty":
        print("[WARN] Empty response received")
    elif body.kind == "raw":
        print(f"[WARN] Non-JSON response received: {body.text[:200]}...")
    return body
