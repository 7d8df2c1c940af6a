# catalyst_stats/application/orchestrator.py

import time
from datetime import datetime
from typing import Any, Callable, Optional

from catalyst_stats.application.poller import poll_until_complete
from catalyst_stats.config.settings import Settings
from catalyst_stats.infrastructure.parsers.project_parser import transform_projects
from catalyst_stats.infrastructure.scrapers.catalyst_api import CatalystClient
from catalyst_stats.infrastructure.storage.json_writer import write_json


def run_catalyst_pipeline(
    settings: Settings,
    *,
    client: Optional[CatalystClient] = None,
    sleep: Callable[[float], Any] = time.sleep,
    now: Optional[datetime] = None,
) -> str:
    """Trigger, poll, transform and write. Returns the written file path."""
    owns_client = client is None
    client = client or CatalystClient(settings)
    try:
        print(f"[INFO] Starting Catalyst stats collection for projects: {settings.project_ids_csv}")

        print("[INFO] Triggering background function...")
        response = client.trigger(settings.project_ids)
        if response.kind == "json" and isinstance(response.value, dict) and response.value.get("success") is False:
            print("[WARN] Background function reported success=false, polling anyway")
        else:
            print("[INFO] Background function triggered successfully")

        print("[INFO] Starting to poll for results...")
        results = poll_until_complete(
            client,
            settings.project_ids,
            max_retries=settings.max_retries,
            interval=settings.interval,
            sleep=sleep,
            fetch_proposals=settings.uses_proposals_endpoint,
        )
    finally:
        if owns_client:
            client.close()

    if settings.uses_proposals_endpoint:
        print("[INFO] Transforming data into required format...")
        document = transform_projects(results, now=now)
    else:
        document = results

    print("[INFO] Writing results to file...")
    return write_json(document, settings.output_file)
