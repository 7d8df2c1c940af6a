# catalyst_stats/presentation/cli_interface.py

"""
Collect Catalyst proposal stats and write them to a JSON file.

Inputs come from GitHub Action style environment variables (INPUT_PROJECT_IDS,
INPUT_OUTPUT_FILE, ...) or a local .env file; command-line options override them.

Usage:
  INPUT_PROJECT_IDS=1100001,1100002 python -m catalyst_stats.presentation.cli_interface
  catalyst-stats --project-ids 1100001,1100002 --output-file data/stats.json
"""

import argparse
import os
import sys
from typing import List, Optional

from catalyst_stats.application.orchestrator import run_catalyst_pipeline
from catalyst_stats.config.settings import ID_ENCODINGS, load_settings
from catalyst_stats.domain.errors import CatalystStatsError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Trigger the Catalyst proposals job, wait for it and save the project stats as JSON."
    )
    parser.add_argument("--project-ids", help="Comma-separated project ids (default: $INPUT_PROJECT_IDS)")
    parser.add_argument("--output-file", help="Output JSON path (default: $INPUT_OUTPUT_FILE or data/catalyst-stats/stats.json)")
    parser.add_argument("--max-retries", type=int, help="Maximum status polls (default: 30)")
    parser.add_argument("--interval", type=float, help="Seconds between status polls (default: 10)")
    parser.add_argument("--id-encoding", choices=ID_ENCODINGS, help="How ids are sent to the trigger endpoint")
    parser.add_argument("--verbose", action="store_true", default=None, help="Print full response payloads")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    print("[INFO] Environment variables:")
    print(f"  INPUT_PROJECT_IDS: {os.environ.get('INPUT_PROJECT_IDS')}")
    print(f"  INPUT_OUTPUT_FILE: {os.environ.get('INPUT_OUTPUT_FILE')}")

    try:
        settings = load_settings(
            project_ids=args.project_ids,
            output_file=args.output_file,
            max_retries=args.max_retries,
            interval=args.interval,
            id_encoding=args.id_encoding,
            verbose=args.verbose,
        )
        print("[INFO] Resolved values:")
        print(f"  PROJECT_IDS: {settings.project_ids_csv}")
        print(f"  OUTPUT_FILE: {settings.output_file}")

        run_catalyst_pipeline(settings)
    except CatalystStatsError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        if e.hint:
            print(f"[ERROR] Hint: {e.hint}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
