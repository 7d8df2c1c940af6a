# catalyst_stats/infrastructure/storage/json_writer.py

import json
import os
from typing import Any, Optional

from catalyst_stats.domain.errors import WriteError


def write_json(document: Any, output_file: str, *, base_dir: Optional[str] = None) -> str:
    """Write `document` as 2-space indented JSON, replacing any existing file."""
    full_path = os.path.abspath(os.path.join(base_dir or os.getcwd(), output_file))
    print(f"[INFO] Full output path: {full_path}")

    # Serialize first so a bad document never truncates an existing file.
    try:
        payload = json.dumps(document, indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise WriteError(f"Failed to serialize results: {e}") from e

    try:
        os.makedirs(os.path.dirname(full_path), exist_ok=True)
        with open(full_path, "w", encoding="utf-8") as f:
            f.write(payload)
    except OSError as e:
        raise WriteError(f"Failed to write results to {full_path}: {e}") from e

    print(f"[INFO] Results written to {output_file} ({len(payload)} characters)")
    return full_path
