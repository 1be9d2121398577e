"""Structured JSON logging to stdout.

Low overhead, minimal dependencies, safe for CI log collectors.
"""

from typing import Any, Dict
from datetime import datetime, timezone
import json

from aviation_codes.obs.context import build_id_var, source_var


def log_event(event: str, **fields: Any) -> None:
    now = datetime.now(timezone.utc).isoformat()
    payload: Dict[str, Any] = {
        "ts": now,
        "level": fields.pop("level", "INFO"),
        "event": event,
        "build_id": build_id_var.get(),
    }
    # Attach context vars if not provided explicitly
    if "source" not in fields:
        payload["source"] = source_var.get()

    payload.update(fields)

    try:
        print(json.dumps(payload, separators=(",", ":"), default=str))
    except (TypeError, ValueError):
        # Unserialisable field values must not abort a build
        print(json.dumps({"ts": now, "level": "ERROR", "event": "log_encode_failed", "original": event}))
