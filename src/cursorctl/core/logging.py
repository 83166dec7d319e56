from __future__ import annotations

import inspect
import json
import sys
from typing import TYPE_CHECKING

from .clock import utc_now_iso

if TYPE_CHECKING:
    from .context import RunContext

# Field names whose values never reach a log line (registry credentials).
REDACTED_FIELDS = frozenset({"token", "password", "secret"})
REDACTED = "***"


def _caller() -> tuple[str, int]:
    frame = inspect.currentframe()
    caller = frame.f_back.f_back if frame and frame.f_back else None
    if caller is None:
        return "<unknown>", 0
    return caller.f_code.co_filename, caller.f_lineno


def _redact(fields: dict[str, object]) -> dict[str, object]:
    return {key: (REDACTED if key.lower() in REDACTED_FIELDS else value) for key, value in fields.items()}


def log_event(ctx: RunContext, level: str, component: str, action: str, **fields: object) -> None:
    filename, lineno = _caller()
    safe_fields = _redact(fields)
    if ctx.log_json:
        payload = {
            "ts": utc_now_iso(),
            "level": level,
            "run_id": ctx.run_id,
            "component": component,
            "action": action,
            "file": filename,
            "line": lineno,
            **safe_fields,
        }
        sys.stderr.write(json.dumps(payload, sort_keys=True, default=str) + "\n")
        return
    head = f"ts={utc_now_iso()} level={level} run_id={ctx.run_id} component={component} action={action}"
    extras = " ".join(f"{key}={value}" for key, value in sorted(safe_fields.items()))
    sys.stderr.write((head if not extras else f"{head} {extras}") + "\n")
