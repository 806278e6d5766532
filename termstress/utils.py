from __future__ import annotations

import json
import sys
from datetime import datetime, timezone
from typing import Any, Callable, Optional, TextIO

EventLog = Callable[..., None]


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def make_event_log(enabled: bool, stream: Optional[TextIO] = None) -> EventLog:
    """Structured logs as JSON lines; a no-op when disabled."""

    def log(event: str, **fields: Any) -> None:
        if not enabled:
            return
        payload = {"ts": now_iso(), "event": event, **fields}
        print(json.dumps(payload, ensure_ascii=False), file=stream if stream is not None else sys.stderr)

    return log
