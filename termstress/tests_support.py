"""Test helpers (kept in package so they ship with the code they fake)."""

from __future__ import annotations

from typing import Optional


class RecordingSleep:
    """Stand-in for time.sleep that records pauses and can simulate Ctrl+C."""

    def __init__(self, interrupt_after: Optional[int] = None) -> None:
        self.calls: list[float] = []
        self.interrupt_after = interrupt_after

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)
        if self.interrupt_after is not None and len(self.calls) >= self.interrupt_after:
            raise KeyboardInterrupt


def interrupting_message() -> str:
    raise KeyboardInterrupt


def failing_message() -> str:
    raise RuntimeError("boom")
