from __future__ import annotations

import math
import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ExitReason(str, Enum):
    INTERRUPTED = "INTERRUPTED"
    FAILED = "FAILED"
    COMPLETED = "COMPLETED"


@dataclass(frozen=True)
class DelayPolicy:
    """Pause between two messages, in milliseconds (uniform in [min_ms, max_ms])."""

    min_ms: float
    max_ms: float

    def __post_init__(self) -> None:
        if isinstance(self.min_ms, bool) or isinstance(self.max_ms, bool):
            raise ValueError("Delays must be numbers.")
        if not (math.isfinite(self.min_ms) and math.isfinite(self.max_ms)):
            raise ValueError(f"Delays must be finite (got {self.min_ms}, {self.max_ms}).")
        if self.min_ms < 0:
            raise ValueError(f"Minimum delay must be >= 0 (got {self.min_ms}).")
        if self.max_ms < self.min_ms:
            raise ValueError(
                f"Maximum delay {self.max_ms} is smaller than minimum delay {self.min_ms}."
            )

    @classmethod
    def fixed(cls, ms: float) -> DelayPolicy:
        return cls(min_ms=ms, max_ms=ms)

    @property
    def is_fixed(self) -> bool:
        return self.min_ms == self.max_ms

    def sample_ms(self, rng: random.Random) -> float:
        if self.is_fixed:
            return float(self.min_ms)
        value = rng.uniform(self.min_ms, self.max_ms)
        # uniform() may round past either bound
        return min(float(self.max_ms), max(float(self.min_ms), value))


BROKEN_DELAY = DelayPolicy.fixed(2000)
COLOR_DELAY = DelayPolicy(min_ms=500, max_ms=2000)


@dataclass(frozen=True)
class RunSummary:
    mode: str
    catalog_name: Optional[str]
    messages_written: int
    exit_code: int
    reason: ExitReason
    started_at_iso: str
    finished_at_iso: str
    error_type: Optional[str] = None
    error_message: Optional[str] = None
