from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from .types import DelayPolicy

MessageFactory = Callable[[], str]


def _constant(text: str) -> MessageFactory:
    return lambda: text


@dataclass(frozen=True)
class Catalog:
    """Ordered, immutable list of message factories, read round-robin."""

    name: str
    entries: tuple[MessageFactory, ...]
    # Delay the catalog was written for; callers may override it.
    delay: Optional[DelayPolicy] = None

    def __post_init__(self) -> None:
        if not self.entries:
            raise ValueError(f"Catalog '{self.name}' must contain at least one message.")
        if not isinstance(self.entries, tuple):
            object.__setattr__(self, "entries", tuple(self.entries))

    def __len__(self) -> int:
        return len(self.entries)

    def entry_at(self, counter: int) -> MessageFactory:
        return self.entries[counter % len(self.entries)]

    @classmethod
    def literal(
        cls, name: str, texts: Iterable[str], delay: Optional[DelayPolicy] = None
    ) -> Catalog:
        return cls(name=name, entries=tuple(_constant(t) for t in texts), delay=delay)
