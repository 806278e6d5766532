"""termstress: endless malformed and colored output for stress-testing terminal emulators."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .catalog import Catalog
from .decode import decode_escapes
from .engine import StreamConfig, Streamer
from .types import DelayPolicy, ExitReason, RunSummary

try:
    __version__ = version("termstress")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = [
    "Catalog",
    "DelayPolicy",
    "ExitReason",
    "RunSummary",
    "StreamConfig",
    "Streamer",
    "decode_escapes",
    "__version__",
]
