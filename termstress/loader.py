from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any, Optional

from .catalog import Catalog
from .types import DelayPolicy


class CatalogValidationError(ValueError):
    pass


def load_catalog(path: str) -> Catalog:
    p = Path(path)
    data = json.loads(p.read_text(encoding="utf-8"))
    return parse_catalog(data, default_name=p.stem)


def parse_catalog(data: dict[str, Any], default_name: str = "catalog") -> Catalog:
    """Build a literal catalog from its JSON form.

    Messages keep their textual escape tokens; they are decoded when written.
    """
    if not isinstance(data, dict):
        raise CatalogValidationError("Catalog JSON must be an object.")
    name = str(data.get("name") or default_name)
    raw_messages = data.get("messages")
    if not isinstance(raw_messages, list) or not raw_messages:
        raise CatalogValidationError("'messages' must be a non-empty list.")

    texts: list[str] = []
    for i, m in enumerate(raw_messages):
        if isinstance(m, str):
            texts.append(m)
            continue
        if not isinstance(m, dict):
            raise CatalogValidationError(f"Message at index {i} must be a string or an object.")
        text = m.get("text")
        if not isinstance(text, str):
            raise CatalogValidationError(f"Message at index {i} missing valid 'text'.")
        repeat = _parse_int_field(i, "repeat", m.get("repeat"), default=1, minimum=1)
        texts.append(text * repeat)

    delay = _parse_delay(data.get("delay_ms"))
    return Catalog.literal(name, texts, delay=delay)


def _parse_delay(raw: Any) -> Optional[DelayPolicy]:
    if raw is None:
        return None
    if isinstance(raw, dict):
        lo = _parse_number("delay_ms.min", raw.get("min"))
        hi = _parse_number("delay_ms.max", raw.get("max"))
    else:
        lo = hi = _parse_number("delay_ms", raw)
    try:
        return DelayPolicy(min_ms=lo, max_ms=hi)
    except ValueError as e:
        raise CatalogValidationError(f"Invalid 'delay_ms': {e}") from e


def _parse_number(field_name: str, raw: Any) -> float:
    if raw is None or isinstance(raw, bool):
        raise CatalogValidationError(f"'{field_name}' must be a number.")
    try:
        value = float(raw)
    except (TypeError, ValueError) as e:
        raise CatalogValidationError(f"'{field_name}' must be a number.") from e
    if not math.isfinite(value):
        raise CatalogValidationError(f"'{field_name}' must be finite.")
    return value


def _parse_int_field(
    index: int,
    field_name: str,
    raw: Any,
    *,
    default: int,
    minimum: int,
) -> int:
    if raw is None:
        return default
    if isinstance(raw, bool):
        raise CatalogValidationError(f"Message at index {index}: '{field_name}' must be an integer.")
    try:
        value = int(raw)
    except (TypeError, ValueError) as e:
        raise CatalogValidationError(f"Message at index {index}: '{field_name}' must be an integer.") from e
    if value < minimum:
        raise CatalogValidationError(
            f"Message at index {index}: '{field_name}' must be >= {minimum}."
        )
    return value
