from __future__ import annotations

import re

_UNICODE_ESCAPE = re.compile(r"\\u([0-9a-fA-F]{4})")

# Applied in order; backslash collapsing must stay last.
_SIMPLE_TOKENS = (
    ("\\n", "\n"),
    ("\\r", "\r"),
    ("\\t", "\t"),
    ("\\x1b", "\x1b"),
)


def decode_escapes(text: str) -> str:
    """Turn textual escape tokens (e.g. backslash + 'n') into real control characters.

    Handles \\n, \\r, \\t, \\x1b, 4-digit \\uXXXX escapes and doubled backslashes.
    Anything malformed passes through unchanged.
    """
    out = text
    for token, char in _SIMPLE_TOKENS:
        out = out.replace(token, char)
    out = _UNICODE_ESCAPE.sub(lambda m: chr(int(m.group(1), 16)), out)
    return out.replace("\\\\", "\\")
