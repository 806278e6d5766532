"""Built-in message generators.

Broken-output entries are written with *textual* escape tokens (a backslash
followed by ``n``, ``x1b``, ``u200B`` ...) and only become real control
characters once they go through :func:`termstress.decode.decode_escapes`.
"""

from __future__ import annotations

import random
import string

from .ansi import paint, random_color
from .catalog import Catalog
from .types import BROKEN_DELAY

BROKEN_CATALOG = Catalog(
    name="broken",
    delay=BROKEN_DELAY,
    entries=(
        # Control characters
        lambda: "Message with\\nmultiple\\nnewlines\\n\\n",
        lambda: "Text with\\rcarriage return\\rthat overwrites",
        lambda: "Mix\\n\\r\\nof\\rcontrols",
        lambda: "TAB\\there\\tand\\there",
        # Unclosed ANSI sequences
        lambda: "\\x1b[31mRed not reset",
        lambda: "\\x1b[1mBold\\x1b[32m then green",
        lambda: "\\x1b[44mBlue background\\x1b[5mBlinking",
        lambda: "\\x1b[7mInverted never reset",
        # Problematic Unicode
        lambda: "Unicode characters: \\u0000\\u0001\\u0002\\u0003",
        lambda: "Extreme emoji: \U0001F680\U0001F525\U0001F4A5" + "\\u200B\\u200C\\u200D",
        lambda: "Bidi: Hello \\u202Eworld\\u202C",
        lambda: "Unicode control characters: \\u001B\\u009B",
        # Terminal specials
        lambda: "\\x1b[2J\\x1b[HClear screen",
        lambda: "\\x1b[sSave cursor\\x1b[uRestore cursor",
        lambda: "\\x1b[?25lInvisible cursor\\x1b[?25h",
        # Extreme lengths and cursor jumps
        lambda: "A" * 200 + "\\n" + "B" * 150,
        lambda: "\\x1b[1000CExtreme right shift",
        lambda: "\\x1b[50AUpward shift",
        # Mixed combinations
        lambda: "\\x1b[31mRed\\n\\x1b[32mGreen\\r\\x1b[33mYellow\\x1b[0m",
        lambda: "\\x1b[1;4;7mAll active" + "\\u202E" + "inverted text",
        lambda: "\\x1b]0;Window title\\x07Bell + title",
        # Encoding issues
        lambda: bytes([0xFF, 0xFE, 0xFD, 0xFC]).decode("latin-1"),
        lambda: "Half surrogate: \\uD800" + "text",
        # Incomplete escape sequences
        lambda: "\\x1b[",
        lambda: "\\x1b[38;2;",
        lambda: "\\x1b[#",
        # Invisible characters
        lambda: "Text\\u200Bwith\\u200Czero\\u200Dwidth",
        lambda: "\\u2800Braille\\u2800pattern\\u2800",
        lambda: "\\u2066\\u2069Isolation",
        # Partial resets and screen buffers
        lambda: "\\x1b[31m\\x1b[42mRed on green\\x1b[0mReset\\x1b[33mYellow remaining",
        lambda: "\\x1b[?1049hAlt buffer\\x1b[?1049l",
    ),
)

CHARSET = string.ascii_uppercase + string.ascii_lowercase + string.digits + "!@#$%^&*()_+-=[]{}|;:,.<>?"

MIN_LENGTH = 10
MAX_LENGTH = 50


def random_length(rng: random.Random) -> int:
    """Length in [MIN_LENGTH, MAX_LENGTH), floor of a uniform draw."""
    return min(MAX_LENGTH - 1, int(rng.uniform(MIN_LENGTH, MAX_LENGTH)))


def random_string(rng: random.Random, length: int) -> str:
    if length < 0:
        raise ValueError("length must be >= 0")
    return "".join(rng.choice(CHARSET) for _ in range(length))


def color_message(rng: random.Random) -> str:
    text = random_string(rng, random_length(rng))
    return paint(text, random_color(rng))
