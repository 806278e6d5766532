"""ANSI color codes and the terminal-reset sequences written on exit."""

from __future__ import annotations

import random

ESC = "\x1b"

RESET = f"{ESC}[0m"
GRAY = f"{ESC}[90m"
SHOW_CURSOR = f"{ESC}[?25h"
LEAVE_ALT_SCREEN = f"{ESC}[?1049l"

COLORS: dict[str, str] = {
    "reset": RESET,
    "red": f"{ESC}[31m",
    "green": f"{ESC}[32m",
    "yellow": f"{ESC}[33m",
    "blue": f"{ESC}[34m",
    "magenta": f"{ESC}[35m",
    "cyan": f"{ESC}[36m",
    "white": f"{ESC}[37m",
    "bright_red": f"{ESC}[91m",
    "bright_green": f"{ESC}[92m",
    "bright_yellow": f"{ESC}[93m",
    "bright_blue": f"{ESC}[94m",
    "bright_magenta": f"{ESC}[95m",
    "bright_cyan": f"{ESC}[96m",
}

COLOR_NAMES: tuple[str, ...] = tuple(k for k in COLORS if k != "reset")

# Broken output may leave any attribute set, hide the cursor or switch buffers.
BROKEN_RESET = f"{RESET}{SHOW_CURSOR}{LEAVE_ALT_SCREEN}\n"
COLOR_RESET = f"{RESET}\n"
ERROR_RESET = f"{RESET}{SHOW_CURSOR}\n"


def random_color(rng: random.Random) -> str:
    return COLORS[rng.choice(COLOR_NAMES)]


def paint(text: str, code: str) -> str:
    return f"{code}{text}{RESET}"
