from __future__ import annotations

import json
import random
from pathlib import Path

FRAGMENTS = [
    "\\x1b[31m", "\\x1b[1m", "\\x1b[7m", "\\x1b[?25l", "\\x1b[2K", "\\r", "\\t",
    "\\u200B", "\\u202E", "\\u2800", "\\x1b[38;5;", "\\x1b[10D", "\\x1b[0m",
]
WORDS = ["glitch", "terminal", "cursor", "escape", "unicode", "buffer", "reset", "stress"]

def main() -> None:
    rng = random.Random(42)
    messages = []
    for _ in range(40):
        parts = [rng.choice(WORDS if rng.random() < 0.5 else FRAGMENTS) for _ in range(rng.randint(3, 8))]
        messages.append(" ".join(parts))
    catalog = {"name": "generated", "delay_ms": {"min": 200, "max": 800}, "messages": messages}
    Path("examples/data").mkdir(parents=True, exist_ok=True)
    Path("examples/data/generated.json").write_text(json.dumps(catalog, indent=2), encoding="utf-8")
    print("Wrote examples/data/generated.json")

if __name__ == "__main__":
    main()
