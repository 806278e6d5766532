from __future__ import annotations

import argparse
import dataclasses
import json
import signal
import sys
from typing import Any, Optional

from .catalog import Catalog
from .decode import decode_escapes
from .engine import StreamConfig, Streamer
from .loader import CatalogValidationError, load_catalog
from .locales import LOCALES
from .messages import BROKEN_CATALOG
from .types import BROKEN_DELAY, COLOR_DELAY, DelayPolicy, RunSummary


def _add_stream_options(p: argparse.ArgumentParser) -> None:
    p.add_argument("--locale", choices=sorted(LOCALES), default="en", help="Language of banners and notices")
    p.add_argument("--count", type=int, default=None, help="Stop after this many messages (default: run until Ctrl+C)")
    p.add_argument("--seed", type=int, default=None, help="Seed for colors, lengths and delays")
    p.add_argument("--no-banner", action="store_true", help="Do not print the startup banner")
    p.add_argument("--summary-json", default=None, help="Write run summary JSON to this path")
    p.add_argument("--verbose", action="store_true", help="Log every message and full tracebacks")
    p.add_argument("--quiet", action="store_true", help="Disable JSON-line logs on stderr")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="termstress", description="Terminal emulator stress generators.")
    sub = parser.add_subparsers(dest="cmd", required=True)

    brokenp = sub.add_parser("broken", help="Cycle through deliberately malformed output.")
    brokenp.add_argument("--delay-ms", type=float, default=BROKEN_DELAY.min_ms, help="Pause between messages")
    _add_stream_options(brokenp)

    colorp = sub.add_parser("color", help="Print random strings in random ANSI colors.")
    colorp.add_argument("--min-delay-ms", type=float, default=COLOR_DELAY.min_ms, help="Shortest pause")
    colorp.add_argument("--max-delay-ms", type=float, default=COLOR_DELAY.max_ms, help="Longest pause")
    _add_stream_options(colorp)

    runp = sub.add_parser("run", help="Cycle through a custom catalog JSON.")
    runp.add_argument("catalog", help="Path to catalog JSON file")
    runp.add_argument("--delay-ms", type=float, default=None, help="Override the catalog's pause")
    _add_stream_options(runp)

    listp = sub.add_parser("list", help="Show catalog entries as escaped text.")
    listp.add_argument("--catalog", default=None, help="Path to catalog JSON file (default: built-in)")
    return parser


def _stream(args: argparse.Namespace, mode: str, delay: DelayPolicy, catalog: Optional[Catalog]) -> int:
    if args.count is not None and args.count < 0:
        print("Error: --count must be >= 0", file=sys.stderr)
        return 2

    cfg = StreamConfig(
        mode=mode,
        delay=delay,
        locale=args.locale,
        max_messages=args.count,
        seed=args.seed,
        show_banner=not bool(args.no_banner),
        verbose=bool(args.verbose),
        emit_logs=not bool(args.quiet),
    )
    old_handler = signal.signal(signal.SIGTERM, signal.default_int_handler)
    try:
        summary = Streamer(cfg, catalog).run()
    finally:
        signal.signal(signal.SIGTERM, old_handler)

    if args.summary_json:
        _write_summary(summary, args.summary_json)
    return summary.exit_code


def _write_summary(summary: RunSummary, path: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(dataclasses.asdict(summary), f, ensure_ascii=False, indent=2)


def _list(path: Optional[str]) -> int:
    catalog = load_catalog(path) if path else BROKEN_CATALOG
    print(f"Catalog: {catalog.name} ({len(catalog)} messages)")
    for i, factory in enumerate(catalog.entries):
        print(f"{i:3d} {ascii(decode_escapes(factory()))}")
    return 0


def main(argv: Any = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        if args.cmd == "list":
            return _list(args.catalog)
        if args.cmd == "broken":
            return _stream(args, "broken", DelayPolicy.fixed(args.delay_ms), None)
        if args.cmd == "color":
            return _stream(args, "color", DelayPolicy(args.min_delay_ms, args.max_delay_ms), None)
        if args.cmd == "run":
            catalog = load_catalog(args.catalog)
            if args.delay_ms is not None:
                delay = DelayPolicy.fixed(args.delay_ms)
            else:
                delay = catalog.delay or BROKEN_DELAY
            return _stream(args, "broken", delay, catalog)
    except (OSError, json.JSONDecodeError, CatalogValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except ValueError as e:
        # Invalid delays from the command line
        print(f"Error: {e}", file=sys.stderr)
        return 2

    return 0
