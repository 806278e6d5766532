from __future__ import annotations

import random
import sys
import time
import traceback as tb
from dataclasses import dataclass
from typing import Any, Callable, Optional, TextIO

from .ansi import BROKEN_RESET, COLOR_RESET, COLORS, ERROR_RESET, GRAY, RESET
from .catalog import Catalog
from .decode import decode_escapes
from .locales import Locale, get_locale
from .messages import BROKEN_CATALOG, color_message
from .types import BROKEN_DELAY, DelayPolicy, ExitReason, RunSummary
from .utils import make_event_log, now_iso

MODES = ("broken", "color")


@dataclass(frozen=True)
class StreamConfig:
    mode: str = "broken"  # "broken" or "color"
    delay: DelayPolicy = BROKEN_DELAY
    locale: str = "en"
    # None streams until interrupted
    max_messages: Optional[int] = None
    seed: Optional[int] = None
    show_banner: bool = True
    # Also log every written message and failure tracebacks
    verbose: bool = False
    # Set to False to disable JSON-line logs on stderr
    emit_logs: bool = True


class Streamer:
    """Writes one message per iteration to stdout until interrupted.

    Broken mode cycles through a catalog, decoding each entry's escape
    tokens; color mode paints a fresh random string every time. On
    KeyboardInterrupt the terminal is reset and a farewell is printed
    (exit code 0); any other exception resets the terminal, reports the
    error on stderr and yields exit code 1.
    """

    def __init__(
        self,
        config: StreamConfig,
        catalog: Optional[Catalog] = None,
        *,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ) -> None:
        if config.mode not in MODES:
            raise ValueError(f"StreamConfig.mode must be one of {', '.join(MODES)}.")
        if config.max_messages is not None and config.max_messages < 0:
            raise ValueError("StreamConfig.max_messages must be >= 0.")
        self.config = config
        self.locale: Locale = get_locale(config.locale)
        self.catalog = catalog if catalog is not None else BROKEN_CATALOG
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self.sleep = sleep if sleep is not None else time.sleep
        self.rng = random.Random(config.seed)
        self.counter = 0
        self.log = make_event_log(config.emit_logs, self.stderr)

    @property
    def reset_sequence(self) -> str:
        return BROKEN_RESET if self.config.mode == "broken" else COLOR_RESET

    @property
    def farewell(self) -> str:
        if self.config.mode == "broken":
            text = self.locale.broken_farewell
        else:
            text = self.locale.color_farewell
        return f"{COLORS['yellow']}{text}{RESET}\n"

    def banner(self) -> list[str]:
        if self.config.mode == "broken":
            return self.locale.broken_banner()
        d = self.config.delay
        return self.locale.color_banner(d.min_ms / 1000.0, d.max_ms / 1000.0)

    def next_message(self) -> str:
        if self.config.mode == "color":
            return color_message(self.rng)
        factory = self.catalog.entry_at(self.counter)
        return decode_escapes(factory())

    def _write(self, text: str) -> None:
        try:
            self.stdout.write(text)
        except UnicodeEncodeError:
            # Lone surrogates, or characters the stream encoding lacks
            encoding = getattr(self.stdout, "encoding", None) or "utf-8"
            self.stdout.write(text.encode(encoding, "replace").decode(encoding))
        self.stdout.flush()

    def _write_after_failure(self, text: str, stream: TextIO) -> None:
        try:
            if stream is self.stdout:
                self._write(text)
            else:
                print(text, file=stream)
        except (OSError, UnicodeEncodeError):
            # The failure may be this very stream (closed pipe).
            pass

    def _emit_one(self) -> None:
        message = self.next_message()
        if self.config.mode == "broken":
            self._write(f"{GRAY}[{self.counter + 1}] {RESET}\n")
        self._write(message)
        self._write("\n")
        self.counter += 1
        if self.config.verbose:
            self.log("message_written", index=self.counter, length=len(message))

    def _loop(self) -> None:
        limit = self.config.max_messages
        if self.config.show_banner:
            for line in self.banner():
                self._write(line + "\n")
        while limit is None or self.counter < limit:
            self._emit_one()
            if limit is not None and self.counter >= limit:
                break
            delay_ms = self.config.delay.sample_ms(self.rng)
            self.sleep(delay_ms / 1000.0)

    def run(self) -> RunSummary:
        started = now_iso()
        catalog_name = self.catalog.name if self.config.mode == "broken" else None
        error: Optional[BaseException] = None
        try:
            self.log(
                "run_start",
                mode=self.config.mode,
                catalog=catalog_name,
                locale=self.locale.code,
                min_delay_ms=self.config.delay.min_ms,
                max_delay_ms=self.config.delay.max_ms,
            )
            self._loop()
        except KeyboardInterrupt:
            reason, exit_code = ExitReason.INTERRUPTED, 0
            self._write(self.reset_sequence)
            self._write(self.farewell)
            self.log("run_interrupted", messages_written=self.counter)
        except Exception as e:
            reason, exit_code = ExitReason.FAILED, 1
            error = e
            self._write_after_failure(ERROR_RESET, self.stdout)
            red = COLORS["red"]
            self._write_after_failure(f"{red}{self.locale.error_label}{RESET} {e}", self.stderr)
            fields: dict[str, Any] = {
                "messages_written": self.counter,
                "error_type": type(e).__name__,
                "error_message": str(e),
            }
            if self.config.verbose:
                fields["error_traceback"] = "".join(tb.format_exception(type(e), e, e.__traceback__))
            self.log("run_failed", **fields)
        else:
            reason, exit_code = ExitReason.COMPLETED, 0
            self._write(self.reset_sequence)

        summary = RunSummary(
            mode=self.config.mode,
            catalog_name=catalog_name,
            messages_written=self.counter,
            exit_code=exit_code,
            reason=reason,
            started_at_iso=started,
            finished_at_iso=now_iso(),
            error_type=type(error).__name__ if error is not None else None,
            error_message=str(error) if error is not None else None,
        )
        self.log("run_finished", reason=reason.value, exit_code=exit_code, messages_written=self.counter)
        return summary
