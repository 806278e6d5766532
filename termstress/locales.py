"""Localized banner and notice text. Behavior is identical across locales."""

from __future__ import annotations

from dataclasses import dataclass

from .ansi import COLORS, RESET

_CYAN = COLORS["cyan"]
_YELLOW = COLORS["yellow"]


@dataclass(frozen=True)
class Locale:
    code: str
    broken_title: str
    broken_warning: str
    broken_effects: tuple[str, ...]
    broken_hint: str
    broken_farewell: str
    color_started: str
    # Formatted with min_s / max_s (seconds)
    color_delay_line: str
    color_farewell: str
    error_label: str

    def broken_banner(self) -> list[str]:
        lines = [f"{_CYAN}=== {self.broken_title} ==={RESET}", f"{_YELLOW}{self.broken_warning}"]
        lines.extend(f"- {effect}" for effect in self.broken_effects)
        lines.append(f"{self.broken_hint}{RESET}\n")
        return lines

    def color_banner(self, min_s: float, max_s: float) -> list[str]:
        delay = self.color_delay_line.format(min_s=_fmt_seconds(min_s, self.code), max_s=_fmt_seconds(max_s, self.code))
        return [f"{_CYAN}{self.color_started}{RESET}", f"{_CYAN}{delay}{RESET}\n"]


def _fmt_seconds(value: float, code: str) -> str:
    text = f"{value:g}"
    return text.replace(".", ",") if code == "it" else text


LOCALES: dict[str, Locale] = {
    "en": Locale(
        code="en",
        broken_title="PROBLEMATIC OUTPUT GENERATOR",
        broken_warning="This script deliberately generates output that may:",
        broken_effects=(
            "Break terminal formatting",
            "Leave unclosed ANSI sequences",
            "Include control characters and problematic Unicode",
            "Create visual artifacts",
        ),
        broken_hint="Press Ctrl+C to terminate and reset the terminal",
        broken_farewell="Script terminated. Terminal reset.",
        color_started="Script started. Press Ctrl+C to terminate.",
        color_delay_line="Printing random messages every {min_s}-{max_s} seconds...",
        color_farewell="Script terminated by user. Exiting...",
        error_label="Error:",
    ),
    "it": Locale(
        code="it",
        broken_title="GENERATORE DI OUTPUT PROBLEMATICO",
        broken_warning="Questo script genera deliberatamente output che può:",
        broken_effects=(
            "Rompere la formattazione del terminale",
            "Lasciare sequenze ANSI non chiuse",
            "Includere caratteri di controllo e Unicode problematico",
            "Creare artefatti visivi",
        ),
        broken_hint="Premi Ctrl+C per terminare e ripristinare il terminale",
        broken_farewell="Script terminato. Terminale ripristinato.",
        color_started="Script avviato. Premi Ctrl+C per terminare.",
        color_delay_line="Stampa di messaggi casuali ogni {min_s}-{max_s} secondi...",
        color_farewell="Script terminato dall'utente. Uscita...",
        error_label="Errore:",
    ),
}


def get_locale(code: str) -> Locale:
    try:
        return LOCALES[code]
    except KeyError:
        known = ", ".join(sorted(LOCALES))
        raise ValueError(f"Unknown locale '{code}'. Expected one of: {known}.") from None
