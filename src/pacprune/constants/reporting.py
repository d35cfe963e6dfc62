"""Constants for sweep summaries and stdout formatting."""

from __future__ import annotations

SUMMARY_TITLE: str = "Purge summary"
REPORT_SCHEMA_VERSION: str = "1.0.0"

ANSI_RED: str = "\033[31m"
ANSI_GREEN: str = "\033[32m"
ANSI_YELLOW: str = "\033[33m"
ANSI_RESET: str = "\033[0m"

ACTION_COLORS: dict[str, str] = {
    "removed": ANSI_GREEN,
    "skipped": ANSI_YELLOW,
    "failed": ANSI_RED,
}

MAX_LISTED_FAILURES: int = 20
