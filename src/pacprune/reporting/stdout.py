"""Stdout reporter for sweep results."""

from __future__ import annotations

import json

from pacprune.constants.purge import VALID_ACTIONS
from pacprune.constants.reporting import ACTION_COLORS, ANSI_RESET, MAX_LISTED_FAILURES, SUMMARY_TITLE
from pacprune.model import SweepReport


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


class SweepReporter:
    """Formats a sweep report as a short summary block."""

    def __init__(self, report: SweepReport, *, color: bool = True, verbose: bool = False) -> None:
        self._report = report
        self._color = color
        self._verbose = verbose

    def render(self) -> str:
        """Render the summary as a single string."""
        r = self._report
        counts = r.counts
        sep = "  " + "─" * 38
        lines = [
            "",
            f"  {SUMMARY_TITLE}",
            sep,
            f"  Strategy    {r.strategy}",
        ]
        for action in VALID_ACTIONS:
            label = f"{action.capitalize():<11} {counts[action]}"
            if self._color and counts[action]:
                label = _colorize(label, ACTION_COLORS[action])
            lines.append(f"  {label}")

        failed = r.failed
        if failed:
            lines.append("")
            lines.append("  Failures")
            for outcome in failed[:MAX_LISTED_FAILURES]:
                lines.append(f"    {outcome.path}: {outcome.reason}")
            if len(failed) > MAX_LISTED_FAILURES:
                lines.append(f"    ... and {len(failed) - MAX_LISTED_FAILURES} more")

        if self._verbose and r.removed:
            lines.append("")
            lines.append("  Removed")
            lines.extend(f"    {outcome.path}" for outcome in r.removed)

        return "\n".join(lines)

    def render_json(self) -> str:
        """Render the full report as indented JSON."""
        return json.dumps(self._report.to_dict(), indent=2, sort_keys=True)
