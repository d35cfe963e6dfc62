"""Cache layout and sweep cadence constants."""

from __future__ import annotations

PKGS_DIRNAME: str = "pkgs"

PURGE_INTERVAL_SECONDS: float = 24 * 60 * 60

PACKAGE_MARKER: str = ".pkg.tar"
SIGNATURE_SUFFIX: str = ".sig"

ACTION_REMOVED: str = "removed"
ACTION_FAILED: str = "failed"
ACTION_SKIPPED: str = "skipped"
VALID_ACTIONS: tuple[str, ...] = (ACTION_REMOVED, ACTION_FAILED, ACTION_SKIPPED)
