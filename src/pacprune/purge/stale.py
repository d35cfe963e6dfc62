"""Time-based sweep: evict files nobody has read for a while.

Access time is the staleness signal, so a package still being served to
clients survives no matter how old it is. Only regular files under
``<cache_dir>/pkgs`` are considered.
"""

from __future__ import annotations

import logging
import os
import stat
import threading
import time
from datetime import datetime, timezone
from pathlib import Path

from pacprune.constants.purge import ACTION_FAILED, PKGS_DIRNAME
from pacprune.model import PurgeOutcome
from pacprune.purge.removal import listing_failure, remove_file

logger = logging.getLogger(__name__)


def purge_stale_files(
    cache_dir: Path,
    max_idle_seconds: int,
    *,
    now: float | None = None,
    cancel: threading.Event | None = None,
) -> list[PurgeOutcome]:
    """Remove files under ``cache_dir/pkgs`` last accessed before ``now - max_idle_seconds``.

    A file whose access time equals the cutoff is kept. A missing ``pkgs``
    directory means nothing is cached yet. Other listing and removal errors
    are logged and recorded; the walk always continues with the remaining
    entries. Setting *cancel* stops the walk after the current file.
    """
    cutoff = (time.time() if now is None else now) - max_idle_seconds
    pkgs_dir = Path(cache_dir) / PKGS_DIRNAME
    outcomes: list[PurgeOutcome] = []

    def _on_walk_error(exc: OSError) -> None:
        if isinstance(exc, FileNotFoundError):
            logger.debug("Nothing cached under %s", exc.filename)
            return
        outcomes.append(listing_failure(exc.filename, exc))

    logger.debug("Stale sweep of %s, cutoff %s", pkgs_dir, _format_timestamp(cutoff))
    for dirpath, dirnames, filenames in os.walk(pkgs_dir, onerror=_on_walk_error):
        dirnames.sort()
        for filename in sorted(filenames):
            if cancel is not None and cancel.is_set():
                logger.info("Stale sweep cancelled; %d outcome(s) recorded", len(outcomes))
                return outcomes

            path = os.path.join(dirpath, filename)
            try:
                info = os.lstat(path)
            except FileNotFoundError:
                continue
            except OSError as exc:
                logger.warning("Cannot stat %s: %s", path, exc)
                outcomes.append(PurgeOutcome(path=path, action=ACTION_FAILED, reason=str(exc)))
                continue

            if not stat.S_ISREG(info.st_mode) or info.st_atime >= cutoff:
                continue

            reason = f"access time {_format_timestamp(info.st_atime)} is too old"
            outcomes.append(remove_file(path, reason))

    return outcomes


def _format_timestamp(value: float) -> str:
    return datetime.fromtimestamp(value, tz=timezone.utc).isoformat(timespec="seconds")
