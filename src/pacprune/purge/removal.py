"""Best-effort file removal that reports instead of raising."""

from __future__ import annotations

import logging
import os

from pacprune.constants.purge import ACTION_FAILED, ACTION_REMOVED
from pacprune.model import PurgeOutcome

logger = logging.getLogger(__name__)


def remove_file(path: str | os.PathLike[str], reason: str) -> PurgeOutcome:
    """Remove one file, returning a ``removed`` or ``failed`` outcome."""
    path_str = str(path)
    try:
        os.remove(path_str)
    except OSError as exc:
        logger.warning("Failed to remove %s: %s", path_str, exc)
        return PurgeOutcome(path=path_str, action=ACTION_FAILED, reason=str(exc))

    logger.info("Removed %s: %s", path_str, reason)
    return PurgeOutcome(path=path_str, action=ACTION_REMOVED, reason=reason)


def listing_failure(path: str | os.PathLike[str] | None, exc: OSError) -> PurgeOutcome:
    """Report a directory that could not be listed."""
    path_str = str(path if path is not None else exc.filename)
    logger.warning("Cannot list %s: %s", path_str, exc)
    return PurgeOutcome(path=path_str, action=ACTION_FAILED, reason=str(exc))
