"""Run the sweep that matches the active retention policy."""

from __future__ import annotations

import logging
import threading

from pacprune.config.model import CountPurge, PurgeConfig, TimePurge
from pacprune.model import PurgeOutcome, SweepReport
from pacprune.purge.retention import purge_all_old_files
from pacprune.purge.stale import purge_stale_files

logger = logging.getLogger(__name__)


def run_purge(config: PurgeConfig, *, cancel: threading.Event | None = None) -> SweepReport:
    """Run one sweep for ``config.policy`` and collect its outcomes."""
    policy = config.policy
    outcomes: list[PurgeOutcome] = []

    if isinstance(policy, TimePurge):
        outcomes = purge_stale_files(config.cache_dir, policy.max_idle_seconds, cancel=cancel)
    elif isinstance(policy, CountPurge):
        outcomes = purge_all_old_files(config)
    else:
        logger.debug("Purge strategy is %r, nothing to do", config.purge_strategy)

    report = SweepReport(strategy=config.purge_strategy, outcomes=tuple(outcomes))
    counts = report.counts
    logger.info(
        "Purge (%s) finished: %d removed, %d skipped, %d failed",
        report.strategy,
        counts["removed"],
        counts["skipped"],
        counts["failed"],
    )
    return report
