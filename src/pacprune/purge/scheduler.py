"""Background cadence for the time-based stale sweep."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from pacprune.config.model import PurgeConfig, TimePurge
from pacprune.constants.purge import PURGE_INTERVAL_SECONDS
from pacprune.model import SweepReport
from pacprune.purge.runner import run_purge

logger = logging.getLogger(__name__)


class PurgeScheduler:
    """Runs the stale sweep at startup and then once per interval.

    The config is fetched from *config_source* on every tick, so the sweep
    only runs while the active policy is time-based. Count-based retention is
    not scheduled; the downloader triggers it per file.
    """

    def __init__(
        self,
        config_source: Callable[[], PurgeConfig],
        *,
        interval_seconds: float = PURGE_INTERVAL_SECONDS,
    ) -> None:
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self._config_source = config_source
        self._interval_seconds = interval_seconds
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self._start_lock = threading.Lock()
        self.last_report: SweepReport | None = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start the background thread (no-op if already running)."""
        with self._start_lock:
            if self.running:
                return
            self._stop_event.clear()
            self._thread = threading.Thread(target=self._run_loop, name="pacprune-scheduler", daemon=True)
            self._thread.start()

    def stop(self, timeout: float | None = None) -> None:
        """Ask the loop to exit and wait for it.

        A sweep in progress stops after its current file operation.
        """
        self._stop_event.set()
        thread = self._thread
        if thread is not None:
            thread.join(timeout)

    def wait(self, timeout: float | None = None) -> bool:
        """Block until :meth:`stop` is called; returns True once stopped."""
        return self._stop_event.wait(timeout)

    def run_once(self) -> SweepReport | None:
        """Run a single tick synchronously."""
        config = self._config_source()
        if not isinstance(config.policy, TimePurge):
            logger.debug("Skipping scheduled sweep, purge strategy is %r", config.purge_strategy)
            return None
        report = run_purge(config, cancel=self._stop_event)
        self.last_report = report
        return report

    def _run_loop(self) -> None:
        logger.info("Purge scheduler started, interval %ss", self._interval_seconds)
        while not self._stop_event.is_set():
            try:
                self.run_once()
            except Exception:
                logger.exception("Scheduled purge failed")
            if self._stop_event.wait(self._interval_seconds):
                break
        logger.info("Purge scheduler stopped")
