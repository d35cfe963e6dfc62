"""Retention sweeps over the package cache."""

from __future__ import annotations

from pacprune.purge.retention import order_by_version, purge_all_old_files, purge_old_files
from pacprune.purge.runner import run_purge
from pacprune.purge.scheduler import PurgeScheduler
from pacprune.purge.stale import purge_stale_files

__all__ = [
    "PurgeScheduler",
    "order_by_version",
    "purge_all_old_files",
    "purge_old_files",
    "purge_stale_files",
    "run_purge",
]
