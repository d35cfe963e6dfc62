"""Configuration defaults, filenames, and purge strategy names."""

from __future__ import annotations

from typing import Literal

CONFIG_FILENAME: str = "pacprune.yaml"

DEFAULT_CACHE_DIR: str = "/var/cache/pacoloco"
DEFAULT_PORT: int = 9129

PurgeStrategyName = Literal["none", "time", "count"]

PURGE_STRATEGY_NONE: PurgeStrategyName = "none"
PURGE_STRATEGY_TIME: PurgeStrategyName = "time"
PURGE_STRATEGY_COUNT: PurgeStrategyName = "count"
VALID_PURGE_STRATEGIES: frozenset[str] = frozenset({PURGE_STRATEGY_NONE, PURGE_STRATEGY_TIME, PURGE_STRATEGY_COUNT})

DEFAULT_PURGE_STRATEGY: PurgeStrategyName = PURGE_STRATEGY_TIME
# Files not accessed for 30 days are stale.
DEFAULT_PURGE_FILES_AFTER: int = 3600 * 24 * 30
DEFAULT_PURGE_KEEP_AT_MOST: int = 3

MIN_PURGE_FILES_AFTER: int = 10 * 60
MIN_PURGE_KEEP_AT_MOST: int = 1
