"""Config data model and retention policy variants."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pacprune.constants.config import (
    DEFAULT_CACHE_DIR,
    DEFAULT_PORT,
    DEFAULT_PURGE_FILES_AFTER,
    DEFAULT_PURGE_KEEP_AT_MOST,
    DEFAULT_PURGE_STRATEGY,
    PURGE_STRATEGY_COUNT,
    PURGE_STRATEGY_TIME,
    PurgeStrategyName,
)
from pacprune.constants.purge import PKGS_DIRNAME


@dataclass(frozen=True)
class RepoConfig:
    """An upstream repository whose files live under ``pkgs/<name>``."""

    name: str
    urls: tuple[str, ...] = ()


@dataclass(frozen=True)
class NoPurge:
    """Never remove cached files."""


@dataclass(frozen=True)
class TimePurge:
    """Remove files whose last access is older than ``max_idle_seconds``."""

    max_idle_seconds: int


@dataclass(frozen=True)
class CountPurge:
    """Keep at most ``keep_at_most`` versions of each package."""

    keep_at_most: int


RetentionPolicy = NoPurge | TimePurge | CountPurge


@dataclass(frozen=True)
class PurgeConfig:
    """Resolved, read-only cache configuration snapshot."""

    cache_dir: Path = Path(DEFAULT_CACHE_DIR)
    port: int = DEFAULT_PORT
    repos: tuple[RepoConfig, ...] = ()
    purge_strategy: PurgeStrategyName = DEFAULT_PURGE_STRATEGY
    purge_files_after: int = DEFAULT_PURGE_FILES_AFTER
    purge_keep_at_most: int = DEFAULT_PURGE_KEEP_AT_MOST

    @property
    def policy(self) -> RetentionPolicy:
        """The active retention policy, carrying only its own threshold."""
        if self.purge_strategy == PURGE_STRATEGY_TIME:
            return TimePurge(max_idle_seconds=self.purge_files_after)
        if self.purge_strategy == PURGE_STRATEGY_COUNT:
            return CountPurge(keep_at_most=self.purge_keep_at_most)
        return NoPurge()

    @property
    def pkgs_dir(self) -> Path:
        return self.cache_dir / PKGS_DIRNAME

    @property
    def repo_names(self) -> tuple[str, ...]:
        return tuple(sorted(repo.name for repo in self.repos))

    def repo_dir(self, repo_name: str) -> Path:
        """Return the cache subdirectory for one repository."""
        return self.pkgs_dir / repo_name
