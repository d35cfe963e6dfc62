"""Records derived from the cache tree and the results of a sweep."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pacprune.constants.purge import ACTION_FAILED, ACTION_REMOVED, ACTION_SKIPPED, VALID_ACTIONS
from pacprune.constants.reporting import REPORT_SCHEMA_VERSION
from pacprune.packages.version import PackageVersion


@dataclass(frozen=True)
class CachedPackageRecord:
    """A cached package file split into its naming components."""

    full_path: Path
    directory: Path
    name: str
    version: PackageVersion
    arch: str
    extension: str

    def __hash__(self) -> int:
        # PackageVersion is unhashable; equal records always share a path.
        return hash(self.full_path)


@dataclass(frozen=True)
class PurgeOutcome:
    """What happened to one path during a sweep."""

    path: str
    action: str
    reason: str = ""

    def __post_init__(self) -> None:
        if self.action not in VALID_ACTIONS:
            raise ValueError(f"Unknown purge action: {self.action!r}")

    @property
    def ok(self) -> bool:
        return self.action != ACTION_FAILED

    def to_dict(self) -> dict[str, str]:
        return {"path": self.path, "action": self.action, "reason": self.reason}


@dataclass(frozen=True)
class SweepReport:
    """Outcomes of one sweep run under a single policy."""

    strategy: str
    outcomes: tuple[PurgeOutcome, ...] = field(default_factory=tuple)

    @property
    def counts(self) -> dict[str, int]:
        counter = Counter(outcome.action for outcome in self.outcomes)
        return {action: counter.get(action, 0) for action in VALID_ACTIONS}

    @property
    def removed(self) -> tuple[PurgeOutcome, ...]:
        return tuple(o for o in self.outcomes if o.action == ACTION_REMOVED)

    @property
    def failed(self) -> tuple[PurgeOutcome, ...]:
        return tuple(o for o in self.outcomes if o.action == ACTION_FAILED)

    @property
    def skipped(self) -> tuple[PurgeOutcome, ...]:
        return tuple(o for o in self.outcomes if o.action == ACTION_SKIPPED)

    @property
    def has_failures(self) -> bool:
        return any(not outcome.ok for outcome in self.outcomes)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""
        return {
            "schema_version": REPORT_SCHEMA_VERSION,
            "strategy": self.strategy,
            "counts": self.counts,
            "outcomes": [outcome.to_dict() for outcome in self.outcomes],
        }
