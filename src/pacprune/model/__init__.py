"""Core data models for pacprune."""

from .entities import CachedPackageRecord, PurgeOutcome, SweepReport

__all__ = [
    "CachedPackageRecord",
    "PurgeOutcome",
    "SweepReport",
]
