"""Configuration loading, validation, and the retention policy model.

This package facade re-exports all public names so callers can use
``from pacprune.config import ...``.
"""

from __future__ import annotations

from pacprune.config.loader import load_config
from pacprune.config.model import CountPurge, NoPurge, PurgeConfig, RepoConfig, RetentionPolicy, TimePurge
from pacprune.config.validator import validate_config_file

__all__ = [
    "CountPurge",
    "NoPurge",
    "PurgeConfig",
    "RepoConfig",
    "RetentionPolicy",
    "TimePurge",
    "load_config",
    "validate_config_file",
]
