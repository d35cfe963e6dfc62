"""Shared exception hierarchy for pacprune."""

from __future__ import annotations

from .base import PacpruneError
from .config import ConfigError
from .parsing import PackageNameError

__all__ = [
    "ConfigError",
    "PackageNameError",
    "PacpruneError",
]
