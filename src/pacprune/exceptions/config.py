"""Configuration-related exceptions."""

from __future__ import annotations

from pacprune.exceptions.base import PacpruneError


class ConfigError(PacpruneError, ValueError):
    """Raised when cache configuration is invalid."""
