"""Root exception type."""

from __future__ import annotations


class PacpruneError(Exception):
    """Base class for all pacprune errors."""
