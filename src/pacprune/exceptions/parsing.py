"""Parsing-related exceptions."""

from __future__ import annotations

from pacprune.exceptions.base import PacpruneError


class PackageNameError(PacpruneError, ValueError):
    """Raised when a cached filename does not follow the package naming convention."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
