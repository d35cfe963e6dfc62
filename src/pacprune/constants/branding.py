"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "pacprune"
CLI_DESCRIPTION: str = f"{BRAND_NAME}: retention sweeps for a local pacman package cache"
