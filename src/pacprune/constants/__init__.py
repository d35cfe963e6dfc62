"""Shared constants for pacprune."""
