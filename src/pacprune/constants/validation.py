"""Stable validation error codes and allowed-key sets for config validation."""

from __future__ import annotations

CFG001: str = "CFG001"  # config file not found
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown top-level key
CFG005: str = "CFG005"  # invalid value type
CFG006: str = "CFG006"  # invalid enum value
CFG007: str = "CFG007"  # value out of range
CFG008: str = "CFG008"  # contradictory repo config
CFG009: str = "CFG009"  # invalid nested mapping
CFG010: str = "CFG010"  # cache directory missing or not writable

ALL_CFG_CODES: tuple[str, ...] = (
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    CFG008,
    CFG009,
    CFG010,
)

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "cache_dir",
        "port",
        "repos",
        "purge_files_after",
        "purge_strategy",
        "purge_keep_at_most",
    }
)

ALLOWED_REPO_KEYS: frozenset[str] = frozenset({"url", "urls"})

INT_CONFIG_KEYS: tuple[str, ...] = ("port", "purge_files_after", "purge_keep_at_most")
