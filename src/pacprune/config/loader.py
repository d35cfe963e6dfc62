"""Config loading and normalization for the cache purge sweeps."""

from __future__ import annotations

import getpass
import os
from pathlib import Path
from typing import Any

import yaml

from pacprune.config.model import PurgeConfig, RepoConfig
from pacprune.constants.config import (
    DEFAULT_CACHE_DIR,
    DEFAULT_PORT,
    DEFAULT_PURGE_FILES_AFTER,
    DEFAULT_PURGE_KEEP_AT_MOST,
    DEFAULT_PURGE_STRATEGY,
    MIN_PURGE_FILES_AFTER,
    MIN_PURGE_KEEP_AT_MOST,
    PURGE_STRATEGY_COUNT,
    PURGE_STRATEGY_TIME,
    VALID_PURGE_STRATEGIES,
)
from pacprune.exceptions import ConfigError


def load_config(config_path: Path) -> PurgeConfig:
    """Load and validate cache config from a YAML file.

    Raises:
        ConfigError: On the first problem found. Use
            :func:`pacprune.config.validate_config_file` to collect all of them.
    """
    path = config_path.resolve()
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    cache_dir_raw = raw.get("cache_dir", DEFAULT_CACHE_DIR)
    if not isinstance(cache_dir_raw, str) or not cache_dir_raw.strip():
        raise ConfigError("cache_dir must be a non-empty string")
    cache_dir = Path(cache_dir_raw).expanduser()

    port = _ensure_int(raw.get("port", DEFAULT_PORT), "port")
    purge_files_after = _ensure_int(raw.get("purge_files_after", DEFAULT_PURGE_FILES_AFTER), "purge_files_after")
    purge_keep_at_most = _ensure_int(raw.get("purge_keep_at_most", DEFAULT_PURGE_KEEP_AT_MOST), "purge_keep_at_most")

    strategy_raw = raw.get("purge_strategy", DEFAULT_PURGE_STRATEGY)
    if not isinstance(strategy_raw, str) or strategy_raw.lower() not in VALID_PURGE_STRATEGIES:
        raise ConfigError(
            f"purge_strategy must be one of {sorted(VALID_PURGE_STRATEGIES)}, got {strategy_raw!r}"
        )
    strategy = strategy_raw.lower()

    if strategy == PURGE_STRATEGY_TIME and purge_files_after < MIN_PURGE_FILES_AFTER:
        raise ConfigError(
            f"purge_files_after period is too low ({purge_files_after}), "
            f"please specify at least {MIN_PURGE_FILES_AFTER} seconds"
        )
    if strategy == PURGE_STRATEGY_COUNT and purge_keep_at_most < MIN_PURGE_KEEP_AT_MOST:
        raise ConfigError(
            f"purge_keep_at_most is too low ({purge_keep_at_most}), please specify a positive integer"
        )

    repos = _build_repos(raw.get("repos", {}))

    if not os.access(cache_dir, os.R_OK | os.W_OK):
        raise ConfigError(f"cache_dir {cache_dir} does not exist or isn't writable for user {getpass.getuser()}")

    return PurgeConfig(
        cache_dir=cache_dir,
        port=port,
        repos=repos,
        purge_strategy=strategy,
        purge_files_after=purge_files_after,
        purge_keep_at_most=purge_keep_at_most,
    )


def is_valid_repo_name(name: str) -> bool:
    """Repo names become directories under ``pkgs/`` and may not escape it."""
    return bool(name) and name not in {".", ".."} and "/" not in name and os.sep not in name


def _ensure_int(value: Any, key_name: str) -> int:
    """Return *value* if it is a real integer, raising ConfigError otherwise."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{key_name} must be an integer")
    return value


def _build_repos(raw: Any) -> tuple[RepoConfig, ...]:
    """Build repo entries, requiring exactly one of ``url`` or ``urls`` each."""
    if raw is None:
        return ()
    if not isinstance(raw, dict):
        raise ConfigError("repos must be a mapping")

    repos: list[RepoConfig] = []
    for name, repo_raw in sorted(raw.items(), key=lambda item: str(item[0])):
        if not is_valid_repo_name(str(name)):
            raise ConfigError(f"repo name {name!r} must be a single directory name")
        if not isinstance(repo_raw, dict):
            raise ConfigError(f"repos.{name} must be a mapping")
        url = repo_raw.get("url")
        urls = repo_raw.get("urls")
        if url and urls:
            raise ConfigError(f"repo '{name}' specifies both url and urls parameters, please use only one of them")
        if not url and not urls:
            raise ConfigError(f"please specify url for repo '{name}'")
        if url is not None and not isinstance(url, str):
            raise ConfigError(f"repos.{name}.url must be a string")
        if urls is not None and (not isinstance(urls, list) or not all(isinstance(u, str) for u in urls)):
            raise ConfigError(f"repos.{name}.urls must be a list of strings")
        repos.append(RepoConfig(name=str(name), urls=(url,) if url else tuple(urls)))
    return tuple(repos)
