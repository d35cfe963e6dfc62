"""Config file validation for the cache purge sweeps."""

from __future__ import annotations

import difflib
import os
from pathlib import Path
from typing import Any

import yaml

from pacprune.config.loader import is_valid_repo_name
from pacprune.constants.config import (
    DEFAULT_CACHE_DIR,
    DEFAULT_PURGE_FILES_AFTER,
    DEFAULT_PURGE_KEEP_AT_MOST,
    DEFAULT_PURGE_STRATEGY,
    MIN_PURGE_FILES_AFTER,
    MIN_PURGE_KEEP_AT_MOST,
    PURGE_STRATEGY_COUNT,
    PURGE_STRATEGY_TIME,
    VALID_PURGE_STRATEGIES,
)
from pacprune.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    ALLOWED_REPO_KEYS,
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
    INT_CONFIG_KEYS,
)
from pacprune.exceptions.validation import ValidationError, sort_errors


def validate_config_file(config_path: Path) -> list[ValidationError]:
    """Validate a pacprune.yaml file and return all validation errors.

    This is the collect-all counterpart of :func:`load_config` used by
    ``pacprune validate-config``. It never raises; all problems are returned
    as :class:`ValidationError` instances.
    """
    errors: list[ValidationError] = []
    path = config_path.resolve()
    path_str = str(path)

    if not path.exists():
        errors.append(
            ValidationError(
                code=CFG001,
                path=path_str,
                field="",
                message=f"config file not found: {path}",
            )
        )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        errors.append(
            ValidationError(
                code=CFG002,
                path=path_str,
                field="",
                message=f"invalid YAML: {exc}",
            )
        )
        return errors

    if raw is None:
        raw = {}

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(str(k) for k in raw):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=key,
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(key, ALLOWED_CONFIG_KEYS),
                )
            )

    for key in INT_CONFIG_KEYS:
        val = raw.get(key)
        if key in raw and (isinstance(val, bool) or not isinstance(val, int)):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=key,
                    message=f"invalid type for `{key}`",
                    hint="expected an integer",
                )
            )

    _validate_strategy(raw, path_str, errors)
    _validate_repos_block(raw, path_str, errors)
    _validate_cache_dir(raw, path_str, errors)

    return sort_errors(errors)


def _validate_strategy(raw: dict[str, Any], path_str: str, errors: list[ValidationError]) -> None:
    """Check ``purge_strategy`` and the threshold its variant relies on."""
    strategy_raw = raw.get("purge_strategy", DEFAULT_PURGE_STRATEGY)
    strategy = strategy_raw.lower() if isinstance(strategy_raw, str) else ""
    if strategy not in VALID_PURGE_STRATEGIES:
        errors.append(
            ValidationError(
                code=CFG006,
                path=path_str,
                field="purge_strategy",
                message="invalid value for `purge_strategy`",
                hint=f"expected one of: {', '.join(sorted(VALID_PURGE_STRATEGIES))}; got: {strategy_raw!r}",
            )
        )
        return

    if strategy == PURGE_STRATEGY_TIME:
        val = raw.get("purge_files_after", DEFAULT_PURGE_FILES_AFTER)
        if isinstance(val, int) and not isinstance(val, bool) and val < MIN_PURGE_FILES_AFTER:
            errors.append(
                ValidationError(
                    code=CFG007,
                    path=path_str,
                    field="purge_files_after",
                    message=f"`purge_files_after` is too low ({val})",
                    hint=f"specify at least {MIN_PURGE_FILES_AFTER} seconds",
                )
            )
    elif strategy == PURGE_STRATEGY_COUNT:
        val = raw.get("purge_keep_at_most", DEFAULT_PURGE_KEEP_AT_MOST)
        if isinstance(val, int) and not isinstance(val, bool) and val < MIN_PURGE_KEEP_AT_MOST:
            errors.append(
                ValidationError(
                    code=CFG007,
                    path=path_str,
                    field="purge_keep_at_most",
                    message=f"`purge_keep_at_most` is too low ({val})",
                    hint="specify a positive integer",
                )
            )


def _validate_repos_block(raw: dict[str, Any], path_str: str, errors: list[ValidationError]) -> None:
    """Validate the ``repos`` nested mapping in pacprune.yaml."""
    repos = raw.get("repos")
    if repos is None:
        return
    if not isinstance(repos, dict):
        errors.append(
            ValidationError(
                code=CFG009,
                path=path_str,
                field="repos",
                message="`repos` must be a mapping",
            )
        )
        return

    for name, repo in repos.items():
        field = f"repos.{name}"
        if not is_valid_repo_name(str(name)):
            errors.append(
                ValidationError(
                    code=CFG006,
                    path=path_str,
                    field=field,
                    message=f"repo name {name!r} must be a single directory name",
                )
            )
        if not isinstance(repo, dict):
            errors.append(
                ValidationError(
                    code=CFG009,
                    path=path_str,
                    field=field,
                    message=f"`{field}` must be a mapping",
                )
            )
            continue
        for key in sorted(str(k) for k in repo):
            if key not in ALLOWED_REPO_KEYS:
                errors.append(
                    ValidationError(
                        code=CFG004,
                        path=path_str,
                        field=f"{field}.{key}",
                        message=f"unknown key `{key}`",
                        hint=_suggest_key(key, ALLOWED_REPO_KEYS),
                    )
                )
        url = repo.get("url")
        urls = repo.get("urls")
        if url and urls:
            errors.append(
                ValidationError(
                    code=CFG008,
                    path=path_str,
                    field=field,
                    message=f"repo '{name}' specifies both `url` and `urls`",
                    hint="use only one of them",
                )
            )
        elif not url and not urls:
            errors.append(
                ValidationError(
                    code=CFG008,
                    path=path_str,
                    field=field,
                    message=f"repo '{name}' has no `url`",
                )
            )


def _validate_cache_dir(raw: dict[str, Any], path_str: str, errors: list[ValidationError]) -> None:
    """Check that the cache directory exists and is readable and writable."""
    cache_dir = raw.get("cache_dir", DEFAULT_CACHE_DIR)
    if not isinstance(cache_dir, str) or not cache_dir.strip():
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field="cache_dir",
                message="invalid type for `cache_dir`",
                hint="expected a non-empty string",
            )
        )
        return

    resolved = Path(cache_dir).expanduser()
    if not os.access(resolved, os.R_OK | os.W_OK):
        errors.append(
            ValidationError(
                code=CFG010,
                path=path_str,
                field="cache_dir",
                message=f"cache directory does not exist or isn't writable: {resolved}",
            )
        )


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
