"""Count-based retention: keep only the newest versions of each package.

Files are grouped by their parsed package name, never by filename prefix, so
``foo`` and ``foobar`` are separate groups. Within a group candidates are
ordered by version ascending with the full path as tie-breaker, and
everything except the ``keep_at_most`` greatest is removed.
"""

from __future__ import annotations

import functools
import logging
import os
from pathlib import Path

from pacprune.config.model import PurgeConfig
from pacprune.constants.purge import ACTION_SKIPPED, SIGNATURE_SUFFIX
from pacprune.exceptions import PackageNameError
from pacprune.model import CachedPackageRecord, PurgeOutcome
from pacprune.packages.names import is_package_file, parse_package_path
from pacprune.packages.version import vercmp
from pacprune.purge.removal import listing_failure, remove_file

logger = logging.getLogger(__name__)


def purge_old_files(path: str | os.PathLike[str], keep_at_most: int) -> list[PurgeOutcome]:
    """Apply retention to the package group of a freshly cached file.

    Called by the downloader right after *path* is written. Problems are
    logged and returned as outcomes, never raised. A *keep_at_most* below 1
    would evict *path* itself, so nothing is removed in that case.
    """
    if keep_at_most < 1:
        logger.warning("Skipping retention for %s: keep_at_most must be positive, got %d", path, keep_at_most)
        return []

    try:
        package = parse_package_path(path)
    except PackageNameError as exc:
        logger.warning("Skipping retention: %s", exc)
        return [PurgeOutcome(path=str(path), action=ACTION_SKIPPED, reason=exc.reason)]

    outcomes: list[PurgeOutcome] = []
    try:
        filenames = _list_package_files(package.directory, prefix=f"{package.name}-")
    except OSError as exc:
        outcomes.append(listing_failure(package.directory, exc))
        return outcomes

    candidates: list[CachedPackageRecord] = []
    for filename in filenames:
        try:
            candidate = parse_package_path(package.directory / filename)
        except PackageNameError as exc:
            logger.warning("Skipping unparseable file: %s", exc)
            outcomes.append(PurgeOutcome(path=exc.path, action=ACTION_SKIPPED, reason=exc.reason))
            continue
        if candidate.name == package.name:
            candidates.append(candidate)

    outcomes.extend(_retain_newest(candidates, keep_at_most))
    return outcomes


def purge_all_old_files(config: PurgeConfig) -> list[PurgeOutcome]:
    """Apply retention to every package group of every configured repository."""
    keep_at_most = config.purge_keep_at_most
    outcomes: list[PurgeOutcome] = []

    for repo_name in config.repo_names:
        repo_dir = config.repo_dir(repo_name)
        try:
            filenames = _list_package_files(repo_dir)
        except FileNotFoundError:
            logger.debug("Nothing cached yet for repo %s", repo_name)
            continue
        except OSError as exc:
            outcomes.append(listing_failure(repo_dir, exc))
            continue

        groups: dict[str, list[CachedPackageRecord]] = {}
        for filename in filenames:
            try:
                record = parse_package_path(repo_dir / filename)
            except PackageNameError as exc:
                logger.warning("Skipping unparseable file: %s", exc)
                outcomes.append(PurgeOutcome(path=exc.path, action=ACTION_SKIPPED, reason=exc.reason))
                continue
            groups.setdefault(record.name, []).append(record)

        logger.debug("Repo %s: %d package group(s)", repo_name, len(groups))
        for name in sorted(groups):
            outcomes.extend(_retain_newest(groups[name], keep_at_most))

    return outcomes


def order_by_version(candidates: list[CachedPackageRecord]) -> list[CachedPackageRecord]:
    """Return candidates oldest first; equal versions are ordered by path."""
    return sorted(candidates, key=functools.cmp_to_key(_compare_records))


def _compare_records(a: CachedPackageRecord, b: CachedPackageRecord) -> int:
    result = vercmp(a.version.raw, b.version.raw)
    if result:
        return result
    path_a, path_b = str(a.full_path), str(b.full_path)
    return (path_a > path_b) - (path_a < path_b)


def _retain_newest(candidates: list[CachedPackageRecord], keep_at_most: int) -> list[PurgeOutcome]:
    if len(candidates) <= keep_at_most:
        return []

    ordered = order_by_version(candidates)
    outcomes: list[PurgeOutcome] = []
    for record in ordered[: len(ordered) - keep_at_most]:
        reason = f"more than {keep_at_most} version(s) of {record.name} cached"
        outcomes.append(remove_file(record.full_path, reason))
        signature = Path(f"{record.full_path}{SIGNATURE_SUFFIX}")
        if signature.is_file():
            outcomes.append(remove_file(signature, f"signature of {record.full_path.name}"))
    return outcomes


def _list_package_files(directory: Path, *, prefix: str = "") -> list[str]:
    """List package archive names in *directory*, sorted, optionally filtered by prefix."""
    with os.scandir(directory) as entries:
        names = [
            entry.name
            for entry in entries
            if entry.name.startswith(prefix) and is_package_file(entry.name) and entry.is_file(follow_symlinks=False)
        ]
    return sorted(names)
