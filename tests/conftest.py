"""Shared pytest fixtures for building throwaway package caches."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from pacprune.config import PurgeConfig, RepoConfig

REPO_NAME = "purgerepo"


@pytest.fixture()
def cache_root(tmp_path: Path) -> Path:
    """Return an empty cache root containing ``pkgs/``."""
    (tmp_path / "pkgs").mkdir()
    return tmp_path


@pytest.fixture()
def repo_dir(cache_root: Path) -> Path:
    """Return the directory of the single test repository."""
    path = cache_root / "pkgs" / REPO_NAME
    path.mkdir()
    return path


@pytest.fixture()
def make_files() -> Callable[..., list[Path]]:
    """Return a helper that creates empty files in a directory."""

    def _make(directory: Path, *names: str) -> list[Path]:
        directory.mkdir(parents=True, exist_ok=True)
        paths = [directory / name for name in names]
        for path in paths:
            path.touch()
        return paths

    return _make


@pytest.fixture()
def count_config(cache_root: Path) -> PurgeConfig:
    """Return a count-strategy config for the test repository."""
    return PurgeConfig(
        cache_dir=cache_root,
        repos=(RepoConfig(name=REPO_NAME, urls=("https://mirror.example.org/purgerepo",)),),
        purge_strategy="count",
        purge_keep_at_most=3,
    )
