"""Tests for CLI parser and main behavior."""

from __future__ import annotations

import json
import os
from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from pacprune.cli.main import build_parser, main


def _write_config(cache_root: Path, body: str) -> Path:
    config_path = cache_root / "pacprune.yaml"
    config_path.write_text(f"cache_dir: {cache_root}\n{body}", encoding="utf-8")
    return config_path


def test_build_parser_purge_flags(tmp_path: Path) -> None:
    parser = build_parser()

    args = parser.parse_args(["purge", "--config", str(tmp_path / "c.yaml"), "--json", "--no-color"])

    assert args.command == "purge"
    assert args.config == tmp_path / "c.yaml"
    assert args.json is True
    assert args.no_color is True
    assert args.no_stdout is False


def test_build_parser_prune_package_requires_keep(tmp_path: Path) -> None:
    parser = build_parser()

    with pytest.raises(SystemExit):
        parser.parse_args(["prune-package", str(tmp_path / "foo-1-1-any.pkg.tar")])


def test_purge_count_strategy_prints_json(
    cache_root: Path,
    repo_dir: Path,
    make_files: Callable[..., list[Path]],
    capsys: pytest.CaptureFixture[str],
) -> None:
    make_files(repo_dir, *(f"foo-1-{i}-any.pkg.tar" for i in range(1, 5)))
    config_path = _write_config(
        cache_root,
        "purge_strategy: count\npurge_keep_at_most: 3\nrepos:\n  purgerepo:\n    url: https://mirror.example.org\n",
    )

    exit_code = main(["purge", "-c", str(config_path), "--json"])

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["strategy"] == "count"
    assert payload["counts"]["removed"] == 1
    assert not (repo_dir / "foo-1-1-any.pkg.tar").exists()


def test_purge_time_strategy_prints_summary(
    cache_root: Path,
    repo_dir: Path,
    make_files: Callable[..., list[Path]],
    capsys: pytest.CaptureFixture[str],
) -> None:
    (stale,) = make_files(repo_dir, "stale")
    os.utime(stale, (0, 0))
    config_path = _write_config(cache_root, "purge_strategy: time\npurge_files_after: 3600\n")

    exit_code = main(["purge", "-c", str(config_path)])

    assert exit_code == 0
    out = capsys.readouterr().out
    assert "Purge summary" in out
    assert "Removed     1" in out
    assert not stale.exists()


def test_purge_time_strategy_on_fresh_cache_succeeds(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, "purge_strategy: time\npurge_files_after: 3600\n")

    assert main(["purge", "-c", str(config_path), "--no-stdout"]) == 0


def test_purge_reports_config_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_path = _write_config(tmp_path, "purge_strategy: lru\n")

    exit_code = main(["purge", "-c", str(config_path)])

    assert exit_code == 2
    assert "Configuration error" in capsys.readouterr().err


def test_purge_exit_code_on_failures(cache_root: Path, repo_dir: Path, make_files: Callable[..., list[Path]]) -> None:
    (stale,) = make_files(repo_dir, "stale")
    os.utime(stale, (0, 0))
    config_path = _write_config(cache_root, "purge_files_after: 3600\n")

    with patch("pacprune.purge.removal.os.remove", side_effect=PermissionError(13, "Permission denied")):
        exit_code = main(["purge", "-c", str(config_path), "--no-stdout"])

    assert exit_code == 1
    assert stale.exists()


def test_prune_package(repo_dir: Path, make_files: Callable[..., list[Path]]) -> None:
    files = make_files(repo_dir, *(f"foo-1-{i}-any.pkg.tar" for i in range(1, 4)))

    exit_code = main(["prune-package", str(files[-1]), "--keep", "1"])

    assert exit_code == 0
    assert [path.exists() for path in files] == [False, False, True]


def test_prune_package_rejects_non_positive_keep(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["prune-package", str(tmp_path / "foo-1-1-any.pkg.tar"), "-k", "0"])

    assert exit_code == 2
    assert "--keep" in capsys.readouterr().err


def test_watch_starts_and_stops_scheduler(cache_root: Path) -> None:
    config_path = _write_config(cache_root, "purge_strategy: time\n")
    scheduler = MagicMock()
    scheduler.wait.side_effect = KeyboardInterrupt

    with patch("pacprune.cli.handlers.PurgeScheduler", return_value=scheduler) as scheduler_cls:
        exit_code = main(["watch", "-c", str(config_path)])

    assert exit_code == 0
    config_source = scheduler_cls.call_args.args[0]
    assert config_source().purge_strategy == "time"
    scheduler.start.assert_called_once_with()
    scheduler.stop.assert_called_once_with()


def test_validate_config_valid(cache_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_path = _write_config(cache_root, "purge_strategy: none\n")

    assert main(["validate-config", "-c", str(config_path)]) == 0
    assert "Configuration is valid." in capsys.readouterr().out


def test_validate_config_invalid(cache_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_path = _write_config(cache_root, "purge_strategy: count\npurge_keep_at_most: 0\n")

    assert main(["validate-config", "-c", str(config_path)]) == 2
    assert "purge_keep_at_most" in capsys.readouterr().err
