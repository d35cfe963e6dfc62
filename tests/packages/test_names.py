"""Tests for package filename parsing."""

from __future__ import annotations

from pathlib import Path

import pytest

from pacprune.exceptions import PackageNameError
from pacprune.packages.names import is_package_file, parse_package_path
from pacprune.packages.version import PackageVersion


def test_parse_simple_package() -> None:
    record = parse_package_path("/cache/pkgs/core/bash-5.2.026-2-x86_64.pkg.tar.zst")

    assert record.name == "bash"
    assert record.version == PackageVersion("5.2.026-2")
    assert record.arch == "x86_64"
    assert record.extension == "pkg.tar.zst"
    assert record.directory == Path("/cache/pkgs/core")
    assert record.full_path == Path("/cache/pkgs/core/bash-5.2.026-2-x86_64.pkg.tar.zst")


def test_records_are_hashable_by_path() -> None:
    path = "/cache/pkgs/core/bash-5.2.026-2-x86_64.pkg.tar.zst"
    first, second = parse_package_path(path), parse_package_path(path)
    other = parse_package_path("/cache/pkgs/extra/bash-5.2.026-2-x86_64.pkg.tar.zst")

    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second, other}) == 2


def test_parse_hyphenated_name() -> None:
    record = parse_package_path("python-typing-extensions-4.12.2-1-any.pkg.tar.zst")

    assert record.name == "python-typing-extensions"
    assert record.version.raw == "4.12.2-1"
    assert record.arch == "any"


def test_parse_keeps_epoch_in_version() -> None:
    record = parse_package_path("vim-2:9.1.0-1-x86_64.pkg.tar.xz")

    assert record.name == "vim"
    assert record.version.raw == "2:9.1.0-1"
    assert record.extension == "pkg.tar.xz"


def test_parse_signature_extension() -> None:
    record = parse_package_path("foo-1-1-any.pkg.tar.zst.sig")

    assert record.extension == "pkg.tar.zst.sig"


@pytest.mark.parametrize(
    "filename",
    [
        "toremove",
        "foo-1-any.pkg.tar",
        "foo-1-1-any",
        "-1-1-any.pkg.tar",
        "foo--1-any.pkg.tar",
    ],
    ids=["no_segments", "three_segments", "no_extension", "empty_name", "empty_pkgver"],
)
def test_parse_rejects_malformed_names(filename: str) -> None:
    with pytest.raises(PackageNameError) as excinfo:
        parse_package_path(Path("/cache/pkgs/repo") / filename)

    assert filename in str(excinfo.value)


def test_package_name_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        parse_package_path("toremove")


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        ("foo-1-1-any.pkg.tar", True),
        ("foo-1-1-any.pkg.tar.zst", True),
        ("foo-1-1-any.pkg.tar.zst.sig", False),
        ("core.db", False),
    ],
)
def test_is_package_file(filename: str, expected: bool) -> None:
    assert is_package_file(filename) is expected
