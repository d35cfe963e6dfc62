"""Parse cached package filenames into structured records.

Cached files follow ``<name>-<pkgver>-<pkgrel>-<arch>.<extension>``. The
package name may itself contain hyphens, so the name boundary is the
fourth-from-last hyphen; ``pkgver``, ``pkgrel`` and ``arch`` never contain one.
"""

from __future__ import annotations

import os
import re
from pathlib import Path

from pacprune.constants.purge import PACKAGE_MARKER, SIGNATURE_SUFFIX
from pacprune.exceptions import PackageNameError
from pacprune.model import CachedPackageRecord
from pacprune.packages.version import PackageVersion

_PACKAGE_FILENAME_RE = re.compile(
    r"^(?P<name>.+)-(?P<pkgver>[^-]+)-(?P<pkgrel>[^-]+)-(?P<arch>[^-.]+)\.(?P<extension>[^-]+)$"
)

_MIN_SEGMENTS = 4


def parse_package_path(path: str | os.PathLike[str]) -> CachedPackageRecord:
    """Parse a cached package path.

    Raises:
        PackageNameError: If the filename does not follow the naming convention.
    """
    file_path = Path(path)
    filename = file_path.name

    segments = filename.split("-")
    if len(segments) < _MIN_SEGMENTS:
        raise PackageNameError(
            str(file_path),
            f"expected at least {_MIN_SEGMENTS} '-'-separated segments, found {len(segments)}",
        )

    match = _PACKAGE_FILENAME_RE.match(filename)
    if match is None:
        raise PackageNameError(str(file_path), "expected <name>-<pkgver>-<pkgrel>-<arch>.<extension>")

    return CachedPackageRecord(
        full_path=file_path,
        directory=file_path.parent,
        name=match.group("name"),
        version=PackageVersion(f"{match.group('pkgver')}-{match.group('pkgrel')}"),
        arch=match.group("arch"),
        extension=match.group("extension"),
    )


def is_package_file(filename: str) -> bool:
    """Return True for package archives, excluding detached signatures."""
    return PACKAGE_MARKER in filename and not filename.endswith(SIGNATURE_SUFFIX)
