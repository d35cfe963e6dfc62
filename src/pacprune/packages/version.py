"""Version comparison following libalpm/rpm precedence rules.

Versions have the shape ``[epoch:]pkgver[-pkgrel]``. Comparison order is
epoch, then ``pkgver``, then ``pkgrel`` when both sides carry one. Each
component is compared with :func:`rpmvercmp`, which splits a string into
alternating runs of digits and letters:

* numeric runs compare numerically (leading zeros ignored);
* alphabetic runs compare lexically (ASCII);
* a numeric run is newer than an alphabetic one;
* a trailing alphabetic run is older than nothing at all (``1.0a < 1.0``),
  while a trailing numeric run is newer (``1.0.1 > 1.0``).
"""

from __future__ import annotations

import functools
import string
from dataclasses import dataclass

_DIGITS = frozenset(string.digits)
_LETTERS = frozenset(string.ascii_letters)


def _isdigit(char: str) -> bool:
    return char in _DIGITS


def _isalpha(char: str) -> bool:
    return char in _LETTERS


def _isalnum(char: str) -> bool:
    return char in _DIGITS or char in _LETTERS


def rpmvercmp(a: str, b: str) -> int:
    """Compare two version components. Returns -1, 0 or 1."""
    if a == b:
        return 0

    i = j = 0
    len_a, len_b = len(a), len(b)
    while i < len_a and j < len_b:
        sep_start_a, sep_start_b = i, j
        while i < len_a and not _isalnum(a[i]):
            i += 1
        while j < len_b and not _isalnum(b[j]):
            j += 1

        if i >= len_a or j >= len_b:
            break

        # Differing separator lengths decide on their own.
        sep_a, sep_b = i - sep_start_a, j - sep_start_b
        if sep_a != sep_b:
            return -1 if sep_a < sep_b else 1

        seg_start_a, seg_start_b = i, j
        is_numeric = _isdigit(a[i])
        predicate = _isdigit if is_numeric else _isalpha
        while i < len_a and predicate(a[i]):
            i += 1
        while j < len_b and predicate(b[j]):
            j += 1

        seg_a = a[seg_start_a:i]
        seg_b = b[seg_start_b:j]
        if not seg_b:
            return 1 if is_numeric else -1

        if is_numeric:
            seg_a = seg_a.lstrip("0")
            seg_b = seg_b.lstrip("0")
            if len(seg_a) != len(seg_b):
                return 1 if len(seg_a) > len(seg_b) else -1

        if seg_a != seg_b:
            return -1 if seg_a < seg_b else 1

    if i >= len_a and j >= len_b:
        return 0

    rest_a = a[i] if i < len_a else ""
    rest_b = b[j] if j < len_b else ""
    # A leftover alpha run never beats an exhausted string.
    if (not rest_a and not _isalpha(rest_b)) or _isalpha(rest_a):
        return -1
    return 1


def parse_evr(evr: str) -> tuple[str, str, str | None]:
    """Split ``[epoch:]version[-release]`` into its three parts.

    A missing epoch becomes ``"0"``; a missing release is ``None``.
    """
    k = 0
    while k < len(evr) and _isdigit(evr[k]):
        k += 1

    dash = evr.rfind("-", k)
    if k < len(evr) and evr[k] == ":":
        epoch = evr[:k] or "0"
        version_start = k + 1
    else:
        epoch = "0"
        version_start = 0

    if dash == -1:
        return epoch, evr[version_start:], None
    return epoch, evr[version_start:dash], evr[dash + 1 :]


def vercmp(a: str, b: str) -> int:
    """Compare two full package versions. Returns -1, 0 or 1."""
    if a == b:
        return 0

    epoch_a, version_a, release_a = parse_evr(a)
    epoch_b, version_b, release_b = parse_evr(b)

    result = rpmvercmp(epoch_a, epoch_b)
    if result == 0:
        result = rpmvercmp(version_a, version_b)
        if result == 0 and release_a is not None and release_b is not None:
            result = rpmvercmp(release_a, release_b)
    return result


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class PackageVersion:
    """An orderable package version string."""

    raw: str

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PackageVersion):
            return NotImplemented
        return vercmp(self.raw, other.raw) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PackageVersion):
            return NotImplemented
        return vercmp(self.raw, other.raw) < 0

    # Equality is vercmp-based, so no hash consistent with it exists.
    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.raw
