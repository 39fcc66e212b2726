# SPDX-License-Identifier: MIT
"""Version comparison and sorting.

Versions are ordered by (major, minor, patch), compared field by field and
stopping at the first difference. Pre-release and build metadata are ignored.
"""

from __future__ import annotations

from typing import Iterable, TypeVar, Union

from .semver import Version, parse_version

VersionLike = Union[str, Version]

_V = TypeVar("_V", str, Version)


def _as_version(version: VersionLike) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.9.0", "2.0.1")
        -1
        >>> compare_versions("2.0.0", "1.0.0")
        1
    """
    v1 = _as_version(version1)
    v2 = _as_version(version2)

    for attr in ("major", "minor", "patch"):
        val1 = getattr(v1, attr)
        val2 = getattr(v2, attr)
        if val1 != val2:
            return -1 if val1 < val2 else 1
    return 0


def version_key(version: VersionLike) -> tuple[int, int, int]:
    """Return a sort key for a version.

    Examples:
        >>> sorted(["2.0.0", "1.0.0", "1.0.1"], key=version_key)
        ['1.0.0', '1.0.1', '2.0.0']
    """
    v = _as_version(version)
    return (v.major, v.minor, v.patch)


def sort_ascending(versions: Iterable[_V]) -> list[_V]:
    """Return the versions sorted from oldest to newest.

    The sort is stable: equal versions keep their input order.
    """
    return sorted(versions, key=version_key)


def sort_descending(versions: Iterable[_V]) -> list[_V]:
    """Return the versions sorted from newest to oldest.

    The sort is stable: equal versions keep their input order.
    """
    return sorted(versions, key=version_key, reverse=True)
