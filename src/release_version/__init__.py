# SPDX-License-Identifier: MIT
"""Semantic version value type with bumping, tagging and ordering.

Example:
    >>> from release_version import parse_version, parse_versions, sort_ascending
    >>>
    >>> version = parse_version("1.2.3")
    >>> version.bump(changes=True)
    >>> version.beta()
    >>> version.add_metadata("build.7")
    >>> str(version)
    '1.3.0-beta+build.7'
    >>>
    >>> [str(v) for v in sort_ascending(parse_versions(["1.3.3", "0.1.2"]))]
    ['0.1.2', '1.3.3']
"""

__version__ = "0.1.0"

from .semver import (
    ALPHA,
    BETA,
    Version,
    parse_version,
    parse_versions,
    is_valid_version,
    InvalidVersionError,
)
from .compare import (
    compare_versions,
    version_key,
    sort_ascending,
    sort_descending,
)

__all__ = [
    # Version value
    "ALPHA",
    "BETA",
    "Version",
    "parse_version",
    "parse_versions",
    "is_valid_version",
    "InvalidVersionError",
    # Ordering
    "compare_versions",
    "version_key",
    "sort_ascending",
    "sort_descending",
]
