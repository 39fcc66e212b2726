# SPDX-License-Identifier: MIT
"""Semantic version value type.

A Version holds MAJOR.MINOR.PATCH plus optional tags:
- Pre-release: -alpha, -beta (set through Version.alpha() / Version.beta())
- Build metadata: +anything (set through Version.add_metadata())

Parsing only reads the three numeric fields; tags are never parsed from input.
"""

from __future__ import annotations

import functools
import logging
import re
from dataclasses import dataclass, field
from typing import Iterable, Optional

logger = logging.getLogger(__name__)

ALPHA = "alpha"
BETA = "beta"

# A numeric field is a run of ASCII digits; leading zeros are accepted
_NUMBER_PATTERN = re.compile(r"[0-9]+")

_FIELDS = ("major", "minor", "patch")


class InvalidVersionError(Exception):
    """Raised when a version string cannot be parsed."""

    def __init__(self, version: str, message: str = "", field: Optional[str] = None):
        self.version = version
        self.field = field
        self.message = message or f"Invalid version: {version}"
        super().__init__(self.message)


@functools.total_ordering
@dataclass(eq=False, slots=True)
class Version:
    """A semantic version owned and mutated in place by a single caller.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release tag ("alpha" or "beta"), empty when unset
        metadata: Build metadata (e.g., a build date or commit), empty when unset

    Only the three numbers take part in comparisons; two versions differing
    only in their tags are equal. The pre-release tag is not a constructor
    argument; use alpha() or beta().

    Raises:
        ValueError: If major, minor or patch is negative
    """

    major: int = 0
    minor: int = 0
    patch: int = 0
    prerelease: str = field(default="", init=False)
    metadata: str = ""

    def __post_init__(self) -> None:
        for name in _FIELDS:
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} version number must be non-negative, got {value}")

    def bump(self, breaking_changes: bool = False, changes: bool = False) -> None:
        """Increment the version number in place.

        Breaking changes bump the major number, other changes the minor
        number, and anything else the patch number. Lower fields are reset to
        zero. Tags are left as they are.
        """
        if breaking_changes:
            self.major += 1
            self.minor = 0
            self.patch = 0
        elif changes:
            self.minor += 1
            self.patch = 0
        else:
            self.patch += 1
        logger.debug("Bumped version to %s", self.base_version)

    def alpha(self) -> None:
        """Mark this version as an alpha pre-release."""
        self._tag(ALPHA)

    def beta(self) -> None:
        """Mark this version as a beta pre-release."""
        self._tag(BETA)

    def _tag(self, prerelease: str) -> None:
        if self.prerelease and self.prerelease != prerelease:
            logger.debug("Replacing pre-release %r with %r", self.prerelease, prerelease)
        self.prerelease = prerelease

    def add_metadata(self, metadata: str) -> None:
        """Attach build metadata, replacing any previous value.

        This is often a build date or commit information.
        """
        self.metadata = metadata

    def render(self) -> str:
        """Return the string form MAJOR.MINOR.PATCH[-PRERELEASE][+METADATA]."""
        version = self.base_version
        if self.prerelease:
            version += f"-{self.prerelease}"
        if self.metadata:
            version += f"+{self.metadata}"
        return version

    def __str__(self) -> str:
        return self.render()

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return the version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def _numbers(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    def equal(self, other: Version) -> bool:
        """Return True if both versions share major, minor and patch."""
        return self._numbers() == other._numbers()

    def before(self, other: Version) -> bool:
        """Return True if this version precedes ``other``."""
        return self._numbers() < other._numbers()

    def after(self, other: Version) -> bool:
        """Return True if this version follows ``other``."""
        return self._numbers() > other._numbers()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.equal(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.before(other)


def _parse_number(segment: str, name: str, version_string: str) -> int:
    message = f"Can't parse {name} version number {segment!r} in {version_string!r}"
    if not _NUMBER_PATTERN.fullmatch(segment):
        raise InvalidVersionError(version_string, message, field=name)
    try:
        return int(segment)
    except ValueError as e:
        raise InvalidVersionError(version_string, message, field=name) from e


def parse_version(version_string: str) -> Version:
    """Parse a version string into a Version object.

    Args:
        version_string: A string of the form MAJOR.MINOR.PATCH[...]. Anything
            after the third dot-separated segment is ignored. The empty string
            yields the zero version. Numbers have no upper bound of their
            own, but a field longer than the interpreter's integer string
            conversion limit (``sys.get_int_max_str_digits()``) is rejected.

    Returns:
        A new Version with empty pre-release and metadata

    Raises:
        InvalidVersionError: If there are fewer than three segments, or one of
            the first three is not a non-negative integer

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease='', metadata='')

        >>> parse_version("")
        Version(major=0, minor=0, patch=0, prerelease='', metadata='')
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    if not version_string:
        return Version()

    segments = version_string.split(".")
    if len(segments) < 3:
        raise InvalidVersionError(
            version_string,
            f"Invalid version {version_string!r}: expected MAJOR.MINOR.PATCH",
        )

    major, minor, patch = (
        _parse_number(segment, name, version_string)
        for segment, name in zip(segments, _FIELDS)
    )
    return Version(major=major, minor=minor, patch=patch)


def parse_versions(version_strings: Iterable[str]) -> list[Version]:
    """Parse several version strings at once.

    Raises:
        InvalidVersionError: On the first invalid string; nothing is returned
    """
    versions = []
    for index, version_string in enumerate(version_strings):
        try:
            versions.append(parse_version(version_string))
        except InvalidVersionError:
            logger.debug("Version #%d (%r) is invalid", index, version_string)
            raise
    return versions


def is_valid_version(version_string: str) -> bool:
    """Check if a string parses as a version.

    Examples:
        >>> is_valid_version("1.0.0")
        True
        >>> is_valid_version("1.0")
        False
    """
    try:
        parse_version(version_string)
    except InvalidVersionError:
        return False
    return True
