# SPDX-License-Identifier: MIT
"""Semantic version parsing.

Supports MAJOR.MINOR.PATCH with an optional leading ``v``, surrounding
whitespace and optional labels:
- Pre-release: -alpha, -alpha.1, -rc-1, -0.3.7
- Build metadata: +build, +build.123, +20240101
- Both, pre-release first: -rc1+build.15

In loose mode the minor and patch segments may be omitted and default to 0.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Optional

from .errors import InvalidInputTypeError, InvalidLabelsError, MalformedCoreError

# Numeric core followed by whatever remains (the labels)
STRICT_CORE_PATTERN = re.compile(
    r"v?(?P<major>[0-9]+)"
    r"\.(?P<minor>[0-9]+)"
    r"\.(?P<patch>[0-9]+)"
    r"(?P<labels>.*)",
    re.DOTALL,
)

LOOSE_CORE_PATTERN = re.compile(
    r"v?(?P<major>[0-9]+)"
    r"(?:\.(?P<minor>[0-9]+))?"
    r"(?:\.(?P<patch>[0-9]+))?"
    r"(?P<labels>.*)",
    re.DOTALL,
)

# -prerelease, -prerelease+build or +build. A build that comes first takes no
# hyphen, which keeps "+build.0-rc1" (build before pre-release) from matching.
LABELS_PATTERN = re.compile(
    r"-(?P<prerelease>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)"
    r"(?:\+(?P<build>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"|\+(?P<build_only>[0-9A-Za-z]+(?:\.[0-9A-Za-z]+)*)"
)


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a parsed semantic version.

    Attributes:
        major: Major version number
        minor: Minor version number (0 when omitted in loose mode)
        patch: Patch version number (0 when omitted in loose mode)
        prerelease: Optional pre-release identifiers (e.g., "alpha.1", "rc-1")
        build: Optional build metadata (e.g., "build.15"), ignored for ordering
    """

    major: int
    minor: int
    patch: int
    prerelease: Optional[str] = None
    build: Optional[str] = None

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = self.base_version
        if self.prerelease is not None:
            version += f"-{self.prerelease}"
        if self.build is not None:
            version += f"+{self.build}"
        return version

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return self.prerelease is not None

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"


def _split_labels(version: str, text: str, labels: str) -> tuple[Optional[str], Optional[str]]:
    """Split the text after the numeric core into (prerelease, build)."""
    if not labels:
        return None, None

    match = LABELS_PATTERN.fullmatch(labels)
    if not match:
        raise InvalidLabelsError(
            version, f"{text} is not a valid version: invalid pre-release or build '{labels}'"
        )
    return match.group("prerelease"), match.group("build") or match.group("build_only")


def parse_version(version: str, strict: bool = False) -> Version:
    """Parse a version string into a Version object.

    Args:
        version: Version string, e.g. "v1.0.1-rc1+build.2" (whitespace is trimmed)
        strict: Require all of MAJOR.MINOR.PATCH. When False, "v1.2" is
            read as 1.2.0 and "1" as 1.0.0.

    Returns:
        A Version object with parsed components

    Raises:
        InvalidInputTypeError: If version is not a string
        MalformedCoreError: If no valid numeric core is found
        InvalidLabelsError: If the pre-release/build suffix is malformed

    Examples:
        >>> parse_version(" v1.0.1-rc1+build.2 ")
        Version(major=1, minor=0, patch=1, prerelease='rc1', build='build.2')

        >>> parse_version("1.2")
        Version(major=1, minor=2, patch=0, prerelease=None, build=None)
    """
    if not isinstance(version, str):
        raise InvalidInputTypeError(version)

    text = version.strip()

    pattern = STRICT_CORE_PATTERN if strict else LOOSE_CORE_PATTERN
    match = pattern.fullmatch(text)
    if not match:
        raise MalformedCoreError(version, f"{text} is not a valid version")

    prerelease, build = _split_labels(version, text, match.group("labels"))

    return Version(
        major=int(match.group("major")),
        minor=int(match.group("minor") or 0),
        patch=int(match.group("patch") or 0),
        prerelease=prerelease,
        build=build,
    )


def is_valid_semver(version: Any, strict: bool = False) -> bool:
    """Check if a value parses as a version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0", strict=True)
        False
        >>> is_valid_semver("1.2.3+build.0-rc1")
        False
    """
    if not isinstance(version, str):
        return False
    try:
        parse_version(version, strict=strict)
    except (MalformedCoreError, InvalidLabelsError):
        return False
    return True
