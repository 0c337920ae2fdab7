# SPDX-License-Identifier: MIT
"""Version comparison following SemVer precedence rules.

The numeric core is compared by significance (major, then minor, then
patch). When the cores are equal, a release outranks any of its
pre-releases and pre-release identifiers are compared left to right.
Build metadata never takes part in ordering.
"""

from __future__ import annotations

import functools
import re
from typing import Iterable, Optional, Union

from .semver import Version, parse_version

VersionLike = Union[str, Version]

_NUMERIC_IDENTIFIER = re.compile(r"[0-9]+")


def _coerce(version: VersionLike, strict: bool) -> Version:
    if isinstance(version, Version):
        return version
    return parse_version(version, strict=strict)


def _sign(a, b) -> int:
    if a == b:
        return 0
    return -1 if a < b else 1


def compare_prerelease(pre1: Optional[str], pre2: Optional[str]) -> int:
    """Compare two pre-release strings.

    Returns:
        -1 if pre1 < pre2
        0 if pre1 == pre2
        1 if pre1 > pre2

    A version without pre-release has higher precedence than one with a
    pre-release (1.0.0 > 1.0.0-alpha). Identifiers that are both numeric
    compare as integers, anything else compares as ASCII text, and a longer
    list of identifiers wins when all shared positions are equal.
    """
    if pre1 is None and pre2 is None:
        return 0
    if pre1 is None:
        return 1  # Release > pre-release
    if pre2 is None:
        return -1  # Pre-release < release

    parts1 = pre1.split(".")
    parts2 = pre2.split(".")

    for position in range(max(len(parts1), len(parts2))):
        if position >= len(parts1):
            return -1
        if position >= len(parts2):
            return 1

        p1 = parts1[position]
        p2 = parts2[position]
        if p1 == p2:
            continue

        if _NUMERIC_IDENTIFIER.fullmatch(p1) and _NUMERIC_IDENTIFIER.fullmatch(p2):
            result = _sign(int(p1), int(p2))
        else:
            result = _sign(p1, p2)
        if result:
            return result

    return 0


def compare_versions(
    version1: VersionLike, version2: VersionLike, strict: bool = False
) -> int:
    """Compare two versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)
        strict: Strictness used when parsing string arguments

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        ParseError: If either version string is invalid

    Examples:
        >>> compare_versions("v0.0.0", "v9.0.0")
        -1
        >>> compare_versions("1.0.0-alpha", "1.0.0")
        -1
        >>> compare_versions("1.0.0-2.0", "1.0.0-2")
        1
        >>> compare_versions("1.0.0+build.1", "1.0.0+build.2")
        0
    """
    v1 = _coerce(version1, strict)
    v2 = _coerce(version2, strict)

    for attr in ("major", "minor", "patch"):
        result = _sign(getattr(v1, attr), getattr(v2, attr))
        if result:
            return result

    return compare_prerelease(v1.prerelease, v2.prerelease)


def sort_versions(
    versions: Iterable[VersionLike], strict: bool = False, reverse: bool = False
) -> list[VersionLike]:
    """Return the versions sorted by precedence, keeping their original form.

    Examples:
        >>> sort_versions(["2.0.0", "1.0.0", "1.0.0-alpha"])
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    pairs = [(item, _coerce(item, strict)) for item in versions]
    key = functools.cmp_to_key(lambda a, b: compare_versions(a[1], b[1]))
    return [item for item, _ in sorted(pairs, key=key, reverse=reverse)]


def max_version(versions: Iterable[VersionLike], strict: bool = False) -> VersionLike:
    """Return the highest-precedence version; the first one wins on ties."""
    best: Optional[VersionLike] = None
    best_parsed: Optional[Version] = None
    for item in versions:
        parsed = _coerce(item, strict)
        if best_parsed is None or compare_versions(parsed, best_parsed) > 0:
            best, best_parsed = item, parsed
    if best_parsed is None:
        raise ValueError("max_version() arg is an empty iterable")
    return best
