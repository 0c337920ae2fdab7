# SPDX-License-Identifier: MIT
"""Semantic version parsing and comparison.

This package parses version strings such as ``v1.2.3-rc.1+build.5`` into
structured records and orders them by SemVer precedence. Build metadata is
parsed but never affects ordering.

Example:
    >>> from versioncmp import parse_version, compare_versions
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.prerelease
    'alpha.1'
    >>> parse_version("1.2").patch
    0
    >>> compare_versions("1.0.0-beta.2", "1.0.0-beta.11")
    -1
"""

__version__ = "0.1.0"

from .errors import (
    ParseError,
    InvalidInputTypeError,
    MalformedCoreError,
    InvalidLabelsError,
)
from .semver import (
    Version,
    parse_version,
    is_valid_semver,
    STRICT_CORE_PATTERN,
    LOOSE_CORE_PATTERN,
    LABELS_PATTERN,
)
from .compare import (
    compare_versions,
    compare_prerelease,
    sort_versions,
    max_version,
)

__all__ = [
    # Errors
    "ParseError",
    "InvalidInputTypeError",
    "MalformedCoreError",
    "InvalidLabelsError",
    # Version parsing
    "Version",
    "parse_version",
    "is_valid_semver",
    "STRICT_CORE_PATTERN",
    "LOOSE_CORE_PATTERN",
    "LABELS_PATTERN",
    # Version comparison
    "compare_versions",
    "compare_prerelease",
    "sort_versions",
    "max_version",
]
