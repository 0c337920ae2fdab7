# SPDX-License-Identifier: MIT
"""Exceptions raised while parsing version strings."""

from __future__ import annotations

from typing import Any


class ParseError(ValueError):
    """Raised when a value cannot be parsed as a version.

    Attributes:
        version: The offending input, as given by the caller (untrimmed)
        message: Human-readable description of the failure
    """

    def __init__(self, version: Any, message: str = ""):
        self.version = version
        self.message = message or f"{version!s} is not a valid version"
        super().__init__(self.message)


class InvalidInputTypeError(ParseError, TypeError):
    """Raised when the input is not a string."""

    def __init__(self, version: Any):
        super().__init__(
            version,
            f"{version!r} is not a valid version: expected str, got {type(version).__name__}",
        )


class MalformedCoreError(ParseError):
    """Raised when no valid major[.minor[.patch]] core is found."""

    pass


class InvalidLabelsError(ParseError):
    """Raised when the prerelease/build suffix is malformed."""

    pass
