# SPDX-License-Identifier: MIT
"""Command-line configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}

OUTPUT_FORMATS = ("text", "json")


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be one of true/false/1/0/yes/no, got '{value}'")


@dataclass
class CLIConfig:
    """Defaults for the versioncmp command.

    Attributes:
        strict: Parse versions in strict mode (MAJOR.MINOR.PATCH required)
        output_format: "text" or "json"
    """

    strict: bool = False
    output_format: str = "text"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CLIConfig":
        """Create configuration from environment variables."""
        env = os.environ if environ is None else environ

        config = cls()

        if (strict := env.get("VERSIONCMP_STRICT")) is not None:
            config.strict = _parse_bool("VERSIONCMP_STRICT", strict)

        if output_format := env.get("VERSIONCMP_FORMAT"):
            output_format = output_format.strip().lower()
            if output_format not in OUTPUT_FORMATS:
                raise ConfigError(
                    f"VERSIONCMP_FORMAT must be one of {', '.join(OUTPUT_FORMATS)}, "
                    f"got '{output_format}'"
                )
            config.output_format = output_format

        return config
