# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for versioncmp tests."""

from __future__ import annotations

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove VERSIONCMP_* settings inherited from the outer environment."""
    monkeypatch.delenv("VERSIONCMP_STRICT", raising=False)
    monkeypatch.delenv("VERSIONCMP_FORMAT", raising=False)
    return monkeypatch
