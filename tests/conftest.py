"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A project directory containing the default convertible roots."""
    (tmp_path / "Assets" / "Scripts").mkdir(parents=True)
    (tmp_path / "Packages").mkdir()
    return tmp_path
