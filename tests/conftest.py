"""Shared pytest fixtures for exprcalc tests."""

from collections.abc import Callable
from pathlib import Path

import pytest
from typer.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a CLI test runner."""
    return CliRunner()


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper that writes exprcalc.toml into tmp_path."""

    def _write(content: str) -> Path:
        path = tmp_path / "exprcalc.toml"
        path.write_text(content)
        return path

    return _write
