"""Shared pytest fixtures for drillkit tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from drillkit.config.settings import DrillSettings
from drillkit.services.telemetry import _current_span, disable_telemetry


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no drillkit env overrides."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DRILLKIT_CONFIG", raising=False)
    for var in (
        "DRILLKIT_RATINGS__THRESHOLD",
        "DRILLKIT_SQUARE__DELAY_SECONDS",
        "DRILLKIT_VERBOSE",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def _restore_global_state() -> Generator[None]:
    """Undo logging handlers and telemetry flags installed by the CLI."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    drill_level = logging.getLogger("drillkit").level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("drillkit").setLevel(drill_level)
    disable_telemetry()
    _current_span.set(None)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> DrillSettings:
    """Default settings with no squaring delay."""
    base = DrillSettings.from_cli(start=tmp_path)
    return base.model_copy(update={"square": base.square.model_copy(update={"delay_seconds": 0})})
