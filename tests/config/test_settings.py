"""Tests for DrillSettings — TOML source, env vars, CLI overrides."""

from pathlib import Path

import click
import pytest

from drillkit.config.settings import DrillSettings


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = DrillSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.ratings.threshold == 4.0
        assert settings.square.delay_seconds == 1.0

    def test_frozen(self, tmp_path: Path) -> None:
        settings = DrillSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "drillkit.toml"
        toml.write_text("[ratings]\nthreshold = 3.5\n")
        settings = DrillSettings.from_cli(start=tmp_path)
        assert settings.config_path == toml.resolve()
        assert settings.ratings.threshold == 3.5
        assert settings.square.delay_seconds == 1.0

    def test_walks_up(self, tmp_path: Path) -> None:
        (tmp_path / "drillkit.toml").write_text("[square]\ndelay_seconds = 0.25\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert DrillSettings.from_cli(start=nested).square.delay_seconds == 0.25

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom.toml"
        custom.write_text("[ratings]\nthreshold = 2\n")
        settings = DrillSettings.from_cli(config_path=str(custom))
        assert settings.ratings.threshold == 2.0

    def test_missing_explicit_path_uses_defaults(self, tmp_path: Path) -> None:
        settings = DrillSettings.from_cli(config_path=str(tmp_path / "nope.toml"))
        assert settings.config_path is None
        assert settings.ratings.threshold == 4.0

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "drillkit.toml").write_text("[ratings\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            DrillSettings.from_cli(start=tmp_path)

    def test_negative_delay_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "drillkit.toml").write_text("[square]\ndelay_seconds = -1\n")
        with pytest.raises(Exception):
            DrillSettings.from_cli(start=tmp_path)


class TestPriority:
    def test_env_beats_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "drillkit.toml").write_text("[ratings]\nthreshold = 3.5\n")
        monkeypatch.setenv("DRILLKIT_RATINGS__THRESHOLD", "4.5")
        assert DrillSettings.from_cli(start=tmp_path).ratings.threshold == 4.5

    def test_cli_flag_beats_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DRILLKIT_VERBOSE", "false")
        assert DrillSettings.from_cli(start=tmp_path, verbose=True).verbose is True
