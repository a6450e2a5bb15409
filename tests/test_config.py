"""Unit tests for svg_serializer.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from svg_serializer.config import CONFIG_ENV_VAR, SUPPORTED_UNITS, Config
from svg_serializer.exceptions import ConfigError


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep the user's own config file and environment out of the tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    return home


class TestConfigValidation:
    def test_defaults(self) -> None:
        config = Config()
        assert config.unit == "mm"
        assert config.decimals == 10000
        assert config.status_callback is None

    def test_all_units_accepted(self) -> None:
        for unit in SUPPORTED_UNITS:
            assert Config(unit=unit).unit == unit

    def test_unknown_unit(self) -> None:
        with pytest.raises(ConfigError, match="Unsupported unit"):
            Config(unit="m")

    @pytest.mark.parametrize("decimals", [0, -10, 1.5, True, "100"])
    def test_bad_decimals(self, decimals) -> None:
        with pytest.raises(ConfigError, match="decimals"):
            Config(decimals=decimals)

    def test_callback_must_be_callable(self) -> None:
        with pytest.raises(ConfigError, match="callable"):
            Config(status_callback=42)

    def test_replace_validates(self) -> None:
        config = Config().replace(unit="px")
        assert config.unit == "px"
        with pytest.raises(ConfigError):
            config.replace(decimals=0)

    def test_report_without_callback_is_noop(self) -> None:
        Config().report(50)


class TestFromOptions:
    def test_none_gives_defaults(self) -> None:
        assert Config.from_options(None) == Config()

    def test_config_passes_through(self) -> None:
        config = Config(unit="in")
        assert Config.from_options(config) is config

    def test_mapping_is_merged_over_defaults(self) -> None:
        config = Config.from_options({"decimals": 100})
        assert config == Config(unit="mm", decimals=100)

    def test_wrong_type(self) -> None:
        with pytest.raises(ConfigError, match="mapping"):
            Config.from_options(["mm"])


class TestConfigLoad:
    def test_missing_default_file_gives_defaults(self) -> None:
        assert Config.load() == Config()

    def test_default_location(self, isolated_home: Path) -> None:
        config_dir = isolated_home / ".config" / "svg-serializer"
        config_dir.mkdir(parents=True)
        (config_dir / "config.yaml").write_text("unit: pt\n")
        assert Config.load().unit == "pt"

    def test_explicit_path(self, tmp_path: Path) -> None:
        path = tmp_path / "cfg.yaml"
        path.write_text("unit: cm\ndecimals: 1000\n")
        assert Config.load(path) == Config(unit="cm", decimals=1000)

    def test_env_var(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = tmp_path / "env.yaml"
        path.write_text("decimals: 10\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        assert Config.load().decimals == 10

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert Config.load(path) == Config()

    def test_missing_explicit_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            Config.load(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("unit: [unclosed")
        with pytest.raises(ConfigError, match="Invalid YAML syntax"):
            Config.load(path)

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- mm\n")
        with pytest.raises(ConfigError, match="mapping"):
            Config.load(path)

    def test_unknown_key(self, tmp_path: Path) -> None:
        path = tmp_path / "extra.yaml"
        path.write_text("unit: mm\ncolor: red\n")
        with pytest.raises(ConfigError, match="Unknown key"):
            Config.load(path)

    def test_invalid_value(self, tmp_path: Path) -> None:
        path = tmp_path / "value.yaml"
        path.write_text("unit: parsec\n")
        with pytest.raises(ConfigError, match="Unsupported unit"):
            Config.load(path)
