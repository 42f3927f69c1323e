"""Tests for the Config singleton and init_config."""
from __future__ import annotations

from pathlib import Path

import pytest

from sizeplot.utils.config import Config, init_config
from sizeplot.utils.exceptions import ConfigurationException


class TestInitConfig:
    def test_defaults(self):
        config = init_config()

        assert config.get_int("scan", "min_size") == 4096
        assert config.get_int("render", "default_width") == 80
        assert config.get_int("render", "label_margin") == 40
        assert config.get("render", "width") is None

    def test_file_overrides_defaults(self, tmp_path: Path):
        conf = tmp_path / "sizeplot.toml"
        conf.write_text("[scan]\nmin_size = 0\n\n[render]\nlabel_margin = 10\n", encoding="utf-8")

        config = init_config(conf)

        assert config.get_int("scan", "min_size") == 0
        assert config.get_int("render", "label_margin") == 10
        assert config.get_int("render", "default_width") == 80

    def test_width_override(self):
        assert init_config(width=132).get("render", "width") == 132

    def test_env_expansion(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SIZEPLOT_MIN", "8192")
        conf = tmp_path / "sizeplot.toml"
        conf.write_text('[scan]\nmin_size = "${SIZEPLOT_MIN}"\n', encoding="utf-8")

        assert init_config(conf).get_int("scan", "min_size") == 8192

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(ConfigurationException, match="could not be found"):
            init_config(tmp_path / "nope.toml")

    def test_invalid_toml_raises(self, tmp_path: Path):
        conf = tmp_path / "bad.toml"
        conf.write_text("[scan\nmin_size = ", encoding="utf-8")

        with pytest.raises(ConfigurationException, match="not valid TOML"):
            init_config(conf)

    def test_non_integer_value_raises(self, tmp_path: Path):
        conf = tmp_path / "sizeplot.toml"
        conf.write_text('[scan]\nmin_size = "lots"\n', encoding="utf-8")

        with pytest.raises(ConfigurationException, match="must be an integer"):
            init_config(conf).get_int("scan", "min_size")


class TestConfig:
    def test_is_singleton(self):
        assert Config() is Config()

    def test_get_missing_section_raises(self):
        with pytest.raises(ConfigurationException, match='Group "nope"'):
            Config().get("nope", "key")

    def test_get_missing_key_raises(self):
        config = Config()
        config.set("render", "width", 10)

        with pytest.raises(ConfigurationException, match='Parameter "height"'):
            config.get("render", "height")

    def test_reset_discards_values(self):
        Config().set("scan", "min_size", 1)
        Config.reset()

        assert not Config().has("scan", "min_size")
