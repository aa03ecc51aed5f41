"""Tests for renderer configuration."""

import pydantic
import pytest

from stencil_common.errors import ConfigError
from stencil_renderer.config import RendererConfig, load_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("STENCIL_ENGINE_VERSION", raising=False)
    monkeypatch.delenv("STENCIL_LOG_LEVEL", raising=False)


class TestRendererConfig:
    """Model validation"""

    def test_defaults(self):
        config = RendererConfig()
        assert config.engine_version == "v3"
        assert config.site_settings == {}
        assert config.locale is None
        assert config.log_level == "info"

    @pytest.mark.parametrize(
        "value, expected",
        [("v4", "v4"), ("V4", "v4"), (" v3 ", "v3"), ("v9", "v3"), (None, "v3"), (4, "v3")],
    )
    def test_engine_version_normalized(self, value, expected):
        assert RendererConfig(engine_version=value).engine_version == expected

    def test_log_level_lowercased(self):
        assert RendererConfig(log_level="DEBUG").log_level == "debug"

    def test_invalid_log_level(self):
        with pytest.raises(pydantic.ValidationError):
            RendererConfig(log_level="verbose")

    def test_unknown_fields_ignored(self):
        assert not hasattr(RendererConfig(colour="red"), "colour")


class TestLoadConfig:
    """YAML loading"""

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config(tmp_path / "stencil.yaml") == RendererConfig()

    def test_none_gives_defaults(self):
        assert load_config(None) == RendererConfig()

    def test_loads_yaml(self, tmp_path):
        path = tmp_path / "stencil.yaml"
        path.write_text(
            "engine_version: v4\n"
            "locale: en-US\n"
            "site_settings:\n"
            "  cdn_url: https://cdn.example.com\n"
            "translations:\n"
            "  header:\n"
            "    welcome: 'Welcome, {name}!'\n",
            encoding="utf-8",
        )
        config = load_config(path)

        assert config.engine_version == "v4"
        assert config.locale == "en-US"
        assert config.site_settings == {"cdn_url": "https://cdn.example.com"}
        assert config.translations == {"header": {"welcome": "Welcome, {name}!"}}

    def test_empty_file(self, tmp_path):
        path = tmp_path / "stencil.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == RendererConfig()

    def test_environment_overrides(self, tmp_path, monkeypatch):
        path = tmp_path / "stencil.yaml"
        path.write_text("engine_version: v3\n", encoding="utf-8")
        monkeypatch.setenv("STENCIL_ENGINE_VERSION", "v4")
        monkeypatch.setenv("STENCIL_LOG_LEVEL", "debug")

        config = load_config(path)
        assert config.engine_version == "v4"
        assert config.log_level == "debug"

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "stencil.yaml"
        path.write_text("engine_version: [v4\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "stencil.yaml"
        path.write_text("- v4\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="must contain a mapping"):
            load_config(path)

    def test_invalid_values(self, tmp_path):
        path = tmp_path / "stencil.yaml"
        path.write_text("log_level: loud\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(path)
