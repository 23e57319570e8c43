"""Tests for configuration loading."""

from pathlib import Path
from unittest.mock import patch

import pytest
from staticfile.config import (
    Config,
    FaviconConfig,
    ServerConfig,
    StaticConfig,
)


class TestConfigLoad:
    """Tests for Config.load()."""

    def test__explicit_path__loads_config(self, tmp_path: Path) -> None:
        """Load config from explicit path."""
        config_file = tmp_path / "staticfile.toml"
        config_file.write_text("""
[server]
host = "0.0.0.0"
port = 3000

[static]
root_dir = "site"
prefix = "/static/"

[favicon]
path = "assets/favicon.ico"
""")

        config = Config.load(config_file)

        assert config.server.host == "0.0.0.0"
        assert config.server.port == 3000
        assert config.static.root_dir == tmp_path / "site"
        assert config.static.prefix == "/static"
        assert config.favicon is not None
        assert config.favicon.path == tmp_path / "assets" / "favicon.ico"
        assert config.config_path == config_file

    def test__minimal_config__uses_defaults(self, tmp_path: Path) -> None:
        """Load minimal config with defaults relative to config file."""
        config_file = tmp_path / "staticfile.toml"
        config_file.write_text("")

        config = Config.load(config_file)

        assert config.server.host == "127.0.0.1"
        assert config.server.port == 8080
        assert config.static.root_dir == tmp_path / "public"
        assert config.static.prefix == ""
        assert config.favicon is None

    def test__missing_explicit_path__raises_file_not_found_error(
        self,
        tmp_path: Path,
    ) -> None:
        with pytest.raises(FileNotFoundError, match="Configuration file not found"):
            Config.load(tmp_path / "missing.toml")

    def test__no_config_found__returns_defaults(self, tmp_path: Path) -> None:
        """Return defaults when no config file is discovered."""
        with patch("staticfile.config.Path.cwd", return_value=tmp_path):
            config = Config.load()

        assert config.static == StaticConfig()
        assert config.server == ServerConfig()
        assert config.favicon is None
        assert config.config_path is None

    def test__discovers_config_in_parent(self, tmp_path: Path) -> None:
        config_file = tmp_path / "staticfile.toml"
        config_file.write_text('[static]\nroot_dir = "www"\n')
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        with patch("staticfile.config.Path.cwd", return_value=nested):
            config = Config.load()

        assert config.config_path == config_file
        assert config.static.root_dir == tmp_path / "www"

    def test__favicon_without_path__disabled(self, tmp_path: Path) -> None:
        config_file = tmp_path / "staticfile.toml"
        config_file.write_text("[favicon]\n")

        assert Config.load(config_file).favicon is None


class TestConfigValidation:
    """Tests for invalid configuration values."""

    @pytest.mark.parametrize(
        ("content", "message"),
        [
            ('server = "x"', "server section must be a dictionary"),
            ('[server]\nhost = 1', "server.host must be a string"),
            ('[server]\nport = "80"', "server.port must be an integer"),
            ("[server]\nport = true", "server.port must be an integer"),
            ("static = 1", "static section must be a dictionary"),
            ("[static]\nroot_dir = 1", "static.root_dir must be a string"),
            ("[static]\nprefix = 1", "static.prefix must be a string"),
            ('[static]\nprefix = "static"', "static.prefix must start with '/'"),
            ("favicon = 1", "favicon section must be a dictionary"),
            ("[favicon]\npath = 1", "favicon.path must be a string"),
            ("[server", "Invalid TOML"),
        ],
    )
    def test__invalid_value__raises_value_error(
        self,
        tmp_path: Path,
        content: str,
        message: str,
    ) -> None:
        config_file = tmp_path / "staticfile.toml"
        config_file.write_text(content)

        with pytest.raises(ValueError, match=message):
            Config.load(config_file)


class TestWithOverrides:
    """Tests for Config.with_overrides()."""

    @pytest.fixture
    def config(self, tmp_path: Path) -> Config:
        return Config(
            server=ServerConfig(),
            static=StaticConfig(root_dir=tmp_path / "public"),
            favicon=None,
        )

    def test__no_overrides__returns_equal_config(self, config: Config) -> None:
        assert config.with_overrides() == config

    def test__overrides__applied_without_mutating(
        self,
        config: Config,
        tmp_path: Path,
    ) -> None:
        result = config.with_overrides(
            host="0.0.0.0",
            port=9000,
            root_dir=tmp_path / "site",
            prefix="/files/",
            favicon_path=tmp_path / "icon.ico",
        )

        assert result.server == ServerConfig(host="0.0.0.0", port=9000)
        assert result.static == StaticConfig(root_dir=tmp_path / "site", prefix="/files")
        assert result.favicon == FaviconConfig(path=tmp_path / "icon.ico")
        assert config.server == ServerConfig()
        assert config.favicon is None

    def test__partial_override__keeps_other_fields(
        self,
        config: Config,
    ) -> None:
        result = config.with_overrides(port=9000)

        assert result.server.host == "127.0.0.1"
        assert result.server.port == 9000
        assert result.static == config.static
