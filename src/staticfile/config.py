"""Configuration management for Staticfile.

Supports TOML configuration format with auto-discovery.
"""

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Self

CONFIG_FILENAME = "staticfile.toml"


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class StaticConfig:
    """Static file serving configuration."""

    root_dir: Path = field(default_factory=lambda: Path("public"))
    prefix: str = ""


@dataclass
class FaviconConfig:
    """Favicon configuration."""

    path: Path


@dataclass
class Config:
    """Application configuration."""

    server: ServerConfig
    static: StaticConfig
    favicon: FaviconConfig | None
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> Self:
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for staticfile.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents.

        Returns:
            Path to config file or None if not found
        """
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> Self:
        return cls(
            server=ServerConfig(),
            static=StaticConfig(),
            favicon=None,
        )

    @classmethod
    def _load_from_file(cls, path: Path) -> Self:
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in {path}: {e}") from e

        config_dir = path.parent

        return cls(
            server=cls._parse_server(data.get("server")),
            static=cls._parse_static(data.get("static"), config_dir),
            favicon=cls._parse_favicon(data.get("favicon"), config_dir),
            config_path=path,
        )

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "127.0.0.1")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", 8080)
        if not isinstance(port, int) or isinstance(port, bool):
            raise ValueError("server.port must be an integer")

        return ServerConfig(host=host, port=port)

    @classmethod
    def _parse_static(cls, data: object, config_dir: Path) -> StaticConfig:
        """Parse static configuration section.

        Args:
            data: Raw static section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            StaticConfig instance
        """
        if data is None:
            return StaticConfig(root_dir=config_dir / "public")

        if not isinstance(data, dict):
            raise ValueError("static section must be a dictionary")

        root_dir = data.get("root_dir", "public")
        if not isinstance(root_dir, str):
            raise ValueError("static.root_dir must be a string")

        prefix = data.get("prefix", "")
        if not isinstance(prefix, str):
            raise ValueError("static.prefix must be a string")
        if prefix and not prefix.startswith("/"):
            raise ValueError("static.prefix must start with '/'")

        return StaticConfig(root_dir=config_dir / root_dir, prefix=prefix.rstrip("/"))

    @classmethod
    def _parse_favicon(cls, data: object, config_dir: Path) -> FaviconConfig | None:
        """Parse favicon configuration section.

        Returns:
            FaviconConfig instance or None if section not present
        """
        if data is None:
            return None

        if not isinstance(data, dict):
            raise ValueError("favicon section must be a dictionary")

        path = data.get("path")
        if path is None:
            return None
        if not isinstance(path, str):
            raise ValueError("favicon.path must be a string")

        return FaviconConfig(path=config_dir / path)

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        root_dir: Path | None = None,
        prefix: str | None = None,
        favicon_path: Path | None = None,
    ) -> Self:
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            host: Override server.host
            port: Override server.port
            root_dir: Override static.root_dir
            prefix: Override static.prefix
            favicon_path: Override favicon.path

        Returns:
            New Config instance with overrides applied
        """
        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        static = self.static
        if root_dir is not None or prefix is not None:
            static = replace(
                self.static,
                root_dir=root_dir if root_dir is not None else self.static.root_dir,
                prefix=prefix.rstrip("/") if prefix is not None else self.static.prefix,
            )

        favicon = self.favicon
        if favicon_path is not None:
            favicon = FaviconConfig(path=favicon_path)

        return replace(self, server=server, static=static, favicon=favicon)
