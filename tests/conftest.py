"""Shared test fixtures."""

from pathlib import Path

import pytest
from staticfile.config import Config, FaviconConfig, ServerConfig, StaticConfig


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """Create a site root with a small file tree.

    site/
    ├── index.html
    ├── style.css
    ├── .well-known/
    │   └── security.txt
    ├── docs/
    │   ├── index.html
    │   └── guide.html
    └── empty/
    """
    site = tmp_path / "site"
    site.mkdir()
    (site / "index.html").write_text("<h1>Home</h1>")
    (site / "style.css").write_text("body { color: red; }")
    (site / ".well-known").mkdir()
    (site / ".well-known" / "security.txt").write_text("Contact: admin@example.com")
    (site / "docs").mkdir()
    (site / "docs" / "index.html").write_text("<h1>Docs</h1>")
    (site / "docs" / "guide.html").write_text("<h1>Guide</h1>")
    (site / "empty").mkdir()
    return site


@pytest.fixture
def favicon_file(tmp_path: Path) -> Path:
    favicon = tmp_path / "favicon.ico"
    favicon.write_bytes(b"\x00\x00\x01\x00icon")
    return favicon


@pytest.fixture
def test_config(site_dir: Path, favicon_file: Path) -> Config:
    """Create a test configuration serving site_dir with a favicon."""
    return Config(
        server=ServerConfig(),
        static=StaticConfig(root_dir=site_dir),
        favicon=FaviconConfig(path=favicon_file),
    )
