"""
Pytest configuration and shared fixtures for nsisgen tests.

This module provides reusable fixtures and test utilities used across
the test suite.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from nsisgen.logging import SilentLogger, set_global_logger


@pytest.fixture(autouse=True)
def silent_global_logger():
    """Reset the global logger so CLI tests don't leak verbosity."""
    set_global_logger(SilentLogger())
    yield
    set_global_logger(SilentLogger())


@pytest.fixture
def make_tree(tmp_path: Path):
    """
    Factory fixture for creating a source tree under tmp_path.

    Keys ending in "/" create directories; other keys create files with
    the given text content.

    Usage:
        root = make_tree("app", {"a.txt": "a", "sub/": None, "sub/b.txt": "b"})
    """

    def _create(name: str, entries: dict[str, str | None]) -> Path:
        root = tmp_path / name
        root.mkdir(parents=True, exist_ok=True)
        for rel, content in entries.items():
            path = root / rel
            if rel.endswith("/"):
                path.mkdir(parents=True, exist_ok=True)
            else:
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(content or "", encoding="utf-8")
        return root

    return _create


@pytest.fixture
def sample_options_data(tmp_path: Path) -> dict[str, Any]:
    """
    Provide a complete raw option mapping.

    src_dir points at an existing directory holding one file.
    """
    src = tmp_path / "src"
    src.mkdir()
    (src / "app.exe").write_text("binary", encoding="utf-8")
    return {
        "app_name": "Demo App",
        "company_name": "Demo Inc.",
        "description": "Demo application",
        "version": "1.2.3",
        "copyright": "(c) 2025 Demo Inc.",
        "compression": "zlib",
        "solid": True,
        "src_dir": str(src),
        "output": str(tmp_path / "dist" / "demo-setup.exe"),
    }


@pytest.fixture
def create_yaml_file(tmp_path: Path):
    """
    Factory fixture for creating temporary YAML files.

    Usage:
        yaml_path = create_yaml_file("installer.yaml", {"key": "value"})
    """

    def _create(filename: str, data: Any) -> Path:
        path = tmp_path / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.dump(data, f)
        return path

    return _create
