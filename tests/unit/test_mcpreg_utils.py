"""Unit tests for mcpreg.utils."""

import logging
from pathlib import Path

from mcpreg.utils import get_logger, get_package_version, normalize_path


def test_get_logger_namespace():
    logger = get_logger("registry.fetch")
    assert logger.name == "mcpreg.registry.fetch"
    assert logging.getLogger("mcpreg").propagate is False


def test_normalize_path_expands_home(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert normalize_path("~/x/mcp-config.json") == tmp_path / "x" / "mcp-config.json"


def test_normalize_path_relative_is_absolute():
    path = normalize_path("relative.json")
    assert path.is_absolute()
    assert path == Path.cwd() / "relative.json"


def test_get_package_version_is_string():
    assert isinstance(get_package_version(), str)
