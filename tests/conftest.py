"""Shared pytest fixtures for forbidden_domains tests."""

from __future__ import annotations

from collections.abc import Generator

import pytest
import structlog

from forbidden_domains import yaml_config


@pytest.fixture(autouse=True)
def _reset_structlog() -> Generator[None]:
    """Undo any structlog configuration a test (or run()) applied."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    """Point the YAML loader at a fresh file under tmp_path."""
    path = tmp_path / "config.yml"
    monkeypatch.setattr(yaml_config, "_CONFIG_PATH", path)
    monkeypatch.setattr(yaml_config, "_cache", None)
    return path
