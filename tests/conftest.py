# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# tests/conftest.py

"""
Shared test fixtures for the schema-manager test suite.
"""

from pathlib import Path

import pytest

from schema_manager.config.manager import SchemaManagerConfig
from schema_manager.system.logging_setup import setup_logging
from tests.fixtures.fake_repository import FakeRepositoryClient


@pytest.fixture
def home_dir(tmp_path, monkeypatch) -> Path:
    """Point HOME at a temporary directory so the cache lands under tmp_path."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def config(home_dir) -> SchemaManagerConfig:
    """Configuration whose cache directory does not exist yet."""
    return SchemaManagerConfig.load(home=home_dir)


@pytest.fixture
def schema_cache(config) -> Path:
    """A cache holding a/b.hl, a/c.txt and d.hl."""
    cache = config.cache_dir
    (cache / "a").mkdir(parents=True)
    (cache / "a" / "b.hl").write_text("schema b")
    (cache / "a" / "c.txt").write_text("not a schema")
    (cache / "d.hl").write_text("schema d")
    return cache


@pytest.fixture
def fake_client() -> FakeRepositoryClient:
    return FakeRepositoryClient()


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop sinks bound to CliRunner streams once a test finishes."""
    yield
    setup_logging()
