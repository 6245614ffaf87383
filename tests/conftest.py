"""Pytest configuration and fixtures."""

from datetime import datetime

import pytest

from chronify.core.config import Config, set_config
from fixtures.fake_parser import ExplodingSemanticParser, FakeSemanticParser

NOW = datetime(2024, 5, 15, 12, 0, 0)

CHRONIFY_ENV_VARS = [
    "CHRONIFY_DATE_TAGS",
    "CHRONIFY_AMBIGUOUS_TIME_RANGE",
    "CHRONIFY_LANGUAGES",
    "CHRONIFY_DURATION_STYLE",
]


@pytest.fixture(autouse=True)
def default_config():
    """Run every test against default settings, never the developer's files."""
    set_config(Config())
    yield
    set_config(None)


@pytest.fixture
def now():
    """Fixed reference instant (a Wednesday at noon)."""
    return NOW


@pytest.fixture
def clock(now):
    """Reference clock pinned to ``now``."""
    return lambda: now


@pytest.fixture
def fake_parser():
    return FakeSemanticParser()


@pytest.fixture
def exploding_parser():
    return ExplodingSemanticParser()


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """No CHRONIFY_* variables and an empty working directory.

    Each variable is touched through monkeypatch first so values a .env file
    loads during the test are removed again afterwards.
    """
    for key in CHRONIFY_ENV_VARS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    return tmp_path
