"""
Global pytest configuration and fixtures.
"""

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "kometa"


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding the sample Kometa configs and profiles."""
    return FIXTURES_DIR


@pytest.fixture
def config_text(fixtures_dir) -> str:
    """A full Kometa config with secrets, extras and an empty library."""
    return (fixtures_dir / "config.yml").read_text()


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch):
    """Keep the developer's KOMETA_STUDIO_* variables out of the tests.

    The CLI reads its default profile and debug flag from the environment,
    so a value exported in the shell running pytest would change results.
    """
    monkeypatch.delenv("KOMETA_STUDIO_PROFILE", raising=False)
    monkeypatch.delenv("KOMETA_STUDIO_DEBUG", raising=False)
    yield
