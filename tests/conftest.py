"""Pytest fixtures for hangul-drill tests."""

from collections.abc import Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient

from hangul_drill.core.config import Settings, get_settings
from hangul_drill.main import app
from hangul_drill.services.grading import reset_grading_service


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Create a test client for the FastAPI app."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def settings_override() -> dict[str, Any]:
    """Override settings for tests.

    Returns a dictionary of settings to override.
    Tests can modify this dictionary to customize settings.
    """
    return {
        "default_unit": "jamo",
        "max_text_length": 10,
        "max_candidates": 2,
    }


@pytest.fixture
def test_settings(settings_override: dict[str, Any]) -> Settings:
    """Create a Settings instance with test-specific overrides."""
    return Settings(**settings_override)


@pytest.fixture
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[pytest.MonkeyPatch, None, None]:
    """Clear the settings cache and the grading singleton around a test.

    Yields:
        The monkeypatch used to set HANGUL_ environment variables. It is
        undone before the caches are cleared again.
    """
    get_settings.cache_clear()
    reset_grading_service()
    yield monkeypatch
    monkeypatch.undo()
    get_settings.cache_clear()
    reset_grading_service()


@pytest.fixture
def env_settings(
    fresh_settings: pytest.MonkeyPatch, settings_override: dict[str, Any]
) -> Settings:
    """Apply settings overrides through HANGUL_ environment variables."""
    for key, value in settings_override.items():
        fresh_settings.setenv(f"HANGUL_{key.upper()}", str(value))
    return get_settings()
