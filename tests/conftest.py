"""
Pytest configuration and shared fixtures for pagemeta tests.

This module provides test fixtures for:
- Settings pointing at a fixed test domain
- Hook registries isolated per test
- FastAPI application and test client
"""

import os
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from pagemeta.config import Settings
from pagemeta.hooks import HookRegistry
from pagemeta.main import create_app


# ==============================================================================
# SETTINGS FIXTURES
# ==============================================================================

@pytest.fixture
def test_settings() -> Settings:
    """Settings for a site at example.com with the scheduler disabled."""
    return Settings(
        TITLE="Example Site",
        DOMAIN="example.com",
        DEFAULT_LOCALE="en",
        TWITTER_CARD="summary",
        SITEMAP_ENABLED=False,
        SITEMAP_INTERVAL_SECONDS=5.0,
        SITEMAP_CACHE_MS=600000,
        SITEMAP_CHANGEFREQ="monthly",
        SITEMAP_GENERATION_TIMEOUT_SECONDS=2.0,
    )


@pytest.fixture
def scheduled_settings(test_settings) -> Settings:
    """Test settings with the sitemap scheduler enabled."""
    return test_settings.model_copy(update={"SITEMAP_ENABLED": True, "SITEMAP_INTERVAL_SECONDS": 60.0})


@pytest.fixture
def registry() -> HookRegistry:
    """Fresh hook registry for one test."""
    return HookRegistry()


# ==============================================================================
# APPLICATION FIXTURES
# ==============================================================================

@pytest.fixture
def test_app(test_settings, registry):
    """Application wired to the test settings and registry."""
    return create_app(settings=test_settings, registry=registry)


@pytest.fixture
def client(test_app) -> Generator[TestClient, None, None]:
    """Test client without lifespan, so no sitemap is generated in the background."""
    yield TestClient(test_app)


# ==============================================================================
# UTILITY FIXTURES
# ==============================================================================

@pytest.fixture(autouse=True)
def reset_environment():
    """Reset environment variables after each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# ==============================================================================
# MARKERS
# ==============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: Mark test as an integration test"
    )
    config.addinivalue_line(
        "markers", "slow: Mark test as slow (may take >1 second)"
    )
