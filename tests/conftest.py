"""Pytest configuration and shared fixtures.

Organization:
    - Application Fixtures: FastAPI app and HTTP client
    - Finder Fixtures: build server registry seeded with demo data
    - Settings Fixtures: cache reset between tests
"""

from __future__ import annotations

import os
from collections.abc import AsyncGenerator, Iterator

import pytest
from httpx import ASGITransport, AsyncClient

from buildserver_service.core.settings import clear_settings_cache
from buildserver_service.features.buildserver.demo import seed_demo_data
from buildserver_service.features.buildserver.registry import BuildServerRegistry, get_registry

# Keep test runs independent of a developer's .env and log files
os.environ.setdefault("APP_ENVIRONMENT", "test")
os.environ.setdefault("LOG_JSON_LOGS", "false")


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    """Reload settings for every test so monkeypatched env vars apply."""
    clear_settings_cache()
    yield
    clear_settings_cache()


# ============================================================================
# Finder Fixtures
# ============================================================================


@pytest.fixture
def registry() -> BuildServerRegistry:
    """Fresh registry holding the demo server layout.

    Layout:
        projects   _Root > Backend > Backend_Api, _Root > Frontend, _Root > Legacy (archived)
        pools      0 Default (agents 1, 2), 1 Linux (agents 3, 4, 5), 2 Windows (agent 6)
        images     pool 1: ami-linux (aws-1), gce-linux (gcp-1, provider fails)
        builds     ids 1-15, five per build type, build number 3 failed
    """
    return seed_demo_data(BuildServerRegistry())


@pytest.fixture
def empty_registry() -> BuildServerRegistry:
    return BuildServerRegistry()


# ============================================================================
# Application Fixtures
# ============================================================================


@pytest.fixture
def app(registry: BuildServerRegistry):
    """FastAPI application wired to the ``registry`` fixture."""
    from buildserver_service.app.main import create_app

    application = create_app()
    application.dependency_overrides[get_registry] = lambda: registry
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient]:
    """Async HTTP client for the application.

    Example:
        async def test_list_pools(client):
            response = await client.get("/api/v1/agent-pools")
            assert response.status_code == 200
    """
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
