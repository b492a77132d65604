import contextlib

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from party_planner.config.settings import Settings
from party_planner.main import app
from party_planner.planner import build_planner
from party_planner.tests.inmemory_api import create_test_api


@pytest.fixture
def test_settings():
    """Settings pinned for tests, independent of any .env file."""
    return Settings(
        _env_file=None,
        api_base_url="http://party-api.test/api",
        cohort="test-cohort",
        mount_id="app",
        reject_stale_responses=False,
    )


@pytest.fixture
def api():
    """Create a fresh in-memory api with three parties for each test."""
    return create_test_api()


@pytest.fixture
def planner(test_settings, api):
    """Planner wired to the in-memory api, nothing loaded yet."""
    return build_planner(test_settings, api=api)


@pytest.fixture
def client_factory():
    """Build an AsyncClient against the app with dependency overrides applied."""

    @contextlib.asynccontextmanager
    async def _client(overrides: dict | None = None):
        app.dependency_overrides.update(overrides or {})
        transport = ASGITransport(app=app)
        try:
            async with AsyncClient(transport=transport, base_url="http://test") as ac:
                yield ac
        finally:
            app.dependency_overrides.clear()

    return _client


@pytest_asyncio.fixture
async def loaded_planner(planner):
    """Planner with parties, RSVPs and guests loaded and rendered once."""
    await planner.refresh_events(render=False)
    await planner.refresh_rsvps(render=False)
    await planner.refresh_guests(render=False)
    planner.render()
    return planner
