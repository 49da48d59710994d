import asyncio
import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timedelta, timezone
from typing import Any, AsyncGenerator, Awaitable, Callable, List, Sequence

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.core.store import EntityStore
from app.main import create_app
from app.models.user import User
from app.repositories.activity_repository import ActivityRepository
from app.repositories.alert_repository import AlertRepository
from app.repositories.favorite_repository import FavoriteRepository
from app.repositories.property_repository import PropertyRepository
from app.repositories.saved_search_repository import SavedSearchRepository
from app.repositories.user_repository import UserRepository
from app.scripts.seed import seed_sample_properties
from app.services.activity_feed import ActivityFeedService
from app.services.property_search_service import PropertySearchService


class FakeClock:
    """Deterministic clock: every reading is one minute after the last."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, tzinfo=timezone.utc)):
        self.now = start

    def __call__(self) -> datetime:
        current = self.now
        self.now += timedelta(minutes=1)
        return current


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock) -> EntityStore:
    """An empty, isolated store."""
    return EntityStore(clock=clock)


@pytest.fixture
def seeded_store(store) -> EntityStore:
    """A store holding the four sample listings (ids 1–4)."""
    seed_sample_properties(store)
    return store


def _make_user(store: EntityStore, username: str) -> User:
    return store.users.create(
        username=username,
        email=f"{username}@example.com",
        password="hashed-secret",
        name=username.title(),
    )


@pytest.fixture
def alice(seeded_store) -> User:
    return _make_user(seeded_store, "alice")


@pytest.fixture
def bob(seeded_store) -> User:
    return _make_user(seeded_store, "bob")


# ---------------------------------------------------------------------------
# Repositories and services over the seeded store
# ---------------------------------------------------------------------------


@pytest.fixture
def user_repo(seeded_store) -> UserRepository:
    return UserRepository(seeded_store)


@pytest.fixture
def property_repo(seeded_store) -> PropertyRepository:
    return PropertyRepository(seeded_store)


@pytest.fixture
def favorite_repo(seeded_store) -> FavoriteRepository:
    return FavoriteRepository(seeded_store)


@pytest.fixture
def saved_search_repo(seeded_store) -> SavedSearchRepository:
    return SavedSearchRepository(seeded_store)


@pytest.fixture
def alert_repo(seeded_store) -> AlertRepository:
    return AlertRepository(seeded_store)


@pytest.fixture
def activity_feed(seeded_store) -> ActivityFeedService:
    return ActivityFeedService(ActivityRepository(seeded_store), default_limit=10)


@pytest.fixture
def search_service(property_repo) -> PropertySearchService:
    return PropertySearchService(property_repo)


# ---------------------------------------------------------------------------
# Concurrency
# ---------------------------------------------------------------------------


@pytest.fixture
def run_concurrently():
    """Run each coroutine factory on its own thread and event loop.

    All threads start together behind a barrier.  Each result is the
    coroutine's return value or the exception it raised.
    """

    def run(calls: Sequence[Callable[[], Awaitable[Any]]]) -> List[Any]:
        barrier = threading.Barrier(len(calls))

        def worker(call: Callable[[], Awaitable[Any]]) -> Any:
            barrier.wait()
            try:
                return asyncio.run(call())
            except Exception as exc:
                return exc

        with ThreadPoolExecutor(max_workers=len(calls)) as pool:
            return list(pool.map(worker, calls))

    return run


# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------


@pytest.fixture
def api_app(seeded_store):
    """A FastAPI app bound to the test's own seeded store."""
    return create_app(store=seeded_store)


@pytest_asyncio.fixture
async def async_client(api_app) -> AsyncGenerator[AsyncClient, None]:
    """Yield an ``httpx.AsyncClient`` wired to the FastAPI app."""
    transport = ASGITransport(app=api_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
