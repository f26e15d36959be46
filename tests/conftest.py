from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from subscription_hub.config import DEFAULT_CATEGORIES
from subscription_hub.common.database import init_db, get_session_factory
from subscription_hub.common.subscription import CategoryRegistry, SubscriptionManager
from subscription_hub.web.app import app
from subscription_hub.web.shared import get_subscription_manager


@pytest.fixture
def db_url(tmp_path) -> str:
    """Temporary SQLite database initialised with the subscribers table."""
    url = f"sqlite:///{tmp_path / 'test.db'}"
    init_db(url)
    return url


@pytest.fixture
def session(db_url):
    SessionLocal = get_session_factory()
    db = SessionLocal()
    yield db
    db.close()


@pytest.fixture
def registry() -> CategoryRegistry:
    return CategoryRegistry.from_names(DEFAULT_CATEGORIES)


@pytest.fixture
def soft_manager(registry) -> SubscriptionManager:
    return SubscriptionManager(registry, mode="soft")


@pytest.fixture
def hard_manager(registry) -> SubscriptionManager:
    return SubscriptionManager(registry, mode="hard")


def _client_for(manager: SubscriptionManager) -> Generator[TestClient, None, None]:
    app.dependency_overrides[get_subscription_manager] = lambda: manager
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def client(db_url, soft_manager) -> Generator[TestClient, None, None]:
    """Test client running the soft-delete policy."""
    yield from _client_for(soft_manager)


@pytest.fixture
def hard_client(db_url, hard_manager) -> Generator[TestClient, None, None]:
    """Test client running the hard-delete policy."""
    yield from _client_for(hard_manager)
