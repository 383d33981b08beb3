import pytest
from freezegun import freeze_time

from linkshortener.dao.memory import LinkMemoryDAO, UserMemoryDAO
from linkshortener.models import Bounds
from linkshortener.services import LinkEngine, UserRegistry


@pytest.fixture
def frozen_time():
    """Freeze the clock at 2025-10-15 12:00:00 UTC; tests move it with tick()/move_to()."""
    with freeze_time('2025-10-15 12:00:00') as frozen:
        yield frozen


@pytest.fixture
def bounds() -> Bounds:
    return Bounds(ttl_min=1, ttl_max=48, limit_min=1, limit_max=100)


@pytest.fixture
def link_dao() -> LinkMemoryDAO:
    return LinkMemoryDAO()


@pytest.fixture
def engine(bounds, link_dao) -> LinkEngine:
    return LinkEngine(bounds, link_dao=link_dao)


@pytest.fixture
def registry() -> UserRegistry:
    return UserRegistry(UserMemoryDAO())
