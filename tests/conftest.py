import itertools
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from parking_allocator.config.settings_env import Settings
from parking_allocator.infrastructure.api.app import create_app
from parking_allocator.infrastructure.api.dependencies import create_parking_service


DEFAULT_DISTANCES = [[1, 2, 3], [1, 2, 3], [1, 2, 3]]
DEFAULT_SIZES = [0, 1, 2]


@pytest.fixture
def vehicle_ids():
    """Predictable vehicle ids: V0001, V0002, ..."""
    counter = itertools.count(1)
    return lambda: f"V{next(counter):04d}"


@pytest.fixture
def parking_service(vehicle_ids):
    """Create a ParkingService over the default three entry point layout."""
    return create_parking_service(3, DEFAULT_DISTANCES, DEFAULT_SIZES, id_generator=vehicle_ids)


@pytest.fixture
def single_entry_service(vehicle_ids):
    """One entry point with a large slot closer than a small one."""
    return create_parking_service(1, [[5, 2, 2, 9]], [0, 2, 1, 1], id_generator=vehicle_ids)


@pytest.fixture
def client(parking_service):
    """HTTP client bound to the parking_service fixture."""
    with TestClient(create_app(parking_service)) as test_client:
        yield test_client


@pytest.fixture
def test_settings():
    """Provide test settings."""
    return Settings(
        DEV_MODE=False,
        ENTRY_POINTS=2,
        SLOT_DISTANCES=[[1, 4], [3, 2]],
        SLOT_SIZES=[0, 2]
    )


class FakeClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta):
        self.now += delta


@pytest.fixture
def clock():
    return FakeClock(datetime(2024, 3, 1, 8, 0, tzinfo=timezone.utc))


@pytest.fixture
def clocked_client(clock, vehicle_ids):
    """HTTP client whose engine reads time from the clock fixture."""
    service = create_parking_service(3, DEFAULT_DISTANCES, DEFAULT_SIZES, clock=clock, id_generator=vehicle_ids)
    with TestClient(create_app(service)) as test_client:
        yield test_client
