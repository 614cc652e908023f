from datetime import datetime
from typing import Callable, Optional, Sequence

from fastapi import Request
from loguru import logger

from parking_allocator.application.services.parking_service import ParkingService
from parking_allocator.config.settings_env import Settings, settings
from parking_allocator.domain.layout import initialize_parking_slots
from parking_allocator.infrastructure.persistence.in_memory_repositories import (
    InMemoryParkingSlotRepository,
    InMemoryParkedVehicleRepository,
)


def create_parking_service(
    entry_points: int,
    distances: Sequence[Sequence[int]],
    sizes: Sequence[int],
    clock: Optional[Callable[[], datetime]] = None,
    id_generator: Optional[Callable[[], str]] = None,
) -> ParkingService:
    """Build an engine over a fresh in-memory slot inventory.

    Raises LayoutError when the distance matrix and size list disagree.
    """
    slots = initialize_parking_slots(entry_points, distances, sizes)
    logger.debug(f"Initialized {len(slots)} parking slots across {entry_points} entry points")
    return ParkingService(
        parking_slot_repo=InMemoryParkingSlotRepository(slots),
        parked_vehicle_repo=InMemoryParkedVehicleRepository(),
        clock=clock,
        id_generator=id_generator,
    )


def create_parking_service_from_settings(app_settings: Optional[Settings] = None) -> ParkingService:
    app_settings = app_settings or settings
    return create_parking_service(
        app_settings.ENTRY_POINTS,
        app_settings.SLOT_DISTANCES,
        app_settings.SLOT_SIZES,
    )


def get_parking_service(request: Request) -> ParkingService:
    return request.app.state.parking_service
