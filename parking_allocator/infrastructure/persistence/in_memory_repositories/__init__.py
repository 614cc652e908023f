from .in_memory_repositories import (
    InMemoryParkingSlotRepository,
    InMemoryParkedVehicleRepository,
)

__all__ = [
    "InMemoryParkingSlotRepository",
    "InMemoryParkedVehicleRepository",
]
