from .abstract_repositories import (
    AbstractParkingSlotRepository,
    AbstractParkedVehicleRepository,
)

__all__ = [
    "AbstractParkingSlotRepository",
    "AbstractParkedVehicleRepository",
]
