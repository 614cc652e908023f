from datetime import datetime
from typing import Optional

from parking_allocator.domain.common import SizeClass, ParkingStatus


class ParkingSlot:
    def __init__(
        self, distance: int, size: SizeClass, index: int, entry_point: int, column: int, occupied: bool = False
    ):
        self.distance = distance
        self.size = size
        self.index = index
        self.entry_point = entry_point
        self.column = column
        self.occupied = occupied

    def __repr__(self) -> str:
        return (
            f"ParkingSlot(index={self.index}, distance={self.distance}, "
            f"size={self.size.abbreviation}, occupied={self.occupied})"
        )


class ParkedVehicle:
    def __init__(
        self,
        vehicle_id: str,
        plate_number: str,
        entry_time: datetime,
        slot: ParkingSlot,
        vehicle_type: SizeClass,
    ):
        self.vehicle_id = vehicle_id
        self.plate_number = plate_number
        self.entry_time = entry_time
        # Not owned; the slot inventory outlives the vehicle
        self.slot = slot
        self.vehicle_type = vehicle_type


class OperationResult:
    """Outcome of a park / unpark request.

    Business failures are reported here rather than raised; ``message`` is
    the text handed back to clients.
    """

    def __init__(
        self,
        status: ParkingStatus,
        message: str,
        vehicle_id: Optional[str] = None,
        charge: Optional[int] = None,
    ):
        self.status = status
        self.message = message
        self.vehicle_id = vehicle_id
        self.charge = charge

    def __str__(self) -> str:
        return self.message
