from enum import Enum, IntEnum


class SizeClass(IntEnum):
    SMALL = 0
    MEDIUM = 1
    LARGE = 2

    @property
    def code(self) -> str:
        return self.name[0]

    @property
    def abbreviation(self) -> str:
        return f"{self.code}P"

    @classmethod
    def from_code(cls, code: str) -> "SizeClass":
        """Resolve a vehicle type code ("s", "m", "l", any case) to its size class."""
        for size in cls:
            if size.code.lower() == code.lower():
                return size
        raise ValueError(f"Unknown vehicle type: {code}")


class ParkingStatus(str, Enum):
    PARKED = "parked"
    UNPARKED = "unparked"
    INVALID_VEHICLE_TYPE = "invalid_vehicle_type"
    DUPLICATE_PLATE_NUMBER = "duplicate_plate_number"
    NO_AVAILABLE_SLOT = "no_available_slot"
    VEHICLE_NOT_FOUND = "vehicle_not_found"
    RECENT_RETURN_GRACE_PERIOD = "recent_return_grace_period"
