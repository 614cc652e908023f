from abc import ABC, abstractmethod
from typing import List, Optional

from parking_allocator.domain.entities import ParkingSlot, ParkedVehicle


class AbstractParkingSlotRepository(ABC):
    @abstractmethod
    def get_all(self) -> List[ParkingSlot]:
        pass

    @abstractmethod
    def get_unoccupied(self) -> List[ParkingSlot]:
        pass

    @abstractmethod
    def update(self, slot: ParkingSlot) -> ParkingSlot:
        pass


class AbstractParkedVehicleRepository(ABC):
    @abstractmethod
    def add(self, vehicle: ParkedVehicle) -> ParkedVehicle:
        pass

    @abstractmethod
    def remove(self, vehicle_id: str) -> Optional[ParkedVehicle]:
        pass

    @abstractmethod
    def get_by_id(self, vehicle_id: str) -> Optional[ParkedVehicle]:
        pass

    @abstractmethod
    def get_by_plate_number(self, plate_number: str) -> Optional[ParkedVehicle]:
        pass

    @abstractmethod
    def is_plate_parked(self, plate_number: str) -> bool:
        pass

    @abstractmethod
    def get_all(self) -> List[ParkedVehicle]:
        pass
