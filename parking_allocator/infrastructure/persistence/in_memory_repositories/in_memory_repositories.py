from typing import Dict, List, Optional

from parking_allocator.domain.entities import ParkingSlot, ParkedVehicle
from parking_allocator.application.repositories import AbstractParkingSlotRepository, AbstractParkedVehicleRepository


class InMemoryParkingSlotRepository(AbstractParkingSlotRepository):
    def __init__(self, slots: List[ParkingSlot]):
        self._slots = list(slots)

    def get_all(self) -> List[ParkingSlot]:
        return list(self._slots)

    def get_unoccupied(self) -> List[ParkingSlot]:
        return [slot for slot in self._slots if not slot.occupied]

    def update(self, slot: ParkingSlot) -> ParkingSlot:
        if slot.index >= len(self._slots) or self._slots[slot.index] is not slot:
            raise KeyError(f"Slot {slot.index} does not belong to this inventory")
        return slot


class InMemoryParkedVehicleRepository(AbstractParkedVehicleRepository):
    def __init__(self):
        self._vehicles: Dict[str, ParkedVehicle] = {}

    def add(self, vehicle: ParkedVehicle) -> ParkedVehicle:
        if vehicle.vehicle_id in self._vehicles:
            raise KeyError(f"Vehicle id {vehicle.vehicle_id} is already registered")
        self._vehicles[vehicle.vehicle_id] = vehicle
        return vehicle

    def remove(self, vehicle_id: str) -> Optional[ParkedVehicle]:
        return self._vehicles.pop(vehicle_id, None)

    def get_by_id(self, vehicle_id: str) -> Optional[ParkedVehicle]:
        return self._vehicles.get(vehicle_id)

    def get_by_plate_number(self, plate_number: str) -> Optional[ParkedVehicle]:
        for vehicle in self._vehicles.values():
            if vehicle.plate_number == plate_number:
                return vehicle
        return None

    def is_plate_parked(self, plate_number: str) -> bool:
        return self.get_by_plate_number(plate_number) is not None

    def get_all(self) -> List[ParkedVehicle]:
        return list(self._vehicles.values())
