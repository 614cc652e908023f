import threading
import uuid
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional
from loguru import logger

from parking_allocator.application.repositories import AbstractParkingSlotRepository, AbstractParkedVehicleRepository
from parking_allocator.domain import fees
from parking_allocator.domain.common import SizeClass, ParkingStatus
from parking_allocator.domain.entities import ParkingSlot, ParkedVehicle, OperationResult


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def random_vehicle_id() -> str:
    """122 random bits per id; collisions with a live id are re-drawn by the service."""
    return uuid.uuid4().hex


class ParkingService:
    """Slot allocation and billing over one slot inventory and one parked-vehicle registry.

    Every public operation holds the service lock, so slot occupancy and
    registry membership change together as seen by concurrent readers.
    """

    def __init__(
        self,
        parking_slot_repo: AbstractParkingSlotRepository,
        parked_vehicle_repo: AbstractParkedVehicleRepository,
        clock: Optional[Callable[[], datetime]] = None,
        id_generator: Optional[Callable[[], str]] = None,
    ):
        self.parking_slot_repo = parking_slot_repo
        self.parked_vehicle_repo = parked_vehicle_repo
        self.clock = clock or utc_now
        self.id_generator = id_generator or random_vehicle_id
        self._lock = threading.RLock()

    def park_vehicle(self, vehicle_type: str, plate_number: str) -> OperationResult:
        with self._lock:
            if not self.is_valid_vehicle_type(vehicle_type):
                logger.warning(f"Rejected vehicle {plate_number}: invalid type {vehicle_type!r}")
                return OperationResult(ParkingStatus.INVALID_VEHICLE_TYPE, f"Invalid vehicle type: {vehicle_type}")

            if self.parked_vehicle_repo.is_plate_parked(plate_number):
                logger.warning(f"Rejected vehicle {plate_number}: already parked")
                return OperationResult(
                    ParkingStatus.DUPLICATE_PLATE_NUMBER,
                    f"Vehicle with plate number {plate_number} is already parked.",
                )

            # Only reachable when the duplicate check above misses a registered plate
            returning_vehicle = self.parked_vehicle_repo.get_by_plate_number(plate_number)
            if returning_vehicle:
                return self._settle_returning_vehicle(returning_vehicle)

            available_slots = self.get_available_slots(vehicle_type)
            if not available_slots:
                logger.warning(f"No available slots for vehicle {plate_number} of type {vehicle_type}")
                return OperationResult(ParkingStatus.NO_AVAILABLE_SLOT, "No available slots for this vehicle type.")

            closest_slot = self.find_closest_slot(available_slots)
            closest_slot.occupied = True
            self.parking_slot_repo.update(closest_slot)

            vehicle_id = self._generate_vehicle_id()
            self.parked_vehicle_repo.add(
                ParkedVehicle(
                    vehicle_id=vehicle_id,
                    plate_number=plate_number,
                    entry_time=self.clock(),
                    slot=closest_slot,
                    vehicle_type=SizeClass.from_code(vehicle_type),
                )
            )

            logger.info(f"Vehicle {plate_number} parked at slot {closest_slot.index} as {vehicle_id}")
            return OperationResult(
                ParkingStatus.PARKED,
                f"Vehicle parked in ({closest_slot.size.abbreviation}) slot with distance "
                f"{closest_slot.distance}. Vehicle ID: {vehicle_id}",
                vehicle_id=vehicle_id,
            )

    def unpark_vehicle(self, plate_number: str) -> OperationResult:
        with self._lock:
            vehicle = self.parked_vehicle_repo.get_by_plate_number(plate_number)

            if not vehicle:
                logger.warning(f"Unpark requested for unknown vehicle {plate_number}")
                return OperationResult(
                    ParkingStatus.VEHICLE_NOT_FOUND,
                    f"No vehicle with plate number {plate_number} is currently parked.",
                )

            return self._release(vehicle, self.calculate_elapsed_time(vehicle.entry_time))

    def _settle_returning_vehicle(self, vehicle: ParkedVehicle) -> OperationResult:
        elapsed_time = self.calculate_elapsed_time(vehicle.entry_time)

        if elapsed_time <= fees.GRACE_PERIOD_UNITS:
            logger.info(f"Vehicle {vehicle.plate_number} returned within the grace period")
            return OperationResult(
                ParkingStatus.RECENT_RETURN_GRACE_PERIOD,
                f"Vehicle with plate number {vehicle.plate_number} left and returned within one hour. "
                f"Continuous rate applied.",
                vehicle_id=vehicle.vehicle_id,
            )

        return self._release(vehicle, elapsed_time)

    def _release(self, vehicle: ParkedVehicle, elapsed_time: int) -> OperationResult:
        total_charge = self.calculate_total_charge(vehicle.slot.size, elapsed_time)

        self.parked_vehicle_repo.remove(vehicle.vehicle_id)
        vehicle.slot.occupied = False
        self.parking_slot_repo.update(vehicle.slot)

        logger.info(f"Vehicle {vehicle.plate_number} unparked from slot {vehicle.slot.index}. Charge: {total_charge}")
        return OperationResult(
            ParkingStatus.UNPARKED,
            f"Vehicle with plate number {vehicle.plate_number} unparked. Total charge: {total_charge} pesos.",
            vehicle_id=vehicle.vehicle_id,
            charge=total_charge,
        )

    @staticmethod
    def is_valid_vehicle_type(vehicle_type: str) -> bool:
        try:
            SizeClass.from_code(vehicle_type)
        except ValueError:
            return False
        return True

    @staticmethod
    def is_slot_compatible(slot_size: SizeClass, vehicle_type: str) -> bool:
        """Small vehicles fit anywhere, medium needs medium or large, large needs large."""
        try:
            vehicle_size = SizeClass.from_code(vehicle_type)
        except ValueError:
            return False
        return slot_size >= vehicle_size

    @staticmethod
    def find_closest_slot(slots: List[ParkingSlot]) -> ParkingSlot:
        # min() keeps the first of equally distant slots
        return min(slots, key=lambda slot: slot.distance)

    def get_available_slots(self, vehicle_type: str) -> List[ParkingSlot]:
        with self._lock:
            compatible = [
                slot for slot in self.parking_slot_repo.get_unoccupied()
                if self.is_slot_compatible(slot.size, vehicle_type)
            ]
            return sorted(compatible, key=lambda slot: (slot.distance, slot.size))

    def get_all_parked_vehicles(self) -> List[ParkedVehicle]:
        with self._lock:
            return self.parked_vehicle_repo.get_all()

    def calculate_elapsed_time(self, entry_time: datetime) -> int:
        return fees.calculate_elapsed_time(entry_time, self.clock())

    @staticmethod
    def calculate_total_charge(slot_size: SizeClass, elapsed_time: int) -> int:
        return fees.calculate_total_charge(slot_size, elapsed_time)

    def get_parking_status(self) -> Dict:
        with self._lock:
            snapshot = [(slot.size, slot.entry_point, slot.occupied) for slot in self.parking_slot_repo.get_all()]

        total_slots = len(snapshot)
        occupied_slots = len([occupied for _, _, occupied in snapshot if occupied])

        size_stats = {}
        entry_point_stats = {}
        for size, entry_point, occupied in snapshot:
            for stats, key in ((size_stats, size), (entry_point_stats, entry_point)):
                if key not in stats:
                    stats[key] = {"total": 0, "occupied": 0}
                stats[key]["total"] += 1
                if occupied:
                    stats[key]["occupied"] += 1

        sizes = []
        for size in sorted(size_stats.keys()):
            stats = size_stats[size]
            sizes.append({
                "size": size.abbreviation,
                "total": stats["total"],
                "occupied": stats["occupied"],
                "available": stats["total"] - stats["occupied"]
            })

        entry_points = []
        for entry_point in sorted(entry_point_stats.keys()):
            stats = entry_point_stats[entry_point]
            entry_points.append({
                "entry_point": entry_point,
                "total": stats["total"],
                "occupied": stats["occupied"],
                "available": stats["total"] - stats["occupied"]
            })

        occupancy_rate = (occupied_slots / total_slots * 100) if total_slots > 0 else 0

        return {
            "total_slots": total_slots,
            "occupied_slots": occupied_slots,
            "available_slots": total_slots - occupied_slots,
            "occupancy_rate": round(occupancy_rate, 2),
            "sizes": sizes,
            "entry_points": entry_points
        }

    def _generate_vehicle_id(self) -> str:
        vehicle_id = self.id_generator()
        while self.parked_vehicle_repo.get_by_id(vehicle_id) is not None:
            vehicle_id = self.id_generator()
        return vehicle_id
