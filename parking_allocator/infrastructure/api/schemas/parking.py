from pydantic import BaseModel, Field, field_validator, ConfigDict
from datetime import datetime, timezone
from typing import Optional, List

from parking_allocator.domain.common import SizeClass
from parking_allocator.domain.entities import ParkingSlot, ParkedVehicle


class ParkRequest(BaseModel):
    plateNumber: Optional[str] = None
    vehicleType: Optional[str] = None


class UnparkRequest(BaseModel):
    plateNumber: Optional[str] = None


class OperationResponse(BaseModel):
    result: str


class ParkingSlotResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    index: int
    entry_point: int = Field(..., alias="entryPoint")
    distance_from_entry_point: int = Field(..., alias="distanceFromEntryPoint", ge=0)
    size_class: str = Field(..., alias="sizeClass")
    occupied: bool

    @classmethod
    def from_slot(cls, slot: ParkingSlot) -> "ParkingSlotResponse":
        return cls(
            index=slot.index,
            entry_point=slot.entry_point,
            distance_from_entry_point=slot.distance,
            size_class=slot.size.abbreviation,
            occupied=slot.occupied,
        )


class ParkedVehicleResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    vehicle_id: str = Field(..., alias="vehicleId")
    plate_number: str = Field(..., alias="plateNumber")
    entry_time: datetime = Field(..., alias="entryTime")
    vehicle_type: str = Field(..., alias="vehicleType")
    assigned_slot: ParkingSlotResponse = Field(..., alias="assignedSlot")

    @field_validator('entry_time')
    @classmethod
    def make_datetime_aware(cls, dt: datetime) -> datetime:
        if dt.tzinfo is None:
            return dt.replace(tzinfo=timezone.utc)
        return dt

    @field_validator('vehicle_type', mode='before')
    @classmethod
    def size_to_code(cls, v):
        if isinstance(v, SizeClass):
            return v.code
        return v

    @classmethod
    def from_vehicle(cls, vehicle: ParkedVehicle) -> "ParkedVehicleResponse":
        return cls(
            vehicle_id=vehicle.vehicle_id,
            plate_number=vehicle.plate_number,
            entry_time=vehicle.entry_time,
            vehicle_type=vehicle.vehicle_type,
            assigned_slot=ParkingSlotResponse.from_slot(vehicle.slot),
        )


class ParkedVehiclesResponse(BaseModel):
    parkedVehicles: List[ParkedVehicleResponse]


class AvailableSlotsResponse(BaseModel):
    vehicleType: str
    availableSlots: List[ParkingSlotResponse]


class OccupancyStatus(BaseModel):
    total_slots: int
    occupied_slots: int
    available_slots: int
    occupancy_rate: float
    sizes: List[dict]
    entry_points: List[dict]
