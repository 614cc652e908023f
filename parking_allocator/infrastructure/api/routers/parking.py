from fastapi import APIRouter, Depends, HTTPException

from parking_allocator.application.services.parking_service import ParkingService
from parking_allocator.infrastructure.api.dependencies import get_parking_service
from parking_allocator.infrastructure.api.schemas.parking import (
    ParkRequest, UnparkRequest, OperationResponse, ParkedVehiclesResponse,
    ParkedVehicleResponse, AvailableSlotsResponse, ParkingSlotResponse, OccupancyStatus
)

router = APIRouter(tags=["parking"])


@router.post("/park", response_model=OperationResponse)
def park_vehicle(
    park_data: ParkRequest,
    service: ParkingService = Depends(get_parking_service)
):
    if not park_data.plateNumber or not park_data.vehicleType:
        raise HTTPException(status_code=400, detail="Both vehicleType and plateNumber are required for parking.")
    outcome = service.park_vehicle(park_data.vehicleType, park_data.plateNumber)
    return {"result": outcome.message}


@router.post("/unpark", response_model=OperationResponse)
def unpark_vehicle(
    unpark_data: UnparkRequest,
    service: ParkingService = Depends(get_parking_service)
):
    if not unpark_data.plateNumber:
        raise HTTPException(status_code=400, detail="plateNumber is required for unparking.")
    outcome = service.unpark_vehicle(unpark_data.plateNumber)
    return {"result": outcome.message}


@router.get("/parked-vehicles", response_model=ParkedVehiclesResponse, response_model_by_alias=True)
def get_parked_vehicles(service: ParkingService = Depends(get_parking_service)):
    vehicles = service.get_all_parked_vehicles()
    return {"parkedVehicles": [ParkedVehicleResponse.from_vehicle(v) for v in vehicles]}


@router.get("/available-slots", response_model=AvailableSlotsResponse, response_model_by_alias=True)
def get_available_slots(
    vehicleType: str,
    service: ParkingService = Depends(get_parking_service)
):
    if not service.is_valid_vehicle_type(vehicleType):
        raise HTTPException(status_code=400, detail=f"Invalid vehicle type: {vehicleType}")
    slots = service.get_available_slots(vehicleType)
    return {
        "vehicleType": vehicleType.upper(),
        "availableSlots": [ParkingSlotResponse.from_slot(slot) for slot in slots]
    }


@router.get("/parking-status", response_model=OccupancyStatus)
def get_parking_status(service: ParkingService = Depends(get_parking_service)):
    return service.get_parking_status()
