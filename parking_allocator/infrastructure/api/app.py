from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from parking_allocator.application.services.parking_service import ParkingService
from parking_allocator.infrastructure.api.dependencies import create_parking_service_from_settings
from parking_allocator.infrastructure.api.routers.parking import router as parking_router
from parking_allocator.shared.utils import logger


def create_app(service: Optional[ParkingService] = None) -> FastAPI:
    """Build the HTTP app around one engine instance.

    When no engine is given, one is built from settings; a bad slot layout
    raises here, before the app serves anything.
    """
    app = FastAPI(title="Parking Allocator API", version="1.0.0")
    app.state.parking_service = service or create_parking_service_from_settings()

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Malformed request to {request.url.path}: {exc.errors()}")
        return JSONResponse(status_code=400, content={"detail": "Malformed request body."})

    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    app.include_router(parking_router)
    return app
