from typing import List
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Development
    DEV_MODE: bool = Field(default=True, description="Enable debug mode")

    # FastAPI
    FASTAPI_HOST: str = Field(default="localhost", description="FastAPI host")
    FASTAPI_PORT: int = Field(default=8080, description="FastAPI port")

    # Parking layout
    ENTRY_POINTS: int = Field(default=3, description="Number of entry points")
    SLOT_DISTANCES: List[List[int]] = Field(
        default=[[1, 2, 3], [1, 2, 3], [1, 2, 3]],
        description="Distance of each slot column from each entry point (rows = entry points)"
    )
    SLOT_SIZES: List[int] = Field(
        default=[0, 1, 2],
        description="Size class per slot column: 0 = small, 1 = medium, 2 = large"
    )


# Create settings instance
settings = Settings()
