import uvicorn

from parking_allocator.config.settings_env import settings
from parking_allocator.infrastructure.api.app import create_app
from parking_allocator.shared.utils import logger


app = create_app()


def run():
    logger.info(f"Server is running on port {settings.FASTAPI_PORT}")
    uvicorn.run(app, host=settings.FASTAPI_HOST, port=settings.FASTAPI_PORT)


if __name__ == "__main__":
    run()
