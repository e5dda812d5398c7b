"""FamilyHub Server - FastAPI Application Entry Point."""

import logging

import uvicorn

from familyhub.app import create_app
from familyhub.config import Settings

settings = Settings()
app = create_app(settings)


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
