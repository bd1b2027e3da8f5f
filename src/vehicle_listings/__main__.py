"""Run the API server: ``python -m vehicle_listings``."""

from __future__ import annotations

import logging

import uvicorn
from dotenv import load_dotenv

from vehicle_listings.config import Settings
from vehicle_listings.entrypoints.http.app import build_app

logger = logging.getLogger("vehicle_listings")


def main() -> None:
    load_dotenv()
    settings = Settings.from_env()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = build_app(settings)

    logger.info("Server starting on %s:%d", settings.api_host, settings.api_port)
    logger.info("API documentation available at http://localhost:%d/docs", settings.api_port)

    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_config=None)


if __name__ == "__main__":
    main()
