"""
Process entry point: load configuration and serve the app with uvicorn.

On SIGINT/SIGTERM uvicorn stops accepting connections and gives in-flight
requests SHUTDOWN_GRACE_PERIOD seconds to finish before closing them.
"""

import logging
import sys

import uvicorn
from pydantic import ValidationError

from warehouse_api.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger("warehouse_api.server")


def main() -> None:
    try:
        settings = get_settings()
    except ValidationError as e:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
        logger.critical(f"Invalid configuration, refusing to start: {e}")
        sys.exit(1)

    logging.basicConfig(level=settings.LOG_LEVEL.upper(), format=LOG_FORMAT)
    logger.info(f"Server running on port {settings.PORT}")

    uvicorn.run(
        "warehouse_api.main:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        timeout_graceful_shutdown=settings.SHUTDOWN_GRACE_PERIOD,
    )
    logger.info("Server stopped")


if __name__ == "__main__":
    main()
