"""Run the Product Service: python -m product_service"""

import logging

import uvicorn

from product_service.config import get_settings
from product_service.logs import configure_logging

logger = logging.getLogger("product_service")


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Server is running on http://%s:%d", settings.host, settings.port)
    uvicorn.run(
        "product_service.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
