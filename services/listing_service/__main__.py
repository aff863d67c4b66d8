"""Run the listing service with ``python -m listing_service``."""

import logging

import uvicorn

from listing_service.core.config import settings


def main() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(__name__).info("Starting listing service on port %s", settings.PORT)
    uvicorn.run("listing_service.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
