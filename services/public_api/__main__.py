"""Run the public API with ``python -m public_api``."""

import logging

import uvicorn

from public_api.core.config import settings


def main() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(__name__).info(
        "Starting public API on port %s (listings: %s, users: %s)",
        settings.PORT,
        settings.LISTING_SERVICE_URL,
        settings.USER_SERVICE_URL,
    )
    uvicorn.run("public_api.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
