import asyncio
import logging
import sys

import uvicorn

from app import create_app
from core.config import settings
from db.schema import provision_storage

logger = logging.getLogger(__name__)

app = create_app()


def main() -> None:
    # The table must be verified before the socket is bound
    result = asyncio.run(provision_storage(settings.database))
    if not result.ok:
        logger.critical("Refusing to start: %s", result.error)
        sys.exit(1)

    logger.info("Starting server on http://%s:%s", settings.server.host, settings.server.port)
    uvicorn.run(
        app,
        host=settings.server.host,
        port=settings.server.port,
        log_level=settings.logging.level.lower(),
        access_log=settings.environment == "development",
    )


if __name__ == "__main__":
    main()
