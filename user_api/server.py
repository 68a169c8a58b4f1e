import logging

import uvicorn

from user_api.core.config import settings
from user_api.core.logging_config import configure_logging
from user_api.main import create_app
from user_api.routers.system import AVAILABLE_ROUTES

logger = logging.getLogger(__name__)


def main() -> None:
    configure_logging(settings.log_level)
    app = create_app()

    base_url = f"http://{settings.host}:{settings.port}"
    logger.info("%s %s listening on %s", settings.app_name, settings.app_version, base_url)
    for route in AVAILABLE_ROUTES:
        logger.info("  %s", route)

    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
