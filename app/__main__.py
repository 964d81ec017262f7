from __future__ import annotations

import logging
import sys

import uvicorn
from pydantic import ValidationError

from app.core.config import get_settings
from app.main import create_app
from app.services.sms_service import SmsConfigurationError

logger = logging.getLogger("app")


def main() -> None:
    try:
        settings = get_settings()
    except ValidationError as exc:
        sys.exit(f"Invalid configuration: {exc}")

    logging.basicConfig(
        level=settings.log_level,
        format="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
    )

    try:
        app = create_app(settings)
    except SmsConfigurationError as exc:
        logger.error("%s", exc)
        sys.exit(1)

    logger.info("Server running at http://localhost:%s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
