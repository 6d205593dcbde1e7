"""Command line entrypoint: ``python -m nodesim``."""

from __future__ import annotations

import logging

import uvicorn

from .app import create_app
from .config import get_settings
from .utils import configure_logging, describe_settings

logger = logging.getLogger("nodesim")


def main() -> None:
    settings = get_settings()
    configure_logging(settings)
    logger.info("\n%s", describe_settings(settings))

    app = create_app(settings)
    logger.info("Server running on http://%s:%d", settings.host, settings.port)
    # uvicorn exits the process with a non-zero status if the port cannot be bound.
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
