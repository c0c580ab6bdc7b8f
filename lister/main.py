"""Main module entrypoint for local runtime execution.

This module validates startup configuration and launches the FastAPI service.
"""

import argparse
import logging

import uvicorn
from fastapi import FastAPI

from lister.bootstrap import bootstrap_create_application, bootstrap_initialize_schema
from lister.config import config_load_settings

logger = logging.getLogger(__name__)


def create_application() -> FastAPI:
    """Application factory used by uvicorn, including reload mode."""

    return bootstrap_create_application()


def main() -> None:
    """Run selected runtime command with validated startup configuration.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
    """

    argument_parser = argparse.ArgumentParser(description="Lister catalog service runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="api",
        choices=("api", "init-db"),
        help="Runtime command: `api` starts server, `init-db` creates catalog tables on both stores",
        type=str,
    )
    parsed_arguments = argument_parser.parse_args()

    settings = config_load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if parsed_arguments.command == "init-db":
        bootstrap_initialize_schema(settings)
        logger.info("catalog tables created")
        return

    logger.info(
        "starting %s on %s:%s (environment=%s)",
        settings.service_name,
        settings.application_host,
        settings.application_port,
        settings.environment_name,
    )
    uvicorn.run(
        "lister.main:create_application",
        factory=True,
        host=settings.application_host,
        port=settings.application_port,
        reload=settings.application_reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
