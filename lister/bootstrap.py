"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from lister.api import create_api_application
from lister.config import AppSettings, config_load_settings
from lister.db import (
    SQLAlchemyApplicationStore,
    SQLAlchemyEnvironmentStore,
    db_create_engine,
    db_create_schema,
)


def bootstrap_create_application(settings: AppSettings | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Optional pre-loaded settings; loaded from the environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    applications_engine = db_create_engine(database_url=resolved_settings.resolved_applications_database_url)
    environments_engine = db_create_engine(database_url=resolved_settings.resolved_environments_database_url)
    return create_api_application(
        settings=resolved_settings,
        application_store=SQLAlchemyApplicationStore(engine=applications_engine),
        environment_store=SQLAlchemyEnvironmentStore(engine=environments_engine),
    )


def bootstrap_initialize_schema(settings: AppSettings | None = None) -> None:
    """Create catalog tables on both configured stores.

    Args:
        settings: Optional pre-loaded settings; loaded from the environment when omitted.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    applications_engine = db_create_engine(database_url=resolved_settings.resolved_applications_database_url)
    environments_engine = db_create_engine(database_url=resolved_settings.resolved_environments_database_url)
    try:
        db_create_schema(applications_engine, environments_engine)
    finally:
        applications_engine.dispose()
        environments_engine.dispose()
