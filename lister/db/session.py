"""Database engine and schema utilities.

This module centralizes database connectivity primitives to enforce the db-layer
boundary for all SQLAlchemy usage.
"""

from sqlalchemy import Engine, create_engine

from .schema import application_metadata_obj, environment_metadata_obj


def db_create_engine(database_url: str) -> Engine:
    """Create the SQLAlchemy engine for one catalog store.

    Args:
        database_url: SQLAlchemy database URL.

    Returns:
        Engine: Configured SQLAlchemy engine.

    Raises:
        ValueError: Raised when the database URL is blank.
    """

    if not database_url.strip():
        raise ValueError("database_url must not be blank")

    return create_engine(database_url, pool_pre_ping=True)


def db_create_schema(applications_engine: Engine, environments_engine: Engine) -> None:
    """Create catalog tables that do not exist yet.

    Intended for development and tests; Alembic owns production migrations.

    Args:
        applications_engine: Engine for the applications store.
        environments_engine: Engine for the environments store.

    Raises:
        ValueError: Raised when an engine is None.
    """

    if applications_engine is None or environments_engine is None:
        raise ValueError("engines must not be None")

    application_metadata_obj.create_all(applications_engine)
    environment_metadata_obj.create_all(environments_engine)
