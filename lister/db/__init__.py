"""Database layer package for all SQL and persistence boundaries."""

from .applications import SQLAlchemyApplicationStore
from .environments import SQLAlchemyEnvironmentStore
from .interfaces import ApplicationStorePort, EnvironmentStorePort
from .session import db_create_engine, db_create_schema

__all__ = [
    "ApplicationStorePort",
    "EnvironmentStorePort",
    "SQLAlchemyApplicationStore",
    "SQLAlchemyEnvironmentStore",
    "db_create_engine",
    "db_create_schema",
]
