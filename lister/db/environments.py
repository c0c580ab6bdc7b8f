"""Database service for environment records."""

from __future__ import annotations

import logging

from sqlalchemy import Engine, text
from sqlalchemy.exc import SQLAlchemyError

from lister.domain import EnvironmentRecord

from .interfaces import EnvironmentStorePort

logger = logging.getLogger(__name__)

ACCOUNT_METADATA_KEY = "account"


class SQLAlchemyEnvironmentStore(EnvironmentStorePort):
    """SQLAlchemy-backed environments store.

    The mandatory `account` attribute is persisted as an ordinary metadata row
    so it is returned inside the environment's metadata bag.
    """

    def __init__(self, engine: Engine):
        """Initialize environments store.

        Args:
            engine: SQLAlchemy engine used for all persistence operations.

        Raises:
            ValueError: Raised when engine is None.
        """

        if engine is None:
            raise ValueError("engine must not be None")
        self._engine = engine

    def db_environment_healthcheck(self) -> bool:
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1 FROM environment LIMIT 1"))
            return True
        except SQLAlchemyError as error:
            logger.warning("environments store health check failed: %s", error)
            return False

    def db_environment_list(self) -> list[str]:
        try:
            with self._engine.connect() as connection:
                rows = connection.execute(text("SELECT environment_name FROM environment")).all()
        except SQLAlchemyError as error:
            raise RuntimeError("failed to list environments") from error
        return [row[0] for row in rows]

    def db_environment_get(self, environment_name: str) -> EnvironmentRecord | None:
        try:
            with self._engine.connect() as connection:
                environment_row = connection.execute(
                    text("SELECT 1 FROM environment WHERE environment_name = :environment_name"),
                    {"environment_name": environment_name},
                ).first()
                if environment_row is None:
                    return None
                rows = connection.execute(
                    text(
                        "SELECT metadata_key, metadata_value FROM environment_metadata "
                        "WHERE environment_name = :environment_name"
                    ),
                    {"environment_name": environment_name},
                ).all()
        except SQLAlchemyError as error:
            raise RuntimeError(f"failed to read environment {environment_name}") from error
        return EnvironmentRecord(name=environment_name, metadata={row[0]: row[1] for row in rows})

    def db_environment_create(self, environment_name: str, account: str) -> EnvironmentRecord:
        """Create or replace an environment bound to the given account.

        Args:
            environment_name: Environment name.
            account: Owning account identifier.

        Returns:
            EnvironmentRecord: Stored record whose metadata holds only `account`.

        Raises:
            RuntimeError: Raised when persistence fails.
        """

        try:
            with self._engine.begin() as connection:
                connection.execute(
                    text("DELETE FROM environment_metadata WHERE environment_name = :environment_name"),
                    {"environment_name": environment_name},
                )
                connection.execute(
                    text(
                        "INSERT INTO environment (environment_name) VALUES (:environment_name) "
                        "ON CONFLICT (environment_name) DO NOTHING"
                    ),
                    {"environment_name": environment_name},
                )
                connection.execute(
                    text(
                        "INSERT INTO environment_metadata (environment_name, metadata_key, metadata_value) "
                        "VALUES (:environment_name, :metadata_key, :metadata_value) "
                        "ON CONFLICT (environment_name, metadata_key) "
                        "DO UPDATE SET metadata_value = excluded.metadata_value"
                    ),
                    {
                        "environment_name": environment_name,
                        "metadata_key": ACCOUNT_METADATA_KEY,
                        "metadata_value": account,
                    },
                )
        except SQLAlchemyError as error:
            raise RuntimeError(f"failed to create environment {environment_name}") from error
        return EnvironmentRecord(name=environment_name, metadata={ACCOUNT_METADATA_KEY: account})

    def db_environment_delete(self, environment_name: str) -> None:
        try:
            with self._engine.begin() as connection:
                connection.execute(
                    text("DELETE FROM environment_metadata WHERE environment_name = :environment_name"),
                    {"environment_name": environment_name},
                )
                connection.execute(
                    text("DELETE FROM environment WHERE environment_name = :environment_name"),
                    {"environment_name": environment_name},
                )
        except SQLAlchemyError as error:
            raise RuntimeError(f"failed to delete environment {environment_name}") from error
