"""Database service for application records and their metadata items."""

from __future__ import annotations

import logging

from sqlalchemy import Connection, Engine, text
from sqlalchemy.exc import SQLAlchemyError

from lister.domain import ApplicationRecord, MetadataItem

from .interfaces import ApplicationStorePort

logger = logging.getLogger(__name__)


class SQLAlchemyApplicationStore(ApplicationStorePort):
    """SQLAlchemy-backed applications store.

    Every mutating operation runs in a single transaction, so a replaced or
    deleted application never leaves orphaned metadata rows behind.
    """

    def __init__(self, engine: Engine):
        """Initialize applications store.

        Args:
            engine: SQLAlchemy engine used for all persistence operations.

        Raises:
            ValueError: Raised when engine is None.
        """

        if engine is None:
            raise ValueError("engine must not be None")
        self._engine = engine

    def db_application_healthcheck(self) -> bool:
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1 FROM application LIMIT 1"))
            return True
        except SQLAlchemyError as error:
            logger.warning("applications store health check failed: %s", error)
            return False

    def db_application_list(self) -> list[str]:
        try:
            with self._engine.connect() as connection:
                rows = connection.execute(text("SELECT application_name FROM application")).all()
        except SQLAlchemyError as error:
            raise RuntimeError("failed to list applications") from error
        return [row[0] for row in rows]

    def db_application_list_full(self) -> list[ApplicationRecord]:
        """Return every application with its metadata in one query.

        Returns:
            list[ApplicationRecord]: One record per application, in store order.

        Raises:
            RuntimeError: Raised when the read fails.
        """

        try:
            with self._engine.connect() as connection:
                rows = connection.execute(
                    text(
                        "SELECT a.application_name, m.metadata_key, m.metadata_value "
                        "FROM application a "
                        "LEFT JOIN application_metadata m ON m.application_name = a.application_name"
                    )
                ).all()
        except SQLAlchemyError as error:
            raise RuntimeError("failed to list applications with metadata") from error

        metadata_by_name: dict[str, dict[str, str]] = {}
        for application_name, metadata_key, metadata_value in rows:
            metadata = metadata_by_name.setdefault(application_name, {})
            if metadata_key is not None:
                metadata[metadata_key] = metadata_value
        return [ApplicationRecord(name=name, metadata=metadata) for name, metadata in metadata_by_name.items()]

    def db_application_create(self, application_name: str) -> ApplicationRecord:
        """Create an application, discarding any previous metadata under the same name.

        Args:
            application_name: Application name.

        Returns:
            ApplicationRecord: Stored record with empty metadata.

        Raises:
            RuntimeError: Raised when persistence fails.
        """

        try:
            with self._engine.begin() as connection:
                connection.execute(
                    text("DELETE FROM application_metadata WHERE application_name = :application_name"),
                    {"application_name": application_name},
                )
                connection.execute(
                    text(
                        "INSERT INTO application (application_name) VALUES (:application_name) "
                        "ON CONFLICT (application_name) DO NOTHING"
                    ),
                    {"application_name": application_name},
                )
        except SQLAlchemyError as error:
            raise RuntimeError(f"failed to create application {application_name}") from error
        return ApplicationRecord(name=application_name, metadata={})

    def db_application_get(self, application_name: str) -> ApplicationRecord | None:
        try:
            with self._engine.connect() as connection:
                if not self._db_application_exists(connection, application_name):
                    return None
                rows = connection.execute(
                    text(
                        "SELECT metadata_key, metadata_value FROM application_metadata "
                        "WHERE application_name = :application_name"
                    ),
                    {"application_name": application_name},
                ).all()
        except SQLAlchemyError as error:
            raise RuntimeError(f"failed to read application {application_name}") from error
        return ApplicationRecord(name=application_name, metadata={row[0]: row[1] for row in rows})

    def db_application_delete(self, application_name: str) -> None:
        try:
            with self._engine.begin() as connection:
                connection.execute(
                    text("DELETE FROM application_metadata WHERE application_name = :application_name"),
                    {"application_name": application_name},
                )
                connection.execute(
                    text("DELETE FROM application WHERE application_name = :application_name"),
                    {"application_name": application_name},
                )
        except SQLAlchemyError as error:
            raise RuntimeError(f"failed to delete application {application_name}") from error

    def db_application_metadata_update(
        self,
        application_name: str,
        metadata_key: str,
        metadata_value: str,
    ) -> MetadataItem | None:
        """Upsert one metadata item when the owning application exists.

        Args:
            application_name: Owning application name.
            metadata_key: Metadata key.
            metadata_value: Metadata value.

        Returns:
            MetadataItem | None: Stored item, or None when the application is absent.

        Raises:
            RuntimeError: Raised when persistence fails.
        """

        try:
            with self._engine.begin() as connection:
                if not self._db_application_exists(connection, application_name):
                    return None
                connection.execute(
                    text(
                        "INSERT INTO application_metadata (application_name, metadata_key, metadata_value) "
                        "VALUES (:application_name, :metadata_key, :metadata_value) "
                        "ON CONFLICT (application_name, metadata_key) "
                        "DO UPDATE SET metadata_value = excluded.metadata_value"
                    ),
                    {
                        "application_name": application_name,
                        "metadata_key": metadata_key,
                        "metadata_value": metadata_value,
                    },
                )
        except SQLAlchemyError as error:
            raise RuntimeError(f"failed to update metadata {metadata_key} for application {application_name}") from error
        return MetadataItem(key=metadata_key, value=metadata_value)

    def db_application_metadata_get(self, application_name: str, metadata_key: str) -> MetadataItem | None:
        try:
            with self._engine.connect() as connection:
                row = connection.execute(
                    text(
                        "SELECT metadata_value FROM application_metadata "
                        "WHERE application_name = :application_name AND metadata_key = :metadata_key"
                    ),
                    {"application_name": application_name, "metadata_key": metadata_key},
                ).first()
        except SQLAlchemyError as error:
            raise RuntimeError(f"failed to read metadata {metadata_key} for application {application_name}") from error
        if row is None:
            return None
        return MetadataItem(key=metadata_key, value=row[0])

    def db_application_metadata_delete(self, application_name: str, metadata_key: str) -> None:
        try:
            with self._engine.begin() as connection:
                connection.execute(
                    text(
                        "DELETE FROM application_metadata "
                        "WHERE application_name = :application_name AND metadata_key = :metadata_key"
                    ),
                    {"application_name": application_name, "metadata_key": metadata_key},
                )
        except SQLAlchemyError as error:
            raise RuntimeError(f"failed to delete metadata {metadata_key} for application {application_name}") from error

    @staticmethod
    def _db_application_exists(connection: Connection, application_name: str) -> bool:
        row = connection.execute(
            text("SELECT 1 FROM application WHERE application_name = :application_name"),
            {"application_name": application_name},
        ).first()
        return row is not None
