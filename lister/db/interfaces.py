"""Typed interfaces for database-layer services.

All SQL access must remain in the db package and its submodules. Lookups
return an explicit record or `None`; callers never infer absence from an
empty or falsy payload.
"""

from typing import Protocol

from lister.domain import ApplicationRecord, EnvironmentRecord, MetadataItem


class ApplicationStorePort(Protocol):
    """Port definition for application persistence and health probing."""

    def db_application_healthcheck(self) -> bool:
        """Check the applications store.

        Returns:
            bool: True when the store answered a lightweight query.
        """

    def db_application_list(self) -> list[str]:
        """Return the names of all stored applications, in store order."""

    def db_application_list_full(self) -> list[ApplicationRecord]:
        """Return every stored application with its full metadata."""

    def db_application_create(self, application_name: str) -> ApplicationRecord:
        """Create or replace an application with empty metadata.

        Args:
            application_name: Application name.

        Returns:
            ApplicationRecord: Stored application record.

        Raises:
            RuntimeError: Raised when persistence fails.
        """

    def db_application_get(self, application_name: str) -> ApplicationRecord | None:
        """Return the named application, or None when absent."""

    def db_application_delete(self, application_name: str) -> None:
        """Delete the named application and all its metadata. No-op when absent."""

    def db_application_metadata_update(
        self,
        application_name: str,
        metadata_key: str,
        metadata_value: str,
    ) -> MetadataItem | None:
        """Upsert one metadata item.

        Args:
            application_name: Owning application name.
            metadata_key: Metadata key.
            metadata_value: Metadata value.

        Returns:
            MetadataItem | None: Stored item, or None when the application is absent.

        Raises:
            RuntimeError: Raised when persistence fails.
        """

    def db_application_metadata_get(self, application_name: str, metadata_key: str) -> MetadataItem | None:
        """Return one metadata item, or None when the application or key is absent."""

    def db_application_metadata_delete(self, application_name: str, metadata_key: str) -> None:
        """Delete one metadata item. No-op when absent."""


class EnvironmentStorePort(Protocol):
    """Port definition for environment persistence and health probing."""

    def db_environment_healthcheck(self) -> bool:
        """Check the environments store.

        Returns:
            bool: True when the store answered a lightweight query.
        """

    def db_environment_list(self) -> list[str]:
        """Return the names of all stored environments, in store order."""

    def db_environment_get(self, environment_name: str) -> EnvironmentRecord | None:
        """Return the named environment, or None when absent."""

    def db_environment_create(self, environment_name: str, account: str) -> EnvironmentRecord:
        """Create or replace an environment bound to the given account.

        Args:
            environment_name: Environment name.
            account: Owning account identifier, stored as `account` metadata.

        Returns:
            EnvironmentRecord: Stored environment record.

        Raises:
            RuntimeError: Raised when persistence fails.
        """

    def db_environment_delete(self, environment_name: str) -> None:
        """Delete the named environment and all its metadata. No-op when absent."""
