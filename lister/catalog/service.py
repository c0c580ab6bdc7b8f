"""Catalog service implementing application and environment operations.

The service owns existence checks and ordering; the API layer only shapes the
records it returns into HTTP responses.
"""

from __future__ import annotations

from lister.db import ApplicationStorePort, EnvironmentStorePort
from lister.domain import RESERVED_NAME_KEY, ApplicationRecord, EnvironmentRecord, MetadataItem

from .errors import CatalogBadRequestError, CatalogNotFoundError


def catalog_application_missing_message(application_name: str) -> str:
    return f"Application named: '{application_name}' does not exist."


def catalog_metadata_missing_message(application_name: str, metadata_key: str) -> str:
    return f"Can't find metadata '{metadata_key}' for application '{application_name}'."


def catalog_environment_missing_message(environment_name: str) -> str:
    return f"Environment named: '{environment_name}' does not exist."


def catalog_missing_parameter_message(parameter_name: str) -> str:
    return f"No '{parameter_name}' parameter defined."


class CatalogService:
    """Stateless facade over the applications and environments stores."""

    def __init__(self, application_store: ApplicationStorePort, environment_store: EnvironmentStorePort):
        """Initialize catalog service.

        Args:
            application_store: Applications persistence port.
            environment_store: Environments persistence port.

        Raises:
            ValueError: Raised when a store is None.
        """

        if application_store is None:
            raise ValueError("application_store must not be None")
        if environment_store is None:
            raise ValueError("environment_store must not be None")
        self._application_store = application_store
        self._environment_store = environment_store

    def catalog_application_list(self) -> list[str]:
        """Return application names sorted ascending."""

        return sorted(self._application_store.db_application_list())

    def catalog_application_list_full(self) -> list[ApplicationRecord]:
        """Return all applications with metadata, sorted by name ascending."""

        records = self._application_store.db_application_list_full()
        return sorted(records, key=lambda record: record.name)

    def catalog_application_create(self, application_name: str) -> ApplicationRecord:
        """Create or replace an application with empty metadata.

        No existence check is made; the last write wins.

        Args:
            application_name: Application name from the request path.

        Returns:
            ApplicationRecord: Created record.
        """

        return self._application_store.db_application_create(application_name)

    def catalog_application_get(self, application_name: str) -> ApplicationRecord:
        """Return one application.

        Args:
            application_name: Application name.

        Returns:
            ApplicationRecord: Stored application record.

        Raises:
            CatalogNotFoundError: Raised when the application does not exist.
        """

        record = self._application_store.db_application_get(application_name)
        if record is None:
            raise CatalogNotFoundError(catalog_application_missing_message(application_name))
        return record

    def catalog_application_delete(self, application_name: str) -> None:
        self._application_store.db_application_delete(application_name)

    def catalog_application_metadata_put(
        self,
        application_name: str,
        metadata_key: str,
        metadata_value: str | None,
    ) -> MetadataItem:
        """Upsert one metadata item on an existing application.

        Args:
            application_name: Owning application name.
            metadata_key: Metadata key from the request path.
            metadata_value: Metadata value from request parameters.

        Returns:
            MetadataItem: Stored item.

        Raises:
            CatalogBadRequestError: Raised when the value is missing or the key is reserved.
            CatalogNotFoundError: Raised when the application does not exist.
        """

        if metadata_value is None:
            raise CatalogBadRequestError(catalog_missing_parameter_message("value"))
        if metadata_key == RESERVED_NAME_KEY:
            raise CatalogBadRequestError(f"Metadata key '{RESERVED_NAME_KEY}' is reserved.")

        item = self._application_store.db_application_metadata_update(application_name, metadata_key, metadata_value)
        if item is None:
            raise CatalogNotFoundError(catalog_application_missing_message(application_name))
        return item

    def catalog_application_metadata_get(self, application_name: str, metadata_key: str) -> MetadataItem:
        """Return one metadata item.

        A missing application and a missing key share one not-found message.

        Raises:
            CatalogNotFoundError: Raised when the application or key does not exist.
        """

        item = self._application_store.db_application_metadata_get(application_name, metadata_key)
        if item is None:
            raise CatalogNotFoundError(catalog_metadata_missing_message(application_name, metadata_key))
        return item

    def catalog_application_metadata_delete(self, application_name: str, metadata_key: str) -> None:
        self._application_store.db_application_metadata_delete(application_name, metadata_key)

    def catalog_environment_list(self) -> list[str]:
        """Return environment names sorted ascending."""

        return sorted(self._environment_store.db_environment_list())

    def catalog_environment_get(self, environment_name: str) -> EnvironmentRecord:
        """Return one environment.

        Raises:
            CatalogNotFoundError: Raised when the environment does not exist.
        """

        record = self._environment_store.db_environment_get(environment_name)
        if record is None:
            raise CatalogNotFoundError(catalog_environment_missing_message(environment_name))
        return record

    def catalog_environment_create(self, environment_name: str, account: str | None) -> EnvironmentRecord:
        """Create or replace an environment bound to an account.

        Args:
            environment_name: Environment name from the request path.
            account: Account identifier from request parameters.

        Returns:
            EnvironmentRecord: Created record.

        Raises:
            CatalogBadRequestError: Raised when account is missing or blank; nothing is written.
        """

        if account is None or not account.strip():
            raise CatalogBadRequestError(catalog_missing_parameter_message("account"))
        return self._environment_store.db_environment_create(environment_name, account)

    def catalog_environment_delete(self, environment_name: str) -> None:
        self._environment_store.db_environment_delete(environment_name)
