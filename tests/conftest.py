"""Shared fixtures and in-memory store doubles for API tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from lister.api.application import create_api_application
from lister.config import AppSettings
from lister.domain import ApplicationRecord, EnvironmentRecord, MetadataItem


class InMemoryApplicationStore:
    """Dict-backed applications store double."""

    def __init__(self, healthy: bool = True) -> None:
        self.healthy = healthy
        self.applications: dict[str, dict[str, str]] = {}

    def db_application_healthcheck(self) -> bool:
        return self.healthy

    def db_application_list(self) -> list[str]:
        return list(self.applications)

    def db_application_list_full(self) -> list[ApplicationRecord]:
        return [ApplicationRecord(name=name, metadata=dict(metadata)) for name, metadata in self.applications.items()]

    def db_application_create(self, application_name: str) -> ApplicationRecord:
        self.applications[application_name] = {}
        return ApplicationRecord(name=application_name, metadata={})

    def db_application_get(self, application_name: str) -> ApplicationRecord | None:
        if application_name not in self.applications:
            return None
        return ApplicationRecord(name=application_name, metadata=dict(self.applications[application_name]))

    def db_application_delete(self, application_name: str) -> None:
        self.applications.pop(application_name, None)

    def db_application_metadata_update(
        self,
        application_name: str,
        metadata_key: str,
        metadata_value: str,
    ) -> MetadataItem | None:
        if application_name not in self.applications:
            return None
        self.applications[application_name][metadata_key] = metadata_value
        return MetadataItem(key=metadata_key, value=metadata_value)

    def db_application_metadata_get(self, application_name: str, metadata_key: str) -> MetadataItem | None:
        metadata = self.applications.get(application_name)
        if metadata is None or metadata_key not in metadata:
            return None
        return MetadataItem(key=metadata_key, value=metadata[metadata_key])

    def db_application_metadata_delete(self, application_name: str, metadata_key: str) -> None:
        self.applications.get(application_name, {}).pop(metadata_key, None)


class InMemoryEnvironmentStore:
    """Dict-backed environments store double."""

    def __init__(self, healthy: bool = True) -> None:
        self.healthy = healthy
        self.environments: dict[str, dict[str, str]] = {}

    def db_environment_healthcheck(self) -> bool:
        return self.healthy

    def db_environment_list(self) -> list[str]:
        return list(self.environments)

    def db_environment_get(self, environment_name: str) -> EnvironmentRecord | None:
        if environment_name not in self.environments:
            return None
        return EnvironmentRecord(name=environment_name, metadata=dict(self.environments[environment_name]))

    def db_environment_create(self, environment_name: str, account: str) -> EnvironmentRecord:
        self.environments[environment_name] = {"account": account}
        return EnvironmentRecord(name=environment_name, metadata={"account": account})

    def db_environment_delete(self, environment_name: str) -> None:
        self.environments.pop(environment_name, None)


def build_settings() -> AppSettings:
    """Create deterministic settings for API creation."""

    return AppSettings(
        _env_file=None,
        environment_name="test",
        database_url="sqlite://",
    )


@pytest.fixture
def application_store() -> InMemoryApplicationStore:
    return InMemoryApplicationStore()


@pytest.fixture
def environment_store() -> InMemoryEnvironmentStore:
    return InMemoryEnvironmentStore()


@pytest.fixture
def client(application_store: InMemoryApplicationStore, environment_store: InMemoryEnvironmentStore) -> TestClient:
    application = create_api_application(build_settings(), application_store, environment_store)
    return TestClient(application)


@pytest.fixture
def build_client():
    """Return a factory building a test client around arbitrary store doubles."""

    def _build_client(application_store, environment_store, **client_options) -> TestClient:
        application = create_api_application(build_settings(), application_store, environment_store)
        return TestClient(application, **client_options)

    return _build_client
