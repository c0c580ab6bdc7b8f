"""Tests for SQLAlchemy catalog stores against a temporary SQLite database."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import text

from lister.api.application import create_api_application
from lister.config import AppSettings
from lister.db import SQLAlchemyApplicationStore, SQLAlchemyEnvironmentStore, db_create_engine, db_create_schema
from lister.domain import ApplicationRecord, EnvironmentRecord, MetadataItem


@pytest.fixture
def engine(tmp_path):
    database_engine = db_create_engine(f"sqlite:///{tmp_path / 'catalog.db'}")
    db_create_schema(database_engine, database_engine)
    yield database_engine
    database_engine.dispose()


@pytest.fixture
def application_store(engine) -> SQLAlchemyApplicationStore:
    return SQLAlchemyApplicationStore(engine=engine)


@pytest.fixture
def environment_store(engine) -> SQLAlchemyEnvironmentStore:
    return SQLAlchemyEnvironmentStore(engine=engine)


def test_db_engine_rejects_blank_url() -> None:
    with pytest.raises(ValueError):
        db_create_engine("   ")


def test_db_application_store_rejects_missing_engine() -> None:
    with pytest.raises(ValueError):
        SQLAlchemyApplicationStore(engine=None)


def test_db_application_create_and_get(application_store) -> None:
    created = application_store.db_application_create("foo")

    assert created == ApplicationRecord(name="foo", metadata={})
    assert application_store.db_application_get("foo") == ApplicationRecord(name="foo", metadata={})
    assert application_store.db_application_get("ghost") is None


def test_db_application_create_replaces_previous_metadata(application_store) -> None:
    """Re-creating an application discards every metadata row it had."""

    application_store.db_application_create("foo")
    application_store.db_application_metadata_update("foo", "color", "red")

    application_store.db_application_create("foo")

    assert application_store.db_application_get("foo") == ApplicationRecord(name="foo", metadata={})
    assert application_store.db_application_list() == ["foo"]


def test_db_application_metadata_update_upserts(application_store) -> None:
    application_store.db_application_create("foo")

    first = application_store.db_application_metadata_update("foo", "color", "red")
    second = application_store.db_application_metadata_update("foo", "color", "blue")

    assert first == MetadataItem(key="color", value="red")
    assert second == MetadataItem(key="color", value="blue")
    assert application_store.db_application_metadata_get("foo", "color") == MetadataItem(key="color", value="blue")
    assert application_store.db_application_get("foo").metadata == {"color": "blue"}


def test_db_application_metadata_update_returns_none_for_missing_application(application_store, engine) -> None:
    result = application_store.db_application_metadata_update("ghost", "color", "red")

    assert result is None
    with engine.connect() as connection:
        row_count = connection.execute(text("SELECT count(*) FROM application_metadata")).scalar_one()
    assert row_count == 0


def test_db_application_metadata_get_returns_none_for_missing_key(application_store) -> None:
    application_store.db_application_create("foo")

    assert application_store.db_application_metadata_get("foo", "color") is None
    assert application_store.db_application_metadata_get("ghost", "color") is None


def test_db_application_metadata_delete_is_a_noop_when_absent(application_store) -> None:
    application_store.db_application_create("foo")
    application_store.db_application_metadata_update("foo", "color", "red")

    application_store.db_application_metadata_delete("foo", "color")
    application_store.db_application_metadata_delete("foo", "color")
    application_store.db_application_metadata_delete("ghost", "color")

    assert application_store.db_application_metadata_get("foo", "color") is None


def test_db_application_delete_cascades_to_metadata(application_store, engine) -> None:
    """Deleting an application removes its row and all metadata rows together."""

    application_store.db_application_create("foo")
    application_store.db_application_metadata_update("foo", "color", "red")
    application_store.db_application_metadata_update("foo", "owner", "team-a")

    application_store.db_application_delete("foo")
    application_store.db_application_delete("foo")

    assert application_store.db_application_get("foo") is None
    assert application_store.db_application_metadata_get("foo", "color") is None
    with engine.connect() as connection:
        row_count = connection.execute(text("SELECT count(*) FROM application_metadata")).scalar_one()
    assert row_count == 0


def test_db_application_list_full_groups_metadata_by_application(application_store) -> None:
    application_store.db_application_create("beta")
    application_store.db_application_create("alpha")
    application_store.db_application_metadata_update("beta", "color", "red")
    application_store.db_application_metadata_update("beta", "owner", "team-a")

    records = sorted(application_store.db_application_list_full(), key=lambda record: record.name)

    assert records == [
        ApplicationRecord(name="alpha", metadata={}),
        ApplicationRecord(name="beta", metadata={"color": "red", "owner": "team-a"}),
    ]
    assert sorted(application_store.db_application_list()) == ["alpha", "beta"]


def test_db_environment_create_stores_account_as_metadata(environment_store) -> None:
    created = environment_store.db_environment_create("prod", "acme")

    assert created == EnvironmentRecord(name="prod", metadata={"account": "acme"})
    assert environment_store.db_environment_get("prod") == EnvironmentRecord(name="prod", metadata={"account": "acme"})
    assert environment_store.db_environment_get("ghost") is None


def test_db_environment_create_replaces_previous_account(environment_store) -> None:
    environment_store.db_environment_create("prod", "acme")

    environment_store.db_environment_create("prod", "globex")

    assert environment_store.db_environment_get("prod").metadata == {"account": "globex"}
    assert environment_store.db_environment_list() == ["prod"]


def test_db_environment_delete_is_idempotent(environment_store) -> None:
    environment_store.db_environment_create("prod", "acme")

    environment_store.db_environment_delete("prod")
    environment_store.db_environment_delete("prod")

    assert environment_store.db_environment_get("prod") is None
    assert environment_store.db_environment_list() == []


def test_db_healthchecks_succeed_when_tables_exist(application_store, environment_store) -> None:
    assert application_store.db_application_healthcheck() is True
    assert environment_store.db_environment_healthcheck() is True


def test_db_healthchecks_fail_without_schema(tmp_path) -> None:
    """Checks report failure instead of raising when their tables are missing."""

    bare_engine = db_create_engine(f"sqlite:///{tmp_path / 'empty.db'}")
    try:
        assert SQLAlchemyApplicationStore(engine=bare_engine).db_application_healthcheck() is False
        assert SQLAlchemyEnvironmentStore(engine=bare_engine).db_environment_healthcheck() is False
    finally:
        bare_engine.dispose()


def test_db_reads_raise_runtime_error_without_schema(tmp_path) -> None:
    bare_engine = db_create_engine(f"sqlite:///{tmp_path / 'empty.db'}")
    try:
        with pytest.raises(RuntimeError):
            SQLAlchemyApplicationStore(engine=bare_engine).db_application_list()
    finally:
        bare_engine.dispose()


def test_db_stores_serve_api_end_to_end(application_store, environment_store) -> None:
    """Drive the API over real SQLAlchemy stores through the versioned mount."""

    settings = AppSettings(_env_file=None, database_url="sqlite://")
    client = TestClient(create_api_application(settings, application_store, environment_store))

    assert client.put("/1.x/applications/foo").status_code == 201
    assert client.put("/1.x/applications/foo/color", json={"value": "red"}).status_code == 201
    assert client.put("/1.x/environments/prod", params={"account": "acme"}).status_code == 201

    assert client.get("/1.x/applications", params={"view": "full"}).json() == {
        "applications": [{"name": "foo", "metadata": {"color": "red"}}]
    }
    assert client.get("/1.x/environments/prod").json() == {"name": "prod", "metadata": {"account": "acme"}}
    assert client.get("/healthcheck").json()["success"] is True
