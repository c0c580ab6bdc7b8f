"""Regression tests for the Alembic catalog schema baseline."""

from __future__ import annotations

from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def test_migrations_apply_and_are_idempotent(tmp_path, monkeypatch) -> None:
    """Apply migrations on a fresh SQLite database and verify idempotent re-run."""

    database_url = f"sqlite:///{tmp_path / 'migrations.db'}"
    monkeypatch.setenv("DATABASE_URL", database_url)
    monkeypatch.chdir(PROJECT_ROOT)

    alembic_config = Config(str(PROJECT_ROOT / "alembic.ini"))
    alembic_config.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    command.upgrade(alembic_config, "head")
    command.upgrade(alembic_config, "head")

    verification_engine = create_engine(database_url)
    try:
        table_names = set(inspect(verification_engine).get_table_names())
    finally:
        verification_engine.dispose()

    assert {
        "application",
        "application_metadata",
        "environment",
        "environment_metadata",
        "alembic_version",
    }.issubset(table_names)


def test_migrations_downgrade_removes_catalog_tables(tmp_path, monkeypatch) -> None:
    database_url = f"sqlite:///{tmp_path / 'migrations.db'}"
    monkeypatch.setenv("DATABASE_URL", database_url)
    monkeypatch.chdir(PROJECT_ROOT)

    alembic_config = Config(str(PROJECT_ROOT / "alembic.ini"))
    alembic_config.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    command.upgrade(alembic_config, "head")
    command.downgrade(alembic_config, "base")

    verification_engine = create_engine(database_url)
    try:
        table_names = set(inspect(verification_engine).get_table_names())
    finally:
        verification_engine.dispose()

    assert table_names.isdisjoint({"application", "application_metadata", "environment", "environment_metadata"})
