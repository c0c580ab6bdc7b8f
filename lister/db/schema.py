"""SQLAlchemy table definitions for the catalog stores.

Applications and environments live in separate table pairs so each store can
be pointed at its own database.
"""

from sqlalchemy import Column, ForeignKeyConstraint, MetaData, Table, Text

application_metadata_obj = MetaData()
environment_metadata_obj = MetaData()

application_table = Table(
    "application",
    application_metadata_obj,
    Column("application_name", Text(), primary_key=True),
)

application_metadata_table = Table(
    "application_metadata",
    application_metadata_obj,
    Column("application_name", Text(), primary_key=True),
    Column("metadata_key", Text(), primary_key=True),
    Column("metadata_value", Text(), nullable=False),
    ForeignKeyConstraint(["application_name"], ["application.application_name"], ondelete="CASCADE"),
)

environment_table = Table(
    "environment",
    environment_metadata_obj,
    Column("environment_name", Text(), primary_key=True),
)

environment_metadata_table = Table(
    "environment_metadata",
    environment_metadata_obj,
    Column("environment_name", Text(), primary_key=True),
    Column("metadata_key", Text(), primary_key=True),
    Column("metadata_value", Text(), nullable=False),
    ForeignKeyConstraint(["environment_name"], ["environment.environment_name"], ondelete="CASCADE"),
)
