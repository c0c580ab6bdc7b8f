"""Catalog schema baseline

Revision ID: 20261018_01
Revises:
Create Date: 2026-10-18
"""
# pylint: disable=no-member,invalid-name,wrong-import-order

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "20261018_01"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""

    op.create_table(
        "application",
        sa.Column("application_name", sa.Text(), primary_key=True),
    )
    op.create_table(
        "application_metadata",
        sa.Column("application_name", sa.Text(), primary_key=True),
        sa.Column("metadata_key", sa.Text(), primary_key=True),
        sa.Column("metadata_value", sa.Text(), nullable=False),
        sa.ForeignKeyConstraint(["application_name"], ["application.application_name"], ondelete="CASCADE"),
    )
    op.create_table(
        "environment",
        sa.Column("environment_name", sa.Text(), primary_key=True),
    )
    op.create_table(
        "environment_metadata",
        sa.Column("environment_name", sa.Text(), primary_key=True),
        sa.Column("metadata_key", sa.Text(), primary_key=True),
        sa.Column("metadata_value", sa.Text(), nullable=False),
        sa.ForeignKeyConstraint(["environment_name"], ["environment.environment_name"], ondelete="CASCADE"),
    )


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_table("environment_metadata")
    op.drop_table("environment")
    op.drop_table("application_metadata")
    op.drop_table("application")
