"""Create folders and notes tables

Revision ID: 001
Revises: None
Create Date: 2026-10-18 00:00:00.000000+00:00

What:  Creates `noteful_folders` and `noteful_notes`.
How:   Integer identity keys; notes.folder_id references folders.id with
       ON DELETE CASCADE; notes.modified defaults to CURRENT_TIMESTAMP.

Rollback: downgrade() drops both tables (all folder and note data is lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "noteful_folders",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "noteful_notes",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column(
            "modified",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column("folder_id", sa.Integer(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["folder_id"],
            ["noteful_folders.id"],
            ondelete="CASCADE",
        ),
    )

    op.create_index(
        "idx_noteful_notes_folder_id",
        "noteful_notes",
        ["folder_id"],
    )


def downgrade() -> None:
    op.drop_index("idx_noteful_notes_folder_id", table_name="noteful_notes")
    op.drop_table("noteful_notes")
    op.drop_table("noteful_folders")
