"""
Noteful Backend — Note SQLAlchemy Model
=========================================

What:  ORM model representing the `noteful_notes` table.
Why:   Maps Python objects to database rows for type-safe database operations.
How:   Inherits from SQLAlchemy's DeclarativeBase; Alembic reads this for migrations.
Who:   Used by NoteStore for CRUD operations and by Alembic for schema management.

Table Design:
    - id: Integer primary key assigned by the database
    - modified: UTC with timezone; defaults to creation time and is
      restamped by the notes router on every PATCH
    - folder_id: Foreign key to noteful_folders.id with ON DELETE CASCADE,
      so removing a folder removes its notes

    Index on folder_id:
        Keeps the cascade delete and "notes in folder" lookups from
        scanning the whole table.
"""

from datetime import datetime, timezone

from sqlalchemy import ForeignKey, Index, Integer, Text, TIMESTAMP, text
from sqlalchemy.orm import Mapped, mapped_column

from noteful.database import Base


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Note(Base):
    """
    A titled, timestamped text record belonging to exactly one folder.

    Query Patterns:
        - List notes: SELECT ... ORDER BY id
        - Get single note: SELECT ... WHERE id = :id  (primary key lookup)
        - Update: UPDATE ... SET <supplied fields>, modified = :now WHERE id = :id
    """

    __tablename__ = "noteful_notes"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    name: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    # Why TIMESTAMP WITH TIME ZONE: unambiguous; stored in UTC
    modified: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=utc_now,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    folder_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("noteful_folders.id", ondelete="CASCADE"),
        nullable=False,
    )

    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    __table_args__ = (
        Index("idx_noteful_notes_folder_id", folder_id),
    )

    def __repr__(self) -> str:
        return (
            f"<Note(id={self.id}, folder_id={self.folder_id}, "
            f"modified='{self.modified}')>"
        )
