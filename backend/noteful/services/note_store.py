"""
Noteful Backend — Note Store (Data Access)
============================================

What:  Translates note operations into single SQL statements.
How:   Same shape as FolderStore. `update` accepts any subset of
       name, folder_id, content and modified; other keys are ignored.

Referential integrity:
    folder_id must reference an existing folder. The database enforces it;
    a violation surfaces here as IntegrityError and leaves as DatabaseError.
"""

import logging
from typing import Any, List, Mapping, Optional

from fastapi import Depends
from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.database import get_db_session
from noteful.exceptions import DatabaseError
from noteful.models.note import Note

logger = logging.getLogger(__name__)


class NoteStore:
    """CRUD access to the `noteful_notes` table."""

    UPDATABLE_FIELDS = ("name", "folder_id", "content", "modified")

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_all(self) -> List[Note]:
        try:
            result = await self.session.execute(select(Note).order_by(Note.id))
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Database error listing notes: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve notes.",
                context={"error_type": type(e).__name__},
            )

    async def get_by_id(self, note_id: int) -> Optional[Note]:
        try:
            result = await self.session.execute(select(Note).where(Note.id == note_id))
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error fetching note %s: %s", note_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the note.",
                context={"note_id": note_id, "error_type": type(e).__name__},
            )

    async def insert(self, name: str, folder_id: int, content: str) -> Note:
        """
        Persist a new note; `modified` defaults to the current UTC time.

        The record is refreshed after commit so the returned timestamp is
        the stored one (some backends drop sub-second or zone details).
        """
        note = Note(name=name, folder_id=folder_id, content=content)
        try:
            self.session.add(note)
            await self.session.flush()
            await self.session.commit()
            await self.session.refresh(note)
            return note
        except SQLAlchemyError as e:
            logger.error("Database error inserting note: %s", str(e))
            raise DatabaseError(
                message="Could not create the note.",
                context={"folder_id": folder_id, "error_type": type(e).__name__},
            )

    async def update(self, note_id: int, fields: Mapping[str, Any]) -> int:
        values = {k: v for k, v in fields.items() if k in self.UPDATABLE_FIELDS}
        if not values:
            return 0
        try:
            result = await self.session.execute(
                update(Note).where(Note.id == note_id).values(**values)
            )
            await self.session.commit()
            return result.rowcount
        except SQLAlchemyError as e:
            logger.error("Database error updating note %s: %s", note_id, str(e))
            raise DatabaseError(
                message="Could not update the note.",
                context={"note_id": note_id, "error_type": type(e).__name__},
            )

    async def delete(self, note_id: int) -> int:
        try:
            result = await self.session.execute(delete(Note).where(Note.id == note_id))
            await self.session.commit()
            return result.rowcount
        except SQLAlchemyError as e:
            logger.error("Database error deleting note %s: %s", note_id, str(e))
            raise DatabaseError(
                message="Could not delete the note.",
                context={"note_id": note_id, "error_type": type(e).__name__},
            )


def get_note_store(db: AsyncSession = Depends(get_db_session)) -> NoteStore:
    """FastAPI dependency: a NoteStore bound to the request's session."""
    return NoteStore(db)
