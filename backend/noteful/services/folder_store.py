"""
Noteful Backend — Folder Store (Data Access)
==============================================

What:  Translates folder operations into single SQL statements.
Why:   Keeps SQLAlchemy out of the route handlers.
How:   Wraps an AsyncSession handed in by the caller; each write is one
       statement followed by a commit. SQLAlchemy failures are logged and
       re-raised as DatabaseError.
Who:   Constructed per request by `get_folder_store`.
"""

import logging
from typing import Any, List, Mapping, Optional

from fastapi import Depends
from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.database import get_db_session
from noteful.exceptions import DatabaseError
from noteful.models.folder import Folder

logger = logging.getLogger(__name__)


class FolderStore:
    """
    CRUD access to the `noteful_folders` table.

    Operations:
        list_all()          All folders, primary-key order
        get_by_id(id)       One folder or None
        insert(name)        New folder with its assigned id
        update(id, fields)  Affected-row count
        delete(id)          Affected-row count (0 for an absent id)
    """

    UPDATABLE_FIELDS = ("name",)

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_all(self) -> List[Folder]:
        try:
            result = await self.session.execute(select(Folder).order_by(Folder.id))
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Database error listing folders: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve folders.",
                context={"error_type": type(e).__name__},
            )

    async def get_by_id(self, folder_id: int) -> Optional[Folder]:
        try:
            result = await self.session.execute(
                select(Folder).where(Folder.id == folder_id)
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error fetching folder %s: %s", folder_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the folder.",
                context={"folder_id": folder_id, "error_type": type(e).__name__},
            )

    async def insert(self, name: str) -> Folder:
        folder = Folder(name=name)
        try:
            self.session.add(folder)
            await self.session.flush()  # Assigns the id
            await self.session.commit()
            await self.session.refresh(folder)
            return folder
        except SQLAlchemyError as e:
            logger.error("Database error inserting folder: %s", str(e))
            raise DatabaseError(
                message="Could not create the folder.",
                context={"error_type": type(e).__name__},
            )

    async def update(self, folder_id: int, fields: Mapping[str, Any]) -> int:
        values = {k: v for k, v in fields.items() if k in self.UPDATABLE_FIELDS}
        if not values:
            return 0
        try:
            result = await self.session.execute(
                update(Folder).where(Folder.id == folder_id).values(**values)
            )
            await self.session.commit()
            return result.rowcount
        except SQLAlchemyError as e:
            logger.error("Database error updating folder %s: %s", folder_id, str(e))
            raise DatabaseError(
                message="Could not update the folder.",
                context={"folder_id": folder_id, "error_type": type(e).__name__},
            )

    async def delete(self, folder_id: int) -> int:
        try:
            result = await self.session.execute(
                delete(Folder).where(Folder.id == folder_id)
            )
            await self.session.commit()
            return result.rowcount
        except SQLAlchemyError as e:
            logger.error("Database error deleting folder %s: %s", folder_id, str(e))
            raise DatabaseError(
                message="Could not delete the folder.",
                context={"folder_id": folder_id, "error_type": type(e).__name__},
            )


def get_folder_store(db: AsyncSession = Depends(get_db_session)) -> FolderStore:
    """FastAPI dependency: a FolderStore bound to the request's session."""
    return FolderStore(db)
