# Models package init
"""
Noteful Backend — ORM Models
==============================

Importing this package registers both tables with `Base.metadata`
(used by Alembic autogenerate and by the test schema fixture).
"""

from noteful.models.folder import Folder
from noteful.models.note import Note

__all__ = ["Folder", "Note"]
