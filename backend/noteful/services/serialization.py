"""
Noteful Backend — Record Serialization
========================================

What:  Maps stored folders and notes to their response models.
How:   Copies every column verbatim except free-text fields, which pass
       through `clean_html` exactly once.
"""

from noteful.models.folder import Folder
from noteful.models.note import Note
from noteful.schemas.folder import FolderResponse
from noteful.schemas.note import NoteResponse
from noteful.services.sanitizer import clean_html


def serialize_folder(folder: Folder) -> FolderResponse:
    return FolderResponse(
        id=folder.id,
        name=clean_html(folder.name),
    )


def serialize_note(note: Note) -> NoteResponse:
    return NoteResponse(
        id=note.id,
        name=clean_html(note.name),
        modified=note.modified,
        folder_id=note.folder_id,
        content=clean_html(note.content),
    )
