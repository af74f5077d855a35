"""
Noteful Backend — Note Route Handlers
=======================================

What:  CRUD endpoints under /api/notes.
How:   Same shape as the folder routes. Differences:
       - POST requires name, folder_id and content, but only absent/null
         counts as missing.
       - PATCH needs at least one truthy field among name, folder_id and
         content, and always restamps `modified` with the server time.

Routes:
    GET    /api/notes            → 200, list of notes
    POST   /api/notes            → 201, created note + Location
    GET    /api/notes/{note_id}  → 200, one note
    DELETE /api/notes/{note_id}  → 204
    PATCH  /api/notes/{note_id}  → 204
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Request, Response

from noteful.exceptions import NotFoundError
from noteful.models.note import Note
from noteful.schemas.common import ErrorResponse, UnauthorizedResponse
from noteful.schemas.note import NoteCreate, NoteResponse, NoteUpdate
from noteful.services.note_store import NoteStore, get_note_store
from noteful.services.serialization import serialize_note
from noteful.services.validation import (
    NOTE_REQUIRED_FIELDS,
    NOTE_UPDATABLE_FIELDS,
    require_any_field,
    require_fields,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/notes",
    tags=["Notes"],
    responses={401: {"description": "Missing or invalid bearer token", "model": UnauthorizedResponse}},
)


async def load_note(
    note_id: int,
    store: NoteStore = Depends(get_note_store),
) -> Note:
    """Resolve `note_id` or stop the request with 404."""
    note = await store.get_by_id(note_id)
    if note is None:
        logger.error("Note with id %s not found.", note_id)
        raise NotFoundError(resource="Note", resource_id=note_id)
    return note


@router.get(
    "",
    response_model=List[NoteResponse],
    summary="List all notes",
)
async def list_notes(
    store: NoteStore = Depends(get_note_store),
) -> List[NoteResponse]:
    notes = await store.list_all()
    return [serialize_note(note) for note in notes]


@router.post(
    "",
    status_code=201,
    response_model=NoteResponse,
    responses={
        400: {"description": "Missing field", "model": ErrorResponse},
        500: {"description": "Unknown folder_id or database failure", "model": ErrorResponse},
    },
    summary="Create a note",
)
async def create_note(
    request: Request,
    response: Response,
    payload: Optional[NoteCreate] = Body(default=None),
    store: NoteStore = Depends(get_note_store),
) -> NoteResponse:
    body = payload.model_dump() if payload else {}
    require_fields(body, NOTE_REQUIRED_FIELDS, strict_null=True)

    note = await store.insert(
        name=body["name"],
        folder_id=body["folder_id"],
        content=body["content"],
    )
    logger.info("Note with id %s created.", note.id)

    response.headers["Location"] = f"{request.url.path.rstrip('/')}/{note.id}"
    return serialize_note(note)


@router.get(
    "/{note_id}",
    response_model=NoteResponse,
    responses={404: {"description": "Note not found", "model": ErrorResponse}},
    summary="Get a single note",
)
async def get_note(note: Note = Depends(load_note)) -> NoteResponse:
    return serialize_note(note)


@router.delete(
    "/{note_id}",
    status_code=204,
    responses={404: {"description": "Note not found", "model": ErrorResponse}},
    summary="Delete a note",
)
async def delete_note(
    note: Note = Depends(load_note),
    store: NoteStore = Depends(get_note_store),
) -> Response:
    note_id = note.id
    await store.delete(note_id)
    logger.info("Note with id %s deleted.", note_id)
    return Response(status_code=204)


@router.patch(
    "/{note_id}",
    status_code=204,
    responses={
        400: {"description": "No updatable field supplied", "model": ErrorResponse},
        404: {"description": "Note not found", "model": ErrorResponse},
    },
    summary="Update some fields of a note",
)
async def update_note(
    note: Note = Depends(load_note),
    payload: Optional[NoteUpdate] = Body(default=None),
    store: NoteStore = Depends(get_note_store),
) -> Response:
    """
    Apply the supplied fields and restamp `modified`.

    Fields sent as null are treated as not supplied. The response carries
    no body; clients re-fetch if they need the new state.
    """
    body = payload.model_dump(exclude_unset=True) if payload else {}
    require_any_field(body, NOTE_UPDATABLE_FIELDS)

    fields = {key: value for key, value in body.items() if value is not None}
    fields["modified"] = datetime.now(timezone.utc)

    await store.update(note.id, fields)
    logger.info("Note with id %s updated", note.id)
    return Response(status_code=204)
