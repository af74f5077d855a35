"""
Noteful Backend — Folder Route Handlers
=========================================

What:  CRUD endpoints under /api/folders.
How:   Single-item routes resolve the folder through the `load_folder`
       dependency first; an unknown id ends the request with 404 before
       the body is looked at. Write routes run the validation layer, then
       the store, then the serializer.

Routes:
    GET    /api/folders              → 200, list of folders
    POST   /api/folders              → 201, created folder + Location
    GET    /api/folders/{folder_id}  → 200, one folder
    DELETE /api/folders/{folder_id}  → 204
    PATCH  /api/folders/{folder_id}  → 204
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Request, Response

from noteful.exceptions import NotFoundError
from noteful.models.folder import Folder
from noteful.schemas.common import ErrorResponse, UnauthorizedResponse
from noteful.schemas.folder import FolderCreate, FolderResponse, FolderUpdate
from noteful.services.folder_store import FolderStore, get_folder_store
from noteful.services.serialization import serialize_folder
from noteful.services.validation import (
    FOLDER_REQUIRED_FIELDS,
    FOLDER_UPDATABLE_FIELDS,
    require_any_field,
    require_fields,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/folders",
    tags=["Folders"],
    responses={401: {"description": "Missing or invalid bearer token", "model": UnauthorizedResponse}},
)


async def load_folder(
    folder_id: int,
    store: FolderStore = Depends(get_folder_store),
) -> Folder:
    """Resolve `folder_id` or stop the request with 404."""
    folder = await store.get_by_id(folder_id)
    if folder is None:
        logger.error("Folder with id %s not found.", folder_id)
        raise NotFoundError(resource="Folder", resource_id=folder_id)
    return folder


@router.get(
    "",
    response_model=List[FolderResponse],
    summary="List all folders",
)
async def list_folders(
    store: FolderStore = Depends(get_folder_store),
) -> List[FolderResponse]:
    folders = await store.list_all()
    return [serialize_folder(folder) for folder in folders]


@router.post(
    "",
    status_code=201,
    response_model=FolderResponse,
    responses={400: {"description": "Missing name", "model": ErrorResponse}},
    summary="Create a folder",
)
async def create_folder(
    request: Request,
    response: Response,
    payload: Optional[FolderCreate] = Body(default=None),
    store: FolderStore = Depends(get_folder_store),
) -> FolderResponse:
    """
    Create a folder from `{name}`.

    An empty name counts as missing. The Location header points at the
    new folder's own URL.
    """
    body = payload.model_dump() if payload else {}
    require_fields(body, FOLDER_REQUIRED_FIELDS, strict_null=False)

    folder = await store.insert(name=body["name"])
    logger.info("Folder with id %s created.", folder.id)

    response.headers["Location"] = f"{request.url.path.rstrip('/')}/{folder.id}"
    return serialize_folder(folder)


@router.get(
    "/{folder_id}",
    response_model=FolderResponse,
    responses={404: {"description": "Folder not found", "model": ErrorResponse}},
    summary="Get a single folder",
)
async def get_folder(folder: Folder = Depends(load_folder)) -> FolderResponse:
    return serialize_folder(folder)


@router.delete(
    "/{folder_id}",
    status_code=204,
    responses={404: {"description": "Folder not found", "model": ErrorResponse}},
    summary="Delete a folder and its notes",
)
async def delete_folder(
    folder: Folder = Depends(load_folder),
    store: FolderStore = Depends(get_folder_store),
) -> Response:
    folder_id = folder.id
    await store.delete(folder_id)
    logger.info("Folder with id %s deleted.", folder_id)
    return Response(status_code=204)


@router.patch(
    "/{folder_id}",
    status_code=204,
    responses={
        400: {"description": "Missing name", "model": ErrorResponse},
        404: {"description": "Folder not found", "model": ErrorResponse},
    },
    summary="Rename a folder",
)
async def update_folder(
    folder: Folder = Depends(load_folder),
    payload: Optional[FolderUpdate] = Body(default=None),
    store: FolderStore = Depends(get_folder_store),
) -> Response:
    body = payload.model_dump() if payload else {}
    require_any_field(body, FOLDER_UPDATABLE_FIELDS)

    await store.update(folder.id, {"name": body["name"]})
    logger.info("Folder with id %s updated", folder.id)
    return Response(status_code=204)
