"""
Noteful Backend — Folder Schemas
==================================

What:  Request and response models for /api/folders.
"""

from typing import Optional

from pydantic import BaseModel, Field


class FolderResponse(BaseModel):
    """
    External representation of a folder.

    `name` has already been through the HTML sanitizer when this model is
    built (see noteful.services.serialization).
    """
    id: int = Field(description="Folder identifier")
    name: str = Field(description="Folder name (markup neutralized)")

    model_config = {"from_attributes": True}


class FolderCreate(BaseModel):
    """Body of POST /api/folders. `name` is required by the validation layer."""
    name: Optional[str] = Field(default=None, description="Folder name")


class FolderUpdate(BaseModel):
    """Body of PATCH /api/folders/{folder_id}."""
    name: Optional[str] = Field(default=None, description="New folder name")
