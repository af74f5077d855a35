"""
Noteful Backend — Shared Response Schemas
===========================================

What:  Error body models shared by both resource routers.
Why:   Documents the error contract in the OpenAPI schema.
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    message: str = Field(description="Human-readable error description")


class ErrorResponse(BaseModel):
    """
    Standard error body for 400, 404 and 500 responses.

    Example:
        {"error": {"message": "Folder doesn't exist"}}
    """
    error: ErrorDetail


class UnauthorizedResponse(BaseModel):
    """
    Body returned by the authorization gate.

    Example:
        {"error": "Unauthorized request"}
    """
    error: str = Field(default="Unauthorized request")
