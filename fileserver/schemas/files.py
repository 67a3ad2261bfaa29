"""Pydantic schemas for file operation endpoints."""

from pydantic import BaseModel, Field


class RenameFileRequest(BaseModel):
    """Request model for renaming a file."""
    filename: str = Field(min_length=1)


class FileEntryResponse(BaseModel):
    """Response model for one entry of the file listing."""
    filename: str
    size: int
