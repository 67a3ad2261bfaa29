"""Pydantic schemas for API requests and responses."""

from fileserver.schemas.auth import LoginRequest, LoginResponse
from fileserver.schemas.files import FileEntryResponse, RenameFileRequest
from fileserver.schemas.common import ErrorResponse

__all__ = [
    "LoginRequest",
    "LoginResponse",
    "FileEntryResponse",
    "RenameFileRequest",
    "ErrorResponse",
]
