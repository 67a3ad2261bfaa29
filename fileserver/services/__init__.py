"""Service layer for business logic."""

from fileserver.services.auth_gate import AuthenticationGate
from fileserver.services.auth_service import AuthService
from fileserver.services.file_service import FileService
from fileserver.services.token_service import TokenService

__all__ = [
    "AuthenticationGate",
    "AuthService",
    "FileService",
    "TokenService",
]
