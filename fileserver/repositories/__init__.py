"""Repository layer for data access."""

from fileserver.repositories.credential_repository import (
    Credential,
    CredentialLookup,
    CredentialRepository,
)
from fileserver.repositories.file_repository import FileRecord, FileRepository, FileSummary

__all__ = [
    "Credential",
    "CredentialLookup",
    "CredentialRepository",
    "FileRecord",
    "FileRepository",
    "FileSummary",
]
