"""File service for business logic."""

import io
from typing import Optional

from common.logging_config import get_logger
from fileserver.outcomes import ErrorKind, Outcome
from fileserver.repositories.file_repository import FileRecord, FileRepository

logger = get_logger(__name__)


class FileService:
    """
    Orchestrates the file record store for the HTTP layer.

    Preconditions are checked here so that caller mistakes come back as
    REJECTED; anything the store raises comes back as FAULT.
    """

    def __init__(self, file_repo: Optional[FileRepository] = None):
        self.file_repo = file_repo or FileRepository()

    def upload_file(self, name: str, content: bytes, size: int) -> Outcome:
        # The declared size is stored as given, without comparing it to len(content).
        try:
            if self.file_repo.exists(name):
                logger.warning(f"Upload rejected: file '{name}' already exists")
                return Outcome.rejected(ErrorKind.DUPLICATE_NAME, f"File '{name}' already exists")

            self.file_repo.create(FileRecord(name=name, content=content, size=size))
        except Exception as e:
            logger.error(f"Upload failed for file '{name}': {e}", exc_info=True)
            return Outcome.fault("Error upload file")

        logger.info(f"Uploaded file '{name}' ({size} bytes)")
        return Outcome.success()

    def download_file(self, name: str) -> Outcome:
        """
        Fetch a file's content.

        Returns:
            Success carrying a binary stream over the stored content
        """
        try:
            record = self.file_repo.get(name)
        except Exception as e:
            logger.error(f"Download failed for file '{name}': {e}", exc_info=True)
            return Outcome.fault("Error download file")

        if record is None:
            logger.warning(f"Download rejected: file '{name}' not found")
            return Outcome.rejected(ErrorKind.NOT_FOUND, f"File '{name}' not found")

        logger.info(f"Downloading file '{name}' ({record.size} bytes)")
        return Outcome.success(io.BytesIO(record.content))

    def delete_file(self, name: str) -> Outcome:
        try:
            if not self.file_repo.exists(name):
                logger.warning(f"Delete rejected: file '{name}' not found")
                return Outcome.rejected(ErrorKind.NOT_FOUND, f"File '{name}' not found")

            self.file_repo.delete(name)
        except Exception as e:
            logger.error(f"Delete failed for file '{name}': {e}", exc_info=True)
            return Outcome.fault("Error delete file")

        return Outcome.success()

    def rename_file(self, old_name: str, new_name: str) -> Outcome:
        # Only old_name is checked; a taken new_name surfaces from the store as a fault.
        try:
            if not self.file_repo.exists(old_name):
                logger.warning(f"Rename rejected: file '{old_name}' not found")
                return Outcome.rejected(ErrorKind.NOT_FOUND, f"File '{old_name}' not found")

            self.file_repo.rename(old_name, new_name)
        except Exception as e:
            logger.error(f"Rename failed for file '{old_name}' -> '{new_name}': {e}", exc_info=True)
            return Outcome.fault("Error edit file")

        return Outcome.success()

    def list_files(self, limit: int) -> Outcome:
        try:
            files = self.file_repo.list_files(limit)
        except Exception as e:
            logger.error(f"Listing files failed: {e}", exc_info=True)
            return Outcome.fault("Error getting file list")

        logger.debug(f"Listed {len(files)} files (limit={limit})")
        return Outcome.success(files)
