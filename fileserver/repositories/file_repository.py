"""File repository for database operations."""

import sqlite3
from dataclasses import dataclass
from typing import List, Optional

from common.logging_config import get_logger
from fileserver.database import get_db_connection
from fileserver.exceptions import DuplicateNameError, RecordNotFoundError, StorageError

logger = get_logger(__name__)


@dataclass(frozen=True)
class FileRecord:
    name: str
    content: bytes
    size: int


@dataclass(frozen=True)
class FileSummary:
    name: str
    size: int


class FileRepository:
    """
    Durable mapping of file name to content and size.

    Name uniqueness is enforced by the primary key of the files table,
    so every write is atomic with respect to it.
    """

    def __init__(self, db_path: Optional[str] = None):
        self.db_path = db_path

    def exists(self, name: str) -> bool:
        try:
            with get_db_connection(self.db_path) as conn:
                cursor = conn.cursor()
                cursor.execute("SELECT 1 FROM files WHERE name = ?", (name,))
                return cursor.fetchone() is not None
        except sqlite3.Error as e:
            logger.error(f"Failed to check file existence [name={name}]: {e}", exc_info=True)
            raise StorageError(f"Existence check failed: {e}") from e

    def create(self, record: FileRecord) -> FileRecord:
        logger.debug(f"Creating file record [name={record.name}, size={record.size}]")
        try:
            with get_db_connection(self.db_path) as conn:
                cursor = conn.cursor()
                cursor.execute(
                    "INSERT INTO files (name, content, size) VALUES (?, ?, ?)",
                    (record.name, sqlite3.Binary(record.content), record.size)
                )
                conn.commit()
        except sqlite3.IntegrityError as e:
            logger.warning(f"File record already exists [name={record.name}]")
            raise DuplicateNameError(f"File '{record.name}' already exists") from e
        except sqlite3.Error as e:
            logger.error(f"Failed to create file record [name={record.name}]: {e}", exc_info=True)
            raise StorageError(f"File creation failed: {e}") from e

        logger.info(f"File record created [name={record.name}]")
        return record

    def get(self, name: str) -> Optional[FileRecord]:
        try:
            with get_db_connection(self.db_path) as conn:
                cursor = conn.cursor()
                cursor.execute(
                    "SELECT name, content, size FROM files WHERE name = ?",
                    (name,)
                )
                row = cursor.fetchone()
        except sqlite3.Error as e:
            logger.error(f"Failed to fetch file record [name={name}]: {e}", exc_info=True)
            raise StorageError(f"File lookup failed: {e}") from e

        if row is None:
            return None

        return FileRecord(
            name=row["name"],
            content=bytes(row["content"]) if row["content"] is not None else b"",
            size=row["size"],
        )

    def delete(self, name: str) -> None:
        """
        Delete a file record. Deleting an absent name is a no-op.
        """
        try:
            with get_db_connection(self.db_path) as conn:
                cursor = conn.cursor()
                cursor.execute("DELETE FROM files WHERE name = ?", (name,))
                conn.commit()
                deleted = cursor.rowcount
        except sqlite3.Error as e:
            logger.error(f"Failed to delete file record [name={name}]: {e}", exc_info=True)
            raise StorageError(f"File deletion failed: {e}") from e

        logger.info(f"File record deleted [name={name}, rows={deleted}]")

    def rename(self, old_name: str, new_name: str) -> None:
        """
        Change a record's name in place, keeping its content and storage position.

        Raises:
            RecordNotFoundError: If old_name does not exist
            DuplicateNameError: If new_name is already taken
        """
        logger.debug(f"Renaming file record [{old_name} -> {new_name}]")
        try:
            with get_db_connection(self.db_path) as conn:
                cursor = conn.cursor()
                cursor.execute(
                    "UPDATE files SET name = ? WHERE name = ?",
                    (new_name, old_name)
                )
                if cursor.rowcount == 0:
                    conn.rollback()
                    raise RecordNotFoundError(f"File '{old_name}' not found")
                conn.commit()
        except sqlite3.IntegrityError as e:
            logger.warning(f"Rename target already exists [{old_name} -> {new_name}]")
            raise DuplicateNameError(f"File '{new_name}' already exists") from e
        except sqlite3.Error as e:
            logger.error(f"Failed to rename file record [{old_name} -> {new_name}]: {e}", exc_info=True)
            raise StorageError(f"File rename failed: {e}") from e

        logger.info(f"File record renamed [{old_name} -> {new_name}]")

    def list_files(self, limit: int) -> List[FileSummary]:
        """
        Return (name, size) pairs in storage order, capped at limit entries.
        """
        try:
            with get_db_connection(self.db_path) as conn:
                cursor = conn.cursor()
                cursor.execute("SELECT name, size FROM files ORDER BY rowid")
                rows = cursor.fetchall()
        except sqlite3.Error as e:
            logger.error(f"Failed to list file records: {e}", exc_info=True)
            raise StorageError(f"File listing failed: {e}") from e

        summaries = [FileSummary(name=row["name"], size=row["size"]) for row in rows]
        return summaries[:max(limit, 0)]
