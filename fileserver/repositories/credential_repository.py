"""Credential repository for database operations."""

import sqlite3
from dataclasses import dataclass
from typing import Optional, Protocol

from common.logging_config import get_logger
from fileserver.database import get_db_connection
from fileserver.exceptions import CredentialExistsError, StorageError

logger = get_logger(__name__)


@dataclass(frozen=True)
class Credential:
    identity: str
    password_hash: str


class CredentialLookup(Protocol):
    """Anything that can resolve an identity to its stored credential."""

    def find_by_identity(self, identity: str) -> Optional[Credential]:
        ...


class CredentialRepository:
    def __init__(self, db_path: Optional[str] = None):
        self.db_path = db_path

    def find_by_identity(self, identity: str) -> Optional[Credential]:
        logger.debug(f"Fetching credential for identity: {identity}")
        try:
            with get_db_connection(self.db_path) as conn:
                cursor = conn.cursor()
                cursor.execute(
                    "SELECT email, password FROM users WHERE email = ?",
                    (identity,)
                )
                row = cursor.fetchone()
        except sqlite3.Error as e:
            logger.error(f"Failed to fetch credential for {identity}: {e}", exc_info=True)
            raise StorageError(f"Credential lookup failed: {e}") from e

        if row is None:
            logger.debug(f"Credential not found: {identity}")
            return None

        return Credential(identity=row["email"], password_hash=row["password"])

    def create_credential(self, identity: str, password_hash: str) -> Credential:
        logger.debug(f"Creating credential: {identity}")
        try:
            with get_db_connection(self.db_path) as conn:
                cursor = conn.cursor()
                cursor.execute(
                    "INSERT INTO users (email, password) VALUES (?, ?)",
                    (identity, password_hash)
                )
                conn.commit()
        except sqlite3.IntegrityError as e:
            logger.warning(f"Credential already exists: {identity}")
            raise CredentialExistsError(f"Identity '{identity}' already exists") from e
        except sqlite3.Error as e:
            logger.error(f"Failed to create credential {identity}: {e}", exc_info=True)
            raise StorageError(f"Credential creation failed: {e}") from e

        logger.info(f"Credential created: {identity}")
        return Credential(identity=identity, password_hash=password_hash)
