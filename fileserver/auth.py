"""Password hashing and request identity helpers."""

from typing import Optional

import bcrypt
from fastapi import Request


def hash_password(password: str) -> str:
    """
    Hash a password using bcrypt.

    Args:
        password: Plain text password to hash

    Returns:
        Bcrypt hash of the password
    """
    password_bytes = password.encode('utf-8')
    salt = bcrypt.gensalt()
    hashed = bcrypt.hashpw(password_bytes, salt)
    return hashed.decode('utf-8')


def verify_password(password: str, password_hash: str) -> bool:
    """
    Verify a password against a bcrypt hash.

    Args:
        password: Plain text password to verify
        password_hash: Bcrypt hash to verify against

    Returns:
        True if password matches hash, False otherwise

    Raises:
        ValueError: If password_hash is not a valid bcrypt hash
    """
    password_bytes = password.encode('utf-8')
    hash_bytes = password_hash.encode('utf-8')
    return bcrypt.checkpw(password_bytes, hash_bytes)


def get_current_identity(request: Request) -> Optional[str]:
    """
    FastAPI dependency returning the identity attached by the authentication gate.
    """
    return getattr(request.state, "identity", None)
