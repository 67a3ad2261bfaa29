"""Authentication service for login and logout."""

from typing import Optional

from common.logging_config import get_logger
from fileserver.auth import verify_password
from fileserver.exceptions import StorageError
from fileserver.outcomes import ErrorKind, Outcome
from fileserver.repositories.credential_repository import CredentialLookup
from fileserver.services.token_service import TokenService

logger = get_logger(__name__)


class AuthService:
    def __init__(self, credentials: CredentialLookup, token_service: TokenService):
        self.credentials = credentials
        self.token_service = token_service

    def authenticate(self, login: str, password: str) -> Outcome:
        logger.info(f"Login attempt for identity: {login}")
        try:
            credential = self.credentials.find_by_identity(login)
        except StorageError:
            logger.error(f"Login failed: credential lookup error for '{login}'", exc_info=True)
            return Outcome.fault("Credential lookup failed")

        if credential is None:
            logger.warning(f"Login failed: identity '{login}' not found")
            return Outcome.rejected(ErrorKind.AUTH_FAILURE, "Bad credentials")

        try:
            matches = verify_password(password, credential.password_hash)
        except ValueError as e:
            logger.warning(f"Login failed: password check error for '{login}': {e}")
            matches = False

        if not matches:
            logger.warning(f"Login failed: invalid password for identity '{login}'")
            return Outcome.rejected(ErrorKind.AUTH_FAILURE, "Bad credentials")

        token = self.token_service.issue(credential.identity)
        logger.info(f"Successfully logged in identity: {login}")
        return Outcome.success(token)

    def logout(self, token_string: Optional[str] = None) -> Outcome:
        # Tokens are stateless; they stay valid until they expire.
        logger.info("Logout requested")
        return Outcome.success()
