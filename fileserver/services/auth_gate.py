"""Per-request authentication policy."""

from typing import Iterable, Optional

from common.constants import PUBLIC_PATHS
from common.logging_config import get_logger
from fileserver.exceptions import StorageError
from fileserver.outcomes import ErrorKind, Outcome
from fileserver.repositories.credential_repository import CredentialLookup
from fileserver.services.token_service import TokenService

logger = get_logger(__name__)


class AuthenticationGate:
    """
    Resolves the token presented with a request to a known identity.

    Holds only read-only collaborators, so a single instance serves
    concurrent requests.
    """

    def __init__(
        self,
        token_service: TokenService,
        credentials: CredentialLookup,
        public_paths: Iterable[str] = PUBLIC_PATHS,
    ):
        self.token_service = token_service
        self.credentials = credentials
        self.public_paths = frozenset(public_paths)

    def is_public(self, request_path: str) -> bool:
        return request_path in self.public_paths

    def authorize(self, token_string: Optional[str], request_path: str) -> Outcome:
        """
        Authorize a request.

        Public paths pass before the token is looked at, with no identity.
        Every other path needs a valid token whose subject is still a known
        identity.

        Returns:
            Success carrying the identity (None on public paths), or a
            rejection with UNAUTHENTICATED
        """
        if self.is_public(request_path):
            return Outcome.success(None)

        if not token_string:
            logger.warning(f"Rejected request without token path={request_path}")
            return Outcome.rejected(ErrorKind.UNAUTHENTICATED, "Token is missing")

        validation = self.token_service.validate(token_string)
        if not validation.ok:
            logger.warning(f"Rejected request with invalid token path={request_path}")
            return Outcome.rejected(ErrorKind.UNAUTHENTICATED, validation.message)

        subject = validation.value
        try:
            credential = self.credentials.find_by_identity(subject)
        except StorageError:
            logger.error(f"Credential lookup failed for subject={subject}", exc_info=True)
            return Outcome.fault("Credential lookup failed")

        if credential is None:
            logger.warning(f"Rejected token for unknown identity={subject}")
            return Outcome.rejected(ErrorKind.UNAUTHENTICATED, "Unknown identity")

        logger.info(f"Authenticated identity={credential.identity} path={request_path}")
        return Outcome.success(credential.identity)
