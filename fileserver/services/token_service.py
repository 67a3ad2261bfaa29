"""Issuing and validating signed session tokens."""

import time
import uuid
from typing import Callable

import jwt

from common.constants import BEARER_PREFIX, JWT_ALGORITHM
from common.logging_config import get_logger
from fileserver.config import TokenSettings
from fileserver.outcomes import ErrorKind, Outcome

logger = get_logger(__name__)


class TokenService:
    """
    Stateless HS256 session tokens.

    A token carries its subject, issue time, expiry and a random nonce. Nothing
    is stored server side: validity is the signature plus the wall clock, so a
    token stays valid until it expires even after logout.
    """

    def __init__(self, settings: TokenSettings, clock: Callable[[], float] = time.time):
        if not settings.secret:
            raise ValueError("Token signing secret must not be empty")
        if settings.expiration_seconds <= 0:
            raise ValueError("Token expiration must be a positive number of seconds")
        self._secret = settings.secret
        self._ttl = settings.expiration_seconds
        self._clock = clock

    def issue(self, subject: str) -> str:
        issued_at = int(self._clock())
        payload = {
            "sub": subject,
            "nonce": str(uuid.uuid4()),
            "iat": issued_at,
            "exp": issued_at + self._ttl,
        }
        token = jwt.encode(payload, self._secret, algorithm=JWT_ALGORITHM)
        logger.debug(f"Issued token for subject={subject} expires_at={payload['exp']}")
        return token

    def validate(self, token_string: str) -> Outcome:
        """
        Verify a token and extract its subject.

        Args:
            token_string: Compact token, optionally prefixed with "Bearer "

        Returns:
            Success carrying the subject, or a rejection with INVALID_TOKEN
        """
        if token_string is None:
            return Outcome.rejected(ErrorKind.INVALID_TOKEN, "Token is missing")

        if token_string.startswith(BEARER_PREFIX):
            token_string = token_string[len(BEARER_PREFIX):]

        try:
            # Expiry is checked below against the injected clock.
            payload = jwt.decode(
                token_string,
                self._secret,
                algorithms=[JWT_ALGORITHM],
                options={
                    "verify_exp": False,
                    "verify_iat": False,
                    "require": ["sub", "iat", "exp", "nonce"],
                },
            )
        except jwt.InvalidTokenError as e:
            logger.warning(f"Invalid token: {type(e).__name__}: {e}")
            return Outcome.rejected(ErrorKind.INVALID_TOKEN, "Invalid token")

        subject = payload.get("sub")
        expires_at = payload.get("exp")
        if not isinstance(subject, str) or not subject:
            logger.warning("Invalid token: subject is not a non-empty string")
            return Outcome.rejected(ErrorKind.INVALID_TOKEN, "Invalid token")
        if not isinstance(expires_at, (int, float)) or isinstance(expires_at, bool):
            logger.warning("Invalid token: expiry is not numeric")
            return Outcome.rejected(ErrorKind.INVALID_TOKEN, "Invalid token")

        if self._clock() >= expires_at:
            logger.info(f"Token expired for subject={subject}")
            return Outcome.rejected(ErrorKind.INVALID_TOKEN, "Token expired")

        return Outcome.success(subject)
