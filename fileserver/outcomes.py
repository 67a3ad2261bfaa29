"""Result values returned by the auth layer and the file operations facade."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class OutcomeStatus(str, Enum):
    SUCCEEDED = "succeeded"
    REJECTED = "rejected"
    FAULT = "fault"


class ErrorKind(str, Enum):
    """
    Why an operation did not succeed.

    Everything except FAULT is correctable by the caller.
    """
    UNAUTHENTICATED = "unauthenticated"
    AUTH_FAILURE = "auth_failure"
    INVALID_TOKEN = "invalid_token"
    DUPLICATE_NAME = "duplicate_name"
    NOT_FOUND = "not_found"
    FAULT = "fault"


@dataclass(frozen=True)
class Outcome:
    status: OutcomeStatus
    value: Any = None
    error: Optional[ErrorKind] = None
    message: str = ""

    @classmethod
    def success(cls, value: Any = None) -> "Outcome":
        return cls(status=OutcomeStatus.SUCCEEDED, value=value)

    @classmethod
    def rejected(cls, error: ErrorKind, message: str = "") -> "Outcome":
        return cls(status=OutcomeStatus.REJECTED, error=error, message=message)

    @classmethod
    def fault(cls, message: str = "") -> "Outcome":
        return cls(status=OutcomeStatus.FAULT, error=ErrorKind.FAULT, message=message)

    @property
    def ok(self) -> bool:
        return self.status is OutcomeStatus.SUCCEEDED
