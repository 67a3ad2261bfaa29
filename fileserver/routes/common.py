"""Helpers shared by the API routers."""

from urllib.parse import quote

from fastapi import Request, status
from fastapi.responses import JSONResponse

from fileserver.outcomes import Outcome, OutcomeStatus
from fileserver.schemas.common import ErrorResponse
from fileserver.services.auth_service import AuthService
from fileserver.services.file_service import FileService

INPUT_ERROR_MESSAGE = "Error input data"
UNAUTHORIZED_MESSAGE = "Unauthorized error"


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


def get_file_service(request: Request) -> FileService:
    return request.app.state.file_service


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message, id=status_code).model_dump()
    )


def failure_response(outcome: Outcome) -> JSONResponse:
    """
    Map a non-successful outcome to its HTTP error response.
    """
    if outcome.status is OutcomeStatus.REJECTED:
        return error_response(status.HTTP_400_BAD_REQUEST, INPUT_ERROR_MESSAGE)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, outcome.message)


def content_disposition(filename: str) -> str:
    """
    Build an attachment Content-Disposition header that survives latin-1 encoding.

    Names that are not plain ASCII get an ASCII fallback plus an RFC 5987 filename*.
    """
    quoted = quote(filename)
    if quoted == filename:
        return f'attachment; filename="{filename}"'

    fallback = filename.encode('ascii', 'replace').decode('ascii')
    fallback = fallback.replace('\\', '\\\\').replace('"', '\\"')
    return f'attachment; filename="{fallback}"; filename*=utf-8\'\'{quoted}'
