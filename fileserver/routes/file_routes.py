"""File operation API routes."""

from typing import List

from fastapi import APIRouter, Depends, File, Query, UploadFile
from fastapi.responses import PlainTextResponse, Response

from common.logging_config import get_logger
from fileserver.auth import get_current_identity
from fileserver.routes.common import content_disposition, failure_response, get_file_service
from fileserver.schemas.files import FileEntryResponse, RenameFileRequest
from fileserver.services.file_service import FileService

logger = get_logger(__name__)

router = APIRouter(tags=["Files"])


@router.post("/file", response_class=PlainTextResponse)
def upload_file(
    filename: str = Query(..., min_length=1),
    file: UploadFile = File(...),
    current_identity: str = Depends(get_current_identity),
    file_service: FileService = Depends(get_file_service)
):
    """
    Upload a file under the given name.

    Parameters:
        - filename: Name to store the file under
        - file: File content (multipart/form-data)
        - auth-token header (required)

    Raises:
        - 400: A file with this name already exists
        - 401: Invalid or missing token
        - 500: Internal server error
    """
    logger.info(f"Upload of '{filename}' requested by {current_identity}")
    content = file.file.read()
    size = file.size if file.size is not None else len(content)

    outcome = file_service.upload_file(filename, content, size)
    if not outcome.ok:
        return failure_response(outcome)
    return "Success upload"


@router.get("/file")
def download_file(
    filename: str = Query(..., min_length=1),
    current_identity: str = Depends(get_current_identity),
    file_service: FileService = Depends(get_file_service)
):
    """
    Download a file by name.

    Raises:
        - 400: File not found
        - 401: Invalid or missing token
        - 500: Internal server error
    """
    logger.info(f"Download of '{filename}' requested by {current_identity}")
    outcome = file_service.download_file(filename)
    if not outcome.ok:
        return failure_response(outcome)

    return Response(
        content=outcome.value.read(),
        media_type="application/octet-stream",
        headers={"Content-Disposition": content_disposition(filename)}
    )


@router.delete("/file", response_class=PlainTextResponse)
def delete_file(
    filename: str = Query(..., min_length=1),
    current_identity: str = Depends(get_current_identity),
    file_service: FileService = Depends(get_file_service)
):
    """
    Delete a file by name.

    Raises:
        - 400: File not found
        - 401: Invalid or missing token
        - 500: Internal server error
    """
    logger.info(f"Delete of '{filename}' requested by {current_identity}")
    outcome = file_service.delete_file(filename)
    if not outcome.ok:
        return failure_response(outcome)
    return "Success deleted"


@router.put("/file", response_class=PlainTextResponse)
def rename_file(
    request: RenameFileRequest,
    filename: str = Query(..., min_length=1),
    current_identity: str = Depends(get_current_identity),
    file_service: FileService = Depends(get_file_service)
):
    """
    Rename a file.

    Parameters:
        - filename: Current name
        - body: {"filename": new name}

    Raises:
        - 400: File not found
        - 401: Invalid or missing token
        - 500: Internal server error, including a new name that is already taken
    """
    logger.info(f"Rename of '{filename}' to '{request.filename}' requested by {current_identity}")
    outcome = file_service.rename_file(filename, request.filename)
    if not outcome.ok:
        return failure_response(outcome)
    return "Success edited"


@router.get("/list", response_model=List[FileEntryResponse])
def list_files(
    limit: int = Query(..., ge=0),
    current_identity: str = Depends(get_current_identity),
    file_service: FileService = Depends(get_file_service)
):
    """
    List stored files with their sizes, at most `limit` entries.
    """
    outcome = file_service.list_files(limit)
    if not outcome.ok:
        return failure_response(outcome)

    return [FileEntryResponse(filename=entry.name, size=entry.size) for entry in outcome.value]
