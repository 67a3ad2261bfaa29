"""Entry point for the file server."""

import time
import uuid
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from starlette.concurrency import run_in_threadpool

from common.constants import AUTH_TOKEN_HEADER
from common.logging_config import setup_logging
from fileserver import config
from fileserver.config import Settings
from fileserver.database import init_database
from fileserver.exceptions import FileServerException
from fileserver.outcomes import OutcomeStatus
from fileserver.repositories.credential_repository import CredentialRepository
from fileserver.repositories.file_repository import FileRepository
from fileserver.routes import auth_router, file_router
from fileserver.routes.common import UNAUTHORIZED_MESSAGE, error_response
from fileserver.services.auth_gate import AuthenticationGate
from fileserver.services.auth_service import AuthService
from fileserver.services.file_service import FileService
from fileserver.services.token_service import TokenService

logger = setup_logging('fileserver')


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application and wire its services from settings.
    """
    settings = settings or Settings.from_env()

    app = FastAPI(
        title="File Server",
        description="Token-authenticated file storage service",
        version="1.0.0"
    )

    token_service = TokenService(settings.token)
    credential_repo = CredentialRepository(settings.database_path)

    app.state.settings = settings
    app.state.auth_gate = AuthenticationGate(token_service, credential_repo)
    app.state.auth_service = AuthService(credential_repo, token_service)
    app.state.file_service = FileService(FileRepository(settings.database_path))

    @app.on_event("startup")
    async def startup_event():
        """
        Initialize database on application startup.
        """
        logger.info("File server starting up...")
        init_database(settings.database_path)
        logger.info(f"Database initialized at {settings.database_path}")

        if settings.token.secret == config.DEFAULT_JWT_SECRET:
            logger.warning("Using the default token signing secret; set FILESERVER_JWT_SECRET")

    @app.middleware("http")
    async def authenticate_requests(request: Request, call_next):
        """
        Run the authentication gate and attach the caller's identity.
        """
        if request.method == "OPTIONS":
            return await call_next(request)

        gate: AuthenticationGate = request.app.state.auth_gate
        outcome = await run_in_threadpool(
            gate.authorize, request.headers.get(AUTH_TOKEN_HEADER), request.url.path
        )
        if outcome.status is OutcomeStatus.FAULT:
            return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, outcome.message)
        if not outcome.ok:
            return error_response(status.HTTP_401_UNAUTHORIZED, UNAUTHORIZED_MESSAGE)

        request.state.identity = outcome.value
        return await call_next(request)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """
        Middleware to log all HTTP requests and responses.
        """
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id

        start_time = time.time()

        logger.info(
            f"Request started: {request.method} {request.url.path} [request_id={request_id}]"
        )

        response = await call_next(request)

        duration = time.time() - start_time

        logger.info(
            f"Request completed: {request.method} {request.url.path} "
            f"status={response.status_code} duration={duration:.3f}s [request_id={request_id}]"
        )

        response.headers["X-Request-ID"] = request_id

        return response

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(FileServerException)
    async def file_server_exception_handler(request: Request, exc: FileServerException):
        request_id = getattr(request.state, 'request_id', 'unknown')
        logger.error(
            f"File server exception: {exc} [request_id={request_id}] path={request.url.path}",
            exc_info=True
        )
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))

    app.include_router(auth_router)
    app.include_router(file_router)

    @app.get("/health")
    async def health_check():
        """
        Health check endpoint for Docker healthcheck.
        """
        return {"status": "healthy", "service": "fileserver"}

    return app


def main() -> None:
    """
    Start the FastAPI server with uvicorn.
    """
    uvicorn.run(
        "fileserver.main:create_app",
        factory=True,
        host=config.SERVER_HOST,
        port=config.SERVER_PORT,
    )


if __name__ == "__main__":
    main()
