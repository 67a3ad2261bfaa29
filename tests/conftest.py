"""Shared pytest fixtures for all tests."""

from typing import Dict, Optional

import bcrypt
import pytest
from fastapi.testclient import TestClient

from fileserver.config import Settings, TokenSettings
from fileserver.database import init_database
from fileserver.main import create_app
from fileserver.repositories.credential_repository import Credential, CredentialRepository
from fileserver.repositories.file_repository import FileRepository
from fileserver.services.token_service import TokenService

TEST_SECRET = "test-signing-secret-that-is-long-enough-for-hs256"
TEST_EMAIL = "user@mail.ru"
TEST_PASSWORD = "secret"


def fast_hash(password: str) -> str:
    """Bcrypt hash with the minimum cost factor to keep tests quick."""
    return bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt(rounds=4)).decode('utf-8')


class FakeClock:
    """Manually advanced clock returning epoch seconds."""

    def __init__(self, now: float = 1_700_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class InMemoryCredentialStore:
    """Deterministic credential lookup backed by a dict."""

    def __init__(self, credentials: Optional[Dict[str, str]] = None):
        self._credentials = dict(credentials or {})

    def add(self, identity: str, password_hash: str) -> None:
        self._credentials[identity] = password_hash

    def remove(self, identity: str) -> None:
        self._credentials.pop(identity, None)

    def find_by_identity(self, identity: str) -> Optional[Credential]:
        password_hash = self._credentials.get(identity)
        if password_hash is None:
            return None
        return Credential(identity=identity, password_hash=password_hash)


@pytest.fixture
def db_path(tmp_path) -> str:
    """
    Create a temporary database with the schema applied.
    """
    path = str(tmp_path / "fileserver.db")
    init_database(path)
    return path


@pytest.fixture
def file_repo(db_path) -> FileRepository:
    return FileRepository(db_path)


@pytest.fixture
def credential_repo(db_path) -> CredentialRepository:
    return CredentialRepository(db_path)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def token_settings() -> TokenSettings:
    return TokenSettings(secret=TEST_SECRET, expiration_seconds=60)


@pytest.fixture
def token_service(token_settings, clock) -> TokenService:
    return TokenService(token_settings, clock=clock)


@pytest.fixture
def credential_store() -> InMemoryCredentialStore:
    return InMemoryCredentialStore({TEST_EMAIL: fast_hash(TEST_PASSWORD)})


@pytest.fixture
def settings(db_path, token_settings) -> Settings:
    return Settings(
        database_path=db_path,
        token=token_settings,
        cors_origins=("http://localhost:8081",),
    )


@pytest.fixture
def client(settings, credential_repo):
    """
    FastAPI test client backed by a temporary database with one user.
    """
    credential_repo.create_credential(TEST_EMAIL, fast_hash(TEST_PASSWORD))
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def auth_headers(client) -> Dict[str, str]:
    response = client.post('/login', json={'login': TEST_EMAIL, 'password': TEST_PASSWORD})
    assert response.status_code == 200
    return {'auth-token': response.json()['auth-token']}
