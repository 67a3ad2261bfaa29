"""Tests for concurrent use of the shared store and the authentication gate."""

from concurrent.futures import ThreadPoolExecutor
from threading import Barrier

from fileserver.outcomes import OutcomeStatus
from fileserver.services.auth_gate import AuthenticationGate
from fileserver.services.file_service import FileService

from conftest import InMemoryCredentialStore, fast_hash

WORKERS = 8


def test_concurrent_uploads_of_same_name_have_one_winner(file_repo):
    file_service = FileService(file_repo)
    barrier = Barrier(WORKERS)

    def upload(i):
        barrier.wait()
        content = f"writer-{i}".encode('utf-8')
        return file_service.upload_file("a.txt", content, len(content))

    with ThreadPoolExecutor(max_workers=WORKERS) as pool:
        outcomes = list(pool.map(upload, range(WORKERS)))

    winners = [i for i, outcome in enumerate(outcomes) if outcome.ok]
    assert len(winners) == 1
    assert all(
        outcome.status in (OutcomeStatus.REJECTED, OutcomeStatus.FAULT)
        for i, outcome in enumerate(outcomes) if i != winners[0]
    )
    assert file_repo.get("a.txt").content == f"writer-{winners[0]}".encode('utf-8')
    assert len(file_repo.list_files(WORKERS)) == 1


def test_concurrent_authorize_resolves_each_identity(token_service):
    identities = [f"user{i}@mail.ru" for i in range(WORKERS)]
    password_hash = fast_hash("secret")
    store = InMemoryCredentialStore({identity: password_hash for identity in identities})
    gate = AuthenticationGate(token_service, store)
    tokens = [token_service.issue(identity) for identity in identities]
    barrier = Barrier(WORKERS)

    def authorize(token):
        barrier.wait()
        return gate.authorize(token, "/file")

    with ThreadPoolExecutor(max_workers=WORKERS) as pool:
        outcomes = list(pool.map(authorize, tokens * 4))

    assert all(outcome.ok for outcome in outcomes)
    assert [outcome.value for outcome in outcomes] == identities * 4
