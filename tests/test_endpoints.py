"""Tests for the HTTP API."""

from unittest.mock import Mock
from urllib.parse import quote

import pytest

from fileserver.outcomes import Outcome
from fileserver.routes.common import content_disposition
from fileserver.services.file_service import FileService

from conftest import TEST_EMAIL, TEST_PASSWORD


def upload(client, headers, name, content):
    return client.post('/file', params={'filename': name}, files={'file': (name, content)}, headers=headers)


def test_health_endpoint_is_public(client):
    response = client.get('/health')

    assert response.status_code == 200
    assert response.json()['status'] == 'healthy'
    assert 'X-Request-ID' in response.headers


class TestLogin:

    def test_login_returns_token(self, client):
        response = client.post('/login', json={'login': TEST_EMAIL, 'password': TEST_PASSWORD})

        assert response.status_code == 200
        assert response.json()['auth-token']

    def test_login_with_bad_password(self, client):
        response = client.post('/login', json={'login': TEST_EMAIL, 'password': 'wrong'})

        assert response.status_code == 400
        assert response.json() == {'message': 'Bad credentials', 'id': 400}

    def test_login_request_validation(self, client):
        response = client.post('/login', json={'login': TEST_EMAIL})

        assert response.status_code == 422

    def test_logout_without_token(self, client):
        response = client.post('/logout')

        assert response.status_code == 200
        assert response.text == 'Success logout'

    def test_token_still_works_after_logout(self, client, auth_headers):
        client.post('/logout', headers=auth_headers)

        assert client.get('/list', params={'limit': 10}, headers=auth_headers).status_code == 200


class TestAuthentication:

    def test_missing_token(self, client):
        response = client.get('/list', params={'limit': 10})

        assert response.status_code == 401
        assert response.json() == {'message': 'Unauthorized error', 'id': 401}

    def test_empty_token(self, client):
        response = client.get('/file', params={'filename': 'a.txt'}, headers={'auth-token': ''})

        assert response.status_code == 401

    def test_invalid_token(self, client):
        response = client.delete('/file', params={'filename': 'a.txt'}, headers={'auth-token': 'nope'})

        assert response.status_code == 401

    def test_bearer_prefixed_token(self, client, auth_headers):
        headers = {'auth-token': f"Bearer {auth_headers['auth-token']}"}

        assert client.get('/list', params={'limit': 1}, headers=headers).status_code == 200

    def test_cors_preflight(self, client):
        response = client.options('/file', headers={
            'Origin': 'http://localhost:8081',
            'Access-Control-Request-Method': 'POST',
        })

        assert response.status_code == 200
        assert response.headers['access-control-allow-origin'] == 'http://localhost:8081'


class TestFiles:

    def test_upload_and_download(self, client, auth_headers):
        response = upload(client, auth_headers, 'a.txt', b'file content')
        assert response.status_code == 200
        assert response.text == 'Success upload'

        response = client.get('/file', params={'filename': 'a.txt'}, headers=auth_headers)

        assert response.status_code == 200
        assert response.content == b'file content'
        assert response.headers['content-disposition'] == 'attachment; filename="a.txt"'

    def test_duplicate_upload_is_rejected(self, client, auth_headers):
        upload(client, auth_headers, 'a.txt', b'first')

        response = upload(client, auth_headers, 'a.txt', b'second')

        assert response.status_code == 400
        assert response.json() == {'message': 'Error input data', 'id': 400}
        assert client.get('/file', params={'filename': 'a.txt'}, headers=auth_headers).content == b'first'

    def test_download_missing(self, client, auth_headers):
        response = client.get('/file', params={'filename': 'missing.txt'}, headers=auth_headers)

        assert response.status_code == 400
        assert response.json()['message'] == 'Error input data'

    def test_delete(self, client, auth_headers):
        upload(client, auth_headers, 'a.txt', b'x')

        response = client.delete('/file', params={'filename': 'a.txt'}, headers=auth_headers)

        assert response.status_code == 200
        assert response.text == 'Success deleted'
        assert client.delete('/file', params={'filename': 'a.txt'}, headers=auth_headers).status_code == 400

    def test_rename(self, client, auth_headers):
        upload(client, auth_headers, 'a.txt', b'content')

        response = client.put('/file', params={'filename': 'a.txt'}, json={'filename': 'b.txt'}, headers=auth_headers)

        assert response.status_code == 200
        assert response.text == 'Success edited'
        assert client.get('/file', params={'filename': 'a.txt'}, headers=auth_headers).status_code == 400
        assert client.get('/file', params={'filename': 'b.txt'}, headers=auth_headers).content == b'content'

    def test_rename_missing(self, client, auth_headers):
        response = client.put('/file', params={'filename': 'a.txt'}, json={'filename': 'b.txt'}, headers=auth_headers)

        assert response.status_code == 400

    def test_rename_onto_existing_name_is_server_error(self, client, auth_headers):
        upload(client, auth_headers, 'a.txt', b'A')
        upload(client, auth_headers, 'b.txt', b'B')

        response = client.put('/file', params={'filename': 'a.txt'}, json={'filename': 'b.txt'}, headers=auth_headers)

        assert response.status_code == 500
        assert response.json() == {'message': 'Error edit file', 'id': 500}

    def test_list_with_limit(self, client, auth_headers):
        for i in range(5):
            upload(client, auth_headers, f'f{i}.txt', b'x' * (i + 1))

        response = client.get('/list', params={'limit': 2}, headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == [{'filename': 'f0.txt', 'size': 1}, {'filename': 'f1.txt', 'size': 2}]

    def test_list_rejects_negative_limit(self, client, auth_headers):
        assert client.get('/list', params={'limit': -1}, headers=auth_headers).status_code == 422

    def test_service_fault_maps_to_server_error(self, client, auth_headers):
        file_service = Mock(spec=FileService)
        file_service.download_file.return_value = Outcome.fault("Error download file")
        client.app.state.file_service = file_service

        response = client.get('/file', params={'filename': 'a.txt'}, headers=auth_headers)

        assert response.status_code == 500
        assert response.json() == {'message': 'Error download file', 'id': 500}


class TestDownloadFileNames:

    def test_cyrillic_name_round_trips(self, client, auth_headers):
        name = 'отчёт.txt'
        assert upload(client, auth_headers, name, 'содержимое'.encode('utf-8')).status_code == 200

        response = client.get('/file', params={'filename': name}, headers=auth_headers)

        assert response.status_code == 200
        assert response.content == 'содержимое'.encode('utf-8')
        disposition = response.headers['content-disposition']
        assert disposition.startswith('attachment; filename="')
        assert f"filename*=utf-8''{quote(name)}" in disposition

    def test_name_with_quotes_round_trips(self, client, auth_headers):
        name = 'say "hi".txt'
        upload(client, auth_headers, name, b'hi')

        response = client.get('/file', params={'filename': name}, headers=auth_headers)

        assert response.status_code == 200
        assert response.content == b'hi'
        assert f"filename*=utf-8''{quote(name)}" in response.headers['content-disposition']


def test_content_disposition_plain_ascii():
    assert content_disposition('a.txt') == 'attachment; filename="a.txt"'


def test_content_disposition_escapes_fallback():
    header = content_disposition('say "hi".txt')

    assert header == 'attachment; filename="say \\"hi\\".txt"; filename*=utf-8\'\'say%20%22hi%22.txt'
    header.encode('latin-1')


def test_content_disposition_non_ascii_is_latin1_safe():
    header = content_disposition('отчёт.txt')

    assert header.startswith('attachment; filename="?????.txt"; ')
    header.encode('latin-1')


@pytest.mark.parametrize("path", ['/docs', '/redoc', '/openapi.json'])
def test_api_docs_are_public(client, path):
    assert client.get(path).status_code == 200
