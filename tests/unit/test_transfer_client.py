"""Tests for TransferClient."""
import json

import pytest

from wetransferpy.core.api import APIConfig, FileRequest, LinkRequest, TransferClient
from wetransferpy.core.exceptions import MissingTokenError

BASE = 'https://dev.wetransfer.com/v2/'


class TestTransferClient:
    """Test suite for TransferClient."""

    @pytest.fixture
    def authorized(self, client, token_cache):
        token_cache.set('jwt-token')
        return client

    def test_requires_api_key(self, transport):
        with pytest.raises(ValueError):
            TransferClient(transport, APIConfig())

    @pytest.mark.asyncio
    async def test_authorize_caches_token(self, client, transport):
        transport.route('POST', r'/authorize$', json_body={'success': True, 'token': 'jwt-token'})

        response = await client.authorize('me@example.com')

        assert response.success
        assert client.token == 'jwt-token'
        request = transport.requests[0]
        assert request.url == BASE + 'authorize'
        assert json.loads(request.body) == {'user_identifier': 'me@example.com'}
        assert 'Authorization' not in request.headers

    @pytest.mark.asyncio
    async def test_authorize_failure(self, client, transport):
        transport.route('POST', r'/authorize$', status=403, json_body={'message': 'Forbidden'})

        response = await client.authorize('me@example.com')

        assert not response.success
        assert response.message == 'Forbidden'
        assert client.token is None

    @pytest.mark.asyncio
    async def test_authorize_without_token_is_failure(self, client, transport):
        transport.route('POST', r'/authorize$', json_body={'success': True})

        response = await client.authorize('me@example.com')

        assert not response.success
        assert client.token is None

    @pytest.mark.asyncio
    async def test_authorize_requires_user(self, client, transport):
        with pytest.raises(ValueError):
            await client.authorize('')
        assert transport.requests == []

    @pytest.mark.asyncio
    async def test_token_required(self, client, transport):
        """Test authenticated calls fail fast without a token."""
        with pytest.raises(MissingTokenError):
            await client.create_transfer('x', [FileRequest('a', 1)])
        assert transport.requests == []

    def test_clear_token(self, authorized):
        authorized.clear_token()

        assert authorized.token is None

    @pytest.mark.asyncio
    async def test_create_transfer(self, authorized, transport, remote):
        transport.route('POST', r'/transfers$', status=201, json_body={
            'success': True, 'id': 't1', 'message': 'Holiday',
            'files': [remote('f1', 'a.jpg', 10, 4)]
        })

        response = await authorized.create_transfer('Holiday', [FileRequest('a.jpg', 10)])

        assert response.success
        assert response.id == 't1'
        assert response.files[0].multipart.number_of_parts == 3
        request = transport.requests[0]
        assert request.headers['Authorization'] == 'Bearer jwt-token'
        assert json.loads(request.body) == {
            'message': 'Holiday', 'files': [{'name': 'a.jpg', 'size': 10}]
        }

    @pytest.mark.asyncio
    async def test_request_upload_url(self, authorized, transport):
        transport.route('GET', r'/upload-url/2$', json_body={'success': True, 'url': 'https://s/2'})

        response = await authorized.request_upload_url('t1', 'f1', 2)

        assert response.url == 'https://s/2'
        assert response.part_number == 2
        assert transport.requests[0].url == BASE + 'transfers/t1/files/f1/upload-url/2'

    @pytest.mark.asyncio
    async def test_complete_file(self, authorized, transport):
        transport.route('PUT', r'/upload-complete$', json_body={'success': True, 'retries': 0})

        response = await authorized.complete_file('t1', 'f1', 3)

        assert response.success
        assert json.loads(transport.requests[0].body) == {'part_numbers': 3}

    @pytest.mark.asyncio
    async def test_complete_file_invalid_parts(self, authorized):
        with pytest.raises(ValueError):
            await authorized.complete_file('t1', 'f1', 0)

    @pytest.mark.asyncio
    async def test_complete_transfer(self, authorized, transport):
        transport.route('PUT', r'/finalize$', json_body={
            'success': True, 'id': 't1', 'state': 'processing', 'url': 'https://we.tl/t-abc'
        })

        response = await authorized.complete_transfer('t1')

        assert response.download_url == 'https://we.tl/t-abc'
        assert transport.requests[0].body == b''

    @pytest.mark.asyncio
    async def test_create_board(self, authorized, transport):
        transport.route('POST', r'/boards$', status=201, json_body={
            'id': 'b1', 'name': 'Board', 'description': 'Desc', 'state': 'downloadable',
            'url': 'https://we.tl/b-1'
        })

        response = await authorized.create_board('Board', 'Desc')

        assert response.success
        assert response.board_url == 'https://we.tl/b-1'
        assert json.loads(transport.requests[0].body) == {'name': 'Board', 'description': 'Desc'}

    @pytest.mark.asyncio
    async def test_create_board_requires_name(self, authorized):
        with pytest.raises(ValueError):
            await authorized.create_board('')

    @pytest.mark.asyncio
    async def test_get_board_info(self, authorized, transport):
        transport.route('GET', r'/boards/b1$', json_body={'id': 'b1', 'name': 'Board', 'items': []})

        response = await authorized.get_board_info('b1')

        assert response.success
        assert response.name == 'Board'

    @pytest.mark.asyncio
    async def test_add_files_to_board(self, authorized, transport, remote):
        transport.route('POST', r'/boards/b1/files$', status=201, json_body=[
            remote('f1', 'a.jpg', 10, 4, multipart_id='mp1')
        ])

        response = await authorized.add_files_to_board('b1', [FileRequest('a.jpg', 10)])

        assert response.success
        assert response.files[0].multipart.multipart_upload_id == 'mp1'
        assert json.loads(transport.requests[0].body) == [{'name': 'a.jpg', 'size': 10}]

    @pytest.mark.asyncio
    async def test_request_board_upload_url(self, authorized, transport):
        transport.route('GET', r'/upload-url/1/mp1$', json_body={'success': True, 'url': 'https://s/1'})

        response = await authorized.request_board_upload_url('b1', 'f1', 1, 'mp1')

        assert response.success
        assert transport.requests[0].url == BASE + 'boards/b1/files/f1/upload-url/1/mp1'

    @pytest.mark.asyncio
    async def test_complete_board_file(self, authorized, transport):
        transport.route('PUT', r'/boards/b1/files/f1/upload-complete$', json_body={'success': True})

        response = await authorized.complete_board_file('b1', 'f1')

        assert response.success

    @pytest.mark.asyncio
    async def test_add_links(self, authorized, transport):
        transport.route('POST', r'/boards/b1/links$', status=201, json_body=[
            {'success': True, 'id': 'l1', 'url': 'https://a', 'meta': {'title': 'A'}}
        ])

        response = await authorized.add_links('b1', [LinkRequest('https://a', 'A')])

        assert response.success
        assert response.links[0].id == 'l1'
        assert json.loads(transport.requests[0].body) == [{'url': 'https://a', 'title': 'A'}]

    @pytest.mark.asyncio
    async def test_add_links_none(self, authorized, transport):
        """Test missing links short-circuit without a network call."""
        response = await authorized.add_links('b1', None)

        assert not response.success
        assert response.status_code == 204
        assert response.message == "Please provide content"
        assert response.links == []
        assert transport.requests == []

    @pytest.mark.asyncio
    async def test_upload_part(self, client, transport):
        """Test parts are PUT without API headers."""
        transport.route('PUT', r'^https://storage\.example\.com/', status=200)

        response = await client.upload_part('https://storage.example.com/f1/1', b'data', 1)

        assert response.success
        assert response.part_number == 1
        request = transport.requests[0]
        assert request.body == b'data'
        assert 'x-api-key' not in request.headers
        assert 'Authorization' not in request.headers

    @pytest.mark.asyncio
    async def test_upload_part_requires_200(self, client, transport):
        transport.route('PUT', r'^https://storage\.example\.com/', status=204, reason='No Content')

        response = await client.upload_part('https://storage.example.com/f1/1', b'data', 1)

        assert not response.success
        assert response.status_code == 204
