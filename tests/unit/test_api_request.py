"""Tests for request building and response decoding."""
import json

import pytest

from wetransferpy.core.api.models import (
    AddLinksResponse,
    BoardInfoResponse,
    LinkRequest,
    TransferCreatedResponse,
    UploadUrlResponse,
)
from wetransferpy.core.api.request import RequestBuilder, RequestUris, ResponseHandler
from wetransferpy.core.api.transport import HttpRequest, HttpResponse
from wetransferpy.core.exceptions import ResponseDecodeError

BASE = 'https://dev.wetransfer.com/v2/'


class TestRequestBuilder:
    """Test suite for RequestBuilder."""

    def test_requires_api_key(self):
        with pytest.raises(ValueError):
            RequestBuilder(BASE, '')

    def test_build_url(self):
        builder = RequestBuilder(BASE, 'key')

        url = builder.build_url(RequestUris.BOARD_UPLOAD_URL, 'b1', 'f1', 3, 'mp')

        assert url == BASE + 'boards/b1/files/f1/upload-url/3/mp'

    def test_unauthenticated_headers(self):
        """Test API key always sent, bearer only with a token."""
        request = RequestBuilder(BASE, 'key').build(
            'POST', RequestUris.AUTHORIZE, content={'user_identifier': 'me'}
        )

        assert request.headers['x-api-key'] == 'key'
        assert request.headers['Content-Type'] == 'application/json'
        assert 'Authorization' not in request.headers
        assert json.loads(request.body) == {'user_identifier': 'me'}

    def test_authenticated_headers(self):
        request = RequestBuilder(BASE, 'key', 'jwt').build('GET', RequestUris.BOARD_INFO, 'b1')

        assert request.headers['Authorization'] == 'Bearer jwt'
        assert request.body is None
        assert 'Content-Type' not in request.headers

    def test_empty_body(self):
        """Test empty body still sets the content type."""
        request = RequestBuilder(BASE, 'key', 'jwt').build(
            'PUT', RequestUris.TRANSFER_FINALIZE, 't1', empty_body=True
        )

        assert request.body == b''
        assert request.headers['Content-Type'] == 'application/json'
        assert request.url == BASE + 'transfers/t1/finalize'


class TestResponseHandler:
    """Test suite for ResponseHandler."""

    @pytest.fixture
    def request_(self):
        return HttpRequest('GET', BASE + 'transfers')

    def test_decodes_and_stamps(self, request_):
        body = json.dumps({
            'success': True,
            'id': 't1',
            'message': 'Holiday',
            'state': 'uploading',
            'files': [{
                'id': 'f1', 'name': 'a.jpg', 'size': 10,
                'multipart': {'part_numbers': 1, 'chunk_size': 6291456}
            }]
        }).encode()

        result = ResponseHandler.process_response(
            TransferCreatedResponse, request_, HttpResponse(201, 'Created', body)
        )

        assert result.success
        assert result.status_code == 201
        assert result.request_url == request_.url
        assert result.name == 'Holiday'
        assert result.files[0].multipart.number_of_parts == 1
        assert result.files[0].multipart.chunk_size == 6291456

    def test_explicit_success_wins(self, request_):
        """Test body 'success: false' overrides a 200 status."""
        body = json.dumps({'success': False, 'message': 'nope'}).encode()

        result = ResponseHandler.process_response(
            UploadUrlResponse, request_, HttpResponse(200, 'OK', body)
        )

        assert not result.success
        assert result.message == 'nope'

    def test_status_decides_without_field(self, request_):
        result = ResponseHandler.process_response(
            UploadUrlResponse, request_, HttpResponse(403, 'Forbidden', b'{"message": "Forbidden token"}')
        )

        assert not result.success
        assert result.message == 'Forbidden token'

    def test_reason_used_when_no_message(self, request_):
        result = ResponseHandler.process_response(
            UploadUrlResponse, request_, HttpResponse(500, 'Internal Server Error', b'')
        )

        assert not result.success
        assert result.message == 'Internal Server Error'

    def test_invalid_json_on_success(self, request_):
        with pytest.raises(ResponseDecodeError) as exc_info:
            ResponseHandler.process_response(
                UploadUrlResponse, request_, HttpResponse(200, 'OK', b'<html>')
            )

        assert exc_info.value.status_code == 200
        assert exc_info.value.request_url == request_.url

    def test_invalid_json_on_error(self, request_):
        """Test a non-JSON error body gives an unsuccessful response."""
        result = ResponseHandler.process_response(
            UploadUrlResponse, request_, HttpResponse(502, 'Bad Gateway', b'<html>')
        )

        assert not result.success
        assert result.status_code == 502

    def test_array_response(self, request_):
        body = json.dumps([
            {'success': True, 'id': 'l1', 'url': 'https://a', 'meta': {'title': 'A'}},
            {'success': False, 'url': 'https://b'},
        ]).encode()

        result = ResponseHandler.process_array_response(
            AddLinksResponse, request_, HttpResponse(201, 'Created', body)
        )

        assert result.success
        assert [link.title for link in result.links] == ['A', '']
        assert [link.success for link in result.links] == [True, False]


class TestModels:
    """Test suite for request/response models."""

    def test_link_request_without_title(self):
        assert LinkRequest('https://a').to_dict() == {'url': 'https://a'}

    def test_link_request_with_title(self):
        assert LinkRequest('https://a', 'A').to_dict() == {'url': 'https://a', 'title': 'A'}

    def test_board_info(self):
        info = BoardInfoResponse.from_dict({
            'id': 'b1', 'name': 'Board', 'url': 'https://we.tl/b-1',
            'items': [{'type': 'link', 'url': 'https://a'}]
        })

        assert info.board_url == 'https://we.tl/b-1'
        assert info.items == [{'type': 'link', 'url': 'https://a'}]
