"""Pytest fixtures for wetransferpy tests."""
import json
import re
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

import pytest

from wetransferpy.core.api import APIConfig, HttpRequest, HttpResponse, TransferClient
from wetransferpy.core.session import MemoryTokenStore, TokenCache


BASE_URL = 'https://dev.wetransfer.com/v2/'
STORAGE_URL = 'https://storage.example.com/'


@dataclass
class Route:
    method: str
    pattern: Any
    status: int = 200
    body: bytes = b''
    reason: str = 'OK'
    error: Optional[BaseException] = None
    handler: Optional[Callable] = None


class FakeTransport:
    """
    Scripted transport.

    Requests are answered by the most recently added matching route;
    unmatched requests fail the test.
    """

    def __init__(self):
        self.requests: List[HttpRequest] = []
        self._routes: List[Route] = []

    def route(
        self,
        method: str,
        pattern: str,
        status: int = 200,
        json_body: Any = None,
        body: Optional[bytes] = None,
        reason: Optional[str] = None,
        error: Optional[BaseException] = None,
        handler: Optional[Callable] = None
    ) -> 'FakeTransport':
        if body is None:
            body = json.dumps(json_body).encode() if json_body is not None else b''
        if reason is None:
            reason = 'OK' if status < 400 else 'Bad Request'
        self._routes.insert(0, Route(method, re.compile(pattern), status, body, reason, error, handler))
        return self

    async def send(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        for route in self._routes:
            if route.method != request.method:
                continue
            match = route.pattern.search(request.url)
            if not match:
                continue
            if route.error is not None:
                raise route.error
            if route.handler is not None:
                return route.handler(request, match)
            return HttpResponse(route.status, route.reason, route.body)
        raise AssertionError(f"Unexpected request: {request.method} {request.url}")

    def calls(self, method: Optional[str] = None, pattern: Optional[str] = None) -> List[HttpRequest]:
        """Requests sent so far, optionally filtered."""
        return [
            r for r in self.requests
            if (method is None or r.method == method)
            and (pattern is None or re.search(pattern, r.url))
        ]


def remote_file(file_id, name, size, chunk_size, multipart_id=None):
    """A file entry as returned by the service."""
    parts = -(-size // chunk_size)
    multipart = {'part_numbers': parts, 'chunk_size': chunk_size}
    if multipart_id:
        multipart['id'] = multipart_id
    return {'id': file_id, 'name': name, 'size': size, 'multipart': multipart}


def json_response(data, status=200):
    return HttpResponse(status, 'OK', json.dumps(data).encode())


class ScriptedApi:
    """Scripts a successful WeTransfer conversation on a FakeTransport."""

    def __init__(self, transport: FakeTransport):
        self.transport = transport

    def authorize(self, token='jwt-token'):
        self.transport.route('POST', r'/v2/authorize$', json_body={'success': True, 'token': token})
        return self

    def storage(self):
        self.transport.route('PUT', r'^https://storage\.example\.com/', status=200)
        return self

    def transfer(self, files, transfer_id='t1', name='Holiday', download_url='https://we.tl/t-abc'):
        self.authorize()
        self.transport.route('POST', r'/v2/transfers$', json_body={
            'success': True,
            'id': transfer_id,
            'message': name,
            'state': 'uploading',
            'files': files
        })
        self.transport.route(
            'GET', rf'/transfers/{transfer_id}/files/(\w+)/upload-url/(\d+)$',
            handler=lambda req, m: json_response(
                {'success': True, 'url': f"{STORAGE_URL}{m.group(1)}/{m.group(2)}"}
            )
        )
        self.storage()
        self.transport.route(
            'PUT', rf'/transfers/{transfer_id}/files/(\w+)/upload-complete$',
            json_body={'success': True, 'retries': 0}
        )
        self.transport.route('PUT', rf'/transfers/{transfer_id}/finalize$', json_body={
            'success': True, 'id': transfer_id, 'state': 'processing', 'url': download_url
        })
        return self

    def board(self, files, board_id='b1'):
        self.authorize()
        self.transport.route('POST', rf'/v2/boards/{board_id}/files$', json_body=files)
        self.transport.route(
            'GET', rf'/boards/{board_id}/files/(\w+)/upload-url/(\d+)/(\w+)$',
            handler=lambda req, m: json_response(
                {'success': True, 'url': f"{STORAGE_URL}{m.group(1)}/{m.group(2)}"}
            )
        )
        self.storage()
        self.transport.route(
            'PUT', rf'/boards/{board_id}/files/(\w+)/upload-complete$',
            json_body={'success': True}
        )
        return self


@pytest.fixture
def transport():
    """Scripted fake transport."""
    return FakeTransport()


@pytest.fixture
def api(transport):
    """Helper scripting API conversations."""
    return ScriptedApi(transport)


@pytest.fixture
def api_config():
    return APIConfig(api_key='test-key')


@pytest.fixture
def token_cache():
    return TokenCache(MemoryTokenStore())


@pytest.fixture
def client(transport, api_config, token_cache):
    """TransferClient wired to the fake transport."""
    return TransferClient(transport, api_config, token_cache)


@pytest.fixture
def chunk_dir(tmp_path):
    path = tmp_path / 'chunks'
    path.mkdir()
    return path


@pytest.fixture
def make_file(tmp_path):
    """Factory writing a local file with the given content."""
    files_dir = tmp_path / 'files'
    files_dir.mkdir()

    def _make(name: str, content: bytes):
        path = files_dir / name
        path.write_bytes(content)
        return path

    return _make


@pytest.fixture
def remote():
    """Factory for service file entries."""
    return remote_file
