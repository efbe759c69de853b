"""Request builder for API requests."""
import json
from typing import Any, Dict, Optional

from ..transport import HttpRequest


class RequestUris:
    """Endpoint paths, relative to the configured base URL."""

    AUTHORIZE = 'authorize'
    CREATE_TRANSFER = 'transfers'
    TRANSFER_UPLOAD_URL = 'transfers/{0}/files/{1}/upload-url/{2}'
    TRANSFER_FILE_COMPLETE = 'transfers/{0}/files/{1}/upload-complete'
    TRANSFER_FINALIZE = 'transfers/{0}/finalize'

    CREATE_BOARD = 'boards'
    BOARD_INFO = 'boards/{0}'
    BOARD_LINKS = 'boards/{0}/links'
    BOARD_FILES = 'boards/{0}/files'
    BOARD_UPLOAD_URL = 'boards/{0}/files/{1}/upload-url/{2}/{3}'
    BOARD_FILE_COMPLETE = 'boards/{0}/files/{1}/upload-complete'


class RequestBuilder:
    """Builds API requests."""

    JSON_MEDIA_TYPE = 'application/json'

    def __init__(self, base_url: str, api_key: str, token: Optional[str] = None):
        """Initializes request builder."""
        if not api_key:
            raise ValueError("An API key is required")
        self.base_url = base_url
        self.api_key = api_key
        self.token = token

    def build_url(self, path: str, *args: Any) -> str:
        """Builds request URL."""
        return f"{self.base_url}{path.format(*args)}"

    def build_headers(self, with_body: bool = False) -> Dict[str, str]:
        """Builds request headers."""
        headers = {
            'Accept': self.JSON_MEDIA_TYPE,
            'x-api-key': self.api_key,
        }
        if with_body:
            headers['Content-Type'] = self.JSON_MEDIA_TYPE
        if self.token:
            headers['Authorization'] = f"Bearer {self.token}"
        return headers

    def build_data(self, content: Any) -> bytes:
        """Builds request data."""
        return json.dumps(content).encode('utf-8')

    def build(
        self,
        method: str,
        path: str,
        *args: Any,
        content: Any = None,
        empty_body: bool = False
    ) -> HttpRequest:
        """
        Builds a complete request.

        Args:
            method: HTTP method
            path: Endpoint path template from RequestUris
            *args: Values for the path template
            content: JSON-serializable body
            empty_body: Send an empty JSON body so Content-Type is set

        Returns:
            HttpRequest
        """
        if content is not None:
            body = self.build_data(content)
        elif empty_body:
            body = b''
        else:
            body = None

        return HttpRequest(
            method=method,
            url=self.build_url(path, *args),
            headers=self.build_headers(with_body=body is not None),
            body=body
        )
