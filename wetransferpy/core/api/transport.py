"""
HTTP transport.

Sends one request and returns status, reason phrase and body.
No retries, no batching: the upload pipeline issues calls one at a time.
"""
from dataclasses import dataclass, field
from typing import Dict, Optional, Protocol, runtime_checkable
import aiohttp

from .config import APIConfig
from ..logging import get_logger


@dataclass(frozen=True)
class HttpRequest:
    """An HTTP request ready to be sent."""
    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None


@dataclass(frozen=True)
class HttpResponse:
    """
    Raw HTTP response.

    Attributes:
        status: HTTP status code
        reason: Reason phrase
        body: Response body bytes
    """
    status: int
    reason: str = ''
    body: bytes = b''

    @property
    def ok(self) -> bool:
        """True for 2xx status codes."""
        return 200 <= self.status < 300


@runtime_checkable
class Transport(Protocol):
    """Protocol for HTTP transports."""

    async def send(self, request: HttpRequest) -> HttpResponse:
        """
        Send a request and wait for its response.

        Exceptions (timeouts, connection errors) propagate to the caller.
        """
        ...


class AiohttpTransport:
    """
    aiohttp based transport.

    Reuses a single ClientSession for all calls.

    Example:
        >>> async with AiohttpTransport(APIConfig(api_key="key")) as transport:
        ...     response = await transport.send(HttpRequest("GET", url))
    """

    def __init__(
        self,
        config: Optional[APIConfig] = None,
        session: Optional[aiohttp.ClientSession] = None
    ):
        """
        Initialize transport.

        Args:
            config: API configuration (uses defaults if not provided)
            session: Optional shared session; not closed by this transport
        """
        self._config = config or APIConfig.default()
        self._session = session
        self._owns_session = session is None
        self._logger = get_logger('wetransferpy.api.transport')

    async def __aenter__(self) -> 'AiohttpTransport':
        """Async context manager entry."""
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure session is created and open."""
        if self._session is None or self._session.closed:
            connector = aiohttp.TCPConnector(
                **self._config.get_connector_kwargs()
            )
            self._session = aiohttp.ClientSession(
                connector=connector,
                **self._config.get_session_kwargs()
            )
            self._owns_session = True
        return self._session

    async def close(self):
        """Close session if we own it."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    async def send(self, request: HttpRequest) -> HttpResponse:
        """
        Send a request.

        Args:
            request: Request to send

        Returns:
            HttpResponse with status, reason and body

        Raises:
            asyncio.TimeoutError: If the call timed out
            aiohttp.ClientError: If a network error occurs
        """
        session = await self._ensure_session()
        proxy = self._config.proxy.to_aiohttp_proxy() if self._config.proxy else None

        self._logger.debug(f"{request.method} {request.url}")

        async with session.request(
            request.method,
            request.url,
            data=request.body,
            headers=request.headers,
            proxy=proxy
        ) as response:
            body = await response.read()
            self._logger.debug(
                f"{request.method} {request.url} -> {response.status} {response.reason}"
            )
            return HttpResponse(
                status=response.status,
                reason=response.reason or '',
                body=body
            )
