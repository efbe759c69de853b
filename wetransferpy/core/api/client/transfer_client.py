"""
Typed WeTransfer API client.

One coroutine per remote action. Every call builds a request, sends it
through the injected transport and decodes the body into a typed response.
No internal retry; transport exceptions propagate unchanged.
"""
from typing import Iterable, Optional, Sequence, Type, TypeVar

from ..config import APIConfig
from ..models import (
    ApiResponse,
    AddFilesResponse,
    AddLinksResponse,
    BoardCreatedResponse,
    BoardInfoResponse,
    FileCompletedResponse,
    FileRequest,
    LinkRequest,
    PartUploadResponse,
    TokenResponse,
    TransferCompletedResponse,
    TransferCreatedResponse,
    UploadUrlResponse,
)
from ..request import RequestBuilder, RequestUris, ResponseHandler
from ..transport import HttpRequest, Transport
from ...exceptions import MissingTokenError
from ...logging import get_logger
from ...session.token_cache import TokenCache


T = TypeVar('T', bound=ApiResponse)


class TransferClient:
    """
    WeTransfer API v2 client.

    Example:
        >>> client = TransferClient(transport, APIConfig(api_key="key"), TokenCache())
        >>> response = await client.authorize("me@example.com")
        >>> if response.success:
        ...     transfer = await client.create_transfer("Photos", files)
    """

    def __init__(
        self,
        transport: Transport,
        config: APIConfig,
        token_cache: Optional[TokenCache] = None
    ):
        """
        Initialize client.

        Args:
            transport: HTTP transport
            config: API configuration carrying the API key
            token_cache: Cache for the bearer token
        """
        if not config.api_key:
            raise ValueError("An API key is required")
        self._transport = transport
        self._config = config
        self._token_cache = token_cache or TokenCache(max_age=config.token_max_age)
        self._logger = get_logger('wetransferpy.api')

    @property
    def token_cache(self) -> TokenCache:
        return self._token_cache

    @property
    def token(self) -> Optional[str]:
        """Current unexpired token value, if any."""
        token = self._token_cache.get()
        return token.value if token else None

    def _builder(self, authenticated: bool = True) -> RequestBuilder:
        token = None
        if authenticated:
            token = self.token
            if not token:
                raise MissingTokenError("No valid token; call authorize() first")
        return RequestBuilder(self._config.base_url, self._config.api_key, token)

    async def _send(self, request: HttpRequest, response_cls: Type[T]) -> T:
        response = await self._transport.send(request)
        return ResponseHandler.process_response(response_cls, request, response)

    async def _send_array(self, request: HttpRequest, response_cls: Type[T]) -> T:
        response = await self._transport.send(request)
        return ResponseHandler.process_array_response(response_cls, request, response)

    # Authentication

    async def authorize(self, user: str) -> TokenResponse:
        """
        Obtain a new token and cache it on success.

        Args:
            user: User identifier the token is issued for

        Returns:
            TokenResponse
        """
        if not user:
            raise ValueError("A user identifier is required")

        request = self._builder(authenticated=False).build(
            'POST', RequestUris.AUTHORIZE,
            content={'user_identifier': user}
        )
        response = await self._send(request, TokenResponse)

        if response.success and response.token:
            self._token_cache.set(response.token)
            self._logger.info("New token obtained")
        elif response.success:
            response.success = False
            self._logger.warning("Authorize call succeeded without returning a token")
        else:
            self._logger.warning(f"Token could not be obtained: {response.message}")
        return response

    def clear_token(self) -> None:
        """Forget the cached token."""
        self._token_cache.clear()

    # Transfers

    async def create_transfer(
        self,
        name: str,
        files: Sequence[FileRequest]
    ) -> TransferCreatedResponse:
        """
        Create a transfer announcing all files up front.

        Args:
            name: Transfer message
            files: Name and size of every file

        Returns:
            TransferCreatedResponse with server-issued file ids and chunking
        """
        request = self._builder().build(
            'POST', RequestUris.CREATE_TRANSFER,
            content={'message': name, 'files': [f.to_dict() for f in files]}
        )
        return await self._send(request, TransferCreatedResponse)

    async def request_upload_url(
        self,
        transfer_id: str,
        file_id: str,
        part_number: int
    ) -> UploadUrlResponse:
        """Request the pre-signed URL of one part of a transfer file."""
        request = self._builder().build(
            'GET', RequestUris.TRANSFER_UPLOAD_URL,
            transfer_id, file_id, part_number
        )
        response = await self._send(request, UploadUrlResponse)
        response.part_number = part_number
        return response

    async def complete_file(
        self,
        transfer_id: str,
        file_id: str,
        number_of_parts: int
    ) -> FileCompletedResponse:
        """Signal that all parts of a transfer file were uploaded."""
        if number_of_parts <= 0:
            raise ValueError("number_of_parts must be positive")

        request = self._builder().build(
            'PUT', RequestUris.TRANSFER_FILE_COMPLETE,
            transfer_id, file_id,
            content={'part_numbers': number_of_parts}
        )
        return await self._send(request, FileCompletedResponse)

    async def complete_transfer(self, transfer_id: str) -> TransferCompletedResponse:
        """Finalize a transfer and obtain its download URL."""
        request = self._builder().build(
            'PUT', RequestUris.TRANSFER_FINALIZE, transfer_id,
            empty_body=True
        )
        return await self._send(request, TransferCompletedResponse)

    # Boards

    async def create_board(
        self,
        name: str,
        description: Optional[str] = None
    ) -> BoardCreatedResponse:
        """Create an empty board."""
        if not name:
            raise ValueError("A board name is required")

        content = {'name': name}
        if description:
            content['description'] = description

        request = self._builder().build('POST', RequestUris.CREATE_BOARD, content=content)
        return await self._send(request, BoardCreatedResponse)

    async def get_board_info(self, board_id: str) -> BoardInfoResponse:
        """Fetch a board with its items."""
        request = self._builder().build('GET', RequestUris.BOARD_INFO, board_id)
        return await self._send(request, BoardInfoResponse)

    async def add_files_to_board(
        self,
        board_id: str,
        files: Sequence[FileRequest]
    ) -> AddFilesResponse:
        """Announce files on a board; returns their ids and chunking."""
        request = self._builder().build(
            'POST', RequestUris.BOARD_FILES, board_id,
            content=[f.to_dict() for f in files]
        )
        return await self._send_array(request, AddFilesResponse)

    async def request_board_upload_url(
        self,
        board_id: str,
        file_id: str,
        part_number: int,
        multipart_upload_id: str
    ) -> UploadUrlResponse:
        """Request the pre-signed URL of one part of a board file."""
        request = self._builder().build(
            'GET', RequestUris.BOARD_UPLOAD_URL,
            board_id, file_id, part_number, multipart_upload_id
        )
        response = await self._send(request, UploadUrlResponse)
        response.part_number = part_number
        return response

    async def complete_board_file(
        self,
        board_id: str,
        file_id: str
    ) -> FileCompletedResponse:
        """Signal that all parts of a board file were uploaded."""
        request = self._builder().build(
            'PUT', RequestUris.BOARD_FILE_COMPLETE,
            board_id, file_id,
            empty_body=True
        )
        return await self._send(request, FileCompletedResponse)

    async def add_links(
        self,
        board_id: str,
        links: Optional[Iterable[LinkRequest]]
    ) -> AddLinksResponse:
        """
        Attach web links to a board.

        Returns:
            AddLinksResponse with one LinkItem per link. None links
            short-circuit with status 204 and no network call.
        """
        if links is None:
            return AddLinksResponse(
                success=False,
                message="Please provide content",
                status_code=204
            )

        request = self._builder().build(
            'POST', RequestUris.BOARD_LINKS, board_id,
            content=[link.to_dict() for link in links]
        )
        return await self._send_array(request, AddLinksResponse)

    # Chunks

    async def upload_part(
        self,
        url: str,
        data: bytes,
        part_number: int = 0
    ) -> PartUploadResponse:
        """
        PUT the raw bytes of one part to its pre-signed URL.

        The URL carries its own authorization, so no API headers are sent.
        Success means HTTP 200.
        """
        request = HttpRequest(method='PUT', url=url, body=data)
        response = await self._transport.send(request)
        return PartUploadResponse(
            success=response.status == 200,
            message=response.reason,
            request_url=url,
            status_code=response.status,
            part_number=part_number
        )
