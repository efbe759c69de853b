"""
WeTransferClient - High-level async client for WeTransfer.

Example:
    >>> async with WeTransferClient("api-key", "/tmp/chunks") as wt:
    ...     outcome = await wt.upload_files(["a.pdf"], "Report", "me@example.com")
    ...     print(outcome.download_url)
"""
from pathlib import Path
from typing import Iterable, Optional, Sequence, Type, TypeVar, Union

from .core.api import (
    AiohttpTransport,
    APIConfig,
    ApiResponse,
    AddLinksResponse,
    BoardCreatedResponse,
    BoardInfoResponse,
    EventEmitter,
    LinkRequest,
    ProxyConfig,
    SSLConfig,
    TimeoutConfig,
    TransferClient,
    Transport,
)
from .core.logging import get_logger
from .core.session import SQLiteTokenStore, TokenCache, TokenStore
from .core.upload import ProgressSink, UploadFacade, UploadOutcome

R = TypeVar('R', bound=ApiResponse)


class WeTransferClient:
    """
    High-level async client for WeTransfer transfers and boards.

    One client keeps one token cache, so a token obtained by one call is
    reused by the following ones until it expires or is cleared.

    With a persisted token:
        >>> client = WeTransferClient("api-key", "/tmp/chunks", session="wetransfer")
        >>> # token saved to wetransfer.session

    With custom configuration:
        >>> config = WeTransferClient.create_config("api-key", proxy="http://proxy:8080")
        >>> client = WeTransferClient(chunk_directory="/tmp/chunks", config=config)
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        chunk_directory: Union[str, Path] = '.',
        *,
        config: Optional[APIConfig] = None,
        session: Optional[Union[str, Path, TokenStore]] = None,
        base_path: Optional[Path] = None,
        transport: Optional[Transport] = None
    ):
        """
        Initialize WeTransfer client.

        Args:
            api_key: API key (ignored when config is given)
            chunk_directory: Existing directory where part files are written
            config: Optional API configuration
            session: Session name or path for a persisted token, or a TokenStore
            base_path: Base path for session files
            transport: Optional transport (aiohttp if not provided)

        Raises:
            ValueError: If no API key is configured or chunk_directory does not exist
        """
        self._config = config or APIConfig.default(api_key or '')
        self._logger = get_logger('wetransferpy.client')

        self._chunk_directory = Path(chunk_directory)
        if not self._chunk_directory.is_dir():
            raise ValueError(f"Chunk directory does not exist: {self._chunk_directory}")

        if session is None or isinstance(session, (str, Path)):
            store = SQLiteTokenStore(session, base_path) if session is not None else None
        else:
            store = session
        self._token_cache = TokenCache(store, max_age=self._config.token_max_age)

        self._transport = transport or AiohttpTransport(self._config)
        self._owns_transport = transport is None
        self._api = TransferClient(self._transport, self._config, self._token_cache)
        self._events = EventEmitter()
        self._uploader = UploadFacade(self._api, self._chunk_directory, events=self._events)

    # =========================================================================
    # Configuration helpers
    # =========================================================================

    @staticmethod
    def create_config(
        api_key: str,
        proxy: Optional[str] = None,
        proxy_user: Optional[str] = None,
        proxy_pass: Optional[str] = None,
        timeout: float = 300,
        verify_ssl: bool = True,
        user_agent: Optional[str] = None
    ) -> APIConfig:
        """
        Create API configuration with common options.

        Args:
            api_key: API key
            proxy: Proxy URL (e.g., "http://proxy:8080")
            proxy_user: Proxy username
            proxy_pass: Proxy password
            timeout: Request timeout in seconds
            verify_ssl: Whether to verify SSL certificates
            user_agent: Custom user agent string

        Returns:
            APIConfig instance
        """
        proxy_config = None
        if proxy:
            proxy_config = ProxyConfig(
                url=proxy,
                username=proxy_user,
                password=proxy_pass
            )

        return APIConfig(
            api_key=api_key,
            proxy=proxy_config,
            timeout=TimeoutConfig(total=timeout),
            ssl=SSLConfig(verify=verify_ssl),
            user_agent=user_agent or 'wetransferpy/1.0.0'
        )

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def api(self) -> TransferClient:
        """Low-level API client."""
        return self._api

    @property
    def events(self) -> EventEmitter:
        """Emits 'stage' and 'outcome' events of uploads."""
        return self._events

    @property
    def token_cache(self) -> TokenCache:
        return self._token_cache

    @property
    def chunk_directory(self) -> Path:
        return self._chunk_directory

    # =========================================================================
    # Lifecycle
    # =========================================================================

    async def __aenter__(self) -> 'WeTransferClient':
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        """Close the transport (if owned) and the token store."""
        if self._owns_transport:
            await self._transport.close()
        self._token_cache.store.close()

    def clear_token(self) -> None:
        """Forget the cached token; the next call obtains a new one."""
        self._api.clear_token()
        self._logger.info("Token cleared")

    async def _ensure_token(self, user: str, response_cls: Type[R]) -> Optional[R]:
        """Authorize if needed; returns a failed response_cls when that fails."""
        if self._api.token:
            return None
        response = await self._api.authorize(user)
        if response.success:
            return None
        return response_cls(
            success=False,
            message=response.message or "No token could be obtained.",
            request_url=response.request_url,
            status_code=response.status_code
        )

    # =========================================================================
    # Transfers
    # =========================================================================

    async def upload_files(
        self,
        file_paths: Sequence[Union[str, Path]],
        name: str,
        user: str,
        progress: Optional[ProgressSink] = None
    ) -> UploadOutcome:
        """
        Upload files as a new transfer.

        Args:
            file_paths: Local files to upload
            name: Transfer message
            user: User identifier used when a new token is needed
            progress: Optional progress sink

        Returns:
            UploadOutcome with the download URL on success

        Raises:
            ValueError: If the inputs are invalid

        Example:
            >>> recorder = ProgressRecorder()
            >>> outcome = await wt.upload_files(["a.jpg"], "Photos", "me@example.com", recorder)
            >>> outcome.result
            <ResultCode.SUCCESS: 'Success'>
        """
        return await self._uploader.upload_files(file_paths, name, user, progress)

    # =========================================================================
    # Boards
    # =========================================================================

    async def create_board(
        self,
        name: str,
        user: str,
        description: Optional[str] = None
    ) -> BoardCreatedResponse:
        """Create an empty board, authorizing first if needed."""
        failed = await self._ensure_token(user, BoardCreatedResponse)
        if failed is not None:
            return failed
        response = await self._api.create_board(name, description)
        if response.success:
            self._logger.info(f"Board {response.id} created")
        return response

    async def upload_files_to_board(
        self,
        board_id: str,
        file_paths: Sequence[Union[str, Path]],
        user: str,
        progress: Optional[ProgressSink] = None
    ) -> UploadOutcome:
        """Upload files to an existing board."""
        return await self._uploader.upload_files_to_board(board_id, file_paths, user, progress)

    async def add_links(
        self,
        board_id: str,
        links: Optional[Iterable[LinkRequest]],
        user: str
    ) -> AddLinksResponse:
        """Attach web links to a board."""
        if links is None:
            return await self._api.add_links(board_id, None)
        failed = await self._ensure_token(user, AddLinksResponse)
        if failed is not None:
            return failed
        return await self._api.add_links(board_id, links)

    async def get_board_info(self, board_id: str, user: str) -> BoardInfoResponse:
        """Fetch a board with its items."""
        failed = await self._ensure_token(user, BoardInfoResponse)
        if failed is not None:
            return failed
        return await self._api.get_board_info(board_id)
