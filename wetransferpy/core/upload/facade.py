"""
Upload facade.

Provides a simplified interface for transfer and board uploads.
Follows Facade Pattern - hides targets and the coordinator.
"""
from pathlib import Path
from typing import Optional, Sequence, Union

from .coordinator import UploadCoordinator
from .models import UploadOutcome
from .protocols import FileSplitterProtocol, ProgressSink
from .targets import BoardTarget, TransferTarget
from ..api.config import UploadConfig
from ..api.events import EventEmitter


class UploadFacade:
    """
    Simplified interface for WeTransfer uploads.

    Example:
        >>> from wetransferpy.core.upload import UploadFacade
        >>> uploader = UploadFacade(transfer_client, "/tmp/chunks")
        >>> outcome = await uploader.upload_files(["a.pdf"], "Report", "me@example.com")
        >>> print(outcome.download_url)
    """

    def __init__(
        self,
        client,
        chunk_directory: Union[str, Path],
        splitter: Optional[FileSplitterProtocol] = None,
        events: Optional[EventEmitter] = None
    ):
        """
        Initialize upload facade.

        Args:
            client: TransferClient
            chunk_directory: Existing directory for part files
            splitter: Optional custom file splitter
            events: Optional event emitter shared with the caller
        """
        self._coordinator = UploadCoordinator(
            client,
            chunk_directory,
            splitter=splitter,
            events=events
        )

    @property
    def coordinator(self) -> UploadCoordinator:
        return self._coordinator

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
            user: User identifier
            progress: Optional progress sink

        Returns:
            UploadOutcome with the download URL on success
        """
        return await self._coordinator.upload(TransferTarget(name), file_paths, user, progress)

    async def upload_files_to_board(
        self,
        board_id: str,
        file_paths: Sequence[Union[str, Path]],
        user: str,
        progress: Optional[ProgressSink] = None
    ) -> UploadOutcome:
        """Upload files to an existing board."""
        return await self._coordinator.upload(BoardTarget(board_id), file_paths, user, progress)

    async def upload_with_config(
        self,
        config: UploadConfig,
        progress: Optional[ProgressSink] = None
    ) -> UploadOutcome:
        """
        Upload a transfer described by an UploadConfig.

        Raises:
            ValueError: If the config names another chunk directory
        """
        if config.chunk_directory.resolve() != self._coordinator.chunk_directory.resolve():
            raise ValueError(f"Chunk directory mismatch: {config.chunk_directory}")
        return await self.upload_files(config.file_paths, config.name, config.user, progress)
