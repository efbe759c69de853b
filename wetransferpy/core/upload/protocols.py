"""
Protocol definitions for upload module.

Defines interfaces (protocols) for dependency injection.
"""
from pathlib import Path
from typing import List, Optional, Protocol, Sequence, Tuple

from ..api.models import (
    ApiResponse,
    FileCompletedResponse,
    FileRequest,
    RemoteFile,
    TransferCompletedResponse,
    UploadUrlResponse,
)
from .models import FileUpload


class FileReaderProtocol(Protocol):
    """Protocol for file reading operations."""

    async def read_file(self, file_path: Path) -> Optional[bytes]:
        """Read a whole file; None if reading failed."""
        ...


class FileSplitterProtocol(Protocol):
    """Protocol for splitting a file into numbered part files."""

    async def split(
        self,
        file_path: Path,
        chunk_size: int,
        output_dir: Path
    ) -> List[Path]:
        """
        Split a file.

        Returns:
            Part file paths ordered by part number
        """
        ...


class FileValidatorProtocol(Protocol):
    """Protocol for file validation operations."""

    def validate_all(self, file_paths: Sequence[Path]) -> List[Tuple[Path, int]]:
        """
        Validate every file of an upload.

        Returns:
            (path, size) per file, in input order

        Raises:
            ValueError: If any file cannot be uploaded
        """
        ...


class ProgressSink(Protocol):
    """Receives (message, percentage) progress events."""

    def accept(self, message: str, percentage: float) -> None:
        ...


class UploadTarget(Protocol):
    """
    Where files are uploaded: a new transfer or an existing board.

    The coordinator drives the same pipeline for both; a target only
    maps each step onto its API calls.
    """

    kind: str

    @property
    def id(self) -> Optional[str]:
        ...

    @property
    def remote_files(self) -> List[RemoteFile]:
        """Files as registered by the service, once known."""
        ...

    def validate(self) -> None:
        ...

    async def prepare(self, client, files: Sequence[FileRequest]) -> Optional[ApiResponse]:
        """Create the container; None when there is nothing to create."""
        ...

    async def attach_files(self, client, files: Sequence[FileRequest]) -> Optional[ApiResponse]:
        """Register files; None when prepare() already did."""
        ...

    async def request_upload_url(
        self,
        client,
        file: FileUpload,
        part_number: int
    ) -> UploadUrlResponse:
        ...

    async def complete_file(self, client, file: FileUpload) -> FileCompletedResponse:
        ...

    async def finalize(self, client) -> Optional[TransferCompletedResponse]:
        """Close the container; None when there is nothing to close."""
        ...
