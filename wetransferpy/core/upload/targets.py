"""
Upload targets.

A TransferTarget creates a new transfer announcing every file up front
and finalizes it for a download URL. A BoardTarget adds files to an
existing board and has nothing to finalize.
"""
from typing import List, Optional, Sequence

from ..api.models import (
    ApiResponse,
    FileCompletedResponse,
    FileRequest,
    RemoteFile,
    TransferCompletedResponse,
    UploadUrlResponse,
)
from .models import FileUpload


class TransferTarget:
    """A new transfer named after its message."""

    kind = 'transfer'
    created_message = "Transfer created"
    prepare_failure = "No transfer could be created."
    attach_failure = "Files could not be added to the transfer."

    def __init__(self, name: str):
        self.name = name
        self._id: Optional[str] = None
        self._files: List[RemoteFile] = []

    @property
    def id(self) -> Optional[str]:
        return self._id

    @property
    def remote_files(self) -> List[RemoteFile]:
        return list(self._files)

    def validate(self) -> None:
        if not self.name:
            raise ValueError("A transfer name is required")

    async def prepare(self, client, files: Sequence[FileRequest]) -> ApiResponse:
        response = await client.create_transfer(self.name, files)
        if response.success:
            self._id = response.id
            self._files = list(response.files)
        return response

    async def attach_files(self, client, files: Sequence[FileRequest]) -> Optional[ApiResponse]:
        return None

    async def request_upload_url(
        self,
        client,
        file: FileUpload,
        part_number: int
    ) -> UploadUrlResponse:
        return await client.request_upload_url(self._id, file.id, part_number)

    async def complete_file(self, client, file: FileUpload) -> FileCompletedResponse:
        return await client.complete_file(self._id, file.id, file.number_of_parts)

    async def finalize(self, client) -> Optional[TransferCompletedResponse]:
        return await client.complete_transfer(self._id)


class BoardTarget:
    """An existing board."""

    kind = 'board'
    created_message = "Files added to board"
    prepare_failure = "The board could not be prepared."
    attach_failure = "Files could not be added to the board."

    def __init__(self, board_id: str):
        self._id = board_id
        self._files: List[RemoteFile] = []

    @property
    def id(self) -> Optional[str]:
        return self._id

    @property
    def remote_files(self) -> List[RemoteFile]:
        return list(self._files)

    def validate(self) -> None:
        if not self._id:
            raise ValueError("A board id is required")

    async def prepare(self, client, files: Sequence[FileRequest]) -> Optional[ApiResponse]:
        return None

    async def attach_files(self, client, files: Sequence[FileRequest]) -> ApiResponse:
        response = await client.add_files_to_board(self._id, files)
        if response.success:
            self._files = list(response.files)
        return response

    async def request_upload_url(
        self,
        client,
        file: FileUpload,
        part_number: int
    ) -> UploadUrlResponse:
        return await client.request_board_upload_url(
            self._id, file.id, part_number, file.multipart_upload_id
        )

    async def complete_file(self, client, file: FileUpload) -> FileCompletedResponse:
        return await client.complete_board_file(self._id, file.id)

    async def finalize(self, client) -> Optional[TransferCompletedResponse]:
        return None
