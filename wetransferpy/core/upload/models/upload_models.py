"""
Data models for upload module.

Uses dataclasses for the pipeline state and its result.
"""
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from pathlib import Path
from typing import Dict, List, Optional

from ...api.models import RemoteFile


class Stage(IntEnum):
    """
    Pipeline stages, in the only order a file may go through them.

    Used for progress and error attribution.
    """
    NOT_SET = 0
    TOKEN = 1
    TRANSFER_REQUEST = 2
    ADD_FILES = 3
    SPLIT_FILES = 4
    UPLOAD_URL = 5
    UPLOAD = 6
    COMPLETE = 7

    @property
    def label(self) -> str:
        """CamelCase name, e.g. 'UploadUrl'."""
        return ''.join(part.capitalize() for part in self.name.split('_'))


class ResultCode(Enum):
    """Final result of an upload run."""
    SUCCESS = 'Success'
    API_ERROR = 'ApiError'
    NO_CONNECTION = 'NoConnection'
    UNKNOWN_ERROR = 'UnknownError'


@dataclass(frozen=True)
class ChunkPart:
    """
    One part of a file.

    Attributes:
        part_number: 1-based part number
        offset: Start position in bytes
        length: Part size in bytes
    """
    part_number: int
    offset: int
    length: int

    @property
    def end(self) -> int:
        """End position (exclusive)."""
        return self.offset + self.length


@dataclass
class FileUpload:
    """
    Upload state of one file.

    Created from the server's description of the file merged with the
    local path; discarded once its completion signal succeeds.

    Attributes:
        id: Server-issued file id
        name: File name
        size: File size in bytes
        chunk_size: Size of every part but the last
        number_of_parts: ceil(size / chunk_size)
        local_path: Path of the local file
        multipart_upload_id: Multipart upload id (boards only)
        upload_urls: Resolved pre-signed URL per part number
        stage: Last stage reached
        completed: Whether the completion signal succeeded
    """
    id: str
    name: str
    size: int
    chunk_size: int
    number_of_parts: int
    local_path: Path
    multipart_upload_id: Optional[str] = None
    upload_urls: Dict[int, str] = field(default_factory=dict)
    stage: 'Stage' = Stage.ADD_FILES
    completed: bool = False

    def __post_init__(self):
        if self.chunk_size <= 0:
            raise ValueError(f"Invalid chunk size {self.chunk_size} for '{self.name}'")
        expected = -(-self.size // self.chunk_size)
        if self.number_of_parts != expected:
            raise ValueError(
                f"'{self.name}': {self.number_of_parts} parts announced, "
                f"{expected} expected for {self.size} bytes"
            )

    @classmethod
    def from_remote(cls, remote: RemoteFile, local_path: Path) -> 'FileUpload':
        """Create from the transfer/board creation response."""
        return cls(
            id=remote.id,
            name=remote.name,
            size=remote.size,
            chunk_size=remote.multipart.chunk_size,
            number_of_parts=remote.multipart.number_of_parts,
            local_path=Path(local_path),
            multipart_upload_id=remote.multipart.multipart_upload_id
        )

    @property
    def part_numbers(self) -> range:
        return range(1, self.number_of_parts + 1)

    def advance(self, stage: Stage) -> None:
        """Move to a later stage; moving backwards is an error."""
        if stage < self.stage:
            raise ValueError(
                f"'{self.name}' cannot go back from {self.stage.label} to {stage.label}"
            )
        self.stage = stage

    def mark_completed(self) -> None:
        """Record a successful completion signal."""
        if self.stage != Stage.COMPLETE:
            raise ValueError(f"'{self.name}' is at {self.stage.label}, not Complete")
        self.completed = True

    def set_url(self, part_number: int, url: str) -> None:
        """Record the pre-signed URL of a part."""
        if part_number not in self.part_numbers:
            raise ValueError(f"Part {part_number} out of range 1..{self.number_of_parts}")
        self.upload_urls[part_number] = url

    def url_for(self, part_number: int) -> str:
        """URL of a part; it must have been resolved before."""
        try:
            return self.upload_urls[part_number]
        except KeyError:
            raise ValueError(f"No upload url resolved for part {part_number} of '{self.name}'")

    @property
    def urls_resolved(self) -> bool:
        return all(n in self.upload_urls for n in self.part_numbers)


@dataclass
class Transfer:
    """
    A transfer or board being uploaded to.

    Attributes:
        id: Transfer or board id
        files: Files in the order returned by the server
    """
    id: str
    files: List[FileUpload] = field(default_factory=list)

    @property
    def total_bytes(self) -> int:
        return sum(f.size for f in self.files)

    @property
    def is_complete(self) -> bool:
        """True once every file's completion signal succeeded."""
        return bool(self.files) and all(f.completed for f in self.files)


@dataclass(frozen=True)
class UploadOutcome:
    """
    Result of an upload run.

    Attributes:
        result: Result code
        stage: Stage reached (or at which the failure surfaced)
        message: Human readable message
        download_url: Download URL (transfers only)
    """
    result: ResultCode
    stage: Stage
    message: str = ''
    download_url: str = ''

    @property
    def success(self) -> bool:
        return self.result is ResultCode.SUCCESS

    def __str__(self) -> str:
        return f"{self.result.value} at {self.stage.label}: {self.message}"


@dataclass(frozen=True)
class ProgressReport:
    """A progress event."""
    message: str
    percentage: float
