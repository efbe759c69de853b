"""
Typed API responses.

Every response carries the request URL, the HTTP status and a resolved
success flag in addition to the fields decoded from the JSON body.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ApiResponse:
    """
    Base class for API responses.

    Attributes:
        success: Explicit 'success' from the body, else derived from the status
        message: Server message, or the reason phrase when the body has none
        request_url: URL the request was sent to
        status_code: HTTP status code
    """
    success: bool = False
    message: str = ''
    request_url: str = ''
    status_code: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ApiResponse':
        """Create from decoded JSON body."""
        return cls()


@dataclass(frozen=True)
class FileRequest:
    """A file announced to the service before upload."""
    name: str
    size: int

    def to_dict(self) -> Dict[str, Any]:
        return {'name': self.name, 'size': self.size}


@dataclass(frozen=True)
class LinkRequest:
    """A web link to attach to a board."""
    url: str
    title: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        result = {'url': self.url}
        if self.title:
            result['title'] = self.title
        return result


@dataclass(frozen=True)
class MultipartInfo:
    """
    Chunking instructions issued by the server for one file.

    Attributes:
        number_of_parts: Number of parts the file must be split into
        chunk_size: Size of every part but the last
        multipart_upload_id: Multipart upload id (boards only)
    """
    number_of_parts: int
    chunk_size: int
    multipart_upload_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MultipartInfo':
        return cls(
            number_of_parts=int(data.get('part_numbers', 0)),
            chunk_size=int(data.get('chunk_size', 0)),
            multipart_upload_id=data.get('id')
        )


@dataclass(frozen=True)
class RemoteFile:
    """A file as registered by the service."""
    id: str
    name: str
    size: int
    multipart: MultipartInfo

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RemoteFile':
        return cls(
            id=str(data.get('id', '')),
            name=data.get('name', ''),
            size=int(data.get('size', 0)),
            multipart=MultipartInfo.from_dict(data.get('multipart') or {})
        )


@dataclass
class TokenResponse(ApiResponse):
    token: str = ''

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TokenResponse':
        return cls(token=data.get('token') or '')


@dataclass
class TransferCreatedResponse(ApiResponse):
    """Response of the create-transfer call."""
    id: str = ''
    name: str = ''
    state: str = ''
    files: List[RemoteFile] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TransferCreatedResponse':
        return cls(
            id=str(data.get('id') or ''),
            name=data.get('message') or '',
            state=data.get('state') or '',
            files=[RemoteFile.from_dict(f) for f in data.get('files') or []]
        )


@dataclass
class AddFilesResponse(ApiResponse):
    """Response of the add-files-to-board call (a JSON array)."""
    files: List[RemoteFile] = field(default_factory=list)

    @classmethod
    def from_list(cls, items: List[Dict[str, Any]]) -> 'AddFilesResponse':
        return cls(files=[RemoteFile.from_dict(f) for f in items])


@dataclass
class BoardCreatedResponse(ApiResponse):
    """Response of the create-board call."""
    id: str = ''
    name: str = ''
    description: str = ''
    state: str = ''
    board_url: str = ''

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BoardCreatedResponse':
        return cls(
            id=str(data.get('id') or ''),
            name=data.get('name') or '',
            description=data.get('description') or '',
            state=data.get('state') or '',
            board_url=data.get('url') or ''
        )


@dataclass
class BoardInfoResponse(BoardCreatedResponse):
    """Response of the get-board call, including its items."""
    items: List[Dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BoardInfoResponse':
        return cls(
            id=str(data.get('id') or ''),
            name=data.get('name') or '',
            description=data.get('description') or '',
            state=data.get('state') or '',
            board_url=data.get('url') or '',
            items=list(data.get('items') or [])
        )


@dataclass
class UploadUrlResponse(ApiResponse):
    """Pre-signed URL for one part."""
    url: str = ''
    part_number: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'UploadUrlResponse':
        return cls(url=data.get('url') or '')


@dataclass
class PartUploadResponse(ApiResponse):
    """Result of a chunk PUT; success means HTTP 200."""
    part_number: int = 0


@dataclass
class FileCompletedResponse(ApiResponse):
    """Response of the per-file upload-complete call."""
    id: str = ''
    name: str = ''
    size: int = 0
    chunk_size: int = 0
    retries: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FileCompletedResponse':
        return cls(
            id=str(data.get('id') or ''),
            name=data.get('name') or '',
            size=int(data.get('size') or 0),
            chunk_size=int(data.get('chunk_size') or 0),
            retries=int(data.get('retries') or 0)
        )


@dataclass
class TransferCompletedResponse(ApiResponse):
    """Response of the finalize call."""
    id: str = ''
    state: str = ''
    download_url: str = ''

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TransferCompletedResponse':
        return cls(
            id=str(data.get('id') or ''),
            state=data.get('state') or '',
            download_url=data.get('url') or ''
        )


@dataclass(frozen=True)
class LinkItem:
    """One entry of the add-links response."""
    success: bool
    id: str = ''
    url: str = ''
    title: str = ''

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LinkItem':
        meta = data.get('meta') or {}
        return cls(
            success=bool(data.get('success', True)),
            id=str(data.get('id') or ''),
            url=data.get('url') or '',
            title=meta.get('title') or data.get('title') or ''
        )


@dataclass
class AddLinksResponse(ApiResponse):
    """Response of the add-links call (a JSON array)."""
    links: List[LinkItem] = field(default_factory=list)

    @classmethod
    def from_list(cls, items: List[Dict[str, Any]]) -> 'AddLinksResponse':
        return cls(links=[LinkItem.from_dict(i) for i in items])
