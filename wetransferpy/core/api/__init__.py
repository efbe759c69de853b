"""WeTransfer API module."""
from .client import TransferClient
from .events import EventEmitter
from .config import (
    APIConfig,
    ProxyConfig,
    SSLConfig,
    TimeoutConfig,
    UploadConfig,
    DEFAULT_BASE_URL,
    DEFAULT_TOKEN_MAX_AGE,
)
from .transport import Transport, AiohttpTransport, HttpRequest, HttpResponse
from .models import (
    ApiResponse,
    FileRequest,
    LinkRequest,
    MultipartInfo,
    RemoteFile,
    TokenResponse,
    TransferCreatedResponse,
    AddFilesResponse,
    BoardCreatedResponse,
    BoardInfoResponse,
    UploadUrlResponse,
    PartUploadResponse,
    FileCompletedResponse,
    TransferCompletedResponse,
    LinkItem,
    AddLinksResponse,
)

__all__ = [
    # Client
    'TransferClient',

    # Transport
    'Transport',
    'AiohttpTransport',
    'HttpRequest',
    'HttpResponse',

    # Configuration
    'APIConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
    'UploadConfig',
    'DEFAULT_BASE_URL',
    'DEFAULT_TOKEN_MAX_AGE',

    # Requests / responses
    'ApiResponse',
    'FileRequest',
    'LinkRequest',
    'MultipartInfo',
    'RemoteFile',
    'TokenResponse',
    'TransferCreatedResponse',
    'AddFilesResponse',
    'BoardCreatedResponse',
    'BoardInfoResponse',
    'UploadUrlResponse',
    'PartUploadResponse',
    'FileCompletedResponse',
    'TransferCompletedResponse',
    'LinkItem',
    'AddLinksResponse',

    # Events
    'EventEmitter',
]
