"""
wetransferpy - Async Python client for WeTransfer chunked uploads.

Usage:
    >>> from wetransferpy import WeTransferClient
    >>>
    >>> async with WeTransferClient("api-key", "/tmp/chunks") as wt:
    ...     outcome = await wt.upload_files(["photo.jpg"], "Holiday", "me@example.com")
    ...     print(outcome.download_url)
"""
import logging
from .client import WeTransferClient

# Configuration
from .core.api import (
    APIConfig,
    ProxyConfig,
    SSLConfig,
    TimeoutConfig,
    UploadConfig,
    TransferClient,
    AiohttpTransport,
    LinkRequest,
)

# Token management
from .core.session import (
    Token,
    TokenStore,
    TokenCache,
    MemoryTokenStore,
    SQLiteTokenStore,
)

# Uploads
from .core.upload import (
    Stage,
    ResultCode,
    UploadOutcome,
    ProgressReport,
    ProgressRecorder,
    CallbackProgressSink,
    NullProgressSink,
)

from .core.exceptions import (
    WeTransferException,
    InvalidFileError,
    MissingTokenError,
    ResponseDecodeError,
)

__version__ = '1.0.0'


def setup_logging(level=logging.INFO):
    """
    Configure logging for wetransferpy modules.

    Args:
        level: Logging level (default: logging.INFO)
    """
    loggers = [
        'wetransferpy',
        'wetransferpy.api',
        'wetransferpy.client',
        'wetransferpy.session',
        'wetransferpy.upload',
        'wetransferpy.upload.coordinator',
        'wetransferpy.upload.file',
    ]

    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


__all__ = [
    'WeTransferClient',
    'TransferClient',
    'AiohttpTransport',
    'APIConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
    'UploadConfig',
    'LinkRequest',
    'Token',
    'TokenStore',
    'TokenCache',
    'MemoryTokenStore',
    'SQLiteTokenStore',
    'Stage',
    'ResultCode',
    'UploadOutcome',
    'ProgressReport',
    'ProgressRecorder',
    'CallbackProgressSink',
    'NullProgressSink',
    'WeTransferException',
    'InvalidFileError',
    'MissingTokenError',
    'ResponseDecodeError',
    'setup_logging',
]
