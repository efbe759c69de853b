"""
Upload module for WeTransfer transfers and boards.

Files are split into the parts the service asks for, every part is
PUT to its pre-signed URL, and the stages reached are reported as
progress and as an UploadOutcome.
"""
from .facade import UploadFacade
from .coordinator import UploadCoordinator
from .targets import TransferTarget, BoardTarget
from .models import (
    Stage,
    ResultCode,
    ChunkPart,
    FileUpload,
    Transfer,
    UploadOutcome,
    ProgressReport,
)
from .progress import (
    NullProgressSink,
    CallbackProgressSink,
    ProgressRecorder,
    ProgressTracker,
    file_share,
)
from .protocols import (
    FileReaderProtocol,
    FileSplitterProtocol,
    FileValidatorProtocol,
    ProgressSink,
    UploadTarget,
)
from .strategies import plan_chunks, plan_file, FixedSizeChunkingStrategy
from .services import FileValidator, FileSplitter, AsyncFileReader

__all__ = [
    # Main classes
    'UploadFacade',
    'UploadCoordinator',
    'TransferTarget',
    'BoardTarget',

    # Models
    'Stage',
    'ResultCode',
    'ChunkPart',
    'FileUpload',
    'Transfer',
    'UploadOutcome',
    'ProgressReport',

    # Progress
    'NullProgressSink',
    'CallbackProgressSink',
    'ProgressRecorder',
    'ProgressTracker',
    'file_share',

    # Protocols
    'FileReaderProtocol',
    'FileSplitterProtocol',
    'FileValidatorProtocol',
    'ProgressSink',
    'UploadTarget',

    # Chunking and services
    'plan_chunks',
    'plan_file',
    'FixedSizeChunkingStrategy',
    'FileValidator',
    'FileSplitter',
    'AsyncFileReader',
]
