"""Upload models."""
from .upload_models import (
    Stage,
    ResultCode,
    ChunkPart,
    FileUpload,
    Transfer,
    UploadOutcome,
    ProgressReport,
)

__all__ = [
    'Stage',
    'ResultCode',
    'ChunkPart',
    'FileUpload',
    'Transfer',
    'UploadOutcome',
    'ProgressReport',
]
