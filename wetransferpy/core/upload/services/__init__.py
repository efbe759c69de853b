"""Upload services module."""
from .file_service import FileValidator, FileSplitter, AsyncFileReader

__all__ = [
    'FileValidator',
    'FileSplitter',
    'AsyncFileReader',
]
