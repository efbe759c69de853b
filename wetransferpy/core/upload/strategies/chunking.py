"""
Chunking strategies for file uploads.

The service decides the chunk size per file; parts are contiguous,
1-based, and every part but the last is exactly chunk_size bytes.
"""
from pathlib import Path
from typing import List, Union

from ..models import ChunkPart
from ...exceptions import InvalidFileError


def plan_chunks(file_size: int, chunk_size: int) -> List[ChunkPart]:
    """
    Compute the part boundaries of a file.

    Args:
        file_size: Total file size in bytes
        chunk_size: Size of every part but the last

    Returns:
        ceil(file_size / chunk_size) parts covering [0, file_size)

    Raises:
        InvalidFileError: If file_size is zero
        ValueError: If chunk_size is not positive or file_size is negative

    Example:
        >>> [(p.part_number, p.offset, p.length) for p in plan_chunks(10, 4)]
        [(1, 0, 4), (2, 4, 4), (3, 8, 2)]
    """
    if chunk_size <= 0:
        raise ValueError("Chunk size must be positive")
    if file_size < 0:
        raise ValueError("File size cannot be negative")
    if file_size == 0:
        raise InvalidFileError("Cannot upload empty file")

    parts = []
    offset = 0
    part_number = 1
    while offset < file_size:
        length = min(chunk_size, file_size - offset)
        parts.append(ChunkPart(part_number, offset, length))
        offset += length
        part_number += 1
    return parts


def plan_file(path: Union[str, Path], chunk_size: int) -> List[ChunkPart]:
    """
    Compute the parts of a local file.

    Raises:
        InvalidFileError: If the file is missing, not a regular file or empty
        ValueError: If chunk_size is not positive
    """
    path = Path(path)
    if not path.is_file():
        raise InvalidFileError(f"Not a regular file: {path}", str(path))
    size = path.stat().st_size
    if size == 0:
        raise InvalidFileError(f"Cannot upload empty file: {path}", str(path))
    return plan_chunks(size, chunk_size)


class FixedSizeChunkingStrategy:
    """
    Fixed-size chunking with the chunk size issued by the service.
    """

    def __init__(self, chunk_size: int):
        if chunk_size <= 0:
            raise ValueError("Chunk size must be positive")
        self.chunk_size = chunk_size

    def plan(self, file_size: int) -> List[ChunkPart]:
        return plan_chunks(file_size, self.chunk_size)
