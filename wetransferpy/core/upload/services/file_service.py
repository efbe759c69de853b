"""
File validation, splitting and reading services.

Single Responsibility: Each class handles one specific task.
"""
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

import aiofiles

from ..strategies import FixedSizeChunkingStrategy
from ...exceptions import InvalidFileError
from ...logging import get_logger


class FileValidator:
    """
    Validates files before upload.

    Responsibilities:
    - Check file existence
    - Verify file is a regular file
    - Reject empty files and duplicate names
    """

    def validate(self, file_path: Union[str, Path]) -> Tuple[Path, int]:
        """
        Validate a file for upload.

        Args:
            file_path: Path to the file

        Returns:
            Tuple of (validated Path, file size in bytes)

        Raises:
            InvalidFileError: If the file is missing, not a regular file or empty
        """
        path = Path(file_path) if isinstance(file_path, str) else file_path

        if not path.exists():
            raise InvalidFileError(f"File not found: {path}", str(path))

        if not path.is_file():
            raise InvalidFileError(f"Path is not a file: {path}", str(path))

        file_size = path.stat().st_size
        self.validate_size(file_size, path)

        return path, file_size

    def validate_size(self, file_size: int, path: Optional[Path] = None) -> None:
        """
        Validate file size.

        Raises:
            InvalidFileError: If file is empty
        """
        if file_size == 0:
            raise InvalidFileError(
                f"Cannot upload empty file: {path}",
                str(path) if path else None
            )

    def validate_all(self, file_paths: Iterable[Union[str, Path]]) -> List[Tuple[Path, int]]:
        """
        Validate every file of an upload.

        Files are matched to server entries by name, so two paths
        sharing a base name are rejected.

        Raises:
            ValueError: If the list is empty or names collide
            InvalidFileError: If any file is invalid
        """
        validated = [self.validate(p) for p in file_paths]
        if not validated:
            raise ValueError("At least one file is required")

        seen = set()
        for path, _ in validated:
            if path.name in seen:
                raise ValueError(f"Duplicate file name: {path.name}")
            seen.add(path.name)

        return validated


class FileSplitter:
    """
    Splits a file into part files named "1".."N".

    Part files are written into a caller-provided directory, which is
    reused across files; existing parts with the same names are
    overwritten.
    """

    def __init__(self, buffer_size: int = 1024 * 1024):
        self._buffer_size = buffer_size
        self._logger = get_logger('wetransferpy.upload.file')

    async def split(
        self,
        file_path: Path,
        chunk_size: int,
        output_dir: Path
    ) -> List[Path]:
        """
        Split file_path into parts of chunk_size bytes.

        Args:
            file_path: File to split
            chunk_size: Size of every part but the last
            output_dir: Existing directory for the part files

        Returns:
            Part file paths ordered by part number

        Raises:
            InvalidFileError: If the file is empty
            OSError: If reading or writing fails
        """
        size = Path(file_path).stat().st_size
        if size == 0:
            raise InvalidFileError(f"Cannot split empty file: {file_path}", str(file_path))

        parts = FixedSizeChunkingStrategy(chunk_size).plan(size)
        output_dir = Path(output_dir)
        written = []

        async with aiofiles.open(file_path, 'rb') as source:
            for part in parts:
                target = output_dir / str(part.part_number)
                remaining = part.length
                async with aiofiles.open(target, 'wb') as sink:
                    while remaining > 0:
                        data = await source.read(min(self._buffer_size, remaining))
                        if not data:
                            raise OSError(f"Unexpected end of file in {file_path}")
                        await sink.write(data)
                        remaining -= len(data)
                written.append(target)

        self._logger.debug(f"Split {Path(file_path).name} into {len(written)} parts")
        return written


class AsyncFileReader:
    """
    Asynchronous file reader.

    Uses aiofiles for non-blocking I/O operations.
    """

    def __init__(self):
        self._logger = get_logger('wetransferpy.upload.file')

    async def read_file(self, file_path: Path) -> Optional[bytes]:
        """
        Read entire file.

        Returns:
            File data or None if reading failed
        """
        try:
            async with aiofiles.open(file_path, 'rb') as f:
                return await f.read()
        except OSError as e:
            self._logger.error(f"Failed to read {file_path}: {e}")
            return None
