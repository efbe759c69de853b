"""
Progress reporting for upload runs.

The token step is worth 5%, creating the transfer (or attaching to
the board) brings it to 10%, and the remaining 90% is shared between
files by the bytes their parts account for.
"""
from typing import Callable, List, Optional

from .models import FileUpload, ProgressReport


TOKEN_PERCENTAGE = 5
CREATED_PERCENTAGE = 10
FILES_PERCENTAGE = 90


def clamp_percentage(value: float) -> float:
    """Clamp a percentage to [0, 100]."""
    return max(0.0, min(100.0, float(value)))


def file_share(file: FileUpload, total_bytes: int) -> int:
    """
    Percentage points allotted to one file.

    Uses chunk_size * number_of_parts rather than the file size, so the
    shares of all files may not add up to exactly 90.

    Example:
        >>> # 1,000,000 and 9,000,000 bytes with 6,291,456-byte chunks
        >>> # give int(56.6) = 56 and int(113.2) = 113
    """
    if total_bytes <= 0:
        return 0
    return int(FILES_PERCENTAGE * file.chunk_size * file.number_of_parts / total_bytes)


class NullProgressSink:
    """Discards every event."""

    def accept(self, message: str, percentage: float) -> None:
        pass


class CallbackProgressSink:
    """
    Forwards every event to a callback receiving a ProgressReport.

    Example:
        >>> sink = CallbackProgressSink(lambda r: print(f"{r.percentage:.0f}% {r.message}"))
    """

    def __init__(self, callback: Callable[[ProgressReport], None]):
        self._callback = callback

    def accept(self, message: str, percentage: float) -> None:
        self._callback(ProgressReport(message, percentage))


class ProgressRecorder:
    """Keeps every event until drained."""

    def __init__(self):
        self._reports: List[ProgressReport] = []

    def accept(self, message: str, percentage: float) -> None:
        self._reports.append(ProgressReport(message, percentage))

    @property
    def reports(self) -> List[ProgressReport]:
        return list(self._reports)

    @property
    def last(self) -> Optional[ProgressReport]:
        return self._reports[-1] if self._reports else None

    def drain(self) -> List[ProgressReport]:
        """Return and forget the recorded events."""
        reports, self._reports = self._reports, []
        return reports


class ProgressTracker:
    """
    Turns pipeline milestones into clamped progress events.

    Attributes:
        baseline: Percentage reached by the files completed so far
    """

    def __init__(self, sink=None, total_bytes: int = 0):
        self._sink = sink or NullProgressSink()
        self.total_bytes = total_bytes
        self.baseline = CREATED_PERCENTAGE

    def report(self, message: str, percentage: float) -> None:
        self._sink.accept(message, clamp_percentage(percentage))

    def token_ready(self, reused: bool) -> None:
        self.report("Token reused" if reused else "New token obtained", TOKEN_PERCENTAGE)

    def created(self, message: str) -> None:
        self.baseline = CREATED_PERCENTAGE
        self.report(message, CREATED_PERCENTAGE)

    def start_file(self, file: FileUpload) -> 'FileProgress':
        return FileProgress(self, file, file_share(file, self.total_bytes))


class FileProgress:
    """Progress within one file's share."""

    def __init__(self, tracker: ProgressTracker, file: FileUpload, share: int):
        self._tracker = tracker
        self._file = file
        self.share = share
        self.start = tracker.baseline
        self._parts_baseline = self.start
        self._parts_share = 0

    def started(self) -> None:
        self._tracker.report(f"Uploading '{self._file.name}'...", self.start)

    def split(self) -> None:
        self._tracker.report("Files split", self.start + self.share // 5)

    def urls_acquired(self) -> None:
        self._tracker.report("Upload urls acquired", self.start + self.share // 4)
        self._parts_baseline = self.start + self.share // 4
        self._parts_share = self.share * 3 // 4

    def part_uploaded(self, part_number: int) -> None:
        n = self._file.number_of_parts
        self._tracker.report(
            f"Part {part_number} uploaded",
            self._parts_baseline + self._parts_share * part_number / n
        )

    def completed(self) -> None:
        self._tracker.report(
            f"Upload of file '{self._file.name}' completed",
            self.start + self.share
        )
        self._tracker.baseline = self.start + self.share
