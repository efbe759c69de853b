"""
Upload coordinator.

Drives the upload state machine for a transfer or a board using
injected collaborators. Every network call and every split is awaited
in turn; nothing runs concurrently within a run.
"""
import asyncio
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

import aiohttp

from ..api.events import EventEmitter
from ..api.models import FileRequest
from ..logging import get_logger
from .models import FileUpload, ResultCode, Stage, Transfer, UploadOutcome
from .progress import FileProgress, ProgressTracker
from .protocols import (
    FileReaderProtocol,
    FileSplitterProtocol,
    FileValidatorProtocol,
    ProgressSink,
    UploadTarget,
)
from .services import AsyncFileReader, FileSplitter, FileValidator

logger = get_logger('wetransferpy.upload.coordinator')

NO_CONNECTION_ERRORS = (
    asyncio.TimeoutError,
    aiohttp.ClientConnectionError,
    aiohttp.ClientPayloadError,
    ConnectionError,
)


class _Run:
    """Mutable state of one upload run."""

    def __init__(self, target: UploadTarget, names: List[str], progress: ProgressTracker):
        self.target = target
        self.names = names
        self.progress = progress
        self.stage = Stage.NOT_SET


class UploadCoordinator:
    """
    Coordinates the upload of files to a transfer or a board.

    Emits 'stage' (file name, Stage) on every stage transition of a
    file and 'outcome' (UploadOutcome) once per run.

    Example:
        >>> coordinator = UploadCoordinator(client, Path("/tmp/chunks"))
        >>> coordinator.events.on('stage', lambda name, stage: print(name, stage.label))
        >>> outcome = await coordinator.upload(
        ...     TransferTarget("Holiday"), ["a.jpg", "b.jpg"], "me@example.com"
        ... )
        >>> print(outcome.download_url)
    """

    def __init__(
        self,
        client,
        chunk_directory: Union[str, Path],
        splitter: Optional[FileSplitterProtocol] = None,
        file_reader: Optional[FileReaderProtocol] = None,
        validator: Optional[FileValidatorProtocol] = None,
        events: Optional[EventEmitter] = None
    ):
        """
        Initialize upload coordinator.

        Args:
            client: TransferClient used for every API call
            chunk_directory: Existing directory where part files are written
            splitter: File splitter implementation
            file_reader: Reader for part files
            validator: File validator implementation
            events: Event emitter for stage and outcome events
        """
        self._client = client
        self._chunk_directory = Path(chunk_directory)
        self._splitter = splitter or FileSplitter()
        self._file_reader = file_reader or AsyncFileReader()
        self._validator = validator or FileValidator()
        self._events = events or EventEmitter()

    @property
    def chunk_directory(self) -> Path:
        return self._chunk_directory

    @property
    def events(self) -> EventEmitter:
        return self._events

    async def upload(
        self,
        target: UploadTarget,
        file_paths: Sequence[Union[str, Path]],
        user: str,
        progress: Optional[ProgressSink] = None
    ) -> UploadOutcome:
        """
        Upload files to target.

        Args:
            target: TransferTarget or BoardTarget
            file_paths: Local files, uploaded in the order the service returns them
            user: User identifier used when a new token is needed
            progress: Optional progress sink

        Returns:
            UploadOutcome; failures after validation are reported here

        Raises:
            ValueError: If the inputs are invalid (no network call is made)
        """
        if not user:
            raise ValueError("A user identifier is required")
        target.validate()
        validated = self._validator.validate_all([Path(p) for p in file_paths])
        if not self._chunk_directory.is_dir():
            raise ValueError(f"Chunk directory does not exist: {self._chunk_directory}")

        run = _Run(
            target,
            [path.name for path, _ in validated],
            ProgressTracker(progress, sum(size for _, size in validated))
        )
        logger.info(f"Starting {target.kind} upload of {len(validated)} file(s)")

        try:
            outcome = await self._execute(run, validated, user)
        except NO_CONNECTION_ERRORS as e:
            logger.warning(f"Connection lost at {run.stage.label}: {e}")
            outcome = UploadOutcome(ResultCode.NO_CONNECTION, run.stage, str(e) or type(e).__name__)
        except Exception as e:
            logger.error(f"Upload failed at {run.stage.label}: {e}", exc_info=True)
            outcome = UploadOutcome(ResultCode.UNKNOWN_ERROR, run.stage, str(e) or type(e).__name__)

        if outcome.success:
            logger.info(f"Upload finished: {outcome.message}")
        self._events.emit('outcome', outcome)
        return outcome

    async def _execute(
        self,
        run: _Run,
        validated: List[Tuple[Path, int]],
        user: str
    ) -> UploadOutcome:
        target = run.target

        self._enter(run, Stage.TOKEN)
        if self._client.token:
            logger.debug("Reusing cached token")
            run.progress.token_ready(reused=True)
        else:
            response = await self._client.authorize(user)
            if not response.success:
                return self._api_error(run, response.message or "No token could be obtained.")
            run.progress.token_ready(reused=False)

        requests = [FileRequest(path.name, size) for path, size in validated]

        self._enter(run, Stage.TRANSFER_REQUEST)
        response = await target.prepare(self._client, requests)
        if response is not None and not response.success:
            return self._api_error(run, target.prepare_failure, response.message)

        self._enter(run, Stage.ADD_FILES)
        response = await target.attach_files(self._client, requests)
        if response is not None and not response.success:
            return self._api_error(run, target.attach_failure, response.message)

        transfer = self._build_transfer(target, validated)
        run.progress.total_bytes = transfer.total_bytes
        run.progress.created(target.created_message)
        logger.info(f"{target.kind.capitalize()} {transfer.id} ready with {len(transfer.files)} file(s)")

        for file in transfer.files:
            outcome = await self._upload_file(run, file)
            if outcome is not None:
                return outcome

        if not transfer.is_complete:
            pending = [f.name for f in transfer.files if not f.completed]
            raise RuntimeError(f"Files not completed: {', '.join(pending)}")

        download_url = ''
        response = await target.finalize(self._client)
        if response is not None:
            if not response.success:
                return self._api_error(run, "The transfer could not be completed.", response.message)
            download_url = response.download_url

        return UploadOutcome(ResultCode.SUCCESS, Stage.COMPLETE, "All files uploaded", download_url)

    async def _upload_file(self, run: _Run, file: FileUpload) -> Optional[UploadOutcome]:
        """Upload one file; returns an outcome only on failure."""
        target = run.target
        progress: FileProgress = run.progress.start_file(file)
        progress.started()

        self._advance(run, file, Stage.SPLIT_FILES)
        parts = await self._splitter.split(file.local_path, file.chunk_size, self._chunk_directory)
        if len(parts) != file.number_of_parts:
            raise ValueError(
                f"'{file.name}' was split into {len(parts)} parts, "
                f"{file.number_of_parts} expected"
            )
        progress.split()

        self._advance(run, file, Stage.UPLOAD_URL)
        for part_number in file.part_numbers:
            response = await target.request_upload_url(self._client, file, part_number)
            if not response.success or not response.url:
                return self._api_error(
                    run, f"No upload url could be obtained for part {part_number}."
                )
            file.set_url(part_number, response.url)
        progress.urls_acquired()

        self._advance(run, file, Stage.UPLOAD)
        for part_number, part_path in zip(file.part_numbers, parts):
            data = await self._file_reader.read_file(part_path)
            if data is None:
                raise OSError(f"Failed to read part {part_number} of '{file.name}'")
            response = await self._client.upload_part(file.url_for(part_number), data, part_number)
            if not response.success:
                return self._api_error(run, f"Part {part_number} could not be uploaded.")
            logger.debug(f"'{file.name}': part {part_number}/{file.number_of_parts} uploaded")
            progress.part_uploaded(part_number)

        self._advance(run, file, Stage.COMPLETE)
        response = await target.complete_file(self._client, file)
        if not response.success:
            return self._api_error(
                run, response.message or f"File '{file.name}' could not be completed."
            )
        file.mark_completed()
        progress.completed()
        logger.info(f"'{file.name}' uploaded ({file.number_of_parts} parts)")
        return None

    def _build_transfer(
        self,
        target: UploadTarget,
        validated: List[Tuple[Path, int]]
    ) -> Transfer:
        """Match the registered files to local paths by name."""
        local_paths = {path.name: path for path, _ in validated}
        files = []
        for remote in target.remote_files:
            if remote.name not in local_paths:
                raise ValueError(f"Unexpected file in response: '{remote.name}'")
            files.append(FileUpload.from_remote(remote, local_paths[remote.name]))
        if not files:
            raise ValueError("No files were registered")
        return Transfer(id=target.id, files=files)

    def _enter(self, run: _Run, stage: Stage) -> None:
        """Stage shared by every file of the run."""
        run.stage = stage
        for name in run.names:
            self._events.emit('stage', name, stage)

    def _advance(self, run: _Run, file: FileUpload, stage: Stage) -> None:
        run.stage = stage
        file.advance(stage)
        self._events.emit('stage', file.name, stage)

    def _api_error(
        self,
        run: _Run,
        message: str,
        detail: Optional[str] = None
    ) -> UploadOutcome:
        if detail:
            message = f"{message} {detail}"
        logger.warning(f"API error at {run.stage.label}: {message}")
        return UploadOutcome(ResultCode.API_ERROR, run.stage, message)
