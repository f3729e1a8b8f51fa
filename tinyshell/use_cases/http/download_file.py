"""
Use case for streaming an HTTP resource to a local file.
"""

import logging
from typing import Optional

from tinyshell.entities.download import DownloadTask
from tinyshell.exceptions import HandlerError, HttpStatusError
from tinyshell.ports.files.file_system_port import FileSystemPort, FileWriterPort
from tinyshell.ports.http.http_client_port import HttpClientPort


class DownloadFileUseCase:
    """
    Use case for downloading a URL into a file.

    The body is copied one chunk at a time and each write is awaited before
    the next chunk is read, so at most ``chunk_size`` bytes of the payload are
    held in memory and a slow disk slows the network read down.
    """

    def __init__(
        self,
        http_client: HttpClientPort,
        file_system: FileSystemPort,
        chunk_size: int = 65536,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            http_client: Port for HTTP operations
            file_system: Port for file system operations
            chunk_size: Maximum bytes read from the body per step
            logger: Logger instance to use for logging
        """
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self._http_client = http_client
        self._file_system = file_system
        self._chunk_size = chunk_size
        self._logger = logger or logging.getLogger(__name__)

    async def execute(self, url: str, destination: str) -> DownloadTask:
        """
        Download ``url`` into ``destination``.

        The destination is only created once a success status has arrived.

        Args:
            url: Absolute http(s) URL
            destination: Path of the file to create or truncate

        Returns:
            The completed DownloadTask

        Raises:
            InvalidArgumentsError: If the URL is unusable
            NetworkError: If the request or body transfer fails
            HttpStatusError: If the server answers with a non-2xx status
            FilesystemError: If the destination cannot be written
        """
        task = DownloadTask(url=url, destination=destination)
        self._logger.info(f"Downloading {url} to {destination}")
        try:
            async with self._http_client.stream_get(url) as response:
                if not response.is_success:
                    raise HttpStatusError(response.status_code, url)
                writer = await self._file_system.open_writer(destination)
                try:
                    async for chunk in response.iter_chunks(self._chunk_size):
                        await writer.write(chunk)
                        task.record_chunk(len(chunk))
                except BaseException:
                    await self._close_after_error(writer, destination)
                    raise
                await writer.close()
        except HandlerError as e:
            task.fail(str(e))
            self._logger.error(f"Download of {url} failed: {e}")
            raise
        except Exception as e:
            if not task.is_finished:
                task.fail(str(e))
            raise

        task.complete()
        self._logger.info(f"Downloaded {task.bytes_written} bytes from {url} to {destination}")
        return task

    async def _close_after_error(self, writer: FileWriterPort, destination: str) -> None:
        """Close ``writer`` while another error is propagating, logging close failures."""
        try:
            await writer.close()
        except Exception as e:
            self._logger.warning(f"Failed to close {destination} after an error: {e}")
