"""
Local file system adapter implementation for directory and file operations.
"""

import asyncio
import logging
import os
from typing import BinaryIO

from typing_extensions import override

from tinyshell.exceptions import EnvironmentFailureError, FilesystemError
from tinyshell.ports.files.file_system_port import FileSystemPort, FileWriterPort


class LocalFileWriter(FileWriterPort):
    """Binary file opened for writing; each write runs in a worker thread."""

    def __init__(self, path: str, handle: BinaryIO):
        self.path = path
        self._handle = handle

    @override
    async def write(self, chunk: bytes) -> None:
        try:
            await asyncio.to_thread(self._handle.write, chunk)
        except OSError as e:
            raise FilesystemError(f"Failed to write to {self.path}: {e.strerror or e}")

    @override
    async def close(self) -> None:
        if self._handle.closed:
            return
        try:
            await asyncio.to_thread(self._handle.close)
        except OSError as e:
            raise FilesystemError(f"Failed to close {self.path}: {e.strerror or e}")


class LocalFileSystemAdapter(FileSystemPort):
    """Local file system implementation of the file system port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _validate_directory(self, directory: str) -> None:
        """
        Validate that a directory exists and is indeed a directory.

        Args:
            directory: Path to the directory to validate

        Raises:
            FilesystemError: If directory does not exist or is not a directory
        """
        if not os.path.exists(directory):
            raise FilesystemError(f"Directory does not exist: {directory}")

        if not os.path.isdir(directory):
            raise FilesystemError(f"Path is not a directory: {directory}")

    def _list_entries_blocking(self, directory: str) -> list[str]:
        self._validate_directory(directory)
        return os.listdir(directory)

    @override
    def current_directory(self) -> str:
        try:
            return os.getcwd()
        except OSError as e:
            raise EnvironmentFailureError(
                f"Cannot determine the current directory: {e.strerror or e}"
            )

    @override
    async def list_entries(self, directory: str) -> list[str]:
        """
        List entry names in a directory.

        Args:
            directory: Path to the directory to list

        Returns:
            Entry names in the order os.listdir yields them

        Raises:
            FilesystemError: If listing fails
        """
        try:
            entries = await asyncio.to_thread(self._list_entries_blocking, directory)
            self._logger.debug(f"Listed {len(entries)} entries in {directory}")
            return entries

        except FilesystemError:
            raise
        except PermissionError:
            raise FilesystemError(f"Permission denied: {directory}")
        except Exception as e:
            raise FilesystemError(f"Failed to list entries in {directory}: {str(e)}")

    @override
    async def open_writer(self, path: str) -> FileWriterPort:
        """
        Create or truncate a file for binary writing.

        Args:
            path: Absolute or relative path of the file

        Returns:
            LocalFileWriter for the opened file

        Raises:
            FilesystemError: If the file cannot be opened
        """
        try:
            handle = await asyncio.to_thread(open, path, "wb")
        except IsADirectoryError:
            raise FilesystemError(f"Path is a directory: {path}")
        except PermissionError:
            raise FilesystemError(f"Permission denied: {path}")
        except OSError as e:
            raise FilesystemError(f"Failed to open {path} for writing: {e.strerror or e}")
        self._logger.debug(f"Opened {path} for writing")
        return LocalFileWriter(path, handle)
