"""
File system port interface defining the contract for directory and file operations.
"""

from abc import ABC, abstractmethod


class FileWriterPort(ABC):
    """Port interface for an open, write-only binary file."""

    @abstractmethod
    async def write(self, chunk: bytes) -> None:
        """
        Write a chunk and return once the sink has accepted it.

        Args:
            chunk: Bytes to append to the file

        Raises:
            FilesystemError: If writing fails
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """
        Flush and close the file.

        Raises:
            FilesystemError: If closing fails
        """
        pass


class FileSystemPort(ABC):
    """Port interface for file system operations."""

    @abstractmethod
    def current_directory(self) -> str:
        """
        Get the process's current working directory.

        Returns:
            Absolute path of the working directory

        Raises:
            EnvironmentFailureError: If the path cannot be obtained
        """
        pass

    @abstractmethod
    async def list_entries(self, directory: str) -> list[str]:
        """
        List entry names in a directory, in the order the OS yields them.

        Args:
            directory: Path to the directory to list

        Returns:
            Entry names, without metadata

        Raises:
            FilesystemError: If the path is missing, not a directory or unreadable
        """
        pass

    @abstractmethod
    async def open_writer(self, path: str) -> FileWriterPort:
        """
        Create or truncate a file and open it for streaming writes.

        Args:
            path: Absolute or relative path of the file

        Returns:
            An open FileWriterPort

        Raises:
            FilesystemError: If the file cannot be opened
        """
        pass
