"""
Use case for listing the entries of a directory.
"""

import logging
from typing import Optional

from tinyshell.entities.listing import DirectoryListing
from tinyshell.exceptions import FilesystemError
from tinyshell.ports.files.file_system_port import FileSystemPort


class ListDirectoryUseCase:
    """Use case for listing entry names in a directory."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_system: Port for file system operations
            logger: Logger instance to use for logging
        """
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    async def execute(self, directory: Optional[str] = None) -> DirectoryListing:
        """
        List entry names in a directory.

        Args:
            directory: Path to list. None or "" means the current working directory

        Returns:
            DirectoryListing holding the listed path and its entries, unsorted

        Raises:
            EnvironmentFailureError: If the current directory cannot be obtained
            FilesystemError: If listing fails
        """
        path = directory or self._file_system.current_directory()
        try:
            self._logger.info(f"Listing entries in directory: {path}")
            entries = await self._file_system.list_entries(path)
            self._logger.info(f"Found {len(entries)} entries")
            return DirectoryListing(path=path, entries=entries)
        except FilesystemError:
            raise
        except Exception as e:
            self._logger.error(f"Error listing entries: {e}")
            raise FilesystemError(f"Failed to list entries in {path}: {str(e)}")
