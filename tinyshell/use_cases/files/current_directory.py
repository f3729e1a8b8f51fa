"""
Use case for reading the current working directory.
"""

import logging
from typing import Optional

from tinyshell.exceptions import EnvironmentFailureError
from tinyshell.ports.files.file_system_port import FileSystemPort


class CurrentDirectoryUseCase:
    """Use case for reading the process's current working directory."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    def execute(self) -> str:
        try:
            return self._file_system.current_directory()
        except EnvironmentFailureError:
            raise
        except Exception as e:
            self._logger.error(f"Error reading current directory: {e}")
            raise EnvironmentFailureError(f"Cannot determine the current directory: {str(e)}")
