"""
Dependency injection container for managing shell dependencies.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from tinyshell.adapters.console.rich_console_adapter import RichConsoleAdapter
from tinyshell.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from tinyshell.adapters.http.httpx_client_adapter import HttpxClientAdapter
from tinyshell.ports.console.console_port import ConsolePort
from tinyshell.ports.files.file_system_port import FileSystemPort
from tinyshell.ports.http.http_client_port import HttpClientPort
from tinyshell.use_cases.commands.files_commands import LsCommand, PwdCommand
from tinyshell.use_cases.commands.shell_commands import HelpCommand
from tinyshell.use_cases.commands.web_commands import WgetCommand
from tinyshell.use_cases.files.current_directory import CurrentDirectoryUseCase
from tinyshell.use_cases.files.list_directory import ListDirectoryUseCase
from tinyshell.use_cases.http.download_file import DownloadFileUseCase
from tinyshell.use_cases.shell.dispatch_loop import DispatchLoop
from tinyshell.use_cases.shell.registry import CommandRegistry

if TYPE_CHECKING:
    from tinyshell.config.settings import Settings


class DependencyContainer:
    """
    Container for managing shell dependencies using dependency injection.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._instances = {}
        self._settings = settings
        self._logger = logging.getLogger(__name__)

    def get_settings(self) -> Settings:
        """
        Get the shell settings.

        Returns:
            Settings passed to the container, or the global settings instance
        """
        if self._settings is None:
            from tinyshell.config.settings import settings

            self._settings = settings
        return self._settings

    def get_console(self) -> ConsolePort:
        """
        Get console adapter instance.

        Returns:
            ConsolePort implementation
        """
        if "console" not in self._instances:
            self._instances["console"] = RichConsoleAdapter()
        return self._instances["console"]

    def get_file_system(self) -> FileSystemPort:
        """
        Get file system adapter instance.

        Returns:
            FileSystemPort implementation
        """
        if "file_system" not in self._instances:
            self._instances["file_system"] = LocalFileSystemAdapter(self._logger)
        return self._instances["file_system"]

    def get_http_client(self) -> HttpClientPort:
        """
        Get HTTP client adapter instance.

        Returns:
            HttpClientPort implementation
        """
        if "http_client" not in self._instances:
            self._instances["http_client"] = HttpxClientAdapter(
                timeout=self.get_settings().http_timeout, logger=self._logger
            )
        return self._instances["http_client"]

    def get_current_directory_use_case(self) -> CurrentDirectoryUseCase:
        if "current_directory_use_case" not in self._instances:
            self._instances["current_directory_use_case"] = CurrentDirectoryUseCase(
                self.get_file_system(), self._logger
            )
        return self._instances["current_directory_use_case"]

    def get_list_directory_use_case(self) -> ListDirectoryUseCase:
        """
        Get list directory use case with injected dependencies.

        Returns:
            Configured ListDirectoryUseCase
        """
        if "list_directory_use_case" not in self._instances:
            self._instances["list_directory_use_case"] = ListDirectoryUseCase(
                self.get_file_system(), self._logger
            )
        return self._instances["list_directory_use_case"]

    def get_download_file_use_case(self) -> DownloadFileUseCase:
        """
        Get download use case with injected dependencies.

        Returns:
            Configured DownloadFileUseCase
        """
        if "download_file_use_case" not in self._instances:
            self._instances["download_file_use_case"] = DownloadFileUseCase(
                self.get_http_client(),
                self.get_file_system(),
                chunk_size=self.get_settings().chunk_size,
                logger=self._logger,
            )
        return self._instances["download_file_use_case"]

    def get_registry(self) -> CommandRegistry:
        """
        Command table with the built-in commands registered.
        """
        if "registry" not in self._instances:
            console = self.get_console()
            registry = CommandRegistry(self._logger)
            registry.register_handler(
                PwdCommand(self.get_current_directory_use_case(), console)
            )
            registry.register_handler(
                LsCommand(self.get_list_directory_use_case(), console)
            )
            registry.register_handler(
                WgetCommand(
                    self.get_download_file_use_case(),
                    console,
                    default_destination=self.get_settings().default_download,
                    logger=self._logger,
                )
            )
            registry.register_handler(HelpCommand(registry, console))
            self._instances["registry"] = registry
        return self._instances["registry"]

    def get_dispatch_loop(self) -> DispatchLoop:
        if "dispatch_loop" not in self._instances:
            self._instances["dispatch_loop"] = DispatchLoop(
                self.get_registry(), self.get_console(), self._logger
            )
        return self._instances["dispatch_loop"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()

