"""
Commands "pwd" and "ls" backed by the file use cases.
"""

from typing import Sequence

from typing_extensions import override

from tinyshell.entities.command import argument_at
from tinyshell.entities.listing import DirectoryListing
from tinyshell.ports.commands.command_handler_port import CommandHandlerPort
from tinyshell.ports.console.console_port import ConsolePort
from tinyshell.use_cases.files.current_directory import CurrentDirectoryUseCase
from tinyshell.use_cases.files.list_directory import ListDirectoryUseCase


class PwdCommand(CommandHandlerPort):
    """Print the current working directory. Arguments are ignored."""

    name = "pwd"
    description = "print the current working directory"

    def __init__(
        self,
        current_directory_uc: CurrentDirectoryUseCase,
        console: ConsolePort,
    ) -> None:
        self._current_directory_uc = current_directory_uc
        self._console = console

    @override
    async def run(self, args: Sequence[str]) -> str:
        path = self._current_directory_uc.execute()
        self._console.print_line(path)
        return path


class LsCommand(CommandHandlerPort):
    """List entry names of ``args[0]``, or of the working directory when it is absent or empty."""

    name = "ls"
    description = "list directory entries: ls [dir]"

    def __init__(
        self,
        list_directory_uc: ListDirectoryUseCase,
        console: ConsolePort,
    ) -> None:
        self._list_directory_uc = list_directory_uc
        self._console = console

    @override
    async def run(self, args: Sequence[str]) -> DirectoryListing:
        directory = argument_at(args, 0)
        listing = await self._list_directory_uc.execute(directory or None)
        for entry in listing.entries:
            self._console.print_line(entry)
        return listing
