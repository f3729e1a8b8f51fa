"""
Command "wget" streaming an HTTP resource to a file.
"""

import logging
from typing import Optional, Sequence

from typing_extensions import override

from tinyshell.entities.command import argument_at
from tinyshell.entities.download import DownloadTask
from tinyshell.exceptions import InvalidArgumentsError
from tinyshell.ports.commands.command_handler_port import CommandHandlerPort
from tinyshell.ports.console.console_port import ConsolePort
from tinyshell.use_cases.http.download_file import DownloadFileUseCase

DEFAULT_DOWNLOAD_NAME = "download"


class WgetCommand(CommandHandlerPort):
    """Handler for ``wget <url> [file]``.

    The destination defaults to ``default_destination`` when the second
    argument is absent. Nothing is created when the URL is missing.
    """

    name = "wget"
    description = "download a URL to a file: wget <url> [file]"

    def __init__(
        self,
        download_file_uc: DownloadFileUseCase,
        console: ConsolePort,
        default_destination: str = DEFAULT_DOWNLOAD_NAME,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._download_file_uc = download_file_uc
        self._console = console
        self._default_destination = default_destination
        self._logger = logger or logging.getLogger(__name__)

    @override
    async def run(self, args: Sequence[str]) -> DownloadTask:
        url = argument_at(args, 0)
        if not url:
            raise InvalidArgumentsError("missing URL (usage: wget <url> [file])")
        destination = argument_at(args, 1, self._default_destination)
        if not destination:
            destination = self._default_destination

        self._logger.debug(f"wget {url} -> {destination}")
        task = await self._download_file_uc.execute(url, destination)
        self._console.print_line(f"{url} downloaded to file '{destination}'")
        return task
