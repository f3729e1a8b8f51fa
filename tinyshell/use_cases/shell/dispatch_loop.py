"""
Dispatch loop: read a line, parse it, resolve the handler and start it.
"""

import asyncio
import logging
from enum import Enum
from typing import Any, Optional

from tinyshell.entities.command import ParsedCommand
from tinyshell.exceptions import (
    HandlerError,
    InputError,
    ParseError,
    UnknownCommandError,
)
from tinyshell.ports.commands.command_handler_port import CommandHandlerPort
from tinyshell.ports.console.console_port import ConsolePort
from tinyshell.ports.input.input_port import LineSourcePort
from tinyshell.use_cases.shell.parse_command import parse_command
from tinyshell.use_cases.shell.registry import CommandRegistry

SHELL_NAME = "tinyshell"


class ShellState(str, Enum):
    IDLE = "idle"
    READING = "reading"
    DISPATCHING = "dispatching"


class DispatchLoop:
    """
    Sequence reading, parsing, resolving and invoking commands.

    Each handler runs as its own asyncio task. ``dispatch`` returns as soon as
    the task is created, so a long download never delays the next line.
    Every failure becomes one diagnostic line on the console; nothing raised
    by a command ends the loop.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        console: ConsolePort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the loop.

        Args:
            registry: Command table consulted on every dispatch
            console: Port receiving diagnostics for parse and resolve failures
            logger: Logger instance to use for logging
        """
        self._registry = registry
        self._console = console
        self._logger = logger or logging.getLogger(__name__)
        self._tasks: set[asyncio.Task] = set()
        self.state = ShellState.IDLE

    @property
    def pending(self) -> int:
        """Number of handler tasks still running."""
        return len(self._tasks)

    def dispatch(self, line: str) -> Optional[asyncio.Task]:
        """
        Parse ``line`` and start its handler.

        Must be called from a running event loop. Does not suspend.

        Args:
            line: One decoded input line

        Returns:
            The task running the handler, or None if nothing was started
        """
        self.state = ShellState.DISPATCHING
        try:
            try:
                command = parse_command(line)
            except ParseError as e:
                self._console.print_error(f"{SHELL_NAME}: {e}")
                return None

            handler = self._registry.resolve(command.name)
            if handler is None:
                self._logger.info(f"Unknown command: {command.name}")
                self._console.print_error(str(UnknownCommandError(command.name)))
                return None

            self._logger.debug(f"Dispatching: {command}")
            task = asyncio.create_task(
                self._invoke(command, handler), name=f"{SHELL_NAME}:{command.name}"
            )
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)
            return task
        finally:
            self.state = ShellState.IDLE

    async def _invoke(self, command: ParsedCommand, handler: CommandHandlerPort) -> Any:
        try:
            return await handler.run(command.args)
        except HandlerError as e:
            self._logger.info(f"Command {command.name} failed: {e}")
            self._console.print_error(f"{command.name}: {e}")
        except Exception as e:
            self._logger.exception(f"Unexpected error in command {command.name}")
            self._console.print_error(f"{command.name}: unexpected error: {e}")
        return None

    async def drain(self) -> None:
        """Wait until every handler task, including ones started meanwhile, has finished."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def run(self, lines: LineSourcePort) -> None:
        """
        Dispatch lines until the input is exhausted, then wait for running commands.

        Args:
            lines: Source of decoded input lines
        """
        while True:
            self.state = ShellState.READING
            try:
                line = await lines.read_line()
            except InputError as e:
                self.state = ShellState.IDLE
                self._console.print_error(f"{SHELL_NAME}: {e}")
                continue
            if line is None:
                break
            self.dispatch(line)

        self.state = ShellState.IDLE
        self._logger.info(f"Input closed; waiting for {self.pending} running command(s)")
        await self.drain()
