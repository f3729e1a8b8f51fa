"""
Command "help" describing the registered commands.
"""

from typing import Sequence

from typing_extensions import override

from tinyshell.ports.commands.command_handler_port import CommandHandlerPort
from tinyshell.ports.console.console_port import ConsolePort
from tinyshell.use_cases.shell.registry import CommandRegistry


class HelpCommand(CommandHandlerPort):
    name = "help"
    description = "list the available commands"

    def __init__(self, registry: CommandRegistry, console: ConsolePort) -> None:
        self._registry = registry
        self._console = console

    @override
    async def run(self, args: Sequence[str]) -> list[str]:
        lines: list[str] = []
        names = self._registry.names()
        width = max((len(n) for n in names), default=0)
        for name in names:
            handler = self._registry.resolve(name)
            description = handler.description if handler is not None else ""
            lines.append(f"{name.ljust(width)}  {description}".rstrip())
        for line in lines:
            self._console.print_line(line)
        return lines
