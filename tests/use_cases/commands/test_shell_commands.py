"""
Tests for the help command.
"""

import asyncio
from unittest.mock import MagicMock

from tinyshell.ports.commands.command_handler_port import CommandHandlerPort
from tinyshell.use_cases.commands.shell_commands import HelpCommand
from tinyshell.use_cases.shell.registry import CommandRegistry


def _handler(name: str, description: str) -> MagicMock:
    handler = MagicMock(spec=CommandHandlerPort)
    handler.name = name
    handler.description = description
    return handler


class TestHelpCommand:
    """Test cases for the help command."""

    def test_lists_registered_commands_with_descriptions(
        self, memory_console, mock_logger
    ):
        registry = CommandRegistry(mock_logger)
        registry.register_handler(_handler("pwd", "print the directory"))
        registry.register_handler(_handler("wget", "download"))
        help_command = HelpCommand(registry, memory_console)
        registry.register_handler(help_command)

        lines = asyncio.run(help_command.run([]))

        assert lines == [
            "pwd   print the directory",
            "wget  download",
            "help  list the available commands",
        ]
        assert memory_console.lines == lines

    def test_empty_registry(self, memory_console, mock_logger):
        help_command = HelpCommand(CommandRegistry(mock_logger), memory_console)

        assert asyncio.run(help_command.run([])) == []
        assert memory_console.events == []
