"""
Command registry mapping command names to handlers.
"""

import logging
from typing import Optional

from tinyshell.exceptions import UnknownCommandError
from tinyshell.ports.commands.command_handler_port import CommandHandlerPort


class CommandRegistry:
    """
    Explicit name -> handler table.

    Built once at start-up and read on every dispatch. Lookups never mutate
    it, so concurrent handlers may resolve names freely.
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._handlers: dict[str, CommandHandlerPort] = {}
        self._logger = logger or logging.getLogger(__name__)

    def register(self, name: str, handler: CommandHandlerPort) -> None:
        """
        Bind ``name`` to ``handler``, replacing any previous binding.

        Args:
            name: Command name; stored lowercased to match parsed names
            handler: Handler to invoke for the command
        """
        if not name:
            raise ValueError("Command name must be a non-empty string")
        key = name.lower()
        if key in self._handlers:
            self._logger.warning(f"Replacing handler for command: {key}")
        self._handlers[key] = handler

    def register_handler(self, handler: CommandHandlerPort) -> None:
        """Register a handler under its own ``name``."""
        self.register(handler.name, handler)

    def resolve(self, name: str) -> Optional[CommandHandlerPort]:
        return self._handlers.get(name)

    def require(self, name: str) -> CommandHandlerPort:
        handler = self.resolve(name)
        if handler is None:
            raise UnknownCommandError(name)
        return handler

    def names(self) -> list[str]:
        return list(self._handlers)

    def __contains__(self, name: object) -> bool:
        return name in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)
