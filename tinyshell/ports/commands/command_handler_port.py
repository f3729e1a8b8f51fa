"""
Command handler port interface: a unit of dispatch logic bound to a command name.
"""

from abc import ABC, abstractmethod
from typing import Any, Sequence


class CommandHandlerPort(ABC):
    """
    Port interface for built-in commands.

    Handlers receive the argument tokens that follow the command name and
    run as their own task, so they must not rely on the dispatch loop for
    serialization.
    """

    name: str = ""
    description: str = ""

    @abstractmethod
    async def run(self, args: Sequence[str]) -> Any:
        """
        Run the command.

        Args:
            args: Ordered argument tokens, possibly empty

        Returns:
            The command's result, for callers that want it besides the console output

        Raises:
            HandlerError: If the command fails
        """
        pass
