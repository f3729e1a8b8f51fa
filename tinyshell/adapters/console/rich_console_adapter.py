"""
Console adapter printing through rich.
"""

from typing import Optional

from rich.console import Console
from typing_extensions import override

from tinyshell.ports.console.console_port import ConsolePort


class RichConsoleAdapter(ConsolePort):
    """Rich implementation of the console port (stdout for results, stderr for errors)."""

    def __init__(
        self, out: Optional[Console] = None, err: Optional[Console] = None
    ) -> None:
        # Markup and highlighting stay off so paths and URLs print verbatim.
        self._out = out or Console(highlight=False, soft_wrap=True)
        self._err = err or Console(stderr=True, highlight=False, soft_wrap=True)

    @override
    def print_line(self, text: str) -> None:
        self._out.print(text, markup=False, highlight=False)

    @override
    def print_error(self, text: str) -> None:
        self._err.print(text, markup=False, highlight=False, style="red")
