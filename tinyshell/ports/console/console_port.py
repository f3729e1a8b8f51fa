"""
Console port interface for user-visible output.
"""

from abc import ABC, abstractmethod


class ConsolePort(ABC):
    """Port interface for printing command results and diagnostics."""

    @abstractmethod
    def print_line(self, text: str) -> None:
        """Print one line of command output."""
        pass

    @abstractmethod
    def print_error(self, text: str) -> None:
        """Print one line of diagnostic output."""
        pass
