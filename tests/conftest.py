"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
from typing import Iterable
from unittest.mock import MagicMock

import pytest

from tinyshell.ports.console.console_port import ConsolePort
from tinyshell.ports.input.input_port import ByteSourcePort


class MemoryConsole(ConsolePort):
    """Console recording output in the order it was printed."""

    def __init__(self):
        self.events: list[tuple[str, str]] = []

    def print_line(self, text: str) -> None:
        self.events.append(("out", text))

    def print_error(self, text: str) -> None:
        self.events.append(("err", text))

    @property
    def lines(self) -> list[str]:
        return [text for kind, text in self.events if kind == "out"]

    @property
    def errors(self) -> list[str]:
        return [text for kind, text in self.events if kind == "err"]


class ChunkedSource(ByteSourcePort):
    """Byte source replaying fixed deliveries, ignoring the requested size."""

    def __init__(self, chunks: Iterable[bytes]):
        self._chunks = list(chunks)
        self.reads = 0

    async def read(self, n: int) -> bytes:
        self.reads += 1
        if not self._chunks:
            return b""
        return self._chunks.pop(0)


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing file operations.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        # Create some test files
        test_file1 = os.path.join(temp_dir, "test1.txt")
        test_file2 = os.path.join(temp_dir, "test2.py")

        with open(test_file1, "w") as f:
            f.write("This is a test file.")

        with open(test_file2, "w") as f:
            f.write("print('Hello, world!')")

        # Create a subdirectory with a file
        subdir = os.path.join(temp_dir, "subdir")
        os.makedirs(subdir)

        test_file3 = os.path.join(subdir, "test3.md")
        with open(test_file3, "w") as f:
            f.write("# Test Markdown\n\nThis is a test.")

        yield temp_dir


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def memory_console():
    return MemoryConsole()


@pytest.fixture
def chunked_source():
    """Factory building a byte source from a list of deliveries."""
    return ChunkedSource
