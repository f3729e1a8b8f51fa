"""
Input port interfaces for byte streams and the lines read from them.
"""

from abc import ABC, abstractmethod
from typing import Optional


class ByteSourcePort(ABC):
    """Port interface for a stream that delivers bytes in arbitrary units."""

    @abstractmethod
    async def read(self, n: int) -> bytes:
        """
        Read up to ``n`` bytes.

        Returns:
            The bytes read, or ``b""`` once the stream is closed
        """
        pass


class LineSourcePort(ABC):
    """Port interface for a stream of decoded input lines."""

    @abstractmethod
    async def read_line(self) -> Optional[str]:
        """
        Read the next line without its terminator.

        Returns:
            The line, or None once the stream is exhausted

        Raises:
            EncodingError: If the line cannot be decoded; the stream stays usable
        """
        pass
