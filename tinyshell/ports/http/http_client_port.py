"""
HTTP client port interface defining the contract for streamed GET requests.
"""

from abc import ABC, abstractmethod
from typing import AsyncContextManager, AsyncIterator


class HttpResponsePort(ABC):
    """Port interface for a response whose body has not been read yet."""

    @property
    @abstractmethod
    def status_code(self) -> int:
        pass

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @abstractmethod
    def iter_chunks(self, chunk_size: int) -> AsyncIterator[bytes]:
        """
        Iterate over the body in chunks of at most ``chunk_size`` bytes.

        Args:
            chunk_size: Upper bound for each chunk

        Raises:
            NetworkError: If the connection fails mid-body
        """
        pass


class HttpClientPort(ABC):
    """Port interface for HTTP operations."""

    @abstractmethod
    def stream_get(self, url: str) -> AsyncContextManager[HttpResponsePort]:
        """
        Issue a GET request and hold the response open for streaming.

        Args:
            url: Absolute http or https URL

        Returns:
            Async context manager yielding the response once headers arrive

        Raises:
            InvalidArgumentsError: If the URL is not a usable http(s) URL
            NetworkError: If the connection, DNS lookup or request fails
        """
        pass
