"""
HTTP client adapter streaming responses with httpx.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional
from urllib.parse import urlparse

import httpx
from typing_extensions import override

from tinyshell.exceptions import InvalidArgumentsError, NetworkError
from tinyshell.ports.http.http_client_port import HttpClientPort, HttpResponsePort


def _describe(error: Exception) -> str:
    return str(error) or error.__class__.__name__


class HttpxResponse(HttpResponsePort):
    """Open httpx response whose body is consumed chunk by chunk."""

    def __init__(self, response: httpx.Response, url: str):
        self._response = response
        self._url = url

    @property
    @override
    def status_code(self) -> int:
        return self._response.status_code

    @override
    async def iter_chunks(self, chunk_size: int) -> AsyncIterator[bytes]:
        try:
            async for chunk in self._response.aiter_bytes(chunk_size=chunk_size):
                yield chunk
        except httpx.TimeoutException:
            raise NetworkError(f"Timed out while reading {self._url}")
        except httpx.HTTPError as e:
            raise NetworkError(f"Connection lost while reading {self._url}: {_describe(e)}")


class HttpxClientAdapter(HttpClientPort):
    """httpx implementation of the HTTP client port.

    A fresh AsyncClient is opened per request so concurrent downloads share
    no connection state and the adapter can outlive any single event loop.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the adapter.

        Args:
            timeout: Connect/read/write/pool timeout in seconds
            transport: Optional httpx transport, e.g. httpx.MockTransport in tests
            logger: Logger instance to use for logging
        """
        self._timeout = httpx.Timeout(timeout)
        self._transport = transport
        self._logger = logger or logging.getLogger(__name__)

    # ---------------- private helpers ----------------
    def _validate_url(self, url: str) -> None:
        p = urlparse(url)
        if p.scheme not in ("http", "https"):
            raise InvalidArgumentsError(f"Only http/https URLs are supported: {url}")
        if not p.netloc:
            raise InvalidArgumentsError(f"Invalid URL, missing host: {url}")

    @override
    @asynccontextmanager
    async def stream_get(self, url: str) -> AsyncIterator[HttpResponsePort]:
        self._validate_url(url)
        self._logger.info(f"GET {url}")
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                async with client.stream("GET", url) as response:
                    self._logger.info(f"GET {url} -> {response.status_code}")
                    yield HttpxResponse(response, url)
        except httpx.InvalidURL as e:
            raise InvalidArgumentsError(f"Invalid URL {url}: {_describe(e)}")
        except httpx.TimeoutException:
            raise NetworkError(f"Request to {url} timed out")
        except httpx.HTTPError as e:
            raise NetworkError(f"Request to {url} failed: {_describe(e)}")
