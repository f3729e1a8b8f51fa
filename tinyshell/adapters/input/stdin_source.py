"""
Byte source adapters for the process's standard input.
"""

import asyncio
import logging
import sys
from typing import BinaryIO, Optional

from typing_extensions import override

from tinyshell.ports.input.input_port import ByteSourcePort


class StreamReaderSource(ByteSourcePort):
    """Byte source backed by an asyncio.StreamReader."""

    def __init__(self, reader: asyncio.StreamReader):
        self._reader = reader

    @override
    async def read(self, n: int) -> bytes:
        return await self._reader.read(n)


class ThreadedFileSource(ByteSourcePort):
    """Byte source reading a blocking binary file in a worker thread."""

    def __init__(self, stream: BinaryIO):
        self._stream = stream

    @override
    async def read(self, n: int) -> bytes:
        read = getattr(self._stream, "read1", self._stream.read)
        return await asyncio.to_thread(read, n)


async def connect_stdin(
    stream: Optional[BinaryIO] = None, logger: Optional[logging.Logger] = None
) -> ByteSourcePort:
    """
    Attach standard input to the running event loop.

    Pipes are registered with the loop directly. Terminals, regular files and
    platforms without pipe support fall back to a thread per read.

    A terminal is never registered: the loop would switch its file description
    to non-blocking mode, and a terminal's stdout shares that description.
    """
    logger = logger or logging.getLogger(__name__)
    stream = stream or sys.stdin.buffer
    if stream.isatty():
        logger.debug("stdin is a terminal; reading it in a worker thread")
        return ThreadedFileSource(stream)
    loop = asyncio.get_running_loop()
    reader = asyncio.StreamReader()
    try:
        await loop.connect_read_pipe(
            lambda: asyncio.StreamReaderProtocol(reader), stream
        )
    except (ValueError, OSError, NotImplementedError) as e:
        logger.debug(f"stdin is not pollable ({e}); reading it in a worker thread")
        return ThreadedFileSource(stream)
    return StreamReaderSource(reader)
