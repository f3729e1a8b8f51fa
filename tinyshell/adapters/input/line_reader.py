"""
Line reader reassembling newline-delimited lines from an unframed byte stream.
"""

import logging
from typing import Optional

from typing_extensions import override

from tinyshell.exceptions import EncodingError, LineTooLongError
from tinyshell.ports.input.input_port import ByteSourcePort, LineSourcePort


class LineReader(LineSourcePort):
    """
    Turn arbitrary byte deliveries into logical input lines.

    Bytes are buffered until a newline arrives, so a read holding several
    lines yields them one at a time and a line split over several reads is
    joined. Whatever remains at end of stream is delivered as a last line.
    Lines are split on raw bytes before decoding; ``\\n`` never occurs inside
    a multi-byte UTF-8 sequence, so a bad line cannot swallow its neighbours.

    A line longer than ``max_line_length`` is reported once and skipped up to
    its newline, so the buffer never grows past ``max_line_length + read_size``.
    """

    def __init__(
        self,
        source: ByteSourcePort,
        encoding: str = "utf-8",
        read_size: int = 65536,
        max_line_length: int = 65536,
        logger: Optional[logging.Logger] = None,
    ):
        if max_line_length <= 0:
            raise ValueError(f"max_line_length must be positive, got {max_line_length}")
        self._source = source
        self._encoding = encoding
        self._read_size = read_size
        self._max_line_length = max_line_length
        self._buffer = bytearray()
        self._discarding = False
        self._eof = False
        self._logger = logger or logging.getLogger(__name__)

    @property
    def at_eof(self) -> bool:
        return self._eof and not self._buffer

    def _too_long(self) -> LineTooLongError:
        self._logger.warning(
            f"Discarding input line longer than {self._max_line_length} bytes"
        )
        return LineTooLongError(self._max_line_length)

    async def _next_raw_line(self) -> Optional[bytes]:
        while True:
            newline = self._buffer.find(b"\n")
            if self._discarding:
                # Skipping the tail of an overlong line
                if newline < 0:
                    self._buffer.clear()
                else:
                    del self._buffer[: newline + 1]
                    self._discarding = False
                    continue
            elif newline >= 0:
                raw = bytes(self._buffer[:newline])
                del self._buffer[: newline + 1]
                if len(raw) > self._max_line_length:
                    raise self._too_long()
                return raw
            elif len(self._buffer) > self._max_line_length:
                self._buffer.clear()
                self._discarding = True
                raise self._too_long()

            if self._eof:
                if not self._buffer:
                    return None
                raw = bytes(self._buffer)
                self._buffer.clear()
                return raw
            chunk = await self._source.read(self._read_size)
            if not chunk:
                self._eof = True
            else:
                self._buffer.extend(chunk)

    @override
    async def read_line(self) -> Optional[str]:
        """
        Read the next line without its terminator.

        Returns:
            The decoded line, or None once the stream is exhausted

        Raises:
            EncodingError: If the line is not valid in the configured encoding.
                The line is consumed; the next call continues after it.
            LineTooLongError: If the line exceeds ``max_line_length`` bytes.
                The rest of the line is skipped; the next call continues after it.
        """
        raw = await self._next_raw_line()
        if raw is None:
            return None
        if raw.endswith(b"\r"):
            raw = raw[:-1]
        try:
            return raw.decode(self._encoding)
        except UnicodeDecodeError as e:
            self._logger.warning(f"Dropping undecodable input line ({len(raw)} bytes)")
            raise EncodingError(
                f"Input is not valid {self._encoding} (byte {e.start}: {e.reason})"
            )

    def __aiter__(self):
        return self

    async def __anext__(self) -> str:
        line = await self.read_line()
        if line is None:
            raise StopAsyncIteration
        return line
