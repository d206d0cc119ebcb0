"""Character-level reading of build output and line reconstruction."""

import codecs
import logging
from asyncio import StreamReader

log = logging.getLogger(__name__)

READ_CHUNK_SIZE = 4096


class DecodedCharReader:
    """Reads decoded characters one at a time from a byte stream.

    Undecodable bytes are replaced with U+FFFD instead of raising, and
    multi-byte characters split across reads are reassembled by an
    incremental decoder.
    """

    def __init__(
        self,
        stream: StreamReader,
        encoding: str = "utf-8",
        chunk_size: int = READ_CHUNK_SIZE,
    ) -> None:
        self._stream = stream
        self._decoder = codecs.getincrementaldecoder(encoding)(errors="replace")
        self._chunk_size = chunk_size
        self._pending = ""
        self._position = 0
        self._eof = False

    async def read_char(self) -> str | None:
        """Return the next decoded character, or None once the stream is closed."""
        while self._position >= len(self._pending):
            if self._eof:
                return None
            chunk = await self._stream.read(self._chunk_size)
            if chunk:
                self._pending = self._decoder.decode(chunk)
            else:
                self._eof = True
                self._pending = self._decoder.decode(b"", final=True)
            self._position = 0

        char = self._pending[self._position]
        self._position += 1
        return char

    def __aiter__(self) -> "DecodedCharReader":
        return self

    async def __anext__(self) -> str:
        char = await self.read_char()
        if char is None:
            raise StopAsyncIteration
        return char


class LineAccumulator:
    """Builds completed lines out of individual characters."""

    def __init__(self) -> None:
        self._buffer: list[str] = []

    @property
    def residual(self) -> str:
        """Characters received since the last newline."""
        return "".join(self._buffer)

    def feed(self, char: str) -> str | None:
        """Add a character and return the line it completes, if any.

        The returned line has its newline and any trailing carriage return
        removed.
        """
        if char != "\n":
            self._buffer.append(char)
            return None

        line = "".join(self._buffer).removesuffix("\r")
        self._buffer.clear()
        return line

    def finish(self) -> str:
        """Discard unterminated trailing output and return what was dropped."""
        residual = self.residual
        if residual:
            log.debug("Discarding %d unterminated character(s)", len(residual))
        self._buffer.clear()
        return residual
