"""Character source with one character of pushback, used by the scanner."""

import codecs
import io
from typing import Optional, Union

SourceLike = Union[str, bytes, bytearray, io.IOBase]


class _Utf8Reader:
    """
    Decode a binary stream one character at a time.

    Invalid bytes become U+FFFD. The stream is never closed, so callers can
    keep using it (sys.stdin.buffer) after scanning.
    """

    def __init__(self, stream):
        self._stream = stream
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._pending = ""

    def read(self, size: int = -1) -> str:
        if size < 0:
            text = self._pending + self._decoder.decode(self._stream.read() or b"", final=True)
            self._pending = ""
            return text

        while len(self._pending) < size:
            b = self._stream.read(1)
            if not b:
                self._pending += self._decoder.decode(b"", final=True)
                break
            self._pending += self._decoder.decode(b)

        text, self._pending = self._pending[:size], self._pending[size:]
        return text


def _as_text_stream(source: SourceLike):
    """Wrap strings, bytes and binary streams so they read as text."""
    if isinstance(source, str):
        return io.StringIO(source)
    if isinstance(source, (bytes, bytearray)):
        return io.StringIO(bytes(source).decode("utf-8", errors="replace"))
    if isinstance(source, io.TextIOBase):
        return source
    # Anything else is treated as a binary stream (sys.stdin.buffer, sockets, pipes)
    return _Utf8Reader(source)


class CharSource:
    """
    Pull characters one at a time from a string or a stream.

    read() returns an empty string at end of input. unread() pushes back the
    last character returned by read(); only one character can be pushed back.
    """

    def __init__(self, source: SourceLike):
        self._stream = _as_text_stream(source)
        self._last: Optional[str] = None
        self._pushback: Optional[str] = None

    def read(self) -> str:
        """Return the next character, or "" at end of input."""
        if self._pushback is not None:
            c = self._pushback
            self._pushback = None
        else:
            c = self._stream.read(1)

        self._last = c if c else None
        return c

    def unread(self) -> None:
        """Push back the character returned by the last read()."""
        if self._last is None or self._pushback is not None:
            raise ValueError("unread: no character to push back")

        self._pushback = self._last
        self._last = None

    def read_rest(self) -> str:
        """Return everything left in the source, including a pushed back character."""
        head = self._pushback or ""
        self._pushback = None
        self._last = None
        return head + self._stream.read()
