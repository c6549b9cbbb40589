"""Line oriented seeking over a seekable binary source.

:class:`LineReaderSeeker` wraps any object offering ``read``, ``readline``,
``seek`` and ``tell`` on bytes (an ``open(path, "rb")`` handle or an
:class:`io.BytesIO`).  It can count lines, position the stream at the start of
a given line and fetch a uniformly random line.

Line conventions
----------------
Lines are terminated by ``\\n``; a trailing ``\\r`` is stripped together with
it.  A final segment without terminator counts as a line, an empty segment
after a trailing newline does not.  Empty lines in the middle of the source do
count.  Line numbers are 1-based.

``OSError`` raised by the wrapped source is re-raised as
:class:`~fakenews.utils.errors.SourceReadError` so callers can tell a broken
source from an empty one.
"""

from __future__ import annotations

import io
import random
from typing import BinaryIO

from fakenews.utils.errors import (
    LineOutOfRangeError,
    LineSeekError,
    NoLinesError,
    SourceReadError,
    UnsupportedWhenceError,
)


def strip_line_ending(line: bytes) -> bytes:
    """Return ``line`` without its ``\\n`` or ``\\r\\n`` terminator."""

    if line.endswith(b"\n"):
        line = line[:-1]
        if line.endswith(b"\r"):
            line = line[:-1]
    return line


class LineReaderSeeker:
    """Seek by line over a seekable byte source."""

    def __init__(self, source: BinaryIO, *, encoding: str = "utf-8") -> None:
        self.source = source
        self.encoding = encoding

    # -- Pass-through ---------------------------------------------------------

    def read(self, size: int = -1) -> bytes:
        try:
            return self.source.read(size)
        except OSError as exc:
            raise SourceReadError(f"read failed: {exc}") from exc

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        try:
            return self.source.seek(offset, whence)
        except OSError as exc:
            raise SourceReadError(f"seek failed: {exc}") from exc

    def tell(self) -> int:
        try:
            return self.source.tell()
        except OSError as exc:
            raise SourceReadError(f"tell failed: {exc}") from exc

    def _readline(self) -> bytes:
        try:
            return self.source.readline()
        except OSError as exc:
            raise SourceReadError(f"readline failed: {exc}") from exc

    # -- Line scanning --------------------------------------------------------

    def _line_offsets(self) -> list[int]:
        """Return the byte offset of every line start, scanning from 0."""

        offsets: list[int] = []
        pos = self.seek(0, io.SEEK_SET)
        while True:
            line = self._readline()
            if not line:
                break
            offsets.append(pos)
            pos += len(line)
        return offsets

    def lines(self) -> int:
        """Count lines from the current position to the end.

        The stream position is restored afterwards.
        """

        start = self.tell()
        count = 0
        while self._readline():
            count += 1
        self.seek(start, io.SEEK_SET)
        return count

    def seek_line(self, line_number: int, whence: int = io.SEEK_SET) -> int:
        """Position the stream at the start of a line and return the offset.

        ``io.SEEK_SET``
            ``line_number`` > 0 selects that line counted from the top; a
            number past the last line raises ``LineOutOfRangeError``.  A
            negative number is treated as ``io.SEEK_END``; zero is rejected.
        ``io.SEEK_END``
            Zero leaves the stream at the end.  Otherwise ``abs(line_number)``
            lines are counted back from the end, wrapping modulo the line
            count when it is larger; a wrap landing on zero leaves the stream
            at the end.
        """

        if whence == io.SEEK_SET:
            if line_number < 0:
                return self._seek_from_end(line_number)
            return self._seek_from_start(line_number)
        if whence == io.SEEK_END:
            return self._seek_from_end(line_number)
        raise UnsupportedWhenceError(f"unsupported whence: {whence}")

    def _seek_from_start(self, line_number: int) -> int:
        if line_number <= 0:
            raise LineSeekError("line number must be positive")
        offsets = self._line_offsets()
        if not offsets:
            raise NoLinesError("no lines found in the source")
        if line_number > len(offsets):
            raise LineOutOfRangeError(
                f"line {line_number} out of range (source has {len(offsets)} lines)"
            )
        return self.seek(offsets[line_number - 1], io.SEEK_SET)

    def _seek_from_end(self, line_number: int) -> int:
        if line_number == 0:
            return self.seek(0, io.SEEK_END)
        offsets = self._line_offsets()
        if not offsets:
            raise NoLinesError("no lines found in the source")
        back = abs(line_number)
        if back > len(offsets):
            back %= len(offsets)
            if back == 0:
                return self.seek(0, io.SEEK_END)
        return self.seek(offsets[len(offsets) - back], io.SEEK_SET)

    def random_line(self, rng: random.Random | None = None) -> str:
        """Return a uniformly chosen line, decoded and without terminator."""

        rng = rng or random.Random()
        offsets = self._line_offsets()
        if not offsets:
            raise NoLinesError("no lines found in the source")
        self.seek(offsets[rng.randrange(len(offsets))], io.SEEK_SET)
        return strip_line_ending(self._readline()).decode(self.encoding)


__all__ = ["LineReaderSeeker", "strip_line_ending"]
