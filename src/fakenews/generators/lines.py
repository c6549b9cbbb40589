"""Line based generator over a seekable binary source.

:class:`LineGenerator` reads one line per ``next()`` call and hands the raw
bytes (terminator stripped) to a parser.  ``iter()`` rewinds the shared source
to offset 0 and returns a new generator over it.

Concurrency: every generator derived from one :func:`generator_from_io` call
shares a lock that serializes ``next()`` and ``iter()``.  The source still has
a single read position, so only one logical consumer should hold a live
generator over a given source at a time.
"""

from __future__ import annotations

import io
import threading
from collections.abc import Callable
from typing import BinaryIO

from fakenews.io.linereader import strip_line_ending
from fakenews.utils.errors import SourceReadError
from fakenews.utils.logging import get_logger

from .base import Generator, T

LineParser = Callable[[bytes], T]

log = get_logger(__name__)


def raw_line(line: bytes) -> bytes:
    """Parser returning the line bytes unchanged."""

    return line


def decode_line(encoding: str = "utf-8", errors: str = "strict") -> Callable[[bytes], str]:
    """Return a parser decoding each line with ``encoding``."""

    def parse(line: bytes) -> str:
        return line.decode(encoding, errors)

    return parse


class LineGenerator(Generator[T]):
    """Produce one parsed value per line of ``source``.

    A generator without a parser never produces anything: ``next()`` still
    consumes a line but always reports exhaustion.
    """

    def __init__(
        self,
        source: BinaryIO,
        parser: LineParser[T] | None,
        *,
        lock: threading.Lock | None = None,
    ) -> None:
        self.source = source
        self.parser = parser
        self.last_error: OSError | None = None
        self._lock = lock or threading.Lock()

    def next(self) -> tuple[T | None, bool]:
        with self._lock:
            try:
                line = self.source.readline()
            except OSError as exc:
                self.last_error = exc
                raise SourceReadError(f"failed to read line: {exc}") from exc
            if not line:
                return None, False
            if self.parser is None:
                return None, False
            return self.parser(strip_line_ending(line)), True

    def iter(self) -> LineGenerator[T]:
        with self._lock:
            try:
                self.source.seek(0, io.SEEK_SET)
            except OSError as exc:
                self.last_error = exc
                raise SourceReadError(f"failed to rewind source: {exc}") from exc
        log.debug("rewound line source %r", self.source)
        return LineGenerator(self.source, self.parser, lock=self._lock)


def generator_from_io(source: BinaryIO, parser: LineParser[T] | None) -> LineGenerator[T]:
    """Return a :class:`LineGenerator` over ``source`` positioned at offset 0."""

    try:
        source.seek(0, io.SEEK_SET)
    except OSError as exc:
        raise SourceReadError(f"failed to rewind source: {exc}") from exc
    return LineGenerator(source, parser)


__all__ = ["LineParser", "LineGenerator", "decode_line", "generator_from_io", "raw_line"]
