"""Core generator contract.

A :class:`Generator` is a restartable, pull-based producer of values.  It
exposes exactly two operations:

``next()``
    Produce one value.  Returns ``(value, has_value)``; when ``has_value`` is
    ``False`` the generator is exhausted and ``value`` is ``None`` (combinators
    may pair a produced value with ``False`` on their limit boundary, see
    :mod:`fakenews.generators.combinators`).  Calling ``next`` may have side
    effects even when nothing is produced, so there is no separate
    "has next" probe.
``iter()``
    Return a fresh generator that starts over from the beginning of its
    source.  The receiver is never mutated and the two instances share no
    exhaustion state, although they may share an underlying resource such as a
    file handle.

Once ``has_value`` is ``False`` callers should treat that instance as done and
obtain a new one through ``iter()``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class Generator(ABC, Generic[T]):
    """Abstract restartable producer of ``T`` values."""

    @abstractmethod
    def next(self) -> tuple[T | None, bool]:
        """Produce the next value as ``(value, has_value)``."""

    @abstractmethod
    def iter(self) -> Generator[T]:
        """Return a fresh generator positioned at the beginning."""

    def __iter__(self) -> Iterator[T]:
        """Yield values from this instance until the first exhaustion signal."""

        while True:
            value, has_value = self.next()
            if not has_value:
                return
            yield value  # type: ignore[misc]


__all__ = ["Generator", "T"]
