"""Generators composed from other generators.

:class:`InfiniteGenerator`
    Loops one generator forever by restarting it on exhaustion.
:class:`RoundRobinChainGenerator`
    Cycles through its sources in order, one value per source per turn.
:class:`RandomChainGenerator`
    Draws each value from a source picked uniformly at random (with
    replacement) from an injected :class:`random.Random`.

Chains own a slot table of generators.  When a slot is exhausted it is
replaced in place by its ``iter()`` form and retried once.  A source that is
still exhausted right after a restart can never produce anything, so
:class:`~fakenews.utils.errors.EmptySourceError` is raised instead of looping.

Chain limit boundary
--------------------
A chain built with limit ``N`` returns ``has_value=True`` for its first ``N``
values.  The call after that still draws a value from a source but pairs it
with ``has_value=False``; consumers must stop there and drop that value.
``iter()`` on a chain copies the slot table (the source generators themselves
keep their position), resets the budget to ``N`` and the round-robin cursor to
the first slot.

A combinator instance supports a single consumer; ``next()`` mutates its slot
table without locking.
"""

from __future__ import annotations

import random
from abc import abstractmethod
from collections.abc import Iterable

from fakenews.utils.errors import EmptySourceError
from fakenews.utils.logging import get_logger

from .base import Generator, T

log = get_logger(__name__)


class InfiniteGenerator(Generator[T]):
    """Restart the wrapped generator whenever it runs dry."""

    def __init__(self, generator: Generator[T]) -> None:
        self.generator = generator

    def next(self) -> tuple[T | None, bool]:
        value, has_value = self.generator.next()
        if has_value:
            return value, True

        log.debug("restarting exhausted %s", type(self.generator).__name__)
        self.generator = self.generator.iter()
        value, has_value = self.generator.next()
        if not has_value:
            log.warning("%s produced nothing after restart", type(self.generator).__name__)
            raise EmptySourceError(
                f"{type(self.generator).__name__} is empty; cannot loop it forever"
            )
        return value, True

    def iter(self) -> InfiniteGenerator[T]:
        return InfiniteGenerator(self.generator.iter())


class _ChainGenerator(Generator[T]):
    """Shared budget and restart handling for chain combinators."""

    def __init__(self, generators: Iterable[Generator[T]], limit: int) -> None:
        slots = list(generators)
        if not slots:
            raise ValueError("a chain needs at least one generator")
        if limit < 0:
            raise ValueError("limit must be non-negative")
        self.generators: list[Generator[T]] = slots
        self.limit = limit
        self.remaining = limit

    @abstractmethod
    def _select(self) -> int:
        """Return the slot index to draw the next value from."""

    def _advance(self, slot: int) -> None:
        """Hook called after ``slot`` produced a value."""

    def _draw(self, slot: int) -> T | None:
        generator = self.generators[slot]
        value, has_value = generator.next()
        if has_value:
            return value

        log.debug("restarting exhausted slot %d (%s)", slot, type(generator).__name__)
        generator = generator.iter()
        self.generators[slot] = generator
        value, has_value = generator.next()
        if not has_value:
            log.warning("chain slot %d produced nothing after restart", slot)
            raise EmptySourceError(f"chain slot {slot} ({type(generator).__name__}) is empty")
        return value

    def next(self) -> tuple[T | None, bool]:
        slot = self._select()
        value = self._draw(slot)
        self._advance(slot)
        self.remaining -= 1
        return value, self.remaining >= 0


class RoundRobinChainGenerator(_ChainGenerator[T]):
    """Take one value from each source in turn."""

    def __init__(self, generators: Iterable[Generator[T]], limit: int) -> None:
        super().__init__(generators, limit)
        self.current = 0

    def _select(self) -> int:
        return self.current

    def _advance(self, slot: int) -> None:
        self.current = (slot + 1) % len(self.generators)

    def iter(self) -> RoundRobinChainGenerator[T]:
        return RoundRobinChainGenerator(list(self.generators), self.limit)


class RandomChainGenerator(_ChainGenerator[T]):
    """Take each value from a uniformly chosen source."""

    def __init__(
        self,
        generators: Iterable[Generator[T]],
        limit: int,
        *,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(generators, limit)
        self.rng = rng or random.Random()

    def _select(self) -> int:
        return self.rng.randrange(len(self.generators))

    def iter(self) -> RandomChainGenerator[T]:
        return RandomChainGenerator(list(self.generators), self.limit, rng=self.rng)


def infinite(generator: Generator[T]) -> InfiniteGenerator[T]:
    """Wrap ``generator`` so that it restarts forever."""

    return InfiniteGenerator(generator)


def chain_round_robin(limit: int, *generators: Generator[T]) -> RoundRobinChainGenerator[T]:
    """Chain ``generators`` round robin, yielding at most ``limit`` values."""

    return RoundRobinChainGenerator(generators, limit)


def chain_random(
    limit: int,
    *generators: Generator[T],
    rng: random.Random | None = None,
) -> RandomChainGenerator[T]:
    """Chain ``generators`` picking a random source per value, ``limit`` values."""

    return RandomChainGenerator(generators, limit, rng=rng)


__all__ = [
    "InfiniteGenerator",
    "RandomChainGenerator",
    "RoundRobinChainGenerator",
    "chain_random",
    "chain_round_robin",
    "infinite",
]
