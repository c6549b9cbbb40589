"""Drive generators to completion or up to a limit."""

from __future__ import annotations

from .base import Generator, T


def consume_generator(generator: Generator[T]) -> list[T]:
    """Collect values until ``generator`` first reports exhaustion."""

    values: list[T] = []
    while True:
        value, has_value = generator.next()
        if not has_value:
            break
        values.append(value)  # type: ignore[arg-type]
    return values


def consume_until(generator: Generator[T], limit: int) -> list[T]:
    """Collect at most ``limit`` values, stopping early on exhaustion.

    ``next()`` is called no more than ``limit`` times.
    """

    values: list[T] = []
    while len(values) < limit:
        value, has_value = generator.next()
        if not has_value:
            break
        values.append(value)  # type: ignore[arg-type]
    return values


__all__ = ["consume_generator", "consume_until"]
