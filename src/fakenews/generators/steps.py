"""Generator over an ordered sequence of zero-argument producers."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .base import Generator, T

Step = Callable[[], T]


class StepGenerator(Generator[T]):
    """Call each step once, in order.

    A generator holding ``L`` steps yields exactly ``L`` values before
    reporting exhaustion.  Steps are stored as a tuple and never mutated;
    :meth:`add` returns a new generator.
    """

    def __init__(self, steps: Iterable[Step[T]] = (), *, current: int = 0) -> None:
        self.steps: tuple[Step[T], ...] = tuple(steps)
        self.current = current

    def __len__(self) -> int:
        return len(self.steps)

    def next(self) -> tuple[T | None, bool]:
        if self.current >= len(self.steps):
            return None, False
        value = self.steps[self.current]()
        self.current += 1
        return value, True

    def iter(self) -> StepGenerator[T]:
        return StepGenerator(self.steps)

    def add(self, step: Step[T]) -> StepGenerator[T]:
        """Return a copy with ``step`` appended, keeping the current index."""

        return StepGenerator((*self.steps, step), current=self.current)


def step_generator(*steps: Step[T]) -> StepGenerator[T]:
    """Build a :class:`StepGenerator` from ``steps``."""

    return StepGenerator(steps)


__all__ = ["Step", "StepGenerator", "step_generator"]
