"""Field mutation rules.

A rule names one field and knows how to produce a new seed value with that
field filled in.  Rule factories draw their randomness from an explicit
:class:`random.Random` and write through a
:class:`~fakenews.fake.binder.FieldBinder`, so the same seed and random source
always produce the same fake.

Multi-valued rules (:func:`random_generator`, :func:`round_robin_generator`)
chain the given generators with a limit of ``n`` and bind the list of the
first ``n`` values.
"""

from __future__ import annotations

import random
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from fakenews.generators import Generator, chain_random, chain_round_robin, consume_until

from .binder import DEFAULT_BINDER, FieldBinder

Runner = Callable[[Any], Any]


@runtime_checkable
class Rule(Protocol):
    """Protocol implemented by every rule."""

    @property
    def field_name(self) -> str:
        """Name of the field the rule writes."""

        ...

    def run(self, current: Any) -> Any:
        """Return ``current`` with the rule applied.

        Raises :class:`~fakenews.utils.errors.RuleError` on failure.
        """

        ...


@dataclass(slots=True, frozen=True)
class FieldRule:
    """Rule writing one field through ``runner``."""

    field_name: str
    runner: Runner

    def run(self, current: Any) -> Any:
        return self.runner(current)


def new_rule(field_name: str, runner: Runner) -> FieldRule:
    return FieldRule(field_name, runner)


def _value_rule(
    field_name: str, produce: Callable[[], Any], binder: FieldBinder | None
) -> FieldRule:
    bind = binder or DEFAULT_BINDER

    def runner(current: Any) -> Any:
        return bind.set(current, field_name, produce())

    return FieldRule(field_name, runner)


def _chain_slice(chain: Generator[Any], n: int) -> Callable[[], list[Any]]:
    """Return a producer taking the next ``n`` values from ``chain`` per call.

    Each call runs on a fresh budget; the sources keep their position between
    calls.
    """

    current = chain

    def produce() -> list[Any]:
        nonlocal current
        values = consume_until(current, n)
        current = current.iter()
        return values

    return produce


def random_int(
    field_name: str,
    start: int,
    end: int,
    *,
    rng: random.Random | None = None,
    binder: FieldBinder | None = None,
) -> FieldRule:
    """Set ``field_name`` to an integer in ``[start, end]``."""

    if end < start:
        raise ValueError("end must not be smaller than start")
    rng = rng or random.Random()
    return _value_rule(field_name, lambda: rng.randint(start, end), binder)


def random_float(
    field_name: str,
    start: float,
    end: float,
    *,
    rng: random.Random | None = None,
    binder: FieldBinder | None = None,
) -> FieldRule:
    """Set ``field_name`` to a float in ``[start, end)``."""

    rng = rng or random.Random()
    return _value_rule(field_name, lambda: start + rng.random() * (end - start), binder)


def random_pick(
    field_name: str,
    *values: Any,
    rng: random.Random | None = None,
    binder: FieldBinder | None = None,
) -> FieldRule:
    """Set ``field_name`` to one of ``values`` chosen uniformly."""

    if not values:
        raise ValueError("random_pick needs at least one value")
    rng = rng or random.Random()
    return _value_rule(field_name, lambda: rng.choice(values), binder)


def random_generator(
    field_name: str,
    n: int,
    *generators: Generator[Any],
    rng: random.Random | None = None,
    binder: FieldBinder | None = None,
) -> FieldRule:
    """Set ``field_name`` to ``n`` values drawn from randomly chosen generators."""

    chain = chain_random(n, *generators, rng=rng)
    return _value_rule(field_name, _chain_slice(chain, n), binder)


def round_robin_generator(
    field_name: str,
    n: int,
    *generators: Generator[Any],
    binder: FieldBinder | None = None,
) -> FieldRule:
    """Set ``field_name`` to ``n`` values taken round robin from ``generators``."""

    chain = chain_round_robin(n, *generators)
    return _value_rule(field_name, _chain_slice(chain, n), binder)


__all__ = [
    "FieldRule",
    "Rule",
    "Runner",
    "new_rule",
    "random_float",
    "random_generator",
    "random_int",
    "random_pick",
    "round_robin_generator",
]
