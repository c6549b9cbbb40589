"""Tests for the random chain: seeded selection, budget boundary and restarts."""

from __future__ import annotations

import random

import pytest

from fakenews.fake.seed import make_rng
from fakenews.generators import (
    Generator,
    RandomChainGenerator,
    chain_random,
    consume_generator,
    consume_until,
    infinite,
    step_generator,
)
from fakenews.utils.errors import EmptySourceError


class ScriptedRng(random.Random):
    """Random source returning a fixed sequence of slot indexes."""

    def __init__(self, picks: list[int]) -> None:
        super().__init__(0)
        self.picks = list(picks)

    def randrange(self, *args: object, **kwargs: object) -> int:  # type: ignore[override]
        return self.picks.pop(0)


def steps(*values: str) -> Generator[str]:
    return step_generator(*(lambda v=v: v for v in values))


def sources() -> list[Generator[str]]:
    return [infinite(steps("a1", "a2", "a3")), infinite(steps("b1", "b2"))]


def test_yields_limit_values_from_sources() -> None:
    chain = chain_random(20, *sources(), rng=make_rng(1))
    values = consume_until(chain, 20)
    assert len(values) == 20
    assert set(values) <= {"a1", "a2", "a3", "b1", "b2"}


def test_draws_from_every_source() -> None:
    values = consume_generator(chain_random(200, *sources(), rng=make_rng(2)))
    assert any(v.startswith("a") for v in values)
    assert any(v.startswith("b") for v in values)


def test_reproducible_with_seed() -> None:
    first = consume_generator(chain_random(15, *sources(), rng=make_rng(3)))
    second = consume_generator(chain_random(15, *sources(), rng=make_rng(3)))
    assert first == second


def test_selection_follows_rng() -> None:
    chain = chain_random(4, *sources(), rng=ScriptedRng([1, 1, 0, 1, 0]))
    assert consume_generator(chain) == ["b1", "b2", "a1", "b1"]


def test_boundary_call_carries_value_with_false() -> None:
    chain = chain_random(1, steps("a", "b"), rng=make_rng(0))
    assert chain.next() == ("a", True)
    assert chain.next() == ("b", False)


def test_iter_resets_budget_and_keeps_rng() -> None:
    rng = make_rng(4)
    chain = chain_random(5, *sources(), rng=rng)
    consume_generator(chain)
    fresh = chain.iter()
    assert isinstance(fresh, RandomChainGenerator)
    assert fresh.remaining == 5
    assert fresh.rng is rng
    assert len(consume_generator(fresh)) == 5


def test_empty_source_fails_fast() -> None:
    with pytest.raises(EmptySourceError):
        chain_random(3, step_generator(), rng=make_rng(5)).next()


def test_rejects_bad_arguments() -> None:
    with pytest.raises(ValueError):
        chain_random(3)
