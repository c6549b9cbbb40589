"""Round-robin chaining.

A chain with limit ``N`` delivers ``N`` values with ``has_value=True``.  The
next call still produces a value but pairs it with ``has_value=False``; the
consumers drop that value.
"""

from __future__ import annotations

import io

import pytest

from fakenews.generators import (
    Generator,
    RoundRobinChainGenerator,
    chain_round_robin,
    consume_generator,
    consume_until,
    decode_line,
    generator_from_io,
    infinite,
    step_generator,
)
from fakenews.utils.errors import EmptySourceError


def steps(*values: str) -> Generator[str]:
    return step_generator(*(lambda v=v: v for v in values))


def test_cycles_sources_in_order() -> None:
    chain = chain_round_robin(
        7,
        infinite(steps("a1", "a2")),
        infinite(steps("b1")),
        infinite(steps("c1", "c2", "c3")),
    )
    assert consume_until(chain, 7) == ["a1", "b1", "c1", "a2", "b1", "c2", "a1"]


def test_exactly_limit_values() -> None:
    chain = chain_round_robin(5, infinite(steps("x")), infinite(steps("y")))
    assert consume_generator(chain) == ["x", "y", "x", "y", "x"]


def test_boundary_call_carries_value_with_false() -> None:
    chain = chain_round_robin(2, infinite(steps("a", "b", "c")))
    assert chain.next() == ("a", True)
    assert chain.next() == ("b", True)
    assert chain.next() == ("c", False)


def test_zero_limit() -> None:
    chain = chain_round_robin(0, steps("a"))
    assert chain.next() == ("a", False)
    assert consume_generator(chain_round_robin(0, steps("a"))) == []


def test_exhausted_slots_restart_in_place() -> None:
    chain = chain_round_robin(5, steps("a", "b"))
    assert consume_generator(chain) == ["a", "b", "a", "b", "a"]


def test_line_sources_interleave_and_wrap() -> None:
    first = generator_from_io(io.BytesIO(b"1\n2\n3\n"), decode_line())
    second = generator_from_io(io.BytesIO(b"x\ny\n"), decode_line())
    chain = chain_round_robin(8, first, second)
    assert consume_until(chain, 8) == ["1", "x", "2", "y", "3", "x", "1", "y"]


def test_iter_resets_budget_and_cursor_not_sources() -> None:
    numbers = steps("1", "2", "3", "4", "5")
    letters = steps("a", "b", "c", "d")
    chain = chain_round_robin(3, numbers, letters)
    assert consume_until(chain, 3) == ["1", "a", "2"]
    assert consume_until(chain.iter(), 3) == ["3", "b", "4"]


def test_iter_copies_slot_table() -> None:
    chain = chain_round_robin(10, steps("a"))
    chain.next()
    fresh = chain.iter()
    chain.next()
    assert isinstance(fresh, RoundRobinChainGenerator)
    assert fresh.generators[0] is not chain.generators[0]
    assert fresh.remaining == 10
    assert fresh.current == 0


def test_empty_source_fails_fast() -> None:
    chain = chain_round_robin(3, steps("a"), step_generator())
    assert chain.next() == ("a", True)
    with pytest.raises(EmptySourceError):
        chain.next()


def test_rejects_bad_arguments() -> None:
    with pytest.raises(ValueError):
        chain_round_robin(3)
    with pytest.raises(ValueError):
        chain_round_robin(-1, steps("a"))
