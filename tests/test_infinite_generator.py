"""Tests for the infinite wrapper: restart on exhaustion and empty sources."""

from __future__ import annotations

import io
import logging

import pytest

from fakenews.generators import (
    InfiniteGenerator,
    consume_until,
    decode_line,
    generator_from_io,
    infinite,
    step_generator,
)
from fakenews.utils.errors import EmptySourceError


def three_lines() -> InfiniteGenerator[str]:
    return infinite(generator_from_io(io.BytesIO(b"1\n2\n3\n"), decode_line()))


def test_wraps_line_source_deterministically() -> None:
    assert consume_until(three_lines(), 7) == ["1", "2", "3", "1", "2", "3", "1"]


def test_wraps_step_source() -> None:
    gen = infinite(step_generator(lambda: "a", lambda: "b"))
    assert consume_until(gen, 5) == ["a", "b", "a", "b", "a"]


def test_empty_line_source_fails_fast() -> None:
    gen = infinite(generator_from_io(io.BytesIO(b""), decode_line()))
    with pytest.raises(EmptySourceError):
        gen.next()


def test_empty_step_source_fails_fast() -> None:
    with pytest.raises(EmptySourceError):
        consume_until(infinite(step_generator()), 3)


def test_parserless_source_counts_as_empty() -> None:
    with pytest.raises(EmptySourceError):
        infinite(generator_from_io(io.BytesIO(b"a\n"), None)).next()


def test_iter_starts_over() -> None:
    gen = infinite(step_generator(lambda: "a", lambda: "b", lambda: "c"))
    consume_until(gen, 2)
    assert consume_until(gen.iter(), 3) == ["a", "b", "c"]


def test_nested_infinite() -> None:
    gen = infinite(infinite(step_generator(lambda: 1, lambda: 2)))
    assert consume_until(gen, 5) == [1, 2, 1, 2, 1]


def test_restart_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="fakenews")
    consume_until(infinite(step_generator(lambda: 1)), 2)
    assert any("restarting exhausted StepGenerator" in r.getMessage() for r in caplog.records)
