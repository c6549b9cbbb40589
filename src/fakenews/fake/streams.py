"""Drivers producing fakes continuously.

:func:`iter_fakes` is a lazy iterator; :func:`infinite_stream` runs the same
loop as a producer feeding a :class:`queue.Queue`, typically from a worker
thread.  Both stop when the given :class:`threading.Event` is set.
"""

from __future__ import annotations

import queue
import threading
from collections.abc import Iterator
from typing import Any

from fakenews.utils.logging import get_logger

from .api import fake
from .rules import Rule

log = get_logger(__name__)


def iter_fakes(
    seed: Any,
    *rules: Rule,
    stop: threading.Event | None = None,
    max_items: int | None = None,
) -> Iterator[Any]:
    """Yield ``fake(seed, *rules)`` until ``stop`` is set or ``max_items`` reached."""

    produced = 0
    while max_items is None or produced < max_items:
        if stop is not None and stop.is_set():
            break
        yield fake(seed, *rules)
        produced += 1


def _put(out: queue.Queue[Any], value: Any, stop: threading.Event, timeout: float) -> bool:
    """Put ``value`` on ``out``, giving up once ``stop`` is set while the queue is full."""

    while True:
        try:
            out.put(value, timeout=timeout)
            return True
        except queue.Full:
            if stop.is_set():
                return False


def infinite_stream(
    seed: Any,
    out: queue.Queue[Any],
    *rules: Rule,
    stop: threading.Event,
    put_timeout: float = 0.1,
) -> int:
    """Push fakes into ``out`` until ``stop`` is set; return the count pushed.

    ``None`` is put on the queue once the loop ends, also when a rule fails;
    the rule error then propagates to the caller.  Every put, the sentinel
    included, is retried every ``put_timeout`` seconds while the queue is
    full, and abandoned once ``stop`` is set.  A consumer that sets ``stop``
    and walks away therefore never keeps the producer alive; the sentinel is
    dropped with a warning in that case.
    """

    produced = 0
    try:
        for value in iter_fakes(seed, *rules, stop=stop):
            if not _put(out, value, stop, put_timeout):
                break
            produced += 1
    finally:
        log.debug("stream stopped after %d values", produced)
        if not _put(out, None, stop, put_timeout):
            log.warning("queue still full after stop; end-of-stream marker dropped")
    return produced


__all__ = ["infinite_stream", "iter_fakes"]
