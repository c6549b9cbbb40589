"""Apply rules to a seed value."""

from __future__ import annotations

from typing import Any

from fakenews.utils.logging import get_logger

from .rules import Rule

log = get_logger(__name__)


def fake(seed: Any, *rules: Rule) -> Any:
    """Return ``seed`` with every rule applied in order.

    The seed itself is left untouched when rules write through the default
    binder.  The first failing rule aborts the run and its error propagates.
    """

    value = seed
    for rule in rules:
        log.debug("applying rule for field %r", rule.field_name)
        value = rule.run(value)
    return value


__all__ = ["fake"]
