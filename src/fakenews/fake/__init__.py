"""Fake value construction: rules, field binding, seeding and streams."""

from .api import fake
from .binder import DEFAULT_BINDER, AttributeBinder, FieldBinder
from .rules import (
    FieldRule,
    Rule,
    new_rule,
    random_float,
    random_generator,
    random_int,
    random_pick,
    round_robin_generator,
)
from .seed import derive_seed, make_rng, rng_from_config
from .streams import infinite_stream, iter_fakes

__all__ = [
    "AttributeBinder",
    "DEFAULT_BINDER",
    "FieldBinder",
    "FieldRule",
    "Rule",
    "derive_seed",
    "fake",
    "infinite_stream",
    "iter_fakes",
    "make_rng",
    "new_rule",
    "random_float",
    "random_generator",
    "random_int",
    "random_pick",
    "rng_from_config",
    "round_robin_generator",
]
