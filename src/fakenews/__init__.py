"""fakenews: synthetic values from rules and composable generators.

Build primitive generators (:func:`generator_from_io`, :func:`step_generator`),
compose them (:func:`infinite`, :func:`chain_round_robin`,
:func:`chain_random`) and drain them with :func:`consume_generator` or
:func:`consume_until`.  Rules (:mod:`fakenews.fake`) fill fields of a seed
record, optionally from such generators.
"""

from .fake import (
    AttributeBinder,
    FieldBinder,
    FieldRule,
    Rule,
    fake,
    infinite_stream,
    iter_fakes,
    make_rng,
    new_rule,
    random_float,
    random_generator,
    random_int,
    random_pick,
    round_robin_generator,
)
from .generators import (
    Generator,
    InfiniteGenerator,
    LineGenerator,
    RandomChainGenerator,
    RoundRobinChainGenerator,
    StepGenerator,
    chain_random,
    chain_round_robin,
    consume_generator,
    consume_until,
    decode_line,
    generator_from_io,
    infinite,
    raw_line,
    step_generator,
)
from .io import LineReaderSeeker
from .utils.errors import (
    BindError,
    EmptySourceError,
    FakenewsError,
    GeneratorError,
    LineOutOfRangeError,
    LineSeekError,
    NoLinesError,
    RuleError,
    SourceReadError,
    UnsupportedWhenceError,
)

__version__ = "0.1.0"

__all__ = [
    "AttributeBinder",
    "BindError",
    "EmptySourceError",
    "FakenewsError",
    "FieldBinder",
    "FieldRule",
    "Generator",
    "GeneratorError",
    "InfiniteGenerator",
    "LineGenerator",
    "LineOutOfRangeError",
    "LineReaderSeeker",
    "LineSeekError",
    "NoLinesError",
    "RandomChainGenerator",
    "RoundRobinChainGenerator",
    "Rule",
    "RuleError",
    "SourceReadError",
    "StepGenerator",
    "UnsupportedWhenceError",
    "chain_random",
    "chain_round_robin",
    "consume_generator",
    "consume_until",
    "decode_line",
    "fake",
    "generator_from_io",
    "infinite",
    "infinite_stream",
    "iter_fakes",
    "make_rng",
    "new_rule",
    "random_float",
    "random_generator",
    "random_int",
    "random_pick",
    "raw_line",
    "round_robin_generator",
    "step_generator",
]
