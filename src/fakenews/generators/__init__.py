"""Restartable generators and the combinators that compose them."""

from .base import Generator
from .combinators import (
    InfiniteGenerator,
    RandomChainGenerator,
    RoundRobinChainGenerator,
    chain_random,
    chain_round_robin,
    infinite,
)
from .consume import consume_generator, consume_until
from .lines import LineGenerator, LineParser, decode_line, generator_from_io, raw_line
from .steps import Step, StepGenerator, step_generator

__all__ = [
    "Generator",
    "InfiniteGenerator",
    "LineGenerator",
    "LineParser",
    "RandomChainGenerator",
    "RoundRobinChainGenerator",
    "Step",
    "StepGenerator",
    "chain_random",
    "chain_round_robin",
    "consume_generator",
    "consume_until",
    "decode_line",
    "generator_from_io",
    "infinite",
    "raw_line",
    "step_generator",
]
