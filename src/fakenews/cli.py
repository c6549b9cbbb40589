"""Typer-based command line interface for line generators.

The commands wrap files in line generators, optionally loop or chain them and
print the produced lines, one per output line.

Exit codes
----------
0 success
3 I/O error (missing file, unreadable or undecodable source)
4 configuration error
5 generator error (empty source, no lines to pick from)
"""

from __future__ import annotations

import contextlib
import logging
import os
import sys
from collections.abc import Iterator
from enum import Enum
from pathlib import Path
from typing import NoReturn, Optional

import typer
import yaml
from pydantic import ValidationError

from .config import ConfigModel, load_config
from .fake.seed import make_rng
from .generators import (
    Generator,
    chain_random,
    chain_round_robin,
    consume_generator,
    consume_until,
    decode_line,
    generator_from_io,
    infinite,
)
from .io import LineReaderSeeker
from .utils.errors import EmptySourceError, NoLinesError, SourceReadError
from .utils.logging import configure_logging, get_logger

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")

log = get_logger("cli")

app = typer.Typer(
    name="fakenews",
    help="Line generator utilities. Use 'fakenews lines' to print lines of a file.",
)


class ChainMode(str, Enum):
    round_robin = "round-robin"
    random = "random"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _load(config_path: Path | None, verbose: bool) -> ConfigModel:
    """Load configuration and set up logging, exiting with 4 on failure."""

    try:
        cfg = load_config(config_path)
    except (ValidationError, ValueError, OSError, yaml.YAMLError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])
    configure_logging(logging.DEBUG if verbose else cfg.logging.level, cfg.logging.format)
    return cfg


@contextlib.contextmanager
def _guard() -> Iterator[None]:
    """Translate generator and I/O failures into exit codes."""

    try:
        yield
    except (EmptySourceError, NoLinesError) as exc:
        _safe_exit(5, str(exc))
    except (SourceReadError, OSError, UnicodeDecodeError) as exc:
        _safe_exit(3, str(exc))


def _emit(values: list[str]) -> None:
    for value in values:
        typer.echo(value)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.callback()
def main() -> None:
    """Entry point for the fakenews command group."""
    pass


@app.command()
def lines(
    path: Path = typer.Argument(..., help="File to read lines from"),  # noqa: B008
    limit: Optional[int] = typer.Option(  # noqa: B008
        None, "--limit", "-n", min=0, help="Maximum number of lines to print"
    ),
    loop: bool = typer.Option(  # noqa: B008
        False, "--infinite", help="Restart from the top when the file runs out"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Enable debug logging"
    ),
) -> None:
    """Print the lines of ``path``, optionally looping forever up to ``--limit``."""

    cfg = _load(config_path, verbose)
    with _guard(), path.open("rb") as source:
        parser = decode_line(cfg.generators.encoding)
        generator: Generator[str] = generator_from_io(source, parser)
        if loop:
            generator = infinite(generator)
            if limit is None:
                limit = cfg.generators.default_limit
        values = consume_generator(generator) if limit is None else consume_until(generator, limit)
    log.info("printed %d lines from %s", len(values), path)
    _emit(values)


@app.command("random-line")
def random_line(
    path: Path = typer.Argument(..., help="File to pick a line from"),  # noqa: B008
    seed: Optional[int] = typer.Option(  # noqa: B008
        None, "--seed", help="Seed for reproducible picks"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Enable debug logging"
    ),
) -> None:
    """Print one uniformly chosen line of ``path``."""

    cfg = _load(config_path, verbose)
    rng = make_rng(cfg.seed.value if seed is None else seed, "cli.random-line")
    with _guard(), path.open("rb") as source:
        line = LineReaderSeeker(source, encoding=cfg.generators.encoding).random_line(rng)
    typer.echo(line)


@app.command()
def chain(
    paths: list[Path] = typer.Argument(..., help="Files to chain"),  # noqa: B008
    mode: ChainMode = typer.Option(  # noqa: B008
        ChainMode.round_robin, "--mode", help="How to pick the next file"
    ),
    limit: Optional[int] = typer.Option(  # noqa: B008
        None, "--limit", "-n", min=0, help="Number of lines to print"
    ),
    seed: Optional[int] = typer.Option(  # noqa: B008
        None, "--seed", help="Seed for random mode"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Enable debug logging"
    ),
) -> None:
    """Interleave the lines of ``paths``, looping each file as needed."""

    cfg = _load(config_path, verbose)
    count = cfg.generators.default_limit if limit is None else limit
    parser = decode_line(cfg.generators.encoding)
    with _guard(), contextlib.ExitStack() as stack:
        sources = [
            infinite(generator_from_io(stack.enter_context(p.open("rb")), parser)) for p in paths
        ]
        if mode is ChainMode.random:
            rng = make_rng(cfg.seed.value if seed is None else seed, "cli.chain")
            chained: Generator[str] = chain_random(count, *sources, rng=rng)
        else:
            chained = chain_round_robin(count, *sources)
        values = consume_until(chained, count)
    log.info("printed %d chained lines from %d files", len(values), len(paths))
    _emit(values)


__all__ = ["app"]
