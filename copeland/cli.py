"""CLI for the Copeland tally."""

from __future__ import annotations

import enum
import logging
from pathlib import Path
from typing import Annotated

import structlog
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from copeland import __version__
from copeland.config import TallyConfig
from copeland.io import (
    BallotReadError,
    first_ballot_file,
    iter_ballot_files,
    read_ballot_file,
)
from copeland.tally import (
    BallotError,
    Copeland,
    InsufficientAlternativesError,
    ScoreEntry,
    rank_by_score,
)

# Configure structlog
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()

app = typer.Typer(
    name="copeland",
    help="Process files with preference lists and output Copeland's ranking.",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


class RankStyle(str, enum.Enum):
    dense = "dense"
    competition = "competition"


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"copeland v{__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True)],
    )


def _print_line(text: str) -> None:
    console.print(text, markup=False, highlight=False)


def _load_names(config: TallyConfig, paths: list[Path]) -> list[str]:
    names_path = config.names_path or first_ballot_file(paths)
    logger.debug("reading names", file=str(names_path))
    names = read_ballot_file(names_path, normalize_case=config.normalize_case)
    return sorted(set(names))


def _tally(config: TallyConfig, engine: Copeland, paths: list[Path]) -> int:
    """Feed every ballot file to ``engine``; return the number skipped."""
    skipped = 0
    for path in iter_ballot_files(paths):
        ballot = read_ballot_file(path, normalize_case=config.normalize_case)
        try:
            engine.update(ballot)
        except BallotError as e:
            if not config.skip_errors:
                raise e.with_context(f"file {str(path)!r}") from e
            logger.warning("ballot rejected", file=str(path), error=str(e))
            skipped += 1
            continue
        logger.debug("ballot accepted", file=str(path))
    return skipped


def _print_ranking(groups: list[list[ScoreEntry]], rank_style: str) -> None:
    _print_line("Scores:")
    position = 1
    for i, group in enumerate(groups):
        rank = i + 1 if rank_style == RankStyle.dense.value else position
        _print_line(f"\tRank {rank}:")
        for entry in group:
            _print_line(f"\t\t{entry.score:g}\t{entry.name}")
        position += len(group)


@app.command()
def main(
    paths: Annotated[
        list[Path],
        typer.Argument(help="Ballot files or directories of ballot files"),
    ],
    names: Annotated[
        Path | None,
        typer.Option(
            "--names",
            help="File listing the names in the vote. Inferred from the first ballot if omitted",
        ),
    ] = None,
    normalize_case: Annotated[
        bool,
        typer.Option("--normalize-case/--no-normalize-case", help="Normalize case"),
    ] = True,
    score_win: Annotated[
        float, typer.Option("--score-win", help="Score for a win against an opponent")
    ] = 1.0,
    score_tie: Annotated[
        float, typer.Option("--score-tie", help="Score for a tie against an opponent")
    ] = 0.5,
    score_loss: Annotated[
        float, typer.Option("--score-loss", help="Score for a loss against an opponent")
    ] = 0.0,
    skip_errors: Annotated[
        bool,
        typer.Option("--skip-errors", help="Skip ballot errors, but still report them"),
    ] = False,
    rank_style: Annotated[
        RankStyle, typer.Option("--rank-style", help="Rank numbering for tied groups")
    ] = RankStyle.dense,
    verbose: Annotated[bool, typer.Option("--verbose", "-V", help="Verbose output")] = False,
    version: Annotated[
        bool | None,
        typer.Option("--version", callback=version_callback, is_eager=True),
    ] = None,
) -> None:
    """Tally ballot files and print the Copeland ranking.

    Args:
        paths: Ballot files or directories, walked in lexical order.
        names: Name list file.
        normalize_case: Upper-case all names.
        score_win: Weight for a head-to-head win.
        score_tie: Weight for a head-to-head tie.
        score_loss: Weight for a head-to-head loss.
        skip_errors: Report invalid ballots and continue.
        rank_style: Rank numbering for tied groups.
        verbose: Enable debug logging.
        version: Print version and exit.
    """
    _configure_logging(verbose)

    try:
        config = TallyConfig(
            names_path=names,
            normalize_case=normalize_case,
            score_win=score_win,
            score_tie=score_tie,
            score_loss=score_loss,
            skip_errors=skip_errors,
            rank_style=rank_style.value,
        )
    except ValidationError as e:
        logger.error("invalid configuration", error=str(e))
        raise typer.Exit(code=1) from e

    try:
        alternatives = _load_names(config, paths)
    except BallotReadError as e:
        logger.error("unable to read names", error=str(e))
        raise typer.Exit(code=1) from e

    _print_line("Registered names:")
    for name in alternatives:
        _print_line(f"\t{name}")
    _print_line("")

    try:
        engine = Copeland(alternatives)
    except InsufficientAlternativesError as e:
        logger.error("unable to start tally", error=str(e))
        raise typer.Exit(code=1) from e

    try:
        skipped = _tally(config, engine, paths)
    except (BallotReadError, BallotError) as e:
        logger.error("tally failed", error=str(e))
        raise typer.Exit(code=1) from e

    logger.info("tally complete", ballots=engine.ballot_count, skipped=skipped)
    _print_ranking(rank_by_score(engine.score(config.scoring())), config.rank_style)


if __name__ == "__main__":
    app()
