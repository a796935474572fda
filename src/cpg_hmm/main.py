"""
CLI entry point — prints a synthetic DNA sequence drawn from the
two-state CpG-island HMM.
"""

from pathlib import Path
from typing import Optional

import typer

from hmm_core import HMMError
from cpg_hmm.config import get_config
from cpg_hmm.logger import configure_logging, get_logger
from cpg_hmm.params import (
    default_parameters,
    gc_content,
    load_parameters,
    nucleotide_string,
    state_runs,
)

logger = get_logger("main")

# Largest seed numpy.random.RandomState accepts
MAX_SEED = 2**32 - 1

app = typer.Typer(
    name="cpg-hmm",
    help="Generate a synthetic DNA sequence from a two-state Hidden Markov Model.",
    add_completion=False,
)


def format_position(index: int, state: str, symbol: str) -> str:
    return f"Position {index}, State {state}, Nucleotide = {symbol}"


def format_sequence(sequence) -> list:
    """One printable line per position, numbered from 1."""
    return [
        format_position(i, state, symbol)
        for i, (state, symbol) in enumerate(sequence, start=1)
    ]


def _print_summary(sequence) -> None:
    typer.echo("=" * 70)
    typer.echo("SUMMARY")
    typer.echo("=" * 70)
    typer.echo(f"  Sequence:   {nucleotide_string(sequence)}")
    typer.echo(f"  GC content: {gc_content(sequence):.1%}")
    typer.echo("  Hidden state runs:")
    for state, run in state_runs(sequence):
        typer.echo(f"    {state:>8s} x {run}")
    typer.echo("=" * 70)


@app.command()
def main(
    length: Optional[int] = typer.Option(
        None, "--length", "-n", help="Number of positions [default: from config]."
    ),
    seed: Optional[int] = typer.Option(
        None,
        "--seed",
        "-s",
        min=0,
        max=MAX_SEED,
        help="Random seed for a reproducible sequence.",
    ),
    params: Optional[Path] = typer.Option(
        None,
        "--params",
        "-p",
        exists=True,
        dir_okay=False,
        help="JSON table of states, symbols and probabilities.",
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="DEBUG, INFO, WARNING or ERROR."
    ),
    summary: bool = typer.Option(
        False, "--summary/--no-summary", help="Print GC content and state runs."
    ),
):
    """Generate one sequence and print it position by position."""
    try:
        configure_logging(log_level)
    except ValueError as e:
        if log_level is not None:
            raise typer.BadParameter(str(e), param_hint="--log-level")
        typer.echo(f"Error: invalid logging level in configuration: {e}", err=True)
        raise typer.Exit(code=1)

    if length is None:
        length = get_config("generation", "length")
    if seed is None:
        seed = get_config("generation", "seed")

    try:
        if params is not None:
            logger.info(f"Loading parameters from {params}")
            model = load_parameters(params)
        else:
            model = default_parameters()
        sequence = model.generator().sample(length, random_state=seed)
    except HMMError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    logger.info(f"Generated {len(sequence)} positions (seed={seed})")
    for line in format_sequence(sequence):
        typer.echo(line)

    if summary:
        _print_summary(sequence)


if __name__ == "__main__":
    app()
