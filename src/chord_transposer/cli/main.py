"""Main CLI entry point for Chord Transposer."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from chord_transposer import __version__
from chord_transposer.config import TransposerConfig, load_config
from chord_transposer.errors import ChordError
from chord_transposer.harmony import EnharmonicPair, Transposer

logger = logging.getLogger(__name__)


# ANSI color codes for terminal output
class Colors:
    """ANSI color codes for styled terminal output."""

    CYAN = "\033[96m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    END = "\033[0m"


def color(text: str, *codes: str) -> str:
    """Apply color codes to text."""
    return "".join(codes) + str(text) + Colors.END


@click.group()
@click.version_option(version=__version__, prog_name="chord-transposer")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output.")
@click.option(
    "-c",
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to a JSON configuration file.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config: Path | None) -> None:
    """Chord Transposer - Shift chord symbols by a number of semitones."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = load_config(config)
        chromatic = settings.build_table()
    except ValueError as e:
        click.echo(f"Error loading config: {e}", err=True)
        raise SystemExit(1)

    ctx.ensure_object(dict)
    ctx.obj["config"] = settings
    ctx.obj["transposer"] = Transposer(chromatic)


def _read_lines(input_file: Path) -> list[str]:
    return input_file.read_text(encoding="utf-8").splitlines()


@cli.command()
@click.argument("chords", nargs=-1)
@click.option(
    "-i",
    "--interval",
    type=int,
    default=None,
    help="Semitones to transpose (negative moves down).",
)
@click.option(
    "--file",
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Read chord lines from a file instead of arguments.",
)
@click.option("--show-original", is_flag=True, help="Print the original chords too.")
@click.option("-f", "--format", "output_format", type=click.Choice(["text", "json"]), default="text")
@click.pass_context
def transpose(
    ctx: click.Context,
    chords: tuple[str, ...],
    interval: int | None,
    input_file: Path | None,
    show_original: bool,
    output_format: str,
) -> None:
    """Transpose chord symbols by a number of semitones.

    CHORDS are joined with single spaces and treated as one sequence.
    Sharps are used when moving up, flats when moving down.

    Examples:

        chord-transposer transpose C G Am F --interval 7
        chord-transposer transpose --file song.txt --interval=-2
    """
    settings: TransposerConfig = ctx.obj["config"]
    transposer: Transposer = ctx.obj["transposer"]

    if show_original and output_format == "json":
        click.echo("Error: --show-original applies to text output only", err=True)
        raise SystemExit(1)

    if interval is None:
        interval = settings.default_interval

    if input_file is not None:
        if chords:
            click.echo("Error: give chords as arguments or --file, not both", err=True)
            raise SystemExit(1)
        lines = _read_lines(input_file)
    elif chords:
        lines = [" ".join(chords)]
    else:
        click.echo("Error: no chords given", err=True)
        raise SystemExit(1)

    logger.debug(f"Transposing {len(lines)} line(s) by {interval} semitone(s)")

    results: list[str] = []
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            results.append(line)
            continue
        try:
            results.append(transposer.transpose_chords(line, interval))
        except ChordError as e:
            location = f" (line {line_number})" if input_file is not None else ""
            click.echo(f"Error{location}: {e}", err=True)
            raise SystemExit(1)

    if output_format == "json":
        data = {
            "interval": interval,
            "original": lines,
            "transposed": results,
        }
        click.echo(json.dumps(data, indent=2))
        return

    for original, transposed in zip(lines, results):
        if show_original:
            click.echo(f"{color('Original Chords:', Colors.DIM)} {original}")
            click.echo(f"{color('Transposed Chords:', Colors.BOLD)} {transposed}")
        else:
            click.echo(transposed)


@cli.command()
@click.option("-f", "--format", "output_format", type=click.Choice(["text", "json"]), default="text")
@click.pass_context
def table(ctx: click.Context, output_format: str) -> None:
    """Show the chromatic table used for transposition."""
    transposer: Transposer = ctx.obj["transposer"]
    chromatic = transposer.table

    if output_format == "json":
        data = [
            {"index": index, "spellings": list(entry.spellings)}
            for index, entry in enumerate(chromatic)
        ]
        click.echo(json.dumps(data, indent=2))
        return

    for index, (entry, text) in enumerate(zip(chromatic, chromatic.raw_entries())):
        if isinstance(entry, EnharmonicPair):
            text = color(text, Colors.CYAN)
        click.echo(f"{index:>2}  {text}")
