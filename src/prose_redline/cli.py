"""Command-line interface for prose-redline.

Provides commands for diffing essay revisions and applying or rendering
reviewer edits from the terminal.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from . import __version__
from .constants import DIFF_ALGORITHM_WINDOW, DIFF_WINDOW
from .criticmarkup import diff_to_criticmarkup, edits_to_criticmarkup
from .diff import compute_diff
from .edit_file import load_corrections, load_edit_file
from .edits import apply_edits, find_overlaps, stale_corrections
from .rendering import render_diff, render_with_corrections, render_with_edits
from .results import diff_stats

app = typer.Typer(
    name="prose-redline",
    help="Compare essay revisions and apply reviewer corrections from the command line.",
    no_args_is_help=True,
)

DIFF_FORMATS = ("criticmarkup", "html", "json", "stats")
RENDER_MODES = ("edits", "corrections", "criticmarkup")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"prose-redline version {__version__}")
        raise typer.Exit()


def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _emit(content: str, output: Path | None, action: str) -> None:
    """Write content to a file, or to stdout when no output path is given."""
    if output is None:
        typer.echo(content)
        return
    output.write_text(content, encoding="utf-8")
    typer.echo(f"{action} and saved to {output}")


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Compare essay revisions and apply reviewer corrections from the command line."""
    pass


@app.command()
def diff(
    original: Annotated[Path, typer.Argument(help="Path to the original text file")],
    modified: Annotated[Path, typer.Argument(help="Path to the revised text file")],
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: criticmarkup, html, json or stats"),
    ] = "criticmarkup",
    window: Annotated[
        int, typer.Option("--window", "-w", help="Lookahead window in tokens")
    ] = DIFF_WINDOW,
    algorithm: Annotated[
        str, typer.Option("--algorithm", "-a", help="Diff algorithm: window or sequence")
    ] = DIFF_ALGORITHM_WINDOW,
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Output file path")] = None,
) -> None:
    """Show a word-level diff between two versions of a text."""
    try:
        if output_format not in DIFF_FORMATS:
            raise ValueError(
                f"Unknown format {output_format!r}; expected one of {', '.join(DIFF_FORMATS)}"
            )

        segments = compute_diff(
            _read_text(original), _read_text(modified), window=window, algorithm=algorithm
        )

        if output_format == "html":
            content = render_diff(segments)
        elif output_format == "json":
            content = json.dumps([s.to_dict() for s in segments], indent=2, ensure_ascii=False)
        elif output_format == "stats":
            content = str(diff_stats(segments))
        else:
            content = diff_to_criticmarkup(segments)

        _emit(content, output, "Computed diff")
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command()
def apply(
    text: Annotated[Path, typer.Argument(help="Path to the original text file")],
    edits: Annotated[Path, typer.Argument(help="Path to YAML/JSON edits file")],
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Output file path")] = None,
    strict: Annotated[
        bool, typer.Option("--strict", help="Reject overlapping edits instead of applying them")
    ] = False,
) -> None:
    """Apply edits from a YAML or JSON file and print the corrected text."""
    try:
        original = _read_text(text)
        edit_list = load_edit_file(edits)
        corrected = apply_edits(original, edit_list, check_overlaps=strict)
        _emit(corrected, output, f"Applied {len(edit_list)} edits")
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command()
def render(
    text: Annotated[Path, typer.Argument(help="Path to the original text file")],
    edits: Annotated[Path, typer.Argument(help="Path to YAML/JSON edits file")],
    mode: Annotated[
        str,
        typer.Option("--mode", "-m", help="View: edits, corrections or criticmarkup"),
    ] = "edits",
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Output file path")] = None,
) -> None:
    """Render the original text annotated with edits."""
    try:
        if mode not in RENDER_MODES:
            raise ValueError(f"Unknown mode {mode!r}; expected one of {', '.join(RENDER_MODES)}")

        original = _read_text(text)
        if mode == "corrections":
            content = render_with_corrections(original, load_corrections(edits, original))
        elif mode == "criticmarkup":
            content = edits_to_criticmarkup(original, load_edit_file(edits))
        else:
            content = render_with_edits(original, load_edit_file(edits))

        _emit(content, output, "Rendered edits")
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command()
def check(
    text: Annotated[Path, typer.Argument(help="Path to the original text file")],
    edits: Annotated[Path, typer.Argument(help="Path to YAML/JSON edits file")],
) -> None:
    """Report edits that are out of range, overlapping or stale."""
    try:
        original = _read_text(text)
        corrections = load_corrections(edits, original)
        out_of_range = [c for c in corrections if c.end > len(original)]
        overlaps = find_overlaps(corrections)
        stale = [c for c in stale_corrections(original, corrections) if c not in out_of_range]
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Edits: {len(corrections)}")
    for correction in out_of_range:
        typer.echo(
            f"  Out of range: {correction.id} {correction.span} "
            f"(text length {len(original)})"
        )
    for first, second in overlaps:
        typer.echo(f"  Overlap: {first.id} {first.span} and {second.id} {second.span}")
    for correction in stale:
        typer.echo(f"  Stale: {correction.id} expected {correction.original_text!r}")

    problems = len(out_of_range) + len(overlaps) + len(stale)
    if problems:
        typer.echo(f"Found {problems} problem{'s' if problems != 1 else ''}", err=True)
        raise typer.Exit(1)
    typer.echo("No problems found")


if __name__ == "__main__":
    app()
