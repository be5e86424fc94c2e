"""Batch slug generation from files or stdin."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Dict, List, Optional

import typer
import yaml
from rich.table import Table
from rich.text import Text

from slug_cli.commands.common import (
    build_slugifier,
    get_state,
    print_json_payload,
    resolve_options,
    validate_case,
)
from slug_cli.core.config import ConfigError, resolve_output_format, resolve_output_path
from slug_cli.exporters.slug_export import write_rows
from slug_cli.utils.parsing import load_text_input


def batch_command(
    ctx: typer.Context,
    file: Optional[Path] = typer.Option(None, help="JSON/YAML list or text file (one entry per line)"),
    stdin: bool = typer.Option(False, "--stdin", help="Read texts from stdin"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write results to this file"),
    output_format: Optional[str] = typer.Option(None, "--format", help="Output file format: json|csv"),
    separator: Optional[str] = typer.Option(None, "--separator", "-s", help="Delimiter between tokens"),
    stop_words: Optional[List[str]] = typer.Option(
        None,
        "--stop-words",
        help="Comma-separated words to drop (repeatable)",
    ),
    max_length: Optional[int] = typer.Option(None, min=0, help="Maximum slug length, cut at a word boundary"),
    randomness: Optional[bool] = typer.Option(
        None,
        "--random/--no-random",
        help="Append a random suffix (overrides config)",
    ),
    randomness_length: Optional[int] = typer.Option(None, "--random-length", min=0, help="Random suffix length"),
    case: Optional[str] = typer.Option(None, help="Output case: lower|upper|same", callback=validate_case),
    seed: Optional[int] = typer.Option(None, help="Seed for reproducible random suffixes"),
) -> None:
    """Slugify many texts at once."""
    state = get_state(ctx)

    if file is not None and stdin:
        raise typer.BadParameter("Use either --file or --stdin, not both")

    stdin_text = sys.stdin.read() if stdin else ""
    try:
        texts = load_text_input(file_path=file, read_stdin=stdin, stdin_text=stdin_text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise typer.BadParameter(f"Could not parse input: {exc}") from exc
    except OSError as exc:
        raise typer.BadParameter(f"Could not read input file: {exc}") from exc

    if not texts:
        raise typer.BadParameter("Provide --file or --stdin with at least one text")

    try:
        fmt = resolve_output_format(state.config, explicit=output_format)
        out_path = resolve_output_path(state.config, explicit=output)
    except ConfigError as exc:
        raise typer.BadParameter(str(exc)) from exc

    options = resolve_options(
        state,
        separator=separator,
        stop_words=stop_words,
        max_length=max_length,
        randomness=randomness,
        randomness_length=randomness_length,
        case=case,
    )
    slugifier = build_slugifier(seed)
    rows: List[Dict[str, str]] = [{"input": text, "slug": slugifier(text, options)} for text in texts]
    state.log(f"Slugified {len(rows)} texts")

    if out_path is not None:
        write_rows(out_path, rows, fmt)
        state.log(f"Wrote {fmt} to {out_path}")
        result = {"status": "exported", "format": fmt, "path": str(out_path), "count": len(rows)}
        if state.json_output:
            print_json_payload(state, result)
        elif state.plain_output:
            for key in ("status", "format", "path", "count"):
                typer.echo(f"{key}\t{result[key]}")
        else:
            state.console.print(f"Exported {len(rows)} slugs as {fmt} to {out_path}", markup=False)
        return

    if state.json_output:
        print_json_payload(state, rows)
        return

    if state.plain_output:
        for row in rows:
            typer.echo(f"{row['input']}\t{row['slug']}")
        return

    table = Table(title=f"{len(rows)} slugs")
    table.add_column("Input", overflow="fold")
    table.add_column("Slug", overflow="fold")
    for row in rows:
        table.add_row(Text(row["input"]), Text(row["slug"]))
    state.console.print(table)
