"""Single slug generation command."""

from __future__ import annotations

from typing import List, Optional

import typer

from slug_cli.commands.common import (
    build_slugifier,
    get_state,
    print_json_payload,
    resolve_options,
    validate_case,
)


def make_command(
    ctx: typer.Context,
    text: List[str] = typer.Argument(..., help="Text to slugify (words are joined with spaces)"),
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
    seed: Optional[int] = typer.Option(None, help="Seed for a reproducible random suffix"),
) -> None:
    """Generate a slug from TEXT."""
    state = get_state(ctx)
    source = " ".join(text)

    options = resolve_options(
        state,
        separator=separator,
        stop_words=stop_words,
        max_length=max_length,
        randomness=randomness,
        randomness_length=randomness_length,
        case=case,
    )
    slug = build_slugifier(seed)(source, options)
    state.log(f"{len(source)} input characters -> {len(slug)} slug characters")

    if state.json_output:
        print_json_payload(state, {"input": source, "slug": slug, "options": options.to_dict()})
        return

    if state.plain_output:
        typer.echo(slug)
        return

    state.console.print(slug, markup=False, highlight=False, soft_wrap=True)
