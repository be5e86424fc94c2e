"""Shared command helpers."""

from __future__ import annotations

import dataclasses
import json
from typing import Any, Dict, List, Optional

import typer

from slug_cli.core.config import ConfigError, options_from_config
from slug_cli.core.constants import CASE_CHOICES
from slug_cli.core.models import SlugOptions
from slug_cli.core.random_source import SeededRandomSource
from slug_cli.core.slugify import Slugifier
from slug_cli.core.state import CLIState
from slug_cli.utils.parsing import parse_stop_words


def get_state(ctx: typer.Context) -> CLIState:
    """Extract validated CLI state from Typer context."""
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise typer.Exit(code=2)
    return state


def print_json_payload(state: CLIState, payload: Any) -> None:
    """Print JSON payload with plain-mode fallback for piping."""
    if state.plain_output:
        typer.echo(json.dumps(payload, separators=(",", ":"), ensure_ascii=False))
        return
    state.console.print_json(data=payload)


def validate_case(value: Optional[str]) -> Optional[str]:
    """Typer callback for ``--case``."""
    if value is None:
        return None
    lowered = value.lower()
    if lowered not in CASE_CHOICES:
        raise typer.BadParameter(f"--case must be {'|'.join(CASE_CHOICES)}")
    return lowered


def resolve_options(
    state: CLIState,
    separator: Optional[str] = None,
    stop_words: Optional[List[str]] = None,
    max_length: Optional[int] = None,
    randomness: Optional[bool] = None,
    randomness_length: Optional[int] = None,
    case: Optional[str] = None,
) -> SlugOptions:
    """Layer CLI flags over the ``[slug]`` config table."""
    try:
        base = options_from_config(state.config)
    except ConfigError as exc:
        typer.echo(f"Config error: {exc}", err=True)
        raise typer.Exit(code=2)

    overrides: Dict[str, Any] = {}
    if separator is not None:
        overrides["separator"] = separator
    if stop_words:
        overrides["stop_words"] = base.stop_words | parse_stop_words(stop_words)
    if max_length is not None:
        overrides["max_length"] = max_length
    if randomness is not None:
        overrides["randomness"] = randomness
    if randomness_length is not None:
        overrides["randomness_length"] = randomness_length
    if case is not None:
        overrides["case"] = case

    options = dataclasses.replace(base, **overrides) if overrides else base
    state.log(f"Resolved options: {options.to_dict()}")
    return options


def build_slugifier(seed: Optional[int] = None) -> Slugifier:
    """Return a slugifier, deterministic when ``seed`` is given."""
    if seed is None:
        return Slugifier()
    return Slugifier(random_source=SeededRandomSource(seed))
