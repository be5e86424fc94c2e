"""Configuration file commands."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from slug_cli.commands.common import get_state, print_json_payload
from slug_cli.core.config import DEFAULT_CONFIG, save_config

app = typer.Typer(help="Inspect or create the configuration file")


@app.command("show")
def show_command(ctx: typer.Context) -> None:
    """Print the effective configuration."""
    state = get_state(ctx)
    payload = {"path": str(state.config_path), "exists": state.config_path.exists(), "config": state.config}

    if state.json_output:
        print_json_payload(state, payload)
        return

    if state.plain_output:
        typer.echo(f"path\t{payload['path']}")
        for table, values in state.config.items():
            if not isinstance(values, dict):
                typer.echo(f"{table}\t{values}")
                continue
            for key, value in values.items():
                typer.echo(f"{table}.{key}\t{value}")
        return

    suffix = "" if payload["exists"] else " (not found, using defaults)"
    state.console.print(f"Config file: {payload['path']}{suffix}", markup=False)
    state.console.print_json(data=state.config)


@app.command("init")
def init_command(
    ctx: typer.Context,
    path: Optional[Path] = typer.Option(None, help="Where to write the file (defaults to --config path)"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
) -> None:
    """Write a default configuration file."""
    state = get_state(ctx)
    target = (path or state.config_path).expanduser().resolve()

    if target.exists() and not force:
        message = f"Config file already exists: {target} (use --force to overwrite)"
        if state.json_output:
            print_json_payload(state, {"status": "error", "message": message})
        else:
            typer.echo(message)
        raise typer.Exit(code=1)

    written = save_config(DEFAULT_CONFIG, target)
    state.log(f"Wrote default config to {written}")

    if state.json_output:
        print_json_payload(state, {"status": "created", "path": str(written)})
    elif state.plain_output:
        typer.echo("status\tcreated")
        typer.echo(f"path\t{written}")
    else:
        state.console.print(f"Created config file {written}", markup=False)
