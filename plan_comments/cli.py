"""Typer CLI for rendering command outcomes as comment markdown."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from plan_comments.lock_urls import build_lock_url_builder
from plan_comments.renderer import MarkdownRenderer
from plan_comments.schema import COMMAND_OUTCOME_ADAPTER, CommandName
from plan_comments.settings import SettingsError, load_settings

logger = logging.getLogger(__name__)

app = typer.Typer(help="Render plan/apply outcomes as pull request comment markdown.")


@app.callback()
def main() -> None:
    """Render plan/apply outcomes as pull request comment markdown."""


@app.command("render")
def render_command(
    input_path: Annotated[
        Path, typer.Option("--input", help="JSON file holding the command outcome.")
    ],
    command: Annotated[
        CommandName, typer.Option(help="Command that produced the outcome.")
    ] = CommandName.PLAN,
    log_file: Annotated[
        Path | None, typer.Option(help="File with the raw command log.")
    ] = None,
    verbose: Annotated[
        bool | None,
        typer.Option(
            "--verbose/--no-verbose",
            help="Append the collapsible log section. Defaults to PLAN_COMMENTS_VERBOSE.",
        ),
    ] = None,
    base_url: Annotated[
        str | None, typer.Option(help="Server URL used for discard-plan links.")
    ] = None,
    debug: Annotated[bool, typer.Option(help="Enable debug logging on stderr.")] = False,
) -> None:
    """Render one command outcome file to markdown on stdout."""
    logging.basicConfig(level=logging.DEBUG if debug else logging.WARNING)

    try:
        settings = load_settings(base_url_override=base_url)
        lock_url_builder = build_lock_url_builder(settings.base_url)
        outcome = COMMAND_OUTCOME_ADAPTER.validate_json(input_path.read_bytes())
        log = log_file.read_text(encoding="utf-8") if log_file is not None else ""
    except SettingsError as error:
        typer.echo(f"Render failed: {error}")
        raise typer.Exit(code=1) from error
    except ValidationError as error:
        typer.echo(
            f"Render failed: invalid outcome in {input_path} ({error.error_count()} errors)."
        )
        raise typer.Exit(code=1) from error
    except (OSError, ValueError) as error:
        typer.echo(f"Render failed: {error}")
        raise typer.Exit(code=1) from error

    logger.debug("Rendering %s outcome from %s", command.value, input_path)
    renderer = MarkdownRenderer(lock_url_builder)
    if verbose is None:
        verbose = settings.verbose
    typer.echo(renderer.render(outcome, command, log=log, verbose=verbose))
