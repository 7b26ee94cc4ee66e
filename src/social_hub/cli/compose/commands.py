"""Compose CLI commands - thin wrappers orchestrating params, validation, display, and service."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import typer

from ...composer import CompositionSession
from ..core.console import console
from ..core.types import Failure
from .display import (
    show_catalog,
    show_compose_error,
    show_compose_summary,
    show_previews,
    show_submission_result,
)
from .params import ComposeParams
from .service import ComposeService
from .validators import validate_compose_params


def list_platforms(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to hub.yaml"),
) -> None:
    """List destinations, their character limits and the default selection."""
    session = _build_session(ComposeParams.from_cli(config=config))
    show_catalog(console, session.catalog, session.selection)


def preview(
    text: Optional[str] = typer.Argument(None, help="Content to preview"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Read content from a file"),
    title: Optional[str] = typer.Option(None, "--title", help="Article title (shown on the blog)"),
    toggle: Optional[list[str]] = typer.Option(None, "--toggle", "-t", help="Flip a platform from the default selection"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to hub.yaml"),
) -> None:
    """Show how the content fits each selected platform."""
    params = ComposeParams.from_cli(
        text=text,
        file=file,
        title=title,
        toggle=toggle,
        config=config,
    )
    session = _build_session(params)

    show_compose_summary(console, session)
    show_previews(console, session.previews(), active=session.default_preview())


def distribute(
    text: Optional[str] = typer.Argument(None, help="Content to distribute"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Read content from a file"),
    url: Optional[str] = typer.Option(None, "--url", "-u", help="Article URL (extracted when no text is given)"),
    title: Optional[str] = typer.Option(None, "--title", help="Article title"),
    toggle: Optional[list[str]] = typer.Option(None, "--toggle", "-t", help="Flip a platform from the default selection"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to hub.yaml"),
) -> None:
    """Submit content to every selected platform at once."""
    params = ComposeParams.from_cli(
        text=text,
        file=file,
        title=title,
        url=url,
        toggle=toggle,
        config=config,
    )
    session = _build_session(params, require_content=True)
    service = ComposeService()

    if params.uses_url:
        console.print(f"[cyan]Extracting content from {params.url}...[/cyan]")

    result = asyncio.run(service.distribute(session, extract_first=params.uses_url))

    show_compose_summary(console, session)
    if isinstance(result, Failure):
        show_compose_error(console, result.error, result.details)
        raise typer.Exit(result.exit_code)

    show_submission_result(console, result.value)


def _build_session(params: ComposeParams, require_content: bool = False) -> CompositionSession:
    """Validate params and build a session, exiting on failure."""
    validation = validate_compose_params(params, require_content=require_content)
    if isinstance(validation, Failure):
        show_compose_error(console, validation.error, validation.details)
        raise typer.Exit(validation.exit_code)

    built = ComposeService().build_session(params)
    if isinstance(built, Failure):
        show_compose_error(console, built.error, built.details)
        raise typer.Exit(built.exit_code)
    return built.value
