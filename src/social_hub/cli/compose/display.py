"""Display functions for compose commands - pure functions for Rich output."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ...composer import CompositionSession, PreviewResult, SubmissionState
from ...constants import PreviewSeverity
from ...platforms import Platform, PlatformCatalog, PlatformSelection
from ..core.console import print_error

_SEVERITY_STYLES = {
    PreviewSeverity.GOOD: "green",
    PreviewSeverity.NEAR_LIMIT: "red",
}


def show_catalog(console: Console, catalog: PlatformCatalog, selection: PlatformSelection) -> None:
    """Display the destination table."""
    table = Table(title="Platforms")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Limit", justify="right")
    table.add_column("Selected", justify="center")

    for destination in catalog:
        selected = selection.is_selected(destination.platform)
        table.add_row(
            destination.id,
            destination.display_name,
            f"{destination.character_limit:,}",
            "[green]yes[/green]" if selected else "[dim]no[/dim]",
        )

    console.print(table)


def show_compose_summary(console: Console, session: CompositionSession) -> None:
    """Display word count and destination count badges."""
    count = session.selected_count()
    source = session.content.source_mode.value
    console.print(
        f"[bold]{session.word_count()}[/bold] words | "
        f"[bold]{count}[/bold] platforms | source: [yellow]{source}[/yellow]"
    )
    console.print(
        f"[dim]Ready to distribute to {count} platform{'s' if count != 1 else ''}[/dim]"
    )


def show_preview(console: Console, preview: PreviewResult, active: bool = False) -> None:
    """Display one destination's preview card."""
    style = _SEVERITY_STYLES[preview.severity]
    body = escape(preview.render_text)
    if preview.title:
        body = f"[bold]{escape(preview.title)}[/bold]\n\n{body}"

    footer = (
        f"{preview.used_chars:,} / {preview.limit:,}  "
        f"[{style}]{preview.severity.label}[/{style}]"
    )
    title = f"{preview.display_name} ({preview.percent_used}%)"
    if active:
        title = f"* {title}"

    console.print(Panel(
        f"{body}\n\n{footer}",
        title=title,
        border_style=style,
    ))


def show_previews(
    console: Console,
    previews: list[PreviewResult],
    active: Optional[Platform] = None,
) -> None:
    """Display all preview cards. Prints nothing for an empty body."""
    if not previews:
        console.print("[dim]No platforms selected[/dim]")
        return
    if all(not preview.display_text for preview in previews):
        return

    console.print("[bold]Content Previews[/bold]")
    for preview in previews:
        show_preview(console, preview, active=preview.platform == active)


def show_submission_result(console: Console, state: SubmissionState) -> None:
    """Display the success banner."""
    console.print(Panel(
        f"[bold green]{state.message}[/bold green]",
        title="Distributed",
        border_style="green",
    ))


def show_compose_error(console: Console, error: str, details: Optional[dict] = None) -> None:
    """Display a compose error."""
    console.print()
    print_error(error, details, out=console)
