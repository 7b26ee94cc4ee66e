"""Rich console singleton for CLI output."""

from __future__ import annotations

import sys
from typing import Optional

from rich.console import Console
from rich.markup import escape

# Windows cp1252 cannot encode box drawing characters
_safe_box = sys.platform == "win32"

# Global console instance - used across all CLI modules
console = Console(safe_box=_safe_box)


def print_error(message: str, details: Optional[dict] = None, out: Optional[Console] = None) -> None:
    """Print an error line followed by indented key/value details.

    Args:
        message: Error summary, printed in red.
        details: Context such as the offending path or the available ids.
        out: Console to print to. Defaults to the global console.
    """
    out = out or console
    out.print(f"[red]Error: {escape(message)}[/red]")
    for key, value in (details or {}).items():
        out.print(f"  [dim]{key}:[/dim] [yellow]{escape(str(value))}[/yellow]")
