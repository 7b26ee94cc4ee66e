"""Compose commands: list platforms, preview and distribute content."""

from .commands import distribute, list_platforms, preview

__all__ = ["distribute", "list_platforms", "preview"]
