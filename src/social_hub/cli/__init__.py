"""Terminal presentation layer for the composer.

- core/: Shared console and Result types
- compose/: platforms, preview and distribute commands

Usage:
    python -m social_hub.cli --help
    python -m social_hub.cli preview "Hello world" --toggle instagram
    python -m social_hub.cli distribute --url https://example.com/article
"""

from .app import app, main

__all__ = ["app", "main"]
