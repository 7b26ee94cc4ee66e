"""Typer app configuration and logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from dotenv import load_dotenv

# Load environment variables (SOCIAL_HUB_*) from .env file
load_dotenv()

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"

# Loggers used by the composer core and its collaborators
WORKFLOW_LOGGERS = ("composer", "extraction", "distribution")

# Create Typer app
app = typer.Typer(
    name="social-hub",
    help="Compose once, preview and distribute across social platforms",
    add_completion=False,
)


def register_commands() -> None:
    """Register all commands from feature modules."""
    from .compose.commands import distribute, list_platforms, preview

    app.command(name="platforms")(list_platforms)
    app.command(name="preview")(preview)
    app.command(name="distribute")(distribute)


def setup_logging(log_dir: Path | None = None) -> None:
    """Configure logging for CLI.

    - Suppresses console output from the root logger
    - Writes composer, extraction and distribution events to logs/social_hub.log
    """
    if log_dir is None:
        log_dir = Path(__file__).parent.parent.parent.parent / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)

    # Remove any default console handlers from root logger
    root_logger = logging.getLogger()
    root_logger.handlers = []
    root_logger.setLevel(logging.CRITICAL)

    file_handler = logging.FileHandler(log_dir / "social_hub.log", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    for logger_name in WORKFLOW_LOGGERS:
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.DEBUG)
        logger.propagate = False
        logger.handlers = []
        logger.addHandler(file_handler)


# Register all commands
register_commands()


def main() -> None:
    """CLI entry point."""
    setup_logging()
    app()
