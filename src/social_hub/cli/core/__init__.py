"""Core utilities for CLI - shared types and console."""

from .types import Result, Success, Failure
from .console import console, print_error

__all__ = [
    "Result",
    "Success",
    "Failure",
    "console",
    "print_error",
]
