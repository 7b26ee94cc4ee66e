"""Result type shared by CLI validators and services."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Step succeeded and produced a value."""

    value: T


@dataclass(frozen=True)
class Failure:
    """Step failed; `error` is shown to the author, `details` below it."""

    error: str
    details: dict[str, Any] | None = None
    exit_code: int = 1


Result = Union[Success[T], Failure]
