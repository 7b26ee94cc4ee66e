"""Immutable parameter dataclasses for compose commands."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class ComposeParams:
    """Form input gathered from the command line."""

    text: Optional[str]
    file: Optional[Path]
    title: Optional[str]
    url: Optional[str]
    toggles: tuple[str, ...]
    config_path: Optional[Path]

    @classmethod
    def from_cli(
        cls,
        text: Optional[str] = None,
        file: Optional[Path] = None,
        title: Optional[str] = None,
        url: Optional[str] = None,
        toggle: Optional[list[str]] = None,
        config: Optional[Path] = None,
        **kwargs,
    ) -> "ComposeParams":
        """Create from CLI arguments, normalizing platform ids."""
        toggles = tuple(item.strip().lower() for item in (toggle or []) if item.strip())
        return cls(
            text=text,
            file=file,
            title=title,
            url=url.strip() if url else None,
            toggles=toggles,
            config_path=config,
        )

    @property
    def uses_url(self) -> bool:
        """True when content should be extracted from the URL."""
        return bool(self.url) and self.text is None and self.file is None

    def read_body(self) -> str:
        """Body text from the argument or the file, verbatim."""
        if self.file is not None:
            return self.file.read_text(encoding="utf-8")
        return self.text or ""
