"""Compose-specific validators."""

from __future__ import annotations

from ...platforms import Platform
from ..core.types import Failure, Result, Success
from .params import ComposeParams

VALID_PLATFORM_IDS: list[str] = [platform.value for platform in Platform]


def validate_compose_params(
    params: ComposeParams,
    require_content: bool = False,
) -> Result[ComposeParams]:
    """Validate compose parameters.

    Args:
        params: Parameters to check.
        require_content: Demand text, a file, or a URL to extract from.

    Returns Result with params if valid, or Failure with error.
    """
    unknown = [item for item in params.toggles if item not in VALID_PLATFORM_IDS]
    if unknown:
        return Failure(
            f"Unknown platform: {', '.join(unknown)}",
            {"Available": ", ".join(VALID_PLATFORM_IDS)},
        )

    if params.text is not None and params.file is not None:
        return Failure("Pass the content as an argument or with --file, not both")

    if params.file is not None and not params.file.is_file():
        return Failure("Content file not found", {"Path": str(params.file)})

    if params.config_path is not None and not params.config_path.is_file():
        return Failure("Config file not found", {"Path": str(params.config_path)})

    if require_content and params.text is None and params.file is None and not params.url:
        return Failure("Nothing to distribute: pass content text, --file, or --url")

    return Success(params)
