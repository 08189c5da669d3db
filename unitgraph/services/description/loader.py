"""
Build description loader.

Reads the TOML build description and validates it into a BuildDescription.
"""

from __future__ import annotations

from pathlib import Path

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from pydantic import ValidationError

from ...core.di import get_logger
from ...core.exceptions import BuildDescriptionError
from ...core.models.description import BuildDescription

DEFAULT_DESCRIPTION_FILE = "units.toml"


def _format_errors(error: ValidationError) -> list[str]:
    messages = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"])
        messages.append(f"{location}: {detail['msg']}")
    return messages


def parse_description(text: str, source: str = "<string>") -> BuildDescription:
    """
    Parse a build description from TOML text.

    Raises:
        BuildDescriptionError: If the text is not valid TOML or fails validation
    """
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise BuildDescriptionError(
            f"Invalid TOML in build description: {e}", file_path=source, cause=e
        ) from e

    try:
        return BuildDescription.model_validate(data)
    except ValidationError as e:
        raise BuildDescriptionError(
            "Build description does not validate",
            file_path=source,
            errors=_format_errors(e),
            cause=e,
        ) from e


def load_description(path: str | Path) -> BuildDescription:
    """
    Load the build description file at ``path``.

    Raises:
        BuildDescriptionError: If the file cannot be read, parsed or validated
    """
    path = Path(path)
    get_logger().debug("Loading build description from %s", path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise BuildDescriptionError(
            f"Cannot read build description: {e.strerror or e}", file_path=str(path), cause=e
        ) from e

    description = parse_description(text, source=str(path))
    get_logger().debug(
        "Build description has %d units, %d bundles, %d demos",
        len(description.units),
        len(description.bundles),
        len(description.demos),
    )
    return description
