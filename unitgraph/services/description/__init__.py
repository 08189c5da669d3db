"""Build description loading."""

from .loader import DEFAULT_DESCRIPTION_FILE, load_description, parse_description

__all__ = ["DEFAULT_DESCRIPTION_FILE", "load_description", "parse_description"]
