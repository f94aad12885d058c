"""Conversion of CamelCase constant names to snake_case."""

import re

LOWER_UPPER_RE = re.compile(r"([a-z0-9])([A-Z])")
ACRONYM_WORD_RE = re.compile(r"([A-Z]+)([A-Z][a-z0-9])")


def to_snake_case(value: str) -> str:
    """Convert a constant name to snake_case (HTTPServer -> http_server)."""
    value = LOWER_UPPER_RE.sub(r"\1_\2", value)
    value = ACRONYM_WORD_RE.sub(r"\1_\2", value)
    return value.lower()
