"""Predicate for deciding if a file holds Ruby source."""

from pathlib import Path
from typing import Any


def is_ruby_document(path: Path, config: dict[str, Any]) -> bool:
    """Check the file suffix and bare file name against the configured lists."""
    extensions = {e.lower() for e in config.get("extensions", [])}
    filenames = set(config.get("filenames", []))
    return path.suffix.lower() in extensions or path.name in filenames
