"""Ordered classification of sanitized lines into scope stack rules."""

import re
from dataclasses import dataclass

from super_toolbelt.line_patterns import (
    BLOCK_START_RE,
    CLASS_DECLARATION_RE,
    CLASS_SINGLETON_RE,
    DO_RE,
    END_RE,
    MODULE_DECLARATION_RE,
)

END = "end"
SINGLETON = "singleton"
CLASS = "class"
MODULE = "module"
BLOCK = "block"

# First match wins. Each rule lists the patterns that trigger it.
LINE_RULES: tuple[tuple[str, tuple[re.Pattern[str], ...]], ...] = (
    (END, (END_RE,)),
    (SINGLETON, (CLASS_SINGLETON_RE,)),
    (CLASS, (CLASS_DECLARATION_RE,)),
    (MODULE, (MODULE_DECLARATION_RE,)),
    (BLOCK, (BLOCK_START_RE, DO_RE)),
)

_NAMED_RULES = {CLASS, MODULE}


@dataclass(frozen=True)
class LineMatch:
    """The rule a line triggered and, for declarations, the declared name."""

    rule: str
    raw_name: str = ""  # optional leading `::` plus the dotted name


def classify_line(line: str) -> LineMatch | None:
    """Return the first rule matching a sanitized line, or None."""
    for rule, patterns in LINE_RULES:
        for pattern in patterns:
            match = pattern.search(line)
            if not match:
                continue
            if rule in _NAMED_RULES:
                return LineMatch(rule, f"{match.group(1) or ''}{match.group(2)}")
            return LineMatch(rule)
    return None
