"""Data model for a recognised class declaration."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ClassEntry:
    """A class declared on a source line, with its qualified name."""

    line_index: int  # 0-based, in the raw document
    qualified_name: str  # e.g. Billing::Invoice
