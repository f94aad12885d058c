"""Single-pass scan of a Ruby document for qualified class declarations."""

import re

from super_toolbelt.class_entry import ClassEntry
from super_toolbelt.line_patterns import BYTE_ORDER_MARK
from super_toolbelt.scan_state import Stack, advance

LINE_BREAK_RE = re.compile(r"\r?\n")


def scan_class_declarations(document_text: str) -> list[ClassEntry]:
    """Return one entry per class declaration line, in line order.

    Reopened classes yield one entry per declaration. Unbalanced `end`
    keywords and unrecognised declarations are ignored.
    """
    stack: Stack = ()
    entries: list[ClassEntry] = []
    document_text = document_text.removeprefix(BYTE_ORDER_MARK)

    for index, raw_line in enumerate(LINE_BREAK_RE.split(document_text)):
        stack, entry = advance(stack, index, raw_line)
        if entry is not None:
            entries.append(entry)

    return entries
