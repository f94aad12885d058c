"""Pure per-line transition of the scope stack."""

import logging

from super_toolbelt.class_entry import ClassEntry
from super_toolbelt.classify_line import BLOCK, CLASS, END, SINGLETON, classify_line
from super_toolbelt.line_patterns import NAMESPACE_SEPARATOR
from super_toolbelt.resolve_qualified_name import resolve_qualified_name
from super_toolbelt.scope_entry import BLOCK_ENTRY, ScopeEntry, namespace_entry
from super_toolbelt.strip_strings_and_comments import strip_strings_and_comments

logger = logging.getLogger(__name__)

Stack = tuple[ScopeEntry, ...]


def advance(
    stack: Stack, line_index: int, raw_line: str
) -> tuple[Stack, ClassEntry | None]:
    """Apply one raw source line to the stack.

    Returns the new stack and the class entry declared on the line, if any.
    The input stack is never mutated.
    """
    match = classify_line(strip_strings_and_comments(raw_line))
    if match is None:
        return stack, None

    if match.rule == END:
        if not stack:
            logger.debug("Unbalanced 'end' on line %d ignored", line_index + 1)
            return stack, None
        return stack[:-1], None

    if match.rule in (SINGLETON, BLOCK):
        return (*stack, BLOCK_ENTRY), None

    full_path = resolve_qualified_name(match.raw_name, stack)
    new_stack = (*stack, namespace_entry(full_path))

    if match.rule == CLASS:
        return new_stack, ClassEntry(line_index, NAMESPACE_SEPARATOR.join(full_path))

    # MODULE: tracked for context only
    return new_stack, None
