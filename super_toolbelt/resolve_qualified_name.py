"""Resolution of declared names against the enclosing namespaces."""

from collections.abc import Sequence

from super_toolbelt.line_patterns import ABSOLUTE_MARKER, NAMESPACE_SEPARATOR
from super_toolbelt.scope_entry import ScopeEntry


def current_namespace_path(stack: Sequence[ScopeEntry]) -> tuple[str, ...]:
    """Return the path of the innermost namespace, skipping block entries."""
    for entry in reversed(stack):
        if entry.is_namespace:
            return entry.full_path
    return ()


def resolve_qualified_name(raw_name: str, stack: Sequence[ScopeEntry]) -> list[str]:
    """Resolve a declared name to its absolute path segments.

    `::Foo` is rooted at the top level and ignores the stack. Anything else
    nests under the innermost namespace entry.
    """
    is_absolute = raw_name.startswith(ABSOLUTE_MARKER)
    normalized = raw_name[len(ABSOLUTE_MARKER) :] if is_absolute else raw_name
    parts = [p for p in normalized.split(NAMESPACE_SEPARATOR) if p]

    if is_absolute:
        return parts

    return [*current_namespace_path(stack), *parts]
