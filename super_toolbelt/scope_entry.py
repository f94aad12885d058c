"""Data model for entries on the lexical scope stack."""

from dataclasses import dataclass

NAMESPACE = "namespace"
BLOCK = "block"


@dataclass(frozen=True)
class ScopeEntry:
    """One open `end`-terminated scope.

    Namespace entries carry the absolute path of the class or module that
    opened them. Block entries only balance a later `end`.
    """

    kind: str  # NAMESPACE or BLOCK
    full_path: tuple[str, ...] = ()

    @property
    def is_namespace(self) -> bool:
        """Check if the entry contributes to name resolution."""
        return self.kind == NAMESPACE


BLOCK_ENTRY = ScopeEntry(kind=BLOCK)


def namespace_entry(full_path: list[str] | tuple[str, ...]) -> ScopeEntry:
    """Build a namespace entry for an already resolved absolute path."""
    return ScopeEntry(kind=NAMESPACE, full_path=tuple(full_path))
