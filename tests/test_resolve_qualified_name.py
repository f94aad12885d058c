"""Tests for resolving declared names against the scope stack."""

from super_toolbelt.resolve_qualified_name import (
    current_namespace_path,
    resolve_qualified_name,
)
from super_toolbelt.scope_entry import BLOCK_ENTRY, namespace_entry


def test_top_level_name() -> None:
    """Verify that a name outside any namespace resolves to itself."""
    assert resolve_qualified_name("Foo::Bar", []) == ["Foo", "Bar"]


def test_nested_under_namespace() -> None:
    """Verify that a relative name nests under the innermost namespace."""
    stack = [namespace_entry(["A"]), namespace_entry(["A", "B"])]
    assert resolve_qualified_name("C", stack) == ["A", "B", "C"]


def test_blocks_are_transparent() -> None:
    """Verify that block entries are skipped when looking for a namespace."""
    stack = [namespace_entry(["A"]), BLOCK_ENTRY, BLOCK_ENTRY]
    assert resolve_qualified_name("B", stack) == ["A", "B"]
    assert current_namespace_path([BLOCK_ENTRY]) == ()


def test_absolute_name_ignores_stack() -> None:
    """Verify that a leading '::' roots the name at the top level."""
    stack = [namespace_entry(["A"])]
    assert resolve_qualified_name("::C", stack) == ["C"]
    assert resolve_qualified_name("::C::D", stack) == ["C", "D"]


def test_empty_segments_filtered() -> None:
    """Verify that stray separators do not produce empty segments."""
    assert resolve_qualified_name("A::::B::", []) == ["A", "B"]
