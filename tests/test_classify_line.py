"""Tests for the ordered line classification rules."""

import pytest

from super_toolbelt.classify_line import (
    BLOCK,
    CLASS,
    END,
    LINE_RULES,
    MODULE,
    SINGLETON,
    LineMatch,
    classify_line,
)


def test_rule_order() -> None:
    """Verify that rules are checked end, singleton, class, module, block."""
    assert [rule for rule, _ in LINE_RULES] == [END, SINGLETON, CLASS, MODULE, BLOCK]


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("end", LineMatch(END)),
        ("    end.tap { }", LineMatch(END)),
        ("class << self", LineMatch(SINGLETON)),
        ("  class Foo", LineMatch(CLASS, "Foo")),
        ("class Foo < Bar", LineMatch(CLASS, "Foo")),
        ("class ::Foo::Bar", LineMatch(CLASS, "::Foo::Bar")),
        ("module A::B", LineMatch(MODULE, "A::B")),
        ("  def call", LineMatch(BLOCK)),
        ("if x", LineMatch(BLOCK)),
        ("begin", LineMatch(BLOCK)),
        ("items.each do |i|", LineMatch(BLOCK)),
    ],
)
def test_classify_line(line: str, expected: LineMatch) -> None:
    """Verify the rule and captured name for representative lines."""
    assert classify_line(line) == expected


@pytest.mark.parametrize(
    "line",
    [
        "",
        "   ",
        "x = 1",
        "end_time = now",
        "class foo",
        "class #{name}",
        "klass = Class.new",
        "return unless ready",
        "  define_method(:x)",
    ],
)
def test_unrecognised_lines(line: str) -> None:
    """Verify that lines not opening or closing scopes are not classified."""
    assert classify_line(line) is None


def test_end_wins_over_do() -> None:
    """Verify that 'end' at line start wins over a later 'do'."""
    assert classify_line("end.each do |x|") == LineMatch(END)


def test_singleton_wins_over_class() -> None:
    """Verify that 'class << self' is not read as a class declaration."""
    assert classify_line("  class <<self") == LineMatch(SINGLETON)


def test_class_with_trailing_do() -> None:
    """Verify that a class line is a declaration even if it mentions 'do'."""
    assert classify_line("class Foo; do_it") == LineMatch(CLASS, "Foo")


def test_byte_order_mark_counts_as_leading_space() -> None:
    """Verify that a BOM before a keyword is treated as indentation."""
    assert classify_line("\ufeffmodule A") == LineMatch(MODULE, "A")
    assert classify_line("\ufeffclass B") == LineMatch(CLASS, "B")


def test_word_boundaries_are_ascii() -> None:
    """Verify that non-ASCII letters end a keyword like any other symbol."""
    assert classify_line("endé") == LineMatch(END)
    assert classify_line("x.doé") == LineMatch(BLOCK)
    assert classify_line("x.do_it") is None
