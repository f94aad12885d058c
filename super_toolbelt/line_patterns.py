"""Patterns recognised on sanitized Ruby source lines."""

import re

NAMESPACE_SEPARATOR = "::"
ABSOLUTE_MARKER = "::"
BYTE_ORDER_MARK = "\ufeff"

# A constant segment: capitalized, then letters and digits.
_SEGMENT = r"[A-Z][A-Za-z0-9]*"
# Whitespace, including a byte order mark.
_SPACE = r"[\s\ufeff]"
# ASCII word boundaries; accented letters do not count as word characters.
_WORD_START = r"(?<![A-Za-z0-9_])"
_WORD_END = r"(?![A-Za-z0-9_])"

END_RE = re.compile(rf"^{_SPACE}*end{_WORD_END}")
CLASS_SINGLETON_RE = re.compile(rf"^{_SPACE}*class{_SPACE}+<<")
CLASS_DECLARATION_RE = re.compile(
    rf"^{_SPACE}*class{_SPACE}+(::)?({_SEGMENT}(?:::{_SEGMENT})*)"
)
MODULE_DECLARATION_RE = re.compile(
    rf"^{_SPACE}*module{_SPACE}+(::)?({_SEGMENT}(?:::{_SEGMENT})*)"
)
BLOCK_START_RE = re.compile(
    rf"^{_SPACE}*(def|if|unless|case|while|until|for|begin){_WORD_END}"
)
# Unanchored: `items.each do |x|` opens a block anywhere on the line.
DO_RE = re.compile(rf"{_WORD_START}do{_WORD_END}")

# Two or more segments; used with fullmatch.
QUALIFIED_CLASS_NAME_RE = re.compile(rf"(::)?{_SEGMENT}(?:::{_SEGMENT})+")

# Leading and trailing whitespace, byte order marks included.
SURROUNDING_SPACE_RE = re.compile(rf"^{_SPACE}+|{_SPACE}+$")
