"""Qualified class names from Ruby source, and file finder queries from them."""

from super_toolbelt.class_entry import ClassEntry
from super_toolbelt.clipboard_text_to_query import clipboard_text_to_query
from super_toolbelt.scan_class_declarations import scan_class_declarations

__all__ = ["ClassEntry", "clipboard_text_to_query", "scan_class_declarations"]
