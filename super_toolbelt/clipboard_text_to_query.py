"""Logic for turning a copied class name into a file finder query."""

from super_toolbelt.line_patterns import (
    ABSOLUTE_MARKER,
    NAMESPACE_SEPARATOR,
    QUALIFIED_CLASS_NAME_RE,
    SURROUNDING_SPACE_RE,
)
from super_toolbelt.to_snake_case import to_snake_case

NO_QUERY = ""


def clipboard_text_to_query(text: str) -> str:
    """Convert a qualified class name into a slash-separated path query.

    `::Billing::HTTPClient` becomes `billing/http_client`. Anything that is
    not a namespaced constant (single segments included) yields an empty
    query, meaning the finder should not be narrowed.
    """
    if not isinstance(text, str):
        return NO_QUERY

    candidate = SURROUNDING_SPACE_RE.sub("", text)
    if not QUALIFIED_CLASS_NAME_RE.fullmatch(candidate):
        return NO_QUERY

    if candidate.startswith(ABSOLUTE_MARKER):
        candidate = candidate[len(ABSOLUTE_MARKER) :]

    return "/".join(
        to_snake_case(segment) for segment in candidate.split(NAMESPACE_SEPARATOR)
    )
