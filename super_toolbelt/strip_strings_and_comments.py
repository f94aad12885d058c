"""Logic for blanking string literals and comments out of a source line."""


def strip_strings_and_comments(line: str) -> str:
    """Replace quoted text with spaces and drop a trailing comment.

    Columns are preserved so matches on the result line up with the raw line.
    Heredocs, %-literals and multi-line strings are not understood.
    """
    result: list[str] = []
    in_single = False
    in_double = False
    escaped = False

    for char in line:
        if escaped:
            result.append(" ")
            escaped = False
            continue

        if char == "\\" and (in_single or in_double):
            escaped = True
            result.append(" ")
            continue

        if char == "'" and not in_double:
            in_single = not in_single
            result.append(" ")
            continue

        if char == '"' and not in_single:
            in_double = not in_double
            result.append(" ")
            continue

        if char == "#" and not in_single and not in_double:
            break

        if in_single or in_double:
            result.append(" ")
            continue

        result.append(char)

    return "".join(result)
