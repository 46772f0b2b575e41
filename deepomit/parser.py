"""
Parser for GraphQL variable definitions.

Supports:
- Named types: "query Q($id: ID)"
- Non-null types: "($id: ID!)"
- List types: "($ids: [ID!]!)", "($grid: [[Int]])"
- Default values after the type are ignored
"""

import re

OPERATION_PATTERN = re.compile(
    r"\b(?:query|mutation|subscription)\b\s*(?:[_A-Za-z][_0-9A-Za-z]*)?\s*([({])"
)
VARIABLE_PATTERN = re.compile(
    r"\$([_A-Za-z][_0-9A-Za-z]*)\s*:\s*[\[\s]*([_A-Za-z][_0-9A-Za-z]*)"
)
# Strings are matched first so a "#" inside a quoted value is not a comment
COMMENT_PATTERN = re.compile(r'"""[\s\S]*?"""|"(?:[^"\\\n]|\\.)*"|#[^\n]*')


def parse_variable_definitions(query: str) -> dict[str, str]:
    """
    Map each variable of the first operation in a document to its named type.

    List and non-null wrappers are unwrapped, so "[UserInput!]!" maps to
    "UserInput". Operations without variables (including the "{ ... }"
    shorthand) give an empty dict.

    Raises:
        ValueError: If the document is empty or the definitions are unbalanced
    """
    if not query or not query.strip():
        raise ValueError("Empty GraphQL document")

    source = COMMENT_PATTERN.sub(_drop_comment, query)

    for match in OPERATION_PATTERN.finditer(source):
        # Field names like "query" inside a selection set are not operations
        if _brace_depth(source, match.start()) != 0:
            continue
        if match.group(1) == "{":
            return {}
        definitions = _read_parenthesized(source, match.end())
        return dict(VARIABLE_PATTERN.findall(definitions))

    return {}


def _drop_comment(match: re.Match) -> str:
    text = match.group(0)
    return "" if text.startswith("#") else text


def _brace_depth(source: str, end: int) -> int:
    return source.count("{", 0, end) - source.count("}", 0, end)


def _read_parenthesized(source: str, start: int) -> str:
    """Return the text between the paren just before start and its match."""
    depth = 1
    in_string = False
    for i in range(start, len(source)):
        char = source[i]
        if char == '"' and source[i - 1] != "\\":
            in_string = not in_string
        elif in_string:
            continue
        elif char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                return source[start:i]
    raise ValueError("Unbalanced parentheses in variable definitions")
