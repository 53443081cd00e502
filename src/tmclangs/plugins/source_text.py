"""Helpers for reading C-family source text (Java, C)."""

import re

_COMMENT_OR_LITERAL = re.compile(
    r'("(?:\\.|[^"\\\n])*")'     # string literal
    r"|('(?:\\.|[^'\\\n])*')"    # char literal
    r"|(/\*.*?\*/)"              # block comment
    r"|(//[^\n]*)",              # line comment
    re.DOTALL,
)


def strip_comments(source: str) -> str:
    """Remove // and /* */ comments, leaving string literals intact.

    Block comments are replaced by their newlines so line structure is kept.
    """

    def replace(match: re.Match) -> str:
        if match.group(3) is not None:
            return "\n" * match.group(3).count("\n") or " "
        if match.group(4) is not None:
            return " "
        return match.group(0)

    return _COMMENT_OR_LITERAL.sub(replace, source)
