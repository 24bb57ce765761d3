"""
Syntax tokens for generated TypeScript.

All translators build their output from these constants so the emitted
syntax lives in one place.
"""


class Token:
    """Fixed TypeScript syntax tokens."""

    COLON = ":"
    SEMI_COLON = ";"
    COMMA = ","
    DOT = "."
    QUESTION_MARK = "?"
    EQUAL_SIGN = "="
    DOUBLE_QUOTE = '"'
    CURLY_BRACE_LEFT = "{"
    CURLY_BRACE_RIGHT = "}"
    SQUARE_BRACKETS = "[]"

    EXPORT = "export"
    INTERFACE = "interface"
    ENUM = "enum"
    EXTENDS = "extends"
    TYPE = "type"
    NAMESPACE = "namespace"
