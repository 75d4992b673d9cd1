"""Unified token and CST node vocabularies."""

from enum import IntEnum, StrEnum


class TokenKind(IntEnum):
    """Leaf token vocabulary of the concrete tree."""

    PUNCTUATOR = 1
    KEYWORD = 2
    IDENTIFIER = 3
    WHITESPACE = 4
    LITERAL = 5
    COMMENT = 6

    @property
    def is_trivia(self) -> bool:
        return self in (TokenKind.WHITESPACE, TokenKind.COMMENT)


class LiteralNodeKind(StrEnum):
    """CST node kinds produced by the literal encoders.

    Every other CST node carries the ESTree type name of the AST node it was
    printed from.
    """

    STRING = "String"
    STRING_CONTENT = "StringContent"
    ESCAPE_SEQUENCE = "EscapeSequence"
    ESCAPE_CODE = "EscapeCode"
    NUMBER = "Number"
    INFINITY = "Infinity"
    BIGINT = "BigInt"
    BOOLEAN = "Boolean"
    NULL = "Null"
    REGEX = "Regex"


ROOT_KIND = "Root"
"""Kind of the synthetic root wrapping a printed program."""
