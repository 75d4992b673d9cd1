"""Literal value encoders.

Every encoder is a pure function of its value and returns the events of one
self-contained CST node (`String`, `Number`, `Infinity`, ...). Nothing here
looks at the surrounding AST.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping
from decimal import Decimal
from typing import Any, Final, TypeAlias

from estree_cst.cst import FINISH, Event, StartEvent, TokenEvent
from estree_cst.diagnostics import UnsupportedLiteralKind
from estree_cst.syntax import LiteralNodeKind, TokenKind

RegexRenderer: TypeAlias = Callable[[str, str], list[Event]]

_NAMED_ESCAPES: Final[dict[str, str]] = {
    "\r": "r",
    "\n": "n",
    "\t": "t",
    "\0": "0",
}


def _token(kind: TokenKind, text: str) -> TokenEvent:
    return TokenEvent(kind=kind, text=text)


def _punctuator(text: str) -> TokenEvent:
    return _token(TokenKind.PUNCTUATOR, text)


def _keyword(text: str) -> TokenEvent:
    return _token(TokenKind.KEYWORD, text)


def _literal(text: str) -> TokenEvent:
    return _token(TokenKind.LITERAL, text)


def _needs_escape(char: str) -> bool:
    return char in ("\\", "'") or ord(char) < 0x20


def _escape_code(sigil: str, digits: str = "") -> list[Event]:
    events: list[Event] = [StartEvent(LiteralNodeKind.ESCAPE_CODE), _keyword(sigil)]
    events.extend(_literal(digit) for digit in digits)
    events.append(FINISH)
    return events


def _escape_sequence(char: str, following: str | None) -> list[Event]:
    named = _NAMED_ESCAPES.get(char)
    # `\0` directly followed by a digit would read as a legacy octal escape.
    if named == "0" and following is not None and following.isdigit():
        named = None

    if named is not None:
        value = _escape_code(named)
    elif ord(char) < 0x20:
        value = _escape_code("u", f"{ord(char):04x}")
    else:
        value = [_keyword(char)]

    return [
        StartEvent(LiteralNodeKind.ESCAPE_SEQUENCE),
        _punctuator("\\"),
        *value,
        FINISH,
    ]


def encode_string(value: str) -> list[Event]:
    """Encode a string value as a single-quoted `String` node.

    A value consisting of exactly one single quote is the only one printed
    with double quotes, so that it needs no escape at all.
    """
    if value == "'":
        return [
            StartEvent(LiteralNodeKind.STRING),
            _punctuator('"'),
            StartEvent(LiteralNodeKind.STRING_CONTENT),
            _literal(value),
            FINISH,
            _punctuator('"'),
            FINISH,
        ]

    events: list[Event] = [
        StartEvent(LiteralNodeKind.STRING),
        _punctuator("'"),
        StartEvent(LiteralNodeKind.STRING_CONTENT),
    ]

    run: list[str] = []
    for index, char in enumerate(value):
        if not _needs_escape(char):
            run.append(char)
            continue

        if run:
            events.append(_literal("".join(run)))
            run.clear()

        following = value[index + 1] if index + 1 < len(value) else None
        events.extend(_escape_sequence(char, following))

    if run:
        events.append(_literal("".join(run)))

    events.extend([FINISH, _punctuator("'"), FINISH])
    return events


def number_text(value: int | float) -> str:
    """Render a number the way JavaScript's `Number.prototype.toString` does."""
    if isinstance(value, int):
        return str(value)

    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))

    text = repr(value)
    if "e" not in text:
        return text

    mantissa, exponent = text.split("e")
    power = int(exponent)
    if -7 < power < 0:
        return format(Decimal(text), "f")

    sign = "-" if power < 0 else "+"
    return f"{mantissa}e{sign}{abs(power)}"


def encode_number(value: int | float) -> list[Event]:
    if isinstance(value, float) and math.isnan(value):
        raise UnsupportedLiteralKind(value)

    if isinstance(value, float) and math.isinf(value):
        return encode_infinity(value)

    events: list[Event] = [StartEvent(LiteralNodeKind.NUMBER)]
    events.extend(_literal(digit) for digit in number_text(value))
    events.append(FINISH)
    return events


def encode_infinity(value: float) -> list[Event]:
    """Encode +/-Infinity, which has no literal form, as a sign and keyword."""
    if value == math.inf:
        sign = "+"
    elif value == -math.inf:
        sign = "-"
    else:
        raise UnsupportedLiteralKind(value)

    return [
        StartEvent(LiteralNodeKind.INFINITY),
        _punctuator(sign),
        _keyword("Infinity"),
        FINISH,
    ]


def encode_bigint(digits: str) -> list[Event]:
    events: list[Event] = [StartEvent(LiteralNodeKind.BIGINT)]
    events.extend(_literal(digit) for digit in digits)
    events.extend([_keyword("n"), FINISH])
    return events


def encode_boolean(value: bool) -> list[Event]:
    return [
        StartEvent(LiteralNodeKind.BOOLEAN),
        _keyword("true" if value else "false"),
        FINISH,
    ]


def encode_null() -> list[Event]:
    return [StartEvent(LiteralNodeKind.NULL), _keyword("null"), FINISH]


def default_regex_renderer(pattern: str, flags: str) -> list[Event]:
    """Splice a regex literal in verbatim: `/`, pattern, `/`, flags."""
    events: list[Event] = [
        StartEvent(LiteralNodeKind.REGEX),
        _punctuator("/"),
        _literal(pattern),
        _punctuator("/"),
    ]
    if flags:
        events.append(_keyword(flags))
    events.append(FINISH)
    return events


def encode_literal(
    node: Mapping[str, Any],
    regex_renderer: RegexRenderer = default_regex_renderer,
) -> list[Event]:
    """Encode an ESTree `Literal` node's value.

    The `regex` and `bigint` fields win over `value`, which JSON
    serializations of ESTree leave empty for those literals.
    """
    regex = node.get("regex")
    if regex is not None:
        return regex_renderer(regex["pattern"], regex.get("flags", ""))

    bigint = node.get("bigint")
    if bigint is not None:
        return encode_bigint(str(bigint))

    value = node.get("value")
    if isinstance(value, str):
        return encode_string(value)
    if isinstance(value, bool):
        return encode_boolean(value)
    if isinstance(value, (int, float)):
        return encode_number(value)
    if value is None:
        return encode_null()

    raise UnsupportedLiteralKind(value)


__all__ = [
    "RegexRenderer",
    "default_regex_renderer",
    "encode_bigint",
    "encode_boolean",
    "encode_infinity",
    "encode_literal",
    "encode_null",
    "encode_number",
    "encode_string",
    "number_text",
]
