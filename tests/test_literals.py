import math

import pytest

from estree_cst.cst import GreenNode, GreenToken, build_tree, event_text
from estree_cst.diagnostics import UnsupportedLiteralKind
from estree_cst.printer.literals import (
    encode_literal,
    encode_number,
    encode_string,
    number_text,
)
from estree_cst.syntax import LiteralNodeKind, TokenKind


def _text(node: dict) -> str:
    return event_text(encode_literal(node))


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("plain", "'plain'"),
        ("it's", "'it\\'s'"),
        ("a\\b", "'a\\\\b'"),
        ("line\nbreak", "'line\\nbreak'"),
        ("\r\t", "'\\r\\t'"),
        ("\x00a", "'\\0a'"),
        ("\x001", "'\\u00001'"),
        ("\x01", "'\\u0001'"),
        ("\x1f", "'\\u001f'"),
        ("'", "\"'\""),
        ("", "''"),
    ],
)
def test_string_escaping(value: str, expected: str) -> None:
    assert event_text(encode_string(value)) == expected


_NAMED_CONTROL_ESCAPES = {0x00: "\\0", 0x09: "\\t", 0x0A: "\\n", 0x0D: "\\r"}


@pytest.mark.parametrize("code_point", range(0x20), ids=lambda code_point: f"U+{code_point:04X}")
def test_every_control_character_is_escaped(code_point: int) -> None:
    escape = _NAMED_CONTROL_ESCAPES.get(code_point, f"\\u{code_point:04x}")

    assert event_text(encode_string(f"a{chr(code_point)}b")) == f"'a{escape}b'"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("'", "\"'\""),
        ("a'b", "'a\\'b'"),
        ("''", "'\\'\\''"),
        ('"', "'\"'"),
        ('a"b', "'a\"b'"),
    ],
)
def test_quote_characters(value: str, expected: str) -> None:
    assert event_text(encode_string(value)) == expected


def test_string_node_structure() -> None:
    root = build_tree(encode_string("a\nb"))
    string = root.children[0]
    assert isinstance(string, GreenNode)
    assert string.kind == LiteralNodeKind.STRING

    content = string.children[1]
    assert isinstance(content, GreenNode)
    assert content.kind == LiteralNodeKind.STRING_CONTENT
    assert [child.kind for child in content.children] == [
        TokenKind.LITERAL,
        LiteralNodeKind.ESCAPE_SEQUENCE,
        TokenKind.LITERAL,
    ]

    escape = content.children[1]
    assert isinstance(escape, GreenNode)
    backslash, code = escape.children
    assert isinstance(backslash, GreenToken)
    assert backslash.kind == TokenKind.PUNCTUATOR
    assert isinstance(code, GreenNode)
    assert code.kind == LiteralNodeKind.ESCAPE_CODE
    assert code.text == "n"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0, "0"),
        (-12, "-12"),
        (1.0, "1"),
        (0.5, "0.5"),
        (1e21, "1e+21"),
        (1.5e300, "1.5e+300"),
        (1e-7, "1e-7"),
        (0.000001, "0.000001"),
        (123.456, "123.456"),
    ],
)
def test_number_text_matches_javascript(value: int | float, expected: str) -> None:
    assert number_text(value) == expected


def test_number_emits_one_token_per_character() -> None:
    events = encode_number(12.5)
    root = build_tree(events)
    number = root.children[0]
    assert isinstance(number, GreenNode)
    assert number.kind == LiteralNodeKind.NUMBER
    assert [child.text for child in number.children if isinstance(child, GreenToken)] == ["1", "2", ".", "5"]


def test_infinity_has_sign_and_keyword() -> None:
    assert event_text(encode_number(math.inf)) == "+Infinity"
    assert event_text(encode_number(-math.inf)) == "-Infinity"

    root = build_tree(encode_number(-math.inf))
    assert root.children[0].kind == LiteralNodeKind.INFINITY


def test_nan_is_unsupported() -> None:
    with pytest.raises(UnsupportedLiteralKind):
        encode_number(math.nan)


def test_literal_shapes() -> None:
    assert _text({"type": "Literal", "value": True}) == "true"
    assert _text({"type": "Literal", "value": False}) == "false"
    assert _text({"type": "Literal", "value": None}) == "null"
    assert _text({"type": "Literal", "value": 7}) == "7"
    assert _text({"type": "Literal", "value": None, "bigint": "10"}) == "10n"
    assert _text({"type": "Literal", "value": None, "regex": {"pattern": "a+", "flags": "g"}}) == "/a+/g"
    assert _text({"type": "Literal", "value": None, "regex": {"pattern": "x", "flags": ""}}) == "/x/"


def test_regex_renderer_is_injectable() -> None:
    calls: list[tuple[str, str]] = []

    def renderer(pattern: str, flags: str) -> list:
        calls.append((pattern, flags))
        return []

    assert encode_literal({"type": "Literal", "regex": {"pattern": "p", "flags": "i"}}, renderer) == []
    assert calls == [("p", "i")]


def test_unsupported_literal_value() -> None:
    with pytest.raises(UnsupportedLiteralKind):
        encode_literal({"type": "Literal", "value": [1, 2]})
