import pytest

from estree_cst.ast import Comment, CommentKind
from estree_cst.cst import StartEvent, TokenEvent, event_text
from estree_cst.diagnostics import PrintInvariantError
from estree_cst.printer import CommandBuffer, CommentCommand, render_commands
from estree_cst.printer.commands import CLOSE, DEDENT, INDENT, NEWLINE, SPACE, kw, open_node, pn
from estree_cst.printer.renderer import comment_text
from estree_cst.syntax import TokenKind


def test_newline_carries_current_indentation() -> None:
    buffer = CommandBuffer()
    buffer.push(pn("{"), INDENT, NEWLINE, kw("a"), INDENT, NEWLINE, kw("b"), DEDENT, DEDENT, NEWLINE, pn("}"))

    events = render_commands(buffer)
    assert event_text(events) == "{\n\ta\n\t\tb\n}"

    whitespace = [event for event in events if isinstance(event, TokenEvent) and event.kind == TokenKind.WHITESPACE]
    assert [event.text for event in whitespace] == ["\n\t", "\n\t\t", "\n"]


def test_indent_unit_is_configurable() -> None:
    buffer = CommandBuffer()
    buffer.push(INDENT, NEWLINE, kw("a"), DEDENT)

    assert event_text(render_commands(buffer, "    ")) == "\n    a"


def test_slots_expand_in_place_and_may_nest() -> None:
    buffer = CommandBuffer()
    outer = buffer.reserve()
    inner = buffer.reserve()
    empty = buffer.reserve()
    buffer.push(kw("a"), outer, empty, kw("b"))
    buffer.fill(outer, pn(","), inner)
    buffer.fill(inner, SPACE)

    assert event_text(render_commands(buffer)) == "a, b"
    assert not buffer.is_filled(empty)


def test_slot_can_only_be_filled_once() -> None:
    buffer = CommandBuffer()
    slot = buffer.reserve()
    buffer.fill(slot, SPACE)

    with pytest.raises(PrintInvariantError):
        buffer.fill(slot, NEWLINE)


def test_dedent_below_zero_is_fatal() -> None:
    buffer = CommandBuffer()
    buffer.push(DEDENT)

    with pytest.raises(PrintInvariantError):
        render_commands(buffer)


def test_unbalanced_indent_is_fatal() -> None:
    buffer = CommandBuffer()
    buffer.push(INDENT, kw("a"))

    with pytest.raises(PrintInvariantError):
        render_commands(buffer)


def test_node_events_pass_through() -> None:
    buffer = CommandBuffer()
    buffer.push(open_node("Identifier"), kw("x"), CLOSE)

    events = render_commands(buffer)
    assert events[0] == StartEvent("Identifier")
    assert len(events) == 3


def test_comments_render_as_comment_tokens() -> None:
    buffer = CommandBuffer()
    buffer.push(
        INDENT,
        CommentCommand(Comment(kind=CommentKind.BLOCK, text="*\n * x\n ")),
        NEWLINE,
        CommentCommand(Comment(kind=CommentKind.LINE, text=" y")),
        DEDENT,
    )

    events = render_commands(buffer)
    comments = [event for event in events if isinstance(event, TokenEvent) and event.kind == TokenKind.COMMENT]
    assert [event.text for event in comments] == ["/**\n\t * x\n\t */", "// y"]


def test_comment_text() -> None:
    assert comment_text(Comment(kind=CommentKind.LINE, text=" a"), "\n") == "// a"
    assert comment_text(Comment(kind=CommentKind.BLOCK, text="a\nb"), "\n  ") == "/*a\n  b*/"
