"""Realize layout commands into a flat event stream."""

from __future__ import annotations

from estree_cst.ast import Comment
from estree_cst.cst import Event, TokenEvent
from estree_cst.diagnostics import PrintInvariantError
from estree_cst.printer.commands import (
    Append,
    Command,
    CommandBuffer,
    CommentCommand,
    Dedent,
    Indent,
    Newline,
    Slot,
)
from estree_cst.syntax import TokenKind


def comment_text(comment: Comment, newline: str) -> str:
    if comment.is_line:
        return f"//{comment.text}"
    return "/*" + comment.text.replace("\n", newline) + "*/"


class CommandRenderer:
    """Single pass over the commands, tracking indentation as running state."""

    def __init__(self, buffer: CommandBuffer, indent: str) -> None:
        self._buffer = buffer
        self._indent = indent
        self._depth = 0
        self._events: list[Event] = []

    @property
    def newline(self) -> str:
        return "\n" + self._indent * self._depth

    def render(self) -> list[Event]:
        for command in self._buffer.commands:
            self._run(command)
        if self._depth != 0:
            raise PrintInvariantError(f"indentation left at depth {self._depth} after rendering")
        return self._events

    def _run(self, command: Command) -> None:
        match command:
            case Append(event=event):
                self._events.append(event)
            case Newline():
                self._events.append(TokenEvent(TokenKind.WHITESPACE, self.newline))
            case Indent():
                self._depth += 1
            case Dedent():
                if self._depth == 0:
                    raise PrintInvariantError("dedent below column zero")
                self._depth -= 1
            case Slot():
                for child in self._buffer.resolve(command):
                    self._run(child)
            case CommentCommand(comment=comment):
                self._events.append(TokenEvent(TokenKind.COMMENT, comment_text(comment, self.newline)))


def render_commands(buffer: CommandBuffer, indent: str = "\t") -> list[Event]:
    return CommandRenderer(buffer, indent).render()


__all__ = ["CommandRenderer", "comment_text", "render_commands"]
