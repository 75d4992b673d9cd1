"""Layout commands and the buffer they are collected in.

Handlers never write tokens directly: they append commands to a
`CommandBuffer`. Separators whose shape depends on content that has not been
built yet are reserved as slots in the buffer's arena and filled once the
enclosing group has decided between single-line and multi-line layout.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from estree_cst.ast import Comment
from estree_cst.cst import FINISH, StartEvent, TokenEvent
from estree_cst.cst.event import Event
from estree_cst.diagnostics import PrintInvariantError
from estree_cst.syntax import TokenKind


@dataclass(frozen=True, slots=True)
class Append:
    event: Event


@dataclass(frozen=True, slots=True)
class Slot:
    """Reference to a reserved, possibly not yet filled, arena entry."""

    index: int


@dataclass(frozen=True, slots=True)
class Newline:
    pass


@dataclass(frozen=True, slots=True)
class Indent:
    pass


@dataclass(frozen=True, slots=True)
class Dedent:
    pass


@dataclass(frozen=True, slots=True)
class CommentCommand:
    comment: Comment


Command: TypeAlias = Append | Slot | Newline | Indent | Dedent | CommentCommand


NEWLINE = Newline()
INDENT = Indent()
DEDENT = Dedent()
CLOSE = Append(FINISH)


def _token(kind: TokenKind, text: str) -> Append:
    return Append(TokenEvent(kind=kind, text=text))


def pn(text: str) -> Append:
    return _token(TokenKind.PUNCTUATOR, text)


def kw(text: str) -> Append:
    return _token(TokenKind.KEYWORD, text)


def ident(text: str) -> Append:
    return _token(TokenKind.IDENTIFIER, text)


def ws(text: str) -> Append:
    return _token(TokenKind.WHITESPACE, text)


def lit(text: str) -> Append:
    return _token(TokenKind.LITERAL, text)


def open_node(kind: str) -> Append:
    return Append(StartEvent(kind=str(kind)))


SPACE = ws(" ")
COMMA = pn(",")


class CommandBuffer:
    """Ordered commands plus the arena backing their slots."""

    def __init__(self) -> None:
        self.commands: list[Command] = []
        self._slots: list[tuple[Command, ...] | None] = []

    def __len__(self) -> int:
        return len(self.commands)

    def push(self, *commands: Command) -> None:
        self.commands.extend(commands)

    def reserve(self) -> Slot:
        self._slots.append(None)
        return Slot(index=len(self._slots) - 1)

    def fill(self, slot: Slot, *commands: Command) -> None:
        if self._slots[slot.index] is not None:
            raise PrintInvariantError(f"slot {slot.index} filled twice")
        self._slots[slot.index] = commands

    def resolve(self, slot: Slot) -> tuple[Command, ...]:
        """Commands a slot stands for; an unfilled slot renders nothing."""
        return self._slots[slot.index] or ()

    def is_filled(self, slot: Slot) -> bool:
        return self._slots[slot.index] is not None


__all__ = [
    "CLOSE",
    "COMMA",
    "DEDENT",
    "INDENT",
    "NEWLINE",
    "SPACE",
    "Append",
    "Command",
    "CommandBuffer",
    "CommentCommand",
    "Dedent",
    "Indent",
    "Newline",
    "Slot",
    "ident",
    "kw",
    "lit",
    "open_node",
    "pn",
    "ws",
]
