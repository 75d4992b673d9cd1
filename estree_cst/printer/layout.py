"""Delimited-list layout: reserve slots, build items, measure, backfill.

A list is laid out in one linear pass. Its separators are reserved as empty
slots before the items exist; once every item is built, the list commits to
single-line or multi-line form and fills the slots accordingly. This is not a
width-optimal fit, only a deterministic, local one.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TypeAlias

from estree_cst.ast import AstNode
from estree_cst.cst import TokenEvent
from estree_cst.printer.commands import (
    COMMA,
    DEDENT,
    INDENT,
    NEWLINE,
    SPACE,
    Append,
    Command,
    CommentCommand,
    Slot,
    kw,
)
from estree_cst.printer.state import PrintContext

ItemHandler: TypeAlias = Callable[[AstNode, PrintContext], bool]

# An unresolved slot most often ends up as `, `.
SLOT_WIDTH = 2


def measure(commands: Sequence[Command], start: int, end: int | None = None) -> int:
    """Cheap width estimate of `commands[start:end]`.

    Token text counts its length and every slot counts as `SLOT_WIDTH`
    whatever it is eventually filled with; other commands count nothing.
    """
    total = 0
    for command in commands[start:end]:
        match command:
            case Append(event=TokenEvent(text=text)):
                total += len(text)
            case Slot():
                total += SLOT_WIDTH
    return total


def flush_trailing_comments(ctx: PrintContext) -> bool:
    """Emit queued trailing comments inline.

    The first one is preceded by a space and each one after a line comment by
    a newline. Returns whether the last comment was a line comment, in which
    case whatever follows has to start on a new line.
    """
    add_newline = False
    for comment in ctx.comments.drain():
        ctx.push(NEWLINE if add_newline else SPACE, CommentCommand(comment))
        add_newline = comment.is_line
    return add_newline


def render_list(
    nodes: Sequence[AstNode | None],
    ctx: PrintContext,
    spaces: bool,
    item_handler: ItemHandler,
    separator: Sequence[Command] = (COMMA,),
) -> bool:
    if not nodes:
        return False

    start = ctx.position

    open_slot = ctx.reserve()
    join = ctx.reserve()
    close = ctx.reserve()

    ctx.push(open_slot)

    multiline = False
    prev: AstNode | None = None
    last = len(nodes) - 1

    for index, node in enumerate(nodes):
        is_last = index == last

        if node is None:
            # array hole: the separator alone keeps the slot
            ctx.push(*separator)
            prev = node
            continue

        if index > 0 and prev is None:
            ctx.push(join)

        if item_handler(node, ctx):
            multiline = True

        if not is_last:
            ctx.push(*separator)

        if ctx.comments:
            ctx.push(SPACE)
            for comment in ctx.comments.drain():
                ctx.push(CommentCommand(comment))
                if not is_last:
                    ctx.push(join)
            multiline = True
        elif not is_last:
            ctx.push(join)

        prev = node

    ctx.push(close)

    if not multiline:
        multiline = measure(ctx.buffer.commands, start) > ctx.options.max_inline_width

    if multiline:
        ctx.fill(open_slot, INDENT, NEWLINE)
        ctx.fill(join, NEWLINE)
        ctx.fill(close, DEDENT, NEWLINE)
    else:
        if spaces:
            ctx.fill(open_slot, SPACE)
            ctx.fill(close, SPACE)
        ctx.fill(join, SPACE)

    return multiline


def render_declarators(node: AstNode, ctx: PrintContext, item_handler: ItemHandler) -> bool:
    """Lay out `kind decl, decl, ...` without the terminating semicolon."""
    declarations: Sequence[AstNode] = node["declarations"]
    several = len(declarations) > 1

    start = ctx.position
    open_slot = ctx.reserve()
    join = ctx.reserve()

    ctx.push(kw(node["kind"]), SPACE, open_slot)

    multiline = False
    for index, declarator in enumerate(declarations):
        if index > 0:
            ctx.push(join)
        if item_handler(declarator, ctx):
            multiline = True

    if not multiline and several:
        multiline = measure(ctx.buffer.commands, start) > ctx.options.max_inline_width

    if multiline:
        if several:
            ctx.fill(open_slot, INDENT)
            ctx.push(DEDENT)
        ctx.fill(join, COMMA, NEWLINE)
    else:
        ctx.fill(join, COMMA, SPACE)

    return multiline


__all__ = [
    "SLOT_WIDTH",
    "ItemHandler",
    "flush_trailing_comments",
    "measure",
    "render_declarators",
    "render_list",
]
