"""Node dispatch and comment placement around every printed node."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import TypeAlias

from estree_cst.ast import (
    AstNode,
    Comment,
    NodeType,
    leading_comments,
    node_type,
    trailing_comment,
    type_name,
)
from estree_cst.diagnostics import UnsupportedNodeType
from estree_cst.printer.commands import CLOSE, NEWLINE, SPACE, CommentCommand, open_node, pn
from estree_cst.printer.state import PrintContext

logger = logging.getLogger(__name__)

Handler: TypeAlias = Callable[[AstNode, PrintContext], bool]

NODE_HANDLERS: dict[NodeType, Handler] = {}
TYPE_HANDLERS: dict[str, Handler] = {}


def register(*kinds: NodeType) -> Callable[[Handler], Handler]:
    """Register one handler for every node type sharing its layout."""

    def decorator(handler: Handler) -> Handler:
        for kind in kinds:
            if kind in NODE_HANDLERS:
                raise ValueError(f"Duplicate handler for {kind}")
            NODE_HANDLERS[kind] = handler
        return handler

    return decorator


def register_type(*kinds: str) -> Callable[[Handler], Handler]:
    def decorator(handler: Handler) -> Handler:
        for kind in kinds:
            if kind in TYPE_HANDLERS:
                raise ValueError(f"Duplicate type annotation handler for {kind}")
            TYPE_HANDLERS[kind] = handler
        return handler

    return decorator


def prepend_comments(comments: Iterable[Comment], ctx: PrintContext, newlines: bool) -> None:
    for comment in comments:
        ctx.push(CommentCommand(comment))

        if newlines or comment.is_line or comment.has_newline:
            ctx.push(NEWLINE)
        else:
            ctx.push(SPACE)


def emit_leading_comments(node: AstNode, ctx: PrintContext) -> None:
    prepend_comments(leading_comments(node), ctx, newlines=False)


def queue_trailing_comment(node: AstNode, ctx: PrintContext) -> None:
    """Hand the trailing comment of `node` to whoever lays out what follows it."""
    comment = trailing_comment(node)
    if comment is not None:
        ctx.comments.push(comment)


def _wrap(node: AstNode, kind: str, handler: Handler, ctx: PrintContext, skip_leading: bool) -> bool:
    ctx.push(open_node(kind))

    if not skip_leading:
        emit_leading_comments(node, ctx)

    multiline = handler(node, ctx)

    queue_trailing_comment(node, ctx)

    ctx.push(CLOSE)
    return multiline


def handle(node: AstNode, ctx: PrintContext, *, skip_leading: bool = False) -> bool:
    """Print one AST node; returns whether its layout spans several lines."""
    kind = node_type(node)
    handler = NODE_HANDLERS.get(kind)
    if handler is None:
        logger.debug("no layout handler registered for %s", kind)
        raise UnsupportedNodeType(kind.value)

    return _wrap(node, kind.value, handler, ctx, skip_leading)


def handle_type_annotation(node: AstNode, ctx: PrintContext) -> bool:
    kind = type_name(node)
    handler = TYPE_HANDLERS.get(kind)
    if handler is None:
        logger.debug("no type annotation handler registered for %s", kind)
        raise UnsupportedNodeType(kind, type_annotation=True)

    return _wrap(node, kind, handler, ctx, skip_leading=False)


def handle_wrapped(node: AstNode, ctx: PrintContext, parens: bool) -> bool:
    """Print `node`, inside explicit parentheses when `parens` is set."""
    if not parens:
        return handle(node, ctx)

    ctx.push(pn("("))
    multiline = handle(node, ctx)
    ctx.push(pn(")"))
    return multiline


__all__ = [
    "NODE_HANDLERS",
    "TYPE_HANDLERS",
    "Handler",
    "emit_leading_comments",
    "handle",
    "handle_type_annotation",
    "handle_wrapped",
    "prepend_comments",
    "queue_trailing_comment",
    "register",
    "register_type",
]
