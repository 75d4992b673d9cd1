"""Entrypoints that run an AST through commands, events and tree building."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from estree_cst.ast import AstNode, program, type_name
from estree_cst.cst import build_tree
from estree_cst.diagnostics import PrintInvariantError
from estree_cst.pipeline.result import PrintResult
from estree_cst.printer import PrintContext, PrinterOptions, handle, render_commands
from estree_cst.printer.commands import CLOSE, open_node
from estree_cst.printer.layout import flush_trailing_comments
from estree_cst.syntax import ROOT_KIND

logger = logging.getLogger(__name__)


def _resolve_root(node: AstNode | Sequence[AstNode]) -> AstNode:
    if isinstance(node, Sequence):
        return program(node)
    return node


def print_estree(node: AstNode | Sequence[AstNode], options: PrinterOptions | None = None) -> PrintResult:
    """Print an AST root, or a bare list of top-level statements, into a CST."""
    resolved_options = options if options is not None else PrinterOptions()
    root = _resolve_root(node)
    ctx = PrintContext(options=resolved_options)

    logger.debug("printing %s", type_name(root))

    ctx.push(open_node(ROOT_KIND))
    handle(root, ctx)
    # a trailing comment on the last expression has no enclosing flush point
    flush_trailing_comments(ctx)
    ctx.push(CLOSE)

    if ctx.comments:
        raise PrintInvariantError(f"{len(ctx.comments)} trailing comment(s) were never emitted")

    events = render_commands(ctx.buffer, resolved_options.indent)
    green_root = build_tree(events)

    logger.debug("printed %s: %d commands, %d events", type_name(root), len(ctx.buffer), len(events))
    return PrintResult(
        options=resolved_options,
        buffer=ctx.buffer,
        events=events,
        green_root=green_root,
    )


def print_program(node: AstNode | Sequence[AstNode], options: PrinterOptions | None = None) -> str:
    return print_estree(node, options).text
