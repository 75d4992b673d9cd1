"""ESTree to CST printer: layout commands, literal encoders and rendering."""

# Handler modules register themselves with the dispatcher on import.
from estree_cst.printer import handlers, types  # noqa: F401
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
from estree_cst.printer.dispatch import (
    NODE_HANDLERS,
    TYPE_HANDLERS,
    handle,
    handle_type_annotation,
)
from estree_cst.printer.handlers import handle_body
from estree_cst.printer.layout import measure, render_declarators, render_list
from estree_cst.printer.literals import (
    RegexRenderer,
    default_regex_renderer,
    encode_literal,
    encode_number,
    encode_string,
)
from estree_cst.printer.options import PrinterOptions
from estree_cst.printer.precedence import needs_parens
from estree_cst.printer.renderer import CommandRenderer, render_commands
from estree_cst.printer.state import CommentQueue, PrintContext

__all__ = [
    "NODE_HANDLERS",
    "TYPE_HANDLERS",
    "Append",
    "Command",
    "CommandBuffer",
    "CommandRenderer",
    "CommentCommand",
    "CommentQueue",
    "Dedent",
    "Indent",
    "Newline",
    "PrintContext",
    "PrinterOptions",
    "RegexRenderer",
    "Slot",
    "default_regex_renderer",
    "encode_literal",
    "encode_number",
    "encode_string",
    "handle",
    "handle_body",
    "handle_type_annotation",
    "measure",
    "needs_parens",
    "render_commands",
    "render_declarators",
    "render_list",
]
