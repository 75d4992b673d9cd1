"""Print ESTree abstract syntax trees as concrete syntax trees."""

from estree_cst.diagnostics import (
    PrintError,
    PrintInvariantError,
    UnsupportedLiteralKind,
    UnsupportedNodeType,
)
from estree_cst.pipeline import PrintResult, print_estree, print_program
from estree_cst.printer import PrinterOptions

__all__ = [
    "PrintError",
    "PrintInvariantError",
    "PrintResult",
    "PrinterOptions",
    "UnsupportedLiteralKind",
    "UnsupportedNodeType",
    "print_estree",
    "print_program",
]
