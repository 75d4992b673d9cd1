"""Diagnostics."""

from estree_cst.diagnostics.codes import (
    PRINTER_INVARIANT_VIOLATED,
    PRINTER_UNSUPPORTED_LITERAL_KIND,
    PRINTER_UNSUPPORTED_NODE_TYPE,
    PRINTER_UNSUPPORTED_TYPE_ANNOTATION,
    DiagnosticSpec,
    Severity,
)
from estree_cst.diagnostics.errors import (
    PrintError,
    PrintInvariantError,
    UnsupportedLiteralKind,
    UnsupportedNodeType,
)

__all__ = [
    "PRINTER_INVARIANT_VIOLATED",
    "PRINTER_UNSUPPORTED_LITERAL_KIND",
    "PRINTER_UNSUPPORTED_NODE_TYPE",
    "PRINTER_UNSUPPORTED_TYPE_ANNOTATION",
    "DiagnosticSpec",
    "PrintError",
    "PrintInvariantError",
    "Severity",
    "UnsupportedLiteralKind",
    "UnsupportedNodeType",
]
