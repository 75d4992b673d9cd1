"""Fatal printer errors.

Printing has no recovery mode: every error below aborts the whole print and
propagates to the caller.
"""

from __future__ import annotations

from typing import Any

from estree_cst.diagnostics.codes import (
    PRINTER_INVARIANT_VIOLATED,
    PRINTER_UNSUPPORTED_LITERAL_KIND,
    PRINTER_UNSUPPORTED_NODE_TYPE,
    PRINTER_UNSUPPORTED_TYPE_ANNOTATION,
    DiagnosticSpec,
)


class PrintError(Exception):
    """Base class for errors raised while printing an AST."""

    spec: DiagnosticSpec = PRINTER_INVARIANT_VIOLATED

    def __init__(self, detail: str) -> None:
        super().__init__(f"{self.spec.code}: {detail}")
        self.detail = detail

    @property
    def code(self) -> str:
        return self.spec.code


class UnsupportedNodeType(PrintError):
    spec = PRINTER_UNSUPPORTED_NODE_TYPE

    def __init__(self, node_type: object, *, type_annotation: bool = False) -> None:
        if type_annotation:
            self.spec = PRINTER_UNSUPPORTED_TYPE_ANNOTATION
            super().__init__(f"Not implemented type annotation {node_type!r}")
        else:
            super().__init__(f"Not implemented {node_type!r}")
        self.node_type = node_type


class UnsupportedLiteralKind(PrintError):
    spec = PRINTER_UNSUPPORTED_LITERAL_KIND

    def __init__(self, value: Any) -> None:
        super().__init__(f"unsupported literal type {type(value).__name__} ({value!r})")
        self.value = value


class PrintInvariantError(PrintError):
    spec = PRINTER_INVARIANT_VIOLATED
