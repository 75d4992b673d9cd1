"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


PRINTER_UNSUPPORTED_NODE_TYPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PRINTER_UNSUPPORTED_NODE_TYPE",
    message="No printer is registered for this node type.",
    hint="Only ESTree and TypeScript-ESTree node types listed in NodeType can be printed.",
    severity="error",
    category="printer",
)

PRINTER_UNSUPPORTED_TYPE_ANNOTATION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PRINTER_UNSUPPORTED_TYPE_ANNOTATION",
    message="No printer is registered for this type annotation node.",
    severity="error",
    category="printer",
)

PRINTER_UNSUPPORTED_LITERAL_KIND: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PRINTER_UNSUPPORTED_LITERAL_KIND",
    message="Literal value is not a string, number, boolean, null, bigint or regex.",
    severity="error",
    category="literal",
)

PRINTER_INVARIANT_VIOLATED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PRINTER_INVARIANT_VIOLATED",
    message="Printer invariant violated.",
    hint="This indicates a bug in a layout handler rather than bad input.",
    severity="error",
    category="printer",
)
