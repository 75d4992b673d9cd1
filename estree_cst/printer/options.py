"""Printer configuration options."""

from dataclasses import dataclass

from estree_cst.printer.literals import RegexRenderer, default_regex_renderer

DEFAULT_INDENT = "\t"
DEFAULT_MAX_INLINE_WIDTH = 50


@dataclass(frozen=True, slots=True)
class PrinterOptions:
    """Knobs of the canonical rendering.

    The defaults reproduce the canonical output; other values exist for
    embedding the printer in tools with their own house style.
    """

    indent: str = DEFAULT_INDENT
    max_inline_width: int = DEFAULT_MAX_INLINE_WIDTH
    regex_renderer: RegexRenderer = default_regex_renderer

    def __post_init__(self) -> None:
        if self.indent.strip(" \t"):
            raise ValueError("indent must consist of spaces and tabs only")
        if self.max_inline_width < 0:
            raise ValueError("max_inline_width cannot be negative")
