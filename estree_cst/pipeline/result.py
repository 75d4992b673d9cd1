"""Print result carrier with lazy views over the built tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from estree_cst.cst import from_green

if TYPE_CHECKING:
    from estree_cst.cst import Event, GreenNode, SyntaxNode
    from estree_cst.printer import CommandBuffer, PrinterOptions


@dataclass(slots=True)
class PrintResult:
    """Everything one print produced: commands, events and the green tree."""

    options: PrinterOptions
    buffer: CommandBuffer
    events: list[Event]
    green_root: GreenNode
    _syntax_root: SyntaxNode | None = field(default=None, init=False, repr=False)

    @property
    def text(self) -> str:
        return self.green_root.text

    def syntax_root(self) -> SyntaxNode:
        if self._syntax_root is None:
            self._syntax_root = from_green(self.green_root)
        return self._syntax_root
