"""Token and node kinds shared by the printer and the CST."""

from estree_cst.syntax.kind import ROOT_KIND, LiteralNodeKind, TokenKind

__all__ = [
    "ROOT_KIND",
    "LiteralNodeKind",
    "TokenKind",
]
