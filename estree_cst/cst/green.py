"""Minimal immutable green CST representation."""

from dataclasses import dataclass
from typing import TypeAlias

from estree_cst.cst.event import Event, process_events
from estree_cst.syntax import ROOT_KIND, TokenKind


@dataclass(frozen=True, slots=True)
class GreenToken:
    kind: TokenKind
    text: str

    @property
    def text_len(self) -> int:
        return len(self.text)


@dataclass(frozen=True, slots=True)
class GreenNode:
    kind: str
    children: tuple["GreenElement", ...]

    @property
    def text_len(self) -> int:
        total = 0
        for child in self.children:
            total += child.text_len
        return total

    @property
    def text(self) -> str:
        """Exact source text of this subtree."""
        parts: list[str] = []

        def walk(node: GreenNode) -> None:
            for child in node.children:
                if isinstance(child, GreenToken):
                    parts.append(child.text)
                else:
                    walk(child)

        walk(self)
        return "".join(parts)


GreenElement: TypeAlias = GreenNode | GreenToken


class TreeBuilder:
    """Stack-based tree builder with immutable outputs."""

    def __init__(self) -> None:
        self._stack: list[tuple[str, list[GreenElement]]] = []
        self._roots: list[GreenElement] = []

    def start_node(self, kind: str) -> None:
        self._stack.append((kind, []))

    def token(self, kind: TokenKind, text: str) -> None:
        self._push_element(GreenToken(kind=kind, text=text))

    def finish_node(self) -> None:
        if not self._stack:
            raise RuntimeError("finish_node called with empty builder stack")

        kind, children = self._stack.pop()
        node = GreenNode(kind=kind, children=tuple(children))
        self._push_element(node)

    def finish(self) -> GreenNode:
        if self._stack:
            raise RuntimeError("Cannot finish tree: unclosed nodes remain on stack")

        if len(self._roots) == 1 and isinstance(self._roots[0], GreenNode):
            root = self._roots[0]
            if root.kind == ROOT_KIND:
                return root

        return GreenNode(kind=ROOT_KIND, children=tuple(self._roots))

    def _push_element(self, element: GreenElement) -> None:
        if self._stack:
            self._stack[-1][1].append(element)
            return
        self._roots.append(element)


def build_tree(events: list[Event]) -> GreenNode:
    """Realize a printer event stream into a green tree."""
    builder = TreeBuilder()
    process_events(builder, events)
    return builder.finish()
