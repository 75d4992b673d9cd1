"""Red CST wrappers over immutable green nodes/tokens."""

from __future__ import annotations

from typing import TypeAlias

from estree_cst.cst.green import GreenNode
from estree_cst.syntax import TokenKind


class SyntaxToken:
    __slots__ = (
        "kind",
        "text",
        "parent",
        "index_in_parent",
        "_start",
    )

    def __init__(
        self,
        *,
        kind: TokenKind,
        text: str,
        parent: SyntaxNode,
        index_in_parent: int,
        start: int,
    ) -> None:
        self.kind = kind
        self.text = text
        self.parent = parent
        self.index_in_parent = index_in_parent
        self._start = start

    @property
    def start(self) -> int:
        return self._start

    @property
    def end(self) -> int:
        return self._start + len(self.text)

    @property
    def is_trivia(self) -> bool:
        return self.kind.is_trivia

    def next_sibling(self) -> SyntaxElement | None:
        return _sibling(self.parent, self.index_in_parent + 1)

    def prev_sibling(self) -> SyntaxElement | None:
        return _sibling(self.parent, self.index_in_parent - 1)


class SyntaxNode:
    __slots__ = (
        "kind",
        "parent",
        "index_in_parent",
        "_children",
        "_start",
        "_end",
    )

    def __init__(
        self,
        *,
        kind: str,
        parent: SyntaxNode | None,
        index_in_parent: int,
        start: int,
    ) -> None:
        self.kind = kind
        self.parent = parent
        self.index_in_parent = index_in_parent
        self._start = start
        self._end = start
        self._children: tuple[SyntaxElement, ...] = ()

    @property
    def start(self) -> int:
        return self._start

    @property
    def end(self) -> int:
        return self._end

    @property
    def text(self) -> str:
        return "".join(token.text for token in self.descendants_tokens())

    @property
    def children(self) -> tuple[SyntaxElement, ...]:
        return self._children

    def child_nodes(self) -> tuple[SyntaxNode, ...]:
        return tuple(child for child in self._children if isinstance(child, SyntaxNode))

    def child_tokens(self) -> tuple[SyntaxToken, ...]:
        return tuple(child for child in self._children if isinstance(child, SyntaxToken))

    def descendants_tokens(self) -> tuple[SyntaxToken, ...]:
        tokens: list[SyntaxToken] = []

        def walk(node: SyntaxNode) -> None:
            for child in node.children:
                if isinstance(child, SyntaxToken):
                    tokens.append(child)
                else:
                    walk(child)

        walk(self)
        return tuple(tokens)

    def descendants(self, kind: str) -> tuple[SyntaxNode, ...]:
        """All nodes of `kind` below this one, in document order."""
        found: list[SyntaxNode] = []

        def walk(node: SyntaxNode) -> None:
            for child in node.child_nodes():
                if child.kind == kind:
                    found.append(child)
                walk(child)

        walk(self)
        return tuple(found)

    def significant_tokens(self) -> tuple[SyntaxToken, ...]:
        return tuple(token for token in self.descendants_tokens() if not token.is_trivia)

    def next_sibling(self) -> SyntaxElement | None:
        if self.parent is None:
            return None
        return _sibling(self.parent, self.index_in_parent + 1)

    def prev_sibling(self) -> SyntaxElement | None:
        if self.parent is None:
            return None
        return _sibling(self.parent, self.index_in_parent - 1)


SyntaxElement: TypeAlias = SyntaxNode | SyntaxToken


def from_green(root: GreenNode) -> SyntaxNode:
    red_root, _ = _build_node(
        green=root,
        parent=None,
        index_in_parent=0,
        start=0,
    )
    return red_root


def _sibling(parent: SyntaxNode, index: int) -> SyntaxElement | None:
    if index < 0 or index >= len(parent.children):
        return None
    return parent.children[index]


def _build_node(
    *,
    green: GreenNode,
    parent: SyntaxNode | None,
    index_in_parent: int,
    start: int,
) -> tuple[SyntaxNode, int]:
    node = SyntaxNode(
        kind=green.kind,
        parent=parent,
        index_in_parent=index_in_parent,
        start=start,
    )

    current = start
    children: list[SyntaxElement] = []
    for child_index, child in enumerate(green.children):
        if isinstance(child, GreenNode):
            red_child, next_offset = _build_node(
                green=child,
                parent=node,
                index_in_parent=child_index,
                start=current,
            )
            children.append(red_child)
            current = next_offset
            continue

        token = SyntaxToken(
            kind=child.kind,
            text=child.text,
            parent=node,
            index_in_parent=child_index,
            start=current,
        )
        children.append(token)
        current = token.end

    node._children = tuple(children)
    node._end = current
    return node, current


__all__ = [
    "SyntaxElement",
    "SyntaxNode",
    "SyntaxToken",
    "from_green",
]
