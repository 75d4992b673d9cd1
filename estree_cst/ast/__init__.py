"""ESTree input vocabulary."""

from estree_cst.ast.model import (
    AstNode,
    Comment,
    CommentKind,
    NodeType,
    is_type,
    leading_comments,
    node_type,
    program,
    trailing_comment,
    type_name,
)

__all__ = [
    "AstNode",
    "Comment",
    "CommentKind",
    "NodeType",
    "is_type",
    "leading_comments",
    "node_type",
    "program",
    "trailing_comment",
    "type_name",
]
