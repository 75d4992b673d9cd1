"""Operator precedence and parenthesization."""

from __future__ import annotations

from typing import Final

from estree_cst.ast import AstNode, NodeType
from estree_cst.diagnostics import UnsupportedNodeType

OPERATOR_PRECEDENCE: Final[dict[str, int]] = {
    "||": 2,
    "&&": 3,
    "??": 4,
    "|": 5,
    "^": 6,
    "&": 7,
    "==": 8,
    "!=": 8,
    "===": 8,
    "!==": 8,
    "<": 9,
    ">": 9,
    "<=": 9,
    ">=": 9,
    "in": 9,
    "instanceof": 9,
    "<<": 10,
    ">>": 10,
    ">>>": 10,
    "+": 11,
    "-": 11,
    "*": 12,
    "%": 12,
    "/": 12,
    "**": 13,
}

# Coarse binding strength of whole node families; higher binds tighter.
EXPRESSION_PRECEDENCE: Final[dict[str, int]] = {
    "JSXFragment": 20,
    "JSXElement": 20,
    "ArrayPattern": 20,
    "ObjectPattern": 20,
    "ArrayExpression": 20,
    "TaggedTemplateExpression": 20,
    "ThisExpression": 20,
    "Identifier": 20,
    "TemplateLiteral": 20,
    "Super": 20,
    "SequenceExpression": 20,
    "MemberExpression": 19,
    "MetaProperty": 19,
    "CallExpression": 19,
    "ChainExpression": 19,
    "ImportExpression": 19,
    "NewExpression": 19,
    "Literal": 18,
    "TSSatisfiesExpression": 18,
    "TSInstantiationExpression": 18,
    "TSNonNullExpression": 18,
    "TSTypeAssertion": 18,
    "AwaitExpression": 17,
    "ClassExpression": 17,
    "FunctionExpression": 17,
    "ObjectExpression": 17,
    "TSAsExpression": 16,
    "UpdateExpression": 16,
    "UnaryExpression": 15,
    "BinaryExpression": 14,
    "LogicalExpression": 13,
    "ConditionalExpression": 4,
    "ArrowFunctionExpression": 3,
    "AssignmentExpression": 3,
    "YieldExpression": 2,
    "RestElement": 1,
}

_UNARY = EXPRESSION_PRECEDENCE["UnaryExpression"]
_BINARY = EXPRESSION_PRECEDENCE["BinaryExpression"]
_LOGICAL = EXPRESSION_PRECEDENCE["LogicalExpression"]


def unwrap(node: AstNode) -> AstNode:
    """Look through explicit parentheses kept by the parser."""
    while node.get("type") == NodeType.PARENTHESIZED_EXPRESSION:
        node = node["expression"]
    return node


def group_precedence(node: AstNode) -> int | None:
    return EXPRESSION_PRECEDENCE.get(unwrap(node).get("type"))


def binds_looser(node: AstNode, parent_type: NodeType) -> bool:
    """Whether `node` needs parentheses to sit where `parent_type` expects a tighter operand.

    Node kinds without a known precedence are assumed to bind tightly.
    """
    precedence = group_precedence(node)
    return precedence is not None and precedence < EXPRESSION_PRECEDENCE[parent_type]


def _required_group(node: AstNode) -> int:
    precedence = EXPRESSION_PRECEDENCE.get(node.get("type"))
    if precedence is None:
        raise UnsupportedNodeType(node.get("type"))
    return precedence


def _operator(node: AstNode) -> int:
    operator = node.get("operator")
    precedence = OPERATOR_PRECEDENCE.get(operator)
    if precedence is None:
        raise UnsupportedNodeType(f"{node.get('type')} operator {operator!r}")
    return precedence


def needs_parens(node: AstNode, parent: AstNode, is_right: bool) -> bool:
    """Decide whether `node`, an operand of `parent`, must be parenthesized."""
    node = unwrap(node)

    if node.get("type") == NodeType.PRIVATE_IDENTIFIER:
        return False

    # `??` cannot be mixed with `||` / `&&` without explicit grouping.
    if (
        node.get("type") == NodeType.LOGICAL_EXPRESSION
        and parent.get("type") == NodeType.LOGICAL_EXPRESSION
        and (parent.get("operator") == "??") != (node.get("operator") == "??")
    ):
        return True

    precedence = _required_group(node)
    parent_precedence = _required_group(parent)

    if precedence != parent_precedence:
        # A bare unary operand on the left of `**` is a syntax error.
        return (
            not is_right
            and precedence == _UNARY
            and parent_precedence == _BINARY
            and parent.get("operator") == "**"
        ) or precedence < parent_precedence

    if precedence not in (_BINARY, _LOGICAL):
        return False

    if node.get("operator") == "**" and parent.get("operator") == "**":
        # right-to-left associativity
        return not is_right

    if is_right:
        return _operator(node) <= _operator(parent)

    return _operator(node) < _operator(parent)


__all__ = [
    "EXPRESSION_PRECEDENCE",
    "OPERATOR_PRECEDENCE",
    "binds_looser",
    "group_precedence",
    "needs_parens",
    "unwrap",
]
