"""ESTree input model.

AST nodes are plain read-only mappings, as produced by ESTree-compatible
parsers and their JSON serializations. This module gives them a closed type
vocabulary and typed access to the attached comments.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, TypeAlias

from estree_cst.diagnostics import UnsupportedNodeType

AstNode: TypeAlias = Mapping[str, Any]


class NodeType(StrEnum):
    """Every ESTree / TypeScript-ESTree node type with a layout handler."""

    ARRAY_EXPRESSION = "ArrayExpression"
    ARRAY_PATTERN = "ArrayPattern"
    ARROW_FUNCTION_EXPRESSION = "ArrowFunctionExpression"
    ASSIGNMENT_EXPRESSION = "AssignmentExpression"
    ASSIGNMENT_PATTERN = "AssignmentPattern"
    AWAIT_EXPRESSION = "AwaitExpression"
    BINARY_EXPRESSION = "BinaryExpression"
    BLOCK_STATEMENT = "BlockStatement"
    BREAK_STATEMENT = "BreakStatement"
    CALL_EXPRESSION = "CallExpression"
    CATCH_CLAUSE = "CatchClause"
    CHAIN_EXPRESSION = "ChainExpression"
    CLASS_BODY = "ClassBody"
    CLASS_DECLARATION = "ClassDeclaration"
    CLASS_EXPRESSION = "ClassExpression"
    CONDITIONAL_EXPRESSION = "ConditionalExpression"
    CONTINUE_STATEMENT = "ContinueStatement"
    DEBUGGER_STATEMENT = "DebuggerStatement"
    DECORATOR = "Decorator"
    DO_WHILE_STATEMENT = "DoWhileStatement"
    EMPTY_STATEMENT = "EmptyStatement"
    EXPORT_ALL_DECLARATION = "ExportAllDeclaration"
    EXPORT_DEFAULT_DECLARATION = "ExportDefaultDeclaration"
    EXPORT_NAMED_DECLARATION = "ExportNamedDeclaration"
    EXPORT_SPECIFIER = "ExportSpecifier"
    EXPRESSION_STATEMENT = "ExpressionStatement"
    FOR_STATEMENT = "ForStatement"
    FOR_IN_STATEMENT = "ForInStatement"
    FOR_OF_STATEMENT = "ForOfStatement"
    FUNCTION_DECLARATION = "FunctionDeclaration"
    FUNCTION_EXPRESSION = "FunctionExpression"
    IDENTIFIER = "Identifier"
    IF_STATEMENT = "IfStatement"
    IMPORT_DECLARATION = "ImportDeclaration"
    IMPORT_DEFAULT_SPECIFIER = "ImportDefaultSpecifier"
    IMPORT_EXPRESSION = "ImportExpression"
    IMPORT_NAMESPACE_SPECIFIER = "ImportNamespaceSpecifier"
    IMPORT_SPECIFIER = "ImportSpecifier"
    LABELED_STATEMENT = "LabeledStatement"
    LITERAL = "Literal"
    LOGICAL_EXPRESSION = "LogicalExpression"
    MEMBER_EXPRESSION = "MemberExpression"
    META_PROPERTY = "MetaProperty"
    METHOD_DEFINITION = "MethodDefinition"
    NEW_EXPRESSION = "NewExpression"
    OBJECT_EXPRESSION = "ObjectExpression"
    OBJECT_PATTERN = "ObjectPattern"
    PARENTHESIZED_EXPRESSION = "ParenthesizedExpression"
    PRIVATE_IDENTIFIER = "PrivateIdentifier"
    PROGRAM = "Program"
    PROPERTY = "Property"
    PROPERTY_DEFINITION = "PropertyDefinition"
    REST_ELEMENT = "RestElement"
    RETURN_STATEMENT = "ReturnStatement"
    SEQUENCE_EXPRESSION = "SequenceExpression"
    SPREAD_ELEMENT = "SpreadElement"
    STATIC_BLOCK = "StaticBlock"
    SUPER = "Super"
    SWITCH_CASE = "SwitchCase"
    SWITCH_STATEMENT = "SwitchStatement"
    TAGGED_TEMPLATE_EXPRESSION = "TaggedTemplateExpression"
    TEMPLATE_LITERAL = "TemplateLiteral"
    THIS_EXPRESSION = "ThisExpression"
    THROW_STATEMENT = "ThrowStatement"
    TRY_STATEMENT = "TryStatement"
    TS_AS_EXPRESSION = "TSAsExpression"
    TS_ENUM_DECLARATION = "TSEnumDeclaration"
    TS_INTERFACE_BODY = "TSInterfaceBody"
    TS_INTERFACE_DECLARATION = "TSInterfaceDeclaration"
    TS_NON_NULL_EXPRESSION = "TSNonNullExpression"
    TS_QUALIFIED_NAME = "TSQualifiedName"
    TS_SATISFIES_EXPRESSION = "TSSatisfiesExpression"
    TS_TYPE_ALIAS_DECLARATION = "TSTypeAliasDeclaration"
    UNARY_EXPRESSION = "UnaryExpression"
    UPDATE_EXPRESSION = "UpdateExpression"
    VARIABLE_DECLARATION = "VariableDeclaration"
    VARIABLE_DECLARATOR = "VariableDeclarator"
    WHILE_STATEMENT = "WhileStatement"
    WITH_STATEMENT = "WithStatement"
    YIELD_EXPRESSION = "YieldExpression"


class CommentKind(StrEnum):
    LINE = "Line"
    BLOCK = "Block"


@dataclass(frozen=True, slots=True)
class Comment:
    """A source comment attached to an AST node."""

    kind: CommentKind
    text: str

    @property
    def has_newline(self) -> bool:
        return "\n" in self.text

    @property
    def is_line(self) -> bool:
        return self.kind == CommentKind.LINE

    @staticmethod
    def from_estree(comment: Mapping[str, Any]) -> Comment:
        return Comment(kind=CommentKind(comment["type"]), text=comment["value"])


def type_name(node: AstNode) -> str:
    return node["type"]


def node_type(node: AstNode) -> NodeType:
    """Resolve the `type` field of an AST node to a supported NodeType."""
    name = node.get("type")
    try:
        return NodeType(name)
    except ValueError:
        raise UnsupportedNodeType(name) from None


def is_type(node: AstNode | None, *names: str) -> bool:
    return node is not None and node.get("type") in names


def leading_comments(node: AstNode) -> tuple[Comment, ...]:
    return _comments(node.get("leadingComments"))


def trailing_comment(node: AstNode) -> Comment | None:
    """The first trailing comment of a node; only one is ever attached."""
    comments = _comments(node.get("trailingComments"))
    return comments[0] if comments else None


def _comments(raw: Sequence[Mapping[str, Any]] | None) -> tuple[Comment, ...]:
    if not raw:
        return ()
    return tuple(Comment.from_estree(comment) for comment in raw)


def program(body: Sequence[AstNode]) -> AstNode:
    """Wrap a flat statement sequence in a synthetic module program."""
    return {"type": NodeType.PROGRAM.value, "body": list(body), "sourceType": "module"}


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
