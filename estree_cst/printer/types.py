"""Layout handlers for TypeScript type annotations."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

from estree_cst.ast import AstNode
from estree_cst.printer.commands import SPACE, ident, kw, pn
from estree_cst.printer.dispatch import handle, handle_type_annotation, register_type
from estree_cst.printer.layout import render_list
from estree_cst.printer.state import PrintContext

KEYWORD_TYPES: Final[dict[str, str]] = {
    "TSNumberKeyword": "number",
    "TSStringKeyword": "string",
    "TSBooleanKeyword": "boolean",
    "TSAnyKeyword": "any",
    "TSVoidKeyword": "void",
    "TSUnknownKeyword": "unknown",
    "TSNeverKeyword": "never",
    "TSNullKeyword": "null",
    "TSUndefinedKeyword": "undefined",
    "TSObjectKeyword": "object",
    "TSBigIntKeyword": "bigint",
    "TSSymbolKeyword": "symbol",
}


@register_type(*KEYWORD_TYPES)
def _keyword(node: AstNode, ctx: PrintContext) -> bool:
    ctx.push(kw(KEYWORD_TYPES[node["type"]]))
    return False


def _parameters(node: AstNode) -> Sequence[AstNode]:
    return node.get("parameters") or node.get("params") or ()


def _return_type(node: AstNode) -> AstNode | None:
    return node.get("returnType") or node.get("typeAnnotation")


def _type_arguments(node: AstNode, ctx: PrintContext) -> bool:
    arguments = node.get("typeArguments") or node.get("typeParameters")
    if arguments is None:
        return False
    return handle_type_annotation(arguments, ctx)


@register_type("TSArrayType")
def _array(node: AstNode, ctx: PrintContext) -> bool:
    multiline = handle_type_annotation(node["elementType"], ctx)
    ctx.push(pn("["), pn("]"))
    return multiline


@register_type("TSTypeAnnotation")
def _annotation(node: AstNode, ctx: PrintContext) -> bool:
    ctx.push(pn(":"), SPACE)
    return handle_type_annotation(node["typeAnnotation"], ctx)


@register_type("TSTypeLiteral")
def _type_literal(node: AstNode, ctx: PrintContext) -> bool:
    members = node["members"]
    if not members:
        ctx.push(pn("{"), pn("}"))
        return False

    ctx.push(pn("{"))
    multiline = render_list(members, ctx, True, handle_type_annotation, (pn(";"),))
    ctx.push(pn("}"))
    return multiline


@register_type("TSPropertySignature")
def _property_signature(node: AstNode, ctx: PrintContext) -> bool:
    if node.get("readonly"):
        ctx.push(kw("readonly"), SPACE)

    if node.get("computed"):
        ctx.push(pn("["))
        multiline = handle(node["key"], ctx)
        ctx.push(pn("]"))
    else:
        multiline = handle(node["key"], ctx)

    if node.get("optional"):
        ctx.push(pn("?"))

    if node.get("typeAnnotation"):
        multiline |= handle_type_annotation(node["typeAnnotation"], ctx)

    return multiline


@register_type("TSTypeReference")
def _type_reference(node: AstNode, ctx: PrintContext) -> bool:
    multiline = handle(node["typeName"], ctx)
    return _type_arguments(node, ctx) or multiline


@register_type("TSTypeParameterInstantiation", "TSTypeParameterDeclaration")
def _type_parameters(node: AstNode, ctx: PrintContext) -> bool:
    ctx.push(pn("<"))
    multiline = False
    params = node["params"]
    for index, param in enumerate(params):
        multiline |= handle_type_annotation(param, ctx)
        if index != len(params) - 1:
            ctx.push(pn(","), SPACE)
    ctx.push(pn(">"))
    return multiline


@register_type("TSTypeParameter")
def _type_parameter(node: AstNode, ctx: PrintContext) -> bool:
    name = node["name"]
    if isinstance(name, str):
        ctx.push(ident(name))
        multiline = False
    else:
        multiline = handle(name, ctx)

    if node.get("constraint"):
        ctx.push(SPACE, kw("extends"), SPACE)
        multiline |= handle_type_annotation(node["constraint"], ctx)

    if node.get("default"):
        ctx.push(SPACE, pn("="), SPACE)
        multiline |= handle_type_annotation(node["default"], ctx)

    return multiline


@register_type("TSTypeQuery")
def _type_query(node: AstNode, ctx: PrintContext) -> bool:
    ctx.push(kw("typeof"), SPACE)
    return handle(node["exprName"], ctx)


@register_type("TSEnumMember")
def _enum_member(node: AstNode, ctx: PrintContext) -> bool:
    multiline = handle(node["id"], ctx)
    if node.get("initializer"):
        ctx.push(SPACE, pn("="), SPACE)
        multiline |= handle(node["initializer"], ctx)
    return multiline


@register_type("TSFunctionType")
def _function_type(node: AstNode, ctx: PrintContext) -> bool:
    multiline = False
    if node.get("typeParameters"):
        multiline |= handle_type_annotation(node["typeParameters"], ctx)

    ctx.push(pn("("))
    multiline |= render_list(_parameters(node), ctx, False, handle)
    ctx.push(pn(")"), SPACE, pn("=>"), SPACE)

    # the arrow replaces the annotation colon
    return_type = _return_type(node)
    if return_type is not None:
        multiline |= handle_type_annotation(return_type["typeAnnotation"], ctx)

    return multiline


@register_type("TSIndexSignature")
def _index_signature(node: AstNode, ctx: PrintContext) -> bool:
    if node.get("readonly"):
        ctx.push(kw("readonly"), SPACE)

    ctx.push(pn("["))
    multiline = render_list(_parameters(node), ctx, False, handle)
    ctx.push(pn("]"))

    if node.get("typeAnnotation"):
        multiline |= handle_type_annotation(node["typeAnnotation"], ctx)
    return multiline


@register_type("TSMethodSignature")
def _method_signature(node: AstNode, ctx: PrintContext) -> bool:
    multiline = handle(node["key"], ctx)
    if node.get("optional"):
        ctx.push(pn("?"))

    ctx.push(pn("("))
    multiline |= render_list(_parameters(node), ctx, False, handle)
    ctx.push(pn(")"))

    return_type = _return_type(node)
    if return_type is not None:
        multiline |= handle_type_annotation(return_type, ctx)
    return multiline


@register_type("TSExpressionWithTypeArguments", "TSInterfaceHeritage", "TSClassImplements")
def _heritage(node: AstNode, ctx: PrintContext) -> bool:
    multiline = handle(node["expression"], ctx)
    return _type_arguments(node, ctx) or multiline


@register_type("TSTupleType")
def _tuple(node: AstNode, ctx: PrintContext) -> bool:
    ctx.push(pn("["))
    multiline = render_list(node["elementTypes"], ctx, False, handle_type_annotation)
    ctx.push(pn("]"))
    return multiline


@register_type("TSNamedTupleMember")
def _named_tuple_member(node: AstNode, ctx: PrintContext) -> bool:
    multiline = handle(node["label"], ctx)
    if node.get("optional"):
        ctx.push(pn("?"))
    ctx.push(pn(":"), SPACE)
    return handle_type_annotation(node["elementType"], ctx) or multiline


@register_type("TSUnionType")
def _union(node: AstNode, ctx: PrintContext) -> bool:
    return render_list(node["types"], ctx, False, handle_type_annotation, (SPACE, pn("|")))


@register_type("TSIntersectionType")
def _intersection(node: AstNode, ctx: PrintContext) -> bool:
    return render_list(node["types"], ctx, False, handle_type_annotation, (SPACE, pn("&")))


@register_type("TSLiteralType")
def _literal_type(node: AstNode, ctx: PrintContext) -> bool:
    return handle(node["literal"], ctx)


@register_type("TSConditionalType")
def _conditional(node: AstNode, ctx: PrintContext) -> bool:
    multiline = handle_type_annotation(node["checkType"], ctx)
    ctx.push(SPACE, kw("extends"), SPACE)
    multiline |= handle_type_annotation(node["extendsType"], ctx)
    ctx.push(SPACE, pn("?"), SPACE)
    multiline |= handle_type_annotation(node["trueType"], ctx)
    ctx.push(SPACE, pn(":"), SPACE)
    multiline |= handle_type_annotation(node["falseType"], ctx)
    return multiline


__all__ = ["KEYWORD_TYPES"]
