"""Layout handlers for ESTree statements, expressions and declarations.

Each handler appends the fixed syntax of its node, recurses into children in
grammar order and returns whether anything it printed spans several lines.
Node families that share a layout register a single handler for all of their
types.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Final

from estree_cst.ast import AstNode, NodeType, is_type, leading_comments, type_name
from estree_cst.printer.commands import (
    CLOSE,
    COMMA,
    DEDENT,
    INDENT,
    NEWLINE,
    SPACE,
    Append,
    CommentCommand,
    ident,
    kw,
    lit,
    open_node,
    pn,
    ws,
)
from estree_cst.printer.dispatch import (
    emit_leading_comments,
    handle,
    handle_type_annotation,
    handle_wrapped,
    prepend_comments,
    queue_trailing_comment,
    register,
)
from estree_cst.printer.layout import (
    flush_trailing_comments,
    render_declarators,
    render_list,
)
from estree_cst.printer.literals import encode_literal
from estree_cst.printer.precedence import binds_looser, group_precedence, needs_parens, unwrap
from estree_cst.printer.state import PrintContext

# Statement kinds that read as one group when repeated back to back.
GROUPED_STATEMENT_TYPES: Final[frozenset[str]] = frozenset(
    {
        NodeType.IMPORT_DECLARATION,
        NodeType.VARIABLE_DECLARATION,
        NodeType.EXPORT_DEFAULT_DECLARATION,
        NodeType.EXPORT_NAMED_DECLARATION,
    }
)

_CONDITIONAL_PRECEDENCE: Final[int] = 4
_AWAIT_PRECEDENCE: Final[int] = 17

# Leading operands that would turn an expression statement into a block or declaration.
_STATEMENT_AMBIGUOUS: Final[frozenset[str]] = frozenset(
    {
        NodeType.OBJECT_EXPRESSION,
        NodeType.OBJECT_PATTERN,
        NodeType.FUNCTION_EXPRESSION,
        NodeType.CLASS_EXPRESSION,
    }
)
# Leading operands that would turn a concise arrow body into a block.
_ARROW_BODY_AMBIGUOUS: Final[frozenset[str]] = frozenset({NodeType.OBJECT_EXPRESSION, NodeType.OBJECT_PATTERN})


def _keyword_space(ctx: PrintContext, *words: str) -> None:
    for word in words:
        ctx.push(kw(word), SPACE)


def _type_annotation(node: AstNode, ctx: PrintContext, field: str = "typeAnnotation") -> bool:
    annotation = node.get(field)
    if annotation is None:
        return False
    return handle_type_annotation(annotation, ctx)


def _type_arguments(node: AstNode, ctx: PrintContext) -> bool:
    arguments = node.get("typeArguments") or node.get("typeParameters")
    if arguments is None:
        return False
    return handle_type_annotation(arguments, ctx)


def _params(params: Sequence[AstNode], ctx: PrintContext) -> bool:
    ctx.push(pn("("))
    multiline = render_list(params, ctx, False, handle)
    ctx.push(pn(")"))
    return multiline


def _computed_key(node: AstNode, ctx: PrintContext) -> bool:
    if not node.get("computed"):
        return handle(node["key"], ctx)

    ctx.push(pn("["))
    multiline = handle(node["key"], ctx)
    ctx.push(pn("]"))
    return multiline


def _decorators(node: AstNode, ctx: PrintContext) -> bool:
    multiline = False
    for decorator in node.get("decorators") or ():
        multiline |= handle(decorator, ctx)
    return multiline


def _declaration_head(node: AstNode, ctx: PrintContext) -> bool:
    """A variable declaration in a loop head: no terminator."""
    ctx.push(open_node(type_name(node)))
    emit_leading_comments(node, ctx)
    multiline = render_declarators(node, ctx, handle)
    queue_trailing_comment(node, ctx)
    ctx.push(CLOSE)
    return multiline


def _has_call_expression(node: AstNode | None) -> bool:
    while node is not None:
        if is_type(node, NodeType.CALL_EXPRESSION):
            return True
        if not is_type(node, NodeType.MEMBER_EXPRESSION):
            return False
        node = node["object"]
    return False


def _name(node: AstNode | None) -> object:
    if node is None:
        return None
    if is_type(node, NodeType.LITERAL):
        return node.get("value")
    return node.get("name")


def _test_needs_parens(test: AstNode) -> bool:
    precedence = group_precedence(test)
    return not (precedence is not None and precedence > _CONDITIONAL_PRECEDENCE)


def _operand_needs_parens(operand: AstNode, parent_type: NodeType) -> bool:
    """Object of a member access, a callee or a tag; a parenthesized optional chain stays closed."""
    return binds_looser(operand, parent_type) or is_type(unwrap(operand), NodeType.CHAIN_EXPRESSION)


def _left_operand(node: AstNode) -> AstNode | None:
    """The operand printed first inside `node`, unless it gets its own parentheses."""
    operand: AstNode | None
    match type_name(node):
        case NodeType.BINARY_EXPRESSION | NodeType.LOGICAL_EXPRESSION:
            operand = node["left"]
            wrapped = needs_parens(operand, node, False)
        case NodeType.CONDITIONAL_EXPRESSION:
            operand = node["test"]
            wrapped = _test_needs_parens(operand)
        case NodeType.MEMBER_EXPRESSION:
            operand = node["object"]
            wrapped = _operand_needs_parens(operand, NodeType.MEMBER_EXPRESSION)
        case NodeType.CALL_EXPRESSION:
            operand = node["callee"]
            wrapped = _operand_needs_parens(operand, NodeType.CALL_EXPRESSION)
        case NodeType.TAGGED_TEMPLATE_EXPRESSION:
            operand = node["tag"]
            wrapped = _operand_needs_parens(operand, NodeType.MEMBER_EXPRESSION)
        case NodeType.TS_AS_EXPRESSION | NodeType.TS_SATISFIES_EXPRESSION:
            operand = node.get("expression")
            wrapped = operand is not None and binds_looser(operand, NodeType(type_name(node)))
        case NodeType.UPDATE_EXPRESSION if not node.get("prefix"):
            operand = node["argument"]
            wrapped = False
        case NodeType.ASSIGNMENT_EXPRESSION:
            operand = node["left"]
            wrapped = False
        case NodeType.CHAIN_EXPRESSION | NodeType.PARENTHESIZED_EXPRESSION | NodeType.TS_NON_NULL_EXPRESSION:
            operand = node["expression"]
            wrapped = False
        case _:
            return None
    return None if wrapped else operand


def _left_edge(expression: AstNode) -> Iterator[AstNode]:
    """`expression` and every operand its printed text starts with, outermost first."""
    node: AstNode | None = expression
    while node is not None:
        yield node
        node = _left_operand(node)


def _starts_with(expression: AstNode, kinds: frozenset[str]) -> bool:
    *_, first = _left_edge(expression)
    return type_name(first) in kinds


def _comment_breaks_line(expression: AstNode) -> bool:
    """Whether a leading comment puts a line break before the first token of `expression`."""
    return any(
        comment.is_line or comment.has_newline
        for node in _left_edge(expression)
        for comment in leading_comments(node)
    )


def handle_body(nodes: Sequence[AstNode], ctx: PrintContext) -> None:
    """Print a statement sequence with blank-line margins between groups."""
    last_type: str = NodeType.EMPTY_STATEMENT
    first = True
    needs_margin = False

    for statement in nodes:
        current_type = type_name(statement)
        if current_type == NodeType.EMPTY_STATEMENT:
            continue

        margin = ctx.reserve()

        if not first:
            ctx.push(margin, NEWLINE)
        first = False

        prepend_comments(leading_comments(statement), ctx, newlines=True)

        multiline = handle(statement, ctx, skip_leading=True)

        if (
            multiline
            or needs_margin
            or (
                (current_type in GROUPED_STATEMENT_TYPES or last_type in GROUPED_STATEMENT_TYPES)
                and last_type != current_type
            )
        ):
            ctx.fill(margin, ws("\n"))

        flush_trailing_comments(ctx)

        needs_margin = multiline
        last_type = current_type


# -- shared families --------------------------------------------------------


@register(NodeType.ARRAY_EXPRESSION, NodeType.ARRAY_PATTERN)
def _array(node: AstNode, ctx: PrintContext) -> bool:
    ctx.push(pn("["))
    multiline = render_list(node["elements"], ctx, False, handle)
    ctx.push(pn("]"))
    return multiline | _type_annotation(node, ctx)


@register(NodeType.BINARY_EXPRESSION, NodeType.LOGICAL_EXPRESSION)
def _binary(node: AstNode, ctx: PrintContext) -> bool:
    left = node["left"]
    right = node["right"]
    operator = node["operator"]

    multiline = handle_wrapped(left, ctx, needs_parens(left, node, False))
    ctx.push(SPACE, kw(operator) if operator.isalpha() else pn(operator), SPACE)
    multiline |= handle_wrapped(right, ctx, needs_parens(right, node, True))
    return multiline


@register(NodeType.BLOCK_STATEMENT, NodeType.CLASS_BODY)
def _block(node: AstNode, ctx: PrintContext) -> bool:
    body = node["body"]
    if not body:
        ctx.push(pn("{"), pn("}"))
        return False

    ctx.push(pn("{"), INDENT, NEWLINE)
    handle_body(body, ctx)
    ctx.push(DEDENT, NEWLINE, pn("}"))
    return True


@register(NodeType.CALL_EXPRESSION, NodeType.NEW_EXPRESSION)
def _call(node: AstNode, ctx: PrintContext) -> bool:
    is_new = is_type(node, NodeType.NEW_EXPRESSION)
    if is_new:
        ctx.push(kw("new"), SPACE)

    callee = node["callee"]
    parens = _operand_needs_parens(callee, NodeType.CALL_EXPRESSION) or (is_new and _has_call_expression(callee))
    multiline = handle_wrapped(callee, ctx, parens)

    if node.get("optional"):
        ctx.push(pn("?."))

    multiline |= _type_arguments(node, ctx)

    open_slot = ctx.reserve()
    join = ctx.reserve()
    close = ctx.reserve()

    ctx.push(pn("("), open_slot)

    # A multi-line final argument does not force the others apart.
    arguments: Sequence[AstNode] = node.get("arguments") or ()
    arguments_multiline = False
    final_multiline = False

    for index, argument in enumerate(arguments):
        if index > 0:
            if ctx.comments:
                ctx.push(COMMA, SPACE)
                for comment in ctx.comments.drain():
                    ctx.push(CommentCommand(comment))
                    if comment.is_line:
                        arguments_multiline = True
                        ctx.push(NEWLINE)
                    else:
                        ctx.push(SPACE)
            else:
                ctx.push(join)

        if index == len(arguments) - 1:
            final_multiline = handle(argument, ctx)
        else:
            arguments_multiline |= handle(argument, ctx)

    if arguments and ctx.comments and flush_trailing_comments(ctx):
        arguments_multiline = True

    ctx.push(close, pn(")"))

    if arguments_multiline:
        ctx.fill(open_slot, INDENT, NEWLINE)
        ctx.fill(join, COMMA, NEWLINE)
        ctx.fill(close, DEDENT, NEWLINE)
    else:
        ctx.fill(join, COMMA, SPACE)

    return multiline or arguments_multiline or final_multiline


@register(NodeType.CLASS_DECLARATION, NodeType.CLASS_EXPRESSION)
def _class(node: AstNode, ctx: PrintContext) -> bool:
    multiline = _decorators(node, ctx)
    if node.get("abstract"):
        _keyword_space(ctx, "abstract")
    _keyword_space(ctx, "class")

    if node.get("id"):
        multiline |= handle(node["id"], ctx)
        multiline |= _type_annotation(node, ctx, "typeParameters")
        ctx.push(SPACE)

    if node.get("superClass"):
        _keyword_space(ctx, "extends")
        multiline |= handle(node["superClass"], ctx)
        multiline |= _type_annotation(node, ctx, "superTypeArguments")
        ctx.push(SPACE)

    if node.get("implements"):
        _keyword_space(ctx, "implements")
        multiline |= render_list(node["implements"], ctx, False, handle_type_annotation)
        ctx.push(SPACE)

    return handle(node["body"], ctx) or multiline


@register(NodeType.FOR_IN_STATEMENT, NodeType.FOR_OF_STATEMENT)
def _for_in_of(node: AstNode, ctx: PrintContext) -> bool:
    _keyword_space(ctx, "for")
    if is_type(node, NodeType.FOR_OF_STATEMENT) and node.get("await"):
        _keyword_space(ctx, "await")
    ctx.push(pn("("))

    left = node["left"]
    if is_type(left, NodeType.VARIABLE_DECLARATION):
        multiline = _declaration_head(left, ctx)
    else:
        multiline = handle(left, ctx)

    ctx.push(SPACE, kw("in" if is_type(node, NodeType.FOR_IN_STATEMENT) else "of"), SPACE)
    multiline |= handle(node["right"], ctx)
    ctx.push(pn(")"), SPACE)
    return handle(node["body"], ctx) or multiline


@register(NodeType.FUNCTION_DECLARATION, NodeType.FUNCTION_EXPRESSION)
def _function(node: AstNode, ctx: PrintContext) -> bool:
    if node.get("async"):
        _keyword_space(ctx, "async")
    ctx.push(kw("function"))
    if node.get("generator"):
        ctx.push(pn("*"))
    ctx.push(SPACE)

    multiline = False
    if node.get("id"):
        multiline |= handle(node["id"], ctx)

    multiline |= _type_annotation(node, ctx, "typeParameters")
    multiline |= _params(node["params"], ctx)
    multiline |= _type_annotation(node, ctx, "returnType")

    ctx.push(SPACE)
    return handle(node["body"], ctx) or multiline


@register(NodeType.REST_ELEMENT, NodeType.SPREAD_ELEMENT)
def _rest(node: AstNode, ctx: PrintContext) -> bool:
    ctx.push(pn("..."))
    multiline = handle(node["argument"], ctx)
    return multiline | _type_annotation(node, ctx)


# -- expressions ------------------------------------------------------------


@register(NodeType.ARROW_FUNCTION_EXPRESSION)
def _arrow(node: AstNode, ctx: PrintContext) -> bool:
    if node.get("async"):
        _keyword_space(ctx, "async")

    multiline = _type_annotation(node, ctx, "typeParameters")
    multiline |= _params(node["params"], ctx)
    multiline |= _type_annotation(node, ctx, "returnType")
    ctx.push(SPACE, pn("=>"), SPACE)

    body = node["body"]
    return handle_wrapped(body, ctx, _starts_with(body, _ARROW_BODY_AMBIGUOUS)) or multiline


@register(NodeType.ASSIGNMENT_EXPRESSION)
def _assignment(node: AstNode, ctx: PrintContext) -> bool:
    multiline = handle(node["left"], ctx)
    ctx.push(SPACE, pn(node["operator"]), SPACE)
    return handle(node["right"], ctx) or multiline


@register(NodeType.ASSIGNMENT_PATTERN)
def _assignment_pattern(node: AstNode, ctx: PrintContext) -> bool:
    multiline = handle(node["left"], ctx)
    ctx.push(SPACE, pn("="), SPACE)
    return handle(node["right"], ctx) or multiline


@register(NodeType.AWAIT_EXPRESSION)
def _await(node: AstNode, ctx: PrintContext) -> bool:
    argument = node.get("argument")
    if argument is None:
        ctx.push(kw("await"))
        return False

    precedence = group_precedence(argument)
    ctx.push(kw("await"), SPACE)
    return handle_wrapped(argument, ctx, precedence is not None and precedence < _AWAIT_PRECEDENCE)


@register(NodeType.CHAIN_EXPRESSION)
def _chain(node: AstNode, ctx: PrintContext) -> bool:
    return handle(node["expression"], ctx)


@register(NodeType.CONDITIONAL_EXPRESSION)
def _conditional(node: AstNode, ctx: PrintContext) -> bool:
    test = node["test"]
    multiline = handle_wrapped(test, ctx, _test_needs_parens(test))

    if_true = ctx.reserve()
    if_false = ctx.reserve()

    ctx.push(if_true)
    branches_multiline = handle(node["consequent"], ctx)
    ctx.push(if_false)
    branches_multiline |= handle(node["alternate"], ctx)

    if branches_multiline:
        ctx.fill(if_true, INDENT, NEWLINE, pn("?"), SPACE)
        ctx.fill(if_false, NEWLINE, pn(":"), SPACE)
        ctx.push(DEDENT)
    else:
        ctx.fill(if_true, SPACE, pn("?"), SPACE)
        ctx.fill(if_false, SPACE, pn(":"), SPACE)

    # the branches were observed in isolation; only the test reaches the parent
    return multiline


@register(NodeType.IDENTIFIER)
def _identifier(node: AstNode, ctx: PrintContext) -> bool:
    ctx.push(ident(node["name"]))
    if node.get("optional"):
        ctx.push(pn("?"))
    return _type_annotation(node, ctx)


@register(NodeType.IMPORT_EXPRESSION)
def _import_expression(node: AstNode, ctx: PrintContext) -> bool:
    ctx.push(kw("import"), pn("("))
    multiline = handle(node["source"], ctx)
    ctx.push(pn(")"))
    return multiline


@register(NodeType.LITERAL)
def _literal(node: AstNode, ctx: PrintContext) -> bool:
    events = encode_literal(node, ctx.options.regex_renderer)
    ctx.push(*(Append(event) for event in events))
    return False


@register(NodeType.MEMBER_EXPRESSION)
def _member(node: AstNode, ctx: PrintContext) -> bool:
    obj = node["object"]
    multiline = handle_wrapped(obj, ctx, _operand_needs_parens(obj, NodeType.MEMBER_EXPRESSION))

    if node.get("computed"):
        if node.get("optional"):
            ctx.push(pn("?."))
        ctx.push(pn("["))
        multiline |= handle(node["property"], ctx)
        ctx.push(pn("]"))
    else:
        ctx.push(pn("?." if node.get("optional") else "."))
        multiline |= handle(node["property"], ctx)

    return multiline


@register(NodeType.META_PROPERTY)
def _meta_property(node: AstNode, ctx: PrintContext) -> bool:
    multiline = handle(node["meta"], ctx)
    ctx.push(pn("."))
    return handle(node["property"], ctx) or multiline


@register(NodeType.OBJECT_EXPRESSION)
def _object(node: AstNode, ctx: PrintContext) -> bool:
    ctx.push(pn("{"))
    multiline = render_list(node["properties"], ctx, True, handle)
    ctx.push(pn("}"))
    return multiline


@register(NodeType.OBJECT_PATTERN)
def _object_pattern(node: AstNode, ctx: PrintContext) -> bool:
    ctx.push(pn("{"))
    multiline = render_list(node["properties"], ctx, True, handle)
    ctx.push(pn("}"))
    return multiline | _type_annotation(node, ctx)


@register(NodeType.PARENTHESIZED_EXPRESSION)
def _parenthesized(node: AstNode, ctx: PrintContext) -> bool:
    # parentheses are re-derived from precedence by the parent
    return handle(node["expression"], ctx)


@register(NodeType.PRIVATE_IDENTIFIER)
def _private_identifier(node: AstNode, ctx: PrintContext) -> bool:
    ctx.push(pn("#"), ident(node["name"]))
    return False


def _method_property(node: AstNode, ctx: PrintContext) -> bool:
    fn = node["value"]
    kind = node.get("kind")
    emit_leading_comments(fn, ctx)

    if kind in ("get", "set"):
        _keyword_space(ctx, kind)
    else:
        if fn.get("async"):
            _keyword_space(ctx, "async")
        if fn.get("generator"):
            ctx.push(pn("*"))

    multiline = _computed_key(node, ctx)
    multiline |= _params(fn["params"], ctx)
    multiline |= _type_annotation(fn, ctx, "returnType")
    ctx.push(SPACE)
    multiline = handle(fn["body"], ctx) or multiline
    queue_trailing_comment(fn, ctx)
    return multiline


@register(NodeType.PROPERTY)
def _property(node: AstNode, ctx: PrintContext) -> bool:
    value = node["value"]

    if node.get("method") or node.get("kind") in ("get", "set"):
        return _method_property(node, ctx)

    target = value["left"] if is_type(value, NodeType.ASSIGNMENT_PATTERN) else value
    key = node["key"]
    shorthand = (
        not node.get("computed")
        and node.get("kind", "init") == "init"
        and is_type(key, NodeType.IDENTIFIER)
        and is_type(target, NodeType.IDENTIFIER)
        and key["name"] == target["name"]
    )
    if shorthand:
        return handle(value, ctx)

    multiline = _computed_key(node, ctx)
    ctx.push(pn(":"), SPACE)
    return handle(value, ctx) or multiline


@register(NodeType.SEQUENCE_EXPRESSION)
def _sequence(node: AstNode, ctx: PrintContext) -> bool:
    ctx.push(pn("("))
    multiline = render_list(node["expressions"], ctx, False, handle)
    ctx.push(pn(")"))
    return multiline


@register(NodeType.SUPER)
def _super(node: AstNode, ctx: PrintContext) -> bool:
    ctx.push(kw("super"))
    return False


@register(NodeType.TAGGED_TEMPLATE_EXPRESSION)
def _tagged_template(node: AstNode, ctx: PrintContext) -> bool:
    tag = node["tag"]
    multiline = handle_wrapped(tag, ctx, _operand_needs_parens(tag, NodeType.MEMBER_EXPRESSION))
    multiline |= _type_arguments(node, ctx)
    return handle(node["quasi"], ctx) or multiline


@register(NodeType.TEMPLATE_LITERAL)
def _template(node: AstNode, ctx: PrintContext) -> bool:
    quasis: Sequence[AstNode] = node["quasis"]
    expressions: Sequence[AstNode] = node["expressions"]

    ctx.push(pn("`"))
    multiline = False

    for quasi, expression in zip(quasis, expressions):
        raw = quasi["value"]["raw"]
        ctx.push(lit(raw), pn("${"))
        multiline |= handle(expression, ctx)
        ctx.push(pn("}"))
        if "\n" in raw:
            multiline = True

    raw = quasis[-1]["value"]["raw"]
    ctx.push(lit(raw), pn("`"))
    return multiline or "\n" in raw


@register(NodeType.THIS_EXPRESSION)
def _this(node: AstNode, ctx: PrintContext) -> bool:
    ctx.push(kw("this"))
    return False


@register(NodeType.UNARY_EXPRESSION)
def _unary(node: AstNode, ctx: PrintContext) -> bool:
    operator = node["operator"]
    argument = node["argument"]

    if operator.isalpha():
        ctx.push(kw(operator), SPACE)
    else:
        ctx.push(pn(operator))
        # `- -x` and `+ ++x` must not fuse into `--x` / `+++x`
        nested = argument.get("operator", "")
        if (
            operator in ("+", "-")
            and is_type(argument, NodeType.UNARY_EXPRESSION, NodeType.UPDATE_EXPRESSION)
            and nested[:1] == operator
        ):
            if not is_type(argument, NodeType.UPDATE_EXPRESSION) or argument.get("prefix"):
                ctx.push(SPACE)

    return handle_wrapped(argument, ctx, binds_looser(argument, NodeType.UNARY_EXPRESSION))


@register(NodeType.UPDATE_EXPRESSION)
def _update(node: AstNode, ctx: PrintContext) -> bool:
    if node.get("prefix"):
        ctx.push(pn(node["operator"]))
        return handle(node["argument"], ctx)

    multiline = handle(node["argument"], ctx)
    ctx.push(pn(node["operator"]))
    return multiline


@register(NodeType.YIELD_EXPRESSION)
def _yield(node: AstNode, ctx: PrintContext) -> bool:
    ctx.push(kw("yield"))
    if node.get("delegate"):
        ctx.push(pn("*"))

    argument = node.get("argument")
    if argument is None:
        return False

    ctx.push(SPACE)
    return handle_wrapped(argument, ctx, _comment_breaks_line(argument))


@register(NodeType.TS_AS_EXPRESSION, NodeType.TS_SATISFIES_EXPRESSION)
def _ts_as(node: AstNode, ctx: PrintContext) -> bool:
    multiline = False
    expression = node.get("expression")
    if expression is not None:
        multiline = handle_wrapped(expression, ctx, binds_looser(expression, NodeType(type_name(node))))

    keyword = "as" if is_type(node, NodeType.TS_AS_EXPRESSION) else "satisfies"
    ctx.push(SPACE, kw(keyword), SPACE)
    return handle_type_annotation(node["typeAnnotation"], ctx) or multiline


@register(NodeType.TS_NON_NULL_EXPRESSION)
def _ts_non_null(node: AstNode, ctx: PrintContext) -> bool:
    multiline = handle(node["expression"], ctx)
    ctx.push(pn("!"))
    return multiline


@register(NodeType.TS_QUALIFIED_NAME)
def _ts_qualified_name(node: AstNode, ctx: PrintContext) -> bool:
    multiline = handle(node["left"], ctx)
    ctx.push(pn("."))
    return handle(node["right"], ctx) or multiline


# -- statements -------------------------------------------------------------


def _jump(keyword: str, node: AstNode, ctx: PrintContext) -> bool:
    ctx.push(kw(keyword))
    multiline = False
    if node.get("label"):
        ctx.push(SPACE)
        multiline = handle(node["label"], ctx)
    ctx.push(pn(";"))
    return multiline


@register(NodeType.BREAK_STATEMENT)
def _break(node: AstNode, ctx: PrintContext) -> bool:
    return _jump("break", node, ctx)


@register(NodeType.CONTINUE_STATEMENT)
def _continue(node: AstNode, ctx: PrintContext) -> bool:
    return _jump("continue", node, ctx)


@register(NodeType.DEBUGGER_STATEMENT)
def _debugger(node: AstNode, ctx: PrintContext) -> bool:
    ctx.push(kw("debugger"), pn(";"))
    return False


@register(NodeType.DECORATOR)
def _decorator(node: AstNode, ctx: PrintContext) -> bool:
    ctx.push(pn("@"))
    multiline = handle(node["expression"], ctx)
    ctx.push(NEWLINE)
    return multiline


@register(NodeType.DO_WHILE_STATEMENT)
def _do_while(node: AstNode, ctx: PrintContext) -> bool:
    _keyword_space(ctx, "do")
    multiline = handle(node["body"], ctx)
    ctx.push(SPACE, kw("while"), SPACE, pn("("))
    multiline |= handle(node["test"], ctx)
    ctx.push(pn(")"), pn(";"))
    return multiline


@register(NodeType.EMPTY_STATEMENT)
def _empty(node: AstNode, ctx: PrintContext) -> bool:
    ctx.push(pn(";"))
    return False


@register(NodeType.EXPRESSION_STATEMENT)
def _expression_statement(node: AstNode, ctx: PrintContext) -> bool:
    expression = node["expression"]
    multiline = handle_wrapped(expression, ctx, _starts_with(expression, _STATEMENT_AMBIGUOUS))
    ctx.push(pn(";"))
    return multiline


@register(NodeType.FOR_STATEMENT)
def _for(node: AstNode, ctx: PrintContext) -> bool:
    _keyword_space(ctx, "for")
    ctx.push(pn("("))

    multiline = False
    init = node.get("init")
    if init is not None:
        if is_type(init, NodeType.VARIABLE_DECLARATION):
            multiline |= _declaration_head(init, ctx)
        else:
            multiline |= handle(init, ctx)

    ctx.push(pn(";"), SPACE)
    if node.get("test") is not None:
        multiline |= handle(node["test"], ctx)
    ctx.push(pn(";"), SPACE)
    if node.get("update") is not None:
        multiline |= handle(node["update"], ctx)

    ctx.push(pn(")"), SPACE)
    return handle(node["body"], ctx) or multiline


@register(NodeType.IF_STATEMENT)
def _if(node: AstNode, ctx: PrintContext) -> bool:
    _keyword_space(ctx, "if")
    ctx.push(pn("("))
    multiline = handle(node["test"], ctx)
    ctx.push(pn(")"), SPACE)
    multiline |= handle(node["consequent"], ctx)

    if node.get("alternate"):
        ctx.push(SPACE)
        _keyword_space(ctx, "else")
        multiline |= handle(node["alternate"], ctx)

    return multiline


@register(NodeType.LABELED_STATEMENT)
def _labeled(node: AstNode, ctx: PrintContext) -> bool:
    multiline = handle(node["label"], ctx)
    ctx.push(pn(":"), SPACE)
    return handle(node["body"], ctx) or multiline


@register(NodeType.PROGRAM)
def _program(node: AstNode, ctx: PrintContext) -> bool:
    handle_body(node["body"], ctx)
    return False


@register(NodeType.RETURN_STATEMENT)
def _return(node: AstNode, ctx: PrintContext) -> bool:
    argument = node.get("argument")
    if argument is None:
        ctx.push(kw("return"), pn(";"))
        return False

    # a line break between `return` and its value would end the statement
    ctx.push(kw("return"), SPACE)
    multiline = handle_wrapped(argument, ctx, _comment_breaks_line(argument))
    ctx.push(pn(";"))
    return multiline


@register(NodeType.STATIC_BLOCK)
def _static_block(node: AstNode, ctx: PrintContext) -> bool:
    _keyword_space(ctx, "static")
    ctx.push(pn("{"), INDENT, NEWLINE)
    handle_body(node["body"], ctx)
    ctx.push(DEDENT, NEWLINE, pn("}"))
    return True


@register(NodeType.SWITCH_STATEMENT)
def _switch(node: AstNode, ctx: PrintContext) -> bool:
    _keyword_space(ctx, "switch")
    ctx.push(pn("("))
    handle(node["discriminant"], ctx)
    ctx.push(pn(")"), SPACE, pn("{"), INDENT)

    for index, case in enumerate(node["cases"]):
        if index > 0:
            ctx.push(ws("\n"))
        handle(case, ctx)

    ctx.push(DEDENT, NEWLINE, pn("}"))
    return True


@register(NodeType.SWITCH_CASE)
def _switch_case(node: AstNode, ctx: PrintContext) -> bool:
    ctx.push(NEWLINE)
    if node.get("test") is not None:
        _keyword_space(ctx, "case")
        handle(node["test"], ctx)
    else:
        ctx.push(kw("default"))
    ctx.push(pn(":"), INDENT)

    for statement in node["consequent"]:
        ctx.push(NEWLINE)
        handle(statement, ctx)
        flush_trailing_comments(ctx)

    ctx.push(DEDENT)
    return True


@register(NodeType.THROW_STATEMENT)
def _throw(node: AstNode, ctx: PrintContext) -> bool:
    _keyword_space(ctx, "throw")
    multiline = False
    argument = node.get("argument")
    if argument is not None:
        multiline = handle_wrapped(argument, ctx, _comment_breaks_line(argument))
    ctx.push(pn(";"))
    return multiline


@register(NodeType.TRY_STATEMENT)
def _try(node: AstNode, ctx: PrintContext) -> bool:
    _keyword_space(ctx, "try")
    multiline = handle(node["block"], ctx)

    if node.get("handler"):
        ctx.push(SPACE)
        multiline |= handle(node["handler"], ctx)

    if node.get("finalizer"):
        ctx.push(SPACE)
        _keyword_space(ctx, "finally")
        multiline |= handle(node["finalizer"], ctx)

    return multiline


@register(NodeType.CATCH_CLAUSE)
def _catch(node: AstNode, ctx: PrintContext) -> bool:
    multiline = False
    if node.get("param") is not None:
        ctx.push(kw("catch"), SPACE, pn("("))
        multiline = handle(node["param"], ctx)
        ctx.push(pn(")"), SPACE)
    else:
        _keyword_space(ctx, "catch")

    return handle(node["body"], ctx) or multiline


@register(NodeType.VARIABLE_DECLARATION)
def _variable_declaration(node: AstNode, ctx: PrintContext) -> bool:
    if node.get("declare"):
        _keyword_space(ctx, "declare")
    multiline = render_declarators(node, ctx, handle)
    ctx.push(pn(";"))
    return multiline


@register(NodeType.VARIABLE_DECLARATOR)
def _variable_declarator(node: AstNode, ctx: PrintContext) -> bool:
    multiline = handle(node["id"], ctx)

    if node.get("init") is not None:
        ctx.push(SPACE, pn("="), SPACE)
        multiline |= handle(node["init"], ctx)

    return multiline


@register(NodeType.WHILE_STATEMENT)
def _while(node: AstNode, ctx: PrintContext) -> bool:
    _keyword_space(ctx, "while")
    ctx.push(pn("("))
    multiline = handle(node["test"], ctx)
    ctx.push(pn(")"), SPACE)
    return handle(node["body"], ctx) or multiline


@register(NodeType.WITH_STATEMENT)
def _with(node: AstNode, ctx: PrintContext) -> bool:
    _keyword_space(ctx, "with")
    ctx.push(pn("("))
    multiline = handle(node["object"], ctx)
    ctx.push(pn(")"), SPACE)
    return handle(node["body"], ctx) or multiline


# -- classes ----------------------------------------------------------------


def _modifiers(node: AstNode, ctx: PrintContext) -> None:
    if node.get("accessibility"):
        _keyword_space(ctx, node["accessibility"])
    if node.get("static"):
        _keyword_space(ctx, "static")
    if node.get("readonly"):
        _keyword_space(ctx, "readonly")


@register(NodeType.METHOD_DEFINITION)
def _method(node: AstNode, ctx: PrintContext) -> bool:
    multiline = _decorators(node, ctx)
    fn = node["value"]
    emit_leading_comments(fn, ctx)
    _modifiers(node, ctx)

    if node.get("kind") in ("get", "set"):
        _keyword_space(ctx, node["kind"])
    if fn.get("async"):
        _keyword_space(ctx, "async")
    if fn.get("generator"):
        ctx.push(pn("*"))

    multiline |= _computed_key(node, ctx)
    multiline |= _type_annotation(fn, ctx, "typeParameters")
    multiline |= _params(fn["params"], ctx)
    multiline |= _type_annotation(fn, ctx, "returnType")

    if fn.get("body") is None:
        ctx.push(pn(";"))
    else:
        ctx.push(SPACE)
        multiline = handle(fn["body"], ctx) or multiline

    queue_trailing_comment(fn, ctx)
    return multiline


@register(NodeType.PROPERTY_DEFINITION)
def _property_definition(node: AstNode, ctx: PrintContext) -> bool:
    multiline = _decorators(node, ctx)
    _modifiers(node, ctx)
    multiline |= _computed_key(node, ctx)

    if node.get("optional"):
        ctx.push(pn("?"))

    multiline |= _type_annotation(node, ctx)

    if node.get("value") is not None:
        ctx.push(SPACE, pn("="), SPACE)
        multiline |= handle(node["value"], ctx)

    ctx.push(pn(";"))
    return multiline


# -- modules ----------------------------------------------------------------


def _source(node: AstNode, ctx: PrintContext) -> bool:
    ctx.push(SPACE)
    _keyword_space(ctx, "from")
    return handle(node["source"], ctx)


@register(NodeType.EXPORT_ALL_DECLARATION)
def _export_all(node: AstNode, ctx: PrintContext) -> bool:
    _keyword_space(ctx, "export")
    ctx.push(pn("*"))
    if node.get("exported") is not None:
        ctx.push(SPACE)
        _keyword_space(ctx, "as")
        handle(node["exported"], ctx)
    _source(node, ctx)
    ctx.push(pn(";"))
    return False


@register(NodeType.EXPORT_DEFAULT_DECLARATION)
def _export_default(node: AstNode, ctx: PrintContext) -> bool:
    _keyword_space(ctx, "export", "default")
    declaration = node["declaration"]
    multiline = handle(declaration, ctx)

    if not is_type(declaration, NodeType.FUNCTION_DECLARATION, NodeType.CLASS_DECLARATION):
        ctx.push(pn(";"))

    return multiline


@register(NodeType.EXPORT_NAMED_DECLARATION)
def _export_named(node: AstNode, ctx: PrintContext) -> bool:
    _keyword_space(ctx, "export")

    if node.get("declaration"):
        return handle(node["declaration"], ctx)

    if node.get("exportKind") == "type":
        _keyword_space(ctx, "type")

    ctx.push(pn("{"))
    multiline = render_list(node["specifiers"], ctx, True, handle)
    ctx.push(pn("}"))

    if node.get("source"):
        _source(node, ctx)

    ctx.push(pn(";"))
    return multiline


@register(NodeType.EXPORT_SPECIFIER)
def _export_specifier(node: AstNode, ctx: PrintContext) -> bool:
    if node.get("exportKind") == "type":
        _keyword_space(ctx, "type")
    handle(node["local"], ctx)

    exported = node.get("exported")
    if exported is not None and _name(exported) != _name(node["local"]):
        ctx.push(SPACE)
        _keyword_space(ctx, "as")
        handle(exported, ctx)

    return False


@register(NodeType.IMPORT_DECLARATION)
def _import(node: AstNode, ctx: PrintContext) -> bool:
    specifiers: Sequence[AstNode] = node.get("specifiers") or ()
    _keyword_space(ctx, "import")

    if not specifiers:
        handle(node["source"], ctx)
        ctx.push(pn(";"))
        return False

    if node.get("importKind") == "type":
        _keyword_space(ctx, "type")

    default_specifier: AstNode | None = None
    namespace_specifier: AstNode | None = None
    named_specifiers: list[AstNode] = []

    for specifier in specifiers:
        if is_type(specifier, NodeType.IMPORT_NAMESPACE_SPECIFIER):
            namespace_specifier = specifier
        elif is_type(specifier, NodeType.IMPORT_DEFAULT_SPECIFIER):
            default_specifier = specifier
        else:
            named_specifiers.append(specifier)

    multiline = False
    if default_specifier is not None:
        handle(default_specifier, ctx)
        if namespace_specifier is not None or named_specifiers:
            ctx.push(COMMA, SPACE)

    if namespace_specifier is not None:
        handle(namespace_specifier, ctx)

    if named_specifiers:
        ctx.push(pn("{"))
        multiline = render_list(named_specifiers, ctx, True, handle)
        ctx.push(pn("}"))

    _source(node, ctx)
    ctx.push(pn(";"))
    return multiline


@register(NodeType.IMPORT_DEFAULT_SPECIFIER)
def _import_default_specifier(node: AstNode, ctx: PrintContext) -> bool:
    return handle(node["local"], ctx)


@register(NodeType.IMPORT_NAMESPACE_SPECIFIER)
def _import_namespace_specifier(node: AstNode, ctx: PrintContext) -> bool:
    ctx.push(pn("*"), SPACE)
    _keyword_space(ctx, "as")
    return handle(node["local"], ctx)


@register(NodeType.IMPORT_SPECIFIER)
def _import_specifier(node: AstNode, ctx: PrintContext) -> bool:
    if node.get("importKind") == "type":
        _keyword_space(ctx, "type")

    imported = node.get("imported")
    if imported is not None and _name(imported) != _name(node["local"]):
        handle(imported, ctx)
        ctx.push(SPACE)
        _keyword_space(ctx, "as")

    return handle(node["local"], ctx)


# -- TypeScript declarations ------------------------------------------------


@register(NodeType.TS_ENUM_DECLARATION)
def _ts_enum(node: AstNode, ctx: PrintContext) -> bool:
    if node.get("declare"):
        _keyword_space(ctx, "declare")
    if node.get("const"):
        _keyword_space(ctx, "const")
    _keyword_space(ctx, "enum")
    handle(node["id"], ctx)
    ctx.push(SPACE, pn("{"))

    members: Sequence[AstNode] = node.get("members") or (node.get("body") or {}).get("members", ())
    if not members:
        ctx.push(pn("}"))
        return False

    ctx.push(INDENT)
    for index, member in enumerate(members):
        ctx.push(NEWLINE)
        handle_type_annotation(member, ctx)
        if index < len(members) - 1:
            ctx.push(COMMA)
        flush_trailing_comments(ctx)
    ctx.push(DEDENT, NEWLINE, pn("}"))
    return True


@register(NodeType.TS_INTERFACE_BODY)
def _ts_interface_body(node: AstNode, ctx: PrintContext) -> bool:
    ctx.push(pn("{"))
    multiline = render_list(node["body"], ctx, True, handle_type_annotation, (pn(";"),))
    ctx.push(pn("}"))
    return multiline


@register(NodeType.TS_INTERFACE_DECLARATION)
def _ts_interface(node: AstNode, ctx: PrintContext) -> bool:
    if node.get("declare"):
        _keyword_space(ctx, "declare")
    _keyword_space(ctx, "interface")
    multiline = handle(node["id"], ctx)
    multiline |= _type_annotation(node, ctx, "typeParameters")

    if node.get("extends"):
        ctx.push(SPACE)
        _keyword_space(ctx, "extends")
        multiline |= render_list(node["extends"], ctx, False, handle_type_annotation)

    ctx.push(SPACE)
    return handle(node["body"], ctx) or multiline


@register(NodeType.TS_TYPE_ALIAS_DECLARATION)
def _ts_type_alias(node: AstNode, ctx: PrintContext) -> bool:
    if node.get("declare"):
        _keyword_space(ctx, "declare")
    _keyword_space(ctx, "type")
    multiline = handle(node["id"], ctx)
    multiline |= _type_annotation(node, ctx, "typeParameters")
    ctx.push(SPACE, pn("="), SPACE)
    multiline |= handle_type_annotation(node["typeAnnotation"], ctx)
    ctx.push(pn(";"))
    return multiline
