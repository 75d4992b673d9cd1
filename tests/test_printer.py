import pytest

from estree_cst import UnsupportedNodeType, print_estree, print_program
from estree_cst.ast import NodeType
from estree_cst.printer import NODE_HANDLERS
from estree_cst.printer.dispatch import register
from tests._debug import debug_dump_commands, debug_dump_cst
from tests._shared_cases import (
    PRINT_CASES,
    PrintCase,
    binary,
    block,
    block_comment,
    call,
    case_id,
    declarator,
    expr,
    function,
    ident,
    line_comment,
    lit,
    obj,
    var,
)


def _print(test_name: str, body: list[dict]) -> str:
    result = print_estree(body)
    debug_dump_commands(test_name, result.buffer)
    debug_dump_cst(test_name, result.text, result.green_root)
    return result.text


@pytest.mark.parametrize("case", PRINT_CASES, ids=case_id)
def test_print_cases(case: PrintCase) -> None:
    assert _print(case.name, case.body) == case.expected


def test_every_node_type_has_a_layout_handler() -> None:
    assert set(NODE_HANDLERS) == set(NodeType)


def test_duplicate_registration_is_rejected() -> None:
    handler = NODE_HANDLERS[NodeType.SUPER]

    with pytest.raises(ValueError):
        register(NodeType.SUPER)(handler)

    assert NODE_HANDLERS[NodeType.SUPER] is handler


def test_statement_list_and_program_print_identically() -> None:
    body = [expr(call(ident("foo")))]
    program = {"type": "Program", "sourceType": "module", "body": body}

    assert print_program(body) == print_program(program) == "foo();"


def test_empty_statements_are_skipped() -> None:
    body = [expr(call(ident("a"))), {"type": "EmptyStatement"}, expr(call(ident("b")))]

    assert _print("empty_statements", body) == "a();\nb();"


def test_declarators_break_past_width_threshold() -> None:
    body = [
        var(
            "const",
            declarator("alpha", lit(1111111111)),
            declarator("beta", lit(2222222222)),
            declarator("gamma", lit(3333333333)),
        )
    ]

    assert _print("declarators_break", body) == (
        "const alpha = 1111111111,\n\tbeta = 2222222222,\n\tgamma = 3333333333;"
    )


def test_array_breaks_past_width_threshold() -> None:
    names = ["aaaaaaaaaa", "bbbbbbbbbb", "cccccccccc"]
    inline = [var("const", declarator("items", {"type": "ArrayExpression", "elements": [ident(n) for n in names]}))]
    assert _print("array_inline", inline) == "const items = [aaaaaaaaaa, bbbbbbbbbb, cccccccccc];"

    names.append("dddddddddd")
    broken = [var("const", declarator("items", {"type": "ArrayExpression", "elements": [ident(n) for n in names]}))]
    assert _print("array_broken", broken) == (
        "const items = [\n\taaaaaaaaaa,\n\tbbbbbbbbbb,\n\tcccccccccc,\n\tdddddddddd\n];"
    )


@pytest.mark.parametrize(
    ("second_length", "expected_multiline"),
    [(22, False), (23, True)],
)
def test_width_threshold_boundary(second_length: int, expected_multiline: bool) -> None:
    # `[`/`]` sit outside the list; its three slots and the comma add 7
    first, second = "a" * 21, "b" * second_length
    text = _print("width_boundary", [expr({"type": "ArrayExpression", "elements": [ident(first), ident(second)]})])

    if expected_multiline:
        assert text == f"[\n\t{first},\n\t{second}\n];"
    else:
        assert text == f"[{first}, {second}];"


def test_array_holes_keep_their_commas() -> None:
    body = [expr({"type": "ArrayExpression", "elements": [None, ident("a"), None, ident("b")]})]

    assert _print("array_holes", body) == "[, a, , b];"


def test_calls_do_not_break_on_width() -> None:
    arguments = [ident(name * 10) for name in "abcdef"]
    text = _print("long_call", [expr(call(ident("foo"), *arguments))])

    assert "\n" not in text


def test_conditional_breaks_when_a_branch_is_multiline() -> None:
    long_array = {
        "type": "ArrayExpression",
        "elements": [ident(name * 10) for name in "abcd"],
    }
    body = [
        expr(
            {
                "type": "ConditionalExpression",
                "test": ident("a"),
                "consequent": long_array,
                "alternate": ident("b"),
            }
        )
    ]

    assert _print("conditional_multiline", body) == (
        "a\n\t? [\n\t\taaaaaaaaaa,\n\t\tbbbbbbbbbb,\n\t\tcccccccccc,\n\t\tdddddddddd\n\t]\n\t: b;"
    )


def test_leading_line_comment_on_statement() -> None:
    body = [expr(call(ident("foo")), leadingComments=[line_comment(" hi")])]

    assert _print("leading_line_comment", body) == "// hi\nfoo();"


def test_trailing_line_comment_stays_on_statement_line() -> None:
    body = [
        expr(call(ident("foo")), trailingComments=[line_comment(" note")]),
        expr(call(ident("bar"))),
    ]

    assert _print("trailing_line_comment", body) == "foo(); // note\nbar();"


def test_leading_block_comment_inside_expression_is_inline() -> None:
    body = [expr(call(ident("foo"), ident("a", leadingComments=[block_comment(" c ")])))]

    assert _print("inline_block_comment", body) == "foo(/* c */ a);"


def test_line_comment_between_arguments_breaks_the_call() -> None:
    body = [expr(call(ident("foo"), ident("a", trailingComments=[line_comment(" c")]), ident("b")))]

    assert _print("call_line_comment", body) == "foo(\n\ta, // c\n\tb\n);"


def test_block_comment_between_arguments_stays_inline() -> None:
    body = [expr(call(ident("foo"), ident("a", trailingComments=[block_comment("c")]), ident("b")))]

    assert _print("call_block_comment", body) == "foo(a, /*c*/ b);"


def test_trailing_comment_in_list_forces_multiline() -> None:
    array = {
        "type": "ArrayExpression",
        "elements": [ident("a", trailingComments=[block_comment(" x ")]), ident("b")],
    }

    assert _print("list_comment", [expr(array)]) == "[\n\ta, /* x */\n\tb\n];"


def test_block_comment_is_reindented() -> None:
    documented = expr(call(ident("foo")), leadingComments=[block_comment("*\n * doc\n ")])

    assert _print("doc_comment", [block(documented)]) == "{\n\t/**\n\t * doc\n\t */\n\tfoo();\n}"


def test_return_argument_with_line_comment_is_wrapped() -> None:
    returned = ident("a", leadingComments=[line_comment(" why")])
    body = [
        {
            "type": "FunctionDeclaration",
            "id": ident("f"),
            "params": [],
            "body": block({"type": "ReturnStatement", "argument": returned}),
        }
    ]

    assert _print("return_comment", body) == "function f() {\n\treturn (// why\n\ta);\n}"


@pytest.mark.parametrize(
    ("statement_type", "keyword"),
    [("ReturnStatement", "return"), ("ThrowStatement", "throw")],
)
def test_multiline_block_comment_before_argument_is_wrapped(statement_type: str, keyword: str) -> None:
    argument = ident("a", leadingComments=[block_comment("\n note\n")])
    text = _print(f"{keyword}_block_comment", [function("f", [], {"type": statement_type, "argument": argument})])

    assert text.startswith(f"function f() {{\n\t{keyword} (/*")
    assert text.endswith("a);\n}")


def test_comment_on_leading_operand_keeps_return_value_attached() -> None:
    returned = binary("+", ident("a", leadingComments=[line_comment(" c")]), ident("b"))
    body = [function("f", [], {"type": "ReturnStatement", "argument": returned})]

    assert _print("return_operand_comment", body) == "function f() {\n\treturn (// c\n\ta + b);\n}"


def test_yield_argument_with_line_comment_is_wrapped() -> None:
    yielded = {"type": "YieldExpression", "delegate": False, "argument": ident("a", leadingComments=[line_comment(" c")])}
    body = [function("g", [], expr(yielded), generator=True)]

    assert _print("yield_comment", body) == "function* g() {\n\tyield (// c\n\ta);\n}"


def test_block_comment_on_one_line_needs_no_parens() -> None:
    returned = ident("a", leadingComments=[block_comment(" c ")])
    body = [function("f", [], {"type": "ReturnStatement", "argument": returned})]

    assert _print("return_inline_comment", body) == "function f() {\n\treturn /* c */ a;\n}"


def test_method_value_comments_are_kept() -> None:
    value = function(None, [], leadingComments=[block_comment("kept")], trailingComments=[block_comment(" t ")])
    method = {
        "type": "MethodDefinition",
        "key": ident("m"),
        "kind": "method",
        "static": False,
        "computed": False,
        "value": value,
    }
    body = [{"type": "ClassDeclaration", "id": ident("A"), "superClass": None, "body": {"type": "ClassBody", "body": [method]}}]

    assert _print("method_comments", body) == "class A {\n\t/*kept*/ m() {} /* t */\n}"


def test_object_method_value_comments_are_kept() -> None:
    value = function(None, [], leadingComments=[block_comment("kept")], trailingComments=[block_comment(" t ")])
    prop = {"type": "Property", "key": ident("m"), "value": value, "kind": "init", "method": True}

    assert _print("object_method_comments", [var("const", declarator("o", obj(prop)))]) == (
        "const o = {\n\t/*kept*/ m() {} /* t */\n};"
    )


def test_loop_head_declaration_trailing_comment_is_kept() -> None:
    init = {**var("let", declarator("i", lit(0))), "trailingComments": [block_comment(" c ")]}
    body = [{"type": "ForStatement", "init": init, "test": None, "update": None, "body": block()}]

    assert _print("loop_head_comment", body) == "for (let i = 0; ; ) {} /* c */"


def test_parenthesized_expression_is_transparent() -> None:
    grouped = {"type": "ParenthesizedExpression", "expression": binary("+", ident("a"), ident("b"))}

    assert _print("parenthesized", [expr(binary("*", grouped, ident("c")))]) == "(a + b) * c;"
    assert _print("parenthesized_right", [expr(binary("+", ident("c"), grouped))]) == "c + (a + b);"


def test_object_methods_and_shorthand() -> None:
    fn = {"type": "FunctionExpression", "id": None, "params": [], "body": block()}
    obj = {
        "type": "ObjectExpression",
        "properties": [
            {"type": "Property", "key": ident("a"), "value": ident("a"), "kind": "init", "shorthand": True},
            {"type": "Property", "key": ident("m"), "value": fn, "kind": "init", "method": True},
            {"type": "Property", "key": ident("v"), "value": fn, "kind": "get"},
        ],
    }

    assert _print("object_methods", [var("const", declarator("o", obj))]) == (
        "const o = { a, m() {}, get v() {} };"
    )


def test_unknown_node_type_error_names_the_type() -> None:
    with pytest.raises(UnsupportedNodeType, match="JSXElement"):
        print_estree([expr({"type": "JSXElement"})])
