import math

import pytest

from estree_cst import (
    PrintError,
    PrinterOptions,
    PrintInvariantError,
    UnsupportedLiteralKind,
    UnsupportedNodeType,
    print_estree,
)
from estree_cst.ast import node_type
from estree_cst.diagnostics import (
    PRINTER_INVARIANT_VIOLATED,
    PRINTER_UNSUPPORTED_LITERAL_KIND,
    PRINTER_UNSUPPORTED_NODE_TYPE,
    PRINTER_UNSUPPORTED_TYPE_ANNOTATION,
)
from tests._shared_cases import declarator, expr, ident, lit, type_annotation, var


def test_unknown_node_type_carries_diagnostic_code() -> None:
    with pytest.raises(UnsupportedNodeType) as excinfo:
        print_estree([expr({"type": "JSXElement"})])

    error = excinfo.value
    assert error.code == PRINTER_UNSUPPORTED_NODE_TYPE.code
    assert error.node_type == "JSXElement"
    assert str(error).startswith("PRINTER_UNSUPPORTED_NODE_TYPE:")


def test_node_type_lookup_raises_for_unknown_names() -> None:
    with pytest.raises(UnsupportedNodeType):
        node_type({"type": "Nope"})


def test_unknown_type_annotation_has_its_own_code() -> None:
    mapped = type_annotation({"type": "TSMappedType"})
    body = [var("let", {"type": "VariableDeclarator", "id": ident("x", typeAnnotation=mapped), "init": None})]

    with pytest.raises(UnsupportedNodeType) as excinfo:
        print_estree(body)

    assert excinfo.value.code == PRINTER_UNSUPPORTED_TYPE_ANNOTATION.code
    assert "TSMappedType" in str(excinfo.value)


def test_unsupported_literal_value() -> None:
    with pytest.raises(UnsupportedLiteralKind) as excinfo:
        print_estree([var("const", declarator("n", lit(math.nan)))])

    assert excinfo.value.code == PRINTER_UNSUPPORTED_LITERAL_KIND.code


def test_errors_share_a_base_class() -> None:
    for error_type in (UnsupportedNodeType, UnsupportedLiteralKind, PrintInvariantError):
        assert issubclass(error_type, PrintError)

    assert PrintInvariantError("boom").code == PRINTER_INVARIANT_VIOLATED.code


@pytest.mark.parametrize(
    "kwargs",
    [
        {"indent": "x"},
        {"indent": "\n"},
        {"max_inline_width": -1},
    ],
)
def test_invalid_options_are_rejected(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        PrinterOptions(**kwargs)
