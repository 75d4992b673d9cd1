"""Checked-in ESTree programs printed back to the source they were parsed from."""

import json
from collections import Counter
from pathlib import Path
from typing import Any

import pytest

from estree_cst import print_estree
from tests._debug import debug_dump_cst

FIXTURES = sorted((Path(__file__).parent / "fixtures").glob("*.json"))

# Node kinds that always print as exactly one CST node of the same kind.
GROUPING_KINDS = (
    "ArrowFunctionExpression",
    "AssignmentPattern",
    "BinaryExpression",
    "CallExpression",
    "ConditionalExpression",
    "LogicalExpression",
    "MemberExpression",
    "NewExpression",
    "ObjectExpression",
    "TSAsExpression",
    "UnaryExpression",
    "UpdateExpression",
)


def _load(path: Path) -> dict[str, Any]:
    return json.loads(path.read_text(encoding="utf-8"))


def _count_nodes(value: Any, counts: Counter[str]) -> Counter[str]:
    if isinstance(value, list):
        for item in value:
            _count_nodes(item, counts)
    elif isinstance(value, dict):
        if "type" in value:
            counts[value["type"]] += 1
        for key, child in value.items():
            if key not in ("leadingComments", "trailingComments"):
                _count_nodes(child, counts)
    return counts


@pytest.mark.parametrize("path", FIXTURES, ids=lambda path: path.stem)
def test_fixture_prints_its_source(path: Path) -> None:
    fixture = _load(path)
    result = print_estree(fixture["program"])
    debug_dump_cst(path.stem, result.text, result.green_root)

    assert result.text == fixture["source"]


@pytest.mark.parametrize("path", FIXTURES, ids=lambda path: path.stem)
def test_fixture_keeps_every_expression_group(path: Path) -> None:
    fixture = _load(path)
    syntax_root = print_estree(fixture["program"]).syntax_root()
    ast_counts = _count_nodes(fixture["program"], Counter())

    for kind in GROUPING_KINDS:
        assert len(syntax_root.descendants(kind)) == ast_counts[kind], kind


def test_fixtures_are_present() -> None:
    assert {path.stem for path in FIXTURES} >= {"expressions", "module", "typescript"}
