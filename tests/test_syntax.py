"""Tests for the node model, constant evaluation, import scope and visitor."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from i18nextract.core import DepthLimitExceededError
from i18nextract.syntax import (
    ASTVisitor,
    CallExpression,
    Evaluation,
    ImportBinding,
    ImportTable,
    LiteralEvaluator,
    Position,
    Property,
    TemplateLiteral,
)
from i18nextract.syntax.ast import BooleanLiteral, Identifier, NullLiteral, StringLiteral
from tests.helpers.builders import arr, call, concat, element, expr, ident, imports, num, obj, program, s


class TestPosition:
    """Positions are 1-based."""

    def test_valid(self) -> None:
        assert Position(1, 1).column == 1

    @pytest.mark.parametrize(("line", "column"), [(0, 1), (1, 0), (-3, 2)])
    def test_invalid(self, line: int, column: int) -> None:
        with pytest.raises(ValueError, match="must be >= 1"):
            Position(line, column)


class TestProperty:
    """Static property names."""

    def test_identifier_key(self) -> None:
        assert Property(ident("context"), s("male")).name == "context"

    def test_string_key(self) -> None:
        assert Property(s("defaultValue"), s("x")).name == "defaultValue"

    def test_computed_key(self) -> None:
        assert Property(ident("key"), s("x"), computed=True).name is None


class TestLiteralEvaluator:
    """Static evaluation of literal expressions."""

    evaluator = LiteralEvaluator()

    def test_string(self) -> None:
        assert self.evaluator.try_evaluate(s("hi")) == Evaluation("hi", True)

    def test_scalars(self) -> None:
        assert self.evaluator.try_evaluate(num(3)) == Evaluation(3, True)
        assert self.evaluator.try_evaluate(BooleanLiteral(True)) == Evaluation(True, True)
        assert self.evaluator.try_evaluate(NullLiteral()) == Evaluation(None, True)
        assert self.evaluator.try_evaluate(Identifier("undefined")) == Evaluation(None, True)

    def test_identifier_is_not_confident(self) -> None:
        assert not self.evaluator.try_evaluate(ident("key")).confident

    def test_call_is_not_confident(self) -> None:
        assert not self.evaluator.try_evaluate(call("getKey")).confident

    def test_concatenation(self) -> None:
        assert self.evaluator.try_evaluate(concat(concat(s("a"), s("b")), s("c"))) == Evaluation("abc", True)

    def test_string_number_concatenation(self) -> None:
        assert self.evaluator.try_evaluate(concat(s("error."), num(404))) == Evaluation("error.404", True)
        assert self.evaluator.try_evaluate(concat(s("v"), num(2.0))) == Evaluation("v2", True)

    def test_numeric_sum(self) -> None:
        assert self.evaluator.try_evaluate(concat(num(1), num(2))) == Evaluation(3, True)

    def test_concatenation_with_unknown(self) -> None:
        assert not self.evaluator.try_evaluate(concat(s("a"), ident("b"))).confident

    def test_template_literal(self) -> None:
        node = TemplateLiteral(quasis=("item.", ""), expressions=(s("first"),))
        assert self.evaluator.try_evaluate(node) == Evaluation("item.first", True)

    def test_template_literal_with_variable(self) -> None:
        node = TemplateLiteral(quasis=("item.", ""), expressions=(ident("id"),))
        assert not self.evaluator.try_evaluate(node).confident

    def test_array(self) -> None:
        assert self.evaluator.try_evaluate(arr(s("a"), s("b"))) == Evaluation(["a", "b"], True)

    def test_array_with_hole(self) -> None:
        assert not self.evaluator.try_evaluate(arr(s("a"), None)).confident

    def test_object(self) -> None:
        node = obj(("context", s("male")), ("n", num(1)))
        assert self.evaluator.try_evaluate(node) == Evaluation({"context": "male", "n": 1}, True)

    def test_object_with_variable(self) -> None:
        assert not self.evaluator.try_evaluate(obj(shorthand=("count",))).confident

    def test_expression_container_is_unwrapped(self) -> None:
        assert self.evaluator.try_evaluate(expr(s("x"))) == Evaluation("x", True)

    @given(st.lists(st.text(max_size=5), min_size=1, max_size=6))
    def test_concatenation_matches_join(self, parts: list[str]) -> None:
        node = StringLiteral(parts[0])
        for part in parts[1:]:
            node = concat(node, StringLiteral(part))  # type: ignore[assignment]
        assert self.evaluator.try_evaluate(node) == Evaluation("".join(parts), True)


class TestImportTable:
    """Module-level import bindings."""

    def test_bindings(self) -> None:
        table = ImportTable.from_program(program(imports("Trans", "translate as tr")))
        assert table.resolve("tr") == ImportBinding("tr", "react-i18next", "translate")
        assert table.resolve("translate") is None

    def test_references_import(self) -> None:
        table = ImportTable.from_program(program(imports("Trans")))
        assert table.references_import(ident("Trans"), "react-i18next", ["Trans"])
        assert not table.references_import(ident("Trans"), "other", ["Trans"])
        assert not table.references_import(ident("Other"), "react-i18next", ["Trans"])
        assert not table.references_import(s("Trans"), "react-i18next", ["Trans"])

    def test_later_import_replaces_earlier(self) -> None:
        table = ImportTable.from_program(
            program(imports("Trans"), imports("Trans", source="elsewhere"))
        )
        assert table.resolve("Trans") == ImportBinding("Trans", "elsewhere", "Trans")


class TestASTVisitor:
    """Dispatch and traversal."""

    def test_visits_nested_calls(self) -> None:
        class CallCollector(ASTVisitor):
            def __init__(self) -> None:
                super().__init__()
                self.callees: list[str] = []

            def visit_CallExpression(self, node: CallExpression) -> None:
                if isinstance(node.callee, Identifier):
                    self.callees.append(node.callee.name)
                self.generic_visit(node)

        tree = program(element("div", expr(call("outer", call("inner")))))
        collector = CallCollector()
        collector.visit(tree)
        assert collector.callees == ["outer", "inner"]

    def test_depth_limit(self) -> None:
        node = element("b")
        for _ in range(30):
            node = element("b", node)
        with pytest.raises(DepthLimitExceededError):
            ASTVisitor(max_depth=10).visit(program(node))
