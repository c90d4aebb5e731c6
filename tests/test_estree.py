"""Tests for the ESTree / Babel AST JSON front end."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from i18nextract import ExtractorConfig, MemoryStorage, extract_file, from_estree
from i18nextract.core import DepthLimitExceededError
from i18nextract.syntax import (
    ArrayExpression,
    Attribute,
    CallExpression,
    ElementNode,
    EmptyExpression,
    EstreeConverter,
    ExpressionContainer,
    FunctionExpression,
    Identifier,
    ImportDeclaration,
    ImportSpecifier,
    NullLiteral,
    NumberLiteral,
    ObjectExpression,
    OpaqueNode,
    Position,
    Program,
    Property,
    StringLiteral,
    TemplateLiteral,
    TextNode,
    load_estree,
)


def _loc(line: int, column: int) -> dict[str, Any]:
    return {"start": {"line": line, "column": column}, "end": {"line": line, "column": column + 1}}


def _ident(name: str, kind: str = "Identifier") -> dict[str, Any]:
    return {"type": kind, "name": name}


def _str(value: str) -> dict[str, Any]:
    return {"type": "Literal", "value": value, "raw": json.dumps(value)}


def _t_call(*args: dict[str, Any], line: int = 1) -> dict[str, Any]:
    return {"type": "CallExpression", "callee": _ident("t"), "arguments": list(args), "loc": _loc(line, 4)}


def _program(*body: dict[str, Any]) -> dict[str, Any]:
    return {"type": "Program", "sourceType": "module", "body": list(body)}


def _statement(expression: dict[str, Any]) -> dict[str, Any]:
    return {"type": "ExpressionStatement", "expression": expression}


def _import(source: str, *names: str) -> dict[str, Any]:
    return {
        "type": "ImportDeclaration",
        "source": _str(source),
        "specifiers": [
            {"type": "ImportSpecifier", "imported": _ident(name), "local": _ident(name)} for name in names
        ],
    }


class TestConvertProgram:
    """Program and File roots."""

    def test_program(self) -> None:
        assert from_estree(_program()) == Program(body=())

    def test_babel_file_wrapper(self) -> None:
        assert from_estree({"type": "File", "program": _program()}) == Program(body=())

    def test_other_root_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="Program or File"):
            from_estree({"type": "ExpressionStatement"})

    def test_statements_become_opaque_with_children(self) -> None:
        program = from_estree(_program(_statement(_t_call(_str("key")))))
        (statement,) = program.body
        assert isinstance(statement, OpaqueNode)
        assert statement.kind == "ExpressionStatement"
        (child,) = statement.children
        assert isinstance(child, CallExpression)


class TestConvertExpressions:
    """Expression node kinds."""

    converter = EstreeConverter()

    def test_call_with_position(self) -> None:
        node = self.converter.convert_node(_t_call(_str("greeting"), line=3))
        assert node == CallExpression(
            callee=Identifier("t"),
            arguments=(StringLiteral("greeting"),),
            loc=Position(3, 5),
        )

    def test_literals(self) -> None:
        assert self.converter.convert_node({"type": "Literal", "value": 4}) == NumberLiteral(4)
        assert self.converter.convert_node({"type": "Literal", "value": None}) == NullLiteral()
        assert self.converter.convert_node({"type": "StringLiteral", "value": "x"}) == StringLiteral("x")

    def test_regex_literal_is_opaque(self) -> None:
        node = self.converter.convert_node({"type": "Literal", "value": {}, "regex": {"pattern": "a"}})
        assert isinstance(node, OpaqueNode)

    def test_template_literal_uses_cooked_value(self) -> None:
        node = self.converter.convert_node(
            {
                "type": "TemplateLiteral",
                "quasis": [{"type": "TemplateElement", "value": {"raw": "a\\nb", "cooked": "a\nb"}}],
                "expressions": [],
            }
        )
        assert node == TemplateLiteral(quasis=("a\nb",))

    def test_array_with_hole(self) -> None:
        node = self.converter.convert_node({"type": "ArrayExpression", "elements": [_str("a"), None]})
        assert node == ArrayExpression(elements=(StringLiteral("a"), None))

    def test_object_properties(self) -> None:
        node = self.converter.convert_node(
            {
                "type": "ObjectExpression",
                "properties": [
                    {"type": "Property", "kind": "init", "key": _ident("context"), "value": _str("male")},
                    {"type": "ObjectProperty", "key": _ident("count"), "value": _ident("count"), "shorthand": True},
                    {"type": "SpreadElement", "argument": _ident("rest")},
                ],
            }
        )
        assert isinstance(node, ObjectExpression)
        first, second, third = node.properties
        assert first == Property(Identifier("context"), StringLiteral("male"))
        assert isinstance(second, Property)
        assert second.shorthand
        assert isinstance(third, OpaqueNode)

    def test_getter_is_opaque(self) -> None:
        node = self.converter.convert_node(
            {
                "type": "ObjectExpression",
                "properties": [{"type": "Property", "kind": "get", "key": _ident("x"), "value": _ident("f")}],
            }
        )
        assert isinstance(node, ObjectExpression)
        assert isinstance(node.properties[0], OpaqueNode)

    def test_arrow_function(self) -> None:
        node = self.converter.convert_node(
            {"type": "ArrowFunctionExpression", "params": [_ident("t")], "body": _t_call(_str("k"))}
        )
        assert isinstance(node, FunctionExpression)
        assert node.arrow
        assert node.params == (Identifier("t"),)

    def test_parentheses_are_unwrapped(self) -> None:
        node = self.converter.convert_node({"type": "ParenthesizedExpression", "expression": _str("x")})
        assert node == StringLiteral("x")


class TestConvertJsx:
    """JSX node kinds."""

    converter = EstreeConverter()

    def _element(self, name: str, attributes: list[dict[str, Any]], children: list[dict[str, Any]]) -> dict[str, Any]:
        return {
            "type": "JSXElement",
            "openingElement": {
                "type": "JSXOpeningElement",
                "name": _ident(name, "JSXIdentifier"),
                "attributes": attributes,
                "selfClosing": not children,
            },
            "children": children,
        }

    def test_element_with_attributes_and_children(self) -> None:
        data = self._element(
            "Trans",
            [
                {"type": "JSXAttribute", "name": _ident("i18nKey", "JSXIdentifier"), "value": _str("hi")},
                {"type": "JSXAttribute", "name": _ident("count", "JSXIdentifier"), "value": None},
                {"type": "JSXSpreadAttribute", "argument": _ident("props")},
            ],
            [
                {"type": "JSXText", "value": "Hello "},
                {"type": "JSXExpressionContainer", "expression": {"type": "JSXEmptyExpression"}},
            ],
        )
        node = self.converter.convert_node(data)

        assert isinstance(node, ElementNode)
        assert node.opening.name == Identifier("Trans")
        key, count, spread = node.opening.attributes
        assert key == Attribute("i18nKey", StringLiteral("hi"))
        assert count == Attribute("count")
        assert isinstance(spread, OpaqueNode)
        assert node.children == (TextNode("Hello "), ExpressionContainer(EmptyExpression()))

    def test_namespaced_attribute_name(self) -> None:
        data = self._element(
            "svg",
            [
                {
                    "type": "JSXAttribute",
                    "name": {
                        "type": "JSXNamespacedName",
                        "namespace": _ident("xlink", "JSXIdentifier"),
                        "name": _ident("href", "JSXIdentifier"),
                    },
                    "value": _str("#a"),
                }
            ],
            [],
        )
        node = self.converter.convert_node(data)
        assert isinstance(node, ElementNode)
        assert node.opening.attributes[0] == Attribute("xlink:href", StringLiteral("#a"))

    def test_fragment_keeps_children(self) -> None:
        node = self.converter.convert_node(
            {"type": "JSXFragment", "children": [{"type": "JSXText", "value": "x"}]}
        )
        assert node == OpaqueNode("JSXFragment", (TextNode("x"),))


class TestConvertImports:
    """Import declarations."""

    def test_specifier_kinds(self) -> None:
        data = {
            "type": "ImportDeclaration",
            "source": _str("react-i18next"),
            "specifiers": [
                {"type": "ImportSpecifier", "imported": _ident("translate"), "local": _ident("tr")},
                {"type": "ImportDefaultSpecifier", "local": _ident("i18n")},
                {"type": "ImportNamespaceSpecifier", "local": _ident("ri")},
            ],
        }
        assert EstreeConverter().convert_node(data) == ImportDeclaration(
            "react-i18next",
            (
                ImportSpecifier("tr", "translate"),
                ImportSpecifier("i18n", "default"),
                ImportSpecifier("ri", "*"),
            ),
        )


class TestDepth:
    """Deep input is rejected instead of overflowing the stack."""

    def test_deep_nesting(self) -> None:
        node: dict[str, Any] = _str("x")
        for _ in range(50):
            node = {"type": "ArrayExpression", "elements": [node]}
        with pytest.raises(DepthLimitExceededError):
            EstreeConverter(max_depth=20).convert(_program(_statement(node)))


class TestExtractFile:
    """Extraction straight from an ESTree JSON file."""

    def test_load_and_extract(self, tmp_path: Path) -> None:
        tree = _program(
            _import("react-i18next", "translate"),
            _statement(
                {
                    "type": "CallExpression",
                    "callee": _ident("translate"),
                    "arguments": [_str("app")],
                }
            ),
            _statement(_t_call(_str("greeting"), _str("Hello there"))),
        )
        ast_path = tmp_path / "App.json"
        ast_path.write_text(json.dumps(tree), encoding="utf-8")
        storage = MemoryStorage()

        result = extract_file(ast_path, source_path="src/App.jsx", config=ExtractorConfig(storage=storage))

        assert result.filename == "src/App.jsx"
        assert result.catalog == {"app": {"greeting": "Hello there"}}
        assert json.loads(storage.files["locales/en/app.json"]) == {"greeting": "Hello there"}

    def test_non_object_json(self, tmp_path: Path) -> None:
        ast_path = tmp_path / "bad.json"
        ast_path.write_text("[]", encoding="utf-8")
        with pytest.raises(ValueError, match="Expected a JSON object"):
            load_estree(ast_path)
