"""ESTree / Babel AST JSON front end.

Converts the JSON tree produced by an external JavaScript parser with JSX
support (@babel/parser, acorn-jsx, espree) into the closed node model of
i18nextract.syntax.ast. Both the ESTree flavor (Literal, Property) and the
Babel flavor (StringLiteral, ObjectProperty, File wrapper) are accepted.

Node kinds the extractor does not read become OpaqueNode instances that keep
their children, so calls nested in statements, member expressions or
conditionals are still visited.

ESTree columns are 0-based; converted positions are 1-based.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any, TypeAlias

from i18nextract.constants import MAX_DEPTH
from i18nextract.core.depth_guard import DepthGuard

from .ast import (
    ArrayExpression,
    Attribute,
    BinaryExpression,
    BooleanLiteral,
    CallExpression,
    ElementNode,
    EmptyExpression,
    ExpressionContainer,
    FunctionExpression,
    Identifier,
    ImportDeclaration,
    ImportSpecifier,
    Node,
    NullLiteral,
    NumberLiteral,
    ObjectExpression,
    OpaqueNode,
    OpeningTag,
    Position,
    Program,
    Property,
    StringLiteral,
    TemplateLiteral,
    TextNode,
)

__all__ = ["EstreeConverter", "from_estree", "load_estree"]

EstreeNode: TypeAlias = Mapping[str, Any]

# Keys that never hold child nodes
_NON_CHILD_KEYS = frozenset({
    "type",
    "loc",
    "start",
    "end",
    "range",
    "extra",
    "comments",
    "leadingComments",
    "trailingComments",
    "innerComments",
    "tokens",
    "errors",
})


def _is_node(value: object) -> bool:
    return isinstance(value, Mapping) and isinstance(value.get("type"), str)


class EstreeConverter:
    """Converts ESTree JSON mappings into i18nextract nodes.

    Not thread-safe: each converter tracks its own recursion depth. Create
    one per conversion or per thread.

    Example:
        >>> data = json.loads(Path("App.ast.json").read_text(encoding="utf-8"))
        >>> program = EstreeConverter().convert(data)
    """

    __slots__ = ("_depth_guard",)

    def __init__(self, *, max_depth: int | None = None) -> None:
        """Initialize converter.

        Args:
            max_depth: Maximum nesting depth (default: MAX_DEPTH from constants)
        """
        self._depth_guard = DepthGuard(max_depth=max_depth if max_depth is not None else MAX_DEPTH)

    def convert(self, data: EstreeNode) -> Program:
        """Convert a Program (or Babel File) mapping.

        Raises:
            ValueError: If data is not a Program or File node
            DepthLimitExceededError: If the tree nests deeper than max_depth
        """
        if data.get("type") == "File":
            data = data["program"]
        if data.get("type") != "Program":
            msg = f"Expected a Program or File node, got {data.get('type')!r}"
            raise ValueError(msg)
        return Program(body=self._convert_list(data.get("body", ())), loc=self._position(data))

    def convert_node(self, data: EstreeNode) -> Node:
        """Convert any single node mapping."""
        with self._depth_guard:
            return self._dispatch(data)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _dispatch(self, data: EstreeNode) -> Node:  # noqa: PLR0911, PLR0912
        loc = self._position(data)
        match data["type"]:
            case "Literal":
                return self._literal(data, loc)
            case "StringLiteral":
                return StringLiteral(value=data["value"], loc=loc)
            case "NumericLiteral":
                return NumberLiteral(value=data["value"], loc=loc)
            case "BooleanLiteral":
                return BooleanLiteral(value=data["value"], loc=loc)
            case "NullLiteral":
                return NullLiteral(loc=loc)
            case "TemplateLiteral":
                quasis = tuple(
                    q["value"]["cooked"] if q["value"].get("cooked") is not None
                    else q["value"]["raw"]
                    for q in data["quasis"]
                )
                return TemplateLiteral(
                    quasis=quasis,
                    expressions=self._convert_list(data["expressions"]),
                    loc=loc,
                )
            case "BinaryExpression":
                return BinaryExpression(
                    operator=data["operator"],
                    left=self.convert_node(data["left"]),
                    right=self.convert_node(data["right"]),
                    loc=loc,
                )
            case "ArrayExpression":
                return ArrayExpression(
                    elements=tuple(
                        None if element is None else self.convert_node(element)
                        for element in data["elements"]
                    ),
                    loc=loc,
                )
            case "ObjectExpression":
                return ObjectExpression(
                    properties=tuple(self._property(p) for p in data["properties"]),
                    loc=loc,
                )
            case "FunctionExpression" | "ArrowFunctionExpression":
                return FunctionExpression(
                    params=self._convert_list(data.get("params", ())),
                    body=self.convert_node(data["body"]),
                    arrow=data["type"] == "ArrowFunctionExpression",
                    loc=loc,
                )
            case "CallExpression" | "OptionalCallExpression":
                return CallExpression(
                    callee=self.convert_node(data["callee"]),
                    arguments=self._convert_list(data["arguments"]),
                    loc=loc,
                )
            case "ParenthesizedExpression":
                return self.convert_node(data["expression"])
            case "Identifier" | "JSXIdentifier":
                return Identifier(name=data["name"], loc=loc)
            case "JSXElement":
                return ElementNode(
                    opening=self._opening_tag(data["openingElement"]),
                    children=self._convert_list(data.get("children", ())),
                    loc=loc,
                )
            case "JSXText":
                return TextNode(value=data["value"], loc=loc)
            case "JSXExpressionContainer":
                return ExpressionContainer(expression=self._container_body(data["expression"]), loc=loc)
            case "ImportDeclaration":
                return ImportDeclaration(
                    source=data["source"]["value"],
                    specifiers=tuple(self._import_specifier(s) for s in data.get("specifiers", ())),
                    loc=loc,
                )
            case _:
                return self._opaque(data, loc)

    # ------------------------------------------------------------------
    # Node helpers
    # ------------------------------------------------------------------

    def _literal(self, data: EstreeNode, loc: Position | None) -> Node:
        value = data.get("value")
        if "regex" in data or "bigint" in data:
            return self._opaque(data, loc)
        match value:
            case str():
                return StringLiteral(value=value, loc=loc)
            case bool():
                return BooleanLiteral(value=value, loc=loc)
            case int() | float():
                return NumberLiteral(value=value, loc=loc)
            case None:
                return NullLiteral(loc=loc)
            case _:
                return self._opaque(data, loc)

    def _property(self, data: EstreeNode) -> Property | OpaqueNode:
        with self._depth_guard:
            loc = self._position(data)
            is_init_property = data["type"] == "ObjectProperty" or (
                data["type"] == "Property"
                and data.get("kind", "init") == "init"
                and not data.get("method", False)
            )
            if not is_init_property:
                return self._opaque(data, loc)
            return Property(
                key=self.convert_node(data["key"]),
                value=self.convert_node(data["value"]),
                computed=bool(data.get("computed", False)),
                shorthand=bool(data.get("shorthand", False)),
                loc=loc,
            )

    def _opening_tag(self, data: EstreeNode) -> OpeningTag:
        with self._depth_guard:
            attributes: list[Attribute | OpaqueNode] = []
            for attribute in data.get("attributes", ()):
                if attribute["type"] == "JSXAttribute":
                    attributes.append(self._attribute(attribute))
                else:
                    attributes.append(self._opaque(attribute, self._position(attribute)))
            return OpeningTag(
                name=self.convert_node(data["name"]),  # type: ignore[arg-type]
                attributes=tuple(attributes),
                self_closing=bool(data.get("selfClosing", False)),
                loc=self._position(data),
            )

    def _attribute(self, data: EstreeNode) -> Attribute:
        raw_name = data["name"]
        if raw_name["type"] == "JSXNamespacedName":
            name = f"{raw_name['namespace']['name']}:{raw_name['name']['name']}"
        else:
            name = raw_name["name"]
        value = data.get("value")
        return Attribute(
            name=name,
            value=None if value is None else self.convert_node(value),  # type: ignore[arg-type]
            loc=self._position(data),
        )

    def _container_body(self, data: EstreeNode) -> Node:
        if data["type"] == "JSXEmptyExpression":
            return EmptyExpression(loc=self._position(data))
        return self.convert_node(data)

    def _import_specifier(self, data: EstreeNode) -> ImportSpecifier:
        local = data["local"]["name"]
        loc = self._position(data)
        match data["type"]:
            case "ImportDefaultSpecifier":
                return ImportSpecifier(local=local, imported="default", loc=loc)
            case "ImportNamespaceSpecifier":
                return ImportSpecifier(local=local, imported="*", loc=loc)
            case _:
                imported = data["imported"]
                name = imported.get("name", imported.get("value"))
                return ImportSpecifier(local=local, imported=name, loc=loc)

    def _opaque(self, data: EstreeNode, loc: Position | None) -> OpaqueNode:
        children: list[Node] = []
        for key, value in data.items():
            if key in _NON_CHILD_KEYS:
                continue
            if _is_node(value):
                children.append(self.convert_node(value))
            elif isinstance(value, list):
                children.extend(self.convert_node(item) for item in value if _is_node(item))
        return OpaqueNode(kind=data["type"], children=tuple(children), loc=loc)

    def _convert_list(self, items: Any) -> tuple[Node, ...]:
        return tuple(self.convert_node(item) for item in items if _is_node(item))

    @staticmethod
    def _position(data: EstreeNode) -> Position | None:
        loc = data.get("loc")
        if not isinstance(loc, Mapping) or not isinstance(loc.get("start"), Mapping):
            return None
        start = loc["start"]
        return Position(line=start["line"], column=start["column"] + 1)


def from_estree(data: EstreeNode) -> Program:
    """Convert an ESTree Program (or Babel File) mapping.

    Example:
        >>> program = from_estree({"type": "Program", "body": []})
        >>> program.body
        ()
    """
    return EstreeConverter().convert(data)


def load_estree(path: str | Path) -> Program:
    """Load ESTree JSON from disk and convert it.

    Raises:
        OSError: If the file cannot be read
        json.JSONDecodeError: If the file is not valid JSON
        ValueError: If the JSON root is not a Program or File node
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, Mapping):
        msg = f"Expected a JSON object in {path}, got {type(data).__name__}"
        raise ValueError(msg)
    return from_estree(data)
