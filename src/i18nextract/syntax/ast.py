"""Component source tree node definitions.

A closed set of node kinds: only the shapes the extraction engine reads are
modelled (text, elements, expression containers, calls, literals, imports).
Every other construct becomes an OpaqueNode that keeps its children, so
traversal still reaches translation calls nested inside it.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import TypeAlias

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Base types
    "Position",
    "Identifier",
    "OpaqueNode",
    # Literals and expressions
    "StringLiteral",
    "NumberLiteral",
    "BooleanLiteral",
    "NullLiteral",
    "TemplateLiteral",
    "BinaryExpression",
    "ArrayExpression",
    "Property",
    "ObjectExpression",
    "FunctionExpression",
    "CallExpression",
    # Markup
    "TextNode",
    "EmptyExpression",
    "ExpressionContainer",
    "Attribute",
    "OpeningTag",
    "ElementNode",
    # Module structure
    "ImportSpecifier",
    "ImportDeclaration",
    "Program",
    # Type aliases
    "Expression",
    "Child",
    "Node",
]

# ============================================================================
# BASE TYPES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Position:
    """Start position of a node in its source file.

    Attributes:
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate position invariants."""
        if self.line < 1:
            msg = f"Position line must be >= 1, got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"Position column must be >= 1, got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Identifier:
    """Identifier reference (also used for element names): t, Trans, count"""

    name: str
    loc: Position | None = None


@dataclass(frozen=True, slots=True)
class OpaqueNode:
    """Any construct the engine does not read.

    Example:
        a member expression, a statement, a spread element

    Attributes:
        kind: Original node type name (e.g. "MemberExpression")
        children: Child nodes, kept for traversal
    """

    kind: str
    children: tuple["Node", ...] = ()
    loc: Position | None = None


# ============================================================================
# LITERALS AND EXPRESSIONS
# ============================================================================


@dataclass(frozen=True, slots=True)
class StringLiteral:
    """String literal: 'greeting'"""

    value: str
    loc: Position | None = None


@dataclass(frozen=True, slots=True)
class NumberLiteral:
    """Number literal: 42, 1.5"""

    value: int | float
    loc: Position | None = None


@dataclass(frozen=True, slots=True)
class BooleanLiteral:
    """Boolean literal: true, false"""

    value: bool
    loc: Position | None = None


@dataclass(frozen=True, slots=True)
class NullLiteral:
    """Null literal: null"""

    loc: Position | None = None


@dataclass(frozen=True, slots=True)
class TemplateLiteral:
    """Template literal: `Hello ${name}`

    quasis always holds one more element than expressions.
    """

    quasis: tuple[str, ...]
    expressions: tuple["Expression", ...] = ()
    loc: Position | None = None


@dataclass(frozen=True, slots=True)
class BinaryExpression:
    """Binary expression: 'six' + 'th'"""

    operator: str
    left: "Expression"
    right: "Expression"
    loc: Position | None = None


@dataclass(frozen=True, slots=True)
class ArrayExpression:
    """Array literal: ['app', 'common']

    Holes ([a, , b]) are represented as None elements.
    """

    elements: tuple["Expression | None", ...]
    loc: Position | None = None


@dataclass(frozen=True, slots=True)
class Property:
    """Object literal property: defaultValue: 'Hello', or shorthand count"""

    key: "Expression"
    value: "Expression"
    computed: bool = False
    shorthand: bool = False
    loc: Position | None = None

    @property
    def name(self) -> str | None:
        """Static property name, or None for computed/non-literal keys."""
        if self.computed:
            return None
        match self.key:
            case Identifier(name=name) | StringLiteral(value=name):
                return name
            case _:
                return None


@dataclass(frozen=True, slots=True)
class ObjectExpression:
    """Object literal: { context: 'male', count }

    Spread elements and methods appear as OpaqueNode entries.
    """

    properties: tuple["Property | OpaqueNode", ...]
    loc: Position | None = None


@dataclass(frozen=True, slots=True)
class FunctionExpression:
    """Function or arrow function expression: (t) => <p>{t('key')}</p>"""

    params: tuple["Node", ...]
    body: "Node"
    arrow: bool = False
    loc: Position | None = None


@dataclass(frozen=True, slots=True)
class CallExpression:
    """Call expression: t('greeting', 'Hello'), translate('app')(Component)"""

    callee: "Expression"
    arguments: tuple["Expression", ...]
    loc: Position | None = None


# ============================================================================
# MARKUP
# ============================================================================


@dataclass(frozen=True, slots=True)
class TextNode:
    """Raw text between tags: <Trans>Hello </Trans>"""

    value: str
    loc: Position | None = None


@dataclass(frozen=True, slots=True)
class EmptyExpression:
    """Empty expression container body: {/* comment */}"""

    loc: Position | None = None


@dataclass(frozen=True, slots=True)
class ExpressionContainer:
    """Embedded expression in markup: {{ name }}, {t('key')}"""

    expression: "Expression | EmptyExpression"
    loc: Position | None = None


@dataclass(frozen=True, slots=True)
class Attribute:
    """Element attribute: i18nKey="greeting", count={n}, or bare count

    A bare attribute has value None.
    """

    name: str
    value: "StringLiteral | ExpressionContainer | ElementNode | None" = None
    loc: Position | None = None


@dataclass(frozen=True, slots=True)
class OpeningTag:
    """Opening tag of an element: <Trans i18nKey="greeting">

    name is an Identifier for plain names and an OpaqueNode for member
    (<Foo.Bar>) or namespaced (<svg:rect>) names.
    """

    name: "Identifier | OpaqueNode"
    attributes: tuple["Attribute | OpaqueNode", ...] = ()
    self_closing: bool = False
    loc: Position | None = None


@dataclass(frozen=True, slots=True)
class ElementNode:
    """Element with its children: <strong>world</strong>"""

    opening: OpeningTag
    children: tuple["Child", ...] = ()
    loc: Position | None = None


# ============================================================================
# MODULE STRUCTURE
# ============================================================================


@dataclass(frozen=True, slots=True)
class ImportSpecifier:
    """One imported binding.

    Examples:
        import { Trans } from 'react-i18next'          -> local="Trans", imported="Trans"
        import { translate as tr } from 'react-i18next' -> local="tr", imported="translate"
        import i18n from 'i18next'                      -> local="i18n", imported="default"
        import * as ri from 'react-i18next'             -> local="ri", imported="*"
    """

    local: str
    imported: str
    loc: Position | None = None


@dataclass(frozen=True, slots=True)
class ImportDeclaration:
    """Import statement: import { Trans, translate } from 'react-i18next'"""

    source: str
    specifiers: tuple[ImportSpecifier, ...] = ()
    loc: Position | None = None


@dataclass(frozen=True, slots=True)
class Program:
    """Root node of one compiled unit."""

    body: tuple["Node", ...]
    loc: Position | None = None

    @property
    def imports(self) -> tuple[ImportDeclaration, ...]:
        """Top-level import declarations in source order."""
        return tuple(node for node in self.body if isinstance(node, ImportDeclaration))


# ============================================================================
# TYPE ALIASES
# ============================================================================

Expression: TypeAlias = (
    Identifier
    | StringLiteral
    | NumberLiteral
    | BooleanLiteral
    | NullLiteral
    | TemplateLiteral
    | BinaryExpression
    | ArrayExpression
    | ObjectExpression
    | FunctionExpression
    | CallExpression
    | ElementNode
    | OpaqueNode
)

Child: TypeAlias = TextNode | ElementNode | ExpressionContainer | OpaqueNode

Node: TypeAlias = (
    Expression
    | Property
    | TextNode
    | EmptyExpression
    | ExpressionContainer
    | Attribute
    | OpeningTag
    | ImportSpecifier
    | ImportDeclaration
    | Program
)
