"""Component source syntax package.

Provides the closed node model, the ESTree JSON front end, the visitor,
import resolution and static constant evaluation. The extraction engine
depends only on this package's types and protocols, never on a particular
JavaScript parser.

Python 3.13+.
"""

from .ast import (
    ArrayExpression,
    Attribute,
    BinaryExpression,
    BooleanLiteral,
    CallExpression,
    Child,
    ElementNode,
    EmptyExpression,
    Expression,
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
from .estree import EstreeConverter, from_estree, load_estree
from .evaluator import ConstantEvaluator, Evaluation, LiteralEvaluator
from .scope import ImportBinding, ImportResolver, ImportTable
from .visitor import ASTVisitor

__all__ = [
    "ASTVisitor",
    "ArrayExpression",
    "Attribute",
    "BinaryExpression",
    "BooleanLiteral",
    "CallExpression",
    "Child",
    "ConstantEvaluator",
    "ElementNode",
    "EmptyExpression",
    "EstreeConverter",
    "Evaluation",
    "Expression",
    "ExpressionContainer",
    "FunctionExpression",
    "Identifier",
    "ImportBinding",
    "ImportDeclaration",
    "ImportResolver",
    "ImportSpecifier",
    "ImportTable",
    "LiteralEvaluator",
    "Node",
    "NullLiteral",
    "NumberLiteral",
    "ObjectExpression",
    "OpaqueNode",
    "OpeningTag",
    "Position",
    "Program",
    "Property",
    "StringLiteral",
    "TemplateLiteral",
    "TextNode",
    "from_estree",
    "load_estree",
]
