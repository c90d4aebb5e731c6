"""Static evaluation of constant sub-expressions.

The extraction engine never folds constants itself: it asks a
ConstantEvaluator whether a sub-tree reduces to a value it can trust.
LiteralEvaluator is the default implementation and covers what translation
call sites use in practice: literals, string concatenation, expression-free
template literals, arrays and plain objects.

Python 3.13+. Zero external dependencies.
"""

from typing import NamedTuple, Protocol

from .ast import (
    ArrayExpression,
    BinaryExpression,
    BooleanLiteral,
    ExpressionContainer,
    Identifier,
    Node,
    NullLiteral,
    NumberLiteral,
    ObjectExpression,
    Property,
    StringLiteral,
    TemplateLiteral,
)

__all__ = [
    "ConstantEvaluator",
    "Evaluation",
    "LiteralEvaluator",
]


class Evaluation(NamedTuple):
    """Result of a static evaluation attempt.

    Attributes:
        value: Evaluated value (meaningless unless confident)
        confident: True when value is the exact runtime value
    """

    value: object
    confident: bool


_UNKNOWN = Evaluation(None, False)


class ConstantEvaluator(Protocol):
    """Protocol for reducing a sub-tree to a compile-time constant.

    Example:
        >>> class ScopeAwareEvaluator:
        ...     def try_evaluate(self, node: Node) -> Evaluation:
        ...         if isinstance(node, Identifier) and node.name in CONSTANTS:
        ...             return Evaluation(CONSTANTS[node.name], True)
        ...         return LiteralEvaluator().try_evaluate(node)
    """

    def try_evaluate(self, node: Node) -> Evaluation:
        """Evaluate node, reporting whether the result can be trusted."""
        ...


def _js_string(value: object) -> str:
    """Convert an evaluated scalar the way string concatenation does."""
    match value:
        case bool():
            return "true" if value else "false"
        case None:
            return "null"
        case float() if value.is_integer():
            return str(int(value))
        case _:
            return str(value)


class LiteralEvaluator:
    """Default ConstantEvaluator over literal-only expressions.

    Identifiers are never resolved (except ``undefined``), so any
    reference to a variable makes the evaluation non-confident.
    """

    __slots__ = ()

    def try_evaluate(self, node: Node) -> Evaluation:
        """Evaluate node to a constant.

        Args:
            node: Expression node

        Returns:
            Evaluation with confident=False for anything that depends on
            runtime values
        """
        match node:
            case StringLiteral(value=value) | NumberLiteral(value=value):
                return Evaluation(value, True)
            case BooleanLiteral(value=value):
                return Evaluation(value, True)
            case NullLiteral():
                return Evaluation(None, True)
            case Identifier(name="undefined"):
                return Evaluation(None, True)
            case ExpressionContainer(expression=expression):
                return self.try_evaluate(expression)
            case TemplateLiteral():
                return self._evaluate_template(node)
            case BinaryExpression(operator="+", left=left, right=right):
                return self._evaluate_plus(left, right)
            case ArrayExpression(elements=elements):
                return self._evaluate_array(elements)
            case ObjectExpression(properties=properties):
                return self._evaluate_object(properties)
            case _:
                return _UNKNOWN

    def _evaluate_template(self, node: TemplateLiteral) -> Evaluation:
        parts: list[str] = [node.quasis[0]] if node.quasis else []
        for expression, quasi in zip(node.expressions, node.quasis[1:], strict=False):
            evaluated = self.try_evaluate(expression)
            if not evaluated.confident:
                return _UNKNOWN
            parts.append(_js_string(evaluated.value))
            parts.append(quasi)
        return Evaluation("".join(parts), True)

    def _evaluate_plus(self, left: Node, right: Node) -> Evaluation:
        lhs = self.try_evaluate(left)
        rhs = self.try_evaluate(right)
        if not (lhs.confident and rhs.confident):
            return _UNKNOWN
        if isinstance(lhs.value, str) or isinstance(rhs.value, str):
            return Evaluation(_js_string(lhs.value) + _js_string(rhs.value), True)
        numeric = (int, float)
        if (
            isinstance(lhs.value, numeric)
            and isinstance(rhs.value, numeric)
            and not isinstance(lhs.value, bool)
            and not isinstance(rhs.value, bool)
        ):
            return Evaluation(lhs.value + rhs.value, True)
        return _UNKNOWN

    def _evaluate_array(self, elements: tuple[Node | None, ...]) -> Evaluation:
        values: list[object] = []
        for element in elements:
            if element is None:
                return _UNKNOWN
            evaluated = self.try_evaluate(element)
            if not evaluated.confident:
                return _UNKNOWN
            values.append(evaluated.value)
        return Evaluation(values, True)

    def _evaluate_object(self, properties: tuple[Node, ...]) -> Evaluation:
        values: dict[str, object] = {}
        for prop in properties:
            if not isinstance(prop, Property) or prop.name is None:
                return _UNKNOWN
            evaluated = self.try_evaluate(prop.value)
            if not evaluated.confident:
                return _UNKNOWN
            values[prop.name] = evaluated.value
        return Evaluation(values, True)
