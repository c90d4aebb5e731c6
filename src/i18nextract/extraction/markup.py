"""Inline markup renderer.

Turns the children of a text component into an interpolatable default
value. Nested elements become numbered placeholder tags, object-literal
expressions become {{variable}} interpolations:

    <Trans>Hello <b>world</b>{{ name, format: 'upper' }}</Trans>
    -> "Hello <0>world</0><1>{{name}}</1>"

Placeholder numbers are zero-based positions among the non-text siblings:
text never takes a number, and whitespace-only text and empty expressions
are dropped. Other expressions render nothing but keep their number.

Python 3.13+.
"""

import re
from collections.abc import Sequence
from typing import Literal, NamedTuple

from i18nextract.constants import FORMAT_PROPERTY, MAX_DEPTH
from i18nextract.core.depth_guard import DepthGuard
from i18nextract.syntax.ast import (
    ElementNode,
    EmptyExpression,
    ExpressionContainer,
    Node,
    ObjectExpression,
    Property,
    TextNode,
)

__all__ = ["interpolation_name", "render_children", "strip_text"]

_LEADING_BREAK = re.compile(r"\A\s*[\r\n]\s*")
_TRAILING_BREAK = re.compile(r"\s*[\r\n]\s*\Z")


class _Segment(NamedTuple):
    kind: Literal["text", "tag", "interpolation", "other"]
    content: str = ""
    children: tuple["_Segment", ...] = ()


def strip_text(value: str) -> str:
    """Strip one leading and one trailing whitespace run containing a line break.

    Whitespace without a line break, and interior whitespace, is kept.

    Example:
        >>> strip_text("\\n    Hello there\\n  ")
        'Hello there'
        >>> strip_text("Hello ")
        'Hello '
    """
    value = _LEADING_BREAK.sub("", value, count=1)
    return _TRAILING_BREAK.sub("", value, count=1)


def interpolation_name(expression: ObjectExpression) -> str | None:
    """Name of the first non-format property of an interpolation object."""
    for prop in expression.properties:
        if isinstance(prop, Property) and prop.name is not None and prop.name != FORMAT_PROPERTY:
            return prop.name
    return None


def _parse(children: Sequence[Node], guard: DepthGuard) -> tuple[_Segment, ...]:
    segments: list[_Segment] = []
    for child in children:
        match child:
            case TextNode(value=value):
                text = strip_text(value)
                if text:
                    segments.append(_Segment("text", text))
            case ExpressionContainer(expression=EmptyExpression()):
                continue
            case ExpressionContainer(expression=ObjectExpression() as expression):
                name = interpolation_name(expression)
                content = "" if name is None else "{{" + name + "}}"
                segments.append(_Segment("interpolation", content))
            case ElementNode(children=nested):
                with guard:
                    segments.append(_Segment("tag", children=_parse(nested, guard)))
            case _:
                segments.append(_Segment("other"))
    return tuple(segments)


def _format(segments: tuple[_Segment, ...]) -> str:
    parts: list[str] = []
    index = 0
    for segment in segments:
        match segment.kind:
            case "text":
                parts.append(segment.content)
                continue
            case "interpolation":
                parts.append(f"<{index}>{segment.content}</{index}>")
            case "tag":
                parts.append(f"<{index}>{_format(segment.children)}</{index}>")
            case _:
                pass
        index += 1
    return "".join(parts)


def render_children(children: Sequence[Node], *, max_depth: int | None = None) -> str:
    """Render component children to a default value with placeholders.

    Args:
        children: Child nodes of the text component, in source order
        max_depth: Maximum element nesting (default: MAX_DEPTH from constants)

    Returns:
        Concatenated default value; "" when nothing survives filtering

    Raises:
        DepthLimitExceededError: If elements nest deeper than max_depth

    Example:
        >>> render_children([TextNode("Hello "), bold_world, name_interpolation])
        'Hello <0>world</0><1>{{name}}</1>'
    """
    guard = DepthGuard(max_depth=max_depth if max_depth is not None else MAX_DEPTH)
    return _format(_parse(children, guard))
