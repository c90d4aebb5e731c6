"""Extraction visitor.

Walks one compiled unit, hands recognized nodes to the DescriptorBuilder
and stores the results in the unit's ExtractionContext. Traversal always
continues into children, so translate calls nested in components, render
props and wrap-call arguments are found too.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from i18nextract.enums import MatchKind
from i18nextract.syntax.visitor import ASTVisitor

from .builder import DescriptorBuilder
from .matcher import classify_call, classify_element

if TYPE_CHECKING:
    from i18nextract.syntax.ast import CallExpression, ElementNode

    from .context import ExtractionContext

__all__ = ["ExtractionVisitor"]


class ExtractionVisitor(ASTVisitor):
    """Visitor that fills an ExtractionContext.

    Example:
        >>> context = ExtractionContext("src/App.jsx", config, imports, evaluator)
        >>> ExtractionVisitor(context).visit(program)
        >>> context.descriptors()
    """

    def __init__(self, context: ExtractionContext, *, max_depth: int | None = None) -> None:
        """Initialize visitor for one unit."""
        super().__init__(max_depth=max_depth)
        self.context = context
        self.builder = DescriptorBuilder(context)

    def visit_ElementNode(self, node: ElementNode) -> None:
        """Extract text components and register namespace components."""
        match classify_element(node, self.context):
            case MatchKind.TEXT_COMPONENT:
                descriptor = self.builder.from_text_component(node)
                if descriptor is not None:
                    self.context.store_message(descriptor)
            case MatchKind.NAMESPACE_COMPONENT:
                self.builder.register_component_namespaces(node)
            case _:
                pass
        self.generic_visit(node)

    def visit_CallExpression(self, node: CallExpression) -> None:
        """Extract translate calls and register wrap-call namespaces."""
        match classify_call(node, self.context):
            case MatchKind.TRANSLATE_CALL:
                descriptor = self.builder.from_translate_call(node)
                if descriptor is not None:
                    self.context.store_message(descriptor)
            case MatchKind.WRAP_NAMESPACES:
                self.builder.register_wrap_namespaces(node)
            case _:
                pass
        self.generic_visit(node)
