"""Pattern matcher for translation call sites.

Classifies visited nodes as one of the recognized MatchKind forms. Import
resolution decides for components and wrap calls; the bare translate
function name is trusted without resolution, because t usually arrives
through props or a render-prop parameter rather than an import.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from i18nextract.constants import (
    NAMESPACE_COMPONENT_NAMES,
    TEXT_COMPONENT_NAMES,
    TRANSLATE_FUNCTION_NAME,
    WRAP_FUNCTION_NAMES,
)
from i18nextract.enums import MatchKind
from i18nextract.syntax.ast import CallExpression, ElementNode, Identifier

if TYPE_CHECKING:
    from .context import ExtractionContext

__all__ = ["classify_call", "classify_element"]


def classify_element(node: ElementNode, context: ExtractionContext) -> MatchKind | None:
    """Classify an element by its opening tag.

    Returns None for unrecognized elements and for elements already
    classified in this unit; recognized elements are tagged as extracted.
    """
    opening = node.opening
    if context.was_extracted(opening):
        return None

    module = context.config.module_source_name
    if context.imports.references_import(opening.name, module, TEXT_COMPONENT_NAMES):
        kind = MatchKind.TEXT_COMPONENT
    elif context.imports.references_import(opening.name, module, NAMESPACE_COMPONENT_NAMES):
        kind = MatchKind.NAMESPACE_COMPONENT
    else:
        return None

    context.tag_as_extracted(opening)
    return kind


def classify_call(node: CallExpression, context: ExtractionContext) -> MatchKind | None:
    """Classify a call expression by its callee.

    Returns None for unrecognized calls and for calls already classified
    in this unit; recognized calls are tagged as extracted.
    """
    if context.was_extracted(node):
        return None

    callee = node.callee
    module = context.config.module_source_name
    if context.imports.references_import(callee, module, WRAP_FUNCTION_NAMES):
        kind = MatchKind.WRAP_NAMESPACES
    elif isinstance(callee, Identifier) and callee.name == TRANSLATE_FUNCTION_NAME:
        kind = MatchKind.TRANSLATE_CALL
    else:
        return None

    context.tag_as_extracted(node)
    return kind
