"""Descriptor builder.

Evaluates the sub-trees the matcher found into concrete values and turns
them into MessageDescriptors and namespace registrations:

    t('greeting', 'Hello')                    -> key + default value
    t('friend', { context: 'male', count })   -> key + context + plural
    t(['error.404', 'error.unknown'])         -> key + fallback keys
    <Trans i18nKey="welcome">Hi <b>you</b></Trans>
                                              -> key + rendered default value
    translate(['app', 'common'])              -> namespace registrations
    <I18n ns="app">                           -> namespace registrations

Every value must be statically determinable; anything else aborts the unit.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

from i18nextract.constants import (
    DEFAULT_NAMESPACE_ID,
    ATTRIBUTE_PROPERTIES,
    NAMESPACE_ATTRIBUTE,
    OPTION_PROPERTIES,
    PLURAL_PROPERTY,
)
from i18nextract.diagnostics import (
    InvalidDescriptorValueError,
    NonStaticExpressionError,
    SourceLocation,
    UnsupportedDynamicNamespaceListError,
)
from i18nextract.diagnostics.templates import ErrorTemplate
from i18nextract.syntax.ast import (
    Attribute,
    CallExpression,
    ElementNode,
    ExpressionContainer,
    FunctionExpression,
    Node,
    ObjectExpression,
    Property,
    StringLiteral,
)

from .descriptor import MessageDescriptor
from .markup import render_children

if TYPE_CHECKING:
    from .context import ExtractionContext

__all__ = ["DescriptorBuilder"]

logger = logging.getLogger(__name__)

_STRING = "a string"
_KEY_TYPES = "a string or an array of strings"
_NAMESPACE_TYPES = "a namespace string or an array of namespace strings"


class DescriptorBuilder:
    """Builds descriptors and namespace entries for one compiled unit."""

    __slots__ = ("_context",)

    def __init__(self, context: ExtractionContext) -> None:
        """Initialize builder bound to a per-unit context."""
        self._context = context

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def _location(self, *nodes: Node | None) -> SourceLocation | None:
        for node in nodes:
            location = self._context.location_of(node)
            if location is not None:
                return location
        return None

    def evaluate(self, node: Node, what: str, *, site: Node | None = None) -> object:
        """Evaluate node to a constant.

        Args:
            node: Expression to evaluate
            what: Name of the value, for diagnostics
            site: Enclosing call or element, used when node has no location

        Raises:
            NonStaticExpressionError: If the evaluator is not confident
        """
        if isinstance(node, ExpressionContainer):
            node = node.expression
        evaluated = self._context.evaluator.try_evaluate(node)
        if not evaluated.confident:
            raise NonStaticExpressionError(
                ErrorTemplate.non_static_expression(what, self._location(node, site))
            )
        return evaluated.value

    def evaluate_string(self, node: Node, what: str, *, site: Node | None = None) -> str:
        """Evaluate node to a string constant.

        Raises:
            NonStaticExpressionError: If the evaluator is not confident
            InvalidDescriptorValueError: If the constant is not a string
        """
        value = self.evaluate(node, what, site=site)
        if not isinstance(value, str):
            raise InvalidDescriptorValueError(
                ErrorTemplate.invalid_descriptor_value(what, _STRING, value, self._location(node, site))
            )
        return value

    # ------------------------------------------------------------------
    # Descriptor properties
    # ------------------------------------------------------------------

    def _descriptor_fields(
        self,
        pairs: Iterable[tuple[str, Node | None]],
        properties: Mapping[str, str],
        site: Node,
    ) -> dict[str, object]:
        """Collect recognized descriptor properties from name/value pairs.

        A None value stands for a bare JSX attribute, which means true.
        String values are stripped.
        """
        fields: dict[str, object] = {}
        for name, value_node in pairs:
            if name == PLURAL_PROPERTY:
                fields["plural"] = True
                continue
            field = properties.get(name)
            if field is None:
                continue
            if value_node is None:
                raise InvalidDescriptorValueError(
                    ErrorTemplate.invalid_descriptor_value(name, _STRING, True, self._location(site))
                )
            fields[field] = self.evaluate_string(value_node, name, site=site).strip()
        return fields

    def _attribute_pairs(self, element: ElementNode) -> list[tuple[str, Node | None]]:
        return [
            (attribute.name, attribute.value)
            for attribute in element.opening.attributes
            if isinstance(attribute, Attribute)
        ]

    def _property_pairs(self, expression: ObjectExpression) -> list[tuple[str, Node | None]]:
        return [
            (prop.name, prop.value)
            for prop in expression.properties
            if isinstance(prop, Property) and prop.name is not None
        ]

    def _descriptor(
        self,
        fields: dict[str, object],
        site: Node,
        *,
        fallback_keys: tuple[str, ...] = (),
    ) -> MessageDescriptor | None:
        key = fields.get("key") or None
        default_value = fields.get("default_value") or ""
        location = self._location(site)
        if key is None and not default_value:
            logger.warning("Skipping message without key or default value at %s", location)
            return None
        return MessageDescriptor(
            key=key,  # type: ignore[arg-type]
            default_value=default_value,  # type: ignore[arg-type]
            context=fields.get("context") or None,  # type: ignore[arg-type]
            plural=bool(fields.get("plural", False)),
            fallback_keys=fallback_keys,
            location=location,
        )

    # ------------------------------------------------------------------
    # Text components
    # ------------------------------------------------------------------

    def from_text_component(self, element: ElementNode) -> MessageDescriptor | None:
        """Build the descriptor of a text component.

        The rendered children are the default value; a defaultValue
        attribute is used only when the component has no content.
        """
        fields = self._descriptor_fields(
            self._attribute_pairs(element), ATTRIBUTE_PROPERTIES, element.opening
        )
        rendered = render_children(element.children)
        if rendered:
            fields["default_value"] = rendered
        return self._descriptor(fields, element.opening)

    # ------------------------------------------------------------------
    # Translate calls
    # ------------------------------------------------------------------

    def _key_argument(self, node: Node, site: Node) -> tuple[str | None, tuple[str, ...]]:
        value = self.evaluate(node, "key", site=site)
        if isinstance(value, str):
            return value or None, ()
        if isinstance(value, list) and value and all(isinstance(item, str) for item in value):
            return value[0] or None, tuple(value[1:])
        raise InvalidDescriptorValueError(
            ErrorTemplate.invalid_descriptor_value("key", _KEY_TYPES, value, self._location(node, site))
        )

    def from_translate_call(self, call: CallExpression) -> MessageDescriptor | None:
        """Build the descriptor of a t(key, options, context) call."""
        arguments = call.arguments
        fields: dict[str, object] = {}
        key: str | None = None
        fallback_keys: tuple[str, ...] = ()

        if arguments:
            key, fallback_keys = self._key_argument(arguments[0], call)

        if len(arguments) > 1:
            options = arguments[1]
            if isinstance(options, ObjectExpression):
                fields.update(
                    self._descriptor_fields(self._property_pairs(options), OPTION_PROPERTIES, call)
                )
            else:
                fields["default_value"] = self.evaluate_string(options, "defaultValue", site=call)

        if len(arguments) > 2:
            fields["context"] = self.evaluate_string(arguments[2], "context", site=call)

        if key is not None:
            fields["key"] = key
        return self._descriptor(fields, call, fallback_keys=fallback_keys)

    # ------------------------------------------------------------------
    # Namespaces
    # ------------------------------------------------------------------

    def _namespace_names(self, node: Node, site: Node) -> list[str]:
        if isinstance(node, ExpressionContainer):
            node = node.expression
        if isinstance(node, FunctionExpression):
            raise UnsupportedDynamicNamespaceListError(
                ErrorTemplate.dynamic_namespace_list(self._location(node, site))
            )
        value = self.evaluate(node, "namespace", site=site)
        if isinstance(value, str):
            return [value]
        if isinstance(value, list) and all(isinstance(item, str) for item in value):
            return list(value)
        raise InvalidDescriptorValueError(
            ErrorTemplate.invalid_descriptor_value(
                "namespace", _NAMESPACE_TYPES, value, self._location(node, site)
            )
        )

    def _register_namespaces(self, names: list[str], site: Node) -> None:
        """Register names: the first is the unit default, all are prefixes."""
        registry = self._context.namespaces
        location = self._location(site)
        if not names:
            registry.register(DEFAULT_NAMESPACE_ID, self._context.config.default_namespace, location)
            return
        registry.register(DEFAULT_NAMESPACE_ID, names[0], location)
        for name in names:
            registry.register(name, name, location)
        logger.debug("Registered namespaces %s at %s", names, location)

    def register_wrap_namespaces(self, call: CallExpression) -> None:
        """Register namespaces of a translate(...) / withNamespaces(...) call."""
        names: list[str] = []
        for argument in call.arguments:
            names.extend(self._namespace_names(argument, call))
        self._register_namespaces(names, call)

    def register_component_namespaces(self, element: ElementNode) -> None:
        """Register namespaces of a namespace-scope component's ns attribute."""
        names: list[str] = []
        for attribute in element.opening.attributes:
            if not isinstance(attribute, Attribute) or attribute.name != NAMESPACE_ATTRIBUTE:
                continue
            if attribute.value is None:
                raise InvalidDescriptorValueError(
                    ErrorTemplate.invalid_descriptor_value(
                        NAMESPACE_ATTRIBUTE, _NAMESPACE_TYPES, True, self._location(attribute, element.opening)
                    )
                )
            if isinstance(attribute.value, StringLiteral):
                names.append(attribute.value.value)
            else:
                names.extend(self._namespace_names(attribute.value, element.opening))
        self._register_namespaces(names, element.opening)
