"""Shared constants for i18nextract.

Centralized defaults and recognized names used by the matcher, the
descriptor builder, the catalog writer and the configuration layer.
Placing them here avoids circular imports between subpackages.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Configuration defaults
    "DEFAULT_LOCALES",
    "DEFAULT_OUTPUT",
    "DEFAULT_NAMESPACE",
    "DEFAULT_NAMESPACE_SEPARATOR",
    "DEFAULT_MODULE_SOURCE_NAME",
    # Namespace registry
    "DEFAULT_NAMESPACE_ID",
    # Recognized names
    "TRANSLATE_FUNCTION_NAME",
    "WRAP_FUNCTION_NAMES",
    "TEXT_COMPONENT_NAMES",
    "NAMESPACE_COMPONENT_NAMES",
    "NAMESPACE_ATTRIBUTE",
    # Descriptor properties
    "ATTRIBUTE_PROPERTIES",
    "OPTION_PROPERTIES",
    "PLURAL_PROPERTY",
    "FORMAT_PROPERTY",
    "FALLBACK_KEY_PREFIX",
    # Catalog layout
    "KEY_SEPARATOR",
    "CONTEXT_SEPARATOR",
    "PLURAL_SUFFIX",
    "CATALOG_SUFFIX",
    "CATALOG_INDENT",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting depth for tree conversion, traversal and markup rendering.
# JSX trees nest deeper than most data formats (elements inside expression
# containers inside arrow functions), so the limit is higher than a typical
# template engine would use. Clamped against the recursion limit at runtime.
MAX_DEPTH: int = 200

# ============================================================================
# CONFIGURATION DEFAULTS
# ============================================================================

DEFAULT_LOCALES: tuple[str, ...] = ("en",)
DEFAULT_OUTPUT: str = "locales"
DEFAULT_NAMESPACE: str = "translation"
DEFAULT_NAMESPACE_SEPARATOR: str = ":"
DEFAULT_MODULE_SOURCE_NAME: str = "react-i18next"

# Registry id of the unit's default namespace entry.
DEFAULT_NAMESPACE_ID: str = "defaultNS"

# ============================================================================
# RECOGNIZED NAMES
# ============================================================================

# Bare callee name treated as a translate call without import resolution.
TRANSLATE_FUNCTION_NAME: str = "t"

# Higher-order "wrap with namespaces" functions imported from the module.
WRAP_FUNCTION_NAMES: tuple[str, ...] = ("translate", "withNamespaces")

# Components whose body is a translatable message.
TEXT_COMPONENT_NAMES: tuple[str, ...] = ("Trans", "Interpolate")

# Components that declare namespaces for their render-prop body.
NAMESPACE_COMPONENT_NAMES: tuple[str, ...] = ("I18n",)
NAMESPACE_ATTRIBUTE: str = "ns"

# ============================================================================
# DESCRIPTOR PROPERTIES
# ============================================================================

# Option property name -> MessageDescriptor field, for t() option objects.
OPTION_PROPERTIES: dict[str, str] = {
    "i18nKey": "key",
    "key": "key",
    "context": "context",
    "defaultValue": "default_value",
}

# Attribute name -> MessageDescriptor field, for text components. The key
# attribute belongs to React and never names the message.
ATTRIBUTE_PROPERTIES: dict[str, str] = {
    "i18nKey": "key",
    "context": "context",
    "defaultValue": "default_value",
}

# Presence marks the message as plural; the value is never evaluated.
PLURAL_PROPERTY: str = "count"

# Ignored when picking the interpolation variable of an object expression.
FORMAT_PROPERTY: str = "format"

FALLBACK_KEY_PREFIX: str = "fallback-"

# ============================================================================
# CATALOG LAYOUT
# ============================================================================

KEY_SEPARATOR: str = "."
CONTEXT_SEPARATOR: str = "_"
PLURAL_SUFFIX: str = "_plural"
CATALOG_SUFFIX: str = ".json"
CATALOG_INDENT: int = 2
