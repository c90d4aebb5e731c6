"""Message descriptor model.

A MessageDescriptor is what one translate call or text component
contributes to the catalog, before namespace resolution.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from i18nextract.constants import CONTEXT_SEPARATOR, FALLBACK_KEY_PREFIX, PLURAL_SUFFIX
from i18nextract.diagnostics import SourceLocation

__all__ = [
    "MessageDescriptor",
    "NamespaceEntry",
    "key_variants",
]


@dataclass(frozen=True, slots=True)
class MessageDescriptor:
    """One extracted message.

    Attributes:
        key: Raw key, possibly namespace-prefixed ('common:title'); None for
             key-less text components
        default_value: Default text in the source language
        context: Context suffix ('male' for friend_male)
        plural: True when a count was passed
        fallback_keys: Additional keys from array-form keys, in order
        location: Where the message was extracted
    """

    key: str | None
    default_value: str = ""
    context: str | None = None
    plural: bool = False
    fallback_keys: tuple[str, ...] = ()
    location: SourceLocation | None = None

    @property
    def identity(self) -> str:
        """Deduplication identity: the raw key, else the default value."""
        return self.key or self.default_value

    @property
    def fallbacks(self) -> dict[str, str]:
        """Fallback keys named fallback-1, fallback-2, ..."""
        return {f"{FALLBACK_KEY_PREFIX}{index}": key for index, key in enumerate(self.fallback_keys, start=1)}

    def same_variant(self, other: "MessageDescriptor") -> bool:
        """Check whether two descriptors contribute the same catalog entries."""
        return (
            self.key == other.key
            and self.default_value == other.default_value
            and self.context == other.context
            and self.plural == other.plural
            and self.fallback_keys == other.fallback_keys
        )


@dataclass(frozen=True, slots=True)
class NamespaceEntry:
    """Namespace declared in a compiled unit.

    Attributes:
        id: Registry id: the default-namespace sentinel or the namespace name
            used as a key prefix
        namespace: Catalog namespace (file name without extension)
        location: Where the namespace was declared
    """

    id: str
    namespace: str
    location: SourceLocation | None = None


def key_variants(base: str, context: str | None, plural: bool) -> tuple[str, ...]:
    """Expand a base key into its catalog keys.

    Example:
        >>> key_variants("friend", "male", False)
        ('friend', 'friend_male')
        >>> key_variants("item", None, True)
        ('item', 'item_plural')
        >>> key_variants("item", "box", True)
        ('item', 'item_box', 'item_box_plural')
    """
    variants = [base]
    if context:
        contextual = f"{base}{CONTEXT_SEPARATOR}{context}"
        variants.append(contextual)
        if plural:
            variants.append(f"{contextual}{PLURAL_SUFFIX}")
    elif plural:
        variants.append(f"{base}{PLURAL_SUFFIX}")
    return tuple(variants)
