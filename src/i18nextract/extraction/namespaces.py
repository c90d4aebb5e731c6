"""Namespace registry and key resolver.

Each compiled unit declares its namespaces through wrap-with-namespaces
calls (translate(['app', 'common'])) or namespace-scope components
(<I18n ns="app">). The registry records them in visitation order and
decodes prefixed keys ('common:title') into (namespace, bare key).

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from i18nextract.constants import DEFAULT_NAMESPACE, DEFAULT_NAMESPACE_ID
from i18nextract.diagnostics import SourceLocation, UnregisteredNamespacePrefixError
from i18nextract.diagnostics.templates import ErrorTemplate

from .descriptor import NamespaceEntry

__all__ = ["DecodedKey", "NamespaceRegistry"]

logger = logging.getLogger(__name__)


class DecodedKey(NamedTuple):
    """Result of decoding a raw key.

    Attributes:
        namespace: Catalog namespace
        key: Bare key without the namespace prefix; None for key-less messages
    """

    namespace: str
    key: str | None


class NamespaceRegistry:
    """Per-unit table of declared namespaces.

    The sentinel entry (DEFAULT_NAMESPACE_ID) names the unit's default
    namespace. Registration is last-write-wins for every id, including the
    sentinel: a second translate(...) call in the same unit changes the
    default namespace for all messages of the unit.

    Example:
        >>> registry = NamespaceRegistry("translation")
        >>> registry.register(DEFAULT_NAMESPACE_ID, "app")
        >>> registry.register("common", "common")
        >>> registry.decode("common:title", ":")
        DecodedKey(namespace='common', key='title')
        >>> registry.decode("title", ":")
        DecodedKey(namespace='app', key='title')
    """

    __slots__ = ("_entries", "_fallback_namespace")

    def __init__(self, fallback_namespace: str = DEFAULT_NAMESPACE) -> None:
        """Initialize registry.

        Args:
            fallback_namespace: Default namespace when the unit declares none
        """
        self._fallback_namespace = fallback_namespace
        self._entries: dict[str, NamespaceEntry] = {}

    def __len__(self) -> int:
        """Number of registered ids."""
        return len(self._entries)

    def __contains__(self, namespace_id: object) -> bool:
        """Check whether an id is registered."""
        return namespace_id in self._entries

    @property
    def entries(self) -> tuple[NamespaceEntry, ...]:
        """Registered entries in first-registration order."""
        return tuple(self._entries.values())

    @property
    def default_namespace(self) -> str:
        """Namespace of the sentinel entry, or the configured fallback."""
        sentinel = self._entries.get(DEFAULT_NAMESPACE_ID)
        return sentinel.namespace if sentinel is not None else self._fallback_namespace

    def get(self, namespace_id: str) -> NamespaceEntry | None:
        """Look up an entry by id."""
        return self._entries.get(namespace_id)

    def register(
        self,
        namespace_id: str,
        namespace: str,
        location: SourceLocation | None = None,
    ) -> NamespaceEntry:
        """Register (or replace) a namespace entry.

        Args:
            namespace_id: DEFAULT_NAMESPACE_ID or the prefix used in keys
            namespace: Catalog namespace
            location: Declaration location

        Returns:
            The stored entry
        """
        previous = self._entries.get(namespace_id)
        if previous is not None and previous.namespace != namespace:
            logger.debug(
                "Namespace id '%s' re-registered: '%s' -> '%s'",
                namespace_id,
                previous.namespace,
                namespace,
            )
        entry = NamespaceEntry(id=namespace_id, namespace=namespace, location=location)
        self._entries[namespace_id] = entry
        return entry

    def decode(
        self,
        raw_key: str | None,
        separator: str | None,
        location: SourceLocation | None = None,
    ) -> DecodedKey:
        """Split a raw key into namespace and bare key.

        Args:
            raw_key: Key as written in source ('common:title', 'title')
            separator: Namespace separator; None or "" disables prefixes
            location: Message location for error reporting

        Returns:
            DecodedKey with the resolved namespace

        Raises:
            UnregisteredNamespacePrefixError: If the prefix names no
                registered namespace id
        """
        if not raw_key:
            return DecodedKey(self.default_namespace, None)

        if not separator or separator not in raw_key:
            return DecodedKey(self.default_namespace, raw_key)

        prefix, _, rest = raw_key.partition(separator)
        entry = self._entries.get(prefix)
        if entry is None:
            raise UnregisteredNamespacePrefixError(
                ErrorTemplate.unregistered_namespace_prefix(prefix, raw_key, location)
            )
        return DecodedKey(entry.namespace, rest)
