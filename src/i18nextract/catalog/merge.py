"""Catalog construction and merging.

A catalog maps namespace names to nested message trees:

    {"app": {"greeting": "Hello", "friend": {"male": "He"}}}

build_catalog() reshapes one unit's descriptors into such a tree;
merge_catalogs() folds a freshly built tree into an existing one without
ever overwriting an existing value.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, TypeAlias

from i18nextract.constants import DEFAULT_NAMESPACE_SEPARATOR, KEY_SEPARATOR
from i18nextract.extraction.descriptor import MessageDescriptor, key_variants
from i18nextract.extraction.namespaces import NamespaceRegistry

__all__ = ["build_catalog", "merge_catalogs", "set_path"]

logger = logging.getLogger(__name__)

MessageTree: TypeAlias = dict[str, Any]
Catalog: TypeAlias = dict[str, MessageTree]


def set_path(tree: MessageTree, path: str, value: str) -> None:
    """Set value at a dot-separated path, creating objects along the way.

    A leaf in the way of a deeper path is replaced by an object.

    Example:
        >>> tree = {}
        >>> set_path(tree, "friend.male", "He")
        >>> tree
        {'friend': {'male': 'He'}}
    """
    *parents, leaf = path.split(KEY_SEPARATOR)
    node = tree
    for index, segment in enumerate(parents):
        child = node.get(segment)
        if not isinstance(child, dict):
            if child is not None:
                logger.warning(
                    "Replacing value at '%s' with an object to hold '%s'",
                    KEY_SEPARATOR.join(parents[: index + 1]),
                    path,
                )
            child = {}
            node[segment] = child
        node = child
    node[leaf] = value


def build_catalog(
    descriptors: Iterable[MessageDescriptor],
    registry: NamespaceRegistry,
    separator: str | None = DEFAULT_NAMESPACE_SEPARATOR,
) -> Catalog:
    """Reshape descriptors into per-namespace message trees.

    Keyed descriptors are expanded into their context/plural variants and
    set at their dot paths; fallback keys get the same default value.
    Key-less descriptors are stored at the top level of the default
    namespace, keyed by their default value (never split on dots).

    Args:
        descriptors: Descriptors of one compiled unit
        registry: Namespaces declared by the unit
        separator: Namespace separator (None disables prefixes)

    Returns:
        Catalog of the unit

    Raises:
        UnregisteredNamespacePrefixError: If a key uses an undeclared prefix
    """
    catalog: Catalog = {}
    for descriptor in descriptors:
        namespace, key = registry.decode(descriptor.key, separator, descriptor.location)
        tree = catalog.setdefault(namespace, {})
        if key is None:
            for variant in key_variants(descriptor.default_value, descriptor.context, descriptor.plural):
                tree[variant] = descriptor.default_value
        else:
            for variant in key_variants(key, descriptor.context, descriptor.plural):
                set_path(tree, variant, descriptor.default_value)

        for name, fallback in descriptor.fallbacks.items():
            fallback_namespace, fallback_key = registry.decode(fallback, separator, descriptor.location)
            if fallback_key is None:
                continue
            set_path(catalog.setdefault(fallback_namespace, {}), fallback_key, descriptor.default_value)
            logger.debug("Set %s '%s' of '%s'", name, fallback, descriptor.identity)
    return catalog


def merge_catalogs(existing: Mapping[str, Any], fresh: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge fresh into existing; existing values always win.

    Keys only in fresh are appended after the existing keys. Neither input
    is modified.

    Example:
        >>> merge_catalogs({"greeting": "Bonjour"}, {"greeting": "Hello", "bye": "Bye"})
        {'greeting': 'Bonjour', 'bye': 'Bye'}
    """
    merged: dict[str, Any] = {}
    for key, value in existing.items():
        fresh_value = fresh.get(key)
        if isinstance(value, Mapping) and isinstance(fresh_value, Mapping):
            merged[key] = merge_catalogs(value, fresh_value)
        elif isinstance(value, Mapping):
            merged[key] = merge_catalogs(value, {})
        else:
            merged[key] = value
    for key, value in fresh.items():
        if key not in merged:
            merged[key] = merge_catalogs({}, value) if isinstance(value, Mapping) else value
    return merged
