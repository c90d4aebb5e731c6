"""Extractor configuration.

ExtractorConfig holds the options of one extraction run. It can be built
directly or from a plugin-style options mapping:

    >>> config = ExtractorConfig.from_mapping({
    ...     "locales": ["en", "fr"],
    ...     "defaultNamespace": "app",
    ... })

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, fields
from typing import Any

from .catalog.storage import CatalogStorage, FileSystemStorage
from .constants import (
    DEFAULT_LOCALES,
    DEFAULT_MODULE_SOURCE_NAME,
    DEFAULT_NAMESPACE,
    DEFAULT_NAMESPACE_SEPARATOR,
    DEFAULT_OUTPUT,
)
from .locale_utils import validate_locale

__all__ = ["ExtractorConfig"]

# Mapping key -> field name. Snake-case field names are accepted as-is.
_OPTION_ALIASES: dict[str, str] = {
    "defaultNamespace": "default_namespace",
    "namespaceSeparator": "namespace_separator",
    # Misspelled key accepted by older configurations
    "namespaceSeperator": "namespace_separator",
    "moduleSourceName": "module_source_name",
    "fs": "storage",
}


@dataclass(frozen=True, slots=True)
class ExtractorConfig:
    """Options of an extraction run.

    Attributes:
        locales: Locale directories to write, in order
        output: Output directory, relative to the storage root
        default_namespace: Namespace of keys without a declared namespace
        namespace_separator: Separator between namespace prefix and key;
            None or "" disables prefixes
        module_source_name: Module the wrap functions are imported from
        storage: Backend the catalogs are read from and written to
    """

    locales: tuple[str, ...] = DEFAULT_LOCALES
    output: str = DEFAULT_OUTPUT
    default_namespace: str = DEFAULT_NAMESPACE
    namespace_separator: str | None = DEFAULT_NAMESPACE_SEPARATOR
    module_source_name: str = DEFAULT_MODULE_SOURCE_NAME
    storage: CatalogStorage = field(default_factory=FileSystemStorage, compare=False)

    def __post_init__(self) -> None:
        """Normalize locales to a tuple and validate every option.

        Raises:
            ValueError: If an option is empty, unsafe as a path component,
                or an unknown locale
            TypeError: If an option has the wrong type
        """
        locales = self.locales
        if isinstance(locales, str):
            locales = (locales,)
        elif isinstance(locales, Iterable):
            locales = tuple(locales)
        else:
            msg = f"locales must be a sequence of strings, got {type(locales).__name__}"
            raise TypeError(msg)
        if not locales:
            msg = "At least one locale is required"
            raise ValueError(msg)
        for locale in locales:
            if not isinstance(locale, str):
                msg = f"Locale must be a string, got {type(locale).__name__}"
                raise TypeError(msg)
            validate_locale(locale)
        if len(set(locales)) != len(locales):
            msg = f"Duplicate locales: {list(locales)}"
            raise ValueError(msg)
        object.__setattr__(self, "locales", locales)

        for name in ("output", "default_namespace", "module_source_name"):
            value = getattr(self, name)
            if not isinstance(value, str):
                msg = f"{name} must be a string, got {type(value).__name__}"
                raise TypeError(msg)
            if not value:
                msg = f"{name} cannot be empty"
                raise ValueError(msg)

        if self.namespace_separator is not None and not isinstance(self.namespace_separator, str):
            msg = (
                "namespace_separator must be a string or None, "
                f"got {type(self.namespace_separator).__name__}"
            )
            raise TypeError(msg)

        if any(sep in self.default_namespace for sep in ("/", "\\")) or ".." in self.default_namespace:
            msg = f"default_namespace must be a plain file name: '{self.default_namespace}'"
            raise ValueError(msg)

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None) -> ExtractorConfig:
        """Build a configuration from a plugin options mapping.

        Accepts the camelCase keys of the plugin options (defaultNamespace,
        namespaceSeparator, moduleSourceName, fs) and the snake_case field
        names. Missing keys take their defaults.

        Raises:
            ValueError: On unknown keys, a key given twice under two names,
                or an invalid value
        """
        if not options:
            return cls()

        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in options.items():
            name = _OPTION_ALIASES.get(key, key)
            if name not in known:
                msg = f"Unknown extractor option: '{key}'"
                raise ValueError(msg)
            if name in kwargs:
                msg = f"Extractor option '{name}' given more than once"
                raise ValueError(msg)
            kwargs[name] = value
        return cls(**kwargs)
