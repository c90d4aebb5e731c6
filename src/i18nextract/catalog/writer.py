"""Catalog writer.

Writes one unit's catalog into <output>/<locale>/<namespace>.json for every
configured locale, merging with whatever is already on disk. Existing
values win, so translations and edited defaults survive re-extraction.

Concurrency:
    The read-merge-write of each catalog file is serialized per path within
    the process. Separate processes writing the same catalog can still lose
    updates (last writer wins); run batch extraction from one process.

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
import threading
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from i18nextract.constants import CATALOG_INDENT, CATALOG_SUFFIX
from i18nextract.diagnostics import MalformedCatalogError
from i18nextract.diagnostics.templates import ErrorTemplate
from i18nextract.enums import WriteStatus

from .merge import merge_catalogs

if TYPE_CHECKING:
    from .storage import CatalogStorage

__all__ = ["CatalogWriteResult", "CatalogWriter", "serialize_catalog"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CatalogWriteResult:
    """Result of writing one catalog file.

    Attributes:
        locale: Locale directory written
        namespace: Namespace (file name without extension)
        path: Storage path of the file
        status: Whether the file was created, updated or left unchanged
    """

    locale: str
    namespace: str
    path: str
    status: WriteStatus

    @property
    def changed(self) -> bool:
        """Check whether the file content was written."""
        return self.status != WriteStatus.UNCHANGED


def serialize_catalog(tree: Mapping[str, Any]) -> str:
    """Serialize a message tree with stable two-space indentation."""
    return json.dumps(tree, indent=CATALOG_INDENT, ensure_ascii=False)


def _validate_namespace(namespace: str) -> None:
    """Reject namespaces that would escape the locale directory.

    Raises:
        ValueError: If namespace is empty or contains path components
    """
    if not namespace:
        msg = "Namespace cannot be empty"
        raise ValueError(msg)
    if "/" in namespace or "\\" in namespace:
        msg = f"Path separators not allowed in namespace: '{namespace}'"
        raise ValueError(msg)
    if ".." in namespace:
        msg = f"Path traversal sequences not allowed in namespace: '{namespace}'"
        raise ValueError(msg)


class CatalogWriter:
    """Merges catalogs into per-locale JSON files.

    Example:
        >>> writer = CatalogWriter(storage, output="locales", locales=("en", "fr"))
        >>> results = writer.write({"app": {"greeting": "Hello"}})
        >>> [(r.locale, r.status) for r in results]
        [('en', 'created'), ('fr', 'created')]
    """

    # Locks are shared by every writer in the process, keyed by file path
    _path_locks: dict[str, threading.Lock] = {}
    _path_locks_guard = threading.Lock()

    __slots__ = ("_locales", "_output", "_storage")

    def __init__(self, storage: CatalogStorage, output: str, locales: tuple[str, ...]) -> None:
        """Initialize writer.

        Args:
            storage: Storage backend
            output: Output directory, relative to the storage root
            locales: Locale directories to write
        """
        self._storage = storage
        self._output = output
        self._locales = locales

    @classmethod
    def _lock_for(cls, path: str) -> threading.Lock:
        with cls._path_locks_guard:
            lock = cls._path_locks.get(path)
            if lock is None:
                lock = threading.Lock()
                cls._path_locks[path] = lock
            return lock

    def catalog_path(self, locale: str, namespace: str) -> str:
        """Storage path of one catalog file."""
        return self._storage.join(self._output, locale, f"{namespace}{CATALOG_SUFFIX}")

    def read_catalog(self, path: str) -> dict[str, Any]:
        """Load an existing catalog file, or an empty tree if it is missing.

        Raises:
            MalformedCatalogError: If the file is not a JSON object
        """
        if not self._storage.exists(path):
            return {}
        return self._parse(path, self._storage.read_text(path))

    @staticmethod
    def _parse(path: str, content: str) -> dict[str, Any]:
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise MalformedCatalogError(
                ErrorTemplate.malformed_catalog(path, str(e)), path=path
            ) from e
        if not isinstance(data, dict):
            raise MalformedCatalogError(
                ErrorTemplate.malformed_catalog(path, f"root is {type(data).__name__}, not an object"),
                path=path,
            )
        return data

    def write(self, catalog: Mapping[str, Mapping[str, Any]]) -> tuple[CatalogWriteResult, ...]:
        """Merge catalog into every locale's files.

        Each locale is merged independently: the extracted tree is the same
        for all locales, but the existing files differ.

        Args:
            catalog: Namespace to message tree mapping

        Returns:
            One result per (locale, namespace), locales in configured order

        Raises:
            MalformedCatalogError: If an existing file is not a JSON object;
                files written before the failure stay written
            ValueError: If a namespace is not a safe file name
        """
        for namespace in catalog:
            _validate_namespace(namespace)

        results: list[CatalogWriteResult] = []
        for locale in self._locales:
            self._storage.make_dirs(self._storage.join(self._output, locale))
            for namespace, tree in catalog.items():
                results.append(self._write_one(locale, namespace, tree))
        return tuple(results)

    def _write_one(self, locale: str, namespace: str, tree: Mapping[str, Any]) -> CatalogWriteResult:
        path = self.catalog_path(locale, namespace)
        with self._lock_for(path):
            existed = self._storage.exists(path)
            previous = self._storage.read_text(path) if existed else None
            existing = self._parse(path, previous) if previous is not None else {}
            content = serialize_catalog(merge_catalogs(existing, tree))

            if content == previous:
                logger.debug("Catalog unchanged: %s", path)
                return CatalogWriteResult(locale, namespace, path, WriteStatus.UNCHANGED)

            self._storage.write_text(path, content)
            status = WriteStatus.UPDATED if existed else WriteStatus.CREATED
            logger.info("Catalog %s: %s", status, path)
            return CatalogWriteResult(locale, namespace, path, status)
