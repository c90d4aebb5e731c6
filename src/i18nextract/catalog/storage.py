"""Catalog storage abstraction.

The catalog writer only needs four file operations plus path joining.
CatalogStorage is a Protocol (structural typing) so build tools can plug in
their own virtual file systems.

Components:
    CatalogStorage - Protocol for catalog storage
    FileSystemStorage - Disk storage rooted at a base directory
    MemoryStorage - In-memory storage for tests and dry runs

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import posixpath
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

__all__ = ["CatalogStorage", "FileSystemStorage", "MemoryStorage"]


class CatalogStorage(Protocol):
    """Protocol for reading and writing catalog files.

    Paths are opaque strings produced by join(); implementations decide
    how they map to physical locations.

    Example:
        >>> class S3Storage:
        ...     def join(self, *parts: str) -> str:
        ...         return "/".join(parts)
        ...     def make_dirs(self, path: str) -> None:
        ...         pass  # prefixes need no creation
        ...     def exists(self, path: str) -> bool: ...
        ...     def read_text(self, path: str) -> str: ...
        ...     def write_text(self, path: str, content: str) -> None: ...
    """

    def join(self, *parts: str) -> str:
        """Join path segments."""
        ...

    def make_dirs(self, path: str) -> None:
        """Create a directory and its parents; existing directories are fine."""
        ...

    def exists(self, path: str) -> bool:
        """Check whether a file exists."""
        ...

    def read_text(self, path: str) -> str:
        """Read a UTF-8 file.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        ...

    def write_text(self, path: str, content: str) -> None:
        """Write a UTF-8 file, replacing existing content."""
        ...


@dataclass(frozen=True, slots=True)
class FileSystemStorage:
    """Disk storage with paths relative to a root directory.

    Attributes:
        root: Base directory for relative paths (default: working directory
              at construction time)

    Example:
        >>> storage = FileSystemStorage("/srv/app")
        >>> storage.join("locales", "en", "app.json")
        '/srv/app/locales/en/app.json'
    """

    root: str = field(default_factory=lambda: str(Path.cwd()))

    def join(self, *parts: str) -> str:
        """Join segments onto the root directory."""
        return str(Path(self.root).joinpath(*parts))

    def make_dirs(self, path: str) -> None:
        """Create path and its parents."""
        Path(path).mkdir(parents=True, exist_ok=True)

    def exists(self, path: str) -> bool:
        """Check whether path is an existing file."""
        return Path(path).is_file()

    def read_text(self, path: str) -> str:
        """Read path as UTF-8."""
        return Path(path).read_text(encoding="utf-8")

    def write_text(self, path: str, content: str) -> None:
        """Write content to path as UTF-8."""
        Path(path).write_text(content, encoding="utf-8")


@dataclass(slots=True)
class MemoryStorage:
    """In-memory storage with POSIX-style paths.

    Thread-safe: all operations take an internal lock.

    Attributes:
        files: Path to content mapping
        directories: Created directories
    """

    files: dict[str, str] = field(default_factory=dict)
    directories: set[str] = field(default_factory=set)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def join(self, *parts: str) -> str:
        """Join segments with '/'."""
        return posixpath.join(*parts) if parts else ""

    def make_dirs(self, path: str) -> None:
        """Record path and all of its parents as directories."""
        with self._lock:
            current = path
            while current and current not in self.directories:
                self.directories.add(current)
                parent = posixpath.dirname(current)
                if parent == current:
                    break
                current = parent

    def exists(self, path: str) -> bool:
        """Check whether a file was written at path."""
        with self._lock:
            return path in self.files

    def read_text(self, path: str) -> str:
        """Return the content written at path.

        Raises:
            FileNotFoundError: If nothing was written at path
        """
        with self._lock:
            try:
                return self.files[path]
            except KeyError:
                raise FileNotFoundError(path) from None

    def write_text(self, path: str, content: str) -> None:
        """Store content at path.

        Raises:
            FileNotFoundError: If the parent directory was never created
        """
        with self._lock:
            parent = posixpath.dirname(path)
            if parent and parent not in self.directories:
                raise FileNotFoundError(parent)
            self.files[path] = content
