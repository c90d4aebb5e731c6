"""Message catalog package.

Provides catalog construction from descriptors, the left-biased merge with
existing catalog files, the per-locale writer and the storage backends.

Submodules:
    merge   - build_catalog, merge_catalogs, set_path
    writer  - CatalogWriter, CatalogWriteResult, serialize_catalog
    storage - CatalogStorage protocol, FileSystemStorage, MemoryStorage

Python 3.13+.
"""

from .merge import build_catalog, merge_catalogs, set_path
from .storage import CatalogStorage, FileSystemStorage, MemoryStorage
from .writer import CatalogWriter, CatalogWriteResult, serialize_catalog

__all__ = [
    "CatalogStorage",
    "CatalogWriteResult",
    "CatalogWriter",
    "FileSystemStorage",
    "MemoryStorage",
    "build_catalog",
    "merge_catalogs",
    "serialize_catalog",
    "set_path",
]
