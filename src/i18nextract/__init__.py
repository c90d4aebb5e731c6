"""i18nextract - static extraction of i18next messages from component source.

Walks the parse tree of a component module, recognizes translate calls,
wrap-with-namespaces calls and Trans/Interpolate/I18n components, and merges
the extracted default messages into per-locale JSON catalogs. No program
code is executed; existing catalog values always win.

Public API:
    MessageExtractor - Extracts one compiled unit at a time
    ExtractorConfig - Extraction options (locales, output, namespaces)
    ExtractionResult - Catalog built from a unit plus per-file write results
    extract_file - Extract an ESTree JSON file from disk
    from_estree - Convert an ESTree/Babel AST mapping to the node model

Storage:
    FileSystemStorage - Catalogs on disk (default)
    MemoryStorage - Catalogs in memory (tests, dry runs)

Exceptions:
    ExtractionError - Base exception class
    NonStaticExpressionError - Descriptor value not statically known
    InvalidDescriptorValueError - Descriptor value of the wrong type
    UnsupportedDynamicNamespaceListError - Function namespace list
    ConflictingDefaultValueError - Same message, two default values
    UnregisteredNamespacePrefixError - Key prefix not declared in the unit
    MalformedCatalogError - Existing catalog file is not a JSON object

Submodules:
    i18nextract.syntax - Node model, ESTree front end, visitor, evaluator
    i18nextract.extraction - Matcher, descriptor builder, markup renderer
    i18nextract.catalog - Catalog building, merging and writing
    i18nextract.diagnostics - Diagnostic codes, templates and formatter
"""

from .catalog import FileSystemStorage, MemoryStorage
from .config import ExtractorConfig
from .core.depth_guard import DepthLimitExceededError
from .diagnostics import (
    ConflictingDefaultValueError,
    ExtractionError,
    InvalidDescriptorValueError,
    MalformedCatalogError,
    NonStaticExpressionError,
    UnregisteredNamespacePrefixError,
    UnsupportedDynamicNamespaceListError,
)
from .enums import WriteStatus
from .extraction import MessageDescriptor
from .extractor import ExtractionResult, MessageExtractor, extract_file
from .syntax import from_estree

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("i18nextract")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ConflictingDefaultValueError",
    "DepthLimitExceededError",
    "ExtractionError",
    "ExtractionResult",
    "ExtractorConfig",
    "FileSystemStorage",
    "InvalidDescriptorValueError",
    "MalformedCatalogError",
    "MemoryStorage",
    "MessageDescriptor",
    "MessageExtractor",
    "NonStaticExpressionError",
    "UnregisteredNamespacePrefixError",
    "UnsupportedDynamicNamespaceListError",
    "WriteStatus",
    "__version__",
    "extract_file",
    "from_estree",
]
