"""Diagnostic system for extraction errors.

Provides structured error diagnostics with codes, source locations and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceLocation
from .errors import (
    ConflictingDefaultValueError,
    ExtractionError,
    InvalidDescriptorValueError,
    MalformedCatalogError,
    NonStaticExpressionError,
    UnregisteredNamespacePrefixError,
    UnsupportedDynamicNamespaceListError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ConflictingDefaultValueError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "ExtractionError",
    "InvalidDescriptorValueError",
    "MalformedCatalogError",
    "NonStaticExpressionError",
    "OutputFormat",
    "SourceLocation",
    "UnregisteredNamespacePrefixError",
    "UnsupportedDynamicNamespaceListError",
]
