"""Diagnostic codes and data structures.

Defines error codes, source locations, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceLocation",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Extraction errors (matched nodes that cannot be extracted)
        2000-2999: Namespace errors (declaration and key resolution)
        3000-3999: Catalog errors (reading and writing catalog files)
    """

    # Extraction errors (1000-1999)
    NON_STATIC_EXPRESSION = 1001
    INVALID_DESCRIPTOR_VALUE = 1002
    CONFLICTING_DEFAULT_VALUE = 1003
    MAX_DEPTH_EXCEEDED = 1004

    # Namespace errors (2000-2999)
    DYNAMIC_NAMESPACE_LIST = 2001
    UNREGISTERED_NAMESPACE_PREFIX = 2002

    # Catalog errors (3000-3999)
    MALFORMED_CATALOG = 3001


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source code location for error reporting.

    Attributes:
        file: Path of the compiled unit, relative to the working directory
              when possible
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    file: str
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceLocation invariants.

        Raises:
            ValueError: If line or column is less than 1 (both are 1-indexed)
        """
        if self.line < 1:
            msg = f"SourceLocation.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceLocation.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)

    def __str__(self) -> str:
        """Return location as file:line:column."""
        return f"{self.file}:{self.line}:{self.column}"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries everything a developer
    needs to locate and fix an extraction failure.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        location: Source location of the offending node (None if unknown)
        hint: Suggestion for fixing the error
        related: Additional locations involved (e.g. the first of two
                 conflicting messages)
        path: Catalog file path (catalog errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    location: SourceLocation | None = None
    hint: str | None = None
    related: tuple[SourceLocation, ...] = ()
    path: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[NON_STATIC_EXPRESSION]: Value of 'key' must be statically determinable
              --> src/App.jsx:12:9
              = help: Use a string literal or a concatenation of string literals

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
