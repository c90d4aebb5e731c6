"""Extraction exception hierarchy with structured diagnostics.

Every fatal condition aborts processing of the current compiled unit only.
All exceptions can carry a Diagnostic for rich, location-aware reporting.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, SourceLocation


class ExtractionError(Exception):
    """Base exception for all extraction errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ExtractionError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def location(self) -> SourceLocation | None:
        """Source location of the failure, if known."""
        return self.diagnostic.location if self.diagnostic else None


class NonStaticExpressionError(ExtractionError):
    """A value required to be a compile-time constant could not be evaluated.

    Example:
        t(keyFromProps)  <- key is a runtime value
    """


class InvalidDescriptorValueError(ExtractionError):
    """A descriptor value evaluated to a constant of the wrong type.

    Example:
        t(42)  <- keys must be strings
    """


class UnsupportedDynamicNamespaceListError(ExtractionError):
    """A function was supplied where a static namespace list was required.

    Example:
        translate(props => props.namespaces)(Component)
    """


class ConflictingDefaultValueError(ExtractionError):
    """Two extractions share an identity but render different default text.

    Attributes:
        identity: The shared message identity
        first: Location of the message stored first
        second: Location of the conflicting message
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        identity: str = "",
        first: SourceLocation | None = None,
        second: SourceLocation | None = None,
    ) -> None:
        """Initialize ConflictingDefaultValueError.

        Args:
            message: Error message string OR Diagnostic object
            identity: The shared message identity
            first: Location of the message stored first
            second: Location of the conflicting message
        """
        super().__init__(message)
        self.identity = identity
        self.first = first
        self.second = second


class UnregisteredNamespacePrefixError(ExtractionError):
    """A key references a namespace id never declared in the same unit.

    Example:
        translate('app')(Component) ... t('admin:title')
    """


class MalformedCatalogError(ExtractionError):
    """An on-disk catalog file is not a valid JSON object.

    Attributes:
        path: Catalog file path
    """

    def __init__(self, message: str | Diagnostic, *, path: str = "") -> None:
        """Initialize MalformedCatalogError.

        Args:
            message: Error message string OR Diagnostic object
            path: Catalog file path
        """
        super().__init__(message)
        self.path = path
