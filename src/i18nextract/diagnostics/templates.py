"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceLocation


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def non_static_expression(
        what: str, location: SourceLocation | None
    ) -> Diagnostic:
        """Value could not be reduced to a constant.

        Args:
            what: Description of the value (e.g. "key", "namespace")
            location: Location of the offending node

        Returns:
            Diagnostic for NON_STATIC_EXPRESSION
        """
        msg = f"Value of '{what}' must be statically determinable for extraction"
        return Diagnostic(
            code=DiagnosticCode.NON_STATIC_EXPRESSION,
            message=msg,
            location=location,
            hint="Use a string literal or a concatenation of string literals",
        )

    @staticmethod
    def invalid_descriptor_value(
        what: str, expected: str, received: object, location: SourceLocation | None
    ) -> Diagnostic:
        """Constant value has the wrong type.

        Args:
            what: Description of the value
            expected: Expected type name
            received: The evaluated value
            location: Location of the offending node

        Returns:
            Diagnostic for INVALID_DESCRIPTOR_VALUE
        """
        received_type = type(received).__name__
        msg = f"Value of '{what}' must be {expected}, got {received_type} {received!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_DESCRIPTOR_VALUE,
            message=msg,
            location=location,
            hint=f"Pass {expected} for '{what}'",
        )

    @staticmethod
    def dynamic_namespace_list(location: SourceLocation | None) -> Diagnostic:
        """Function supplied as namespace list.

        Args:
            location: Location of the wrap call or component

        Returns:
            Diagnostic for DYNAMIC_NAMESPACE_LIST
        """
        return Diagnostic(
            code=DiagnosticCode.DYNAMIC_NAMESPACE_LIST,
            message="Function namespace lists are not supported for extraction",
            location=location,
            hint="Pass a namespace string or an array of namespace strings",
        )

    @staticmethod
    def conflicting_default_value(
        identity: str,
        first_value: str,
        second_value: str,
        first: SourceLocation | None,
        second: SourceLocation | None,
    ) -> Diagnostic:
        """Same identity extracted with different default values.

        Args:
            identity: Shared message identity
            first_value: Default value stored first
            second_value: Conflicting default value
            first: Location of the first message
            second: Location of the conflicting message

        Returns:
            Diagnostic for CONFLICTING_DEFAULT_VALUE
        """
        msg = (
            f"Message '{identity}' extracted with different default values: "
            f"{first_value!r} and {second_value!r}"
        )
        return Diagnostic(
            code=DiagnosticCode.CONFLICTING_DEFAULT_VALUE,
            message=msg,
            location=second,
            hint="Use the same default value everywhere or give the messages distinct keys",
            related=(first,) if first is not None else (),
        )

    @staticmethod
    def unregistered_namespace_prefix(
        prefix: str, raw_key: str, location: SourceLocation | None
    ) -> Diagnostic:
        """Key prefix does not name a declared namespace.

        Args:
            prefix: The namespace prefix of the key
            raw_key: The complete key
            location: Location of the message

        Returns:
            Diagnostic for UNREGISTERED_NAMESPACE_PREFIX
        """
        msg = f"Namespace '{prefix}' of key '{raw_key}' is not declared in this file"
        return Diagnostic(
            code=DiagnosticCode.UNREGISTERED_NAMESPACE_PREFIX,
            message=msg,
            location=location,
            hint=f"Declare '{prefix}' with translate([...]) or <I18n ns={{[...]}}>",
        )

    @staticmethod
    def malformed_catalog(path: str, reason: str) -> Diagnostic:
        """Existing catalog file cannot be merged.

        Args:
            path: Catalog file path
            reason: Parser error or structural problem

        Returns:
            Diagnostic for MALFORMED_CATALOG
        """
        msg = f"Catalog '{path}' is not a valid JSON object: {reason}"
        return Diagnostic(
            code=DiagnosticCode.MALFORMED_CATALOG,
            message=msg,
            path=path,
            hint="Fix or delete the catalog file, then run extraction again",
        )

    @staticmethod
    def depth_exceeded(max_depth: int) -> Diagnostic:
        """Maximum nesting depth exceeded.

        Args:
            max_depth: Maximum allowed depth

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            hint="Check for deeply nested or programmatically constructed trees",
        )
