"""Tests for diagnostics: locations, templates, formatting and errors."""

from __future__ import annotations

import json

import pytest

from i18nextract.diagnostics import (
    ConflictingDefaultValueError,
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    ExtractionError,
    MalformedCatalogError,
    OutputFormat,
    SourceLocation,
)

FIRST = SourceLocation("src/Page.jsx", 4, 7)
SECOND = SourceLocation("src/Page.jsx", 9, 7)


class TestSourceLocation:
    """1-based locations rendered as file:line:column."""

    def test_str(self) -> None:
        assert str(SECOND) == "src/Page.jsx:9:7"

    @pytest.mark.parametrize(("line", "column"), [(0, 1), (1, 0)])
    def test_invalid(self, line: int, column: int) -> None:
        with pytest.raises(ValueError, match="1-indexed"):
            SourceLocation("a.js", line, column)


class TestDiagnosticCodes:
    """Code ranges per category."""

    def test_codes_are_unique(self) -> None:
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))

    def test_categories(self) -> None:
        assert 1000 <= DiagnosticCode.NON_STATIC_EXPRESSION.value < 2000
        assert 2000 <= DiagnosticCode.UNREGISTERED_NAMESPACE_PREFIX.value < 3000
        assert 3000 <= DiagnosticCode.MALFORMED_CATALOG.value < 4000


class TestFormatter:
    """Rust, simple and JSON output."""

    diagnostic = ErrorTemplate.conflicting_default_value("title", "Title", "Other", FIRST, SECOND)

    def test_rust(self) -> None:
        output = DiagnosticFormatter().format(self.diagnostic)
        lines = output.splitlines()
        assert lines[0] == (
            "error[CONFLICTING_DEFAULT_VALUE]: Message 'title' extracted with different "
            "default values: 'Title' and 'Other'"
        )
        assert lines[1] == "  --> src/Page.jsx:9:7"
        assert lines[2] == "  = note: also at src/Page.jsx:4:7"
        assert lines[3].startswith("  = help: ")

    def test_rust_with_color(self) -> None:
        output = DiagnosticFormatter(color=True).format(self.diagnostic)
        assert output.startswith("\033[1;31merror\033[0m[CONFLICTING_DEFAULT_VALUE]")

    def test_simple(self) -> None:
        output = DiagnosticFormatter(output_format=OutputFormat.SIMPLE).format(self.diagnostic)
        assert output.startswith("src/Page.jsx:9:7: CONFLICTING_DEFAULT_VALUE: Message 'title'")
        assert "\n" not in output

    def test_json(self) -> None:
        output = DiagnosticFormatter(output_format=OutputFormat.JSON).format(self.diagnostic)
        data = json.loads(output)
        assert data["code"] == "CONFLICTING_DEFAULT_VALUE"
        assert data["code_value"] == 1003
        assert data["line"] == 9
        assert data["related"] == ["src/Page.jsx:4:7"]

    def test_path_is_used_without_location(self) -> None:
        diagnostic = ErrorTemplate.malformed_catalog("locales/en/app.json", "bad")
        assert "  --> locales/en/app.json" in DiagnosticFormatter().format(diagnostic)
        simple = DiagnosticFormatter(output_format=OutputFormat.SIMPLE).format(diagnostic)
        assert simple.startswith("locales/en/app.json: MALFORMED_CATALOG:")

    def test_format_all(self) -> None:
        other = Diagnostic(DiagnosticCode.NON_STATIC_EXPRESSION, "second")
        output = DiagnosticFormatter(output_format=OutputFormat.SIMPLE).format_all([self.diagnostic, other])
        assert output.split("\n\n")[1] == "NON_STATIC_EXPRESSION: second"

    def test_warning_severity(self) -> None:
        diagnostic = Diagnostic(DiagnosticCode.NON_STATIC_EXPRESSION, "skipped", severity="warning")
        assert DiagnosticFormatter().format(diagnostic).startswith("warning[")


class TestErrors:
    """Exceptions carry their diagnostic."""

    def test_plain_message(self) -> None:
        error = ExtractionError("boom")
        assert str(error) == "boom"
        assert error.diagnostic is None
        assert error.location is None

    def test_diagnostic_message(self) -> None:
        diagnostic = ErrorTemplate.non_static_expression("key", FIRST)
        error = ExtractionError(diagnostic)
        assert error.diagnostic is diagnostic
        assert error.location == FIRST
        assert str(error) == diagnostic.format_error()

    def test_conflict_attributes(self) -> None:
        diagnostic = ErrorTemplate.conflicting_default_value("title", "A", "B", FIRST, SECOND)
        error = ConflictingDefaultValueError(diagnostic, identity="title", first=FIRST, second=SECOND)
        assert (error.identity, error.first, error.second) == ("title", FIRST, SECOND)
        assert isinstance(error, ExtractionError)

    def test_malformed_catalog_path(self) -> None:
        error = MalformedCatalogError("bad", path="locales/en/app.json")
        assert error.path == "locales/en/app.json"
