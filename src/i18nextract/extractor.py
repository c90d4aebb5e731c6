"""Extraction driver.

Runs the three phases of one compiled unit:

    pre       fresh ExtractionContext (imports, evaluator, empty registry)
    traverse  ExtractionVisitor fills the message table and namespaces
    post      build the unit's catalog and merge it into every locale

Units share nothing but the catalog files; an error in one unit aborts
that unit only.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .catalog.merge import build_catalog
from .catalog.writer import CatalogWriter, CatalogWriteResult
from .config import ExtractorConfig
from .extraction.context import ExtractionContext
from .extraction.visitor import ExtractionVisitor
from .syntax.estree import load_estree
from .syntax.evaluator import ConstantEvaluator, LiteralEvaluator
from .syntax.scope import ImportTable

if TYPE_CHECKING:
    from .syntax.ast import Program

__all__ = ["ExtractionResult", "MessageExtractor", "extract_file"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ExtractionResult:
    """Outcome of extracting one compiled unit.

    Attributes:
        filename: Unit path relative to the working directory
        catalog: Namespace to message tree mapping built from the unit
        writes: One result per (locale, namespace) file touched
    """

    filename: str
    catalog: dict[str, dict[str, Any]]
    writes: tuple[CatalogWriteResult, ...]

    @property
    def changed(self) -> bool:
        """Check whether any catalog file was written."""
        return any(write.changed for write in self.writes)


class MessageExtractor:
    """Extracts translatable messages and maintains the catalogs.

    Example:
        >>> extractor = MessageExtractor(ExtractorConfig(locales=("en", "fr")))
        >>> result = extractor.extract(program, "src/App.jsx")
        >>> result.catalog
        {'translation': {'greeting': 'Hello'}}
    """

    __slots__ = ("_evaluator", "_writer", "config")

    def __init__(
        self,
        config: ExtractorConfig | None = None,
        *,
        evaluator: ConstantEvaluator | None = None,
    ) -> None:
        """Initialize extractor.

        Args:
            config: Extraction options (default: ExtractorConfig())
            evaluator: Constant evaluator (default: LiteralEvaluator)
        """
        self.config = config if config is not None else ExtractorConfig()
        self._evaluator = evaluator if evaluator is not None else LiteralEvaluator()
        self._writer = CatalogWriter(self.config.storage, self.config.output, self.config.locales)

    def collect(self, program: Program, filename: str) -> ExtractionContext:
        """Run the pre and traverse phases without writing anything.

        Raises:
            ExtractionError: If a recognized call site is not extractable
        """
        context = ExtractionContext(
            filename,
            self.config,
            ImportTable.from_program(program),
            self._evaluator,
        )
        ExtractionVisitor(context).visit(program)
        logger.debug(
            "Collected %d messages and %d namespaces from %s",
            len(context.descriptors()),
            len(context.namespaces),
            context.filename,
        )
        return context

    def extract(self, program: Program, filename: str) -> ExtractionResult:
        """Extract one unit and merge its catalog into every locale.

        Args:
            program: Unit tree
            filename: Unit path (recorded in diagnostics, relative to cwd)

        Returns:
            Built catalog and per-file write results

        Raises:
            ExtractionError: If the unit cannot be extracted; no file of
                this unit is written unless the error comes from an
                existing catalog file
            ValueError: If a namespace is not a safe file name
        """
        context = self.collect(program, filename)
        catalog = build_catalog(
            context.descriptors(),
            context.namespaces,
            self.config.namespace_separator,
        )
        # Locale directories are created even when the unit has no messages
        writes = self._writer.write(catalog)
        return ExtractionResult(context.filename, catalog, writes)


def extract_file(
    path: str | Path,
    *,
    source_path: str | None = None,
    config: ExtractorConfig | None = None,
) -> ExtractionResult:
    """Load an ESTree JSON file and extract it.

    Args:
        path: JSON file holding a Program or File node
        source_path: Source file name to report (default: path)
        config: Extraction options

    Example:
        >>> extract_file("build/ast/App.json", source_path="src/App.jsx")
    """
    program = load_estree(path)
    return MessageExtractor(config).extract(program, source_path or str(path))
