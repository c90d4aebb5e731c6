"""Per-unit extraction state.

An ExtractionContext is created when processing of one compiled unit
starts, receives every descriptor and namespace the traversal finds, and
is discarded once the unit's catalogs are written. Nothing in it is shared
between units.

Python 3.13+.
"""

from __future__ import annotations

import logging
import os
from pathlib import PurePath
from typing import TYPE_CHECKING

from i18nextract.diagnostics import ConflictingDefaultValueError, SourceLocation
from i18nextract.diagnostics.templates import ErrorTemplate

from .descriptor import MessageDescriptor
from .namespaces import NamespaceRegistry

if TYPE_CHECKING:
    from i18nextract.config import ExtractorConfig
    from i18nextract.syntax.ast import Node
    from i18nextract.syntax.evaluator import ConstantEvaluator
    from i18nextract.syntax.scope import ImportResolver

__all__ = ["ExtractionContext", "relative_source_path"]

logger = logging.getLogger(__name__)


def relative_source_path(filename: str) -> str:
    """Express filename relative to the working directory, POSIX style.

    Paths on another drive (Windows) are returned unchanged.
    """
    try:
        relative = os.path.relpath(os.path.abspath(filename))
    except ValueError:
        return filename
    return PurePath(relative).as_posix()


class ExtractionContext:
    """Message table, namespace registry and visited set of one compiled unit.

    Attributes:
        filename: Unit path relative to the working directory
        config: Extraction configuration
        imports: Import resolver for this unit
        evaluator: Constant evaluator for this unit
        namespaces: Namespace registry for this unit
    """

    __slots__ = ("_messages", "_visited", "config", "evaluator", "filename", "imports", "namespaces")

    def __init__(
        self,
        filename: str,
        config: ExtractorConfig,
        imports: ImportResolver,
        evaluator: ConstantEvaluator,
    ) -> None:
        """Initialize an empty per-unit context."""
        self.filename = relative_source_path(filename)
        self.config = config
        self.imports = imports
        self.evaluator = evaluator
        self.namespaces = NamespaceRegistry(config.default_namespace)
        self._messages: dict[str, list[MessageDescriptor]] = {}
        self._visited: set[int] = set()

    # ------------------------------------------------------------------
    # Visited-node guard
    # ------------------------------------------------------------------

    def was_extracted(self, node: Node) -> bool:
        """Check whether node was already classified in this unit."""
        return id(node) in self._visited

    def tag_as_extracted(self, node: Node) -> None:
        """Record node as classified so revisits are skipped.

        Nodes are identified by object identity; the tree outlives the
        context, so identities are stable for the whole pass.
        """
        self._visited.add(id(node))

    # ------------------------------------------------------------------
    # Locations
    # ------------------------------------------------------------------

    def location_of(self, node: Node | None) -> SourceLocation | None:
        """Source location of node within this unit, if it carries one."""
        position = getattr(node, "loc", None)
        if position is None:
            return None
        return SourceLocation(file=self.filename, line=position.line, column=position.column)

    # ------------------------------------------------------------------
    # Message table
    # ------------------------------------------------------------------

    def store_message(self, descriptor: MessageDescriptor) -> None:
        """Add a descriptor, enforcing one default value per identity.

        Descriptors that repeat an existing one exactly are dropped;
        descriptors with the same identity and default value but other
        context, plural or fallback information are kept alongside it.

        Raises:
            ConflictingDefaultValueError: If the identity is already stored
                with a different default value
        """
        identity = descriptor.identity
        stored = self._messages.get(identity)
        if stored is None:
            self._messages[identity] = [descriptor]
            logger.debug("Extracted message '%s' at %s", identity, descriptor.location)
            return

        first = stored[0]
        if first.default_value != descriptor.default_value:
            raise ConflictingDefaultValueError(
                ErrorTemplate.conflicting_default_value(
                    identity,
                    first.default_value,
                    descriptor.default_value,
                    first.location,
                    descriptor.location,
                ),
                identity=identity,
                first=first.location,
                second=descriptor.location,
            )

        if any(existing.same_variant(descriptor) for existing in stored):
            return
        stored.append(descriptor)
        logger.debug("Extracted variant of message '%s' at %s", identity, descriptor.location)

    @property
    def messages(self) -> dict[str, tuple[MessageDescriptor, ...]]:
        """Stored descriptors grouped by identity, in first-seen order."""
        return {identity: tuple(group) for identity, group in self._messages.items()}

    def descriptors(self) -> tuple[MessageDescriptor, ...]:
        """All stored descriptors, in extraction order per identity."""
        return tuple(d for group in self._messages.values() for d in group)
