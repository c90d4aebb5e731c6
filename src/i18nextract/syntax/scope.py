"""Import resolution for element names and callees.

Answers "does this identifier resolve to import NAME from MODULE" using the
module-level import declarations of a Program. Local bindings that shadow
an import (function parameters, inner declarations) are not tracked.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from .ast import Identifier, Node, Program

__all__ = ["ImportBinding", "ImportResolver", "ImportTable"]


class ImportResolver(Protocol):
    """Protocol for the import-resolution capability the matcher needs."""

    def references_import(self, node: Node, module: str, names: Iterable[str]) -> bool:
        """Return True if node is an identifier bound to one of names from module."""
        ...


@dataclass(frozen=True, slots=True)
class ImportBinding:
    """Local name bound by an import declaration.

    Attributes:
        local: Name used in the module body
        source: Module specifier ('react-i18next')
        imported: Exported name ('translate', 'default' or '*')
    """

    local: str
    source: str
    imported: str


@dataclass(frozen=True, slots=True)
class ImportTable:
    """Module-level import bindings of one compiled unit.

    Later declarations of the same local name replace earlier ones.

    Example:
        >>> table = ImportTable.from_program(program)
        >>> table.references_import(Identifier("Trans"), "react-i18next", ["Trans"])
        True
    """

    bindings: dict[str, ImportBinding]

    @classmethod
    def from_program(cls, program: Program) -> ImportTable:
        """Collect import bindings from a program's top-level imports."""
        bindings: dict[str, ImportBinding] = {}
        for declaration in program.imports:
            for specifier in declaration.specifiers:
                bindings[specifier.local] = ImportBinding(
                    local=specifier.local,
                    source=declaration.source,
                    imported=specifier.imported,
                )
        return cls(bindings=bindings)

    def resolve(self, local: str) -> ImportBinding | None:
        """Look up the binding for a local name."""
        return self.bindings.get(local)

    def references_import(self, node: Node, module: str, names: Iterable[str]) -> bool:
        """Check whether node is an identifier importing one of names from module.

        Args:
            node: Callee or element name node
            module: Module specifier the binding must come from
            names: Accepted exported names

        Returns:
            False for non-identifiers, unbound names and other modules
        """
        if not isinstance(node, Identifier):
            return False
        binding = self.bindings.get(node.name)
        if binding is None or binding.source != module:
            return False
        return binding.imported in names
