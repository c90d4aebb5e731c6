"""Visitor pattern for tree traversal.

Lets the extractor react to specific node kinds without modifying node classes.

NOTE: This module follows Python stdlib ast.NodeVisitor naming convention.
Methods are named visit_NodeName (PascalCase) rather than visit_node_name (snake_case),
matching the node class names in i18nextract.syntax.ast.

Python 3.13+.
"""

from collections.abc import Callable
from dataclasses import Field, fields
from typing import ClassVar

from i18nextract.constants import MAX_DEPTH
from i18nextract.core.depth_guard import DepthGuard

from .ast import Node, Position

__all__ = ["ASTVisitor"]


class ASTVisitor:
    """Base visitor for traversing component source trees.

    Follows stdlib ast.NodeVisitor convention: generic_visit() automatically
    traverses all child nodes. Override visit_NodeType methods to add custom
    behavior, and call generic_visit() to keep descending.

    Uses a class-level dispatch table built once per subclass via
    __init_subclass__, plus an instance cache of bound methods.

    Example:
        >>> class CallCounter(ASTVisitor):
        ...     def __init__(self):
        ...         super().__init__()
        ...         self.count = 0
        ...
        ...     def visit_CallExpression(self, node: CallExpression) -> None:
        ...         self.count += 1
        ...         self.generic_visit(node)
        ...
        >>> counter = CallCounter()
        >>> counter.visit(program)
        >>> print(counter.count)
    """

    __slots__ = ("_depth_guard", "_instance_dispatch_cache")

    _class_visit_methods: ClassVar[dict[str, str]] = {}

    _fields_cache: ClassVar[dict[type, tuple[Field[object], ...]]] = {}

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Build class-level dispatch table when subclass is defined."""
        super().__init_subclass__(**kwargs)
        cls._class_visit_methods = {}
        for name in dir(cls):
            if name.startswith("visit_") and name != "visit":
                cls._class_visit_methods[name[6:]] = name

    def __init__(self, *, max_depth: int | None = None) -> None:
        """Initialize visitor with depth guard and dispatch cache.

        Subclasses MUST call super().__init__().

        Args:
            max_depth: Maximum traversal depth (default: MAX_DEPTH from constants)
        """
        effective_max_depth = max_depth if max_depth is not None else MAX_DEPTH
        self._depth_guard = DepthGuard(max_depth=effective_max_depth)
        self._instance_dispatch_cache: dict[type, Callable[[Node], None]] = {}

    def visit(self, node: Node) -> None:
        """Visit a node, dispatching to visit_NodeType or generic_visit."""
        node_type = type(node)

        if node_type in self._instance_dispatch_cache:
            self._instance_dispatch_cache[node_type](node)
            return

        node_type_name = node_type.__name__
        if node_type_name in self._class_visit_methods:
            method = getattr(self, self._class_visit_methods[node_type_name])
        else:
            method = self.generic_visit

        self._instance_dispatch_cache[node_type] = method
        method(node)

    def _get_node_fields(self, node_type: type) -> tuple[Field[object], ...]:
        """Get cached dataclass fields for a node type."""
        if node_type not in ASTVisitor._fields_cache:
            ASTVisitor._fields_cache[node_type] = fields(node_type)
        return ASTVisitor._fields_cache[node_type]

    def generic_visit(self, node: Node) -> None:
        """Visit all child nodes, in field order, with depth protection.

        Raises:
            DepthLimitExceededError: If traversal depth exceeds max_depth
        """
        with self._depth_guard:
            for field in self._get_node_fields(type(node)):
                value = getattr(node, field.name)

                # Skip scalars and source positions
                if value is None or isinstance(value, (str, int, float, bool, Position)):
                    continue

                if isinstance(value, tuple):
                    for item in value:
                        if hasattr(item, "__dataclass_fields__"):
                            self.visit(item)
                elif hasattr(value, "__dataclass_fields__"):
                    self.visit(value)
