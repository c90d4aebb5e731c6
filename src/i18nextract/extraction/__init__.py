"""Message extraction package.

Pattern matching, descriptor building, inline markup rendering and
namespace resolution for one compiled unit at a time.

Submodules:
    descriptor - MessageDescriptor, NamespaceEntry, key_variants
    namespaces - NamespaceRegistry, DecodedKey
    markup     - render_children (inline markup renderer)
    matcher    - classify_call, classify_element
    builder    - DescriptorBuilder
    context    - ExtractionContext (per-unit state)
    visitor    - ExtractionVisitor

Python 3.13+.
"""

from .builder import DescriptorBuilder
from .context import ExtractionContext
from .descriptor import MessageDescriptor, NamespaceEntry, key_variants
from .markup import render_children
from .matcher import classify_call, classify_element
from .namespaces import DecodedKey, NamespaceRegistry
from .visitor import ExtractionVisitor

__all__ = [
    "DecodedKey",
    "DescriptorBuilder",
    "ExtractionContext",
    "ExtractionVisitor",
    "MessageDescriptor",
    "NamespaceEntry",
    "NamespaceRegistry",
    "classify_call",
    "classify_element",
    "key_variants",
    "render_children",
]
