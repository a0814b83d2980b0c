"""
Core pagetree components.

This package provides the node type of page object trees, its metadata
record, property descriptors and scope resolution.
"""

from pagetree.core.descriptors import CollectionDescriptor, CollectionOptions, Descriptor
from pagetree.core.path_utils import Locator, ScopeSegment, resolve_scope
from pagetree.core.tree_node import Node, NodeMeta, full_path, meta
from pagetree.core.types import Definition

__all__ = [
    "Node",
    "NodeMeta",
    "Descriptor",
    "CollectionDescriptor",
    "CollectionOptions",
    "Definition",
    "Locator",
    "ScopeSegment",
    "full_path",
    "meta",
    "resolve_scope",
]
