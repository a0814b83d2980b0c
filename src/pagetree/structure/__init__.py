"""
pagetree structure components.

This package provides definition normalization and merging, and the
builders producing the primary and chained trees of page objects.
"""

from pagetree.structure.builder import (
    DEFAULT_PROPERTIES,
    TreeBuilder,
    assemble_chained,
    assemble_primary,
    build_page_object,
    default_assembly,
)
from pagetree.structure.definitions import (
    copy_definition,
    deep_merge,
    extend_definition,
    normalize_definition,
    stored_definition,
)

__all__ = [
    "DEFAULT_PROPERTIES",
    "TreeBuilder",
    "assemble_chained",
    "assemble_primary",
    "build_page_object",
    "default_assembly",
    "copy_definition",
    "deep_merge",
    "extend_definition",
    "normalize_definition",
    "stored_definition",
]
