"""
Leaf properties and collections for pagetree definitions.

Queries are read synchronously; actions are scheduled through the
invocation strategy of the tree they are read from.
"""

from pagetree.properties.actions import build_url, click_on_text, clickable, fillable, visitable
from pagetree.properties.collection import (
    Collection,
    collection,
    collection_property,
    rescope_collections,
)
from pagetree.properties.options import FinderOptions
from pagetree.properties.queries import (
    attribute,
    contains,
    count,
    has_class,
    is_hidden,
    is_present,
    is_visible,
    text,
    value,
)

__all__ = [
    "Collection",
    "FinderOptions",
    "attribute",
    "build_url",
    "click_on_text",
    "clickable",
    "collection",
    "collection_property",
    "contains",
    "count",
    "fillable",
    "has_class",
    "is_hidden",
    "is_present",
    "is_visible",
    "rescope_collections",
    "text",
    "value",
    "visitable",
]
