"""
Property descriptors placed in page object definitions.

`Descriptor` is what leaf property factories return: an immutable value
holding the function evaluated when the property is read. It may be shared
freely between definitions and between builds.

`CollectionDescriptor` is the inert authoring-time form of a collection. It
holds only the data needed to rebuild the collection, and is turned into a
fresh `Descriptor` right before every build.
"""

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from attrs import field, frozen

if TYPE_CHECKING:
    from pagetree.core.tree_node import Node


@frozen
class Descriptor:
    """Leaf property of a page object.

    Params:
        get: Called as `get(node, key)` on every read of the property
        setup: Called as `setup(node, key)` once, when the owning node is built
        kind: Free-form tag for inspection ("query", "action", ...)
    """

    get: Callable[["Node", str], Any]
    setup: Callable[["Node", str], None] | None = None
    kind: str = "query"


@frozen
class CollectionOptions:
    """Query options applied to a collection's item scope."""

    reset_scope: bool = False
    test_container: str | None = None

    @classmethod
    def from_definition(cls, definition: Mapping[str, Any]) -> "CollectionOptions":
        return cls(
            reset_scope=bool(definition.get("reset_scope", False)),
            test_container=definition.get("test_container"),
        )


@frozen
class CollectionDescriptor:
    """Authoring-time description of a collection property."""

    item_scope: str
    item_definition: dict[str, Any] = field(factory=dict)
    options: CollectionOptions = field(factory=CollectionOptions)
