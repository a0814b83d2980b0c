"""
Collections: array-like access to repeated items of a page.

    page = create({
        "scope": ".todo-list",
        "items": collection("li", {
            "title": text("label"),
            "is_done": has_class("completed"),
        }),
    })

    len(page.items)                 # number of "li" under ".todo-list"
    page.items[1].title             # builds (once) the sub-tree of the 2nd item
    page.items.filter_by("is_done")

`collection()` returns an inert `CollectionDescriptor`. Right before every
build, `rescope_collections()` turns each descriptor into a fresh collection
property, whose setup hook creates one `Collection` per owning node. Item
sub-trees are built lazily and memoized by the collection instance.
"""

import logging
from collections.abc import Callable, Iterator, Mapping
from typing import Any

from pagetree.core.descriptors import CollectionDescriptor, CollectionOptions, Descriptor
from pagetree.core.path_utils import ScopeSegment, resolve_scope
from pagetree.core.tree_node import Node, meta, scope_of, tree_root
from pagetree.core.types import Definition
from pagetree.exceptions import DefinitionError
from pagetree.execution.context import get_context
from pagetree.execution.invokers import invoker_of

logger = logging.getLogger(__name__)

_MISSING = object()


def collection(item_scope: str, item_definition: Any = None) -> CollectionDescriptor:
    """
    Declare a collection of items matching `item_scope`.

    Params:
        item_scope: Selector of the items, relative to the owning node's scope
        item_definition: Definition of each item; may be a page object. Its
            `reset_scope` and `test_container` entries also apply to counting.

    Returns:
        Inert descriptor to place in a definition

    Raises:
        DefinitionError: If `item_scope` is empty or `item_definition` is not a mapping
    """
    if not item_scope or not isinstance(item_scope, str):
        raise DefinitionError(None, f"collection item scope must be a non-empty string, got {item_scope!r}")

    from pagetree.structure.definitions import normalize_definition, stored_definition

    stored = stored_definition(item_definition)
    if stored is not None:
        item_definition = stored
    elif item_definition is None:
        item_definition = {}
    elif not isinstance(item_definition, Mapping):
        raise DefinitionError(item_scope, "collection item definition must be a mapping or a page object")

    item_definition = normalize_definition(item_definition)
    return CollectionDescriptor(
        item_scope=item_scope,
        item_definition=item_definition,
        options=CollectionOptions.from_definition(item_definition),
    )


def rescope_collections(definition: Mapping[str, Any]) -> Definition:
    """
    Replace every collection descriptor with a freshly built collection property.

    Nested collections, inside item definitions or nested mappings, are
    rescoped depth-first. The input is not modified.

    Raises:
        DefinitionError: If a descriptor's item definition is not a mapping
    """
    rescoped = {}
    for key, value in definition.items():
        if isinstance(value, CollectionDescriptor):
            if not isinstance(value.item_definition, Mapping):
                raise DefinitionError(key, "collection item definition must be a mapping")
            rescoped[key] = collection_property(
                value.item_scope,
                rescope_collections(value.item_definition),
                value.options,
            )
        elif isinstance(value, Mapping):
            rescoped[key] = rescope_collections(value)
        else:
            rescoped[key] = value
    return rescoped


def collection_property(
    item_scope: str,
    item_definition: Definition,
    options: CollectionOptions,
) -> Descriptor:
    """Build-time property creating one `Collection` per owning node."""

    def setup(node: Node, key: str) -> None:
        meta(node).collections[key] = Collection(item_scope, item_definition, node, key, options)

    def get(node: Node, key: str) -> "Collection":
        return meta(node).collections[key]

    return Descriptor(get=get, setup=setup, kind="collection")


class Collection:
    """
    Array-like view of the items of a collection property.

    The element count is queried on every read because the page may have
    changed; item sub-trees are built on first access and then reused for
    the lifetime of the collection.
    """

    def __init__(
        self,
        item_scope: str,
        item_definition: Definition,
        parent: Node,
        key: str,
        options: CollectionOptions,
    ):
        self._item_scope = item_scope
        self._item_definition = item_definition
        self._parent = parent
        self._key = key
        self._options = options
        self._items: dict[int, Node] = {}

    def __repr__(self) -> str:
        return f"<Collection {self._key} item_scope={self._item_scope!r}>"

    @property
    def length(self) -> int:
        """Number of elements currently matching the item scope."""
        locator = resolve_scope(
            scope_of(self._parent),
            self._item_scope,
            self._options.reset_scope,
            self._options.test_container,
        )
        return len(get_context(self._parent).find_all(locator))

    def object_at(self, index: int) -> Node:
        """
        Return the item sub-tree at `index`, building it on first access.

        Indices past the end are not checked; queries on such an item find no
        element and report it when read. Collections of a chained tree hand
        out the chained item, which queues its actions behind the owner's.
        """
        item = self._items.get(index)
        if item is None:
            from pagetree.structure.builder import build_page_object

            definition = {
                **self._item_definition,
                "scope": ScopeSegment(self._item_scope, at=index),
            }
            logger.debug("Building item %d of collection %s", index, self._key)
            item = build_page_object(
                definition, parent=self._parent, key=f"{self._key}[{index}]", track=False
            )
            if meta(tree_root(self._parent)).primary is not None:
                item = meta(item).chained
                meta(item).invoker = invoker_of(self._parent)
            self._items[index] = item
        return item

    def __len__(self) -> int:
        return self.length

    def __getitem__(self, index: int | slice) -> "Node | list[Node]":
        if isinstance(index, slice):
            return self.to_array()[index]
        if index < 0:
            index += self.length
        return self.object_at(index)

    def __iter__(self) -> Iterator[Node]:
        for index in range(self.length):
            yield self.object_at(index)

    def to_array(self) -> list[Node]:
        """Snapshot of all current items."""
        return list(self)

    def for_each(self, callback: Callable[..., Any]) -> None:
        """Call `callback(item)` for every item."""
        for item in self:
            callback(item)

    def map(self, callback: Callable[[Node], Any]) -> list[Any]:
        return [callback(item) for item in self]

    def map_by(self, name: str) -> list[Any]:
        """Read the property `name` of every item."""
        return [getattr(item, name) for item in self]

    def filter(self, predicate: Callable[[Node], Any]) -> list[Node]:
        return [item for item in self if predicate(item)]

    def filter_by(self, name: str, value: Any = _MISSING) -> list[Node]:
        """Items whose property `name` is truthy, or equal to `value` when given."""
        if value is _MISSING:
            return [item for item in self if getattr(item, name)]
        return [item for item in self if getattr(item, name) == value]
