"""
Tree building for pagetree page objects.

`TreeBuilder` is the generic part: it walks a definition and creates one
`Node` per nested mapping, with a pluggable assembly function deciding how
each composite node is put together. `build_page_object` uses it twice on
the same definition to produce the two trees of a page object:

- the chained tree, a structural mirror whose actions wait for the
  application to settle before running, and
- the primary tree, which additionally responds to the default properties
  and is what `create()` hands back.
"""

import logging
from collections.abc import Callable, Mapping
from functools import partial
from typing import Any, Optional

from pagetree.config import get_settings
from pagetree.core.descriptors import CollectionDescriptor, Descriptor
from pagetree.core.path_utils import ScopeSegment, resolve_scope
from pagetree.core.tree_node import Node, define, meta, scope_of
from pagetree.exceptions import DefinitionError
from pagetree.execution.context import remove_context, render, set_context
from pagetree.execution.invokers import ChainedInvoker, ImmediateInvoker
from pagetree.properties.actions import clickable, click_on_text
from pagetree.properties.collection import rescope_collections
from pagetree.properties.queries import contains, is_hidden, is_visible, text
from pagetree.structure.definitions import (
    copy_definition,
    extend_definition,
    normalize_definition,
)

logger = logging.getLogger(__name__)

Assembly = Callable[["TreeBuilder", Optional[Node], str, Mapping[str, Any]], Node]

DEFAULT_PROPERTIES: dict[str, Descriptor] = {
    "is_visible": is_visible(),
    "is_hidden": is_hidden(),
    "click_on": click_on_text(),
    "click": clickable(),
    "contains": contains(),
    "text": text(),
}


def default_assembly(
    builder: "TreeBuilder",
    parent: Node | None,
    key: str,
    definition: Mapping[str, Any],
) -> Node:
    """
    Create a composite node and its children.

    The node's scope is resolved from its parent's and the reserved
    `scope`, `reset_scope` and `test_container` entries, which also stay
    readable as plain values. Nested mappings become child nodes through
    the builder, descriptors are installed as evaluated properties, and
    anything else is stored as is. Setup hooks of descriptors run once all
    children are in place.

    Raises:
        DefinitionError: If a value cannot be placed in a tree
    """
    scope = resolve_scope(
        scope_of(parent),
        definition.get("scope"),
        bool(definition.get("reset_scope", False)),
        definition.get("test_container"),
    )
    node = Node(key, parent, scope)

    setups = []
    for name, value in definition.items():
        if isinstance(value, Descriptor):
            define(node, name, value)
            if value.setup is not None:
                setups.append((value.setup, name))
        elif isinstance(value, CollectionDescriptor):
            raise DefinitionError(name, "collection descriptor was not rescoped before building")
        elif isinstance(value, ScopeSegment):
            define(node, name, value.selector)
        elif isinstance(value, Node):
            raise DefinitionError(name, "page objects must be normalized into definitions before building")
        elif isinstance(value, Mapping):
            define(node, name, builder.build_child(node, name, value))
        else:
            define(node, name, value)

    for setup, name in setups:
        setup(node, name)
    return node


def assemble_primary(
    builder: "TreeBuilder",
    parent: Node | None,
    key: str,
    definition: Mapping[str, Any],
) -> Node:
    """Assembly of primary trees: default properties unless the author overrides them."""
    return default_assembly(builder, parent, key, {**DEFAULT_PROPERTIES, **definition})


def assemble_chained(
    builder: "TreeBuilder",
    parent: Node | None,
    key: str,
    definition: Mapping[str, Any],
) -> Node:
    """Assembly of chained trees: a structural mirror without default properties."""
    return default_assembly(builder, parent, key, dict(definition))


class TreeBuilder:
    """Generic definition walker with a pluggable per-node assembly."""

    def __init__(self, assemble: Assembly = default_assembly):
        self.assemble = assemble

    def build(
        self,
        definition: Mapping[str, Any],
        parent: Node | None = None,
        key: str | None = None,
    ) -> Node:
        """
        Build a tree and mark its root.

        Params:
            definition: Definition to build; must be free of page objects
                and collection descriptors
            parent: Node the tree hangs off (collection items)
            key: Key of the root node, defaults to the configured root key

        Returns:
            Root node of the new tree
        """
        root = self.assemble(self, parent, key or get_settings().root_key, definition)
        meta(root).is_root = True
        return root

    def build_child(self, parent: Node, key: str, definition: Mapping[str, Any]) -> Node:
        return self.assemble(self, parent, key, definition)


def _chained_tree_property(chained: Node) -> Descriptor:
    return Descriptor(get=lambda node, key: chained, kind="hidden")


def build_page_object(
    definition: Mapping[str, Any],
    context: Any = None,
    parent: Node | None = None,
    key: str | None = None,
    track: bool = True,
) -> Node:
    """
    Build the primary and chained trees of a page object.

    Params:
        definition: Page object definition
        context: Test context to attach to the root
        parent: Node the page object hangs off (collection items)
        key: Key of the root node
        track: Replace embedded page objects by their definitions before
            storing the definition on the root

    Returns:
        Root of the primary tree
    """
    if track:
        stored = normalize_definition(definition)
        working = rescope_collections(stored)
    else:
        stored = copy_definition(definition)
        working = rescope_collections(normalize_definition(stored))

    chained = TreeBuilder(assemble_chained).build(working, parent, key)
    meta(chained).invoker = ChainedInvoker()

    working["_chained_tree"] = _chained_tree_property(chained)
    page = TreeBuilder(assemble_primary).build(working, parent, key)

    page_meta = meta(page)
    page_meta.invoker = ImmediateInvoker()
    page_meta.chained = chained
    meta(chained).primary = page

    define(page, "render", partial(render, page))
    define(page, "set_context", partial(set_context, page))
    define(page, "remove_context", partial(remove_context, page))
    define(page, "extend", partial(extend_definition, stored))
    page_meta.definition = stored

    set_context(page, context)
    logger.debug("Built page object %s with properties %s", page_meta.key, sorted(stored))
    return page
