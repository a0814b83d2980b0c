"""
Core Node class for pagetree page object trees.

A node maps child names to child nodes, leaf descriptors or plain values.
Descriptors are evaluated on every attribute read, so `page.title` runs the
`text` query each time it is accessed. Everything the tree machinery needs
to know about a node (its key, parent, resolved scope, stored definition,
chained counterpart...) lives in a separate `NodeMeta` record, so none of it
shows up among the node's properties.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional

from pagetree.core.descriptors import Descriptor
from pagetree.core.path_utils import Locator

if TYPE_CHECKING:
    from pagetree.execution.invokers import Invoker
    from pagetree.properties.collection import Collection


@dataclass(eq=False)
class NodeMeta:
    """Metadata record of a node.

    Params:
        key: Name of the node under its parent ("page" for roots)
        parent: Parent node; collection items point at the collection's owner
        scope: Scope resolved at build time
        is_root: Whether this node is the root of one build
        definition: Stored definition (tracked primary roots only)
        context: Test context (primary roots only)
        invoker: Invocation strategy of the tree (roots only)
        chained: Chained counterpart (primary nodes, filled lazily below the root)
        primary: Primary root this chained root mirrors (chained roots only)
        collections: Collection instances owned by this node, by key
    """

    key: str
    parent: Optional["Node"] = None
    scope: Locator = field(default_factory=Locator)
    is_root: bool = False
    definition: dict[str, Any] | None = None
    context: Any = None
    invoker: Optional["Invoker"] = None
    chained: Optional["Node"] = None
    primary: Optional["Node"] = None
    collections: dict[str, "Collection"] = field(default_factory=dict)


class Node:
    """Composite node of a page object tree."""

    __slots__ = ("_meta", "_children")

    def __init__(self, key: str, parent: Optional["Node"] = None, scope: Locator | None = None):
        object.__setattr__(self, "_meta", NodeMeta(key=key, parent=parent, scope=scope or Locator()))
        object.__setattr__(self, "_children", {})

    def __getattr__(self, name: str) -> Any:
        if name.startswith("__"):
            raise AttributeError(name)
        children = object.__getattribute__(self, "_children")
        if name not in children:
            raise AttributeError(f"'{full_path(self)}' has no property '{name}'")
        value = children[name]
        if isinstance(value, Descriptor):
            return value.get(self, name)
        return value

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(
            f"Cannot set '{name}' on '{full_path(self)}'; page objects are read-only"
        )

    def __dir__(self):
        return [name for name in self._children if not name.startswith("_")]

    def __repr__(self) -> str:
        scope = str(self._meta.scope)
        return f"<Node {full_path(self)} scope={scope!r}>"

    def __await__(self):
        from pagetree.execution.invokers import wait_for

        return wait_for(self).__await__()


def meta(obj: Any) -> NodeMeta | None:
    """Return the metadata record of a node, or None for anything else."""
    if isinstance(obj, Node):
        return obj._meta
    return None


def define(node: Node, name: str, value: Any) -> None:
    """Install a child on a node."""
    node._children[name] = value


def children(node: Node) -> dict[str, Any]:
    """Return the raw (unevaluated) children of a node."""
    return node._children


def tree_root(node: Node) -> Node:
    """Return the root of the build `node` belongs to."""
    current = node
    while not current._meta.is_root:
        current = current._meta.parent
    return current


def top_root(node: Node) -> Node:
    """Return the outermost root, crossing from collection items into their owners."""
    current = node
    while current._meta.parent is not None:
        current = current._meta.parent
    return current


def scope_of(node: Node | None) -> Locator:
    """Return the resolved scope of a node (the query root for None)."""
    if node is None:
        return Locator()
    return node._meta.scope


def full_path(node: Node, key: str | None = None) -> str:
    """
    Build the dotted property path of a node.

    Params:
        node: Node to describe
        key: Optional leaf key appended to the path

    Returns:
        Path such as "page.foo[1].bar.text"
    """
    parts = [] if key is None else [key]
    current: Node | None = node
    while current is not None:
        parts.append(current._meta.key)
        current = current._meta.parent
    return ".".join(reversed(parts))
