"""
Test context lookup and the lifecycle helpers attached to page object roots.

The test context is opaque to the tree machinery: it is stored on the
primary root of a page object and handed to leaf properties when they run.
Chained trees and collection items have no context of their own and use
the one of the primary root they hang off. When no root carries a context,
the default installed with `use_context` is used.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

from pagetree.core.tree_node import Node, meta, top_root
from pagetree.exceptions import ContextError

_default_context: ContextVar[Any] = ContextVar("pagetree_default_context", default=None)


@contextmanager
def use_context(context: Any) -> Iterator[Any]:
    """Install `context` as the default for page objects without their own."""
    token = _default_context.set(context)
    try:
        yield context
    finally:
        _default_context.reset(token)


def find_context(node: Node) -> Any:
    """Return the test context a node runs against, or None."""
    root = top_root(node)
    record = meta(root)
    if record.context is None and record.primary is not None:
        record = meta(record.primary)
    if record.context is not None:
        return record.context
    return _default_context.get()


def get_context(node: Node) -> Any:
    """
    Return the test context a node runs against.

    Raises:
        ContextError: If neither the page object nor the default provides one
    """
    context = find_context(node)
    if context is None:
        raise ContextError(
            "No test context available. Pass `context` in the definition, "
            "call `set_context()` on the page object or wrap the test in `use_context()`."
        )
    return context


def set_context(page: Node, context: Any) -> Node:
    """Attach a test context to a page object root (None leaves it unchanged)."""
    if context is not None:
        meta(page).context = context
    return page


def remove_context(page: Node) -> Node:
    """Detach the test context from a page object root."""
    meta(page).context = None
    return page


def render(page: Node, template: str) -> Node:
    """
    Render a template into the test context of a page object root.

    Raises:
        ContextError: If the page object has no context of its own
    """
    context = meta(page).context
    if context is None:
        raise ContextError(
            "You must set a context on the page object before calling render()"
        )
    context.render(template)
    return page
