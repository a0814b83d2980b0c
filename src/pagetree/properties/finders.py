"""
Element finders used by leaf properties.

A leaf property locates its elements from the resolved scope of the node
that owns it, optionally narrowed by its own options and selector.
Lookups happen on every read; missing or ambiguous matches are reported
here, at read time, never while the tree is built.
"""

from typing import Any

from pagetree.core.path_utils import Locator, resolve_scope
from pagetree.core.tree_node import Node, full_path, scope_of
from pagetree.exceptions import (
    AmbiguousElementError,
    ElementNotFoundError,
    ErrorContext,
)
from pagetree.properties.options import FinderOptions


def build_locator(
    node: Node, selector: str | None = None, options: FinderOptions | None = None
) -> Locator:
    """
    Compose the locator of a leaf property.

    Params:
        node: Node owning the property
        selector: The property's own selector, if any
        options: Finder options of the property

    Returns:
        Locator to evaluate against the test context
    """
    options = options or FinderOptions()
    locator = resolve_scope(
        scope_of(node), options.scope, options.reset_scope, options.test_container
    )
    if selector:
        return locator.narrow(selector, at=options.at)
    if options.at is not None:
        return locator.at(options.at)
    return locator


def error_context(node: Node, key: str, locator: Locator) -> ErrorContext:
    """Describe a lookup for error messages."""
    return ErrorContext(
        path=full_path(node, key),
        selector=str(locator),
        test_container=locator.test_container,
        segments=tuple(str(segment) for segment in locator.segments),
    )


def find_elements(
    context: Any,
    node: Node,
    key: str,
    selector: str | None = None,
    options: FinderOptions | None = None,
) -> list[Any]:
    """
    Find the elements of a leaf property, requiring at least one.

    Raises:
        ElementNotFoundError: If nothing matches
        AmbiguousElementError: If several elements match without `multiple`
    """
    options = options or FinderOptions()
    locator = build_locator(node, selector, options)
    elements = context.find_all(locator)
    if not elements:
        raise ElementNotFoundError(error_context(node, key, locator))
    if len(elements) > 1 and not options.multiple:
        raise AmbiguousElementError(error_context(node, key, locator), len(elements))
    return elements


def find_element(
    context: Any,
    node: Node,
    key: str,
    selector: str | None = None,
    options: FinderOptions | None = None,
) -> Any:
    """Find exactly one element of a leaf property."""
    single = (options or FinderOptions()).model_copy(update={"multiple": False})
    return find_elements(context, node, key, selector, single)[0]


def find_optional(
    context: Any,
    node: Node,
    key: str,
    selector: str | None = None,
    options: FinderOptions | None = None,
) -> list[Any]:
    """Find the elements of a leaf property; an empty result is not an error."""
    options = options or FinderOptions()
    locator = build_locator(node, selector, options)
    elements = context.find_all(locator)
    if len(elements) > 1 and not options.multiple:
        raise AmbiguousElementError(error_context(node, key, locator), len(elements))
    return elements
