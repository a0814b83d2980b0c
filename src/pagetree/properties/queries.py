"""
Query properties: synchronous reads evaluated on every attribute access.

    page = create({
        "scope": ".profile",
        "name": text(".name"),
        "avatar": attribute("src", "img"),
        "is_admin": has_class("admin"),
    })

    page.name        # text of ".profile .name"
"""

from typing import Any

from pagetree.config import get_settings
from pagetree.core.descriptors import Descriptor
from pagetree.core.tree_node import Node
from pagetree.execution.context import get_context
from pagetree.properties.finders import build_locator, find_elements, find_optional
from pagetree.properties.options import FinderOptions


def _normalize(value: str) -> str:
    if get_settings().normalize_whitespace:
        return " ".join(value.split())
    return value


def _query(read, selector: str | None, options: dict[str, Any]) -> Descriptor:
    finder_options = FinderOptions(**options)

    def get(node: Node, key: str) -> Any:
        context = get_context(node)
        elements = find_elements(context, node, key, selector, finder_options)
        values = [read(context, element) for element in elements]
        return values if finder_options.multiple else values[0]

    return Descriptor(get=get)


def text(selector: str | None = None, **options) -> Descriptor:
    """Text content of the element, whitespace-normalized by default."""
    return _query(lambda context, el: _normalize(context.text_of(el)), selector, options)


def value(selector: str | None = None, **options) -> Descriptor:
    """Value of a form control."""
    return _query(lambda context, el: context.value_of(el), selector, options)


def attribute(name: str, selector: str | None = None, **options) -> Descriptor:
    """Value of an attribute of the element, None when the attribute is absent."""
    return _query(lambda context, el: context.attribute_of(el, name), selector, options)


def has_class(class_name: str, selector: str | None = None, **options) -> Descriptor:
    """Whether the element carries a CSS class."""

    def read(context, element) -> bool:
        classes = context.attribute_of(element, "class") or ""
        return class_name in classes.split()

    finder_options = FinderOptions(**options)

    def get(node: Node, key: str) -> bool:
        context = get_context(node)
        elements = find_elements(context, node, key, selector, finder_options)
        return all(read(context, element) for element in elements)

    return Descriptor(get=get)


def count(selector: str | None = None, **options) -> Descriptor:
    """Number of elements matching the selector."""
    finder_options = FinderOptions(**options)

    def get(node: Node, key: str) -> int:
        locator = build_locator(node, selector, finder_options)
        return len(get_context(node).find_all(locator))

    return Descriptor(get=get)


def is_visible(selector: str | None = None, **options) -> Descriptor:
    """Whether the element is visible; raises when it does not exist."""
    finder_options = FinderOptions(**options)

    def get(node: Node, key: str) -> bool:
        context = get_context(node)
        elements = find_elements(context, node, key, selector, finder_options)
        return all(context.is_visible(element) for element in elements)

    return Descriptor(get=get)


def is_hidden(selector: str | None = None, **options) -> Descriptor:
    """Whether the element is hidden; true when it does not exist."""
    finder_options = FinderOptions(**options)

    def get(node: Node, key: str) -> bool:
        context = get_context(node)
        elements = find_optional(context, node, key, selector, finder_options)
        return not any(context.is_visible(element) for element in elements)

    return Descriptor(get=get)


def is_present(selector: str | None = None, **options) -> Descriptor:
    """Whether the element exists."""
    finder_options = FinderOptions(**options)

    def get(node: Node, key: str) -> bool:
        context = get_context(node)
        return bool(find_optional(context, node, key, selector, finder_options))

    return Descriptor(get=get)


def contains(selector: str | None = None, **options) -> Descriptor:
    """Callable telling whether the element's text contains a string."""
    finder_options = FinderOptions(**options)

    def get(node: Node, key: str):
        def check(text_to_find: str) -> bool:
            context = get_context(node)
            elements = find_elements(context, node, key, selector, finder_options)
            return all(
                text_to_find in _normalize(context.text_of(element))
                for element in elements
            )

        return check

    return Descriptor(get=get)
