"""
Action properties: asynchronous interactions routed through the tree's
invocation strategy.

Reading an action property returns a function. Calling it schedules the
interaction and returns a node that can be awaited or chained from:

    await page.name_field("Ada").submit()
"""

import re
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote, urlencode

from pagetree.core.descriptors import Descriptor
from pagetree.core.tree_node import Node
from pagetree.exceptions import ElementNotFoundError, MissingParameterError
from pagetree.execution.invokers import run
from pagetree.properties.finders import build_locator, error_context, find_element
from pagetree.properties.options import FinderOptions

_DYNAMIC_SEGMENT = re.compile(r":([A-Za-z_][A-Za-z0-9_]*)")


def clickable(selector: str | None = None, **options) -> Descriptor:
    """Click the element."""
    finder_options = FinderOptions(**options)

    def get(node: Node, key: str):
        def click():
            async def perform(context):
                element = find_element(context, node, key, selector, finder_options)
                await context.click(element)

            return run(node, key, perform)

        return click

    return Descriptor(get=get, kind="action")


def click_on_text(selector: str | None = None, **options) -> Descriptor:
    """Click the innermost element whose text contains the given string."""
    finder_options = FinderOptions(**options)

    def get(node: Node, key: str):
        def click_on(text_to_find: str):
            async def perform(context):
                locator = build_locator(node, selector, finder_options)
                candidates = context.find_all(locator.narrow("*"))
                matches = [
                    element
                    for element in candidates
                    if text_to_find in " ".join(context.text_of(element).split())
                ]
                if not matches:
                    raise ElementNotFoundError(
                        error_context(node, key, locator.narrow(f':contains("{text_to_find}")'))
                    )
                await context.click(matches[-1])

            return run(node, key, perform)

        return click_on

    return Descriptor(get=get, kind="action")


def fillable(selector: str | None = None, **options) -> Descriptor:
    """Fill a form control with a value."""
    finder_options = FinderOptions(**options)

    def get(node: Node, key: str):
        def fill_in(text_value: Any):
            async def perform(context):
                element = find_element(context, node, key, selector, finder_options)
                await context.fill_in(element, str(text_value))

            return run(node, key, perform)

        return fill_in

    return Descriptor(get=get, kind="action")


def build_url(path: str, params: Mapping[str, Any] | None = None) -> str:
    """
    Fill the dynamic segments of a path and append remaining params as a query.

    Params:
        path: Route such as "/users/:user_id/comments/:comment_id"
        params: Values for dynamic segments and query parameters

    Returns:
        URL such as "/users/5/comments/1?hello=world"

    Raises:
        MissingParameterError: If a dynamic segment has no value
    """
    remaining = dict(params or {})

    def fill(match: re.Match) -> str:
        name = match.group(1)
        if name not in remaining:
            raise MissingParameterError(name)
        return quote(str(remaining.pop(name)), safe="")

    url = _DYNAMIC_SEGMENT.sub(fill, path)
    if remaining:
        url = f"{url}?{urlencode(remaining)}"
    return url


def visitable(path: str) -> Descriptor:
    """Navigate to a route, filling its dynamic segments from the call's params."""

    def get(node: Node, key: str):
        def visit(params: Mapping[str, Any] | None = None, **kwargs):
            url = build_url(path, {**(params or {}), **kwargs})

            async def perform(context):
                await context.visit(url)

            return run(node, key, perform)

        return visit

    return Descriptor(get=get, kind="action")

