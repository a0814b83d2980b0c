"""
pagetree - Declarative page objects for testing web applications

pagetree builds navigable page object trees from nested definitions. Leaf
properties run scoped DOM queries and interactions against a test context;
collections give indexed access to repeated items; page objects compose
into and extend one another through their stored definitions.
"""

from importlib.metadata import version

from pagetree.adapters.base import TestContext
from pagetree.create import create
from pagetree.execution.context import use_context
from pagetree.properties import (
    attribute,
    click_on_text,
    clickable,
    collection,
    contains,
    count,
    fillable,
    has_class,
    is_hidden,
    is_present,
    is_visible,
    text,
    value,
    visitable,
)

__version__ = version("pagetree")

__all__ = [
    "__version__",
    "create",
    "collection",
    "attribute",
    "click_on_text",
    "clickable",
    "contains",
    "count",
    "fillable",
    "has_class",
    "is_hidden",
    "is_present",
    "is_visible",
    "text",
    "value",
    "visitable",
    "use_context",
    "TestContext",
]
