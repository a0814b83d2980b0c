"""
pagetree execution components.

This package provides test context lookup and the invocation strategies
of primary and chained trees.
"""

from pagetree.execution.context import (
    find_context,
    get_context,
    remove_context,
    render,
    set_context,
    use_context,
)
from pagetree.execution.invokers import (
    ChainedInvoker,
    ImmediateInvoker,
    Invoker,
    chained_counterpart,
    run,
    wait_for,
)

__all__ = [
    "ChainedInvoker",
    "ImmediateInvoker",
    "Invoker",
    "chained_counterpart",
    "find_context",
    "get_context",
    "remove_context",
    "render",
    "run",
    "set_context",
    "use_context",
    "wait_for",
]
