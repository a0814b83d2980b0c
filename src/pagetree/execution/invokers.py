"""
Invocation strategies for page object actions.

Every build produces two trees from the same definition. Actions invoked on
the primary tree run as soon as the event loop gets to them and hand back
the matching node of the chained tree. Actions invoked on the chained tree
first wait for the previously invoked action and for the application to
settle, so fluent chains run strictly one after another:

    await page.fill_name("Ada").submit()   # settles between the two actions

    page.fill_name("Ada")                   # no ordering guarantee between
    page.submit()                           # these two calls

The strategy is attached to the root of each tree, not to individual nodes.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import Any

from pagetree.core.tree_node import Node, children, full_path, meta, tree_root
from pagetree.exceptions import ExecutionError
from pagetree.execution.context import get_context

logger = logging.getLogger(__name__)

Action = Callable[[Any], Awaitable[Any]]


class Invoker(ABC):
    """Base class for the invocation strategy of one tree."""

    def __init__(self):
        self.pending: asyncio.Task | None = None

    @abstractmethod
    def invoke(self, node: Node, key: str, action: Action) -> Node:
        """Schedule `action` for the property `key` of `node`."""
        pass

    async def wait(self) -> None:
        """Wait for the last scheduled action of this tree."""
        if self.pending is not None:
            await self.pending


class ImmediateInvoker(Invoker):
    """Strategy of primary trees: run right away, no settling."""

    def invoke(self, node: Node, key: str, action: Action) -> Node:
        context = get_context(node)
        chained = chained_counterpart(node)
        task = _schedule(action(context), node, key)
        invoker_of(chained).pending = task
        return chained


class ChainedInvoker(Invoker):
    """Strategy of chained trees: wait for the previous action and for settling."""

    def invoke(self, node: Node, key: str, action: Action) -> Node:
        context = get_context(node)
        previous = self.pending

        async def settle_then_run():
            if previous is not None:
                await previous
            await context.settled()
            return await action(context)

        self.pending = _schedule(settle_then_run(), node, key)
        return node


def _schedule(coroutine, node: Node, key: str) -> asyncio.Task:
    path = full_path(node, key)
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        coroutine.close()
        raise ExecutionError(path, "actions must be invoked inside a running event loop") from None
    logger.debug("Scheduling action %s", path)
    return loop.create_task(coroutine)


def invoker_of(node: Node) -> Invoker:
    """Return the invocation strategy of the tree `node` belongs to."""
    return meta(tree_root(node)).invoker


def run(node: Node, key: str, action: Action) -> Node:
    """
    Invoke an action through the strategy of the node's tree.

    Params:
        node: Node owning the action property
        key: Name of the action property
        action: Coroutine function receiving the test context

    Returns:
        The chained node to continue a fluent chain from

    Raises:
        ContextError: If no test context is available
        ExecutionError: If no event loop is running
    """
    return invoker_of(node).invoke(node, key, action)


def chained_counterpart(node: Node) -> Node:
    """
    Return the node of the chained tree mirroring `node`.

    Chained nodes are their own counterpart. Below the root the counterpart
    is found by following the same keys from the chained root, then cached
    on the node's metadata record.
    """
    record = meta(node)
    if record.chained is not None:
        return record.chained
    root = tree_root(node)
    root_record = meta(root)
    if root_record.primary is not None:
        return node

    keys = []
    current = node
    while current is not root:
        keys.append(meta(current).key)
        current = meta(current).parent

    chained = root_record.chained
    for key in reversed(keys):
        chained = children(chained)[key]
    record.chained = chained
    return chained


async def wait_for(node: Node) -> Node:
    """Wait for the pending actions of a node's tree, then return the node."""
    await invoker_of(node).wait()
    return node
