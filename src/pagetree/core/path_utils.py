"""
Scope resolution utilities for pagetree.

A scope is a composable query locator. Every node of a page object tree
resolves its scope once, at build time, from its parent's resolved scope and
its own declared `scope`, `reset_scope` and `test_container` entries.
"""

from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class ScopeSegment:
    """One narrowing step of a locator.

    Params:
        selector: CSS selector matched against descendants of the previous step
        at: Optional index into the matches of this step (document order)
    """

    selector: str
    at: int | None = None

    def __str__(self) -> str:
        if self.at is None:
            return self.selector
        return f"{self.selector}:eq({self.at})"


@dataclass(frozen=True)
class Locator:
    """
    Resolved query scope of a node.

    Elements are located by starting from the container and, for every
    segment, keeping the descendants of the current element set that match
    the segment's selector. An empty locator denotes the query root, which
    matches the whole test container.
    """

    segments: tuple[ScopeSegment, ...] = field(default_factory=tuple)
    test_container: str | None = None

    def __str__(self) -> str:
        return " ".join(str(segment) for segment in self.segments)

    @property
    def is_root(self) -> bool:
        """Check if this locator matches the whole test container."""
        return not self.segments

    def narrow(self, scope: "str | ScopeSegment", at: int | None = None) -> "Locator":
        """
        Return a locator for elements matching `scope` within this one.

        Params:
            scope: Selector string or ready-made segment
            at: Index applied when `scope` is a selector string

        Returns:
            New locator with one more segment
        """
        segment = scope if isinstance(scope, ScopeSegment) else ScopeSegment(scope, at)
        return replace(self, segments=self.segments + (segment,))

    def at(self, index: int) -> "Locator":
        """Return a locator restricted to the `index`-th match of the last segment."""
        if not self.segments:
            return self.narrow("*", at=index)
        last = replace(self.segments[-1], at=index)
        return replace(self, segments=self.segments[:-1] + (last,))

    def within(self, test_container: str | None) -> "Locator":
        """Return this locator evaluated in another container (None keeps the current one)."""
        if test_container is None:
            return self
        return replace(self, test_container=test_container)


def resolve_scope(
    parent: Locator,
    scope: "str | ScopeSegment | None" = None,
    reset_scope: bool = False,
    test_container: str | None = None,
) -> Locator:
    """
    Compute the resolved scope of a node.

    Params:
        parent: Resolved scope of the parent node
        scope: The node's own declared scope, if any
        reset_scope: Discard the parent's scope
        test_container: Container override declared by the node

    Returns:
        The node's resolved scope

    Examples:
        parent ".a", scope ".b"              -> ".a .b"
        parent ".a", scope ".b", reset       -> ".b"
        parent ".a", no scope                -> ".a"
        parent ".a", no scope, reset         -> query root
    """
    if reset_scope:
        resolved = Locator(test_container=parent.test_container)
        if scope:
            resolved = resolved.narrow(scope)
    elif scope:
        resolved = parent.narrow(scope)
    else:
        resolved = parent
    return resolved.within(test_container)
