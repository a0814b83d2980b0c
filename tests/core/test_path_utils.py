"""
Tests for scope resolution.

This module tests Locator composition and resolve_scope, which computes
the resolved scope of every node from its parent's.
"""

from pagetree.core.path_utils import Locator, ScopeSegment, resolve_scope


class TestLocator:
    """Tests for Locator composition."""

    def test_empty_locator_is_root(self):
        """Test that a locator without segments denotes the query root."""
        assert Locator().is_root
        assert str(Locator()) == ""

    def test_narrow_appends_segment(self):
        """Test that narrowing adds one segment and leaves the original alone."""
        parent = Locator().narrow(".a")
        child = parent.narrow(".b", at=2)

        assert str(parent) == ".a"
        assert str(child) == ".a .b:eq(2)"
        assert child.segments == (ScopeSegment(".a"), ScopeSegment(".b", 2))

    def test_narrow_accepts_segment(self):
        """Test narrowing with a ready-made segment keeps its index."""
        locator = Locator().narrow(ScopeSegment("li", at=1))
        assert str(locator) == "li:eq(1)"

    def test_at_replaces_last_index(self):
        """Test that at() restricts the last segment."""
        locator = Locator().narrow(".a").narrow("li").at(3)
        assert str(locator) == ".a li:eq(3)"

    def test_at_on_root_selects_children(self):
        """Test that at() on the query root picks among all descendants."""
        assert str(Locator().at(0)) == "*:eq(0)"

    def test_within_keeps_container_when_none(self):
        """Test that within(None) returns the same locator."""
        locator = Locator(test_container="#other")
        assert locator.within(None) is locator
        assert locator.within("#third").test_container == "#third"


class TestResolveScope:
    """Tests for resolve_scope."""

    def test_scope_is_appended_to_parent(self):
        """Test parent and own scope compose."""
        parent = Locator().narrow(".a")
        assert str(resolve_scope(parent, ".b")) == ".a .b"

    def test_reset_scope_discards_parent(self):
        """Test that reset_scope keeps only the node's own scope."""
        parent = Locator().narrow(".a")
        assert str(resolve_scope(parent, ".b", reset_scope=True)) == ".b"

    def test_no_scope_inherits_parent(self):
        """Test that a node without scope shares its parent's."""
        parent = Locator().narrow(".a")
        assert resolve_scope(parent) == parent

    def test_reset_without_scope_is_root(self):
        """Test that resetting without a scope resolves to the query root."""
        parent = Locator().narrow(".a")
        assert resolve_scope(parent, reset_scope=True).is_root

    def test_empty_scope_counts_as_absent(self):
        """Test that an empty string scope does not add a segment."""
        parent = Locator().narrow(".a")
        assert resolve_scope(parent, "") == parent

    def test_test_container_override(self):
        """Test that a declared test container replaces the inherited one."""
        resolved = resolve_scope(Locator(), ".a", test_container="#alternate")
        assert resolved.test_container == "#alternate"
        assert str(resolved) == ".a"

    def test_reset_keeps_inherited_test_container(self):
        """Test that reset_scope does not leave the parent's container."""
        parent = Locator(test_container="#alternate").narrow(".a")
        resolved = resolve_scope(parent, ".b", reset_scope=True)
        assert resolved.test_container == "#alternate"
        assert str(resolved) == ".b"
