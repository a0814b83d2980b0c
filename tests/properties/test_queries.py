"""
Tests for query properties.

Queries are evaluated on every read against the test context; element
lookup problems surface at read time with the property path in the message.
"""

import pytest

from pagetree import (
    attribute,
    contains,
    count,
    create,
    has_class,
    is_hidden,
    is_present,
    is_visible,
    text,
    value,
)
from pagetree.config import configure
from pagetree.exceptions import AmbiguousElementError, ElementNotFoundError


class TestAttribute:
    """Test the attribute query."""

    def test_returns_attribute_value(self, html_context):
        """Test reading an attribute."""
        html_context.render('<input placeholder="a value">')
        page = create({"foo": attribute("placeholder", "input"), "context": html_context})
        assert page.foo == "a value"

    def test_returns_none_when_attribute_missing(self, html_context):
        """Test that an absent attribute reads as None."""
        html_context.render("<input>")
        page = create({"foo": attribute("placeholder", "input"), "context": html_context})
        assert page.foo is None

    def test_missing_element_error_names_property_path(self, html_context):
        """Test that a missing element reports the full property path."""
        page = create(
            {
                "foo": {"bar": {"baz": {"qux": attribute("placeholder", "input")}}},
                "context": html_context,
            }
        )

        with pytest.raises(ElementNotFoundError, match=r"page\.foo\.bar\.baz\.qux") as exc_info:
            page.foo.bar.baz.qux

        assert exc_info.value.path == "page.foo.bar.baz.qux"

    def test_looks_inside_option_scope(self, html_context):
        """Test the scope option of a leaf property."""
        html_context.render(
            '<div><input></div><div class="scope"><input placeholder="a value"></div><div><input></div>'
        )
        page = create(
            {"foo": attribute("placeholder", "input", scope=".scope"), "context": html_context}
        )
        assert page.foo == "a value"

    def test_looks_inside_page_scope(self, html_context):
        """Test that the owning node's scope applies."""
        html_context.render(
            '<div><input></div><div class="scope"><input placeholder="a value"></div><div><input></div>'
        )
        page = create(
            {"scope": ".scope", "foo": attribute("placeholder", "input"), "context": html_context}
        )
        assert page.foo == "a value"

    def test_resets_scope(self, html_context):
        """Test the reset_scope option of a leaf property."""
        html_context.render('<div class="scope"></div><div><input placeholder="a value"></div>')
        page = create(
            {
                "scope": ".scope",
                "foo": attribute("placeholder", "input", reset_scope=True),
                "context": html_context,
            }
        )
        assert page.foo == "a value"

    def test_several_matches_raise(self, html_context):
        """Test that an ambiguous selector is an error without multiple."""
        html_context.render('<input placeholder="a value"><input placeholder="other value">')
        page = create({"foo": attribute("placeholder", "input"), "context": html_context})

        with pytest.raises(AmbiguousElementError, match="more than one element") as exc_info:
            page.foo

        assert exc_info.value.count == 2

    def test_returns_multiple_values(self, html_context):
        """Test the multiple option."""
        html_context.render('<input placeholder="a value"><input placeholder="other value">')
        page = create(
            {"foo": attribute("placeholder", "input", multiple=True), "context": html_context}
        )
        assert page.foo == ["a value", "other value"]

    def test_finds_element_by_index(self, html_context):
        """Test the at option."""
        html_context.render('<input><input placeholder="a value">')
        page = create({"foo": attribute("placeholder", "input", at=1), "context": html_context})
        assert page.foo == "a value"

    def test_looks_outside_the_test_container(self, html_context):
        """Test the test_container option."""
        html_context.render('<input placeholder="a value">', "#alternate-test-container")
        page = create(
            {
                "foo": attribute("placeholder", "input", test_container="#alternate-test-container"),
                "context": html_context,
            }
        )
        assert page.foo == "a value"

    def test_extended_page_reads_own_and_inherited(self, html_context):
        """Test attribute properties of an extended page object."""
        attribute_page = create({"foo": attribute("placeholder", "#id1")})
        page = create(attribute_page.extend({"bar": attribute("placeholder", "#someId")}))
        page.set_context(html_context)

        html_context.render('<input id="someId" placeholder="a value">')
        assert page.bar == "a value"
        with pytest.raises(ElementNotFoundError, match=r"page\.foo"):
            page.foo

        html_context.render('<input id="id1" placeholder="a value">')
        assert page.foo == "a value"
        with pytest.raises(ElementNotFoundError, match=r"page\.bar"):
            page.bar


class TestScopeResolution:
    """Test scope inheritance through nested nodes."""

    def test_nested_scope(self, html_context):
        """Test that a nested scope narrows its parent's."""
        html_context.render('<div class="inner">Y</div><div class="scope"><div class="inner">X</div></div>')
        page = create(
            {"scope": ".scope", "foo": {"bar": {"scope": ".inner", "text": text()}}, "context": html_context}
        )
        assert page.foo.bar.text == "X"

    def test_nested_reset_scope(self, html_context):
        """Test that reset_scope on a nested node drops the page scope."""
        html_context.render('<div class="scope"></div><div class="inner">Y</div>')
        page = create(
            {
                "scope": ".scope",
                "foo": {"bar": {"scope": ".inner", "reset_scope": True, "text": text()}},
                "context": html_context,
            }
        )
        assert page.foo.bar.text == "Y"

    def test_without_reset_nothing_found(self, html_context):
        """Test that the same layout misses the element when the scope is inherited."""
        html_context.render('<div class="scope"></div><div class="inner">Y</div>')
        page = create(
            {"scope": ".scope", "foo": {"bar": {"scope": ".inner", "text": text()}}, "context": html_context}
        )
        with pytest.raises(ElementNotFoundError, match=r"page\.foo\.bar\.text"):
            page.foo.bar.text

    def test_error_shows_selector(self, html_context):
        """Test that the evaluated selector appears in lookup errors."""
        page = create({"scope": ".scope", "foo": text(".missing"), "context": html_context})
        with pytest.raises(ElementNotFoundError, match=r"Selector: '\.scope \.missing'"):
            page.foo


class TestReadQueries:
    """Test text, value and the other read queries."""

    def test_text_is_normalized(self, html_context):
        """Test that whitespace runs collapse."""
        html_context.render("<p>  Lorem \n   ipsum  </p>")
        page = create({"foo": text("p"), "context": html_context})
        assert page.foo == "Lorem ipsum"

    def test_text_normalization_can_be_disabled(self, html_context):
        """Test the normalize_whitespace setting."""
        configure(normalize_whitespace=False)
        html_context.render("<p> Lorem  ipsum </p>")
        page = create({"foo": text("p"), "context": html_context})
        assert page.foo == " Lorem  ipsum "

    def test_text_read_on_every_access(self, html_context):
        """Test that queries follow changes of the page."""
        page = create({"foo": text("p"), "context": html_context})
        html_context.render("<p>one</p>")
        assert page.foo == "one"
        html_context.render("<p>two</p>")
        assert page.foo == "two"

    def test_value(self, html_context):
        """Test reading form control values."""
        html_context.render('<input value="Ada"><textarea>Notes</textarea>')
        page = create({"name": value("input"), "notes": value("textarea"), "context": html_context})
        assert page.name == "Ada"
        assert page.notes == "Notes"

    def test_has_class(self, html_context):
        """Test class checks."""
        html_context.render('<li class="todo completed">A</li>')
        page = create(
            {"done": has_class("completed", "li"), "active": has_class("active", "li"), "context": html_context}
        )
        assert page.done is True
        assert page.active is False

    def test_count(self, html_context):
        """Test counting matches, zero included."""
        html_context.render("<li>a</li><li>b</li>")
        page = create({"items": count("li"), "links": count("a"), "context": html_context})
        assert page.items == 2
        assert page.links == 0

    def test_visibility(self, html_context):
        """Test is_visible and is_hidden."""
        html_context.render(
            '<p class="shown">a</p><p class="styled" style="display: none">b</p>'
            '<div hidden="hidden"><p class="nested">c</p></div>'
        )
        page = create(
            {
                "shown": is_visible(".shown"),
                "styled": is_visible(".styled"),
                "nested_hidden": is_hidden(".nested"),
                "missing_hidden": is_hidden(".missing"),
                "context": html_context,
            }
        )
        assert page.shown is True
        assert page.styled is False
        assert page.nested_hidden is True
        assert page.missing_hidden is True

    def test_is_visible_requires_element(self, html_context):
        """Test that is_visible reports a missing element."""
        page = create({"foo": is_visible(".missing"), "context": html_context})
        with pytest.raises(ElementNotFoundError):
            page.foo

    def test_is_present(self, html_context):
        """Test presence checks."""
        html_context.render('<p class="here">a</p>')
        page = create(
            {"here": is_present(".here"), "gone": is_present(".gone"), "context": html_context}
        )
        assert page.here is True
        assert page.gone is False

    def test_contains(self, html_context):
        """Test the contains callable."""
        html_context.render('<p class="title">Hello world</p>')
        page = create({"title": contains(".title"), "context": html_context})
        assert page.title("world") is True
        assert page.title("bye") is False


class TestDefaultProperties:
    """Test the properties every composite node responds to."""

    def test_defaults_on_root_and_children(self, html_context):
        """Test text, contains and visibility on nodes without declarations."""
        html_context.render('<div class="title">Hello <b>there</b></div>')
        page = create({"title": {"scope": ".title"}, "context": html_context})

        assert page.title.text == "Hello there"
        assert page.title.contains("there") is True
        assert page.title.is_visible is True
        assert page.title.is_hidden is False
        assert page.text == "Hello there"
