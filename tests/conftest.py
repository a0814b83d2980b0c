"""
Shared test fixtures and utilities for the pagetree test suite.
"""

import pytest

from pagetree.adapters import HtmlTestContext
from pagetree.config import reset_settings

TEST_DOCUMENT = (
    "<html><body>"
    '<div id="test-container"></div>'
    '<div id="alternate-test-container"></div>'
    "</body></html>"
)


@pytest.fixture
def html_context():
    """In-memory test context with the default and an alternate container.

    Usage:
        def test_something(html_context):
            html_context.render("<span>Lorem</span>")
            page = create({"foo": text("span"), "context": html_context})
    """
    return HtmlTestContext(TEST_DOCUMENT)


@pytest.fixture(autouse=True)
def default_settings():
    """Restore the default settings around every test."""
    reset_settings()
    yield
    reset_settings()
