"""Test contexts pagetree page objects can run against."""

from pagetree.adapters.base import TestContext
from pagetree.adapters.html import HtmlTestContext

__all__ = ["TestContext", "HtmlTestContext"]
