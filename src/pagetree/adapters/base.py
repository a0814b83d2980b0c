"""
Test context interface for pagetree.

A test context is what leaf properties run against: it evaluates locators,
reads elements and performs interactions on the application under test.
Elements are opaque to pagetree; only the context interprets them.
"""

from abc import ABC, abstractmethod
from typing import Any

from pagetree.core.path_utils import Locator


class TestContext(ABC):
    """Abstract base class for test contexts.

    Subclasses provide element selection and reads; `find_all` evaluates a
    locator segment by segment on top of `container` and `select`.
    """

    __test__ = False  # not a pytest test class

    @abstractmethod
    def container(self, test_container: str | None = None) -> Any:
        """Return the element queries start from."""
        pass

    @abstractmethod
    def select(self, root: Any, selector: str) -> list[Any]:
        """Return the descendants of `root` matching `selector`, in document order."""
        pass

    @abstractmethod
    def document_order(self, elements: list[Any]) -> list[Any]:
        """Sort elements in document order, dropping duplicates."""
        pass

    def find_all(self, locator: Locator) -> list[Any]:
        """
        Evaluate a locator.

        Params:
            locator: Resolved scope to evaluate

        Returns:
            Matching elements in document order; the container itself for
            the query root
        """
        elements = [self.container(locator.test_container)]
        for segment in locator.segments:
            matches = []
            for root in elements:
                matches.extend(self.select(root, segment.selector))
            elements = self.document_order(matches)
            if segment.at is not None:
                in_range = 0 <= segment.at < len(elements)
                elements = [elements[segment.at]] if in_range else []
            if not elements:
                break
        return elements

    @abstractmethod
    def text_of(self, element: Any) -> str:
        pass

    @abstractmethod
    def value_of(self, element: Any) -> Any:
        pass

    @abstractmethod
    def attribute_of(self, element: Any, name: str) -> str | None:
        pass

    @abstractmethod
    def is_visible(self, element: Any) -> bool:
        pass

    @abstractmethod
    def render(self, template: str) -> None:
        """Replace the content of the test container."""
        pass

    @abstractmethod
    async def click(self, element: Any) -> None:
        pass

    @abstractmethod
    async def fill_in(self, element: Any, value: str) -> None:
        pass

    @abstractmethod
    async def visit(self, url: str) -> None:
        pass

    @abstractmethod
    async def settled(self) -> None:
        """Wait until the application has no pending work."""
        pass
