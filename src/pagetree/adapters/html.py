"""
In-memory HTML test context built on lxml.

`HtmlTestContext` parses a document, renders templates into a container
element and records every interaction, which makes it a convenient test
container for page objects:

    context = HtmlTestContext()
    context.render('<div class="title">Hello</div>')
    page = create({"title": text(".title"), "context": context})
    assert page.title == "Hello"

Clicks, fills, visits and settle waits are appended to `events` as
`(name, detail)` tuples.
"""

import asyncio
import re
from functools import lru_cache
from typing import Any

from cssselect import HTMLTranslator
from lxml import etree, html

from pagetree.adapters.base import TestContext
from pagetree.config import get_settings
from pagetree.exceptions import ContextError

_HIDDEN_STYLE = re.compile(r"(display\s*:\s*none|visibility\s*:\s*hidden)", re.IGNORECASE)

_DEFAULT_DOCUMENT = '<html><body><div id="test-container"></div></body></html>'


@lru_cache(maxsize=512)
def _descendant_xpath(selector: str) -> etree.XPath:
    return etree.XPath(HTMLTranslator().css_to_xpath(selector, prefix="descendant::"))


class HtmlTestContext(TestContext):
    """Test context over an lxml document.

    Params:
        document: Full HTML document; defaults to a body holding an empty
            `<div id="test-container">`
    """

    def __init__(self, document: str | None = None):
        self.document = html.document_fromstring(document or _DEFAULT_DOCUMENT)
        self.events: list[tuple[str, Any]] = []
        self.settle_count = 0
        self.current_url: str | None = None

    def container(self, test_container: str | None = None) -> Any:
        selector = test_container or get_settings().test_container
        matches = _descendant_xpath(selector)(self.document)
        if not matches:
            raise ContextError(f"Test container '{selector}' does not exist in the document")
        return matches[0]

    def select(self, root: Any, selector: str) -> list[Any]:
        return _descendant_xpath(selector)(root)

    def document_order(self, elements: list[Any]) -> list[Any]:
        if len(elements) < 2:
            return list(elements)
        wanted = set(elements)
        return [element for element in self.document.iter() if element in wanted]

    def text_of(self, element: Any) -> str:
        return element.text_content()

    def value_of(self, element: Any) -> Any:
        if element.tag == "textarea":
            return element.text or ""
        if element.tag == "select":
            selected = element.xpath(".//option[@selected]") or element.xpath(".//option")
            return selected[0].get("value", selected[0].text_content()) if selected else None
        return element.get("value", "")

    def attribute_of(self, element: Any, name: str) -> str | None:
        return element.get(name)

    def is_visible(self, element: Any) -> bool:
        current = element
        while current is not None:
            if current.get("hidden") is not None:
                return False
            if _HIDDEN_STYLE.search(current.get("style", "")):
                return False
            current = current.getparent()
        return True

    def render(self, template: str, test_container: str | None = None) -> None:
        """Replace the content of a container with `template`."""
        container = self.container(test_container)
        for child in list(container):
            container.remove(child)
        container.text = None
        if not template.strip():
            return
        fragments = html.fragments_fromstring(template)
        if fragments and isinstance(fragments[0], str):
            container.text = fragments.pop(0)
        for fragment in fragments:
            container.append(fragment)

    async def click(self, element: Any) -> None:
        self.events.append(("click", element))

    async def fill_in(self, element: Any, value: str) -> None:
        if element.tag == "textarea":
            element.text = value
        else:
            element.set("value", value)
        self.events.append(("fill_in", (element, value)))

    async def visit(self, url: str) -> None:
        self.current_url = url
        self.events.append(("visit", url))

    async def settled(self) -> None:
        self.settle_count += 1
        self.events.append(("settled", None))
        await asyncio.sleep(0)

    def event_names(self) -> list[str]:
        """Names of the recorded events, in order."""
        return [name for name, _ in self.events]
