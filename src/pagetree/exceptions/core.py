"""
Exception classes for pagetree page object building and execution.

This module defines specific exception types for the different error
conditions that can occur while building page object trees, resolving
elements for leaf properties and invoking actions.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorLevel(Enum):
    """How much of a failed lookup an error message reveals."""

    USER = "user"  # Property path and selector only
    DEVELOPER = "developer"  # Adds container and resolved scope segments


@dataclass
class ErrorContext:
    """
    Context information for element lookup error messages.

    Captures where an element lookup happened in page object terms (the
    dotted property path) and in query terms (the selector and container).

    Params:
        path: Dotted property path, e.g. "page.foo.bar.baz.qux"
        selector: Human readable form of the locator that was evaluated
        test_container: Selector of the container the query ran in
        segments: Individual scope segments of the locator
    """

    path: str | None = None
    selector: str | None = None
    test_container: str | None = None
    segments: tuple[str, ...] = ()

    def format_location(self, error_level: ErrorLevel) -> str:
        """
        Describe where a lookup happened.

        Params:
            error_level: USER for path and selector, DEVELOPER to add container and segments

        Returns:
            One line per detail, ready to append to an error summary
        """
        lines = []

        if self.path:
            lines.append(f"PageObject: '{self.path}'")
        if self.selector is not None:
            lines.append(f"  Selector: '{self.selector}'")

        if error_level == ErrorLevel.DEVELOPER:
            if self.test_container:
                lines.append(f"  Container: '{self.test_container}'")
            for index, segment in enumerate(self.segments):
                lines.append(f"  segment {index}: {segment}")

        return "\n".join(lines)


class PageTreeError(Exception):
    """Base exception for all pagetree errors."""

    pass


class DefinitionError(PageTreeError):
    """Raised when a page object definition is malformed."""

    def __init__(self, key: str | None, reason: str):
        """
        Initialize the exception.

        Params:
            key: The definition key the problem was found at, if known
            reason: Why the definition cannot be built
        """
        self.key = key
        self.reason = reason
        if key is None:
            super().__init__(f"Invalid definition: {reason}")
        else:
            super().__init__(f"Invalid definition for '{key}': {reason}")


class ElementLookupError(PageTreeError):
    """Base class for element resolution failures of leaf properties."""

    summary = "Element lookup failed"

    def __init__(
        self,
        context: ErrorContext,
        error_level: ErrorLevel = ErrorLevel.USER,
    ):
        """
        Initialize the exception.

        Params:
            context: ErrorContext describing the failed lookup
            error_level: Level of detail to show in error message
        """
        self.context = context
        self.error_level = error_level
        super().__init__(f"{self.summary}\n\n{context.format_location(error_level)}")

    @property
    def path(self) -> str | None:
        return self.context.path


class ElementNotFoundError(ElementLookupError):
    """Raised when a leaf property finds no element in its scope."""

    summary = "Element not found."


class AmbiguousElementError(ElementLookupError):
    """Raised when a leaf property matches several elements without `multiple`."""

    def __init__(
        self,
        context: ErrorContext,
        count: int,
        error_level: ErrorLevel = ErrorLevel.USER,
    ):
        """
        Initialize the exception.

        Params:
            context: ErrorContext describing the failed lookup
            count: Number of elements that matched
            error_level: Level of detail to show in error message
        """
        self.count = count
        self.summary = f"Matched more than one element ({count}). If this is not an error use multiple=True."
        super().__init__(context, error_level)


class MissingParameterError(PageTreeError):
    """Raised when a dynamic path segment has no value."""

    def __init__(self, name: str):
        """
        Initialize the exception.

        Params:
            name: The dynamic segment name without its leading colon
        """
        self.name = name
        super().__init__(f"Missing parameter for '{name}'")


class ContextError(PageTreeError):
    """Raised when a page object needs a test context and has none."""

    def __init__(self, message: str):
        """
        Initialize the exception.

        Params:
            message: Error message describing the missing context
        """
        super().__init__(message)


class ExecutionError(PageTreeError):
    """Raised when an action cannot be scheduled."""

    def __init__(self, path: str, reason: str):
        """
        Initialize the exception.

        Params:
            path: Dotted property path of the action
            reason: Why the action could not be scheduled
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot invoke '{path}': {reason}")
