"""
pagetree exception classes.

This package provides all exception types used throughout pagetree for
consistent error handling and reporting.
"""

from pagetree.exceptions.core import (
    AmbiguousElementError,
    ContextError,
    DefinitionError,
    ElementLookupError,
    ElementNotFoundError,
    ErrorContext,
    ErrorLevel,
    ExecutionError,
    MissingParameterError,
    PageTreeError,
)

__all__ = [
    "PageTreeError",
    "DefinitionError",
    "ElementLookupError",
    "ElementNotFoundError",
    "AmbiguousElementError",
    "MissingParameterError",
    "ContextError",
    "ExecutionError",
    "ErrorContext",
    "ErrorLevel",
]
