"""
Definition normalization, copying and merging.

Page object properties are mostly evaluated on read, so a built page object
keeps the definition that produced it. Composition and extension work on
those stored definitions instead of on live nodes, which would fire every
query while being merged.
"""

from collections.abc import Mapping
from typing import Any

from pagetree.core.tree_node import Node, meta
from pagetree.core.types import Definition
from pagetree.exceptions import DefinitionError


def stored_definition(value: Any) -> Definition | None:
    """Return the stored definition of a tracked page object, or None."""
    record = meta(value)
    if record is None:
        return None
    return record.definition


def copy_definition(definition: Mapping[str, Any]) -> Definition:
    """Copy the mapping structure of a definition, sharing its leaves."""
    return {
        key: copy_definition(value) if isinstance(value, Mapping) else value
        for key, value in definition.items()
    }


def normalize_definition(definition: Mapping[str, Any]) -> Definition:
    """
    Replace every embedded page object with the definition that built it.

    Collection descriptors are left as they are; `collection()` already
    normalized their item definitions when they were authored.

    Params:
        definition: Raw definition, possibly containing built page objects

    Returns:
        A new definition free of live nodes

    Raises:
        DefinitionError: If a value is a node that carries no stored
            definition (a nested part of another page object)
    """
    normalized = {}
    for key, value in definition.items():
        if isinstance(value, Node):
            stored = stored_definition(value)
            if stored is None:
                raise DefinitionError(
                    key, "only page objects returned by create() can be composed"
                )
            normalized[key] = copy_definition(stored)
        elif isinstance(value, Mapping):
            normalized[key] = normalize_definition(value)
        else:
            normalized[key] = value
    return normalized


def deep_merge(base: Mapping[str, Any], overrides: Mapping[str, Any]) -> Definition:
    """
    Merge `overrides` into `base`, returning a new definition.

    Mappings present on both sides merge recursively; any other value in
    `overrides` replaces the one in `base`. Keys present on one side only
    pass through.

    Examples:
        {"a": {"b": 1, "c": 2}} + {"a": {"b": 3}} -> {"a": {"b": 3, "c": 2}}
        {"a": {"b": 1}} + {"a": "leaf"}          -> {"a": "leaf"}
    """
    merged = copy_definition(base)
    for key, value in overrides.items():
        current = merged.get(key)
        if isinstance(value, Mapping) and isinstance(current, Mapping):
            merged[key] = deep_merge(current, value)
        elif isinstance(value, Mapping):
            merged[key] = copy_definition(value)
        else:
            merged[key] = value
    return merged


def extend_definition(
    definition: Mapping[str, Any], overrides: Mapping[str, Any]
) -> Definition:
    """Build the definition of a page object extended with `overrides`."""
    return deep_merge(definition, normalize_definition(overrides))
