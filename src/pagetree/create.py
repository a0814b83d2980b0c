"""Public entry point for building page objects."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict

from pagetree.core.tree_node import Node
from pagetree.exceptions import DefinitionError
from pagetree.properties.actions import visitable
from pagetree.structure.builder import build_page_object
from pagetree.structure.definitions import copy_definition, stored_definition


class BuildOptions(BaseModel):
    """Options of `create()`; mostly used internally by collections.

    Params:
        parent: Node the new page object hangs off
        key: Key of the root node in property paths
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    parent: Node | None = None
    key: str | None = None


def create(
    definition_or_path: "str | Mapping[str, Any] | Node | None" = None,
    definition_or_options: "Mapping[str, Any] | Node | None" = None,
    options_or_track: Any = None,
) -> Node:
    """
    Create a page object.

    Every composite node of the result responds to `is_visible`, `is_hidden`,
    `text`, `contains`, `click` and `click_on` unless the definition says
    otherwise. The root also responds to `extend`, `render`, `set_context` and
    `remove_context`.

    Params:
        definition_or_path: Definition, or a path installed as a `visit` action
            in which case the next two arguments shift left
        definition_or_options: Options, or the definition when a path was given
        options_or_track: Whether to store the definition with embedded page
            objects replaced by their definitions (default true), or the
            options when a path was given

    Returns:
        Root node of the page object

    Examples:
        page = create({"scope": "#login", "title": text("h1")})
        page.title

        users = create("/users/:user_id", {"name": text(".name")})
        await users.visit(user_id=5)
    """
    if isinstance(definition_or_path, str):
        path = definition_or_path
        definition = definition_or_options
        options = options_or_track
        track = True
    else:
        path = None
        definition = definition_or_path
        options = definition_or_options
        track = options_or_track is not False

    stored = stored_definition(definition)
    if stored is not None:
        definition = copy_definition(stored)
    elif isinstance(definition, Node):
        raise DefinitionError(None, "only page objects returned by create() can be used as definitions")
    else:
        definition = dict(definition or {})

    if path is not None:
        definition["visit"] = visitable(path)
    context = definition.pop("context", None)

    build_options = BuildOptions.model_validate(dict(options or {}))
    return build_page_object(
        definition,
        context=context,
        parent=build_options.parent,
        key=build_options.key,
        track=track,
    )
