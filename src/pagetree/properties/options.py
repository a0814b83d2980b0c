"""Validated options shared by the element finders of leaf properties."""

from pydantic import BaseModel, ConfigDict, Field


class FinderOptions(BaseModel):
    """Options controlling how a leaf property locates its element(s).

    Params:
        scope: Extra scope narrowed into before the property's selector
        reset_scope: Ignore the scope inherited from the owning node
        test_container: Run the query in another container
        at: Pick the n-th match of the selector
        multiple: Allow several matches and return one result per match
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    scope: str | None = None
    reset_scope: bool = False
    test_container: str | None = None
    at: int | None = Field(default=None, ge=0)
    multiple: bool = False
