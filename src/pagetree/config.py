"""Process-wide settings for page object building and the bundled adapters."""

from pydantic import BaseModel, ConfigDict, Field


class PageTreeSettings(BaseModel):
    """Validated settings shared by the builder, leaf properties and adapters.

    Params:
        test_container: Selector of the element queries run in when a locator
            names no container of its own.
        root_key: Key given to root nodes; first component of property paths.
        normalize_whitespace: Collapse runs of whitespace in text queries.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    test_container: str = Field(default="#test-container", min_length=1)
    root_key: str = Field(default="page", min_length=1)
    normalize_whitespace: bool = True


_settings = PageTreeSettings()


def get_settings() -> PageTreeSettings:
    """Return the active settings."""
    return _settings


def configure(**changes) -> PageTreeSettings:
    """Validate and install new settings on top of the active ones.

    Params:
        **changes: Field values to replace.

    Returns:
        The newly active settings.

    Raises:
        pydantic.ValidationError: If a value is invalid or a field is unknown.
    """
    global _settings
    _settings = PageTreeSettings.model_validate(
        {**_settings.model_dump(), **changes}
    )
    return _settings


def reset_settings() -> PageTreeSettings:
    """Restore the default settings."""
    global _settings
    _settings = PageTreeSettings()
    return _settings
