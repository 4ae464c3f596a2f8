"""Attribute types - map raw attribute values to prop values.

An attribute type is a tagged union discriminated by ``kind``:
- options: enumerated choices, advertised to the host in order
- text: free text

Both pass values through unchanged. A value outside the declared options is
not rejected; the options only describe what the host should offer.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from uicomposer.schema import OptionsAttributeSchema, TextAttributeSchema


class OptionsAttribute(BaseModel):
    """Attribute with an ordered list of allowed values."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["options"] = "options"
    options: tuple[str, ...] = ()

    def serialize(self) -> OptionsAttributeSchema:
        return OptionsAttributeSchema(options=list(self.options))

    def to_prop_value(self, value: Any) -> Any:
        return value


class TextAttribute(BaseModel):
    """Free-text attribute.

    ``default_value`` is kept for callers that want it; neither mapping nor
    serialization reads it.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    default_value: str = ""

    def serialize(self) -> TextAttributeSchema:
        return TextAttributeSchema()

    def to_prop_value(self, value: Any) -> Any:
        return value


AttributeType = Annotated[
    Union[OptionsAttribute, TextAttribute],
    Field(discriminator="kind"),
]

_attribute_adapter: TypeAdapter[AttributeType] = TypeAdapter(AttributeType)


def parse_attribute(data: Any) -> OptionsAttribute | TextAttribute:
    """Parse an attribute declaration like ``{"kind": "options", "options": [...]}``."""
    return _attribute_adapter.validate_python(data)


# Factory functions (shorthand for catalog code)


def options(*values: str) -> OptionsAttribute:
    """Create an options attribute.

    Examples:
        options("solid", "outline", "ghost", "link")
    """
    return OptionsAttribute(options=tuple(values))


def text(default_value: str = "") -> TextAttribute:
    """Create a free-text attribute."""
    return TextAttribute(default_value=default_value)
