"""Wire schemas exchanged with the host.

The catalog (ComponentComposerSchema) goes out once; component descriptions
come in on every render command.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Catalog shapes - outbound
# =============================================================================


class OptionsAttributeSchema(BaseModel):
    """An attribute restricted to a list of choices (order matters)."""

    kind: Literal["options"] = "options"
    options: list[str] = Field(default_factory=list)


class TextAttributeSchema(BaseModel):
    """A free-text attribute."""

    kind: Literal["text"] = "text"


AttributeSchema = Annotated[
    Union[OptionsAttributeSchema, TextAttributeSchema],
    Field(discriminator="kind"),
]


class ComponentSchema(BaseModel):
    """Serialized shape of one component type."""

    model_config = ConfigDict(populate_by_name=True)

    attributes: dict[str, AttributeSchema] = Field(default_factory=dict)
    slot_names: list[str] = Field(default_factory=list, alias="slotNames")


class ComponentComposerSchema(BaseModel):
    """The full catalog sent to the host."""

    components: dict[str, ComponentSchema] = Field(default_factory=dict)

    def to_wire(self) -> dict[str, Any]:
        """JSON-ready dict using the host's field names (slotNames)."""
        return self.model_dump(by_alias=True)


# =============================================================================
# Component descriptions - inbound
# =============================================================================


class ComponentDescription(BaseModel):
    """One node of a host-supplied UI tree.

    Attribute values are nominally strings but are carried as-is; attribute
    types decide what to do with them.
    """

    type: str
    attributes: dict[str, Any] = Field(default_factory=dict)
    slots: dict[str, list[ComponentDescription]] = Field(default_factory=dict)
