"""Rendered UI nodes."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class Node(BaseModel):
    """A concrete UI node produced by a render primitive.

    Slot props hold lists of ``Node | None`` in the order the host sent them.
    ``slots`` names which props are slots; it comes from the component type
    and is left out of ``to_dict()``.
    """

    type: str
    key: str = "none"
    props: dict[str, Any] = Field(default_factory=dict)
    slots: list[str] = Field(default_factory=list, exclude=True)

    @property
    def children(self) -> list[Node | None]:
        return self.props.get("children", [])

    @property
    def attribute_props(self) -> dict[str, Any]:
        """Props that are not slots."""
        return {name: value for name, value in self.props.items() if name not in self.slots}

    @property
    def slot_props(self) -> dict[str, list[Node | None]]:
        """Slot props that were filled, in slot declaration order."""
        return {name: self.props[name] for name in dict.fromkeys(self.slots) if name in self.props}

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()
