"""ComponentType - one renderable kind in the catalog.

Like a React component declaration: which props it takes (attributes),
which child lists it accepts (slots), and what actually draws it (the
render primitive).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from uicomposer.attributes import AttributeType
from uicomposer.nodes import Node
from uicomposer.schema import ComponentSchema
from uicomposer.toolkit import RenderPrimitive


@dataclass
class ComponentType:
    """A component type with chained configuration.

    Usage:
        ComponentType(Button)
            .with_attribute("variant", options("solid", "outline"))
            .with_slot("leftIcon")
            .with_slot()
    """

    primitive: RenderPrimitive
    attributes: dict[str, AttributeType] = field(default_factory=dict)
    slot_names: list[str] = field(default_factory=list)

    def with_attribute(self, name: str, attribute_type: AttributeType) -> ComponentType:
        """Declare (or replace) an attribute."""
        self.attributes[name] = attribute_type
        return self

    def with_slot(self, name: str = "children") -> ComponentType:
        """Append a slot. Duplicates are kept."""
        self.slot_names.append(name)
        return self

    def serialize(self) -> ComponentSchema:
        return ComponentSchema(
            attributes={
                name: attribute.serialize()
                for name, attribute in self.attributes.items()
            },
            slot_names=list(self.slot_names),
        )

    def render(self, props: dict[str, Any], key: str) -> Node:
        """Hand the assembled props to the primitive.

        The returned node is tagged with this type's slot names unless the
        primitive already set them.
        """
        node = self.primitive(props, key)
        if self.slot_names and not node.slots:
            node = node.model_copy(update={"slots": list(self.slot_names)})
        return node
