"""Composer - the component registry and the recursive renderer.

Rendering a ComponentDescription works like ReactDOM.render() over a JSON
tree:
1. Look up the description's type (unknown -> None)
2. Map declared attributes through their attribute types
3. Render each declared slot's children, depth-first, in order
4. Hand the props to the type's render primitive

Nothing on this path raises for bad input. Unknown types, undeclared
attributes and slots, and trees nested past ``max_depth`` all degrade to
"no node here" and are logged.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from uicomposer.component import ComponentType
from uicomposer.exceptions import RegistryFrozenError
from uicomposer.nodes import Node
from uicomposer.schema import ComponentComposerSchema, ComponentDescription

log = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 64

# Descriptions nested much past this fail validation before they reach render
MAX_SUPPORTED_DEPTH = 200


class Composer:
    """Registry of component types keyed by type name.

    Assemble it at startup, then ``freeze()`` it; after that it is read-only
    and every render is a pure function of the description.
    """

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH):
        self.component_types: dict[str, ComponentType] = {}
        self.max_depth = max_depth
        self._frozen = False

    @classmethod
    def from_types(
        cls,
        component_types: Mapping[str, ComponentType],
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> Composer:
        """Build a frozen composer from explicit type declarations in one step."""
        composer = cls(max_depth=max_depth)
        for name, component_type in component_types.items():
            composer.register_type(name, component_type)
        return composer.freeze()

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> Composer:
        self._frozen = True
        return self

    def register_type(self, name: str, component_type: ComponentType) -> Composer:
        """Register a component type. A repeated name replaces the earlier entry."""
        if self._frozen:
            raise RegistryFrozenError(name)
        if name in self.component_types:
            log.debug(f"Replacing component type: {name}")
        self.component_types[name] = component_type
        return self

    def serialize_catalog(self) -> ComponentComposerSchema:
        return ComponentComposerSchema(
            components={
                name: component_type.serialize()
                for name, component_type in self.component_types.items()
            }
        )

    def render(
        self,
        description: ComponentDescription | Mapping[str, Any],
        key: str = "none",
    ) -> Node | None:
        """Render a description tree into a Node tree.

        Args:
            description: Root description (model or plain mapping)
            key: Identity key for the root node

        Returns:
            The rendered node, or None if the root type is not registered

        Raises:
            ValidationError: If a plain mapping is not a component description
        """
        if not isinstance(description, ComponentDescription):
            description = ComponentDescription.model_validate(description)
        return self._render(description, key, 0)

    def _render(
        self, description: ComponentDescription, key: str, depth: int
    ) -> Node | None:
        component_type = self.component_types.get(description.type)
        if component_type is None:
            log.debug(f"Unknown component type '{description.type}', rendering nothing")
            return None

        if depth >= self.max_depth:
            log.warning(
                f"Dropping '{description.type}' at depth {depth}: "
                f"exceeds max depth {self.max_depth}"
            )
            return None

        props: dict[str, Any] = {}

        for name, value in description.attributes.items():
            attribute_type = component_type.attributes.get(name)
            if attribute_type is None:
                log.debug(f"Ignoring undeclared attribute '{name}' on '{description.type}'")
                continue
            props[name] = attribute_type.to_prop_value(value)

        for slot_name in description.slots.keys() - set(component_type.slot_names):
            log.debug(f"Ignoring undeclared slot '{slot_name}' on '{description.type}'")

        # Nulls stay in place so positions line up with the host's list
        for slot_name in component_type.slot_names:
            children = description.slots.get(slot_name)
            if children is None:
                continue
            props[slot_name] = [
                self._render(child, f"{slot_name}{index}", depth + 1)
                for index, child in enumerate(children)
            ]

        return component_type.render(props, key)
