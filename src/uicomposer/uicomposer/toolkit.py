"""Built-in render primitives.

A render primitive turns an assembled property bag (attribute values plus
slot lists of already-rendered children) into one Node. The engine never
looks inside a primitive; anything callable as ``primitive(props, key)``
works.

Built-in primitives:
- Fragment: groups its children, no output of its own
- Text: a text leaf (``text`` prop)
- Button: a button with leftIcon/children/rightIcon slots
- Stack: a layout container
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol

from uicomposer.exceptions import UnknownPrimitiveError
from uicomposer.nodes import Node


class RenderPrimitive(Protocol):
    def __call__(self, props: dict[str, Any], key: str) -> Node: ...


@dataclass(frozen=True)
class Element:
    """Primitive that emits a Node of a fixed type.

    ``defaults`` fill in props the description did not set.
    """

    name: str
    defaults: dict[str, Any] = field(default_factory=dict)

    def __call__(self, props: dict[str, Any], key: str) -> Node:
        return Node(type=self.name, key=key, props={**self.defaults, **props})


Fragment = Element("Fragment")
Text = Element("Text", defaults={"text": ""})
Button = Element("Button")
Stack = Element("Stack")


# Primitive registry
_BUILTIN_PRIMITIVES: dict[str, RenderPrimitive] = {
    "Fragment": Fragment,
    "Text": Text,
    "Button": Button,
    "Stack": Stack,
}


def get_primitive(name: str) -> RenderPrimitive:
    """Get a built-in primitive by name (e.g., 'Button')."""
    if name in _BUILTIN_PRIMITIVES:
        return _BUILTIN_PRIMITIVES[name]
    raise UnknownPrimitiveError(name)


def list_builtin_primitives() -> list[str]:
    """List all built-in primitive names."""
    return list(_BUILTIN_PRIMITIVES.keys())
