"""Catalog declarations - build a Composer from configuration in one step.

A catalog file lists component types by name:

    components:
      Button:
        primitive: Button
        attributes:
          variant: {kind: options, options: [solid, outline, ghost, link]}
        slots: [leftIcon, children, rightIcon]

Primitives are resolved by name against the built-in toolkit.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from uicomposer.attributes import AttributeType
from uicomposer.component import ComponentType
from uicomposer.composer import DEFAULT_MAX_DEPTH, Composer
from uicomposer.exceptions import CatalogError
from uicomposer.toolkit import get_primitive

log = logging.getLogger(__name__)


class ComponentConfig(BaseModel):
    """Declaration of one component type."""

    primitive: str = Field(description="Toolkit primitive name (e.g., 'Button')")
    attributes: dict[str, AttributeType] = Field(default_factory=dict)
    slots: list[str] = Field(default_factory=list)


class CatalogConfig(BaseModel):
    """A whole catalog: type name -> declaration."""

    components: dict[str, ComponentConfig] = Field(default_factory=dict)


def build_component_type(config: ComponentConfig) -> ComponentType:
    """Turn a declaration into a ComponentType.

    Raises:
        UnknownPrimitiveError: If the primitive is not in the toolkit
    """
    component_type = ComponentType(get_primitive(config.primitive))
    for name, attribute_type in config.attributes.items():
        component_type.with_attribute(name, attribute_type)
    for slot_name in config.slots:
        component_type.with_slot(slot_name)
    return component_type


def build_composer(
    catalog: CatalogConfig, max_depth: int = DEFAULT_MAX_DEPTH
) -> Composer:
    """Build a frozen Composer from a catalog."""
    composer = Composer.from_types(
        {
            name: build_component_type(config)
            for name, config in catalog.components.items()
        },
        max_depth=max_depth,
    )
    log.info(f"Loaded {len(composer.component_types)} component types")
    return composer


def load_catalog_from_string(content: str) -> CatalogConfig:
    """Load a catalog from a YAML string."""
    try:
        data = yaml.safe_load(content) or {}
        return CatalogConfig.model_validate(data)
    except (yaml.YAMLError, ValidationError) as e:
        raise CatalogError(f"Invalid catalog: {e}") from e


def load_catalog(path: str | Path) -> CatalogConfig:
    """Load a catalog from a YAML file."""
    p = Path(path)
    if not p.exists():
        raise CatalogError(f"Catalog file not found: {p}")
    return load_catalog_from_string(p.read_text())


def get_bundled_catalogs_dir() -> Path:
    """Get the path to bundled catalogs."""
    return Path(__file__).parent / "catalogs"


def default_catalog() -> CatalogConfig:
    """The bundled catalog: UserInterface, Text, Button, Stack."""
    return load_catalog(get_bundled_catalogs_dir() / "default.yaml")
