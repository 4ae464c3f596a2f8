"""uicomposer - declarative UI composition engine

Keeps a catalog of component types, publishes it to a host as JSON, and
renders host-sent component descriptions into node trees.
"""

from uicomposer.attributes import (
    AttributeType,
    OptionsAttribute,
    TextAttribute,
    options,
    parse_attribute,
    text,
)
from uicomposer.catalog import (
    CatalogConfig,
    ComponentConfig,
    build_composer,
    default_catalog,
    load_catalog,
    load_catalog_from_string,
)
from uicomposer.component import ComponentType
from uicomposer.composer import DEFAULT_MAX_DEPTH, MAX_SUPPORTED_DEPTH, Composer
from uicomposer.config import ComposerSettings, find_settings_file
from uicomposer.display import Display
from uicomposer.exceptions import (
    CatalogError,
    ComposerError,
    RegistryFrozenError,
    UnknownPrimitiveError,
)
from uicomposer.nodes import Node
from uicomposer.schema import (
    AttributeSchema,
    ComponentComposerSchema,
    ComponentDescription,
    ComponentSchema,
)

__all__ = [
    # Attributes
    "AttributeType",
    "OptionsAttribute",
    "TextAttribute",
    "options",
    "text",
    "parse_attribute",
    # Registry
    "ComponentType",
    "Composer",
    "DEFAULT_MAX_DEPTH",
    "MAX_SUPPORTED_DEPTH",
    "Node",
    # Catalog and settings
    "CatalogConfig",
    "ComponentConfig",
    "build_composer",
    "default_catalog",
    "load_catalog",
    "load_catalog_from_string",
    "ComposerSettings",
    "find_settings_file",
    "Display",
    # Schemas
    "AttributeSchema",
    "ComponentComposerSchema",
    "ComponentDescription",
    "ComponentSchema",
    # Errors
    "CatalogError",
    "ComposerError",
    "RegistryFrozenError",
    "UnknownPrimitiveError",
]
