"""uicomposer exceptions

Raised for programmer and configuration mistakes only. Bad host input
(unknown types, stray attributes, malformed messages) never raises; it
renders to nothing or is ignored.
"""

from __future__ import annotations


class ComposerError(Exception):
    """Base exception for all uicomposer errors.

    ``exit_code`` is the process status a command line front end exits with.
    """

    exit_code = 1


class UnknownPrimitiveError(ComposerError):
    """Raised when a catalog names a render primitive the toolkit lacks."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown render primitive: {name}")


class RegistryFrozenError(ComposerError):
    """Raised when registering a type after the registry was frozen."""

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(
            f"Cannot register '{type_name}': component registry is frozen"
        )


class CatalogError(ComposerError):
    """Raised when a catalog or settings file cannot be loaded."""

    exit_code = 2
