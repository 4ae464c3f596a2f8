"""Settings parsing for uicomposer.yaml"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from uicomposer.composer import DEFAULT_MAX_DEPTH, MAX_SUPPORTED_DEPTH
from uicomposer.exceptions import CatalogError

SETTINGS_FILENAME = "uicomposer.yaml"


class ComposerSettings(BaseModel):
    """Engine settings.

    - max_depth: deepest description nesting that still renders (at most
      MAX_SUPPORTED_DEPTH)
    - catalog: catalog YAML to load (built-in default catalog when unset)
    - loading_text: what the display shows before the first render
    """

    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=1, le=MAX_SUPPORTED_DEPTH)
    catalog: Path | None = None
    loading_text: str = "Loading..."

    @classmethod
    def load(cls, path: Path) -> ComposerSettings:
        """Load settings from YAML. A missing file gives the defaults.

        A relative ``catalog`` path is resolved against the settings file.
        """
        if not path.exists():
            return cls()

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
            settings = cls.model_validate(data)
        except (yaml.YAMLError, ValidationError) as e:
            raise CatalogError(f"Invalid settings file {path}: {e}") from e

        if settings.catalog is not None and not settings.catalog.is_absolute():
            settings.catalog = path.parent / settings.catalog
        return settings


def find_settings_file(start: Path | None = None) -> Path | None:
    """Find uicomposer.yaml in the start directory or its parents."""
    cwd = start or Path.cwd()
    for parent in [cwd] + list(cwd.parents):
        candidate = parent / SETTINGS_FILENAME
        if candidate.exists():
            return candidate
    return None
