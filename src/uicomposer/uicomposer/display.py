"""Display - the surface that shows the latest render result.

Starts out showing the loading text. Every render replaces what is shown
(last write wins), and the optional ``on_update`` hook is called with the
display after each replacement.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from jinja2 import Environment, FileSystemLoader, select_autoescape

from uicomposer.nodes import Node

log = logging.getLogger(__name__)


class Display:
    def __init__(
        self,
        loading_text: str = "Loading...",
        env: Environment | None = None,
        on_update: Callable[[Display], None] | None = None,
    ):
        self.content: Node | str | None = loading_text
        self.updates = 0
        self.on_update = on_update
        self._env = env

    def update(self, content: Node | None) -> None:
        """Replace the displayed output."""
        self.content = content
        self.updates += 1
        log.debug(f"Display updated ({self.updates}): {content!r}")
        if self.on_update is not None:
            self.on_update(self)

    @property
    def loading(self) -> bool:
        return self.updates == 0

    def to_html(self) -> str:
        """Render the current content as HTML markup."""
        template = self._get_env().get_template("display.html.j2")
        return template.render(content=self.content)

    def _get_env(self) -> Environment:
        """Get or create Jinja2 environment."""
        if self._env is not None:
            return self._env

        templates_dir = Path(__file__).parent / "templates"
        self._env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(default=True),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        return self._env
