"""Session - drives one host connection.

Sends the catalog once, then renders every inbound render command into
the display, one at a time and each to completion.
"""

from __future__ import annotations

import logging
from typing import Any

from uicomposer.composer import Composer
from uicomposer.display import Display
from uicomposer.nodes import Node
from uicomposer.protocol.channel import MessageChannel
from uicomposer.protocol.messages import SchemaMessage, parse_inbound

log = logging.getLogger(__name__)


class ComposerSession:
    def __init__(
        self,
        composer: Composer,
        channel: MessageChannel,
        display: Display | None = None,
    ):
        self.composer = composer
        self.channel = channel
        self.display = display or Display()
        self._handshake_sent = False

    async def handshake(self) -> None:
        """Send the catalog to the host (only the first call sends)."""
        if self._handshake_sent:
            return
        message = SchemaMessage(payload=self.composer.serialize_catalog())
        await self.channel.send(message.to_wire())
        self._handshake_sent = True
        log.info(
            f"Sent catalog with {len(message.payload.components)} component types"
        )

    def handle(self, data: Any) -> bool:
        """Handle one inbound message.

        Returns:
            True if the message triggered a render, False if it was ignored
        """
        message = parse_inbound(data)
        if message is None:
            return False

        node: Node | None = self.composer.render(message.payload)
        self.display.update(node)
        log.info(f"Rendered '{message.payload.type}'")
        return True

    async def run(self) -> None:
        """Handshake, then process inbound messages until the channel ends."""
        await self.handshake()
        async for data in self.channel.messages():
            self.handle(data)
        log.info("Host channel closed")
