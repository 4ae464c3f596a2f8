"""uicomposer.protocol - message exchange with the host."""

from uicomposer.protocol.channel import (
    MemoryChannel,
    MessageChannel,
    StreamChannel,
    open_stdio_channel,
)
from uicomposer.protocol.messages import (
    SCHEMA_MESSAGE,
    UI_MESSAGE,
    SchemaMessage,
    UIMessage,
    parse_inbound,
)
from uicomposer.protocol.session import ComposerSession

__all__ = [
    "ComposerSession",
    "MemoryChannel",
    "MessageChannel",
    "StreamChannel",
    "open_stdio_channel",
    "SCHEMA_MESSAGE",
    "UI_MESSAGE",
    "SchemaMessage",
    "UIMessage",
    "parse_inbound",
]
