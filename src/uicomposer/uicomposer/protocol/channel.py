"""Message channels between the composer and its host.

Implementations:
- MemoryChannel: in-process queues, for embedding and tests
- StreamChannel: newline-delimited JSON over an asyncio stream
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from abc import ABC, abstractmethod
from typing import Any, AsyncIterator, TextIO

log = logging.getLogger(__name__)

# Largest single message line accepted from the host
STREAM_LIMIT = 2**20


class MessageChannel(ABC):
    """Abstract base class for host channels.

    A channel sends JSON-ready dicts to the host and yields whatever the
    host posts back, undecoded beyond JSON.
    """

    @abstractmethod
    async def send(self, message: dict[str, Any]) -> None:
        """Send a message to the host."""
        pass

    @abstractmethod
    def messages(self) -> AsyncIterator[Any]:
        """Yield inbound messages until the host goes away."""
        pass


_CLOSED = object()


class MemoryChannel(MessageChannel):
    """Channel backed by an asyncio queue.

    The host side calls ``post()`` and ``close()`` and reads ``outbox``.
    """

    def __init__(self) -> None:
        self.inbox: asyncio.Queue[Any] = asyncio.Queue()
        self.outbox: list[dict[str, Any]] = []

    def post(self, message: Any) -> None:
        """Deliver a message from the host."""
        self.inbox.put_nowait(message)

    def close(self) -> None:
        """End the inbound stream once queued messages are consumed."""
        self.inbox.put_nowait(_CLOSED)

    async def send(self, message: dict[str, Any]) -> None:
        self.outbox.append(message)

    async def messages(self) -> AsyncIterator[Any]:
        while True:
            item = await self.inbox.get()
            if item is _CLOSED:
                return
            yield item


class StreamChannel(MessageChannel):
    """JSON-lines channel: one message per line in each direction.

    Lines that are not valid JSON, or that are longer than the reader's
    limit, are skipped and reading carries on with the next line.
    """

    def __init__(self, reader: asyncio.StreamReader, output: TextIO):
        self.reader = reader
        self.output = output

    async def send(self, message: dict[str, Any]) -> None:
        self.output.write(json.dumps(message) + "\n")
        self.output.flush()

    async def messages(self) -> AsyncIterator[Any]:
        while True:
            try:
                raw = await self.reader.readuntil(b"\n")
            except asyncio.IncompleteReadError as e:
                # EOF; a last line without a newline still counts
                raw = e.partial
                if not raw:
                    return
            except asyncio.LimitOverrunError as e:
                log.debug(f"Ignoring line over the stream limit ({e.consumed}+ bytes)")
                await self._skip_line(e.consumed)
                continue

            line = raw.decode("utf-8", errors="replace").strip()
            if not line:
                continue
            try:
                yield json.loads(line)
            except (json.JSONDecodeError, RecursionError) as e:
                log.debug(f"Ignoring undecodable line ({type(e).__name__}): {line[:80]!r}")

    async def _skip_line(self, consumed: int) -> None:
        """Discard the rest of an oversized line, up to and including its newline."""
        while True:
            try:
                await self.reader.readexactly(consumed)
                await self.reader.readuntil(b"\n")
                return
            except asyncio.LimitOverrunError as e:
                consumed = e.consumed
            except asyncio.IncompleteReadError:
                return


async def open_stdio_channel() -> StreamChannel:
    """Bind a StreamChannel to this process's stdin/stdout."""
    loop = asyncio.get_running_loop()
    reader = asyncio.StreamReader(limit=STREAM_LIMIT)
    protocol = asyncio.StreamReaderProtocol(reader)
    await loop.connect_read_pipe(lambda: protocol, sys.stdin)
    return StreamChannel(reader, sys.stdout)
