"""asyncio client that connects the dispatcher to the rendering service."""

from __future__ import annotations

import asyncio
import enum
from contextlib import suppress
from typing import List, Optional, Sequence, Union

from canvas_editor.config import EditorConfig
from canvas_editor.dispatch import DispatcherHooks, InputDispatcher
from canvas_editor.protocol import DrawCommand, encode_commands
from canvas_editor.runtime import telemetry
from canvas_editor.session import EditorSession


class CanvasConnectionError(ConnectionError):
    """Raised when the rendering service cannot be reached or drops the link."""


class Signal(enum.Enum):
    TICK = "tick"
    RENDER = "render"
    CLOSED = "closed"


MailboxItem = Union[bytes, Signal]


class CanvasClient:
    """Runs one editing session over a TCP connection.

    Socket reads and timer ticks are merged into a single mailbox; one
    consumer drains it, so only that coroutine ever touches the session.
    """

    def __init__(
        self,
        config: Optional[EditorConfig] = None,
        *,
        session: Optional[EditorSession] = None,
    ) -> None:
        self.config = config or EditorConfig()
        self.session = session or EditorSession.create(self.config)
        self.dispatcher = InputDispatcher(
            self.session,
            DispatcherHooks(send=self._send, log=self._log_line),
        )
        self._reader: asyncio.StreamReader | None = None
        self._writer: asyncio.StreamWriter | None = None
        self._mailbox: asyncio.Queue[MailboxItem] | None = None
        self._tasks: List[asyncio.Task[None]] = []
        self._transport_error: BaseException | None = None
        self.logger = telemetry.get_logger("session")

    @property
    def connected(self) -> bool:
        return self._writer is not None

    async def connect(self) -> None:
        if self._writer is not None:
            return
        host, port = self.config.host, self.config.port
        try:
            self._reader, self._writer = await asyncio.open_connection(host, port)
        except OSError as exc:
            telemetry.record_event(
                "session.connect_failed",
                level="error",
                host=host,
                port=port,
                error=str(exc),
            )
            raise CanvasConnectionError(
                f"Cannot reach rendering service at {host}:{port}: {exc}"
            ) from exc
        telemetry.record_event("session.connected", host=host, port=port)

    async def run(self) -> None:
        """Process events until the service closes the connection."""

        await self.connect()
        self._mailbox = asyncio.Queue()
        self._transport_error = None
        self._tasks = [
            asyncio.create_task(self._read_loop()),
            asyncio.create_task(self._tick_loop()),
            asyncio.create_task(self._initial_render()),
        ]
        try:
            await self._consume()
        finally:
            await self.close()

        if self._transport_error is not None:
            raise CanvasConnectionError(
                f"Connection to rendering service lost: {self._transport_error}"
            ) from self._transport_error

    async def close(self) -> None:
        for task in self._tasks:
            task.cancel()
        for task in self._tasks:
            with suppress(asyncio.CancelledError):
                await task
        self._tasks = []
        if self._writer is not None:
            writer, self._writer = self._writer, None
            writer.close()
            with suppress(Exception):
                await writer.wait_closed()
            telemetry.record_event(
                "session.disconnected",
                frames=self.dispatcher.frames_sent,
            )
        self._reader = None
        self._mailbox = None

    async def _consume(self) -> None:
        assert self._mailbox is not None
        while True:
            item = await self._mailbox.get()
            if item is Signal.CLOSED:
                return
            if item is Signal.TICK:
                self.dispatcher.tick()
            elif item is Signal.RENDER:
                self.dispatcher.render()
            elif isinstance(item, bytes):
                self.dispatcher.feed(item)
            await self._flush()

    async def _read_loop(self) -> None:
        assert self._reader is not None and self._mailbox is not None
        try:
            while True:
                chunk = await self._reader.read(self.config.read_size)
                if not chunk:
                    break
                self._mailbox.put_nowait(chunk)
        except (ConnectionError, OSError) as exc:
            self._transport_error = exc
            telemetry.record_event(
                "session.transport_error", level="error", error=str(exc)
            )
        finally:
            self._mailbox.put_nowait(Signal.CLOSED)

    async def _tick_loop(self) -> None:
        assert self._mailbox is not None
        while True:
            await asyncio.sleep(self.config.tick_interval)
            self._mailbox.put_nowait(Signal.TICK)

    async def _initial_render(self) -> None:
        assert self._mailbox is not None
        await asyncio.sleep(self.config.initial_render_delay)
        self._mailbox.put_nowait(Signal.RENDER)

    def _send(self, commands: Sequence[DrawCommand]) -> None:
        if self._writer is None:
            return
        self._writer.write(encode_commands(commands))

    async def _flush(self) -> None:
        if self._writer is None:
            return
        try:
            await self._writer.drain()
        except (ConnectionError, OSError) as exc:
            self._transport_error = exc
            assert self._mailbox is not None
            self._mailbox.put_nowait(Signal.CLOSED)

    def _log_line(self, line: str) -> None:
        self.logger.debug(line)


__all__ = ["CanvasClient", "CanvasConnectionError", "Signal"]
