from __future__ import annotations

import asyncio
import socket
from typing import Sequence

import pytest

from canvas_editor.adapters.socket import CanvasClient, CanvasConnectionError
from canvas_editor.adapters.socket.app import main
from canvas_editor.config import EditorConfig


def free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


async def run_against_service(
    parts: Sequence[bytes],
    *,
    until: bytes,
    initial_render_delay: float = 30.0,
) -> tuple[CanvasClient, bytes]:
    """Serve ``parts`` to one client, collect its output until ``until`` shows up."""

    received = bytearray()

    async def handle(
        reader: asyncio.StreamReader, writer: asyncio.StreamWriter
    ) -> None:
        for part in parts:
            writer.write(part)
            await writer.drain()
            await asyncio.sleep(0.05)
        while until not in received:
            chunk = await reader.read(4096)
            if not chunk:
                break
            received.extend(chunk)
        writer.close()
        await writer.wait_closed()

    server = await asyncio.start_server(handle, "127.0.0.1", 0)
    port = server.sockets[0].getsockname()[1]
    config = EditorConfig(port=port, initial_render_delay=initial_render_delay)
    client = CanvasClient(config)
    try:
        await asyncio.wait_for(client.run(), timeout=5)
    finally:
        server.close()
        await server.wait_closed()
    return client, bytes(received)


def test_client_renders_typed_text() -> None:
    client, received = asyncio.run(
        run_against_service([b"keydown,h\n"], until=b"#000000,h\n")
    )

    assert client.session.buffer.lines == ("h",)
    assert received.startswith(b"clear\n")
    assert b"text,26,66,#000000,h\n" in received
    assert not client.connected


def test_client_handles_records_split_across_writes() -> None:
    client, received = asyncio.run(
        run_against_service(
            [b"keydown,h\nkey", b"down,i\n"], until=b"#000000,hi\n"
        )
    )

    assert client.session.buffer.lines == ("hi",)
    assert b"text,26,66,#000000,hi\n" in received
    assert client.dispatcher.frames_sent == 2


def test_client_ignores_unknown_records() -> None:
    client, received = asyncio.run(
        run_against_service(
            [b"hello,there\nmousedown,x,y\nresize\n"], until=b"clear\n"
        )
    )

    assert client.session.buffer.lines == ("",)
    assert client.dispatcher.frames_sent == 1


def test_client_sends_initial_frame() -> None:
    client, received = asyncio.run(
        run_against_service([], until=b"clear\n", initial_render_delay=0.01)
    )

    assert received.startswith(b"clear\nrect,0,0,800,600,#ffffff\n")
    assert client.dispatcher.frames_sent >= 1


def test_connection_refused_raises() -> None:
    client = CanvasClient(EditorConfig(port=free_port()))

    with pytest.raises(CanvasConnectionError):
        asyncio.run(client.run())


def test_main_reports_connection_failure() -> None:
    assert main(["--port", str(free_port())]) == 1
