from __future__ import annotations

import pytest

from canvas_editor.protocol import (
    Clear,
    KeyDown,
    LineFramer,
    MouseDown,
    ProtocolError,
    Rect,
    Resize,
    Text,
    decode_event,
    encode_command,
    encode_commands,
)


def test_encode_clear() -> None:
    assert encode_command(Clear()) == "clear"


def test_encode_rect() -> None:
    assert encode_command(Rect(1, 2, 30, 40, "#ffffff")) == "rect,1,2,30,40,#ffffff"


def test_encode_text_strips_commas() -> None:
    command = Text(10, 20, "#000000", "hello, world,")

    assert encode_command(command) == "text,10,20,#000000,hello world"


def test_encode_commands_terminates_each_record() -> None:
    payload = encode_commands([Clear(), Text(0, 0, "#000000", "a")])

    assert payload == b"clear\ntext,0,0,#000000,a\n"


def test_encode_rejects_unknown_objects() -> None:
    with pytest.raises(ProtocolError):
        encode_command("clear")  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("record", "expected"),
    [
        ("keydown,a", KeyDown("a")),
        ("keydown,BackSpace", KeyDown("BackSpace")),
        ("keydown,,", KeyDown(",")),
        ("resize", Resize()),
        ("resize,800,600", Resize()),
        ("mousedown,34,58", MouseDown(34, 58)),
    ],
)
def test_decode_known_events(record: str, expected: object) -> None:
    assert decode_event(record) == expected


@pytest.mark.parametrize(
    "record",
    [
        "keyup,a",
        "keydown",
        "mousedown,12",
        "mousedown,x,5",
        "mousedown,1.5,2",
        "",
        "garbage",
    ],
)
def test_decode_ignores_unknown_or_malformed(record: str) -> None:
    assert decode_event(record) is None


def test_framer_splits_multiple_records() -> None:
    framer = LineFramer()

    assert framer.feed(b"keydown,a\nkeydown,b\nresize\n") == [
        "keydown,a",
        "keydown,b",
        "resize",
    ]
    assert framer.pending == b""


def test_framer_buffers_partial_records() -> None:
    framer = LineFramer()

    assert framer.feed(b"keydown,a\nmouse") == ["keydown,a"]
    assert framer.feed(b"down,3") == []
    assert framer.feed(b"4,58\n") == ["mousedown,34,58"]


def test_framer_discards_empty_records_and_carriage_returns() -> None:
    framer = LineFramer()

    assert framer.feed(b"\n\nresize\r\n\n") == ["resize"]


def test_framer_reset_drops_pending_data() -> None:
    framer = LineFramer()
    framer.feed(b"keydown,")

    framer.reset()

    assert framer.feed(b"a\n") == ["a"]


def test_framer_drops_oversized_partial_record() -> None:
    framer = LineFramer(max_pending=8)

    assert framer.feed(b"keydown,a\n" + b"x" * 20) == ["keydown,a"]
    assert framer.pending == b""
    assert framer.feed(b"yyyy") == []
    assert framer.feed(b"zz\nresize\nkeydown,") == ["resize"]
    assert framer.pending == b"keydown,"
    assert framer.feed(b"b\n") == ["keydown,b"]


def test_framer_keeps_partial_record_at_the_limit() -> None:
    framer = LineFramer(max_pending=8)

    assert framer.feed(b"keydown,") == []
    assert framer.feed(b"q\n") == ["keydown,q"]


def test_framer_rejects_non_positive_limit() -> None:
    with pytest.raises(ValueError):
        LineFramer(max_pending=0)
