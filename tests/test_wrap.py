from __future__ import annotations

from canvas_editor.buffer import AutoWrap, Buffer


def type_with_wrap(buffer: Buffer, wrap: AutoWrap, text: str) -> None:
    for char in text:
        buffer.insert_char(char)
        wrap.apply(buffer)


def test_wrap_moves_trailing_word() -> None:
    buffer = Buffer()
    wrap = AutoWrap(max_line_width=10)

    type_with_wrap(buffer, wrap, "hello worl")
    type_with_wrap(buffer, wrap, "d")

    assert buffer.lines == ("hello", "world")
    assert buffer.cursor == (1, 5)


def test_short_line_is_untouched() -> None:
    buffer = Buffer.from_text("short", cursor=(0, 5))

    assert AutoWrap(max_line_width=10).apply(buffer) is False
    assert buffer.lines == ("short",)


def test_line_without_interior_space_stays_over_length() -> None:
    buffer = Buffer()
    wrap = AutoWrap(max_line_width=5)

    type_with_wrap(buffer, wrap, "abcdefghij")

    assert buffer.lines == ("abcdefghij",)
    assert buffer.cursor == (0, 10)


def test_leading_space_is_not_a_split_point() -> None:
    buffer = Buffer.from_text(" abcdefghij", cursor=(0, 11))

    assert AutoWrap(max_line_width=5).apply(buffer) is False


def test_wrap_inserts_before_following_lines() -> None:
    buffer = Buffer.from_text("aaa bbb\nnext", cursor=(0, 7))

    assert AutoWrap(max_line_width=7).apply(buffer) is True

    assert buffer.lines == ("aaa", "bbb", "next")
    assert buffer.cursor == (1, 3)


def test_trailing_space_wraps_to_empty_line() -> None:
    buffer = Buffer()
    wrap = AutoWrap(max_line_width=6)

    type_with_wrap(buffer, wrap, "hello ")

    assert buffer.lines == ("hello", "")
    assert buffer.cursor == (1, 0)
