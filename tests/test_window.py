"""Tests for frame composition."""

import pytest

from hxpy.core.editor import Severity
from hxpy.ui.window import (
    ASCII_HIGHLIGHT,
    CLEAR_TO_END,
    CURSOR_HOME,
    HIDE_CURSOR,
    SHOW_CURSOR,
    STATUS_STYLES,
    Renderer,
    hex_area_width,
    hex_column,
)

from .conftest import strip_ansi

SAMPLE = b"Hello, World!\x00\x01\x02abc"


def content_rows(state):
    parts = []
    Renderer().draw_contents(state, parts)
    return strip_ansi(''.join(parts)).split("\r\n")


def test_frame_structure(make_state):
    frame = Renderer().render(make_state(SAMPLE))

    assert frame.startswith(HIDE_CURSOR + CURSOR_HOME)
    assert frame.endswith(SHOW_CURSOR)


def test_full_row_layout(make_state):
    rows = content_rows(make_state(SAMPLE))

    assert rows[0] == "000000000: 48656c6c 6f2c2057 6f726c64 21000102  Hello, World!..."


def test_partial_row_is_padded(make_state):
    rows = content_rows(make_state(SAMPLE))

    expected_hex = " 616263".ljust(hex_area_width(16, 4))
    assert rows[1] == "000000010:" + expected_hex + "  abc"
    assert rows[0].index("Hello") == rows[1].index("abc")


@pytest.mark.parametrize("grouping", [2, 4, 8])
def test_cursor_column_matches_layout(make_state, grouping):
    data = bytes(range(16))
    rows = content_rows(make_state(data, grouping=grouping))

    for x in range(1, 17):
        col = hex_column(x, grouping) - 1
        assert rows[0][col:col + 2] == f"{data[x - 1]:02x}"


def test_cursor_placement(make_state):
    state = make_state(SAMPLE)
    state.cursor.x = 5

    frame = Renderer().render(state)

    assert frame.endswith(f"\x1b[1;{hex_column(5, 4)}H" + SHOW_CURSOR)
    assert hex_column(5, 4) == 21


def test_ascii_cursor_highlight(make_state):
    state = make_state(SAMPLE)
    state.cursor.x = 2

    frame = Renderer().render(state)

    assert ASCII_HIGHLIGHT + "e" in frame
    assert ASCII_HIGHLIGHT + "H" not in frame


def test_ruler(make_state):
    state = make_state(SAMPLE)

    frame = Renderer().render(state)

    ruler = "0x000000000,0 (48)  5%"
    assert f"\x1b[24;{80 - len(ruler)}H" + ruler in frame


def test_ruler_at_last_byte(make_state):
    state = make_state(SAMPLE)
    state.goto_end()

    frame = Renderer().render(state)

    assert "0x000000012,18 (63)  100%" in frame


def test_empty_buffer(make_state):
    state = make_state(b"")
    parts = []

    Renderer().draw_contents(state, parts)
    frame = Renderer().render(state)

    assert parts == [CLEAR_TO_END]
    assert "0x" not in frame


@pytest.mark.parametrize("severity", list(Severity))
def test_status_style(make_state, severity):
    state = make_state(SAMPLE)
    state.set_status(severity, "something happened")

    frame = Renderer().render(state)

    assert "\x1b[24;0H" + STATUS_STYLES[severity] + "something happened" in frame


def test_status_is_truncated_to_screen_width(make_state):
    state = make_state(SAMPLE, cols=20)
    state.set_status(Severity.INFO, "x" * 50)

    frame = Renderer().render(state)

    assert "x" * 20 in frame
    assert "x" * 21 not in frame


def test_window_is_limited_to_visible_rows(make_state):
    rows = content_rows(make_state(bytes(16 * 100), rows=5))

    labels = [row[:9] for row in rows if row.strip()]
    assert labels == ["000000000", "000000010", "000000020", "000000030"]


def test_window_starts_at_scrolled_line(make_state):
    state = make_state(bytes(16 * 100), rows=5)
    state.viewport.line = 10

    rows = content_rows(state)

    assert rows[0].startswith("0000000a0:")


def test_start_offset_clamped_to_last_row(make_state):
    state = make_state(SAMPLE)
    state.viewport.line = 5

    rows = content_rows(state)

    assert rows[0].startswith("000000010:")
