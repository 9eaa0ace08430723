"""Tests for cursor movement and scrolling on the editor state."""

from hxpy.core.editor import Direction, Mode, Severity


def test_move_right_wraps_to_next_row(make_state):
    state = make_state(bytes(40))
    state.cursor.x = 16

    state.move_cursor(Direction.RIGHT)

    assert (state.cursor.x, state.cursor.y) == (1, 2)
    assert state.offset_at_cursor() == 16


def test_move_left_wraps_to_previous_row(make_state):
    state = make_state(bytes(40))
    state.cursor.y = 2

    state.move_cursor(Direction.LEFT)

    assert (state.cursor.x, state.cursor.y) == (16, 1)


def test_move_left_at_start_of_file_stays(make_state):
    state = make_state(bytes(40))

    state.move_cursor(Direction.LEFT)
    state.move_cursor(Direction.UP)

    assert (state.cursor.x, state.cursor.y) == (1, 1)


def test_move_by_group(make_state):
    state = make_state(bytes(40))

    state.move_cursor(Direction.RIGHT, 4)
    assert state.offset_at_cursor() == 4

    state.move_cursor(Direction.RIGHT, 14)
    assert (state.cursor.x, state.cursor.y) == (3, 2)


def test_move_down_past_end_clamps_to_last_byte(make_state):
    state = make_state(bytes(20))
    state.cursor.x = 10

    state.move_cursor(Direction.DOWN)

    assert (state.cursor.x, state.cursor.y) == (4, 2)
    assert state.offset_at_cursor() == 19


def test_move_down_past_screen_scrolls(make_state):
    state = make_state(bytes(1000))
    state.cursor.y = 23

    state.move_cursor(Direction.DOWN)

    assert state.viewport.line == 1
    assert state.cursor.y == 23
    assert state.offset_at_cursor() == 23 * 16


def test_move_up_from_top_row_scrolls_back(make_state):
    state = make_state(bytes(1000))
    state.viewport.line = 5

    state.move_cursor(Direction.UP)

    assert state.viewport.line == 4
    assert state.cursor.y == 1


def test_line_end_on_partial_row(make_state):
    state = make_state(bytes(20))
    state.cursor.y = 2

    state.move_to_line_end()

    assert (state.cursor.x, state.cursor.y) == (4, 2)

    state.move_to_line_start()
    assert state.cursor.x == 1


def test_goto_end_and_start(make_state):
    state = make_state(bytes(1000))

    state.goto_end()

    assert state.viewport.line == 40
    assert (state.cursor.x, state.cursor.y) == (8, 23)
    assert state.offset_at_cursor() == 999

    state.goto_start()

    assert state.viewport.line == 0
    assert (state.cursor.x, state.cursor.y) == (1, 1)


def test_goto_offset_scrolls_into_view(make_state):
    state = make_state(bytes(1000))

    state.goto_offset(500)

    assert state.offset_at_cursor() == 500
    assert 1 <= state.cursor.y <= state.viewport.visible_rows

    state.goto_offset(3)
    assert state.viewport.line == 0
    assert (state.cursor.x, state.cursor.y) == (4, 1)


def test_scroll_pulls_cursor_back_onto_content(make_state):
    state = make_state(bytes(1000))
    state.cursor.x = 16
    state.cursor.y = 23

    state.scroll(100)

    assert state.viewport.line == 40
    assert state.offset_at_cursor() == 999
    assert (state.cursor.x, state.cursor.y) == (8, 23)


def test_growing_screen_reclamps_line(make_state):
    state = make_state(bytes(1000))
    state.goto_end()

    state.resize(80, 80)

    assert state.viewport.line == 0
    assert state.offset_at_cursor() == 999
    assert (state.cursor.x, state.cursor.y) == (8, 63)


def test_shrinking_screen_keeps_cursor_visible(make_state):
    state = make_state(bytes(1000), rows=80)
    state.goto_end()
    assert state.viewport.line == 0

    state.resize(24, 80)

    assert state.viewport.line == 40
    assert state.offset_at_cursor() == 999
    assert (state.cursor.x, state.cursor.y) == (8, 23)


def test_set_mode_sets_status(make_state):
    state = make_state(b"\x00")

    state.set_mode(Mode.REPLACE)

    assert state.mode is Mode.REPLACE
    assert state.status.message == "-- REPLACE --"
    assert state.status.severity is Severity.INFO
