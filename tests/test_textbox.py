from repovis.textbox import TextBox


def width10(text):
    return 10.0 * len(text)


def make_box(font_size=12, width=800.0, height=600.0):
    return TextBox(width10, font_size, width, height)


def test_set_text_single_string():
    box = make_box()
    box.set_text("hello")
    assert box.content == ["hello"]
    assert box.rect_width == int(width10("hello")) + 6
    assert box.rect_height == 2 + box.font_size + 4


def test_set_text_lines_width_is_widest():
    box = make_box()
    box.set_text(["a", "longest line", "mid"])
    assert box.content == ["a", "longest line", "mid"]
    assert box.rect_width == int(width10("longest line")) + 6
    assert box.rect_height == 2 + 3 * (box.font_size + 4)


def test_set_text_replaces_previous_content():
    box = make_box()
    box.set_text(["one", "two"])
    box.set_text("three")
    assert box.content == ["three"]


def test_add_line_truncates_long_lines():
    box = make_box()
    box.max_width_chars = 5
    box.clear()
    box.add_line("abcdefghij")
    assert box.content == ["abcde"]


def test_clear_resets_size():
    box = make_box()
    box.set_text("something")
    box.clear()
    assert box.content == []
    assert box.rect_width == 0
    assert box.rect_height == 2


def test_set_pos_without_adjust():
    box = make_box()
    box.set_text("x")
    box.set_pos(790.0, 5.0)
    assert box.corner == (790.0, 5.0)


def test_set_pos_adjust_places_above_point():
    box = make_box()
    box.set_text("hi")
    box.set_pos(100.0, 300.0, True)
    assert box.corner == (100.0, 300.0 - box.rect_height)


def test_set_pos_adjust_flips_left_at_right_edge():
    box = make_box()
    box.set_text("hello world")
    box.set_pos(790.0, 300.0, True)
    assert box.corner[0] == 790.0 - box.rect_width
    assert box.corner[0] + box.rect_width <= box.display_width


def test_set_pos_adjust_pins_to_right_when_no_room():
    box = make_box(width=100.0)
    box.set_text("hello world")
    box.set_pos(60.0, 300.0, True)
    assert box.corner[0] == box.display_width - box.rect_width


def test_set_pos_adjust_moves_below_when_off_top():
    box = make_box()
    box.set_text("hi")
    box.set_pos(100.0, 5.0, True)
    assert box.corner[1] >= 0
    assert box.corner[1] == 5.0 + box.font_size + 4


def test_line_positions_hidden_is_empty():
    box = make_box()
    box.set_text(["a", "b"])
    assert list(box.line_positions()) == []


def test_line_positions_visible():
    box = make_box()
    box.set_text(["a", "b", "c"])
    box.set_pos(10.0, 20.0)
    box.show()
    positions = list(box.line_positions())
    assert [line for _, _, line in positions] == ["a", "b", "c"]
    assert all(x == 12 for x, _, _ in positions)
    assert positions[0][1] == 23
    ys = [y for _, y, _ in positions]
    assert all(b - a == box.font_size + 4 for a, b in zip(ys, ys[1:]))
    box.hide()
    assert list(box.line_positions()) == []