import pytest

from repovis.key import FileKey, FileKeyEntry, entry_sort_key


def width10(text):
    return 10.0 * len(text)


def make_entry(ext="py", count=0):
    entry = FileKeyEntry(ext, (0.2, 0.4, 0.6), width10, 12.0, 1.0)
    entry.count = count
    return entry


def test_short_extension_not_truncated():
    entry = make_entry("py")
    assert entry.display_ext == "py"
    assert entry.ext == "py"


def test_long_extension_truncated_with_ellipsis():
    entry = make_entry("averyveryverylongextension")
    assert entry.display_ext.endswith("...")
    stem = entry.display_ext[:-3]
    assert "averyveryverylongextension".startswith(stem)
    assert width10(stem) <= entry.width - 15.0
    assert width10(stem + "x") > entry.width - 15.0


def test_new_entry_is_finished_until_counted():
    entry = make_entry()
    assert entry.is_finished()
    entry.inc()
    assert not entry.is_finished()
    entry.dec()
    assert entry.is_finished()


def test_colourize_empty_extension_is_white():
    entry = make_entry("")
    entry.colourize(lambda ext: (0.0, 0.0, 0.0))
    assert entry.colour == (1.0, 1.0, 1.0)


def test_colourize_uses_hash():
    entry = make_entry("cpp")
    entry.colourize(lambda ext: (0.1, 0.2, 0.3) if ext == "cpp" else (0.0, 0.0, 0.0))
    assert entry.colour == (0.1, 0.2, 0.3)


def test_entry_fades_in_and_out():
    entry = make_entry(count=1)
    entry.logic(0.5)
    assert entry.alpha == pytest.approx(0.5)
    entry.logic(5.0)
    assert entry.alpha == 1.0
    entry.set_show(False)
    entry.logic(0.25)
    assert entry.alpha == pytest.approx(0.75)
    entry.logic(5.0)
    assert entry.alpha == 0.0


def test_entry_jumps_to_first_destination_then_slides():
    entry = make_entry(count=1)
    entry.set_dest_y(10.0)
    entry.logic(0.1)
    assert entry.pos_y == 10.0

    entry.set_dest_y(30.0)
    entry.logic(0.5)
    assert 10.0 < entry.pos_y < 30.0
    entry.logic(0.5)
    assert entry.pos_y == 30.0
    assert entry.pos == (entry.alpha * entry.left_margin, 30.0)


def test_entry_sort_key_orders_by_count_then_name():
    entries = [make_entry("b", 2), make_entry("a", 2), make_entry("z", 5), make_entry("c", 1)]
    ordered = sorted(entries, key=entry_sort_key)
    assert [e.ext for e in ordered] == ["z", "a", "b", "c"]


def make_key(display_height=768.0):
    return FileKey(1.0, width10, 12.0, 1.0, display_height)


def test_file_key_counts_and_orders():
    key = make_key()
    key.inc("py", (1.0, 0.0, 0.0))
    key.inc("py", (1.0, 0.0, 0.0))
    key.inc("c", (0.0, 1.0, 0.0))
    key.logic(1.0)
    assert [e.ext for e in key.active_keys] == ["py", "c"]
    assert key.active_keys[0].count == 2
    offset = key.font_size + 6.0
    assert key.active_keys[0].pos_y == offset
    assert key.active_keys[1].pos_y == 2 * offset


def test_file_key_dec_unknown_is_ignored():
    key = make_key()
    key.dec("nothing")
    assert key.entries == {}


def test_file_key_limits_visible_entries_to_screen():
    key = make_key(display_height=150.0)
    for ext in ("a", "b", "c"):
        key.inc(ext, (1.0, 1.0, 1.0))
    key.logic(1.0)
    assert key.active_keys == []
    assert set(key.entries) == {"a", "b", "c"}


def test_file_key_clear_zeroes_active_counts():
    key = make_key()
    key.inc("py", (1.0, 0.0, 0.0))
    key.logic(1.0)
    key.clear()
    assert key.interval_remaining == 0.0
    assert all(e.count == 0 for e in key.active_keys)


def test_file_key_hide_fades_entries():
    key = make_key()
    key.inc("py", (1.0, 0.0, 0.0))
    key.logic(1.0)
    key.logic(1.0)
    assert key.active_keys[0].alpha == 1.0
    key.set_show(False)
    key.logic(1.0)
    assert key.active_keys[0].alpha == 0.0
    assert not key.active_keys[0].show


def test_file_key_colourize_active():
    key = make_key()
    key.inc("py", (1.0, 0.0, 0.0))
    key.logic(1.0)
    key.colourize(lambda ext: (0.5, 0.5, 0.5))
    assert key.entries["py"].colour == (0.5, 0.5, 0.5)