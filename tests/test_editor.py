from __future__ import annotations

import io
from pathlib import Path
from typing import List

import pytest

from char_editor.buffer import (
    CharBuffer,
    EmptyHistory,
    History,
    InvalidCharacter,
    IoError,
    NothingToDelete,
)
from char_editor.editor import Editor, EditorBus, EditorChange
from char_editor.runtime import EditorSettings, RedoPolicy


def make_editor(**settings) -> Editor:
    return Editor(settings=EditorSettings(**settings))


def test_editor_keeps_injected_empty_collaborators() -> None:
    buffer = CharBuffer(name="mine")
    history = History()
    bus = EditorBus()

    editor = Editor(settings=EditorSettings(), buffer=buffer, history=history, bus=bus)
    editor.insert_char("q")

    assert editor.buffer is buffer
    assert editor.history is history
    assert editor.bus is bus
    assert buffer.render() == "q"
    assert history.undo_depth == 1


def test_insert_insert_undo_redo_scenario() -> None:
    editor = make_editor()
    editor.insert_char("x")
    editor.insert_char("y")
    assert editor.render() == "xy"

    editor.undo()
    assert editor.render() == "x"

    editor.redo()
    assert editor.render() == "xy"


def test_write_preserves_order_and_cursor() -> None:
    editor = make_editor()

    editor.write("abc")

    assert editor.render() == "abc"
    assert editor.buffer.current == "c"
    assert editor.history.undo_depth == 3


def test_undo_after_insert_restores_prior_state() -> None:
    editor = make_editor()
    editor.write("ab")
    before = editor.snapshot()

    editor.insert_char("c")
    editor.undo()

    after = editor.snapshot()
    assert after.text == before.text
    assert after.cursor_offset == before.cursor_offset
    assert after.current == "b"


def test_fresh_editor_has_no_history() -> None:
    editor = make_editor()

    with pytest.raises(EmptyHistory, match="Nothing to undo"):
        editor.undo()
    with pytest.raises(EmptyHistory, match="Nothing to redo"):
        editor.redo()


def test_delete_char_records_removed_character() -> None:
    editor = make_editor()
    editor.write("abc")

    assert editor.delete_char() == "c"

    assert editor.render() == "ab"
    assert editor.history.peek_undo() == "c"


def test_undo_of_delete_is_another_delete() -> None:
    editor = make_editor()
    editor.write("abc")
    editor.delete_char()

    editor.undo()
    assert editor.render() == "a"

    editor.redo()
    assert editor.render() == "ac"


def test_delete_char_on_empty_buffer() -> None:
    editor = make_editor()

    with pytest.raises(NothingToDelete):
        editor.delete_char()

    assert len(editor.buffer) == 0
    assert editor.history.undo_depth == 0


def test_clear_keeps_history() -> None:
    editor = make_editor()
    editor.write("ab")

    editor.clear()

    assert editor.render() is None
    assert editor.history.undo_depth == 2
    with pytest.raises(NothingToDelete):
        editor.undo()
    assert editor.history.undo_depth == 1
    assert editor.history.redo_depth == 1

    editor.redo()
    assert editor.render() == "b"


def test_invalid_character_is_not_recorded() -> None:
    editor = make_editor()

    with pytest.raises(InvalidCharacter):
        editor.insert_char("no")

    assert editor.history.undo_depth == 0


def test_clear_redo_policy_applies_to_editor_edits() -> None:
    editor = make_editor(redo_policy=RedoPolicy.CLEAR)
    editor.write("ab")
    editor.undo()

    editor.insert_char("z")

    assert not editor.history.can_redo()


def test_open_loads_file_verbatim_and_records_history(tmp_path: Path) -> None:
    source = tmp_path / "notes.txt"
    source.write_bytes(b"line one\r\nline two\n")
    editor = make_editor()
    editor.write("stale")

    count = editor.open(source)

    assert count == 19
    assert editor.render() == "line one\r\nline two\n"
    assert editor.buffer.current == "\n"
    assert editor.history.undo_depth == 5 + 19


def test_open_without_recording(tmp_path: Path) -> None:
    source = tmp_path / "quiet.txt"
    source.write_text("abc")
    editor = make_editor()

    editor.open(source, record_history=False)

    assert editor.render() == "abc"
    assert editor.history.undo_depth == 0


class LoadTrackingBuffer(CharBuffer):
    def __init__(self) -> None:
        super().__init__()
        self.loaded: List[str] = []

    def load(self, chars) -> int:
        text = "".join(chars)
        self.loaded.append(text)
        return super().load(text)


@pytest.mark.parametrize("record", [True, False])
def test_open_streams_through_buffer_load(tmp_path: Path, record: bool) -> None:
    source = tmp_path / "loaded.txt"
    source.write_text("xyz")
    buffer = LoadTrackingBuffer()
    editor = Editor(settings=EditorSettings(), buffer=buffer)
    editor.write("old")

    editor.open(source, record_history=record)

    assert buffer.loaded == ["xyz"]
    assert editor.render() == "xyz"
    assert buffer.current == "z"
    assert editor.history.undo_depth == (6 if record else 3)


def test_record_loads_setting_controls_default(tmp_path: Path) -> None:
    source = tmp_path / "quiet.txt"
    source.write_text("abc")
    editor = make_editor(record_loads=False)

    editor.open(source)

    assert editor.history.undo_depth == 0


def test_open_missing_file_raises_io_error_and_keeps_buffer(tmp_path: Path) -> None:
    editor = make_editor()
    editor.write("keep")
    missing = tmp_path / "missing.txt"

    with pytest.raises(IoError) as excinfo:
        editor.open(missing)

    assert excinfo.value.path == str(missing)
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)
    assert editor.render() == "keep"


def test_save_writes_rendered_content(tmp_path: Path) -> None:
    editor = make_editor()
    editor.write("hello")
    target = tmp_path / "out.txt"
    target.write_text("previous longer content")

    written = editor.save(target)

    assert written == 5
    assert target.read_bytes() == b"hello"


def test_save_empty_buffer_writes_empty_file(tmp_path: Path) -> None:
    target = tmp_path / "empty.txt"

    make_editor().save(target)

    assert target.read_bytes() == b""


def test_save_to_directory_raises_io_error(tmp_path: Path) -> None:
    editor = make_editor()
    editor.write("x")

    with pytest.raises(IoError):
        editor.save(tmp_path)


def test_save_unencodable_character_raises_io_error(tmp_path: Path) -> None:
    editor = make_editor()
    editor.insert_char("€")

    with pytest.raises(IoError) as excinfo:
        editor.save(tmp_path / "euro.txt")

    assert isinstance(excinfo.value.__cause__, UnicodeError)


def test_save_load_save_round_trip_is_byte_exact(tmp_path: Path) -> None:
    original = bytes(range(256)) + b"\r\n\r\rtrailing\n"
    first = tmp_path / "first.bin"
    first.write_bytes(original)
    editor = make_editor()
    editor.open(first)
    second = tmp_path / "second.bin"
    editor.save(second)

    reloaded = make_editor()
    reloaded.open(second)
    third = tmp_path / "third.bin"
    reloaded.save(third)

    assert second.read_bytes() == original
    assert third.read_bytes() == second.read_bytes()


def test_open_and_save_accept_text_streams() -> None:
    editor = make_editor()

    editor.open(io.StringIO("stream"))
    sink = io.StringIO()
    editor.save(sink)

    assert sink.getvalue() == "stream"


def test_bus_publishes_one_change_per_operation() -> None:
    editor = make_editor()
    changes: List[EditorChange] = []
    editor.bus.subscribe("buffer.changed", lambda payload: changes.append(payload))

    editor.write("hi")
    editor.undo()

    assert [change.label for change in changes] == ["write", "undo"]
    assert changes[0].view.text == "hi"
    assert changes[-1].view.text == "h"
    assert changes[-1].redo_depth == 1
