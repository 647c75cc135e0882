from __future__ import annotations

from typing import List, Optional

from char_editor.adapters.textual import TextualEditorAdapter, TextualUIHooks
from char_editor.buffer import BufferView
from char_editor.editor import Session
from char_editor.runtime import EditorSettings


def make_adapter(
    views: List[Optional[BufferView]],
    statuses: Optional[List[str]] = None,
    events: Optional[List[str]] = None,
    logs: Optional[List[str]] = None,
) -> TextualEditorAdapter:
    hooks = TextualUIHooks(
        update_buffer=views.append,
        update_status=(statuses.append if statuses is not None else lambda _: None),
        handle_event=(
            (lambda name, _payload: events.append(name))
            if events is not None
            else (lambda _name, _payload: None)
        ),
        log=(logs.append if logs is not None else lambda _: None),
    )
    return TextualEditorAdapter(Session(settings=EditorSettings()), hooks)


def test_adapter_renders_nothing_before_session() -> None:
    views: List[Optional[BufferView]] = []

    make_adapter(views)

    assert views == [None]


def test_adapter_updates_buffer_and_status() -> None:
    views: List[Optional[BufferView]] = []
    statuses: List[str] = []
    adapter = make_adapter(views, statuses)

    adapter.submit_command("new")
    adapter.submit_command("write hi")

    latest = views[-1]
    assert latest is not None
    assert latest.text == "hi"
    assert latest.current == "i"
    assert statuses == ["File has been created", "Sentence written"]


def test_adapter_relays_bus_events() -> None:
    views: List[Optional[BufferView]] = []
    events: List[str] = []
    adapter = make_adapter(views, events=events)

    adapter.submit_command("new")
    adapter.submit_command("write a")
    adapter.submit_command("undo")

    assert events == ["session.created", "buffer.changed", "buffer.changed"]


def test_adapter_surfaces_errors_and_exit() -> None:
    views: List[Optional[BufferView]] = []
    statuses: List[str] = []
    adapter = make_adapter(views, statuses)

    result = adapter.submit_command("undo")
    assert result.ok is False
    assert statuses[-1].startswith("error: No editor has been created")

    adapter.submit_command("exit")
    assert adapter.exit_requested is True


def test_adapter_emits_log_lines() -> None:
    views: List[Optional[BufferView]] = []
    logs: List[str] = []
    adapter = make_adapter(views, logs=logs)

    adapter.submit_command("new")

    assert any(line.startswith("command ->") for line in logs)
    assert any("session='active'" in line for line in logs)
