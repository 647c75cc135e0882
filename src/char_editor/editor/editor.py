"""Editor façade combining a character buffer with its undo/redo history."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from char_editor.buffer import BufferView, CharBuffer, History, NothingToDelete
from char_editor.runtime import telemetry
from char_editor.runtime.settings import EditorSettings, load_settings

from .files import Sink, Source, read_chars, write_chars


@dataclass(slots=True)
class EditorChange:
    """Payload published on the bus after every mutating operation."""

    label: str
    view: BufferView
    undo_depth: int
    redo_depth: int


class EditorBus:
    """Minimal event bus letting shells follow editor changes."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


class Editor:
    def __init__(
        self,
        *,
        name: str = "default",
        settings: Optional[EditorSettings] = None,
        buffer: Optional[CharBuffer] = None,
        history: Optional[History] = None,
        bus: Optional[EditorBus] = None,
    ) -> None:
        self.name = name
        self.settings = settings if settings is not None else load_settings()
        self.buffer = buffer if buffer is not None else CharBuffer(name=name)
        if history is None:
            history = History(redo_policy=self.settings.redo_policy)
        self.history = history
        self.bus = bus if bus is not None else EditorBus()

    def insert_char(self, ch: str) -> None:
        self._insert(ch)
        telemetry.record_event(
            "editor.insert", level="debug", data={"char": ch, "buffer": self.name}
        )
        self._changed("insert")

    def delete_char(self) -> str:
        current = self.buffer.current
        if current is None:
            raise NothingToDelete()
        self.history.record_for_undo(current)
        removed = self.buffer.delete()
        telemetry.record_event(
            "editor.delete", level="debug", data={"char": removed, "buffer": self.name}
        )
        self._changed("delete")
        return removed

    def write(self, text: str) -> int:
        """Insert ``text`` one character at a time; each is its own undo step."""

        for ch in text:
            self._insert(ch)
        self._changed("write")
        return len(text)

    def open(self, source: Source, *, record_history: Optional[bool] = None) -> int:
        """Replace the buffer with the contents of ``source``.

        Loaded characters are recorded for undo unless ``record_history`` (or
        the ``record_loads`` setting) says otherwise.
        """

        record = self.settings.record_loads
        if record_history is not None:
            record = record_history
        with telemetry.span(
            "editor::open",
            component="editor",
            metadata={"buffer": self.name, "record_history": record},
        ) as handle:
            text = read_chars(source, encoding=self.settings.encoding)
            self.buffer.load(text)
            if record:
                for ch in text:
                    self.history.record_for_undo(ch)
            handle.add_metadata("chars", len(text))
        self._changed("open")
        return len(text)

    def save(self, sink: Sink) -> int:
        with telemetry.span(
            "editor::save", component="editor", metadata={"buffer": self.name}
        ) as handle:
            written = write_chars(
                sink, self.buffer.text(), encoding=self.settings.encoding
            )
            handle.add_metadata("chars", written)
        return written

    def undo(self) -> str:
        ch = self.history.undo(self.buffer)
        self._changed("undo")
        return ch

    def redo(self) -> str:
        ch = self.history.redo(self.buffer)
        self._changed("redo")
        return ch

    def clear(self) -> None:
        self.buffer.clear()
        self._changed("clear")

    def render(self) -> Optional[str]:
        return self.buffer.render()

    def snapshot(self) -> BufferView:
        return self.buffer.snapshot()

    def _insert(self, ch: str) -> None:
        self.buffer.insert(ch)
        self.history.record_for_undo(ch)

    def _changed(self, label: str) -> None:
        self.bus.emit(
            "buffer.changed",
            EditorChange(
                label=label,
                view=self.buffer.snapshot(),
                undo_depth=self.history.undo_depth,
                redo_depth=self.history.redo_depth,
            ),
        )


__all__ = ["Editor", "EditorBus", "EditorChange"]
