"""Session lifetime: explicit Uninitialized/Active state around one editor."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from char_editor.buffer import NotInitialized
from char_editor.runtime import telemetry
from char_editor.runtime.settings import EditorSettings, load_settings

from .editor import Editor, EditorBus


class SessionState(str, Enum):
    UNINITIALIZED = "uninitialized"
    ACTIVE = "active"


class Session:
    """Owns at most one editor and the bus shells subscribe to.

    Creating a session again replaces the editor, its buffer and its
    history; the bus survives so subscribers stay attached.
    """

    def __init__(
        self,
        *,
        settings: Optional[EditorSettings] = None,
        bus: Optional[EditorBus] = None,
    ) -> None:
        self.settings = settings if settings is not None else load_settings()
        self.bus = bus if bus is not None else EditorBus()
        self._editor: Optional[Editor] = None

    @property
    def state(self) -> SessionState:
        if self._editor is None:
            return SessionState.UNINITIALIZED
        return SessionState.ACTIVE

    def create(self, *, name: str = "default") -> Editor:
        self._editor = Editor(name=name, settings=self.settings, bus=self.bus)
        telemetry.record_event("session.create", data={"buffer": name})
        self.bus.emit("session.created", self._editor)
        return self._editor

    def close(self) -> None:
        if self._editor is None:
            return
        name = self._editor.name
        self._editor = None
        telemetry.record_event("session.close", data={"buffer": name})
        self.bus.emit("session.closed", name)

    def require_editor(self, command: Optional[str] = None) -> Editor:
        if self._editor is None:
            raise NotInitialized(command)
        return self._editor


__all__ = ["Session", "SessionState"]
