"""Textual-agnostic controller wiring session events into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from char_editor.buffer import BufferView
from char_editor.commands import CommandResult, dispatch
from char_editor.editor import EditorChange, Session, SessionState


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    # None while no session has been created
    update_buffer: Callable[[Optional[BufferView]], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Bridges the command surface and editor bus to a Textual-friendly API."""

    def __init__(self, session: Session, hooks: TextualUIHooks) -> None:
        self.session = session
        self.hooks = hooks
        self.exit_requested = False
        self._subscribe_events()
        self._refresh_buffer()

    def submit_command(self, line: str) -> CommandResult:
        """Dispatch a typed command line and surface its outcome."""

        self._log_state("command ->", line=line)
        result = dispatch(self.session, line)
        if result.exit:
            self.exit_requested = True
        self.hooks.update_status(self._status_for(result))
        self._refresh_buffer()
        self._log_state(
            "result <-", ok=result.ok, status=result.status, message=result.message
        )
        return result

    def _status_for(self, result: CommandResult) -> str:
        if result.output is not None:
            return f"{result.status}: {len(result.output)} characters"
        if result.message:
            return result.message if result.ok else f"error: {result.message}"
        return result.status

    def _subscribe_events(self) -> None:
        bus = self.session.bus
        for event in ("buffer.changed", "session.created", "session.closed"):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        if isinstance(payload, EditorChange):
            self._log_state("event ->", event=name, label=payload.label)
        else:
            self._log_state("event ->", event=name)
        self.hooks.handle_event(name, payload)
        self._refresh_buffer()

    def _refresh_buffer(self) -> None:
        if self.session.state is SessionState.UNINITIALIZED:
            self.hooks.update_buffer(None)
            return
        self.hooks.update_buffer(self.session.require_editor().snapshot())

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        if self.session.state is SessionState.UNINITIALIZED:
            return {"session": SessionState.UNINITIALIZED.value}
        editor = self.session.require_editor()
        return {
            "session": SessionState.ACTIVE.value,
            "buffer": editor.name,
            "length": len(editor.buffer),
            "cursor": editor.buffer.cursor_offset,
            "undo": editor.history.undo_depth,
            "redo": editor.history.redo_depth,
        }


__all__ = ["TextualEditorAdapter", "TextualUIHooks"]
