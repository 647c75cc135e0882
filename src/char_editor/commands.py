"""Command surface shared by the console and Textual shells."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Type

from char_editor.buffer import (
    BufferValidationError,
    EditorError,
    EmptyHistory,
    InvalidCharacter,
    IoError,
    NotInitialized,
    NothingToDelete,
)
from char_editor.editor import Session
from char_editor.runtime import telemetry


@dataclass(slots=True)
class CommandResult:
    """Outcome of one dispatched command line."""

    ok: bool
    status: str
    message: Optional[str] = None
    output: Optional[str] = None
    exit: bool = False


CommandHandler = Callable[[Session, str], CommandResult]


class MissingArgument(EditorError):
    def __init__(self, command: str, argument: str) -> None:
        super().__init__(f"'{command}' needs a {argument}")
        self.command = command


_ERROR_STATUS: Dict[Type[EditorError], str] = {
    EmptyHistory: "empty_history",
    NothingToDelete: "nothing_to_delete",
    IoError: "io_error",
    NotInitialized: "not_initialized",
    InvalidCharacter: "invalid_character",
    BufferValidationError: "buffer_invalid",
    MissingArgument: "command_missing_argument",
}


def split_command(line: str) -> tuple[str, str]:
    """Split ``line`` into a lowercase command word and its raw argument."""

    text = line.rstrip("\r\n").lstrip()
    command, _, argument = text.partition(" ")
    return command.lower(), argument


def dispatch(session: Session, line: str) -> CommandResult:
    command, argument = split_command(line)
    if not command:
        return CommandResult(ok=False, status="command_empty")
    handler = _COMMAND_HANDLERS.get(command)
    if handler is None:
        telemetry.record_event(
            "command.unknown", level="warning", data={"command": command}
        )
        return CommandResult(
            ok=False, status="command_unknown", message=f"Unknown command '{command}'"
        )
    try:
        return handler(session, argument)
    except EditorError as exc:
        status = _ERROR_STATUS.get(type(exc), "command_error")
        telemetry.record_event(
            "command.failed",
            level="warning",
            data={"command": command, "status": status, "reason": str(exc)},
        )
        return CommandResult(ok=False, status=status, message=str(exc))


def _handle_new(session: Session, argument: str) -> CommandResult:
    session.create(name=argument.strip() or "default")
    return CommandResult(
        ok=True, status="command_new", message="File has been created"
    )


def _handle_open(session: Session, argument: str) -> CommandResult:
    editor = session.require_editor("open")
    filename = _require(argument.strip(), "open", "filename")
    count = editor.open(filename)
    return CommandResult(
        ok=True,
        status="command_open",
        message=f"File opened successfully ({count} characters)",
    )


def _handle_save(session: Session, argument: str) -> CommandResult:
    editor = session.require_editor("save")
    filename = _require(argument.strip(), "save", "filename")
    count = editor.save(filename)
    return CommandResult(
        ok=True,
        status="command_save",
        message=f"File saved successfully ({count} characters)",
    )


def _handle_write(session: Session, argument: str) -> CommandResult:
    editor = session.require_editor("write")
    sentence = _require(argument, "write", "sentence")
    editor.write(sentence)
    return CommandResult(ok=True, status="command_write", message="Sentence written")


def _handle_delete(session: Session, argument: str) -> CommandResult:
    del argument
    removed = session.require_editor("delete").delete_char()
    return CommandResult(
        ok=True, status="command_delete", message=f"Deleted {removed!r}"
    )


def _handle_undo(session: Session, argument: str) -> CommandResult:
    del argument
    session.require_editor("undo").undo()
    return CommandResult(ok=True, status="command_undo", message="Undo performed")


def _handle_redo(session: Session, argument: str) -> CommandResult:
    del argument
    session.require_editor("redo").redo()
    return CommandResult(ok=True, status="command_redo", message="Redo performed")


def _handle_clear(session: Session, argument: str) -> CommandResult:
    del argument
    session.require_editor("clear").clear()
    return CommandResult(ok=True, status="command_clear", message="Content cleared")


def _handle_print(session: Session, argument: str) -> CommandResult:
    del argument
    text = session.require_editor("print").render()
    if text is None:
        return CommandResult(
            ok=True, status="command_print_empty", message="File is empty!"
        )
    return CommandResult(ok=True, status="command_print", output=text)


def _handle_exit(session: Session, argument: str) -> CommandResult:
    del argument
    session.close()
    return CommandResult(
        ok=True, status="command_exit", message="Exiting...", exit=True
    )


def _require(value: str, command: str, argument: str) -> str:
    if not value:
        raise MissingArgument(command, argument)
    return value


_COMMAND_HANDLERS: Dict[str, CommandHandler] = {
    "new": _handle_new,
    "create": _handle_new,
    "open": _handle_open,
    "save": _handle_save,
    "write": _handle_write,
    "delete": _handle_delete,
    "undo": _handle_undo,
    "redo": _handle_redo,
    "clear": _handle_clear,
    "print": _handle_print,
    "exit": _handle_exit,
    "quit": _handle_exit,
}

COMMAND_NAMES = tuple(_COMMAND_HANDLERS)

__all__ = [
    "COMMAND_NAMES",
    "CommandResult",
    "MissingArgument",
    "dispatch",
    "split_command",
]
