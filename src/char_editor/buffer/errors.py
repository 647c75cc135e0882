"""Error taxonomy shared by the buffer, history and editor layers."""

from __future__ import annotations

import os
from typing import Optional, Union


class EditorError(RuntimeError):
    """Base class for every recoverable editor condition."""


class EmptyHistory(EditorError):
    """Raised when undo or redo is requested with nothing recorded."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"Nothing to {operation}")
        self.operation = operation


class NothingToDelete(EditorError):
    """Raised when a delete reaches a buffer whose cursor is empty."""

    def __init__(self) -> None:
        super().__init__("There are no characters to delete")


class IoError(EditorError):
    """Raised when a load source or save sink cannot be read or written."""

    def __init__(
        self, message: str, *, path: Optional[Union[str, os.PathLike[str]]] = None
    ) -> None:
        super().__init__(message)
        self.path = path


class NotInitialized(EditorError):
    """Raised when an editor command arrives before a session is created."""

    def __init__(self, command: Optional[str] = None) -> None:
        detail = f" (command '{command}')" if command else ""
        super().__init__(f"No editor has been created{detail}")
        self.command = command


class BufferValidationError(EditorError):
    """Raised when a cell index does not refer to a live cell."""

    def __init__(self, message: str, *, index: Optional[int] = None) -> None:
        super().__init__(message)
        self.index = index


class InvalidCharacter(EditorError, ValueError):
    """Raised when something other than a single character is inserted."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Expected a single character, got {value!r}")
        self.value = value


__all__ = [
    "EditorError",
    "EmptyHistory",
    "NothingToDelete",
    "IoError",
    "NotInitialized",
    "BufferValidationError",
    "InvalidCharacter",
]
