"""Character buffer, cell storage and undo/redo history."""

from .buffer import BufferView, CharBuffer
from .cells import Cell, CellArena
from .errors import (
    BufferValidationError,
    EditorError,
    EmptyHistory,
    InvalidCharacter,
    IoError,
    NotInitialized,
    NothingToDelete,
)
from .history import History
from .validation import Cursor, ensure_char, ensure_cursor

__all__ = [
    "BufferView",
    "CharBuffer",
    "Cell",
    "CellArena",
    "Cursor",
    "History",
    "EditorError",
    "EmptyHistory",
    "NothingToDelete",
    "IoError",
    "NotInitialized",
    "BufferValidationError",
    "InvalidCharacter",
    "ensure_char",
    "ensure_cursor",
]
