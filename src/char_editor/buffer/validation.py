"""Validation helpers shared across buffer services."""

from __future__ import annotations

from typing import Optional

from .cells import CellArena
from .errors import BufferValidationError, InvalidCharacter

Cursor = Optional[int]  # arena index of the current cell, None when empty


def ensure_char(value: object) -> str:
    if not isinstance(value, str) or len(value) != 1:
        raise InvalidCharacter(value)
    return value


def ensure_cursor(arena: CellArena, cursor: Cursor) -> Cursor:
    if cursor is None:
        if len(arena):
            raise BufferValidationError("Empty cursor on a non-empty buffer")
        return cursor
    if not arena.is_live(cursor):
        raise BufferValidationError("Cursor refers to a released cell", index=cursor)
    return cursor
