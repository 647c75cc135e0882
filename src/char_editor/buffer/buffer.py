"""Character buffer: a linked sequence of arena cells plus an edit cursor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from .cells import CellArena
from .errors import NothingToDelete
from .validation import Cursor, ensure_char, ensure_cursor


@dataclass(slots=True)
class BufferView:
    text: str
    length: int
    cursor_offset: int
    current: Optional[str]

    @property
    def empty(self) -> bool:
        return self.length == 0


class CharBuffer:
    """Ordered character cells with a cursor naming the current cell.

    Inserts go immediately after the cursor and the cursor advances onto the
    new cell; deletes remove the cursor cell and fall back to its
    predecessor. History is not recorded here, see ``Editor``.
    """

    def __init__(self, *, name: str = "default") -> None:
        self.name = name
        self._arena = CellArena()
        self._head: Optional[int] = None
        self._cursor: Cursor = None

    def __len__(self) -> int:
        return len(self._arena)

    def __iter__(self) -> Iterator[str]:
        index = self._head
        while index is not None:
            cell = self._arena.get(index)
            yield cell.value
            index = cell.next

    @property
    def cursor(self) -> Cursor:
        return self._cursor

    @property
    def is_empty(self) -> bool:
        return self._head is None

    @property
    def current(self) -> Optional[str]:
        """Character under the cursor, or ``None`` when the cursor is empty."""

        if self._cursor is None:
            return None
        return self._arena.get(self._cursor).value

    @property
    def cursor_offset(self) -> int:
        """1-based document position of the cursor cell (0 when empty)."""

        offset = 0
        index = self._cursor
        while index is not None:
            offset += 1
            index = self._arena.get(index).prev
        return offset

    def insert(self, ch: str) -> None:
        ch = ensure_char(ch)
        cursor = ensure_cursor(self._arena, self._cursor)
        index = self._arena.allocate(ch)
        cell = self._arena.get(index)

        if cursor is None:
            # empty cursor implies an empty buffer, see ensure_cursor
            self._head = index
        else:
            anchor = self._arena.get(cursor)
            cell.prev = cursor
            cell.next = anchor.next
            if anchor.next is not None:
                self._arena.get(anchor.next).prev = index
            anchor.next = index

        self._cursor = index

    def delete(self) -> str:
        """Remove the cursor cell and return its character."""

        cursor = ensure_cursor(self._arena, self._cursor)
        if cursor is None:
            raise NothingToDelete()

        cell = self._arena.get(cursor)
        prev_index, next_index = cell.prev, cell.next
        if prev_index is not None:
            self._arena.get(prev_index).next = next_index
        else:
            self._head = next_index
        if next_index is not None:
            self._arena.get(next_index).prev = prev_index

        self._cursor = prev_index
        return self._arena.release(cursor)

    def render(self) -> Optional[str]:
        """Return the document text, or ``None`` when there are no cells."""

        if self.is_empty:
            return None
        return "".join(self)

    def text(self) -> str:
        return "".join(self)

    def load(self, chars: Iterable[str]) -> int:
        self.clear()
        count = 0
        for ch in chars:
            self.insert(ch)
            count += 1
        return count

    def clear(self) -> None:
        self._arena.reset()
        self._head = None
        self._cursor = None

    def snapshot(self) -> BufferView:
        return BufferView(
            text=self.text(),
            length=len(self),
            cursor_offset=self.cursor_offset,
            current=self.current,
        )


__all__ = ["BufferView", "CharBuffer"]
