"""Undo/redo stacks of single-character records."""

from __future__ import annotations

from typing import List, Optional

from char_editor.runtime.settings import RedoPolicy

from .buffer import CharBuffer
from .errors import EmptyHistory


class History:
    """Two LIFO stacks of characters.

    Records do not carry the kind of edit that produced them: an undo is
    always realized as a deletion at the cursor and a redo as an insertion
    of the recorded character.
    """

    def __init__(self, *, redo_policy: RedoPolicy = RedoPolicy.KEEP) -> None:
        self.redo_policy = RedoPolicy(redo_policy)
        self._undo: List[str] = []
        self._redo: List[str] = []

    @property
    def undo_depth(self) -> int:
        return len(self._undo)

    @property
    def redo_depth(self) -> int:
        return len(self._redo)

    def can_undo(self) -> bool:
        return bool(self._undo)

    def can_redo(self) -> bool:
        return bool(self._redo)

    def peek_undo(self) -> Optional[str]:
        return self._undo[-1] if self._undo else None

    def peek_redo(self) -> Optional[str]:
        return self._redo[-1] if self._redo else None

    def record_for_undo(self, ch: str) -> None:
        self._undo.append(ch)
        if self.redo_policy is RedoPolicy.CLEAR:
            self._redo.clear()

    def undo(self, buffer: CharBuffer) -> str:
        """Pop the latest record onto redo and delete at the cursor.

        The record moves to redo even when the buffer is empty, in which case
        the deletion raises ``NothingToDelete`` afterwards.
        """

        if not self._undo:
            raise EmptyHistory("undo")
        ch = self._undo.pop()
        self._redo.append(ch)
        buffer.delete()
        return ch

    def redo(self, buffer: CharBuffer) -> str:
        if not self._redo:
            raise EmptyHistory("redo")
        ch = self._redo.pop()
        self._undo.append(ch)
        buffer.insert(ch)
        return ch

    def reset(self) -> None:
        self._undo.clear()
        self._redo.clear()


__all__ = ["History"]
