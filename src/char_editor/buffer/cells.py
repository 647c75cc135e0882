"""Index-addressed storage for character cells."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .errors import BufferValidationError


@dataclass(slots=True)
class Cell:
    """One stored character plus positional links to its neighbours.

    ``prev`` and ``next`` are arena indices, not ownership edges; the arena
    owns every cell.
    """

    value: str
    prev: Optional[int] = None
    next: Optional[int] = None


class CellArena:
    """Slot array of cells with a free list for released indices.

    A released slot holds ``None`` until an allocation reuses it, so any
    lookup through a stale index fails loudly instead of reading old data.
    """

    def __init__(self) -> None:
        self._slots: List[Optional[Cell]] = []
        self._free: List[int] = []
        self._live = 0

    def __len__(self) -> int:
        return self._live

    def allocate(self, value: str) -> int:
        cell = Cell(value=value)
        if self._free:
            index = self._free.pop()
            self._slots[index] = cell
        else:
            index = len(self._slots)
            self._slots.append(cell)
        self._live += 1
        return index

    def get(self, index: int) -> Cell:
        if index < 0 or index >= len(self._slots):
            raise BufferValidationError("Cell index out of range", index=index)
        cell = self._slots[index]
        if cell is None:
            raise BufferValidationError("Cell has been released", index=index)
        return cell

    def is_live(self, index: int) -> bool:
        return 0 <= index < len(self._slots) and self._slots[index] is not None

    def release(self, index: int) -> str:
        """Drop the cell at ``index`` and return its character."""

        cell = self.get(index)
        self._slots[index] = None
        self._free.append(index)
        self._live -= 1
        cell.prev = cell.next = None
        return cell.value

    def reset(self) -> None:
        self._slots.clear()
        self._free.clear()
        self._live = 0


__all__ = ["Cell", "CellArena"]
