"""Character-level text buffer with single-character undo/redo."""

__all__ = [
    "adapters",
    "buffer",
    "commands",
    "editor",
    "runtime",
]

__version__ = "0.1.0"
