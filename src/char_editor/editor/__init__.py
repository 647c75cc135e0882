"""Editor orchestration, file adapters and session lifetime."""

from .editor import Editor, EditorBus, EditorChange
from .files import read_chars, write_chars
from .session import Session, SessionState

__all__ = [
    "Editor",
    "EditorBus",
    "EditorChange",
    "Session",
    "SessionState",
    "read_chars",
    "write_chars",
]
