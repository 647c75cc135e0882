"""Load/save adapters between buffers and named files or text streams."""

from __future__ import annotations

import os
from typing import TextIO, Union

from char_editor.buffer.errors import IoError

Source = Union[str, os.PathLike, TextIO]
Sink = Union[str, os.PathLike, TextIO]


def _describe(target: Union[Source, Sink]) -> str:
    if isinstance(target, (str, os.PathLike)):
        return os.fspath(target)
    return str(getattr(target, "name", "<stream>"))


def read_chars(source: Source, *, encoding: str) -> str:
    """Read the whole of ``source`` without newline translation."""

    name = _describe(source)
    try:
        if isinstance(source, (str, os.PathLike)):
            with open(source, "r", encoding=encoding, newline="") as handle:
                return handle.read()
        return source.read()
    except (OSError, UnicodeError) as exc:
        raise IoError(f"Error in opening the file '{name}'", path=name) from exc


def write_chars(sink: Sink, text: str, *, encoding: str) -> int:
    """Overwrite ``sink`` with ``text`` verbatim; returns characters written."""

    name = _describe(sink)
    try:
        if isinstance(sink, (str, os.PathLike)):
            with open(sink, "w", encoding=encoding, newline="") as handle:
                handle.write(text)
        else:
            sink.write(text)
    except (OSError, UnicodeError) as exc:
        raise IoError(f"Could not save the file '{name}'", path=name) from exc
    return len(text)


__all__ = ["Sink", "Source", "read_chars", "write_chars"]
