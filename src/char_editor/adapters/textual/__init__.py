"""Textual front end. ``app`` needs the ``textual`` package; the controller does not."""

from .controller import TextualEditorAdapter, TextualUIHooks

__all__ = ["TextualEditorAdapter", "TextualUIHooks"]
