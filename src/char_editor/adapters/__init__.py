"""User-facing shells built on the command surface."""

from .console import ConsoleMenu

__all__ = ["ConsoleMenu"]
