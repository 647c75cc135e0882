"""Runtime services: telemetry and settings."""

from . import telemetry
from .settings import EditorSettings, RedoPolicy, load_settings

__all__ = ["telemetry", "EditorSettings", "RedoPolicy", "load_settings"]
