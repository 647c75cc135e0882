"""Editor settings resolved from ``CHAR_EDITOR_*`` environment variables."""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from .telemetry import ENV_PREFIX


class RedoPolicy(str, Enum):
    """What happens to the redo stack when a fresh edit is recorded."""

    KEEP = "keep"
    CLEAR = "clear"


DEFAULT_ENCODING = "latin-1"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True, slots=True)
class EditorSettings:
    redo_policy: RedoPolicy = RedoPolicy.KEEP
    encoding: str = DEFAULT_ENCODING
    record_loads: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "redo_policy", RedoPolicy(self.redo_policy))
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding '{self.encoding}'") from exc


def _lookup(env: Mapping[str, str], name: str) -> Optional[str]:
    raw = env.get(f"{ENV_PREFIX}{name}")
    if raw is None or not raw.strip():
        return None
    return raw.strip()


def _parse_flag(name: str, raw: str) -> bool:
    lowered = raw.lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"{ENV_PREFIX}{name} must be a boolean flag, got '{raw}'")


def load_settings(env: Optional[Mapping[str, str]] = None) -> EditorSettings:
    """Build settings from ``env`` (defaults to ``os.environ``)."""

    source = os.environ if env is None else env
    values: dict[str, object] = {}

    policy = _lookup(source, "REDO_POLICY")
    if policy is not None:
        try:
            values["redo_policy"] = RedoPolicy(policy.lower())
        except ValueError as exc:
            choices = ", ".join(p.value for p in RedoPolicy)
            raise ValueError(
                f"{ENV_PREFIX}REDO_POLICY must be one of {choices}, got '{policy}'"
            ) from exc

    encoding = _lookup(source, "ENCODING")
    if encoding is not None:
        values["encoding"] = encoding

    record_loads = _lookup(source, "RECORD_LOADS")
    if record_loads is not None:
        values["record_loads"] = _parse_flag("RECORD_LOADS", record_loads)

    return EditorSettings(**values)  # type: ignore[arg-type]


__all__ = ["DEFAULT_ENCODING", "EditorSettings", "RedoPolicy", "load_settings"]
