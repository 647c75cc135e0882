"""Command-line entry point: ``python -m char_editor``."""

from __future__ import annotations

import argparse
import os
from typing import Optional, Sequence

from char_editor.adapters import ConsoleMenu
from char_editor.editor import Session
from char_editor.runtime import load_settings, telemetry


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Character-level text editor with undo/redo."
    )
    parser.add_argument(
        "--ui",
        choices=("console", "textual"),
        default=os.environ.get("CHAR_EDITOR_UI", "console"),
        help="Front end to run (default: console)",
    )
    parser.add_argument(
        "--log-preset",
        choices=("development", "quiet", "file"),
        default=None,
        help="Telemetry preset; defaults to CHAR_EDITOR_* environment settings",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)
    session = Session(settings=load_settings())
    if args.ui == "textual":
        from char_editor.adapters.textual.app import CharEditorApp

        CharEditorApp(session).run()
    else:
        ConsoleMenu(session).run()


if __name__ == "__main__":  # pragma: no cover - manual entry
    main()
