"""Numbered console menu driving the editor through the command surface."""

from __future__ import annotations

from typing import Callable, Dict, Optional, Tuple

from char_editor.commands import CommandResult, dispatch
from char_editor.editor import Session

MENU = (
    "Text Editor Menu:\n"
    "1. Create a new file\n"
    "2. Open a file\n"
    "3. Save to file\n"
    "4. Write a sentence\n"
    "5. Undo\n"
    "6. Redo\n"
    "7. Clear the content\n"
    "8. Print the text in editor\n"
    "0. Exit"
)

# choice -> (command, prompt for its argument)
MENU_CHOICES: Dict[str, Tuple[str, Optional[str]]] = {
    "1": ("new", None),
    "2": ("open", "Enter the filename to open: "),
    "3": ("save", "Enter the filename to save: "),
    "4": ("write", "Enter the sentence: "),
    "5": ("undo", None),
    "6": ("redo", None),
    "7": ("clear", None),
    "8": ("print", None),
    "0": ("exit", None),
}


class ConsoleMenu:
    def __init__(
        self,
        session: Optional[Session] = None,
        *,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self.session = session or Session()
        self._input = input_fn
        self._output = output_fn

    def run(self) -> None:
        """Loop until the exit choice or end of input."""

        while True:
            self._output(MENU)
            try:
                if not self.step(self._input("Enter choice: ")):
                    break
            except EOFError:
                break
            self._output("")

    def step(self, choice: str) -> bool:
        """Handle one menu choice; returns ``False`` once the menu should stop."""

        entry = MENU_CHOICES.get(choice.strip())
        if entry is None:
            self._output("Invalid choice!")
            return True
        command, prompt = entry
        argument = self._input(prompt) if prompt else ""
        result = dispatch(self.session, f"{command} {argument}")
        self._report(result)
        return not result.exit

    def _report(self, result: CommandResult) -> None:
        if result.output is not None:
            self._output(result.output)
        if result.message:
            prefix = "" if result.ok else "Error: "
            self._output(f"{prefix}{result.message}")


__all__ = ["ConsoleMenu", "MENU", "MENU_CHOICES"]
