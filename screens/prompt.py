from __future__ import annotations
from typing import Optional
from rich.text import Text
from textual.app import ComposeResult
from textual.screen import ModalScreen
from textual.widgets import Input, Label, Static
from textual.containers import Vertical


class PromptScreen(ModalScreen[Optional[str]]):
    """Ask the operator one question. Dismisses with the answer, or None on Escape."""

    BINDINGS = [("escape", "cancel", "Abort setup")]

    DEFAULT_CSS = """
    PromptScreen {
        align: center middle;
    }
    #prompt_box {
        width: 70;
        height: auto;
        border: thick $primary;
        background: $surface;
        padding: 1 2;
    }
    """

    def __init__(self, prompt: str, hint: str = "") -> None:
        super().__init__()
        self.prompt = prompt
        self.hint = hint

    def compose(self) -> ComposeResult:
        with Vertical(id="prompt_box"):
            yield Label(Text(self.prompt), id="prompt_label")
            yield Input(id="inp_answer")
            yield Static(Text(self.hint), id="err_msg")

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.dismiss(event.value)

    def action_cancel(self) -> None:
        self.dismiss(None)
