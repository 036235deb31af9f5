from __future__ import annotations
from rich.text import Text
from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Footer, Static, RichLog
from textual.containers import Vertical
from widgets.header import BootstrapHeader

LEVEL_STYLES = {
    "info": "",
    "success": "green",
    "warning": "yellow",
    "error": "bold red",
}


class RunScreen(Screen):
    """Live transcript of the configuration steps."""

    def compose(self) -> ComposeResult:
        yield BootstrapHeader()
        with Vertical(id="content"):
            yield Static("Preparing this server for role installation", classes="title")
            yield RichLog(id="transcript", wrap=True)
            yield Static("Starting…", id="status_msg")
        yield Footer()

    def write_line(self, level: str, message: str) -> None:
        style = LEVEL_STYLES.get(level, "")
        self.query_one("#transcript", RichLog).write(Text(message, style=style))

    def set_status(self, message: str) -> None:
        self.query_one("#status_msg", Static).update(Text(message))
