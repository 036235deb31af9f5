from __future__ import annotations
import pyfiglet
from textual.widgets import Static

_ASCII = pyfiglet.figlet_format("Host Bootstrap", font="small")


class BootstrapHeader(Static):
    """Full-width ASCII-art banner shown at the top of every screen."""

    DEFAULT_CSS = """
    BootstrapHeader {
        color: #38bdf8;
        text-style: bold;
        width: 100%;
        padding: 0 2;
    }
    """

    def __init__(self) -> None:
        super().__init__(_ASCII)
