from __future__ import annotations
from typing import List
from rich.text import Text
from textual import events
from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Footer, Static
from textual.containers import Vertical
from widgets.header import BootstrapHeader
from state import RunContext
from steps.result import StepResult, StepStatus
from logger import log

STATUS_STYLES = {
    StepStatus.OK: "green",
    StepStatus.SKIPPED: "dim",
    StepStatus.FAILED: "yellow",
    StepStatus.FATAL: "bold red",
}


class FinishScreen(Screen):
    """Step summary; any key exits."""

    def __init__(self, ctx: RunContext, results: List[StepResult], error: str = "") -> None:
        super().__init__()
        self.ctx = ctx
        self.results = results
        self.error = error

    def compose(self) -> ComposeResult:
        yield BootstrapHeader()
        with Vertical(id="content"):
            yield Static("Setup Summary", classes="title")
            yield Static(self._build_summary(), id="summary")
            yield Static("Press any key to exit.", id="exit_hint")
        yield Footer()

    def _build_summary(self) -> Text:
        ctx = self.ctx
        text = Text()
        for r in self.results:
            text.append(f"  {r.status_icon} {r.step:<26}", style=STATUS_STYLES[r.status])
            text.append(f" {r.message}\n")
        if self.error:
            text.append(f"\n  Unexpected error: {self.error}\n", style="bold red")

        text.append("\n")
        if ctx.static_ip_configured:
            text.append(f"  Adapter   : {ctx.adapter_name}\n")
            text.append(f"  Address   : {ctx.ip_cidr}\n")
            text.append(f"  Gateway   : {ctx.gateway}\n")
        else:
            text.append("  Address   : unchanged\n")
        text.append(f"  Hostname  : {ctx.hostname or 'unchanged'}\n")
        text.append(f"  Time zone : {ctx.time_zone or 'unchanged'}\n")
        if ctx.reboot_required:
            text.append("\n  A reboot is required for the new hostname to take effect.\n",
                        style="bold yellow")
        return text

    def on_key(self, event: events.Key) -> None:
        log.info("Wizard complete – exiting")
        self.app.exit()
