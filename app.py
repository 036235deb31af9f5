from __future__ import annotations
import asyncio
from typing import List, Optional

from textual.app import App

from config import settings as default_settings
from pipeline import run_pipeline
from prompts import Operator, OperatorAbort
from screens.finish import FinishScreen
from screens.prompt import PromptScreen
from screens.run import RunScreen
from shell import HostShell
from state import RunContext
from steps.result import StepResult
from logger import log


class WizardOperator(Operator):
    """Operator backed by the TUI. Only call from the pipeline thread."""

    def __init__(self, app: "BootstrapWizard") -> None:
        self.app = app
        self._hint = ""

    def ask(self, prompt: str) -> str:
        # Show the last rejection inside the repeated prompt, where the operator is looking
        hint, self._hint = self._hint, ""
        answer = self.app.call_from_thread(self.app.request_input, prompt, hint)
        if answer is None:
            log.info("Prompt %r cancelled by operator", prompt)
            raise OperatorAbort(prompt)
        log.debug("Prompt %r answered: %r", prompt, answer)
        return answer

    def notify(self, level: str, message: str) -> None:
        self.app.call_from_thread(self.app.post_line, level, message)

    def reject(self, message: str) -> None:
        self._hint = message
        super().reject(message)


class BootstrapWizard(App):
    """Host Bootstrap Wizard."""

    TITLE = "Host Bootstrap Wizard"

    CSS = """
    Screen {
        background: $surface;
    }
    .title {
        text-style: bold;
        color: $accent;
        margin-bottom: 1;
    }
    #content {
        margin: 1 2;
    }
    #transcript {
        height: 1fr;
        border: solid $primary;
    }
    #status_msg, #exit_hint {
        margin-top: 1;
    }
    #err_msg {
        margin-top: 1;
        color: $warning;
    }
    """

    def __init__(self, shell=None, settings=None) -> None:
        super().__init__()
        self.run_settings = settings or default_settings
        self.host_shell = shell or HostShell(
            self.run_settings.powershell, self.run_settings.shell_timeout
        )
        self.state = RunContext()
        self.step_results: List[StepResult] = []
        self.transcript_screen: Optional[RunScreen] = None
        log.info("BootstrapWizard started")

    async def on_mount(self) -> None:
        self.transcript_screen = RunScreen()
        await self.push_screen(self.transcript_screen)
        asyncio.create_task(self._run_steps())

    async def _run_steps(self) -> None:
        # Steps block on the OS and on prompts, so they run off the event loop
        operator = WizardOperator(self)
        loop = asyncio.get_running_loop()
        error = ""
        try:
            self.step_results = await loop.run_in_executor(
                None,
                lambda: run_pipeline(self.state, operator, self.host_shell, self.run_settings),
            )
        except Exception as e:
            log.exception("Setup failed")
            error = str(e)
        self.show_finish(error)

    # -- Called on the app thread ------------------------------------------------

    def post_line(self, level: str, message: str) -> None:
        self.transcript_screen.write_line(level, message)
        if level != "info":
            self.transcript_screen.set_status(message)

    async def request_input(self, prompt: str, hint: str = "") -> Optional[str]:
        answer: asyncio.Future = asyncio.get_running_loop().create_future()

        def _resolve(value: Optional[str]) -> None:
            if not answer.done():
                answer.set_result(value)

        self.transcript_screen.set_status(prompt)
        self.push_screen(PromptScreen(prompt, hint), callback=_resolve)
        return await answer

    def show_finish(self, error: str = "") -> None:
        self.push_screen(FinishScreen(self.state, self.step_results, error))
