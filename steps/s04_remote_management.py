from __future__ import annotations
from system.remote import enable_remote_management
from steps.result import StepResult


def configure_remote_management(ctx, operator, shell, settings) -> StepResult:
    # Optional capability: a failure is only written to the transcript
    enable_remote_management(shell)
    return StepResult.ok("Remote management enablement requested.")
