from __future__ import annotations
from shell import ShellError
from state import HostnamePlan
from system.hostname import get_current_hostname, is_domain_controller, select_rename_strategy
from validators import validate_hostname
from prompts import prompt_until_valid
from steps.result import StepResult
from logger import log


def configure_hostname(ctx, operator, shell, settings) -> StepResult:
    new_name = prompt_until_valid(
        operator.ask, "Enter the new hostname", validate_hostname,
        max_attempts=settings.prompt_attempts, on_invalid=operator.reject,
    )

    try:
        current = get_current_hostname(shell)
    except ShellError as e:
        return StepResult.failed(f"Could not read the current hostname: {e}")

    plan = HostnamePlan(
        new_name=new_name,
        current_name=current,
        is_domain_controller=is_domain_controller(shell),
    )
    if not plan.needs_rename:
        ctx.hostname = current
        return StepResult.skipped(f"Hostname is already {current}.")

    strategy = select_rename_strategy(plan)
    operator.info(f"Renaming {plan.current_name} -> {plan.new_name} ({strategy.label})…")
    try:
        strategy.rename(shell, plan)
    except ShellError as e:
        log.error("Rename to %s failed: %s", plan.new_name, e)
        return StepResult.failed(f"Rename to {plan.new_name} failed: {e}")

    ctx.hostname = plan.new_name
    ctx.reboot_required = True
    return StepResult.ok(f"Hostname will be {plan.new_name} after a reboot.")
