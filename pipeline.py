from __future__ import annotations
from typing import Callable, List, Sequence, Tuple

from prompts import Operator, OperatorAbort, RetryLimitExceeded
from state import RunContext
from steps.result import StepResult, StepStatus
from steps.s01_static_ip import configure_static_ip
from steps.s02_hostname import configure_hostname
from steps.s03_timezone import configure_time_zone
from steps.s04_remote_management import configure_remote_management
from steps.s05_connectivity import verify_connectivity
from logger import log

StepFunc = Callable[..., StepResult]

STEPS: List[Tuple[str, StepFunc]] = [
    ("Static IP configuration", configure_static_ip),
    ("Hostname", configure_hostname),
    ("Time zone", configure_time_zone),
    ("Remote management", configure_remote_management),
    ("Connectivity check", verify_connectivity),
]


def _report(operator: Operator, result: StepResult) -> None:
    if not result.message:
        return
    if result.status is StepStatus.OK:
        operator.success(result.message)
    elif result.status is StepStatus.SKIPPED:
        operator.info(result.message)
    elif result.status is StepStatus.FAILED:
        operator.warn(result.message)
    else:
        operator.error(result.message)


def run_pipeline(
    ctx: RunContext,
    operator: Operator,
    shell,
    settings,
    steps: Sequence[Tuple[str, StepFunc]] = STEPS,
) -> List[StepResult]:
    """Run each step in order, stopping after the first fatal result."""
    results: List[StepResult] = []
    for number, (title, step) in enumerate(steps, 1):
        operator.info(f"── Step {number}/{len(steps)}: {title} ──")
        try:
            result = step(ctx, operator, shell, settings)
        except OperatorAbort:
            result = StepResult.fatal("Aborted by operator.")
        except RetryLimitExceeded as e:
            result = StepResult.fatal(str(e))
        except Exception as e:
            log.exception("Step %r raised", title)
            result = StepResult.fatal(f"Unexpected error: {e}")
        result.step = title
        results.append(result)
        log.info("Step %r finished: %s", title, result.status.value)
        _report(operator, result)
        if result.is_fatal:
            operator.error("Setup aborted. Remaining steps were not run.")
            break
    return results
