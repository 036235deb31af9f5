from __future__ import annotations
from network.checks import check_icmp, connectivity_target
from steps.result import StepResult


def verify_connectivity(ctx, operator, shell, settings) -> StepResult:
    label, host = connectivity_target(ctx, settings.fallback_ping_target)
    operator.info(f"Pinging {label.lower()} {host}…")
    result = check_icmp(shell, host, label=label, timeout=settings.ping_timeout)
    if result.passed:
        return StepResult.ok(f"{label} {host} is reachable.")
    return StepResult.failed(f"{label} {host} is unreachable ({result.error}).")
