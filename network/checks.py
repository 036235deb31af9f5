from __future__ import annotations
import os
from dataclasses import dataclass
from typing import List

from shell import ShellError
from state import RunContext
from logger import log

IS_WINDOWS = os.name == "nt"


@dataclass
class CheckResult:
    label: str
    target: str
    passed: bool
    error: str = ""

    @property
    def status_icon(self) -> str:
        return "✓" if self.passed else "✗"

    def __str__(self) -> str:
        status = "PASS" if self.passed else f"FAIL ({self.error})"
        return f"[{self.status_icon}] {self.label}: {self.target} -> {status}"


def ping_command(host: str, timeout: int) -> List[str]:
    """One echo request; Windows ping takes its timeout in milliseconds."""
    if IS_WINDOWS:
        return ["ping", "-n", "1", "-w", str(timeout * 1000), host]
    return ["ping", "-c1", f"-W{timeout}", host]


def check_icmp(shell, host: str, *, label: str, timeout: int = 5) -> CheckResult:
    try:
        result = shell.execute(ping_command(host, timeout), check=False)
    except ShellError as e:
        log.warning("ICMP check ERROR: %s: %s", host, e)
        return CheckResult(label=label, target=host, passed=False, error=str(e))
    passed = (result.returncode == 0)
    log.info("ICMP check %s: %s", "PASS" if passed else "FAIL", host)
    return CheckResult(label=label, target=host, passed=passed,
                       error="" if passed else "no response")


def connectivity_target(ctx: RunContext, fallback: str) -> tuple[str, str]:
    """Return (label, host): the configured gateway, else the public fallback."""
    if ctx.static_ip_configured and ctx.gateway:
        return "Gateway", ctx.gateway
    return "Public address", fallback
