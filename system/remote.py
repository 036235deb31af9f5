from __future__ import annotations
from shell import ShellError
from logger import log


def enable_remote_management(shell) -> bool:
    """Turn on WinRM/PowerShell remoting. Failures are logged, never raised."""
    try:
        shell.powershell("Enable-PSRemoting -Force -SkipNetworkProfileCheck | Out-Null")
    except ShellError as e:
        log.debug("Enable-PSRemoting failed (ignored): %s", e)
        return False
    log.info("Remote management enabled")
    return True
