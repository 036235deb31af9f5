from __future__ import annotations
import json
import subprocess
from typing import List, Optional, Sequence
from logger import log

PS_PREAMBLE = "$ErrorActionPreference = 'Stop'; $ProgressPreference = 'SilentlyContinue'; "


class ShellError(Exception):
    """An OS command could not be run or exited non-zero."""

    def __init__(self, command: str, message: str, returncode: Optional[int] = None):
        super().__init__(message)
        self.command = command
        self.message = message
        self.returncode = returncode

    def __str__(self) -> str:
        if self.returncode is not None:
            return f"{self.message} (exit code {self.returncode})"
        return self.message


def quote(value: str) -> str:
    """Single-quote a value for embedding in a PowerShell script."""
    return "'" + str(value).replace("'", "''") + "'"


class HostShell:
    """Runs PowerShell scripts and native executables on the local host."""

    def __init__(self, powershell: str = "powershell.exe", timeout: float = 300.0):
        self.powershell_exe = powershell
        self.timeout = timeout

    def execute(
        self, argv: Sequence[str], check: bool = True
    ) -> subprocess.CompletedProcess:
        cmd = " ".join(argv)
        log.debug("Executing: %s", cmd)
        try:
            result = subprocess.run(
                list(argv), capture_output=True, text=True, timeout=self.timeout
            )
        except subprocess.TimeoutExpired as e:
            raise ShellError(cmd, f"timed out after {self.timeout}s") from e
        except OSError as e:
            raise ShellError(cmd, str(e)) from e
        if check and result.returncode != 0:
            detail = (result.stderr or result.stdout or "").strip()
            raise ShellError(cmd, detail or "command failed", result.returncode)
        return result

    def powershell(self, script: str) -> str:
        """Run a script and return its stdout. Any error raises ShellError."""
        log.debug("PowerShell: %s", script)
        argv = [
            self.powershell_exe, "-NoProfile", "-NonInteractive",
            "-ExecutionPolicy", "Bypass",
            "-Command", PS_PREAMBLE + script,
        ]
        try:
            return self.execute(argv).stdout
        except ShellError as e:
            # Report the script, not the whole command line
            raise ShellError(script, e.message, e.returncode) from e

    def powershell_json(self, script: str) -> List[dict]:
        """Run a script piped through ConvertTo-Json; always returns a list."""
        out = self.powershell(f"{script} | ConvertTo-Json -Depth 3 -Compress").strip()
        if not out:
            return []
        try:
            data = json.loads(out)
        except ValueError as e:
            raise ShellError(script, f"unparseable output: {e}") from e
        return data if isinstance(data, list) else [data]
