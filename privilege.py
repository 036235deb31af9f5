from __future__ import annotations
import ctypes
import os
import subprocess
import sys
from logger import log

IS_WINDOWS = os.name == "nt"

# ShellExecuteW returns a value > 32 on success
_SHELLEXECUTE_OK = 32


def is_elevated() -> bool:
    if IS_WINDOWS:
        try:
            return ctypes.windll.shell32.IsUserAnAdmin() != 0
        except (AttributeError, OSError) as e:
            log.warning("Could not query elevation: %s", e)
            return False
    return os.geteuid() == 0


def _relaunch_args() -> str:
    # A frozen executable is sys.executable itself; a script needs its path
    if getattr(sys, "frozen", False):
        return subprocess.list2cmdline(sys.argv[1:])
    return subprocess.list2cmdline([os.path.abspath(sys.argv[0])] + sys.argv[1:])


def relaunch_elevated() -> bool:
    """Ask Windows to start this program again with admin rights."""
    if not IS_WINDOWS:
        return False
    try:
        rc = ctypes.windll.shell32.ShellExecuteW(
            None, "runas", sys.executable, _relaunch_args(), None, 1
        )
    except (AttributeError, OSError) as e:
        log.error("Elevated relaunch failed: %s", e)
        return False
    log.info("Elevated relaunch requested (ShellExecuteW returned %s)", rc)
    return rc > _SHELLEXECUTE_OK
