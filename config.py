from __future__ import annotations
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Optional

import yaml

CONFIG_ENV_VAR = "HOST_BOOTSTRAP_CONFIG"
DEFAULT_CONFIG_PATH = Path(
    os.environ.get("PROGRAMDATA", r"C:\ProgramData"), "HostBootstrap", "bootstrap.yaml"
)


def _default_log_dir() -> str:
    if os.name == "nt":
        return r"C:\BootstrapLogs"
    return "/var/log/host-bootstrap"


@dataclass
class Settings:
    """Tool settings. Host values are always gathered interactively."""

    log_dir: str = field(default_factory=_default_log_dir)
    log_file: str = "host-bootstrap.log"
    fallback_ping_target: str = "8.8.8.8"
    ping_timeout: int = 5
    shell_timeout: float = 300.0
    powershell: str = "powershell.exe"
    prompt_attempts: Optional[int] = None   # None = re-prompt forever

    @property
    def log_path(self) -> Path:
        return Path(self.log_dir) / self.log_file


def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else DEFAULT_CONFIG_PATH


class SettingsError(ValueError):
    """The settings file exists but cannot be used."""


# Expected YAML types per setting; prompt_attempts may also be null
_SETTING_TYPES = {
    "log_dir": (str,),
    "log_file": (str,),
    "fallback_ping_target": (str,),
    "ping_timeout": (int,),
    "shell_timeout": (int, float),
    "powershell": (str,),
    "prompt_attempts": (int, type(None)),
}


def _check_types(path: Path, data: dict) -> None:
    for name, value in data.items():
        expected = _SETTING_TYPES[name]
        # bool is an int subclass
        if isinstance(value, bool) or not isinstance(value, expected):
            wanted = " or ".join("null" if t is type(None) else t.__name__ for t in expected)
            raise SettingsError(f"{path}: {name} must be {wanted}, got {value!r}")
    for name in ("ping_timeout", "shell_timeout", "prompt_attempts"):
        value = data.get(name)
        if value is not None and value <= 0:
            raise SettingsError(f"{path}: {name} must be positive, got {value!r}")


def load_settings(path: Optional[Path] = None) -> Settings:
    """Read settings from YAML. A missing file yields the defaults."""
    path = Path(path) if path is not None else config_path()
    if not path.exists():
        return Settings()

    with open(path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise SettingsError(f"{path}: not valid YAML: {e}") from e
    if data is None:
        return Settings()
    if not isinstance(data, dict):
        raise SettingsError(f"{path}: expected a mapping of settings, got {type(data).__name__}")

    unknown = sorted(set(data) - {f.name for f in fields(Settings)})
    if unknown:
        raise SettingsError(f"{path}: unknown setting(s): {', '.join(unknown)}")
    _check_types(path, data)
    return Settings(**data)


settings = load_settings()
