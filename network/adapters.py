from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional
from logger import log

ADAPTER_QUERY = (
    "Get-NetAdapter | Select-Object ifIndex, Name, InterfaceDescription, Status, Virtual"
)


@dataclass
class AdapterInfo:
    index: int              # ifIndex
    name: str               # e.g. "Ethernet0"
    description: str        # InterfaceDescription
    status: str             # "Up" | "Disconnected" | "Disabled" | ...
    virtual: bool = False

    @property
    def is_up(self) -> bool:
        return self.status.lower() == "up"

    @property
    def is_loopback(self) -> bool:
        return "loopback" in self.description.lower()

    def display_str(self) -> str:
        return f"[{self.index:>3}] {self.name:<20} {self.status.upper():<6}  {self.description}"


def _parse_adapter(entry: dict) -> Optional[AdapterInfo]:
    try:
        return AdapterInfo(
            index=int(entry["ifIndex"]),
            name=str(entry.get("Name") or ""),
            description=str(entry.get("InterfaceDescription") or ""),
            status=str(entry.get("Status") or "unknown"),
            virtual=bool(entry.get("Virtual", False)),
        )
    except (KeyError, TypeError, ValueError) as e:
        log.debug(f"Skipping unparseable adapter entry {entry!r}: {e}")
        return None


def list_adapters(shell) -> List[AdapterInfo]:
    """
    Return the adapters that are up, not virtual and not loopback, sorted
    by index. ShellError propagates.
    """
    adapters = []
    for entry in shell.powershell_json(ADAPTER_QUERY):
        adapter = _parse_adapter(entry)
        if adapter is None:
            continue
        if not adapter.is_up or adapter.virtual or adapter.is_loopback:
            continue
        adapters.append(adapter)
    return sorted(adapters, key=lambda a: a.index)


def find_adapter(adapters: List[AdapterInfo], selection: str) -> Optional[AdapterInfo]:
    """Match the operator's index answer against enumerated adapters."""
    text = selection.strip()
    for adapter in adapters:
        if str(adapter.index) == text:
            return adapter
    return None
