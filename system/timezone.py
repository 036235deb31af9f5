from __future__ import annotations
from dataclasses import dataclass
from typing import List

from shell import quote
from logger import log


@dataclass(frozen=True)
class TimeZoneEntry:
    id: str
    display_name: str

    def display_str(self) -> str:
        return f"{self.id}  {self.display_name}"


def list_time_zones(shell) -> List[TimeZoneEntry]:
    """All available zones, sorted by identifier. ShellError propagates."""
    zones = [
        TimeZoneEntry(id=str(z["Id"]), display_name=str(z.get("DisplayName") or ""))
        for z in shell.powershell_json(
            "Get-TimeZone -ListAvailable | Select-Object Id, DisplayName"
        )
        if z.get("Id")
    ]
    return sorted(zones, key=lambda z: z.id)


def get_current_time_zone(shell) -> str:
    return shell.powershell("(Get-TimeZone).Id").strip()


def set_time_zone(shell, zone_id: str) -> None:
    shell.powershell(f"Set-TimeZone -Id {quote(zone_id)}")
    log.info("Time zone set to %s", zone_id)
