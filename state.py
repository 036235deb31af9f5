from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, TYPE_CHECKING

from validators import mask_to_prefix

if TYPE_CHECKING:
    from system.timezone import TimeZoneEntry

@dataclass
class RunContext:
    # Static IP step
    static_ip_configured: bool = False
    gateway: str = ""
    adapter_name: str = ""
    ip_cidr: str = ""

    # Hostname step
    hostname: str = ""
    reboot_required: bool = False

    # Time-zone step
    time_zone: str = ""

@dataclass(frozen=True)
class StaticIpConfig:
    ip_address: str
    subnet_mask: str
    gateway: str
    dns_server: str
    prefix_len: int

    @classmethod
    def from_input(
        cls, ip_address: str, subnet_mask: str, gateway: str, dns_server: str
    ) -> "StaticIpConfig":
        """Build from raw answers. Raises UnsupportedMaskError for a bad mask."""
        mask = subnet_mask.strip()
        return cls(
            ip_address=ip_address.strip(),
            subnet_mask=mask,
            gateway=gateway.strip(),
            dns_server=dns_server.strip(),
            prefix_len=mask_to_prefix(mask),
        )

    @property
    def ip_cidr(self) -> str:
        return f"{self.ip_address}/{self.prefix_len}"

@dataclass(frozen=True)
class HostnamePlan:
    new_name: str
    current_name: str
    is_domain_controller: bool = False

    @property
    def needs_rename(self) -> bool:
        return self.new_name.lower() != self.current_name.lower()

@dataclass
class TimeZoneChoice:
    zones: List["TimeZoneEntry"] = field(default_factory=list)
    selected_index: Optional[int] = None

    @property
    def identifier(self) -> Optional[str]:
        if self.selected_index is None:
            return None
        return self.zones[self.selected_index].id
