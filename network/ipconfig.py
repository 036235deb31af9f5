from __future__ import annotations
from shell import ShellError, quote
from state import StaticIpConfig
from logger import log


class ApplyError(Exception):
    """A sub-step of applying a static configuration failed."""

    def __init__(self, stage: str, cause: ShellError):
        super().__init__(f"{stage} failed: {cause}")
        self.stage = stage
        self.cause = cause


class StaticIpManager:
    """Applies a static IPv4 configuration to one adapter, step by step."""

    def __init__(self, shell, if_index: int):
        self.shell = shell
        self.if_index = if_index
        # Set once the new address is in place, even if DNS fails later
        self.address_assigned = False

    # -- Individual sub-steps ------------------------------------------------

    def disable_dhcp(self) -> None:
        self.shell.powershell(
            f"Set-NetIPInterface -InterfaceIndex {self.if_index} "
            f"-AddressFamily IPv4 -Dhcp Disabled"
        )
        log.info("Disabled DHCP on interface %s", self.if_index)

    def remove_existing(self) -> None:
        """Drop current non-loopback IPv4 addresses and the default route."""
        self.shell.powershell(
            f"Get-NetIPAddress -InterfaceIndex {self.if_index} -AddressFamily IPv4 "
            f"-ErrorAction SilentlyContinue | "
            f"Where-Object {{ $_.IPAddress -notlike '127.*' }} | "
            f"Remove-NetIPAddress -Confirm:$false"
        )
        self.shell.powershell(
            f"Get-NetRoute -InterfaceIndex {self.if_index} -DestinationPrefix '0.0.0.0/0' "
            f"-ErrorAction SilentlyContinue | Remove-NetRoute -Confirm:$false"
        )
        log.info("Removed existing IPv4 addresses on interface %s", self.if_index)

    def assign_address(self, ip_address: str, prefix_len: int, gateway: str) -> None:
        self.shell.powershell(
            f"New-NetIPAddress -InterfaceIndex {self.if_index} "
            f"-IPAddress {quote(ip_address)} -PrefixLength {prefix_len} "
            f"-DefaultGateway {quote(gateway)} | Out-Null"
        )
        self.address_assigned = True
        log.info("Assigned %s/%s gw %s on interface %s",
                 ip_address, prefix_len, gateway, self.if_index)

    def set_dns(self, dns_server: str) -> None:
        self.shell.powershell(
            f"Set-DnsClientServerAddress -InterfaceIndex {self.if_index} "
            f"-ServerAddresses {quote(dns_server)}"
        )
        log.info("Set DNS server %s on interface %s", dns_server, self.if_index)

    # -- Apply ---------------------------------------------------------------

    def apply(self, config: StaticIpConfig) -> None:
        """
        Run every sub-step in order. The first failure raises ApplyError;
        earlier sub-steps are not undone.
        """
        stages = [
            ("Disabling DHCP", self.disable_dhcp, ()),
            ("Removing existing addresses", self.remove_existing, ()),
            ("Assigning address", self.assign_address,
             (config.ip_address, config.prefix_len, config.gateway)),
            ("Setting DNS server", self.set_dns, (config.dns_server,)),
        ]
        for stage, func, args in stages:
            try:
                func(*args)
            except ShellError as e:
                log.error("%s on interface %s failed: %s", stage, self.if_index, e)
                raise ApplyError(stage, e) from e
