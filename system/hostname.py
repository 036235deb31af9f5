"""
Hostname detection and renaming.

A host that is a live domain controller cannot simply be renamed: its
directory identity has to move through netdom's alternate-name procedure.
Everything else gets a forced Rename-Computer. Both need a reboot.
"""
from __future__ import annotations
from abc import ABC, abstractmethod

from shell import ShellError, quote
from state import HostnamePlan
from logger import log


def get_current_hostname(shell) -> str:
    return shell.powershell("[Environment]::MachineName").strip()


def get_domain_suffix(shell) -> str:
    return shell.powershell("(Get-CimInstance -ClassName Win32_ComputerSystem).Domain").strip()


def is_domain_controller(shell) -> bool:
    """
    True only if the AD DS role is installed and this host answers as a
    domain controller. Any query failure counts as "not a DC".
    """
    try:
        installed = shell.powershell(
            "(Get-WindowsFeature -Name AD-Domain-Services).Installed"
        ).strip().lower() == "true"
    except ShellError as e:
        log.warning("AD DS role query failed, assuming not a domain controller: %s", e)
        return False
    if not installed:
        return False
    try:
        shell.powershell(
            "Import-Module ActiveDirectory; "
            "Get-ADDomainController -Identity $env:COMPUTERNAME | Out-Null"
        )
    except ShellError as e:
        log.warning("Domain controller query failed, assuming not a domain controller: %s", e)
        return False
    log.info("Host is an active domain controller")
    return True


class RenameStrategy(ABC):
    """How a host gets its new name."""

    @property
    @abstractmethod
    def label(self) -> str:
        pass

    @abstractmethod
    def rename(self, shell, plan: HostnamePlan) -> None:
        """Rename the host. Raises ShellError on failure."""


class StandardRename(RenameStrategy):
    label = "standard rename"

    def rename(self, shell, plan: HostnamePlan) -> None:
        shell.powershell(f"Rename-Computer -NewName {quote(plan.new_name)} -Force")
        log.info("Rename-Computer %s -> %s", plan.current_name, plan.new_name)


class DirectoryRoleAwareRename(RenameStrategy):
    """add alternate name -> make it primary -> remove the old name."""

    label = "domain controller rename"

    def rename(self, shell, plan: HostnamePlan) -> None:
        domain = get_domain_suffix(shell)
        old_fqdn = f"{plan.current_name}.{domain}"
        new_fqdn = f"{plan.new_name}.{domain}"
        phases = [
            (old_fqdn, f"/add:{new_fqdn}"),
            (old_fqdn, f"/makeprimary:{new_fqdn}"),
            (new_fqdn, f"/remove:{old_fqdn}"),
        ]
        for target, phase in phases:
            shell.execute(["netdom", "computername", target, phase])
            log.info("netdom computername %s %s", target, phase)


def select_rename_strategy(plan: HostnamePlan) -> RenameStrategy:
    if plan.is_domain_controller:
        return DirectoryRoleAwareRename()
    return StandardRename()
