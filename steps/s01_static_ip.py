from __future__ import annotations
from network.adapters import list_adapters, find_adapter
from network.ipconfig import StaticIpManager, ApplyError
from shell import ShellError
from state import StaticIpConfig
from validators import UnsupportedMaskError
from prompts import confirm, read_mandatory
from steps.result import StepResult
from logger import log


def configure_static_ip(ctx, operator, shell, settings) -> StepResult:
    """Optionally give one active adapter a static IPv4 configuration."""
    attempts = settings.prompt_attempts
    if not confirm(operator.ask, "Configure a static IP address? (Y/N)",
                   max_attempts=attempts, on_invalid=operator.reject):
        log.info("Static IP: declined by operator")
        return StepResult.skipped("Static IP configuration skipped.")

    try:
        adapters = list_adapters(shell)
    except ShellError as e:
        return StepResult.fatal(f"Could not enumerate network adapters: {e}")
    if not adapters:
        return StepResult.fatal("No active network adapters found.")

    operator.info("Active network adapters:")
    for adapter in adapters:
        operator.info("  " + adapter.display_str())

    selection = read_mandatory(operator.ask, "Enter the adapter index", attempts)
    adapter = find_adapter(adapters, selection)
    if adapter is None:
        return StepResult.fatal(f"Invalid adapter selection: {selection}")
    log.info("Static IP: selected adapter %s (%s)", adapter.index, adapter.name)

    ip = read_mandatory(operator.ask, "IPv4 address", attempts)
    mask = read_mandatory(operator.ask, "Subnet mask (e.g. 255.255.255.0)", attempts)
    gateway = read_mandatory(operator.ask, "Default gateway", attempts)
    dns = read_mandatory(operator.ask, "DNS server", attempts)
    try:
        config = StaticIpConfig.from_input(ip, mask, gateway, dns)
    except UnsupportedMaskError as e:
        return StepResult.fatal(str(e))

    operator.info(
        f"Applying {config.ip_cidr} gw {config.gateway} dns {config.dns_server} "
        f"to {adapter.name}…"
    )
    manager = StaticIpManager(shell, adapter.index)
    try:
        manager.apply(config)
    except ApplyError as e:
        if manager.address_assigned:
            _record(ctx, adapter, config)
        return StepResult.failed(f"Static IP configuration incomplete: {e}")

    _record(ctx, adapter, config)
    return StepResult.ok(f"{adapter.name} configured with {config.ip_cidr}.")


def _record(ctx, adapter, config: StaticIpConfig) -> None:
    # The connectivity step pings this gateway later
    ctx.static_ip_configured = True
    ctx.gateway = config.gateway
    ctx.adapter_name = adapter.name
    ctx.ip_cidr = config.ip_cidr
