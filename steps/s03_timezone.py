from __future__ import annotations
from shell import ShellError
from state import TimeZoneChoice
from system.timezone import list_time_zones, get_current_time_zone, set_time_zone
from prompts import choose_index
from steps.result import StepResult
from logger import log


def configure_time_zone(ctx, operator, shell, settings) -> StepResult:
    try:
        choice = TimeZoneChoice(zones=list_time_zones(shell))
    except ShellError as e:
        return StepResult.failed(f"Could not list time zones: {e}")
    if not choice.zones:
        return StepResult.failed("No time zones available.")

    operator.info("Available time zones:")
    for i, zone in enumerate(choice.zones, 1):
        operator.info(f"  {i:>3}. {zone.display_str()}")
    try:
        operator.info(f"Current time zone: {get_current_time_zone(shell)}")
    except ShellError as e:
        log.debug("Could not read current time zone: %s", e)

    choice.selected_index = choose_index(
        operator.ask, f"Select a time zone (1-{len(choice.zones)})", len(choice.zones),
        max_attempts=settings.prompt_attempts, on_invalid=operator.reject,
    )
    zone_id = choice.identifier
    try:
        set_time_zone(shell, zone_id)
    except ShellError as e:
        return StepResult.failed(f"Could not set time zone {zone_id}: {e}")

    ctx.time_zone = zone_id
    return StepResult.ok(f"Time zone set to {zone_id}.")
