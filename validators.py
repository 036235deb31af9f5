from __future__ import annotations
import re
from typing import Tuple

MASK_PREFIXES = {
    "255.0.0.0": 8,
    "255.255.0.0": 16,
    "255.255.255.0": 24,
    "255.255.255.128": 25,
    "255.255.255.192": 26,
    "255.255.255.224": 27,
    "255.255.255.240": 28,
    "255.255.255.248": 29,
    "255.255.255.252": 30,
}

HOSTNAME_MAX_LEN = 63
_HOSTNAME_CHARS = re.compile(r"[A-Za-z0-9-]+")


class UnsupportedMaskError(ValueError):
    def __init__(self, mask: str):
        super().__init__(f"Unsupported subnet mask: {mask}")
        self.mask = mask


def mask_to_prefix(mask: str) -> int:
    """'255.255.255.0' -> 24. Raises UnsupportedMaskError for any other mask."""
    try:
        return MASK_PREFIXES[mask]
    except KeyError:
        raise UnsupportedMaskError(mask) from None


def validate_hostname(name: str) -> Tuple[bool, str]:
    if not 1 <= len(name) <= HOSTNAME_MAX_LEN:
        return False, f"Hostname must be 1-{HOSTNAME_MAX_LEN} characters, got {len(name)}."
    if name.isdigit():
        return False, f"'{name}' is all numeric."
    if name.startswith("-") or name.endswith("-"):
        return False, f"'{name}' must not start or end with a hyphen."
    if not _HOSTNAME_CHARS.fullmatch(name):
        return False, f"'{name}' may only contain letters, digits and hyphens."
    return True, ""

def is_valid_hostname(name: str) -> bool:
    return validate_hostname(name)[0]

def validate_mandatory(value: str) -> Tuple[bool, str]:
    if value is None or not value.strip():
        return False, "A value is required."
    return True, ""

def validate_yes_no(value: str) -> Tuple[bool, str]:
    if value.strip().lower() in ("y", "yes", "n", "no"):
        return True, ""
    return False, "Please answer Y or N."

def validate_index(count: int):
    """Return a validator accepting a 1-based index in [1, count]."""
    def _validate(value: str) -> Tuple[bool, str]:
        text = value.strip()
        if not (text.isascii() and text.isdigit()):
            return False, f"'{value}' is not a number."
        if not 1 <= int(text) <= count:
            return False, f"Selection must be between 1 and {count}."
        return True, ""
    return _validate
