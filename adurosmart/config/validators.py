from __future__ import annotations

import typing

import voluptuous as vol


def cv_boolean(value: bool | int | str) -> bool:
    """Validate and coerce a boolean value."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        value = value.lower().strip()
        if value in ("1", "true", "yes", "on", "enable"):
            return True
        if value in ("0", "false", "no", "off", "disable"):
            return False
    elif isinstance(value, int):
        return bool(value)
    raise vol.Invalid(f"invalid boolean '{value}' value")


def cv_hex(value: int | str) -> int:
    """Convert string with possible hex number into int."""
    if isinstance(value, int):
        return value

    if not isinstance(value, str):
        raise vol.Invalid(f"{value} is not a valid hex number")

    try:
        if value.startswith("0x"):
            value = int(value, base=16)
        else:
            value = int(value)
    except ValueError as err:
        raise vol.Invalid(f"Could not convert '{value}' to number") from err

    return value


def cv_integer(value: typing.Any) -> int:
    """Coerce a literal decimal integer, as typed by a user."""
    if isinstance(value, bool):
        return int(value)

    if isinstance(value, int):
        return value

    if isinstance(value, float) and value.is_integer():
        return int(value)

    if isinstance(value, str):
        try:
            return int(value.strip(), 10)
        except ValueError as err:
            raise vol.Invalid(f"{value!r} is not an integer") from err

    raise vol.Invalid(f"{value!r} is not an integer")


def cv_manufacturer_code(value: int | str) -> int:
    """Validate a 16 bit manufacturer code."""
    return vol.All(cv_hex, vol.Range(min=0x0000, max=0xFFFF))(value)
