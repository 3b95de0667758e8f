"""Capability descriptors exposed to the host runtime."""

from __future__ import annotations

from enum import Enum, Flag
import typing

import attrs
import voluptuous as vol

from adurosmart.config.validators import cv_integer
from adurosmart.exceptions import InvalidValue
from adurosmart.exposes.units import (
    MIRED,
    PERCENTAGE,
    UnitOfElectricCurrent,
    UnitOfElectricPotential,
    UnitOfPower,
    UnitOfTime,
)

# pylint: disable=too-few-public-methods


class Access(Flag):
    """How a capability may be used."""

    NONE = 0
    STATE = 1  # published in the state
    SET = 2  # can be written
    GET = 4  # can be explicitly read

    STATE_SET = STATE | SET
    STATE_GET = STATE | GET
    ALL = STATE | SET | GET


class EntityType(Enum):
    """Entity type."""

    CONFIG = "config"
    DIAGNOSTIC = "diagnostic"
    STANDARD = "standard"


class EntityPlatform(Enum):
    """Entity platform."""

    BINARY_SENSOR = "binary_sensor"
    LIGHT = "light"
    NUMBER = "number"
    SELECT = "select"
    SENSOR = "sensor"
    SIREN = "siren"
    SWITCH = "switch"


def _unit_value(unit: str | Enum | None) -> str | None:
    if isinstance(unit, Enum):
        return unit.value
    return unit


@attrs.define(frozen=True, kw_only=True, repr=True)
class Expose:
    """A single exposed capability."""

    name: str = attrs.field(validator=attrs.validators.instance_of(str))
    access: Access = attrs.field(default=Access.STATE)
    label: str | None = attrs.field(default=None)
    description: str | None = attrs.field(default=None)
    entity_type: EntityType = attrs.field(default=EntityType.STANDARD)

    @property
    def settable(self) -> bool:
        return Access.SET in self.access

    @property
    def entity_platform(self) -> EntityPlatform:
        return EntityPlatform.SENSOR

    def validate(self, value: typing.Any) -> typing.Any:
        """Validate a user supplied value before it is written."""
        if not self.settable:
            raise InvalidValue(value, self.name, reason=f"{self.name} is read-only")
        return value


@attrs.define(frozen=True, kw_only=True, repr=True)
class EnumExpose(Expose):
    """Exposed capability with a closed set of labels."""

    values: tuple[str, ...] = attrs.field(converter=tuple)

    @property
    def entity_platform(self) -> EntityPlatform:
        return EntityPlatform.SELECT if self.settable else EntityPlatform.SENSOR

    def validate(self, value: typing.Any) -> typing.Any:
        super().validate(value)

        if value in self.values:
            return value

        # Literal raw values are passed through so unlisted firmware values
        # remain writable
        try:
            cv_integer(value)
        except vol.Invalid as exc:
            raise InvalidValue(value, self.name, self.values) from exc

        return value


@attrs.define(frozen=True, kw_only=True, repr=True)
class NumericExpose(Expose):
    """Exposed numeric capability with an optional inclusive range."""

    value_min: float | None = attrs.field(default=None)
    value_max: float | None = attrs.field(default=None)
    value_step: float | None = attrs.field(default=None)
    unit: str | None = attrs.field(default=None, converter=_unit_value)

    @value_max.validator
    def _check_range(self, attribute, value) -> None:
        if value is None or self.value_min is None:
            return
        if value < self.value_min:
            raise ValueError(
                f"{self.name}: value_max {value} is below value_min {self.value_min}"
            )

    @property
    def entity_platform(self) -> EntityPlatform:
        return EntityPlatform.NUMBER if self.settable else EntityPlatform.SENSOR

    @property
    def schema(self) -> vol.Schema:
        return vol.Schema(
            vol.All(
                vol.Any(cv_integer, vol.Coerce(float)),
                vol.Range(min=self.value_min, max=self.value_max),
            )
        )

    def validate(self, value: typing.Any) -> typing.Any:
        super().validate(value)

        try:
            return self.schema(value)
        except vol.Invalid as exc:
            raise InvalidValue(
                value,
                self.name,
                reason=(
                    f"Invalid value {value!r} for {self.name!r}: expected a number"
                    f" between {self.value_min} and {self.value_max}"
                ),
            ) from exc


@attrs.define(frozen=True, kw_only=True, repr=True)
class BinaryExpose(Expose):
    """Exposed capability with exactly two values."""

    value_on: typing.Any = attrs.field(default=True)
    value_off: typing.Any = attrs.field(default=False)

    @property
    def entity_platform(self) -> EntityPlatform:
        return EntityPlatform.SWITCH if self.settable else EntityPlatform.BINARY_SENSOR

    def validate(self, value: typing.Any) -> typing.Any:
        super().validate(value)

        if value not in (self.value_on, self.value_off):
            raise InvalidValue(value, self.name, (self.value_on, self.value_off))

        return value


@attrs.define(frozen=True, kw_only=True, repr=True)
class CompositeExpose(Expose):
    """A group of capabilities written together, such as a siren warning."""

    features: tuple[Expose, ...] = attrs.field(factory=tuple, converter=tuple)
    platform: EntityPlatform = attrs.field(default=EntityPlatform.SENSOR)

    @property
    def entity_platform(self) -> EntityPlatform:
        return self.platform

    def validate(self, value: typing.Any) -> typing.Any:
        super().validate(value)

        if not isinstance(value, dict):
            raise InvalidValue(value, self.name, reason=f"{self.name} expects a dict")

        features = {feature.name: feature for feature in self.features}
        unknown = set(value) - set(features)
        if unknown:
            raise InvalidValue(
                value, self.name, reason=f"Unknown {self.name} keys: {sorted(unknown)}"
            )

        return {key: features[key].validate(val) for key, val in value.items()}


@attrs.define(frozen=True, kw_only=True, repr=True)
class LightExpose(CompositeExpose):
    """A light with optional brightness, color temperature and color."""

    color_temp_range: tuple[int, int] | None = attrs.field(default=None)
    color_modes: tuple[str, ...] = attrs.field(factory=tuple, converter=tuple)


def enum(
    name: str,
    access: Access,
    values: typing.Iterable[str],
    **kwargs: typing.Any,
) -> EnumExpose:
    return EnumExpose(name=name, access=access, values=tuple(values), **kwargs)


def numeric(name: str, access: Access, **kwargs: typing.Any) -> NumericExpose:
    return NumericExpose(name=name, access=access, **kwargs)


def binary(
    name: str,
    access: Access,
    value_on: typing.Any,
    value_off: typing.Any,
    **kwargs: typing.Any,
) -> BinaryExpose:
    return BinaryExpose(
        name=name, access=access, value_on=value_on, value_off=value_off, **kwargs
    )


def action(values: typing.Iterable[str]) -> EnumExpose:
    return enum(
        "action", Access.STATE, values, description="Triggered action (e.g. a button click)"
    )


def battery() -> NumericExpose:
    return numeric(
        "battery",
        Access.STATE_GET,
        value_min=0,
        value_max=100,
        unit=PERCENTAGE,
        entity_type=EntityType.DIAGNOSTIC,
        description="Remaining battery in %",
    )


def power() -> NumericExpose:
    return numeric(
        "power",
        Access.STATE_GET,
        unit=UnitOfPower.WATT,
        description="Instantaneous measured power",
    )


def current() -> NumericExpose:
    return numeric(
        "current",
        Access.STATE_GET,
        unit=UnitOfElectricCurrent.AMPERE,
        description="Instantaneous measured electrical current",
    )


def voltage() -> NumericExpose:
    return numeric(
        "voltage",
        Access.STATE_GET,
        unit=UnitOfElectricPotential.VOLT,
        description="Measured electrical potential value",
    )


def power_on_behavior() -> EnumExpose:
    return enum(
        "power_on_behavior",
        Access.ALL,
        ["off", "on", "toggle", "previous"],
        entity_type=EntityType.CONFIG,
        description="Behavior when the device is powered on after power loss",
    )


def tamper() -> BinaryExpose:
    return binary(
        "tamper",
        Access.STATE,
        True,
        False,
        entity_type=EntityType.DIAGNOSTIC,
        description="Indicates whether the device is tampered",
    )


def switch() -> CompositeExpose:
    return CompositeExpose(
        name="switch",
        access=Access.ALL,
        platform=EntityPlatform.SWITCH,
        features=(binary("state", Access.ALL, "ON", "OFF"),),
    )


def light(
    *,
    brightness: bool = True,
    color_temp_range: tuple[int, int] | None = None,
    color_modes: typing.Iterable[str] = (),
) -> LightExpose:
    """Build a light capability.

    ``color_temp_range`` is in mireds. ``color_modes`` lists the supported
    color spaces, for example ``("xy", "hs")``.
    """
    features: list[Expose] = [binary("state", Access.ALL, "ON", "OFF")]

    if brightness:
        features.append(
            numeric("brightness", Access.ALL, value_min=0, value_max=254)
        )

    if color_temp_range is not None:
        features.append(
            numeric(
                "color_temp",
                Access.ALL,
                value_min=color_temp_range[0],
                value_max=color_temp_range[1],
                unit=MIRED,
            )
        )

    color_modes = tuple(color_modes)
    for mode in color_modes:
        features.append(
            Expose(name=f"color_{mode}", access=Access.ALL, label=f"Color ({mode})")
        )

    return LightExpose(
        name="light",
        access=Access.ALL,
        platform=EntityPlatform.LIGHT,
        features=tuple(features),
        color_temp_range=color_temp_range,
        color_modes=color_modes,
    )


def warning() -> CompositeExpose:
    return CompositeExpose(
        name="warning",
        access=Access.SET,
        platform=EntityPlatform.SIREN,
        features=(
            enum(
                "mode",
                Access.SET,
                ["stop", "burglar", "fire", "emergency", "police_panic"],
            ),
            enum("level", Access.SET, ["low", "medium", "high", "very_high"]),
            enum("strobe_level", Access.SET, ["low", "medium", "high", "very_high"]),
            binary("strobe", Access.SET, True, False),
            numeric(
                "duration",
                Access.SET,
                value_min=0,
                value_max=0xFFFF,
                unit=UnitOfTime.SECONDS,
            ),
        ),
    )
