"""Generic codec for manufacturer specific attributes."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import logging
import typing

import attrs
from frozendict import frozendict
import voluptuous as vol

from adurosmart.config.validators import cv_integer
from adurosmart.const import (
    DEFAULT_ENDPOINT_ID,
    MANUFACTURER_CODE,
    NUMERIC_SUFFIX,
    UNKNOWN,
)
from adurosmart.exceptions import AttributeReadFailure, InvalidValue
from adurosmart.exposes import Access, EntityType, EnumExpose, NumericExpose
from adurosmart.zcl import ClusterId
from adurosmart.zcl.foundation import Attribute, DataTypeId, TypeValue

if typing.TYPE_CHECKING:
    from adurosmart.typing import AttributeEntity, DeviceType

_LOGGER = logging.getLogger(__name__)


def _to_value_map(
    value: Mapping[int, str] | Iterable[str] | None,
) -> frozendict[int, str] | None:
    """Labels given as a sequence are numbered from zero."""
    if value is None:
        return None

    if isinstance(value, Mapping):
        return frozendict({int(raw): str(label) for raw, label in value.items()})

    return frozendict(enumerate(value))


def _to_value_range(
    value: tuple[int, int] | tuple[int, int, int] | None,
) -> tuple[int, int, int] | None:
    if value is None:
        return None

    if len(value) == 2:
        return (value[0], value[1], 1)

    return tuple(value)


@attrs.define(frozen=True, kw_only=True, repr=True)
class AttributeCodec:
    """Maps one numeric device attribute to a user facing property.

    An attribute is either enumerated, with a ``value_map`` from raw integers to
    labels, or numeric, with an optional ``value_range`` of ``(min, max, step)``.
    The range only describes the exposed capability: the codec itself accepts
    any integer.
    """

    exposed_key: str = attrs.field(validator=attrs.validators.instance_of(str))
    attribute_id: int = attrs.field(
        validator=[attrs.validators.ge(0x0000), attrs.validators.le(0xFFFF)]
    )
    wire_type: DataTypeId = attrs.field(converter=DataTypeId)
    value_map: frozendict[int, str] | None = attrs.field(
        default=None, converter=_to_value_map
    )
    value_range: tuple[int, int, int] | None = attrs.field(
        default=None, converter=_to_value_range
    )
    supports_get: bool = attrs.field(default=False)
    cluster_id: int = attrs.field(default=ClusterId.Basic)
    endpoint_id: int = attrs.field(default=DEFAULT_ENDPOINT_ID)
    manufacturer_code: int | None = attrs.field(default=MANUFACTURER_CODE)
    label: str | None = attrs.field(default=None)
    unit: str | None = attrs.field(default=None)
    description: str | None = attrs.field(default=None)
    value_lookup: frozendict[str, int] | None = attrs.field(init=False, eq=False)

    @value_lookup.default
    def _value_lookup(self) -> frozendict[str, int] | None:
        if self.value_map is None:
            return None
        return frozendict({label: raw for raw, label in self.value_map.items()})

    def __attrs_post_init__(self) -> None:
        if self.value_map is not None and self.value_range is not None:
            raise ValueError(
                f"{self.exposed_key}: an attribute is either enumerated or ranged"
            )

        if self.value_map is not None and len(self.value_lookup) != len(
            self.value_map
        ):
            raise ValueError(f"{self.exposed_key}: duplicate labels in {self.value_map}")

        if self.value_range is not None:
            value_min, value_max, _ = self.value_range
            if value_min > value_max:
                raise ValueError(
                    f"{self.exposed_key}: invalid range {self.value_range}"
                )

    @property
    def numeric_key(self) -> str:
        return f"{self.exposed_key}{NUMERIC_SUFFIX}"

    @property
    def is_enumerated(self) -> bool:
        return self.value_map is not None

    @property
    def labels(self) -> tuple[str, ...]:
        if self.value_map is None:
            return ()
        return tuple(self.value_map.values())

    @property
    def expose(self) -> EnumExpose | NumericExpose:
        """The capability descriptor for this attribute."""
        access = Access.ALL if self.supports_get else Access.STATE_SET

        if self.is_enumerated:
            return EnumExpose(
                name=self.exposed_key,
                access=access,
                values=self.labels,
                label=self.label,
                description=self.description,
                entity_type=EntityType.CONFIG,
            )

        value_min, value_max, value_step = self.value_range or (None, None, None)
        return NumericExpose(
            name=self.exposed_key,
            access=access,
            value_min=value_min,
            value_max=value_max,
            value_step=value_step,
            unit=self.unit,
            label=self.label,
            description=self.description,
            entity_type=EntityType.CONFIG,
        )

    def decode(self, data: Mapping[int, typing.Any]) -> dict[str, typing.Any] | None:
        """Decode an attribute report or read response.

        Returns ``None`` when the attribute is absent from ``data``, so that a
        present zero is never confused with a missing value.
        """
        if self.attribute_id not in data:
            return None

        value = data[self.attribute_id]
        if isinstance(value, TypeValue):
            value = value.value

        if not self.is_enumerated:
            return {self.numeric_key: value}

        try:
            label = self.value_map.get(value, UNKNOWN)
        except TypeError:
            label = UNKNOWN

        if label == UNKNOWN:
            _LOGGER.debug(
                "Unrecognized %s value %r (attribute 0x%04X)",
                self.exposed_key,
                value,
                self.attribute_id,
            )

        return {self.exposed_key: label, self.numeric_key: value}

    def resolve(self, value: typing.Any) -> int:
        """Resolve a user supplied label or literal integer to a raw value."""
        if self.is_enumerated and isinstance(value, str):
            raw = self.value_lookup.get(value)
            if raw is not None:
                return raw

        try:
            return cv_integer(value)
        except vol.Invalid as exc:
            raise InvalidValue(value, self.exposed_key, self.labels) from exc

    def _manufacturer(self, manufacturer: int | None) -> int | None:
        if manufacturer is None:
            return self.manufacturer_code
        return manufacturer

    async def convert_set(
        self,
        entity: AttributeEntity,
        value: typing.Any,
        *,
        manufacturer: int | None = None,
    ) -> dict[str, typing.Any]:
        """Write the value and return the state the device will report."""
        raw = self.resolve(value)

        _LOGGER.debug(
            "Writing %s=%r as 0x%04X:%s=%d",
            self.exposed_key,
            value,
            self.attribute_id,
            self.wire_type.name,
            raw,
        )
        await entity.write(
            self.cluster_id,
            [Attribute(self.attribute_id, TypeValue(self.wire_type, raw))],
            manufacturer=self._manufacturer(manufacturer),
        )

        return self.decode({self.attribute_id: raw})

    async def convert_get(
        self, entity: AttributeEntity, *, manufacturer: int | None = None
    ) -> None:
        """Request the attribute; the reply arrives through ``decode``."""
        if not self.supports_get:
            raise NotImplementedError(f"{self.exposed_key} cannot be read on demand")

        await entity.read(
            self.cluster_id,
            [self.attribute_id],
            manufacturer=self._manufacturer(manufacturer),
        )

    async def prime(
        self, device: DeviceType, *, manufacturer: int | None = None
    ) -> bool:
        """Best-effort read so the value is known before first use."""
        try:
            endpoint = device.get_endpoint(self.endpoint_id)
            _, failure = await endpoint.read(
                self.cluster_id,
                [self.attribute_id],
                manufacturer=self._manufacturer(manufacturer),
            )
        except Exception as exc:  # noqa: BLE001
            return self._read_failed(str(exc) or type(exc).__name__)

        if self.attribute_id in failure:
            return self._read_failed(f"status {failure[self.attribute_id]!r}")

        return True

    def _read_failed(self, reason: str) -> bool:
        _LOGGER.warning(
            "%s", AttributeReadFailure(self.exposed_key, self.attribute_id, reason)
        )
        return False


def build_codecs(
    table: Iterable[Mapping[str, typing.Any]], **defaults: typing.Any
) -> tuple[AttributeCodec, ...]:
    """Build codecs from a table of rows, applying shared ``defaults``."""
    codecs = tuple(AttributeCodec(**{**defaults, **row}) for row in table)

    seen_ids: set[tuple[int, int]] = set()
    seen_keys: set[str] = set()

    for codec in codecs:
        attr_key = (codec.cluster_id, codec.attribute_id)
        if attr_key in seen_ids:
            raise ValueError(
                f"Attribute 0x{codec.attribute_id:04X} is defined more than once"
            )
        if codec.exposed_key in seen_keys:
            raise ValueError(f"{codec.exposed_key!r} is defined more than once")

        seen_ids.add(attr_key)
        seen_keys.add(codec.exposed_key)

    return codecs
