"""Pairing time configure steps: binding, reporting and one-off reads."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
import logging
import typing

from adurosmart.const import DEFAULT_ENDPOINT_ID
from adurosmart.zcl import ClusterId

if typing.TYPE_CHECKING:
    from adurosmart.typing import DeviceType

_LOGGER = logging.getLogger(__name__)

ConfigureStep = Callable[["DeviceType", typing.Any], Awaitable[None]]

REPORT_INTERVAL_HOUR = 3600

ATTR_ON_OFF = 0x0000
ATTR_CURRENT_LEVEL = 0x0000
ATTR_RMS_VOLTAGE = 0x0505
ATTR_RMS_CURRENT = 0x0508
ATTR_ACTIVE_POWER = 0x050B
ATTR_AC_VOLTAGE_MULTIPLIER = 0x0600
ATTR_AC_VOLTAGE_DIVISOR = 0x0601
ATTR_AC_CURRENT_MULTIPLIER = 0x0602
ATTR_AC_CURRENT_DIVISOR = 0x0603
ATTR_AC_POWER_MULTIPLIER = 0x0604
ATTR_AC_POWER_DIVISOR = 0x0605
ATTR_ZONE_STATE = 0x0000
ATTR_IAS_CIE_ADDR = 0x0010
ATTR_ZONE_ID = 0x0011
ATTR_MAX_DURATION = 0x0000


def bind(
    clusters: Iterable[int], endpoint_id: int = DEFAULT_ENDPOINT_ID
) -> ConfigureStep:
    """Bind each cluster of the endpoint to the coordinator endpoint."""
    clusters = tuple(clusters)

    async def step(device: DeviceType, coordinator_endpoint: typing.Any) -> None:
        endpoint = device.get_endpoint(endpoint_id)
        for cluster_id in clusters:
            _LOGGER.debug(
                "Binding cluster 0x%04X on endpoint %d", cluster_id, endpoint_id
            )
            await endpoint.bind(cluster_id, coordinator_endpoint)

    return step


def configure_reporting(
    cluster_id: int,
    attribute: int,
    min_interval: int,
    max_interval: int,
    reportable_change: int,
    endpoint_id: int = DEFAULT_ENDPOINT_ID,
) -> ConfigureStep:
    async def step(device: DeviceType, coordinator_endpoint: typing.Any) -> None:
        endpoint = device.get_endpoint(endpoint_id)
        await endpoint.configure_reporting(
            cluster_id, attribute, min_interval, max_interval, reportable_change
        )

    return step


def read(
    cluster_id: int,
    attributes: Iterable[int],
    endpoint_id: int = DEFAULT_ENDPOINT_ID,
    manufacturer: int | None = None,
) -> ConfigureStep:
    """Read attributes once so the host caches their values."""
    attributes = tuple(attributes)

    async def step(device: DeviceType, coordinator_endpoint: typing.Any) -> None:
        endpoint = device.get_endpoint(endpoint_id)
        await endpoint.read(cluster_id, attributes, manufacturer=manufacturer)

    return step


def on_off(endpoint_id: int = DEFAULT_ENDPOINT_ID) -> ConfigureStep:
    return configure_reporting(
        ClusterId.OnOff, ATTR_ON_OFF, 0, REPORT_INTERVAL_HOUR, 0, endpoint_id
    )


def read_electrical_measurement_multiplier_divisors(
    endpoint_id: int = DEFAULT_ENDPOINT_ID,
) -> ConfigureStep:
    return read(
        ClusterId.ElectricalMeasurement,
        [
            ATTR_AC_VOLTAGE_MULTIPLIER,
            ATTR_AC_VOLTAGE_DIVISOR,
            ATTR_AC_CURRENT_MULTIPLIER,
            ATTR_AC_CURRENT_DIVISOR,
            ATTR_AC_POWER_MULTIPLIER,
            ATTR_AC_POWER_DIVISOR,
        ],
        endpoint_id,
    )


def rms_voltage(endpoint_id: int = DEFAULT_ENDPOINT_ID) -> ConfigureStep:
    return configure_reporting(
        ClusterId.ElectricalMeasurement,
        ATTR_RMS_VOLTAGE,
        5,
        REPORT_INTERVAL_HOUR,
        5,
        endpoint_id,
    )


def rms_current(endpoint_id: int = DEFAULT_ENDPOINT_ID) -> ConfigureStep:
    return configure_reporting(
        ClusterId.ElectricalMeasurement,
        ATTR_RMS_CURRENT,
        5,
        REPORT_INTERVAL_HOUR,
        50,
        endpoint_id,
    )


def active_power(endpoint_id: int = DEFAULT_ENDPOINT_ID) -> ConfigureStep:
    return configure_reporting(
        ClusterId.ElectricalMeasurement,
        ATTR_ACTIVE_POWER,
        5,
        REPORT_INTERVAL_HOUR,
        1,
        endpoint_id,
    )


def brightness(endpoint_id: int = DEFAULT_ENDPOINT_ID) -> ConfigureStep:
    return configure_reporting(
        ClusterId.LevelControl,
        ATTR_CURRENT_LEVEL,
        0,
        REPORT_INTERVAL_HOUR,
        1,
        endpoint_id,
    )
