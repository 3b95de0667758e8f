from unittest.mock import call

from adurosmart import reporting
from adurosmart.zcl import ClusterId

from .conftest import make_device


async def test_bind():
    device = make_device("AD-Dimmer", endpoint_ids=(1, 2))
    step = reporting.bind([ClusterId.OnOff, ClusterId.LevelControl], endpoint_id=2)

    await step(device, "coordinator")

    assert device.endpoints[2].bind.await_args_list == [
        call(ClusterId.OnOff, "coordinator"),
        call(ClusterId.LevelControl, "coordinator"),
    ]
    assert device.endpoints[1].bind.await_count == 0


async def test_configure_reporting_presets():
    device = make_device("AD-SmartPlug3001")
    endpoint = device.endpoints[1]

    for step in (
        reporting.on_off(),
        reporting.brightness(),
        reporting.rms_voltage(),
        reporting.rms_current(),
        reporting.active_power(),
    ):
        await step(device, None)

    assert endpoint.configure_reporting.await_args_list == [
        call(ClusterId.OnOff, 0x0000, 0, 3600, 0),
        call(ClusterId.LevelControl, 0x0000, 0, 3600, 1),
        call(ClusterId.ElectricalMeasurement, 0x0505, 5, 3600, 5),
        call(ClusterId.ElectricalMeasurement, 0x0508, 5, 3600, 50),
        call(ClusterId.ElectricalMeasurement, 0x050B, 5, 3600, 1),
    ]


async def test_read_multiplier_divisors():
    device = make_device("AD-SmartPlug3001")

    await reporting.read_electrical_measurement_multiplier_divisors()(device, None)

    assert device.endpoints[1].read.await_args == call(
        ClusterId.ElectricalMeasurement,
        (0x0600, 0x0601, 0x0602, 0x0603, 0x0604, 0x0605),
        manufacturer=None,
    )


async def test_read_with_manufacturer():
    device = make_device("Smart Siren")
    step = reporting.read(ClusterId.IasWd, [0x0000], manufacturer=0x122D)

    await step(device, None)

    assert device.endpoints[1].read.await_args == call(
        ClusterId.IasWd, (0x0000,), manufacturer=0x122D
    )
