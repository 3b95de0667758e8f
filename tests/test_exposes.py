"""Tests for exposed capability descriptors."""

import pytest

import adurosmart.exposes as e
from adurosmart.exposes import (
    Access,
    BinaryExpose,
    EntityPlatform,
    EntityType,
    LightExpose,
    NumericExpose,
)
from adurosmart.exposes.units import UnitOfTime
from adurosmart.exceptions import InvalidValue


@pytest.fixture
def brightness_level() -> NumericExpose:
    return e.numeric(
        "dimmer_min_brightness_level",
        Access.STATE_SET,
        value_min=1,
        value_max=100,
        value_step=1,
    )


@pytest.mark.parametrize(("value", "result"), [(1, 1), (100, 100), ("50", 50)])
def test_numeric_accepts_boundaries(brightness_level, value, result):
    assert brightness_level.validate(value) == result


@pytest.mark.parametrize("value", [0, 101, -5, "101", "bright", None])
def test_numeric_rejects_out_of_range(brightness_level, value):
    with pytest.raises(InvalidValue) as exc_info:
        brightness_level.validate(value)

    assert exc_info.value.key == "dimmer_min_brightness_level"
    assert "between 1 and 100" in str(exc_info.value)


def test_numeric_float():
    expose = e.numeric("level", Access.SET, value_min=0, value_max=1)
    assert expose.validate(0.5) == 0.5


def test_numeric_unbounded():
    expose = e.numeric("level", Access.SET)
    assert expose.validate(123456) == 123456


def test_numeric_bad_range():
    with pytest.raises(ValueError):
        e.numeric("level", Access.SET, value_min=10, value_max=1)


def test_numeric_unit_enum():
    expose = e.numeric("duration", Access.ALL, unit=UnitOfTime.SECONDS)
    assert expose.unit == "s"


def test_read_only_rejects_set():
    with pytest.raises(InvalidValue):
        e.battery().validate(50)


def test_enum_validate():
    expose = e.enum("mode", Access.STATE_SET, ["a", "b"])

    assert expose.validate("a") == "a"
    assert expose.validate("7") == "7"
    assert expose.validate(3) == 3

    with pytest.raises(InvalidValue) as exc_info:
        expose.validate("purple")

    assert exc_info.value.accepted == ("a", "b")


def test_binary_validate():
    expose = e.binary("alarm", Access.SET, "ON", "OFF")

    assert expose.validate("ON") == "ON"
    assert expose.validate("OFF") == "OFF"

    with pytest.raises(InvalidValue):
        expose.validate("MAYBE")


@pytest.mark.parametrize(
    ("expose", "platform"),
    [
        (e.enum("mode", Access.ALL, ["a"]), EntityPlatform.SELECT),
        (e.enum("mode", Access.STATE, ["a"]), EntityPlatform.SENSOR),
        (e.numeric("level", Access.STATE_SET), EntityPlatform.NUMBER),
        (e.power(), EntityPlatform.SENSOR),
        (e.binary("alarm", Access.SET, "ON", "OFF"), EntityPlatform.SWITCH),
        (e.tamper(), EntityPlatform.BINARY_SENSOR),
        (e.switch(), EntityPlatform.SWITCH),
        (e.light(), EntityPlatform.LIGHT),
        (e.warning(), EntityPlatform.SIREN),
    ],
)
def test_entity_platform(expose, platform):
    assert expose.entity_platform == platform


def test_access_flags():
    assert Access.STATE in Access.ALL
    assert Access.SET in Access.STATE_SET
    assert Access.GET not in Access.STATE_SET
    assert Access.ALL == Access.STATE | Access.SET | Access.GET


def test_light_features():
    light = e.light(color_temp_range=(153, 500), color_modes=("xy", "hs"))

    assert isinstance(light, LightExpose)
    assert light.color_temp_range == (153, 500)
    assert light.color_modes == ("xy", "hs")
    assert [feature.name for feature in light.features] == [
        "state",
        "brightness",
        "color_temp",
        "color_xy",
        "color_hs",
    ]

    color_temp = light.features[2]
    assert color_temp.value_min == 153
    assert color_temp.value_max == 500
    assert color_temp.unit == "mired"


def test_light_validate():
    light = e.light(color_temp_range=(153, 500))

    assert light.validate({"state": "ON", "brightness": "254"}) == {
        "state": "ON",
        "brightness": 254,
    }

    with pytest.raises(InvalidValue):
        light.validate({"color_temp": 600})

    with pytest.raises(InvalidValue):
        light.validate({"color_xy": {"x": 0.1, "y": 0.2}})

    with pytest.raises(InvalidValue):
        light.validate("ON")


def test_warning_validate():
    warning = e.warning()

    assert warning.validate({"mode": "burglar", "duration": 10}) == {
        "mode": "burglar",
        "duration": 10,
    }

    with pytest.raises(InvalidValue):
        warning.validate({"mode": "party"})


def test_presets():
    assert e.battery().entity_type == EntityType.DIAGNOSTIC
    assert e.battery().unit == "%"
    assert e.power().unit == "W"
    assert e.current().unit == "A"
    assert e.voltage().unit == "V"
    assert e.power_on_behavior().values == ("off", "on", "toggle", "previous")
    assert e.power_on_behavior().entity_platform == EntityPlatform.SELECT
    assert isinstance(e.tamper(), BinaryExpose)
    assert e.action(["on", "off"]).values == ("on", "off")
    assert e.action(["on"]).access == Access.STATE


def test_exposes_are_hashable():
    assert len({e.light(), e.light(), e.switch()}) == 2
