"""AduroSmart ERIA devices."""

from __future__ import annotations

from adurosmart import reporting
from adurosmart.codec import build_codecs
from adurosmart.const import MANUFACTURER_CODE
from adurosmart.definitions import DefinitionBuilder
import adurosmart.exposes as e
from adurosmart.exposes import Access
from adurosmart.exposes.units import UnitOfTime
from adurosmart.zcl import ClusterId
from adurosmart.zcl.foundation import DataTypeId

DOUBLE_CLICK_SCENES = (
    "null",
    "on",
    "off",
    "dimming_up",
    "dimming_down",
    "dimming_to_brightest",
    "dimming_to_darkest",
)

# Manufacturer specific attributes of the Basic cluster on the DimmerM3002
DIMMER_ATTRIBUTES = (
    {
        "exposed_key": "dimmer_load_control_mode",
        "attribute_id": 0x7600,
        "wire_type": DataTypeId.uint8,
        "value_map": ("leading_edge_control", "trailing_edge_control"),
        "supports_get": True,
        "label": "Load Control Mode",
    },
    {
        "exposed_key": "dimmer_switch_mode",
        "attribute_id": 0x7700,
        "wire_type": DataTypeId.uint8,
        "value_map": ("momentary_switch", "toggle_switch", "roller_blind_switch"),
        "supports_get": True,
        "label": "Switch Mode",
    },
    {
        "exposed_key": "dimmer_invert_switch",
        "attribute_id": 0x7701,
        "wire_type": DataTypeId.bool_,
        "value_map": ("disabled", "enabled"),
        "label": "Invert Switch",
    },
    {
        "exposed_key": "dimmer_scene_activation",
        "attribute_id": 0x7702,
        "wire_type": DataTypeId.bool_,
        "value_map": ("disabled", "enabled"),
        "label": "Scene Activation",
    },
    {
        "exposed_key": "dimmer_s1_double_click_scene",
        "attribute_id": 0x7703,
        "wire_type": DataTypeId.uint8,
        "value_map": DOUBLE_CLICK_SCENES,
        "label": "S1 Double Click Scene",
    },
    {
        "exposed_key": "dimmer_s2_double_click_scene",
        "attribute_id": 0x7704,
        "wire_type": DataTypeId.uint8,
        "value_map": DOUBLE_CLICK_SCENES,
        "label": "S2 Double Click Scene",
    },
    {
        "exposed_key": "dimmer_min_brightness_level",
        "attribute_id": 0x7800,
        "wire_type": DataTypeId.uint8,
        "value_range": (1, 100, 1),
        "label": "Min Brightness Level",
    },
    {
        "exposed_key": "dimmer_max_brightness_level",
        "attribute_id": 0x7801,
        "wire_type": DataTypeId.uint8,
        "value_range": (1, 100, 1),
        "label": "Max Brightness Level",
    },
    {
        "exposed_key": "dimmer_manual_dimming_step_size",
        "attribute_id": 0x7802,
        "wire_type": DataTypeId.uint8,
        "value_range": (1, 25, 1),
        "label": "Manual Dimming Step Size",
    },
    {
        "exposed_key": "dimmer_manual_dimming_time",
        "attribute_id": 0x7803,
        "wire_type": DataTypeId.uint16,
        "value_range": (100, 10000, 100),
        "unit": UnitOfTime.MILLISECONDS.value,
        "label": "Manual Dimming Time",
    },
)

DIMMER_CODECS = build_codecs(
    DIMMER_ATTRIBUTES,
    cluster_id=ClusterId.Basic,
    manufacturer_code=MANUFACTURER_CODE,
)

COLOR_TEMP_RANGE = (153, 500)
DEFAULT_COLOR_TEMP_RANGE = (150, 500)

ON_OFF_REPORTING = (
    reporting.bind([ClusterId.OnOff]),
    reporting.on_off(),
)

LIGHT_REPORTING = (
    reporting.bind([ClusterId.OnOff, ClusterId.LevelControl]),
    reporting.on_off(),
    reporting.brightness(),
)

ELECTRICITY_METER_REPORTING = (
    reporting.bind([ClusterId.ElectricalMeasurement]),
    reporting.read_electrical_measurement_multiplier_divisors(),
    reporting.rms_voltage(),
    reporting.rms_current(),
    reporting.active_power(),
)


(
    DefinitionBuilder("15090054", description="Remote scene controller")
    .zigbee_model("ADUROLIGHT_CSC")
    .from_zigbee("battery", "command_toggle", "command_recall")
    .exposes(
        e.battery(), e.action(["toggle", "recall_253", "recall_254", "recall_255"])
    )
    .add_to_registry()
)

(
    DefinitionBuilder(
        "81848", description="ERIA smart plug (with power measurements)"
    )
    .zigbee_model("AD-SmartPlug3001")
    .from_zigbee("on_off", "electrical_measurement")
    .to_zigbee("on_off")
    .exposes(e.switch(), e.power(), e.current(), e.voltage())
    .configure(
        reporting.bind([ClusterId.OnOff, ClusterId.ElectricalMeasurement]),
        reporting.on_off(),
        reporting.read_electrical_measurement_multiplier_divisors(),
        reporting.rms_voltage(),
        reporting.rms_current(),
        reporting.active_power(),
    )
    .add_to_registry()
)

(
    DefinitionBuilder(
        "81809/81813",
        description="ERIA colors and white shades smart light bulb A19/BR30",
    )
    .zigbee_model("ZLL-ExtendedColo", "ZLL-ExtendedColor")
    .exposes(e.light(color_temp_range=DEFAULT_COLOR_TEMP_RANGE, color_modes=("xy",)))
    .endpoint(2)
    .add_to_registry()
)

(
    DefinitionBuilder(
        "81809FBA",
        description="ERIA colors and white shades smart light bulb A19/BR30",
    )
    .zigbee_model("AD-RGBW3001")
    .exposes(e.light(color_temp_range=COLOR_TEMP_RANGE, color_modes=("xy", "hs")))
    .add_to_registry()
)

(
    DefinitionBuilder("81895", description="ERIA E14 Candle Color")
    .zigbee_model("AD-E14RGBW3001")
    .exposes(e.light(color_temp_range=COLOR_TEMP_RANGE, color_modes=("xy",)))
    .add_to_registry()
)

(
    DefinitionBuilder("81810", description="Zigbee Aduro Eria B22 bulb - warm white")
    .zigbee_model("AD-DimmableLight3001")
    .exposes(e.light())
    .add_to_registry()
)

(
    DefinitionBuilder("81825", description="ERIA smart wireless dimming switch")
    .zigbee_model("Adurolight_NCC")
    .from_zigbee("command_on", "command_off", "command_step")
    .exposes(e.action(["on", "off", "up", "down"]))
    .configure(reporting.bind([ClusterId.OnOff, ClusterId.LevelControl]))
    .add_to_registry()
)

(
    DefinitionBuilder("81849", description="ERIA built-in multi dimmer module 300W")
    .zigbee_model("AD-Dimmer")
    .exposes(e.light())
    .configure(*LIGHT_REPORTING)
    .add_to_registry()
)

(
    DefinitionBuilder("81855", description="ERIA smart plug (dimmer)")
    .zigbee_model("BDP3001")
    .exposes(e.light())
    .configure(*LIGHT_REPORTING)
    .add_to_registry()
)

(
    DefinitionBuilder("BPU3", description="ERIA smart plug")
    .zigbee_model("BPU3")
    .exposes(e.switch(), e.power_on_behavior())
    .configure(*ON_OFF_REPORTING)
    .add_to_registry()
)

(
    DefinitionBuilder("81863", description="Eria color LED strip")
    .zigbee_model("Extended Color LED Strip V1.0")
    .exposes(e.light(color_temp_range=COLOR_TEMP_RANGE, color_modes=("xy", "hs")))
    .add_to_registry()
)

(
    DefinitionBuilder("81812/81814", description="Eria tunable white A19/BR30 smart bulb")
    .zigbee_model("AD-81812", "AD-ColorTemperature3001")
    .exposes(e.light(color_temp_range=COLOR_TEMP_RANGE, color_modes=("xy", "hs")))
    .add_to_registry()
)

(
    DefinitionBuilder("81898", description="AduroSmart on/off relay")
    .zigbee_model("ONOFFRELAY")
    .exposes(e.switch())
    .configure(*ON_OFF_REPORTING)
    .add_to_registry()
)

(
    DefinitionBuilder("81813-V2", description="BR30 light bulb")
    .zigbee_model("AD-BR3RGBW3001")
    .exposes(e.light(color_temp_range=COLOR_TEMP_RANGE, color_modes=("xy", "hs")))
    .add_to_registry()
)

(
    DefinitionBuilder("81868", description="Siren")
    .fingerprint("AduroSmart Eria", "Smart Siren")
    .from_zigbee("battery", "ias_wd", "ias_enroll", "ias_siren")
    .to_zigbee("warning_simple", "ias_max_duration", "warning")
    .exposes(
        e.tamper(),
        e.warning(),
        e.numeric(
            "max_duration",
            Access.ALL,
            value_min=0,
            value_max=600,
            unit=UnitOfTime.SECONDS,
            description="Duration of Siren",
        ),
        e.binary(
            "alarm", Access.SET, "ON", "OFF", description="Manual start of siren"
        ),
    )
    .configure(
        reporting.bind([ClusterId.Basic, ClusterId.IasZone, ClusterId.IasWd]),
        reporting.read(
            ClusterId.IasZone,
            [
                reporting.ATTR_ZONE_STATE,
                reporting.ATTR_IAS_CIE_ADDR,
                reporting.ATTR_ZONE_ID,
            ],
        ),
        reporting.read(ClusterId.IasWd, [reporting.ATTR_MAX_DURATION]),
    )
    .add_to_registry()
)

(
    DefinitionBuilder(
        "81998", description="ERIA built-in on/off relay (with power measurements)"
    )
    .fingerprint("AduroSmart ERIA", "ONOFF_METER_RELAY")
    .exposes(
        e.switch(), e.power_on_behavior(), e.power(), e.current(), e.voltage()
    )
    .configure(*ON_OFF_REPORTING, *ELECTRICITY_METER_REPORTING)
    .add_to_registry()
)

(
    DefinitionBuilder(
        "81949", description="ERIA built-in dimmer module (with power measurements)"
    )
    .zigbee_model("DimmerM3002")
    .exposes(e.light(), e.power(), e.current(), e.voltage())
    .configure(*LIGHT_REPORTING, *ELECTRICITY_METER_REPORTING)
    .codecs(*DIMMER_CODECS)
    .add_to_registry()
)
