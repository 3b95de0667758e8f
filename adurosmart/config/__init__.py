"""Config schemas and validation."""

from __future__ import annotations

import voluptuous as vol

from adurosmart.config.defaults import (
    CONF_MANUFACTURER_CODE_DEFAULT,
    CONF_PRIME_ATTRIBUTES_DEFAULT,
)
from adurosmart.config.validators import cv_boolean, cv_manufacturer_code

CONF_MANUFACTURER_CODE = "manufacturer_code"
CONF_PRIME_ATTRIBUTES = "prime_attributes"

CONFIG_SCHEMA = vol.Schema(
    {
        vol.Optional(
            CONF_MANUFACTURER_CODE, default=CONF_MANUFACTURER_CODE_DEFAULT
        ): cv_manufacturer_code,
        vol.Optional(
            CONF_PRIME_ATTRIBUTES, default=CONF_PRIME_ATTRIBUTES_DEFAULT
        ): cv_boolean,
    },
    extra=vol.ALLOW_EXTRA,
)
