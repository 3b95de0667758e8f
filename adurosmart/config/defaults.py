from __future__ import annotations

from adurosmart.const import MANUFACTURER_CODE

CONF_MANUFACTURER_CODE_DEFAULT = MANUFACTURER_CODE
CONF_PRIME_ATTRIBUTES_DEFAULT = True
