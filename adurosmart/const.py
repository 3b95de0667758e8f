"""AduroSmart catalogue constants."""

from __future__ import annotations

VENDOR = "AduroSmart"
MANUFACTURER_CODE = 0x122D

DEFAULT_ENDPOINT_ID = 1

NUMERIC_SUFFIX = "_numeric"
UNKNOWN = "unknown"

MSG_ATTRIBUTE_REPORT = "attribute_report"
MSG_READ_RESPONSE = "read_response"
