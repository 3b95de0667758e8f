from __future__ import annotations

import enum


class ClusterId(enum.IntEnum):
    """Cluster identifiers referenced by the catalogue."""

    Basic = 0x0000
    PowerConfiguration = 0x0001
    Identify = 0x0003
    Groups = 0x0004
    Scenes = 0x0005
    OnOff = 0x0006
    LevelControl = 0x0008
    Color = 0x0300
    IasZone = 0x0500
    IasWd = 0x0502
    Metering = 0x0702
    ElectricalMeasurement = 0x0B04
