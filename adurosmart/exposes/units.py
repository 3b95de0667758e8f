"""Units of exposed numeric capabilities."""

from enum import Enum
from typing import Final


class UnitOfPower(Enum):
    """Power units."""

    WATT = "W"
    KILO_WATT = "kW"


class UnitOfElectricCurrent(Enum):
    """Electric current units."""

    MILLIAMPERE = "mA"
    AMPERE = "A"


class UnitOfElectricPotential(Enum):
    """Electric potential units."""

    MILLIVOLT = "mV"
    VOLT = "V"


class UnitOfTime(Enum):
    """Time units."""

    MILLISECONDS = "ms"
    SECONDS = "s"
    MINUTES = "min"


# Color temperature units
MIRED: Final = "mired"

# Percentage units
PERCENTAGE: Final = "%"
