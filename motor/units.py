"""Units module for Motor.

Rated power is given in configuration files in whatever unit the author
chose. Quantity keeps that unit until the motor converts it to ft-lbf/s,
the unit thruster models exchange with motors each timestep.
"""

import math
from dataclasses import dataclass

from beartype import beartype

# Base SI unit for each dimension
DIMENSIONS = {
    "power": "W",
}

# Conversion factors TO base SI unit, e.g. 1 hp = 745.7 W
CONVERSIONS: dict[str, tuple[float, str]] = {
    "W": (1.0, "power"),
    "kW": (1000.0, "power"),
    "MW": (1e6, "power"),
    "hp": (745.7, "power"),  # Mechanical horsepower
    "ft*lbf/s": (745.7 / 550.0, "power"),
}

# Conversion constants used by the power calculation
HP_TO_FTLBS_PER_SEC = 550.0
WATTS_TO_HP = 1.0 / CONVERSIONS["hp"][0]
RPM_TO_RAD_PER_SEC = 2.0 * math.pi / 60.0


def _get_conversion_factor(unit: str) -> float:
    if unit not in CONVERSIONS:
        raise ValueError(f"Unknown unit: {unit!r}")
    return CONVERSIONS[unit][0]


@beartype
@dataclass(frozen=True, slots=True)
class Quantity:
    """A physical quantity with value, unit, and dimension.

    Examples:
        >>> power = Quantity(1000, "W", "power")
        >>> print(power.to("hp"))
        1.34102 hp
    """

    value: float | int
    unit: str
    dimension: str

    def __post_init__(self) -> None:
        if self.unit not in CONVERSIONS:
            raise ValueError(f"Unknown unit: {self.unit!r}")
        expected_dim = CONVERSIONS[self.unit][1]
        if self.dimension != expected_dim:
            raise ValueError(
                f"Unit {self.unit!r} has dimension {expected_dim!r}, "
                f"but {self.dimension!r} was specified"
            )

    @property
    def si_value(self) -> float:
        """Value in SI base units."""
        return self.value * _get_conversion_factor(self.unit)

    def to(self, target_unit: str) -> "Quantity":
        """Convert to another unit of the same dimension."""
        if CONVERSIONS.get(target_unit, (None, None))[1] != self.dimension:
            raise ValueError(
                f"Cannot convert {self.unit!r} to {target_unit!r}"
            )
        return Quantity(
            self.si_value / _get_conversion_factor(target_unit),
            target_unit,
            self.dimension,
        )

    def __repr__(self) -> str:
        return f"Quantity({self.value:.6g} {self.unit})"

    def __str__(self) -> str:
        return f"{self.value:.6g} {self.unit}"


@beartype
def watts(value: float | int) -> Quantity:
    """Create a power quantity in Watts."""
    return Quantity(value, "W", "power")
