"""Electric motor configuration.

A MotorConfig is built once at setup and never mutated. It carries the rated
power, the optional maximum RPM that switches the motor into RPM-command
mode, and the optional time constant of the feedback lag filter.

Configurations can be created directly, from a plain dict, or loaded from a
JSON file or an XML engine definition:

    <electric_engine name="E-motor">
      <power unit="WATTS"> 1000 </power>
      <maxrpm> 2400 </maxrpm>
      <tau> 0.1 </tau>
    </electric_engine>

Example:
    >>> from motor.config import MotorConfig, load_motor_config
    >>> from motor.units import watts
    >>>
    >>> config = MotorConfig(max_power=watts(1000.0), max_rpm=2400.0)
    >>> config.control_mode()
    RpmCommanded(max_rpm=2400.0)
    >>>
    >>> config = load_motor_config("engines/emotor.xml")
"""

import json
import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from beartype import beartype

from motor.units import (
    CONVERSIONS,
    HP_TO_FTLBS_PER_SEC,
    WATTS_TO_HP,
    Quantity,
    watts,
)

logger = logging.getLogger(__name__)

# Power unit names accepted in configuration files, mapped to motor.units names
POWER_UNITS: dict[str, str] = {
    "WATTS": "W",
    **{unit.upper(): unit for unit, (_, dim) in CONVERSIONS.items() if dim == "power"},
}


# =============================================================================
# Control Modes
# =============================================================================


@beartype
@dataclass(frozen=True)
class RpmCommanded:
    """Throttle is a fraction of max_rpm; power closes the RPM error."""
    max_rpm: float


@beartype
@dataclass(frozen=True)
class PowerCommanded:
    """Throttle is a fraction of rated maximum power."""


ControlMode = RpmCommanded | PowerCommanded


# =============================================================================
# Motor Configuration
# =============================================================================


@beartype
@dataclass(frozen=True)
class MotorConfig:
    """Electric motor parameters.

    Attributes:
        max_power: Rated maximum power (power dimension)
        max_rpm: RPM at full throttle. 0 selects power-command mode.
        tau: Feedback lag filter time constant [s]. 0 disables the filter.
        name: Engine name used in labels and log messages
    """
    max_power: Quantity
    max_rpm: float | int = 0.0
    tau: float | int = 0.0
    name: str = "electric"

    @property
    def max_power_watts(self) -> float:
        return float(self.max_power.si_value)

    @property
    def max_power_ftlbs(self) -> float:
        """Rated maximum power in ft-lbf/s, the unit thrusters consume."""
        return self.max_power_watts * WATTS_TO_HP * HP_TO_FTLBS_PER_SEC

    def control_mode(self) -> ControlMode:
        """Select the control mode from max_rpm."""
        if self.max_rpm > 0.0:
            return RpmCommanded(max_rpm=float(self.max_rpm))
        return PowerCommanded()

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MotorConfig":
        """Create a MotorConfig from a plain dict.

        ``power`` may be a number in watts, a ``{"value": ..., "unit": ...}``
        mapping, or a Quantity. ``maxrpm`` and ``tau`` are optional and
        default to 0 (disabled).

        Raises:
            ValueError: If power is missing or its unit is not recognized
        """
        if "power" not in data:
            raise ValueError("Motor configuration requires 'power'")

        return cls(
            max_power=_parse_power(data["power"]),
            max_rpm=float(data.get("maxrpm", 0.0)),
            tau=float(data.get("tau", 0.0)),
            name=str(data.get("name", "electric")),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict accepted by from_dict."""
        return {
            "name": self.name,
            "power": {"value": self.max_power.value, "unit": self.max_power.unit},
            "maxrpm": self.max_rpm,
            "tau": self.tau,
        }


def _parse_power(raw: Any) -> Quantity:
    if isinstance(raw, Quantity):
        return raw
    if isinstance(raw, (int, float)):
        return watts(float(raw))
    if isinstance(raw, dict):
        unit = _power_unit(str(raw.get("unit", "W")))
        return Quantity(float(raw["value"]), unit, "power")
    raise ValueError(f"Cannot interpret power value: {raw!r}")


def _power_unit(name: str) -> str:
    key = name.strip().upper()
    if key not in POWER_UNITS:
        raise ValueError(
            f"Unknown power unit: {name!r}. Valid: {sorted(POWER_UNITS)}"
        )
    return POWER_UNITS[key]


# =============================================================================
# File Loading
# =============================================================================


def _read_xml(path: Path) -> dict[str, Any]:
    root = ET.parse(path).getroot()
    data: dict[str, Any] = {}
    if "name" in root.attrib:
        data["name"] = root.attrib["name"]

    power = root.find("power")
    if power is not None:
        data["power"] = {
            "value": float((power.text or "").strip()),
            "unit": power.attrib.get("unit", "WATTS"),
        }
    for tag in ("maxrpm", "tau"):
        element = root.find(tag)
        if element is not None:
            data[tag] = float((element.text or "").strip())
    return data


@beartype
def load_motor_config(path: str | Path) -> MotorConfig:
    """Load a motor configuration from a .json or .xml file.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the suffix is unsupported or required fields are missing
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Motor configuration not found at {path}")

    suffix = path.suffix.lower()
    if suffix == ".json":
        with open(path) as f:
            data = json.load(f)
    elif suffix == ".xml":
        data = _read_xml(path)
    else:
        raise ValueError(f"Unsupported configuration format: {path.suffix!r}")

    logger.debug("Loaded motor configuration from %s", path)
    return MotorConfig.from_dict(data)


@beartype
def save_motor_config(config: MotorConfig, path: str | Path) -> Path:
    """Write a motor configuration as JSON.

    Returns:
        Path to the written file
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(config.to_dict(), f, indent=2)
    return path
