"""Thruster interfaces consumed by motor models.

A motor does not model propeller aerodynamics or shaft dynamics. It reads a
few feedback values from whatever thruster it drives, and hands back a
commanded power each timestep. The protocols here describe that boundary.

All power values crossing it are in ft-lbf/s and torques in ft-lbf.
"""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from beartype import beartype


@runtime_checkable
class Thruster(Protocol):
    """Minimal thruster driven by a motor."""

    @property
    def power_required(self) -> float:
        """Power needed to hold the current operating point [ft-lbf/s]."""
        ...

    @property
    def rpm(self) -> float:
        """Thruster shaft speed [rpm]."""
        ...

    @property
    def gear_ratio(self) -> float:
        """Motor RPM per thruster RPM."""
        ...

    def calculate(self, power: float) -> float:
        """Advance the thruster with the power available this timestep."""
        ...

    def thruster_labels(self, engine_number: int, delimiter: str) -> str:
        ...

    def thruster_values(self, engine_number: int, delimiter: str) -> str:
        ...


@runtime_checkable
class TorqueThruster(Thruster, Protocol):
    """Thruster that also reports its shaft torque (e.g. a propeller)."""

    @property
    def torque(self) -> float:
        """Shaft torque [ft-lbf]. Sign follows the thruster's convention."""
        ...


@runtime_checkable
class PitchControlledThruster(Protocol):
    """Thruster accepting pitch (advance) and feather commands."""

    def set_advance(self, advance: float) -> None:
        ...

    def set_feather(self, feather: bool) -> None:
        ...


@beartype
@dataclass(frozen=True)
class ThrusterFeedback:
    """Snapshot of thruster feedback for one timestep.

    Attributes:
        power_required: Power the thruster needs [ft-lbf/s]
        rpm: Thruster shaft speed [rpm]
        gear_ratio: Motor RPM per thruster RPM
        torque: Shaft torque [ft-lbf], None when not read
    """
    power_required: float
    rpm: float = 0.0
    gear_ratio: float = 1.0
    torque: float | None = None

    @classmethod
    def from_thruster(cls, thruster: Thruster, with_torque: bool = False) -> "ThrusterFeedback":
        """Read the current feedback values from a thruster."""
        torque = float(thruster.torque) if with_torque else None
        return cls(
            power_required=float(thruster.power_required),
            rpm=float(thruster.rpm),
            gear_ratio=float(thruster.gear_ratio),
            torque=torque,
        )
