"""Fixed-step throttle profile runs for electric motors.

The caller owns the thruster model; this module only steps the motor through
a sequence of throttle commands and records what happened.

Example:
    >>> import numpy as np
    >>> from motor.simulation import run_profile
    >>>
    >>> throttle = np.concatenate([np.zeros(50), np.full(450, 0.8)])
    >>> history = run_profile(emotor, throttle, dt=0.01)
    >>> history.to_dataframe().tail()
"""

from dataclasses import dataclass
from pathlib import Path

import numpy as np
import polars as pl
from beartype import beartype
from numpy.typing import NDArray

from motor.electric import ElectricMotor, MotorInputs


@beartype
@dataclass
class MotorHistory:
    """Time histories recorded by run_profile.

    Attributes:
        time: Simulation time at the end of each step [s]
        throttle: Throttle command
        commanded_power: Saturated power delivered [ft-lbf/s]
        horsepower: Delivered power [hp]
        thruster_rpm: Thruster RPM read before each step
        power_required: Thruster power required read before each step [ft-lbf/s]
    """
    time: NDArray[np.float64]
    throttle: NDArray[np.float64]
    commanded_power: NDArray[np.float64]
    horsepower: NDArray[np.float64]
    thruster_rpm: NDArray[np.float64]
    power_required: NDArray[np.float64]

    @property
    def n_steps(self) -> int:
        return len(self.time)

    @property
    def final_power(self) -> float:
        """Commanded power at the last step [ft-lbf/s]."""
        if self.n_steps == 0:
            return 0.0
        return float(self.commanded_power[-1])

    def to_dataframe(self) -> pl.DataFrame:
        """Export histories to a Polars DataFrame, one row per step."""
        return pl.DataFrame({
            "time": self.time,
            "throttle": self.throttle,
            "commanded_power": self.commanded_power,
            "horsepower": self.horsepower,
            "thruster_rpm": self.thruster_rpm,
            "power_required": self.power_required,
        })

    def to_csv(self, path: str | Path) -> None:
        self.to_dataframe().write_csv(path)


@beartype
def run_profile(
    motor: ElectricMotor,
    throttle: NDArray[np.floating] | NDArray[np.integer],
    dt: float | int,
) -> MotorHistory:
    """Step a motor once per throttle sample at a fixed timestep.

    Args:
        motor: Motor with its thruster attached
        throttle: Throttle command per step, integer arrays are cast to float
        dt: Time step [s]

    Returns:
        Recorded histories, one entry per step
    """
    n = len(throttle)
    power = np.zeros(n)
    hp = np.zeros(n)
    rpm = np.zeros(n)
    power_req = np.zeros(n)

    for i in range(n):
        rpm[i] = motor.thruster.rpm
        power_req[i] = motor.thruster.power_required
        output = motor.calculate(MotorInputs(throttle=float(throttle[i]), dt=dt))
        power[i] = output.commanded_power
        hp[i] = output.horsepower

    return MotorHistory(
        time=dt * np.arange(1, n + 1, dtype=np.float64),
        throttle=throttle.astype(np.float64),
        commanded_power=power,
        horsepower=hp,
        thruster_rpm=rpm,
        power_required=power_req,
    )
