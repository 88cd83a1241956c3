"""Motor - Electric motor propulsion model for flight simulation.

Computes the mechanical power an electric motor delivers to a propeller or
similar thruster from a normalized throttle command and thruster feedback.

Example:
    >>> from motor import ElectricMotor, MotorConfig, MotorInputs
    >>> from motor.units import watts
    >>>
    >>> config = MotorConfig(max_power=watts(1000.0), max_rpm=2400.0, tau=0.1)
    >>> emotor = ElectricMotor(config, propeller)
    >>> output = emotor.calculate(MotorInputs(throttle=0.75, dt=0.01))
    >>> print(f"Power: {output.horsepower:.2f} hp")
"""

__version__ = "0.1.0"

from motor.config import (
    ControlMode,
    MotorConfig,
    PowerCommanded,
    RpmCommanded,
    load_motor_config,
    save_motor_config,
)
from motor.electric import (
    MIN_TIMESTEP,
    ElectricMotor,
    MotorInputs,
    MotorOutput,
    power_command_power,
    rpm_command_power,
    saturate_power,
)
from motor.filters import LagFilter
from motor.properties import PropertyManager
from motor.simulation import MotorHistory, run_profile
from motor.thruster import (
    PitchControlledThruster,
    Thruster,
    ThrusterFeedback,
    TorqueThruster,
)

__all__ = [
    # Version
    "__version__",
    # Configuration
    "MotorConfig",
    "ControlMode",
    "RpmCommanded",
    "PowerCommanded",
    "load_motor_config",
    "save_motor_config",
    # Motor
    "ElectricMotor",
    "MotorInputs",
    "MotorOutput",
    "MIN_TIMESTEP",
    "rpm_command_power",
    "power_command_power",
    "saturate_power",
    # Filtering
    "LagFilter",
    # Thruster interface
    "Thruster",
    "TorqueThruster",
    "PitchControlledThruster",
    "ThrusterFeedback",
    # Observation
    "PropertyManager",
    # Simulation
    "MotorHistory",
    "run_profile",
]
