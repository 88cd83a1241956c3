"""Electric motor model.

Computes the mechanical power an electric motor delivers to its thruster
each timestep, from a normalized throttle command and thruster feedback.

Two control modes, fixed when the motor is built:

- Power command (max_rpm == 0): throttle is a fraction of rated power.
- RPM command (max_rpm > 0): throttle is a fraction of max_rpm, and power
  is inferred from the RPM error and the torque the thruster needs.

An optional first-order lag filter is applied to the feedback of the active
mode (thruster RPM or required power). The commanded power is then limited
to rated power from above only.

Example:
    >>> from motor import ElectricMotor, MotorConfig, MotorInputs
    >>> from motor.units import watts
    >>>
    >>> config = MotorConfig(max_power=watts(1000.0), tau=0.2)
    >>> emotor = ElectricMotor(config, propeller)
    >>>
    >>> # Simulation loop
    >>> output = emotor.calculate(MotorInputs(throttle=0.8, dt=0.01))
    >>> print(f"{output.horsepower:.2f} hp")
"""

import logging
from dataclasses import dataclass

from beartype import beartype

from motor.config import ControlMode, MotorConfig, PowerCommanded, RpmCommanded
from motor.filters import LagFilter
from motor.properties import PropertyManager, indexed_property_name
from motor.thruster import (
    PitchControlledThruster,
    Thruster,
    ThrusterFeedback,
    TorqueThruster,
)
from motor.units import HP_TO_FTLBS_PER_SEC, RPM_TO_RAD_PER_SEC

logger = logging.getLogger(__name__)

# Floor applied to the timestep before it is used as a divisor [s]
MIN_TIMESTEP = 0.0001


def floor_timestep(dt: float | int) -> float:
    """Clamp a timestep to MIN_TIMESTEP from below."""
    return float(max(MIN_TIMESTEP, dt))


# =============================================================================
# Inputs and Outputs
# =============================================================================


@beartype
@dataclass(frozen=True)
class MotorInputs:
    """Commands for one timestep.

    Attributes:
        throttle: Normalized command, nominally 0 to 1. Not clamped.
        dt: Time since the previous update [s]
        prop_advance: Pitch command forwarded to pitch-controlled thrusters
        prop_feather: Feather command forwarded to pitch-controlled thrusters
    """
    throttle: float | int
    dt: float | int
    prop_advance: float | int = 0.0
    prop_feather: bool = False


@beartype
@dataclass(frozen=True)
class MotorOutput:
    """Power delivered to the thruster this timestep.

    Attributes:
        commanded_power: Saturated power [ft-lbf/s]
        horsepower: Same power in horsepower
    """
    commanded_power: float
    horsepower: float

    @classmethod
    def from_power(cls, commanded_power: float) -> "MotorOutput":
        return cls(
            commanded_power=commanded_power,
            horsepower=commanded_power / HP_TO_FTLBS_PER_SEC,
        )


# =============================================================================
# Power Calculation
# =============================================================================


@beartype
def rpm_command_power(
    mode: RpmCommanded,
    throttle: float | int,
    feedback: ThrusterFeedback,
    lag: LagFilter,
    dt: float | int,
) -> float:
    """Raw commanded power in RPM-command mode.

    The motor adds to the thruster's current load whatever power is needed
    to close the RPM error at the torque the thruster currently demands:

        P = |Q| / G * (rpm_cmd - rpm) * 2*pi/60 + P_req

    Args:
        mode: RPM-command mode carrying max_rpm
        throttle: Normalized RPM command
        feedback: Thruster feedback, torque included
        lag: Lag filter applied to the measured motor RPM
        dt: Time step [s], floored to MIN_TIMESTEP

    Returns:
        Unsaturated commanded power [ft-lbf/s]

    Raises:
        ValueError: If the feedback carries no torque
    """
    if feedback.torque is None:
        raise ValueError("RPM-command mode requires thruster torque feedback")

    max_rpm = mode.max_rpm
    cmd_rpm = min(max_rpm * throttle, max_rpm)

    rpm = min(feedback.rpm * feedback.gear_ratio, max_rpm)
    rpm = lag.update(rpm, floor_timestep(dt))

    delta_rpm = cmd_rpm - rpm
    torque_req = abs(feedback.torque) / feedback.gear_ratio
    return float(torque_req * (delta_rpm * RPM_TO_RAD_PER_SEC) + feedback.power_required)


@beartype
def power_command_power(
    max_power_ftlbs: float | int,
    throttle: float | int,
    feedback: ThrusterFeedback,
    lag: LagFilter,
    dt: float | int,
) -> float:
    """Raw commanded power in power-command mode.

    Throttle scales rated power directly. Without filtering the thruster's
    required power is added on top:

        P = P_max * throttle + P_req

    With filtering the filtered required power is subtracted instead, a
    feed-forward term that vanishes as the filter settles:

        P = P_max * throttle + (P_req - filt(P_req))

    The two forms do not meet: once the filter settles the command is
    P_max * throttle, P_req lower than with the filter disabled. Turning
    tau on therefore changes the steady-state command for a loaded thruster.

    Returns:
        Unsaturated commanded power [ft-lbf/s]
    """
    power_req = feedback.power_required
    if not lag.enabled:
        return float(max_power_ftlbs * throttle + power_req)

    power_req_filt = lag.update(power_req, floor_timestep(dt))
    return float(max_power_ftlbs * throttle + power_req - power_req_filt)


@beartype
def saturate_power(power: float | int, max_power_ftlbs: float | int) -> float:
    """Limit commanded power to rated power. No lower limit is applied."""
    return float(min(power, max_power_ftlbs))


# =============================================================================
# Electric Motor
# =============================================================================


class ElectricMotor:
    """Electric motor driving a single thruster.

    The control mode is chosen from the configuration at construction and
    never changes. The motor owns its lag filter.

    Attributes:
        config: Motor parameters
        thruster: Driven thruster
        engine_number: Index of this engine in the vehicle
        mode: Control mode, fixed at construction
        hp: Power delivered in the last update [hp]
    """

    @beartype
    def __init__(
        self,
        config: MotorConfig,
        thruster: Thruster,
        engine_number: int = 0,
        properties: PropertyManager | None = None,
    ) -> None:
        self.config = config
        self.thruster = thruster
        self.engine_number = engine_number
        self.mode: ControlMode = config.control_mode()
        self.hp = 0.0

        if isinstance(self.mode, RpmCommanded) and not isinstance(thruster, TorqueThruster):
            raise TypeError(
                f"RPM-command mode requires a thruster that reports torque, "
                f"got {type(thruster).__name__}"
            )

        self._lag = LagFilter(tau=float(config.tau))
        self._max_power_ftlbs = config.max_power_ftlbs

        self._properties = properties
        self._property_name = (
            indexed_property_name("propulsion/engine", engine_number) + "/power-hp"
        )
        if properties is not None:
            properties.tie(self._property_name, lambda: self.hp)

        logger.info(
            "Engine %s (%d): max power %.1f W, %s mode",
            config.name, engine_number, config.max_power_watts, self.mode_name,
        )
        logger.debug("Instantiated: ElectricMotor")

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def mode_name(self) -> str:
        return "rpm" if isinstance(self.mode, RpmCommanded) else "power"

    @property
    def lag_filter(self) -> LagFilter:
        """The feedback lag filter owned by this motor."""
        return self._lag

    @property
    def max_power_ftlbs(self) -> float:
        return self._max_power_ftlbs

    @beartype
    def calculate(self, inputs: MotorInputs) -> MotorOutput:
        """Run one timestep: compute power and drive the thruster.

        Args:
            inputs: Throttle and timestep for this frame

        Returns:
            Saturated commanded power, also stored in ``hp``
        """
        if isinstance(self.thruster, PitchControlledThruster):
            self.thruster.set_advance(inputs.prop_advance)
            self.thruster.set_feather(inputs.prop_feather)

        output = self.command(inputs.throttle, self.read_feedback(), inputs.dt)

        self.thruster.calculate(output.commanded_power)
        self.hp = output.horsepower

        logger.debug(
            "Engine %d: throttle=%.3f mode=%s power=%.2f ft-lbf/s (%.3f hp)",
            self.engine_number, inputs.throttle, self.mode_name,
            output.commanded_power, output.horsepower,
        )
        return output

    @beartype
    def command(
        self,
        throttle: float | int,
        feedback: ThrusterFeedback,
        dt: float | int,
    ) -> MotorOutput:
        """Compute saturated commanded power without touching the thruster.

        Advances the lag filter when it is enabled. dt is floored to
        MIN_TIMESTEP.
        """
        dt = floor_timestep(dt)
        if isinstance(self.mode, RpmCommanded):
            power = rpm_command_power(self.mode, throttle, feedback, self._lag, dt)
        elif isinstance(self.mode, PowerCommanded):
            power = power_command_power(
                self._max_power_ftlbs, throttle, feedback, self._lag, dt
            )
        else:
            raise TypeError(f"Unknown control mode: {self.mode!r}")

        return MotorOutput.from_power(saturate_power(power, self._max_power_ftlbs))

    def read_feedback(self) -> ThrusterFeedback:
        """Read thruster feedback, including torque in RPM-command mode."""
        return ThrusterFeedback.from_thruster(
            self.thruster, with_torque=isinstance(self.mode, RpmCommanded)
        )

    def calc_fuel_need(self) -> float:
        """Electric motors burn no fuel."""
        return 0.0

    # -------------------------------------------------------------------------
    # Text Export
    # -------------------------------------------------------------------------

    @beartype
    def engine_labels(self, delimiter: str = ",") -> str:
        """Column labels for delimited output."""
        return (
            f"{self.name} HP (engine {self.engine_number}){delimiter}"
            + self.thruster.thruster_labels(self.engine_number, delimiter)
        )

    @beartype
    def engine_values(self, delimiter: str = ",") -> str:
        """Current values matching engine_labels."""
        return f"{self.hp}{delimiter}" + self.thruster.thruster_values(
            self.engine_number, delimiter
        )

    # -------------------------------------------------------------------------
    # Property Binding
    # -------------------------------------------------------------------------

    @property
    def property_name(self) -> str:
        """Name under which horsepower is exposed."""
        return self._property_name

    def unbind(self) -> None:
        """Remove this motor's properties from the registry."""
        if self._properties is not None:
            self._properties.untie(self._property_name)
            self._properties = None
            logger.debug("Unbound: ElectricMotor")
