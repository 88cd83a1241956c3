"""First-order lag filter for feedback measurements.

The filter is a discretized exponential smoothing stage that tolerates a
variable timestep:

    alpha = 1 / (1 + tau / dt)
    y[k] = alpha * x[k] + (1 - alpha) * y[k-1]

alpha approaches 1 as dt grows relative to tau (fast tracking) and 0 as tau
grows relative to dt (heavy smoothing). A non-positive time constant
disables the filter and it passes its input through unchanged.

Example:
    >>> from motor.filters import LagFilter
    >>>
    >>> lag = LagFilter(tau=0.5)
    >>> for _ in range(100):
    ...     rpm = lag.update(2400.0, dt=0.01)
"""

from dataclasses import dataclass, field

from beartype import beartype


@beartype
@dataclass
class LagFilter:
    """First-order lag with persistent scalar state.

    Owned by exactly one motor. The state is seeded at 0.0, so the first
    filtered samples ramp up from zero rather than starting at the first
    measurement.

    Attributes:
        tau: Time constant [s]. Values <= 0 disable the filter.
        value: Last filtered output
    """
    tau: float = 0.0
    value: float = field(default=0.0, init=False)

    @property
    def enabled(self) -> bool:
        """True when the filter smooths its input."""
        return self.tau > 0.0

    @staticmethod
    def blend_factor(tau: float, dt: float) -> float:
        """Weight given to the new sample for time constant tau and step dt."""
        return 1.0 / (1.0 + tau / dt)

    def update(self, raw: float, dt: float) -> float:
        """Advance the filter one timestep.

        Args:
            raw: Unfiltered measurement
            dt: Time step [s], must be positive

        Returns:
            Filtered measurement. When the filter is disabled this is ``raw``
            and the stored state is left untouched.
        """
        if not self.enabled:
            return raw

        alpha = self.blend_factor(self.tau, dt)
        self.value = alpha * raw + (1.0 - alpha) * self.value
        return self.value

    def reset(self, value: float = 0.0) -> None:
        """Reset the filter state."""
        self.value = value
