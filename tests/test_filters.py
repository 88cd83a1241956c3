"""Tests for the lag filter."""

import pytest

from motor.filters import LagFilter


class TestDisabledFilter:
    """A non-positive time constant passes input through."""

    def test_passthrough(self) -> None:
        lag = LagFilter(tau=0.0)
        assert not lag.enabled
        assert lag.update(123.4, dt=0.01) == 123.4

    def test_state_untouched(self) -> None:
        lag = LagFilter(tau=0.0)
        lag.update(500.0, dt=0.01)
        lag.update(-20.0, dt=0.01)
        assert lag.value == 0.0


class TestEnabledFilter:
    """Test first-order lag behavior."""

    def test_blend_factor(self) -> None:
        assert LagFilter.blend_factor(0.1, 0.1) == pytest.approx(0.5)
        assert LagFilter.blend_factor(0.9, 0.1) == pytest.approx(0.1)

    def test_first_update_from_zero_seed(self) -> None:
        """State starts at zero, so the first output is alpha * raw."""
        lag = LagFilter(tau=0.1)
        assert lag.update(100.0, dt=0.1) == pytest.approx(50.0)
        assert lag.value == pytest.approx(50.0)

    def test_second_update_blends_with_state(self) -> None:
        lag = LagFilter(tau=0.1)
        lag.update(100.0, dt=0.1)
        assert lag.update(100.0, dt=0.1) == pytest.approx(75.0)

    def test_variable_timestep(self) -> None:
        lag = LagFilter(tau=0.3)
        lag.update(100.0, dt=0.1)  # alpha = 0.25 -> 25
        out = lag.update(100.0, dt=0.3)  # alpha = 0.5 -> 62.5
        assert out == pytest.approx(62.5)

    def test_converges_monotonically(self) -> None:
        """Output approaches a constant input without overshoot."""
        lag = LagFilter(tau=0.5)
        outputs = [lag.update(200.0, dt=0.01) for _ in range(500)]

        assert all(b > a for a, b in zip(outputs, outputs[1:]))
        assert all(out < 200.0 for out in outputs)
        assert outputs[-1] == pytest.approx(200.0, rel=1e-3)

    def test_large_dt_tracks_input(self) -> None:
        lag = LagFilter(tau=0.001)
        assert lag.update(42.0, dt=100.0) == pytest.approx(42.0, rel=1e-4)

    def test_reset(self) -> None:
        lag = LagFilter(tau=1.0)
        lag.update(100.0, dt=0.1)
        lag.reset()
        assert lag.value == 0.0
        lag.reset(10.0)
        assert lag.value == 10.0
