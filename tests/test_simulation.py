"""Tests for throttle profile runs."""

import numpy as np
import polars as pl
import pytest
from numpy.testing import assert_allclose

from motor.config import MotorConfig
from motor.electric import ElectricMotor
from motor.simulation import MotorHistory, run_profile
from motor.units import watts


class SpinningProp:
    """Toy propeller: RPM grows with delivered power, load grows with RPM."""

    def __init__(self) -> None:
        self.rpm = 0.0
        self.gear_ratio = 1.0
        self.power_required = 0.0
        self.torque = 1.0

    def calculate(self, power: float) -> float:
        self.rpm += 0.1 * power
        self.power_required = 0.01 * self.rpm
        return 0.0

    def thruster_labels(self, engine_number: int, delimiter: str) -> str:
        return "RPM"

    def thruster_values(self, engine_number: int, delimiter: str) -> str:
        return f"{self.rpm}"


def make_motor() -> ElectricMotor:
    return ElectricMotor(MotorConfig(max_power=watts(1000.0)), SpinningProp())


class TestRunProfile:
    """Test stepping a motor through a throttle profile."""

    def test_lengths_and_time(self) -> None:
        throttle = np.linspace(0.0, 1.0, 11)
        history = run_profile(make_motor(), throttle, dt=0.1)

        assert history.n_steps == 11
        assert_allclose(history.time, 0.1 * np.arange(1, 12))
        assert_allclose(history.throttle, throttle)

    def test_feedback_recorded_before_step(self) -> None:
        history = run_profile(make_motor(), np.array([0.5, 0.5]), dt=0.01)

        assert history.thruster_rpm[0] == 0.0
        assert history.power_required[0] == 0.0
        assert history.thruster_rpm[1] == pytest.approx(0.1 * history.commanded_power[0])

    def test_power_never_exceeds_rating(self) -> None:
        motor = make_motor()
        history = run_profile(motor, np.full(50, 2.0), dt=0.01)

        assert np.all(history.commanded_power <= motor.max_power_ftlbs)
        assert history.final_power == pytest.approx(motor.max_power_ftlbs)
        assert_allclose(history.horsepower, history.commanded_power / 550.0)

    def test_empty_profile(self) -> None:
        history = run_profile(make_motor(), np.array([], dtype=np.float64), dt=0.01)
        assert history.n_steps == 0
        assert history.final_power == 0.0

    def test_integer_throttle_profile(self) -> None:
        history = run_profile(make_motor(), np.array([0, 1, 1]), dt=1)

        assert history.throttle.dtype == np.float64
        assert_allclose(history.throttle, [0.0, 1.0, 1.0])
        assert_allclose(history.time, [1.0, 2.0, 3.0])
        assert history.commanded_power[0] == 0.0


class TestMotorHistoryExport:
    """Test DataFrame and CSV export."""

    def test_to_dataframe(self) -> None:
        history = run_profile(make_motor(), np.full(5, 0.2), dt=0.02)
        df = history.to_dataframe()

        assert isinstance(df, pl.DataFrame)
        assert df.height == 5
        assert df.columns == [
            "time",
            "throttle",
            "commanded_power",
            "horsepower",
            "thruster_rpm",
            "power_required",
        ]

    def test_to_csv(self, tmp_path) -> None:
        history = run_profile(make_motor(), np.full(3, 0.2), dt=0.02)
        path = tmp_path / "history.csv"
        history.to_csv(path)

        loaded = pl.read_csv(path)
        assert loaded.height == 3
        assert_allclose(loaded["commanded_power"].to_numpy(), history.commanded_power)

    def test_history_dataclass(self) -> None:
        empty = np.zeros(0)
        history = MotorHistory(empty, empty, empty, empty, empty, empty)
        assert history.to_dataframe().height == 0
