"""Tests for the units module."""

import math

import pytest

from motor.units import (
    HP_TO_FTLBS_PER_SEC,
    RPM_TO_RAD_PER_SEC,
    WATTS_TO_HP,
    Quantity,
    watts,
)


class TestQuantityCreation:
    """Test Quantity creation and validation."""

    def test_create_basic_quantity(self) -> None:
        q = Quantity(1000.0, "W", "power")
        assert q.value == 1000.0
        assert q.unit == "W"
        assert q.dimension == "power"

    def test_watts_factory(self) -> None:
        assert watts(500.0) == Quantity(500.0, "W", "power")

    def test_invalid_unit_raises_error(self) -> None:
        with pytest.raises(ValueError, match="Unknown unit"):
            Quantity(10.0, "furlong", "power")

    def test_mismatched_dimension_raises_error(self) -> None:
        with pytest.raises(ValueError, match="has dimension"):
            Quantity(10.0, "W", "torque")

    def test_frozen_dataclass(self) -> None:
        """Test that Quantity is immutable."""
        q = watts(10.0)
        with pytest.raises(AttributeError):
            q.value = 20.0  # type: ignore


class TestConversions:
    """Test power unit conversions."""

    def test_si_value(self) -> None:
        assert Quantity(1.5, "kW", "power").si_value == pytest.approx(1500.0)
        assert Quantity(2.0, "MW", "power").si_value == pytest.approx(2e6)

    def test_horsepower_to_ft_lbf_per_second(self) -> None:
        """One horsepower is exactly 550 ft-lbf/s."""
        q = Quantity(1.0, "hp", "power").to("ft*lbf/s")
        assert q.value == pytest.approx(550.0)

    def test_watts_to_ft_lbf_per_second(self) -> None:
        q = watts(1000.0).to("ft*lbf/s")
        assert q.value == pytest.approx(1000.0 * WATTS_TO_HP * HP_TO_FTLBS_PER_SEC)
        assert q.value == pytest.approx(737.56, rel=1e-3)

    def test_unknown_target_raises(self) -> None:
        with pytest.raises(ValueError, match="Cannot convert"):
            watts(1.0).to("rpm")


class TestConstants:
    """Test conversion constants used by the power calculation."""

    def test_watts_to_hp(self) -> None:
        assert WATTS_TO_HP == pytest.approx(0.001341022, rel=1e-6)

    def test_rpm_to_rad_per_sec(self) -> None:
        assert RPM_TO_RAD_PER_SEC == pytest.approx(2 * math.pi / 60)


class TestStringRepresentation:
    def test_str(self) -> None:
        assert str(watts(1000.0)) == "1000 W"

    def test_repr(self) -> None:
        assert repr(Quantity(2.5, "hp", "power")) == "Quantity(2.5 hp)"
