"""Tests for retargeting and leg planning."""
from __future__ import annotations

import logging

import pytest

from tick_motion.clamped import ClampedMotion
from tick_motion.easing import EASINGS
from tick_motion.gravity import Gravity
from tick_motion.interpolation import CurveMotion
from tick_motion.retarget import Sample, plan_leg, retarget, sample
from tick_motion.spring import Spring, SpringDescription
from tick_motion.types import ContractError, Tolerance

BOUNCY = SpringDescription(mass=1.0, stiffness=100.0, damping=2.0)
OVERDAMPED = SpringDescription(mass=1.0, stiffness=100.0, damping=50.0)


class TestSample:
    def test_named_fields(self) -> None:
        spring = Spring(BOUNCY)
        state = sample(spring, 0.2)
        assert state == Sample(spring.position(0.2), spring.velocity(0.2))
        assert state.position == spring.position(0.2)
        assert state.velocity == spring.velocity(0.2)


class TestRetarget:
    """Interrupting a motion carries position and velocity over."""

    @pytest.mark.parametrize("description", [BOUNCY, OVERDAMPED], ids=["bouncy", "overdamped"])
    def test_spring_handoff_is_continuous(self, description: SpringDescription) -> None:
        first = Spring(description, start=0.0, end=100.0)
        before = sample(first, 0.15)
        second = retarget(first, 0.15, -40.0)
        assert second.end == -40.0
        assert second.position(0.0) == pytest.approx(before.position, abs=1e-9)
        assert second.velocity(0.0) == pytest.approx(before.velocity, abs=1e-9)

    def test_gravity_handoff(self) -> None:
        first = Gravity(gravity=10.0, start=0.0, end=50.0)
        second = retarget(first, 1.0, 80.0)
        assert second.position(0.0) == pytest.approx(5.0)
        assert second.velocity(0.0) == pytest.approx(10.0)
        assert second.gravity == 10.0

    def test_clamped_handoff(self) -> None:
        first = ClampedMotion(Spring(BOUNCY, start=0.0, end=1.0), x_max=1.0)
        second = retarget(first, 0.3, 0.5)
        assert isinstance(second, ClampedMotion)
        assert second.position(0.0) == pytest.approx(first.position(0.3), abs=1e-9)

    def test_new_tolerance(self) -> None:
        loose = Tolerance(distance=0.1, velocity=0.1)
        second = retarget(Spring(BOUNCY), 0.1, 2.0, tolerance=loose)
        assert second.tolerance == loose

    def test_logs_handoff(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="tick_motion.retarget"):
            retarget(Spring(BOUNCY), 0.1, 2.0)
        assert any("retarget Spring" in r.message for r in caplog.records)


class TestPlanLeg:
    def test_spring_with_duration(self) -> None:
        leg = plan_leg(Spring(OVERDAMPED), 10.0, 20.0, duration=0.4)
        assert leg.start == 10.0
        assert leg.position(0.4) == pytest.approx(20.0, abs=1e-9)

    def test_spring_with_velocity(self) -> None:
        leg = plan_leg(Spring(BOUNCY), 0.0, 1.0, initial_velocity=7.0)
        assert leg.velocity(0.0) == 7.0

    def test_duration_round_trip(self) -> None:
        base = Spring(OVERDAMPED)
        leg = plan_leg(base, 0.0, 1.0, duration_scale=1.0)
        assert leg.position(base.duration) == pytest.approx(1.0, abs=1e-9)

    def test_zero_duration_is_at_rest(self) -> None:
        leg = plan_leg(Spring(BOUNCY), 0.0, 5.0, duration=0.0)
        assert leg.position(0.0) == 5.0
        assert leg.velocity(0.0) == 0.0
        assert leg.duration == 0.0

    def test_zero_scale_is_at_rest(self) -> None:
        leg = plan_leg(Gravity(gravity=10.0, start=0.0, end=1.0), 0.0, 5.0, duration_scale=0.0)
        assert leg.position(0.0) == 5.0
        assert leg.is_done(0.0)

    def test_velocity_and_duration_conflict(self) -> None:
        with pytest.raises(ContractError):
            plan_leg(Spring(BOUNCY), 0.0, 1.0, duration=0.5, initial_velocity=1.0)

    def test_curve_leg(self) -> None:
        leg = plan_leg(EASINGS["ease_out"], 0.0, 8.0, duration=2.0)
        assert isinstance(leg, CurveMotion)
        assert leg.position(1.0) == 6.0
        assert leg.curve == EASINGS["ease_out"]

    def test_curve_leg_scaled(self) -> None:
        leg = plan_leg(EASINGS["linear"], 0.0, 1.0, duration=2.0, duration_scale=0.5)
        assert leg.duration == 1.0

    def test_curve_needs_duration(self) -> None:
        with pytest.raises(ContractError):
            plan_leg(EASINGS["linear"], 0.0, 1.0)

    def test_curve_rejects_velocity(self) -> None:
        with pytest.raises(ContractError):
            plan_leg(EASINGS["linear"], 0.0, 1.0, duration=1.0, initial_velocity=2.0)
