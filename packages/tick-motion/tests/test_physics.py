"""Tests for the Physics union helpers."""
from __future__ import annotations

import pytest

from tick_motion.easing import EASINGS
from tick_motion.friction import Friction
from tick_motion.gravity import Gravity
from tick_motion.physics import is_simulation, progress
from tick_motion.spring import Spring
from tick_motion.types import ContractError, UnsettledMotionError


class TestIsSimulation:
    def test_motion_models(self) -> None:
        assert is_simulation(Spring.preset("snap"))
        assert is_simulation(Gravity(gravity=10.0, start=0.0, end=1.0))
        assert is_simulation(Friction.through(0.0, 1.0, 2.0, 1.0))

    def test_easing_curve(self) -> None:
        assert not is_simulation(EASINGS["ease_in_out"])

    def test_rejects_other_types(self) -> None:
        with pytest.raises(ContractError):
            is_simulation(lambda t: t)  # type: ignore[arg-type]


class TestProgress:
    def test_curve(self) -> None:
        assert progress(EASINGS["ease_in"], 0.5) == 0.25

    def test_motion_model(self) -> None:
        spring = Spring.preset("stern")
        assert progress(spring, 0.4) == spring.as_progress_curve(0.4)

    def test_endpoints(self) -> None:
        for physics in (EASINGS["elastic_out"], Spring.preset("bob")):
            assert progress(physics, 0.0) == 0.0
            assert progress(physics, 1.0) == 1.0

    def test_unsettled_model(self) -> None:
        never = Gravity(gravity=-1.0, start=0.0, end=10.0)
        with pytest.raises(UnsettledMotionError):
            progress(never, 0.5)
