"""Tests for SolverConfig."""
from __future__ import annotations

import dataclasses

import pytest

from tick_motion.config import DEFAULT_SOLVER_CONFIG, SolverConfig
from tick_motion.types import ConfigurationError


class TestSolverConfig:
    def test_defaults(self) -> None:
        cfg = SolverConfig()
        assert cfg.max_time == 60.0
        assert cfg.initial_step == 1e-4
        assert cfg.bisection_iterations == 30
        assert cfg.newton_iterations == 10
        assert cfg.epsilon == 1e-12

    def test_default_instance_matches(self) -> None:
        assert DEFAULT_SOLVER_CONFIG == SolverConfig()

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_SOLVER_CONFIG.max_time = 1.0  # type: ignore[misc]

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"max_time": 0.0},
            {"max_time": -5.0},
            {"initial_step": 0.0},
            {"initial_step": 60.0},
            {"bisection_iterations": 0},
            {"newton_iterations": 0},
            {"epsilon": 0.0},
        ],
    )
    def test_rejects_invalid(self, kwargs: dict) -> None:
        with pytest.raises(ConfigurationError):
            SolverConfig(**kwargs)
