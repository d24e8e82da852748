"""Tests for easing curves."""

import pytest

from tick_motion import EASINGS, Curve, EasingCurve, Spring, flip
from tick_motion.easing import elastic_out


class TestLinearEasing:
    """Test linear easing curve."""

    def test_linear_at_half(self):
        """Linear easing should return 0.5 at t=0.5."""
        assert EASINGS["linear"].transform(0.5) == 0.5


class TestEaseInEasing:
    """Test ease_in easing curve."""

    def test_ease_in_at_half(self):
        """Ease-in easing should return 0.25 at t=0.5 (t*t)."""
        assert EASINGS["ease_in"].transform(0.5) == 0.25


class TestEaseOutEasing:
    """Test ease_out easing curve."""

    def test_ease_out_at_half(self):
        """Ease-out easing should return 0.75 at t=0.5 (t*(2-t))."""
        assert EASINGS["ease_out"].transform(0.5) == 0.75


class TestEaseInOutEasing:
    """Test ease_in_out easing curve."""

    def test_ease_in_out_at_quarter(self):
        """Ease-in-out easing should return 0.125 at t=0.25 (2*t*t)."""
        assert EASINGS["ease_in_out"].transform(0.25) == 0.125

    def test_ease_in_out_at_half(self):
        """Ease-in-out easing should return 0.5 at t=0.5."""
        assert EASINGS["ease_in_out"].transform(0.5) == 0.5

    def test_ease_in_out_at_three_quarters(self):
        """Ease-in-out easing should return 0.875 at t=0.75."""
        assert abs(EASINGS["ease_in_out"].transform(0.75) - 0.875) < 1e-9


class TestCubicEasing:
    """Test the cubic variants."""

    def test_ease_out_cubic_at_half(self):
        """Ease-out-cubic should return 0.875 at t=0.5 (1-(1-t)^3)."""
        assert EASINGS["ease_out_cubic"].transform(0.5) == 0.875

    def test_ease_in_out_cubic_at_quarter(self):
        """Ease-in-out-cubic should return 0.0625 at t=0.25 (4*t^3)."""
        assert EASINGS["ease_in_out_cubic"].transform(0.25) == 0.0625

    def test_ease_in_out_cubic_symmetric(self):
        """Ease-in-out-cubic should be point-symmetric about (0.5, 0.5)."""
        curve = EASINGS["ease_in_out_cubic"]
        assert curve.transform(0.2) + curve.transform(0.8) == pytest.approx(1.0)


class TestElasticOut:
    """Test the overshooting curve."""

    def test_raw_function_near_zero_at_zero(self):
        """The raw function starts at 0 up to rounding."""
        assert elastic_out(0.0) == pytest.approx(0.0, abs=1e-12)

    def test_overshoots(self):
        """Elastic-out should overshoot 1 before settling."""
        curve = EASINGS["elastic_out"]
        assert max(curve.transform(i / 100.0) for i in range(101)) > 1.0

    def test_endpoints_exact(self):
        """The named curve is exact at 0 and 1."""
        assert EASINGS["elastic_out"].transform(0.0) == 0.0
        assert EASINGS["elastic_out"].transform(1.0) == 1.0


class TestFlip:
    """Test mirrored curves."""

    def test_flipped_ease_in_is_ease_out(self):
        """Mirroring t*t gives t*(2-t)."""
        flipped = EASINGS["ease_in"].flipped
        for t in (0.1, 0.3, 0.5, 0.9):
            assert flipped.transform(t) == pytest.approx(EASINGS["ease_out"].transform(t))

    def test_flipped_name(self):
        """Flipped curves are named after their source."""
        assert EASINGS["ease_in"].flipped.name == "ease_in.flipped"
        assert flip(EASINGS["linear"], name="reverse").name == "reverse"

    def test_flip_motion_model(self):
        """A motion model can be flipped like any curve."""
        spring = Spring.with_bounce(duration=0.5)
        flipped = spring.flipped
        assert isinstance(flipped, EasingCurve)
        assert flipped.transform(0.3) == pytest.approx(1.0 - spring.as_progress_curve(0.7))
        assert flipped.name == "Spring.flipped"


class TestEasingsDict:
    """Test EASINGS dictionary completeness."""

    def test_easings_contains_all_curves(self):
        """EASINGS dict should contain every named curve."""
        expected_keys = {
            "linear",
            "ease_in",
            "ease_out",
            "ease_in_out",
            "ease_out_cubic",
            "ease_in_out_cubic",
            "elastic_out",
        }
        assert set(EASINGS.keys()) == expected_keys

    def test_keys_match_names(self):
        """Each curve is stored under its own name."""
        for name, curve in EASINGS.items():
            assert curve.name == name

    def test_easings_are_curves(self):
        """All EASINGS values satisfy the Curve protocol."""
        for name, curve in EASINGS.items():
            assert isinstance(curve, Curve), f"{name} is not a Curve"

    def test_easings_map_zero_to_zero(self):
        """All easing curves should map 0 to 0."""
        for name, curve in EASINGS.items():
            assert curve.transform(0.0) == 0.0, f"{name}(0) != 0"

    def test_easings_map_one_to_one(self):
        """All easing curves should map 1 to 1."""
        for name, curve in EASINGS.items():
            assert curve.transform(1.0) == 1.0, f"{name}(1) != 1"

    def test_easings_stay_in_unit_range(self):
        """All non-overshooting curves should map [0,1] to [0,1]."""
        test_values = [0.0, 0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8, 0.9, 1.0]
        for name, curve in EASINGS.items():
            if name == "elastic_out":
                continue
            for t in test_values:
                result = curve.transform(t)
                assert 0.0 <= result <= 1.0, f"{name}({t}) = {result} is out of range [0,1]"
