"""이징 커브 테스트"""

import logging

import pytest

from src.core.rig.curves import (
    Keyframe,
    KeyframeCurve,
    LinearCurve,
    LookupTableCurve,
    PiecewiseLinearCurve,
    default_ease_curve,
    get_curve,
)


class TestLinearCurve:
    def test_identity(self):
        curve = LinearCurve()
        assert curve.evaluate(0.0) == 0.0
        assert curve.evaluate(0.37) == pytest.approx(0.37)
        assert curve(1.0) == 1.0


class TestKeyframeCurve:
    def test_default_ease_end_points(self):
        curve = default_ease_curve()
        assert curve.evaluate(0.0) == 0.0
        assert curve.evaluate(1.0) == 1.0
        assert curve.evaluate(0.5) == pytest.approx(0.5)

    def test_default_ease_is_smoothstep(self):
        curve = default_ease_curve()
        assert curve.evaluate(0.25) == pytest.approx(0.15625)
        assert curve.evaluate(0.75) == pytest.approx(0.84375)

    def test_clamped_outside_keys(self):
        curve = default_ease_curve()
        assert curve.evaluate(-1.0) == 0.0
        assert curve.evaluate(2.0) == 1.0

    def test_unit_tangents_are_linear(self):
        curve = KeyframeCurve([Keyframe(0.0, 0.0, 1.0, 1.0), Keyframe(1.0, 1.0, 1.0, 1.0)])
        assert curve.evaluate(0.3) == pytest.approx(0.3)

    def test_keys_sorted_by_time(self):
        curve = KeyframeCurve([Keyframe(1.0, 1.0), Keyframe(0.0, 0.0)])
        assert [k.time for k in curve.keys] == [0.0, 1.0]
        assert curve.evaluate(0.5) == pytest.approx(0.5)

    def test_three_keys(self):
        curve = KeyframeCurve(
            [Keyframe(0.0, 0.0), Keyframe(0.5, 1.0), Keyframe(1.0, 0.0)]
        )
        assert curve.evaluate(0.5) == pytest.approx(1.0)
        assert curve.evaluate(0.25) == pytest.approx(0.5)
        assert curve.evaluate(0.75) == pytest.approx(0.5)

    def test_single_key_is_constant(self):
        curve = KeyframeCurve([Keyframe(0.5, 0.8)])
        assert curve.evaluate(0.0) == 0.8
        assert curve.evaluate(1.0) == 0.8

    def test_single_key_nan_input(self):
        curve = KeyframeCurve([Keyframe(0.5, 0.8)])
        assert curve.evaluate(float("nan")) == 0.8

    def test_empty_keys_rejected(self):
        with pytest.raises(ValueError):
            KeyframeCurve([])


class TestPiecewiseLinearCurve:
    def test_interpolation(self):
        curve = PiecewiseLinearCurve([(0.0, 0.0), (0.5, 0.8), (1.0, 1.0)])
        assert curve.evaluate(0.25) == pytest.approx(0.4)
        assert curve.evaluate(0.75) == pytest.approx(0.9)

    def test_clamped(self):
        curve = PiecewiseLinearCurve([(0.2, 0.1), (0.8, 0.9)])
        assert curve.evaluate(0.0) == pytest.approx(0.1)
        assert curve.evaluate(1.0) == pytest.approx(0.9)

    def test_empty_rejected(self):
        with pytest.raises(ValueError):
            PiecewiseLinearCurve([])


class TestLookupTableCurve:
    def test_uniform_samples(self):
        curve = LookupTableCurve([0.0, 0.5, 1.0])
        assert curve.evaluate(0.25) == pytest.approx(0.25)
        assert curve.evaluate(1.0) == pytest.approx(1.0)

    def test_bake_matches_source(self):
        baked = LookupTableCurve.bake(default_ease_curve(), resolution=101)
        assert baked.evaluate(0.5) == pytest.approx(0.5)
        assert baked.evaluate(0.25) == pytest.approx(0.15625, abs=1e-3)

    def test_too_few_samples(self):
        with pytest.raises(ValueError):
            LookupTableCurve([1.0])


class TestGetCurve:
    def test_linear(self):
        assert isinstance(get_curve("linear"), LinearCurve)

    def test_ease(self):
        assert isinstance(get_curve("ease"), KeyframeCurve)

    def test_unknown_falls_back_to_ease(self, caplog):
        with caplog.at_level(logging.WARNING):
            curve = get_curve("bounce")
        assert isinstance(curve, KeyframeCurve)
        assert "Unknown curve" in caplog.text
