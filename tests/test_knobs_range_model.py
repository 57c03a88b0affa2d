from __future__ import annotations

import math
import unittest

import numpy as np

from knobs.range_model import (
    DEGREES_PER_UNIT,
    Bounded,
    Infinite,
    MinOnly,
    ValueModel,
    clamp,
    mode_from_options,
    quantize,
    to_angle,
    to_position,
    validate_step,
    value_range,
)


class RangeModeConstructionTests(unittest.TestCase):
    def test_mode_from_options_defaults_missing_bounds(self) -> None:
        self.assertEqual(mode_from_options("bounded"), Bounded(min=0.0, max=10.0, start_angle=-135.0, end_angle=135.0))
        self.assertEqual(mode_from_options("bounded", max=5), Bounded(min=0.0, max=5.0))
        self.assertEqual(mode_from_options("min-only"), MinOnly(min=0.0))
        self.assertEqual(mode_from_options("min_only", min=2), MinOnly(min=2.0))
        self.assertEqual(mode_from_options("infinite", min=3, max=4), Infinite())

    def test_mode_from_options_rejects_unknown_mode(self) -> None:
        with self.assertRaisesRegex(ValueError, "Unknown mode"):
            mode_from_options("logarithmic")

    def test_bounded_rejects_inverted_or_non_finite_bounds(self) -> None:
        with self.assertRaisesRegex(ValueError, "max must be > min"):
            Bounded(min=5, max=5)
        with self.assertRaisesRegex(ValueError, "finite"):
            Bounded(min=0, max=math.inf)
        with self.assertRaisesRegex(ValueError, "finite"):
            MinOnly(min=math.nan)

    def test_validate_step_rejects_non_positive_steps(self) -> None:
        for bad in (0, -1, math.nan, math.inf, True):
            with self.subTest(step=bad):
                with self.assertRaises(ValueError):
                    validate_step(bad)
        self.assertEqual(validate_step(2), 2.0)


class ClampAndQuantizeTests(unittest.TestCase):
    def test_clamp_per_mode(self) -> None:
        bounded = Bounded(min=0, max=10)
        self.assertEqual(clamp(bounded, 15), 10)
        self.assertEqual(clamp(bounded, -5), 0)
        self.assertEqual(clamp(bounded, 4.2), 4.2)
        self.assertEqual(clamp(MinOnly(min=1), -3), 1)
        self.assertEqual(clamp(MinOnly(min=1), 1e9), 1e9)
        self.assertEqual(clamp(Infinite(), -1e9), -1e9)

    def test_quantize_rounds_to_nearest_step(self) -> None:
        self.assertEqual(quantize(5.24, 0.5), 5.0)
        self.assertEqual(quantize(5.26, 0.5), 5.5)
        self.assertEqual(quantize(7.0, 1), 7.0)

    def test_quantize_rounds_halves_up(self) -> None:
        self.assertEqual(quantize(2.5, 1), 3.0)
        self.assertEqual(quantize(-2.5, 1), -2.0)

    def test_quantize_pulls_back_inside_bounds(self) -> None:
        # 10 / 4 rounds to 3 steps (12), which would overshoot max.
        self.assertEqual(quantize(10, 4, Bounded(min=0, max=10)), 8.0)
        self.assertEqual(quantize(0.3, 1, MinOnly(min=0.25)), 1.0)

    def test_quantize_snaps_float_noise_onto_bounds(self) -> None:
        # 70 * 0.1 and -30 * 0.1 both miss the bound by one ulp.
        self.assertEqual(quantize(6.96, 0.1, Bounded(min=-3, max=7)), 7.0)
        self.assertEqual(quantize(-3.0, 0.1, Bounded(min=-3, max=7)), -3.0)

    def test_quantize_without_any_multiple_in_bounds_keeps_raw(self) -> None:
        self.assertEqual(quantize(0.5, 1, Bounded(min=0.25, max=0.75)), 0.5)

    def test_quantize_rejects_bad_step(self) -> None:
        with self.assertRaises(ValueError):
            quantize(1.0, 0)


class AngleAndPositionTests(unittest.TestCase):
    def test_bounded_angle_endpoints_are_exact(self) -> None:
        mode = Bounded(min=0.1, max=0.7, start_angle=-133.3, end_angle=151.7)
        self.assertEqual(to_angle(mode, 0.1), -133.3)
        self.assertEqual(to_angle(mode, 0.7), 151.7)

    def test_bounded_angle_is_linear(self) -> None:
        mode = Bounded(min=0, max=10)
        self.assertAlmostEqual(to_angle(mode, 5), 0.0)
        self.assertAlmostEqual(to_angle(mode, 2.5), -67.5)

    def test_unbounded_modes_use_reference_scale(self) -> None:
        self.assertEqual(DEGREES_PER_UNIT, 27.0)
        self.assertAlmostEqual(to_angle(MinOnly(min=2), 12), 270.0)
        self.assertAlmostEqual(to_angle(Infinite(), -20), -540.0)
        self.assertAlmostEqual(to_angle(Infinite(), 100), 2700.0)

    def test_value_range(self) -> None:
        self.assertEqual(value_range(Bounded(min=-100, max=100)), 200)
        self.assertEqual(value_range(MinOnly(min=50)), 10)
        self.assertEqual(value_range(Infinite()), 10)

    def test_position_is_inverted_with_maximum_at_top(self) -> None:
        self.assertEqual(to_position(100, minimum=0, maximum=100, track_length=150, top=10), 10)
        self.assertEqual(to_position(0, minimum=0, maximum=100, track_length=150, top=10), 160)
        self.assertEqual(to_position(50, minimum=0, maximum=100, track_length=150), 75)
        with self.assertRaises(ValueError):
            to_position(0, minimum=1, maximum=1, track_length=10)


class ValueModelTests(unittest.TestCase):
    def test_create_accepts_any_real_number(self) -> None:
        model = ValueModel.create(Bounded(min=np.int64(0), max=np.float32(10)), np.int32(1), np.int64(3))
        self.assertEqual((model.raw, model.value), (3.0, 3.0))
        self.assertIsInstance(model.raw, float)
        with self.assertRaises(ValueError):
            ValueModel.create(Bounded(), 1, np.float64("nan"))
        with self.assertRaises(ValueError):
            validate_step(True)

    def test_create_clamps_and_quantizes_initial_value(self) -> None:
        model = ValueModel.create(Bounded(min=0, max=10), 1, 12.4)
        self.assertEqual((model.raw, model.value), (10, 10))
        model = ValueModel.create(Bounded(min=0, max=10), 0.5, 3.3)
        self.assertEqual((model.raw, model.value), (3.3, 3.5))

    def test_update_tracks_raw_and_reports_external_changes(self) -> None:
        model = ValueModel.create(Bounded(min=0, max=10), 1, 0)
        self.assertFalse(model.update(0.3))
        self.assertEqual(model.raw, 0.3)
        self.assertEqual(model.value, 0)
        self.assertTrue(model.update(0.6))
        self.assertEqual(model.value, 1)
        self.assertAlmostEqual(model.angle, -135.0 + 0.06 * 270.0)

    def test_create_rejects_non_finite_initial_value(self) -> None:
        with self.assertRaises(ValueError):
            ValueModel.create(Infinite(), 1, math.nan)


if __name__ == "__main__":
    unittest.main()
