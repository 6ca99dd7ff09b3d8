import math
import sys

from unittest import TestCase

from .. import floats as test_module
from ..floats import FloatCategory, classify, scaled_magnitude


class TestClassify(TestCase):
    def test_categories(self):
        assert classify(math.nan) is FloatCategory.NAN
        assert classify(math.inf) is FloatCategory.INFINITE
        assert classify(-math.inf) is FloatCategory.INFINITE
        assert classify(0.0) is FloatCategory.ZERO
        assert classify(-0.0) is FloatCategory.ZERO
        assert classify(5e-324) is FloatCategory.SUBNORMAL
        assert classify(-sys.float_info.min / 2) is FloatCategory.SUBNORMAL
        assert classify(sys.float_info.min) is FloatCategory.NORMAL
        assert classify(-1.33) is FloatCategory.NORMAL
        assert classify(sys.float_info.max) is FloatCategory.NORMAL


class TestScaledMagnitude(TestCase):
    def test_fixed_point_band(self):
        assert scaled_magnitude(1.0) == (1, 1 << test_module.FRACTION_BITS)
        assert scaled_magnitude(-0.5) == (-1, 1 << (test_module.FRACTION_BITS - 1))
        assert scaled_magnitude(3.0) == (1, 3 << test_module.FRACTION_BITS)

    def test_symmetric(self):
        for value in (1.33, 1e-30, 2e-300, 6.02e23, 1e300, sys.float_info.max):
            (sign, magnitude), (neg_sign, neg_magnitude) = (
                scaled_magnitude(value),
                scaled_magnitude(-value),
            )
            assert (sign, neg_sign) == (1, -1)
            assert magnitude == neg_magnitude

    def test_band_edges_ordered(self):
        below_low = math.nextafter(test_module.BAND_LOW, 0.0)
        below_high = math.nextafter(test_module.BAND_HIGH, 0.0)
        ladder = [
            sys.float_info.min,
            below_low,
            test_module.BAND_LOW,
            1.0,
            below_high,
            test_module.BAND_HIGH,
            sys.float_info.max,
        ]
        magnitudes = [scaled_magnitude(value)[1] for value in ladder]
        assert magnitudes == sorted(magnitudes)
        assert len(set(magnitudes)) == len(magnitudes)
        assert magnitudes[1] < 1 << 62
        assert magnitudes[2] == 1 << 64
        assert magnitudes[4] < test_module.HIGH_BASE == magnitudes[5]
        assert magnitudes[-1] < 1 << test_module.MAGNITUDE_BITS

    def test_smallest_steps_distinct(self):
        for value in (sys.float_info.min, 1e-29, 1.0, 1e27, 1e300):
            step = math.nextafter(value, math.inf)
            assert scaled_magnitude(value)[1] < scaled_magnitude(step)[1]
