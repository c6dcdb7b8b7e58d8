"""Unit tests for FixedSpectrum.

Tests cover:
- Construction and the sequence interface
- Elementwise algebra, scalar promotion, and value semantics
- Predicates (is_black, has_nans, equality) and clamp_zero
- Static elementwise functions (sqrt, pow, lerp, clamp, min, max)
"""

import numpy as np
import pytest

from prism_spectrum import (
    MAX_WAVELENGTH,
    MIN_WAVELENGTH,
    NUM_SPECTRAL_SAMPLES,
    FixedSpectrum,
)


def ramp(offset=0.0, step=0.25):
    """Spectrum with exactly representable, distinct bin values."""
    return FixedSpectrum.from_array(offset + step * np.arange(NUM_SPECTRAL_SAMPLES))


class TestConstruction:
    """Tests for constructors and the read interface."""

    def test_bin_configuration(self):
        """Test the bin count is SIMD-friendly and the range is visible light."""
        assert NUM_SPECTRAL_SAMPLES == 60
        assert NUM_SPECTRAL_SAMPLES % 4 == 0
        assert MIN_WAVELENGTH < MAX_WAVELENGTH

    def test_default_is_black(self):
        """Test default construction fills every bin with zero."""
        s = FixedSpectrum()
        assert len(s) == NUM_SPECTRAL_SAMPLES
        assert all(v == 0.0 for v in s)

    def test_scalar_fill(self):
        """Test scalar construction sets every bin."""
        s = FixedSpectrum(2.5)
        assert all(v == 2.5 for v in s)

    def test_fill_rejects_arrays(self):
        """Test the fill constructor only accepts scalars."""
        with pytest.raises(TypeError):
            FixedSpectrum(np.ones(NUM_SPECTRAL_SAMPLES))

    def test_fill_accepts_numpy_scalar(self):
        assert FixedSpectrum(np.float64(0.5)) == FixedSpectrum(0.5)

    def test_from_array_copies(self):
        """Test from_array does not alias the caller's array."""
        data = np.ones(NUM_SPECTRAL_SAMPLES)
        s = FixedSpectrum.from_array(data)
        data[0] = 7.0
        assert s[0] == 1.0

    def test_from_array_wrong_length(self):
        """Test from_array rejects arrays of the wrong length."""
        with pytest.raises(ValueError, match="expected 60 bins"):
            FixedSpectrum.from_array(np.ones(NUM_SPECTRAL_SAMPLES - 1))

    def test_values_view_is_read_only(self):
        """Test the values property cannot be used to mutate the spectrum."""
        s = FixedSpectrum(1.0)
        with pytest.raises(ValueError):
            s.values[0] = 5.0
        assert s[0] == 1.0

    def test_asarray(self):
        """Test numpy conversion yields the bin values."""
        s = ramp()
        np.testing.assert_array_equal(np.asarray(s), 0.25 * np.arange(NUM_SPECTRAL_SAMPLES))

    def test_unhashable(self):
        """Test spectra are mutable values and cannot be hashed."""
        with pytest.raises(TypeError):
            hash(FixedSpectrum(1.0))


class TestAlgebra:
    """Tests for elementwise operators."""

    def test_add_sub_inverse(self):
        """Test a + b - b == a exactly for representable values."""
        a = ramp()
        b = ramp(offset=3.5, step=0.5)
        assert a + b - b == a

    def test_multiplicative_identity(self):
        """Test a * FixedSpectrum(1.0) == a."""
        a = ramp(offset=-2.0)
        assert a * FixedSpectrum(1.0) == a

    def test_elementwise_mul_div(self):
        """Test multiplication and division act bin by bin."""
        a = ramp(offset=1.0)
        b = FixedSpectrum(2.0)
        np.testing.assert_array_equal((a * b).values, a.values * 2.0)
        np.testing.assert_array_equal((a / b).values, a.values / 2.0)

    def test_scalar_promotion_matches_fill(self):
        """Test a real operand behaves like the scalar-fill constructor."""
        a = ramp()
        assert a * 3.0 == a * FixedSpectrum(3.0)
        assert a + 1 == a + FixedSpectrum(1.0)
        assert 2.0 * a == a * 2.0
        assert 1.0 - a == FixedSpectrum(1.0) - a
        assert 1.0 / FixedSpectrum(4.0) == FixedSpectrum(0.25)

    def test_binary_ops_return_new_instances(self):
        """Test binary operators leave both operands untouched."""
        a = ramp()
        b = FixedSpectrum(1.0)
        before = a.copy()
        c = a + b
        assert c is not a
        assert a == before

    def test_inplace_mutates_receiver_only(self):
        """Test in-place operators change only the left operand."""
        a = ramp()
        copy = a.copy()
        b = FixedSpectrum(2.0)
        a += b
        a *= b
        a -= b
        a /= b
        assert copy == ramp()
        assert b == FixedSpectrum(2.0)
        np.testing.assert_allclose(a.values, ((copy.values + 2.0) * 2.0 - 2.0) / 2.0)

    def test_division_by_zero_does_not_raise(self):
        """Test 0/0 produces NaN and x/0 produces inf, silently."""
        zero = FixedSpectrum(0.0)
        assert (zero / zero).has_nans()
        q = FixedSpectrum(1.0) / zero
        assert not q.has_nans()
        assert np.all(np.isinf(q.values))

    def test_unsupported_operand(self):
        """Test non-numeric operands raise TypeError."""
        with pytest.raises(TypeError):
            FixedSpectrum(1.0) + "red"
        with pytest.raises(TypeError):
            FixedSpectrum(1.0) + np.ones(NUM_SPECTRAL_SAMPLES)

    def test_frozen_spectrum_rejects_inplace(self):
        """Test in-place algebra on a frozen spectrum fails loudly."""
        s = FixedSpectrum(1.0).freeze()
        assert s.is_frozen
        with pytest.raises(ValueError):
            s += 1.0
        assert s == FixedSpectrum(1.0)
        assert not s.copy().is_frozen


class TestPredicates:
    """Tests for is_black, has_nans, equality, and clamp_zero."""

    def test_zero_is_black(self):
        """Test the all-zero spectrum is black."""
        assert FixedSpectrum(0.0).is_black()

    def test_single_nonzero_bin_not_black(self):
        """Test a single nonzero bin makes a spectrum non-black."""
        data = np.zeros(NUM_SPECTRAL_SAMPLES)
        data[37] = 1e-300
        assert not FixedSpectrum.from_array(data).is_black()

    def test_has_nans(self):
        """Test NaN detection in any bin."""
        data = np.ones(NUM_SPECTRAL_SAMPLES)
        assert not FixedSpectrum.from_array(data).has_nans()
        data[5] = np.nan
        assert FixedSpectrum.from_array(data).has_nans()

    def test_exact_equality(self):
        """Test equality has no epsilon tolerance."""
        a = FixedSpectrum(1.0)
        b = FixedSpectrum(1.0 + 1e-15)
        assert a == FixedSpectrum(1.0)
        assert a != b
        assert not a.is_equal(b)

    def test_nan_never_equal(self):
        """Test a NaN spectrum is not equal to itself."""
        n = FixedSpectrum(np.nan)
        assert n != n

    def test_clamp_zero(self):
        """Test negative bins become zero and others are untouched."""
        s = ramp(offset=-5.0)
        original = s.copy()
        s.clamp_zero()
        assert np.all(s.values >= 0.0)
        positive = original.values > 0
        np.testing.assert_array_equal(s.values[positive], original.values[positive])

    def test_clamp_zero_idempotent(self):
        """Test clamping twice equals clamping once."""
        s = ramp(offset=-5.0)
        s.clamp_zero()
        once = s.copy()
        s.clamp_zero()
        assert s == once


class TestStaticFunctions:
    """Tests for the pure elementwise helpers."""

    def test_sqrt(self):
        s = FixedSpectrum.sqrt(FixedSpectrum(16.0))
        assert s == FixedSpectrum(4.0)

    def test_pow(self):
        s = FixedSpectrum.pow(FixedSpectrum(3.0), 2.0)
        assert s == FixedSpectrum(9.0)

    def test_lerp_endpoints(self):
        """Test lerp returns the endpoints at t=0 and t=1."""
        a, b = ramp(), ramp(offset=10.0)
        assert FixedSpectrum.lerp(a, b, 0.0) == a
        assert FixedSpectrum.lerp(a, b, 1.0) == b

    def test_lerp_extrapolates(self):
        """Test t outside [0, 1] extrapolates linearly."""
        s = FixedSpectrum.lerp(FixedSpectrum(1.0), FixedSpectrum(2.0), 2.0)
        assert s == FixedSpectrum(3.0)
        s = FixedSpectrum.lerp(FixedSpectrum(1.0), FixedSpectrum(2.0), -1.0)
        assert s == FixedSpectrum(0.0)

    def test_clamp_with_spectrum_bounds(self):
        """Test clamp uses per-bin bounds."""
        s = ramp()
        low = FixedSpectrum(2.0)
        high = FixedSpectrum(5.0)
        c = FixedSpectrum.clamp(s, low, high)
        np.testing.assert_array_equal(c.values, np.clip(s.values, 2.0, 5.0))

    def test_min_max(self):
        a = ramp()
        b = FixedSpectrum(7.0)
        np.testing.assert_array_equal(FixedSpectrum.min(a, b).values, np.minimum(a.values, 7.0))
        np.testing.assert_array_equal(FixedSpectrum.max(a, b).values, np.maximum(a.values, 7.0))

    def test_static_functions_are_pure(self):
        """Test the helpers never modify their inputs."""
        a = ramp(offset=-1.0)
        before = a.copy()
        FixedSpectrum.sqrt(a)
        FixedSpectrum.pow(a, 3.0)
        FixedSpectrum.clamp(a, FixedSpectrum(0.0), FixedSpectrum(1.0))
        FixedSpectrum.min(a, FixedSpectrum(0.0))
        assert a == before
