# -*- coding: utf-8 -*-
"""
Prism: Spectral colour engine for physically based rendering
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Empirical spectral curves and bin resampling
============================================

A ``SpectralSampleSet`` is an immutable sequence of (wavelength, power)
pairs, e.g. a measured reflectance curve or a standard illuminant table.
``resample_sorted`` averages such a curve over each FixedSpectrum bin:

    bin_i = (1 / (end_i - start_i)) * ∫_{start_i}^{end_i} p(λ) dλ

where p is the piecewise-linear interpolant of the samples, held flat
outside the sampled support.

Sorting Contract:
    Samples must be non-decreasing in wavelength before resampling.  The
    resampler never reorders data; unsorted or empty input raises
    ``MalformedInputError``.  ``SpectralSampleSet.sorted()`` exists for
    callers that want reordering, and must be asked for explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Mapping, Optional, Tuple

import numpy as np
from numba import njit
from scipy.interpolate import Akima1DInterpolator, CubicSpline, PchipInterpolator

from prism_spectrum import (
    MAX_WAVELENGTH,
    MIN_WAVELENGTH,
    NUM_SPECTRAL_SAMPLES,
    ArrayFloat,
    FixedSpectrum,
)

__all__ = [
    "MalformedInputError",
    "SpectralSample",
    "SpectralSampleSet",
    "resample_sorted",
    "resample_sorted_raw",
    "compute_range_at_index",
    "compute_segment_area",
    "compute_boundary_area",
    "compute_area_sum",
    "compute_average_in_range",
    "is_outside_left_boundary",
    "is_outside_right_boundary",
]


class MalformedInputError(ValueError):
    """Sample data violates the resampler's contract (unsorted, empty, non-finite)."""


# =============================================================================
# 1.  Samples
# =============================================================================
@dataclass(slots=True, frozen=True)
class SpectralSample:
    """One (wavelength [nm], power) pair."""
    wavelength: float = 0.0
    power:      float = 0.0


class SpectralSampleSet:
    """
    Immutable, ordered collection of spectral samples.

    Storage is two parallel read-only float64 arrays.  Order is preserved
    exactly as supplied; ``is_sorted()`` reports whether the resampler's
    precondition holds.
    """

    __slots__ = ("_wavelengths", "_powers")

    def __init__(self, samples: Iterable[SpectralSample] = ()) -> None:
        items = list(samples)
        wl = np.array([s.wavelength for s in items], dtype=np.float64)
        pw = np.array([s.power for s in items], dtype=np.float64)
        self._set_arrays(wl, pw)

    # -- alternate constructors --------------------------------------------
    @classmethod
    def from_arrays(cls, wavelengths: ArrayFloat, powers: ArrayFloat) -> SpectralSampleSet:
        """
        Build from two parallel arrays (copied).

        Raises
        ------
        ValueError
            If the arrays are not one-dimensional or differ in length.
        """
        wl = np.array(wavelengths, dtype=np.float64)
        pw = np.array(powers, dtype=np.float64)
        if wl.ndim != 1 or pw.ndim != 1 or wl.shape != pw.shape:
            raise ValueError(
                f"SpectralSampleSet shape mismatch: {wl.shape}, {pw.shape}"
            )
        obj = cls.__new__(cls)
        obj._set_arrays(wl, pw)
        return obj

    @classmethod
    def from_mapping(cls, table: Mapping[float, float]) -> SpectralSampleSet:
        """Build from a ``{wavelength: power}`` table, keeping insertion order."""
        wl = np.fromiter(table.keys(), dtype=np.float64, count=len(table))
        pw = np.fromiter(table.values(), dtype=np.float64, count=len(table))
        return cls.from_arrays(wl, pw)

    def _set_arrays(self, wl: ArrayFloat, pw: ArrayFloat) -> None:
        wl.flags.writeable = False
        pw.flags.writeable = False
        self._wavelengths = wl
        self._powers = pw

    # -- read interface ----------------------------------------------------
    @property
    def wavelengths(self) -> ArrayFloat:
        return self._wavelengths

    @property
    def powers(self) -> ArrayFloat:
        return self._powers

    @property
    def wl_bounds(self) -> Tuple[float, float]:
        """(first, last) wavelength in stored order."""
        if self._wavelengths.size == 0:
            raise MalformedInputError("SpectralSampleSet is empty.")
        return float(self._wavelengths[0]), float(self._wavelengths[-1])

    def __len__(self) -> int:
        return int(self._wavelengths.shape[0])

    def __getitem__(self, index: int) -> SpectralSample:
        return SpectralSample(float(self._wavelengths[index]), float(self._powers[index]))

    def __iter__(self) -> Iterator[SpectralSample]:
        for wl, pw in zip(self._wavelengths, self._powers):
            yield SpectralSample(float(wl), float(pw))

    def is_sorted(self) -> bool:
        """True if wavelengths are non-decreasing (NaN wavelengths fail)."""
        return bool(_is_sorted_kernel(self._wavelengths))

    def sorted(self) -> SpectralSampleSet:
        """Return a copy reordered by wavelength (stable for equal wavelengths)."""
        order = np.argsort(self._wavelengths, kind="stable")
        return SpectralSampleSet.from_arrays(self._wavelengths[order], self._powers[order])

    # -- interpolation -----------------------------------------------------
    def interpolate(self, wavelengths: ArrayFloat, method: str = "linear") -> ArrayFloat:
        """
        Evaluate the curve at arbitrary wavelengths.

        Args:
            wavelengths: Target wavelengths in nm.
            method: 'linear' (flat outside the support), 'cubicspline',
                    'pchip', 'akima', or 'makima' (extrapolating).

        Returns:
            Interpolated powers, same shape as *wavelengths*.

        Raises:
            MalformedInputError: If the set is empty or unsorted.
            ValueError: If *method* is unknown.
        """
        _require_resamplable(self)
        target = np.asarray(wavelengths, dtype=np.float64)
        wl, pw = self._wavelengths, self._powers

        if method == "linear":
            return np.interp(target, wl, pw)

        # Spline interpolators need strictly increasing abscissae.
        if wl.size > 1 and not np.all(np.diff(wl) > 0):
            raise MalformedInputError(
                f"Interpolation method '{method}' requires strictly increasing wavelengths."
            )

        methods = {
            "cubicspline": lambda: CubicSpline(wl, pw, extrapolate=True)(target),
            "pchip": lambda: PchipInterpolator(wl, pw, extrapolate=True)(target),
            "akima": lambda: Akima1DInterpolator(wl, pw, method="akima", extrapolate=True)(target),
            "makima": lambda: Akima1DInterpolator(wl, pw, method="makima", extrapolate=True)(target),
        }
        if method not in methods:
            raise ValueError(
                f"Unknown interpolation type '{method}'. "
                f"Choose from: {['linear', *methods.keys()]}"
            )
        return methods[method]()

    # -- display -----------------------------------------------------------
    def __repr__(self) -> str:
        n = len(self)
        if n == 0:
            return "SpectralSampleSet(samples=0)"
        return (
            f"SpectralSampleSet(samples={n}, "
            f"range=[{self._wavelengths[0]:.2f}, {self._wavelengths[-1]:.2f}], "
            f"sorted={self.is_sorted()})"
        )


# =============================================================================
# 2.  Integration kernels (Numba)
# =============================================================================
# fastmath stays off: NaN in the input must propagate into the bins so
# that FixedSpectrum.has_nans() can report it.

@njit(cache=True)
def _is_sorted_kernel(wl: ArrayFloat) -> bool:
    for i in range(wl.shape[0] - 1):
        if not wl[i + 1] >= wl[i]:
            return False
    return True


@njit(cache=True)
def _bin_range(index: int, n_bins: int, lo: float, hi: float) -> Tuple[float, float]:
    t0 = index / n_bins
    t1 = (index + 1) / n_bins
    return lo + (hi - lo) * t0, lo + (hi - lo) * t1


@njit(cache=True)
def _segment_area(w1: float, p1: float, w2: float, p2: float,
                  left: float, right: float) -> float:
    """Trapezoid area of segment (w1, p1)-(w2, p2) clipped to [left, right]."""
    lo = max(w1, left)
    hi = min(w2, right)
    if hi <= lo:
        return 0.0
    slope = (p2 - p1) / (w2 - w1)
    p_lo = p1 + slope * (lo - w1)
    p_hi = p1 + slope * (hi - w1)
    return 0.5 * (p_lo + p_hi) * (hi - lo)


@njit(cache=True)
def _boundary_area(wl: ArrayFloat, pw: ArrayFloat, left: float, right: float) -> float:
    """Area of the flat extensions outside the sampled support within [left, right]."""
    n = wl.shape[0]
    area = 0.0
    if left < wl[0]:
        area += pw[0] * (min(right, wl[0]) - left)
    if right > wl[n - 1]:
        area += pw[n - 1] * (right - max(left, wl[n - 1]))
    return area


@njit(cache=True)
def _area_sum(wl: ArrayFloat, pw: ArrayFloat, left: float, right: float) -> float:
    total = 0.0
    for i in range(wl.shape[0] - 1):
        total += _segment_area(wl[i], pw[i], wl[i + 1], pw[i + 1], left, right)
    return total


@njit(cache=True)
def _average_in_range(wl: ArrayFloat, pw: ArrayFloat, left: float, right: float) -> float:
    n = wl.shape[0]
    if right <= wl[0]:
        return pw[0]
    if left >= wl[n - 1]:
        return pw[n - 1]
    area = _boundary_area(wl, pw, left, right) + _area_sum(wl, pw, left, right)
    return area / (right - left)


@njit(cache=True)
def _resample_kernel(wl: ArrayFloat, pw: ArrayFloat, n_bins: int,
                     lo: float, hi: float) -> ArrayFloat:
    """
    Bin averages for all bins in one sweep.

    Bins ascend, so the first segment that can overlap a bin only moves
    right; ``cursor`` tracks it and keeps the sweep O(n_bins + n_samples).
    """
    n = wl.shape[0]
    out = np.empty(n_bins, dtype=np.float64)
    cursor = 0
    for b in range(n_bins):
        start, end = _bin_range(b, n_bins, lo, hi)

        if end <= wl[0]:
            out[b] = pw[0]
            continue
        if start >= wl[n - 1]:
            out[b] = pw[n - 1]
            continue

        area = _boundary_area(wl, pw, start, end)

        while cursor + 1 < n and wl[cursor + 1] <= start:
            cursor += 1

        i = cursor
        while i + 1 < n and wl[i] < end:
            area += _segment_area(wl[i], pw[i], wl[i + 1], pw[i + 1], start, end)
            i += 1

        out[b] = area / (end - start)
    return out


# =============================================================================
# 3.  Public resampling API
# =============================================================================
def _require_resamplable(samples: SpectralSampleSet) -> None:
    if len(samples) == 0:
        raise MalformedInputError("Cannot resample an empty SpectralSampleSet.")
    if not samples.is_sorted():
        raise MalformedInputError(
            "SpectralSampleSet wavelengths must be non-decreasing; "
            "call .sorted() explicitly if reordering is intended."
        )
    if not np.all(np.isfinite(samples.wavelengths)):
        raise MalformedInputError("SpectralSampleSet contains non-finite wavelengths.")


def resample_sorted(samples: SpectralSampleSet) -> FixedSpectrum:
    """
    Average a sorted sample set over every FixedSpectrum bin.

    Raises:
        MalformedInputError: If *samples* is empty or unsorted.
    """
    _require_resamplable(samples)
    out = _resample_kernel(
        np.ascontiguousarray(samples.wavelengths),
        np.ascontiguousarray(samples.powers),
        NUM_SPECTRAL_SAMPLES,
        MIN_WAVELENGTH,
        MAX_WAVELENGTH,
    )
    return FixedSpectrum.from_array(out)


def resample_sorted_raw(wavelengths: ArrayFloat, powers: ArrayFloat) -> FixedSpectrum:
    """``resample_sorted`` over two parallel arrays."""
    return resample_sorted(SpectralSampleSet.from_arrays(wavelengths, powers))


# -- per-bin helpers (same kernels, exposed for inspection) ------------------
def compute_range_at_index(index: int) -> Tuple[float, float]:
    """``[start, end)`` wavelength range of bin *index*."""
    return _bin_range(index, NUM_SPECTRAL_SAMPLES, MIN_WAVELENGTH, MAX_WAVELENGTH)


def compute_segment_area(s1: SpectralSample, s2: SpectralSample,
                         left: float, right: float) -> float:
    return float(_segment_area(s1.wavelength, s1.power, s2.wavelength, s2.power,
                               float(left), float(right)))


def compute_boundary_area(samples: SpectralSampleSet, left: float, right: float) -> float:
    _require_resamplable(samples)
    return float(_boundary_area(samples.wavelengths, samples.powers, float(left), float(right)))


def compute_area_sum(samples: SpectralSampleSet, left: float, right: float) -> float:
    """Area under the interpolant inside the sampled support, clipped to [left, right]."""
    _require_resamplable(samples)
    return float(_area_sum(samples.wavelengths, samples.powers, float(left), float(right)))


def compute_average_in_range(samples: SpectralSampleSet, left: float, right: float) -> float:
    _require_resamplable(samples)
    return float(_average_in_range(samples.wavelengths, samples.powers,
                                   float(left), float(right)))


def is_outside_left_boundary(samples: SpectralSampleSet, right_bound: float) -> bool:
    """True if a range ending at *right_bound* lies wholly left of the first sample."""
    first, _ = samples.wl_bounds
    return right_bound <= first


def is_outside_right_boundary(samples: SpectralSampleSet, left_bound: float) -> bool:
    """True if a range starting at *left_bound* lies wholly right of the last sample."""
    _, last = samples.wl_bounds
    return left_bound >= last
