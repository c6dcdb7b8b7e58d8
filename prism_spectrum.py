# -*- coding: utf-8 -*-
"""
Prism: Spectral colour engine for physically based rendering
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Fixed-length discretised power distributions
============================================

A ``FixedSpectrum`` holds ``NUM_SPECTRAL_SAMPLES`` power values, one per
equal-width wavelength bin over ``[MIN_WAVELENGTH, MAX_WAVELENGTH)``.
The algebra is elementwise and never raises on numeric trouble: division
by a zero bin yields inf/NaN, which is detectable through ``has_nans()``.

Runtime Configuration:
    ``set_debug_checks(True)`` turns on NaN validation at the conversion
    boundary (see ``prism_converter``).  Findings are reported through
    ``warnings`` as ``NumericAnomalyWarning``.
"""

from __future__ import annotations

from numbers import Real
from typing import Final, Iterator, TypeAlias, Union

import numpy as np
import numpy.typing as npt

__all__ = [
    "NUM_SPECTRAL_SAMPLES",
    "MIN_WAVELENGTH",
    "MAX_WAVELENGTH",
    "ArrayFloat",
    "NumericAnomalyWarning",
    "set_debug_checks",
    "debug_checks_enabled",
    "FixedSpectrum",
]

ArrayFloat: TypeAlias = npt.NDArray[np.floating]

# --- Bin configuration ---
NUM_SPECTRAL_SAMPLES: Final[int] = 60
MIN_WAVELENGTH: Final[float] = 360.0
MAX_WAVELENGTH: Final[float] = 830.0

# Keeps the bin array a whole number of 4-wide float64 lanes.
assert NUM_SPECTRAL_SAMPLES % 4 == 0, "NUM_SPECTRAL_SAMPLES must be a multiple of 4"


class NumericAnomalyWarning(RuntimeWarning):
    """A spectrum carrying NaN reached a validation boundary."""


# --- Runtime Configuration ---
_DEBUG_CHECKS: bool = False


def set_debug_checks(enabled: bool = True) -> None:
    """
    Toggle NaN validation at the conversion and upsampling boundary.

    Off by default; the checks cost one pass over the bins per call.

    Args:
        enabled: If True, emit ``NumericAnomalyWarning`` for NaN spectra.
    """
    global _DEBUG_CHECKS
    _DEBUG_CHECKS = bool(enabled)


def debug_checks_enabled() -> bool:
    return _DEBUG_CHECKS


Operand: TypeAlias = Union["FixedSpectrum", Real, float, int]


class FixedSpectrum:
    """
    Discretised spectral power distribution over ``NUM_SPECTRAL_SAMPLES`` bins.

    Binary operators return new instances; in-place operators mutate the
    receiver only.  A plain real operand behaves exactly like
    ``FixedSpectrum(value)``.

    Equality is exact and bin-wise.  Instances are mutable and therefore
    unhashable.
    """

    __slots__ = ("_c",)

    # Let numpy defer to the reflected operators below.
    __array_ufunc__ = None

    def __init__(self, v: float = 0.0) -> None:
        # float() rejects arrays; use from_array for per-bin values.
        self._c: ArrayFloat = np.full(NUM_SPECTRAL_SAMPLES, float(v), dtype=np.float64)

    # -- alternate constructors --------------------------------------------
    @classmethod
    def from_array(cls, values: ArrayFloat) -> FixedSpectrum:
        """
        Build a spectrum from an array of bin values (copied).

        Raises
        ------
        ValueError
            If *values* does not hold exactly ``NUM_SPECTRAL_SAMPLES`` entries.
        """
        arr = np.array(values, dtype=np.float64).ravel()
        if arr.shape[0] != NUM_SPECTRAL_SAMPLES:
            raise ValueError(
                f"FixedSpectrum: expected {NUM_SPECTRAL_SAMPLES} bins, "
                f"got {arr.shape[0]}"
            )
        return cls._wrap(arr)

    @classmethod
    def from_samples(cls, samples) -> FixedSpectrum:
        """Resample a sorted ``SpectralSampleSet`` onto the bin grid."""
        # Local import: prism_samples depends on this module.
        from prism_samples import resample_sorted

        return resample_sorted(samples)

    @classmethod
    def _wrap(cls, arr: ArrayFloat) -> FixedSpectrum:
        obj = cls.__new__(cls)
        obj._c = arr
        return obj

    def copy(self) -> FixedSpectrum:
        """Independent, writable copy."""
        return self._wrap(self._c.copy())

    def freeze(self) -> FixedSpectrum:
        """Make the bins read-only in place; in-place operators then raise ValueError."""
        self._c.flags.writeable = False
        return self

    @property
    def is_frozen(self) -> bool:
        return not self._c.flags.writeable

    # -- read interface ----------------------------------------------------
    @property
    def values(self) -> ArrayFloat:
        """Read-only view of the bin values."""
        view = self._c.view()
        view.flags.writeable = False
        return view

    def __len__(self) -> int:
        return NUM_SPECTRAL_SAMPLES

    def __getitem__(self, index: int) -> float:
        return float(self._c[index])

    def __iter__(self) -> Iterator[float]:
        return (float(v) for v in self._c)

    def __array__(self, dtype=None, copy=None) -> ArrayFloat:
        if dtype is None:
            return self._c.copy()
        return self._c.astype(dtype)

    # -- algebra -----------------------------------------------------------
    @staticmethod
    def _operand(other: Operand):
        if isinstance(other, FixedSpectrum):
            return other._c
        if isinstance(other, Real) and not isinstance(other, bool):
            return float(other)
        return None

    def _binary(self, other: Operand, ufunc, reflected: bool = False):
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            if reflected:
                return self._wrap(ufunc(rhs, self._c))
            return self._wrap(ufunc(self._c, rhs))

    def _inplace(self, other: Operand, ufunc):
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            ufunc(self._c, rhs, out=self._c)
        return self

    def __add__(self, other: Operand) -> FixedSpectrum:
        return self._binary(other, np.add)

    def __radd__(self, other: Operand) -> FixedSpectrum:
        return self._binary(other, np.add, reflected=True)

    def __iadd__(self, other: Operand) -> FixedSpectrum:
        return self._inplace(other, np.add)

    def __sub__(self, other: Operand) -> FixedSpectrum:
        return self._binary(other, np.subtract)

    def __rsub__(self, other: Operand) -> FixedSpectrum:
        return self._binary(other, np.subtract, reflected=True)

    def __isub__(self, other: Operand) -> FixedSpectrum:
        return self._inplace(other, np.subtract)

    def __mul__(self, other: Operand) -> FixedSpectrum:
        return self._binary(other, np.multiply)

    def __rmul__(self, other: Operand) -> FixedSpectrum:
        return self._binary(other, np.multiply, reflected=True)

    def __imul__(self, other: Operand) -> FixedSpectrum:
        return self._inplace(other, np.multiply)

    def __truediv__(self, other: Operand) -> FixedSpectrum:
        return self._binary(other, np.divide)

    def __rtruediv__(self, other: Operand) -> FixedSpectrum:
        return self._binary(other, np.divide, reflected=True)

    def __itruediv__(self, other: Operand) -> FixedSpectrum:
        return self._inplace(other, np.divide)

    # -- predicates --------------------------------------------------------
    def is_black(self) -> bool:
        return not np.any(self._c != 0.0)

    def has_nans(self) -> bool:
        return bool(np.isnan(self._c).any())

    def is_equal(self, other: FixedSpectrum) -> bool:
        """Exact bin-wise equality.  NaN bins never compare equal."""
        return bool(np.array_equal(self._c, other._c))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedSpectrum):
            return NotImplemented
        return self.is_equal(other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, FixedSpectrum):
            return NotImplemented
        return not self.is_equal(other)

    __hash__ = None  # type: ignore[assignment]

    def clamp_zero(self) -> None:
        """Set negative bins to zero in place.  NaN bins are left untouched."""
        self._c[self._c < 0.0] = 0.0

    # -- pure elementwise functions ----------------------------------------
    @staticmethod
    def sqrt(s: FixedSpectrum) -> FixedSpectrum:
        with np.errstate(invalid="ignore"):
            return FixedSpectrum._wrap(np.sqrt(s._c))

    @staticmethod
    def pow(s: FixedSpectrum, exponent: float) -> FixedSpectrum:
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            return FixedSpectrum._wrap(np.power(s._c, exponent))

    @staticmethod
    def lerp(a: FixedSpectrum, b: FixedSpectrum, t: float) -> FixedSpectrum:
        """``a*(1-t) + b*t``; *t* outside [0, 1] extrapolates."""
        return a * (1.0 - t) + b * t

    @staticmethod
    def clamp(s: FixedSpectrum, low: FixedSpectrum, high: FixedSpectrum) -> FixedSpectrum:
        """Bin-wise clamp of *s* into ``[low, high]``."""
        val = s._c
        out = np.where(val < low._c, low._c, np.where(val > high._c, high._c, val))
        return FixedSpectrum._wrap(out)

    @staticmethod
    def min(a: FixedSpectrum, b: FixedSpectrum) -> FixedSpectrum:
        return FixedSpectrum._wrap(np.where(a._c < b._c, a._c, b._c))

    @staticmethod
    def max(a: FixedSpectrum, b: FixedSpectrum) -> FixedSpectrum:
        return FixedSpectrum._wrap(np.where(a._c > b._c, a._c, b._c))

    # -- display -----------------------------------------------------------
    def __repr__(self) -> str:
        return (
            f"FixedSpectrum(bins={NUM_SPECTRAL_SAMPLES}, "
            f"range=[{self._c.min():.4g}, {self._c.max():.4g}], "
            f"nans={self.has_nans()})"
        )
