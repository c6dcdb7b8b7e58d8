# -*- coding: utf-8 -*-
"""
Prism: Spectral colour engine for physically based rendering
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Spectrum ↔ CIE XYZ ↔ linear RGB
===============================

Normalization Convention:
    Projection onto the binned CIE curves is a plain dot product divided
    by the Ȳ integral over the same bins:

        X = Σ s_i · x̄_i / Σ ȳ_i     (likewise Y, Z)

    A flat unit spectrum therefore maps to Y = 1 for any bin count.  The
    constant is taken from the table at construction, never hard-coded.

    The RGB working space is linear sRGB (D65).  XYZ → RGB uses the
    literal IEC 61966-2-1 matrix; RGB → XYZ uses its exact inverse so the
    pair round-trips to machine precision.  Neither direction clips.
"""

from __future__ import annotations

import warnings
from typing import Final, Optional

import numpy as np

from prism_coefficients import Coefficients, RGBCoefficients, XYZCoefficients
from prism_curves import StandardCurveTable, initialize
from prism_samples import SpectralSampleSet, resample_sorted, resample_sorted_raw
from prism_spectrum import (
    ArrayFloat,
    FixedSpectrum,
    NumericAnomalyWarning,
    debug_checks_enabled,
)

__all__ = [
    "M_XYZ_TO_RGB_T",
    "M_RGB_TO_XYZ_T",
    "xyz_to_rgb",
    "rgb_to_xyz",
    "SampledSpectrumConverter",
]

# --- Pre-transposed matrices (row-vector convention: rgb = xyz @ M_T) ---
_M_XYZ_TO_RGB_BASE = np.array([
    [ 3.2404542, -1.5371385, -0.4985314],
    [-0.9692660,  1.8760108,  0.0415560],
    [ 0.0556434, -0.2040259,  1.0572252]
], dtype=np.float64)
M_XYZ_TO_RGB_T: Final[ArrayFloat] = _M_XYZ_TO_RGB_BASE.T.copy()
M_RGB_TO_XYZ_T: Final[ArrayFloat] = np.linalg.inv(_M_XYZ_TO_RGB_BASE).T.copy()


def xyz_to_rgb(xyz: XYZCoefficients) -> RGBCoefficients:
    return Coefficients.from_array(np.dot(np.asarray(xyz), M_XYZ_TO_RGB_T))


def rgb_to_xyz(rgb: RGBCoefficients) -> XYZCoefficients:
    return Coefficients.from_array(np.dot(np.asarray(rgb), M_RGB_TO_XYZ_T))


def _check_anomaly(spectrum: FixedSpectrum, where: str) -> None:
    if debug_checks_enabled() and spectrum.has_nans():
        warnings.warn(
            f"{where}: spectrum contains NaN bins; result will be NaN.",
            NumericAnomalyWarning,
            stacklevel=3,
        )


class SampledSpectrumConverter:
    """
    Bridge between empirical curves, binned spectra, and device colour.

    Holds a reference to a StandardCurveTable (the shared one from
    ``prism_curves.initialize()`` unless given) and the (3, N) stack of
    CIE curves used for projection.
    """

    __slots__ = ("_table", "_cmf", "_y_integral")

    def __init__(self, table: Optional[StandardCurveTable] = None) -> None:
        self._table = table if table is not None else initialize()
        self._cmf: ArrayFloat = np.stack([
            self._table.cie_x.values,
            self._table.cie_y.values,
            self._table.cie_z.values,
        ])
        self._cmf.flags.writeable = False
        self._y_integral: float = self._table.cie_y_integral

    @property
    def table(self) -> StandardCurveTable:
        return self._table

    @property
    def xyz_normalization_constant(self) -> float:
        return self._y_integral

    # -- resampling --------------------------------------------------------
    @staticmethod
    def from_sorted_samples(samples: SpectralSampleSet) -> FixedSpectrum:
        """See ``prism_samples.resample_sorted``; raises MalformedInputError."""
        return resample_sorted(samples)

    @staticmethod
    def from_sorted_raw_samples(wavelengths: ArrayFloat, powers: ArrayFloat) -> FixedSpectrum:
        return resample_sorted_raw(wavelengths, powers)

    # -- projection --------------------------------------------------------
    def _project(self, spectrum: FixedSpectrum) -> XYZCoefficients:
        xyz = np.dot(self._cmf, spectrum.values) / self._y_integral
        return Coefficients.from_array(xyz)

    # Each public entry point runs its own check so the warning's
    # stacklevel lands on the caller's line.
    def to_xyz(self, spectrum: FixedSpectrum) -> XYZCoefficients:
        _check_anomaly(spectrum, "to_xyz")
        return self._project(spectrum)

    def to_y(self, spectrum: FixedSpectrum) -> float:
        """Luminance only (the Y component of ``to_xyz``)."""
        _check_anomaly(spectrum, "to_y")
        return float(np.dot(self._cmf[1], spectrum.values) / self._y_integral)

    def to_rgb(self, spectrum: FixedSpectrum) -> RGBCoefficients:
        _check_anomaly(spectrum, "to_rgb")
        return xyz_to_rgb(self._project(spectrum))

    xyz_to_rgb = staticmethod(xyz_to_rgb)
    rgb_to_xyz = staticmethod(rgb_to_xyz)


# =============================================================================
# Validation Block
# =============================================================================
if __name__ == "__main__":
    conv = SampledSpectrumConverter()

    print("1. Flat unit spectrum luminance...")
    y = conv.to_y(FixedSpectrum(1.0))
    print(f"   Y = {y:.15f} {'[PASS]' if abs(y - 1.0) < 1e-12 else '[FAIL]'}")

    print("2. XYZ -> RGB -> XYZ round trip...")
    xyz_in = Coefficients(0.3, 0.5, 0.2)
    xyz_out = rgb_to_xyz(xyz_to_rgb(xyz_in))
    err = float(np.max(np.abs(np.asarray(xyz_in) - np.asarray(xyz_out))))
    print(f"   Max Error: {err:.2e} {'[PASS]' if err < 1e-12 else '[FAIL]'}")
