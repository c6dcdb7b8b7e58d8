# -*- coding: utf-8 -*-
"""
Prism: Spectral colour engine for physically based rendering
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Process-wide standard curve table
=================================

``StandardCurveTable`` owns every constant FixedSpectrum the engine
needs: the CIE 1931 matching functions and the reflectance/illuminant
basis spectra used for RGB upsampling.  Each entry is resampled once
from ``prism_tables`` and its bin array is made read-only.

Illuminant Basis Convention:
    The illuminant bases are the reflectance bases lit by CIE D65,
    normalised so that D65 has unit luminance.  The white illuminant
    basis therefore re-evaluates to linear sRGB ≈ (1, 1, 1).

Lifecycle:
    ``initialize()`` builds the shared table once (thread-safe) and
    returns it.  Converter and upsampler accept a table explicitly and
    fall back to this shared handle.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict, Optional

import numpy as np

from prism_samples import SpectralSampleSet, resample_sorted
from prism_spectrum import FixedSpectrum
from prism_tables import (
    CIE_1931_2DEG_CMF,
    CIE_D65_SPD,
    SMITS_BAND_CENTERS,
    SMITS_REFLECTANCE,
)

__all__ = [
    "SpectrumKind",
    "BasisColor",
    "StandardCurveTable",
    "initialize",
]


class SpectrumKind(Enum):
    REFLECTANCE = "refl"
    ILLUMINANT = "illum"


class BasisColor(IntEnum):
    WHITE = 0
    CYAN = 1
    MAGENTA = 2
    YELLOW = 3
    RED = 4
    GREEN = 5
    BLUE = 6


def _frozen(spectrum: FixedSpectrum) -> FixedSpectrum:
    # Table entries are shared across threads; in-place algebra on them
    # fails loudly instead of corrupting every later conversion.
    return spectrum.freeze()


@dataclass(frozen=True, slots=True)
class StandardCurveTable:
    """Immutable bundle of the standard observer curves and basis spectra."""
    cie_x: FixedSpectrum
    cie_y: FixedSpectrum
    cie_z: FixedSpectrum

    refl_white:   FixedSpectrum
    refl_cyan:    FixedSpectrum
    refl_magenta: FixedSpectrum
    refl_yellow:  FixedSpectrum
    refl_red:     FixedSpectrum
    refl_green:   FixedSpectrum
    refl_blue:    FixedSpectrum

    illum_white:   FixedSpectrum
    illum_cyan:    FixedSpectrum
    illum_magenta: FixedSpectrum
    illum_yellow:  FixedSpectrum
    illum_red:     FixedSpectrum
    illum_green:   FixedSpectrum
    illum_blue:    FixedSpectrum

    @property
    def cie_y_integral(self) -> float:
        """Sum of the Ȳ bins: the XYZ normalisation constant."""
        return float(np.sum(self.cie_y.values))

    def basis(self, kind: SpectrumKind, color: BasisColor) -> FixedSpectrum:
        return getattr(self, f"{kind.value}_{color.name.lower()}")

    @classmethod
    def build(cls) -> StandardCurveTable:
        """Resample every literal table onto the bin grid."""
        wl = np.fromiter(CIE_1931_2DEG_CMF.keys(), dtype=np.float64)
        cmf = np.array(list(CIE_1931_2DEG_CMF.values()), dtype=np.float64)
        cie_x = resample_sorted(SpectralSampleSet.from_arrays(wl, cmf[:, 0]))
        cie_y = resample_sorted(SpectralSampleSet.from_arrays(wl, cmf[:, 1]))
        cie_z = resample_sorted(SpectralSampleSet.from_arrays(wl, cmf[:, 2]))

        # D65 scaled to unit luminance under the binned Ȳ.
        d65 = resample_sorted(SpectralSampleSet.from_mapping(CIE_D65_SPD))
        y_integral = float(np.sum(cie_y.values))
        d65_luminance = float(np.sum((d65 * cie_y).values)) / y_integral
        d65 = d65 / d65_luminance

        entries: Dict[str, FixedSpectrum] = {}
        centers = np.asarray(SMITS_BAND_CENTERS, dtype=np.float64)
        for color in BasisColor:
            name = color.name.lower()
            refl = resample_sorted(
                SpectralSampleSet.from_arrays(centers, SMITS_REFLECTANCE[name])
            )
            entries[f"refl_{name}"] = _frozen(refl)
            entries[f"illum_{name}"] = _frozen(refl * d65)

        return cls(
            cie_x=_frozen(cie_x),
            cie_y=_frozen(cie_y),
            cie_z=_frozen(cie_z),
            **entries,
        )


# ---------------------------------------------------------------------------
# Process-wide handle
# ---------------------------------------------------------------------------
_TABLE: Optional[StandardCurveTable] = None
_TABLE_LOCK = threading.Lock()


def initialize() -> StandardCurveTable:
    """
    Build the shared StandardCurveTable on first call and return it.

    Safe to call from any number of threads; the build happens exactly once
    and completes before any caller receives the handle.
    """
    global _TABLE
    table = _TABLE
    if table is None:
        with _TABLE_LOCK:
            if _TABLE is None:
                _TABLE = StandardCurveTable.build()
            table = _TABLE
    return table
