# -*- coding: utf-8 -*-
"""
Prism: Spectral colour engine for physically based rendering
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

RGB → smooth spectrum reconstruction
====================================

Ordered-channel blend (Smits 1999).  With the input channels sorted as
c_lo <= c_mid <= c_hi:

    S = c_lo · white
      + (c_mid - c_lo) · pair(lo)        pair: complement of the lo channel
      + (c_hi - c_mid) · primary(hi)     primary: the hi channel itself

The six channel orderings are handled by one code path: ``np.argsort``
yields the permutation and ``_BASIS_LOOKUP`` maps the (lo, hi) channel
pair to the two coloured bases.  Every weight goes to zero where two
channels meet, so the reconstruction is continuous across orderings.

Scale:
    The result is multiplied by ``1 / Y(white basis)`` so that a grey
    input (v, v, v) re-evaluates to luminance v.  This is a smoothing
    reconstruction; exact RGB round-trip is not guaranteed.

    Only luminance is matched.  A REFLECTANCE result is projected as
    is, with no illuminant, so its chromaticity is that of the
    equal-energy white rather than D65: reflectance (1, 1, 1) comes back
    near RGB (1.2, 0.95, 0.9) with Y = 1.  Light the spectrum with an
    illuminant, or use the ILLUMINANT kind, to get RGB close to the
    input.
"""

from __future__ import annotations

import warnings
from typing import Dict, Final, Optional, Sequence, Tuple, Union

import numpy as np

from prism_coefficients import RGBCoefficients
from prism_converter import SampledSpectrumConverter
from prism_curves import BasisColor, SpectrumKind, StandardCurveTable, initialize
from prism_spectrum import FixedSpectrum, NumericAnomalyWarning, debug_checks_enabled

__all__ = ["ReflectantUpsampler"]

R, G, B = 0, 1, 2

_COMPLEMENT: Final[Dict[int, BasisColor]] = {
    R: BasisColor.CYAN,
    G: BasisColor.MAGENTA,
    B: BasisColor.YELLOW,
}
_PRIMARY: Final[Dict[int, BasisColor]] = {
    R: BasisColor.RED,
    G: BasisColor.GREEN,
    B: BasisColor.BLUE,
}

# (lo channel, hi channel) -> (pair basis, primary basis), one row per ordering.
_BASIS_LOOKUP: Final[Dict[Tuple[int, int], Tuple[BasisColor, BasisColor]]] = {
    (lo, hi): (_COMPLEMENT[lo], _PRIMARY[hi])
    for lo in (R, G, B) for hi in (R, G, B) if lo != hi
}


class ReflectantUpsampler:
    """
    Reconstruct a FixedSpectrum from an RGB triple.

    Args:
        table: Standard curves to blend from (shared table if omitted).
        kind: REFLECTANCE (default, result clamped at zero) or ILLUMINANT.
    """

    __slots__ = ("_table", "_kind", "_white", "_scale")

    def __init__(
        self,
        table: Optional[StandardCurveTable] = None,
        kind: SpectrumKind = SpectrumKind.REFLECTANCE,
    ) -> None:
        self._table = table if table is not None else initialize()
        self._kind = kind
        self._white = self._table.basis(kind, BasisColor.WHITE)
        white_y = SampledSpectrumConverter(self._table).to_y(self._white)
        self._scale: float = 1.0 / white_y

    @property
    def kind(self) -> SpectrumKind:
        return self._kind

    @property
    def scale(self) -> float:
        return self._scale

    def upsample(self, rgb: Union[RGBCoefficients, Sequence[float]]) -> FixedSpectrum:
        c = np.asarray(rgb, dtype=np.float64).ravel()
        if c.shape[0] != 3:
            raise ValueError(f"Expected 3 RGB components, got {c.shape[0]}")

        lo, mid, hi = (int(i) for i in np.argsort(c, kind="stable"))
        pair, primary = _BASIS_LOOKUP[(lo, hi)]

        result = self._white * float(c[lo])
        # Zero gaps are skipped outright: equal channels contribute nothing.
        gap_pair = float(c[mid] - c[lo])
        if gap_pair != 0.0:
            result += self._table.basis(self._kind, pair) * gap_pair
        gap_primary = float(c[hi] - c[mid])
        if gap_primary != 0.0:
            result += self._table.basis(self._kind, primary) * gap_primary

        result *= self._scale
        if self._kind is SpectrumKind.REFLECTANCE:
            result.clamp_zero()

        if debug_checks_enabled() and result.has_nans():
            warnings.warn(
                f"upsample: NaN in reconstruction for RGB {c.tolist()}",
                NumericAnomalyWarning,
                stacklevel=2,
            )
        return result

    __call__ = upsample

    def __repr__(self) -> str:
        return f"ReflectantUpsampler(kind={self._kind.name}, scale={self._scale:.6g})"
