# -*- coding: utf-8 -*-
"""
Prism: Spectral colour engine for physically based rendering
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Literal tabulated spectral data
===============================

These are raw empirical tables.  They are turned into FixedSpectrum
constants exactly once, by ``prism_curves.StandardCurveTable.build``.

References:
    - CIE 15:2004 "Colorimetry", Table T.1 (D65) and Table T.2 (1931 2° CMFs)
    - Smits, B. (1999). "An RGB-to-Spectrum Conversion for Reflectances".
      Journal of Graphics Tools 4(4), 11-22.
"""

from typing import Dict, Final, NamedTuple, Tuple

__all__ = [
    "CMFValues",
    "CIE_1931_2DEG_CMF",
    "CIE_D65_SPD",
    "SMITS_BAND_CENTERS",
    "SMITS_REFLECTANCE",
]


class CMFValues(NamedTuple):
    x_bar: float
    y_bar: float
    z_bar: float


# =============================================================================
# CIE 1931 2° Standard Observer, 5 nm, 360-830 nm
# =============================================================================
CIE_1931_2DEG_CMF: Final[Dict[int, CMFValues]] = {
    360: CMFValues(0.000130, 0.000004, 0.000606),
    365: CMFValues(0.000232, 0.000007, 0.001086),
    370: CMFValues(0.000415, 0.000012, 0.001946),
    375: CMFValues(0.000742, 0.000022, 0.003486),
    380: CMFValues(0.001368, 0.000039, 0.006450),
    385: CMFValues(0.002236, 0.000064, 0.010550),
    390: CMFValues(0.004243, 0.000120, 0.020050),
    395: CMFValues(0.007650, 0.000217, 0.036210),
    400: CMFValues(0.014310, 0.000396, 0.067850),
    405: CMFValues(0.023190, 0.000640, 0.110200),
    410: CMFValues(0.043510, 0.001210, 0.207400),
    415: CMFValues(0.077630, 0.002180, 0.371300),
    420: CMFValues(0.134380, 0.004000, 0.645600),
    425: CMFValues(0.214770, 0.007300, 1.039050),
    430: CMFValues(0.283900, 0.011600, 1.385600),
    435: CMFValues(0.328500, 0.016840, 1.622960),
    440: CMFValues(0.348280, 0.023000, 1.747060),
    445: CMFValues(0.348060, 0.029800, 1.782600),
    450: CMFValues(0.336200, 0.038000, 1.772110),
    455: CMFValues(0.318700, 0.048000, 1.744100),
    460: CMFValues(0.290800, 0.060000, 1.669200),
    465: CMFValues(0.251100, 0.073900, 1.528100),
    470: CMFValues(0.195360, 0.090980, 1.287640),
    475: CMFValues(0.142100, 0.112600, 1.041900),
    480: CMFValues(0.095640, 0.139020, 0.812950),
    485: CMFValues(0.058010, 0.169300, 0.616200),
    490: CMFValues(0.032010, 0.208020, 0.465180),
    495: CMFValues(0.014700, 0.258600, 0.353300),
    500: CMFValues(0.004900, 0.323000, 0.272000),
    505: CMFValues(0.002400, 0.407300, 0.212300),
    510: CMFValues(0.009300, 0.503000, 0.158200),
    515: CMFValues(0.029100, 0.608200, 0.111700),
    520: CMFValues(0.063270, 0.710000, 0.078250),
    525: CMFValues(0.109600, 0.793200, 0.057250),
    530: CMFValues(0.165500, 0.862000, 0.042160),
    535: CMFValues(0.225750, 0.914850, 0.029840),
    540: CMFValues(0.290400, 0.954000, 0.020300),
    545: CMFValues(0.359700, 0.980300, 0.013400),
    550: CMFValues(0.433450, 0.994950, 0.008750),
    555: CMFValues(0.512050, 1.000000, 0.005750),
    560: CMFValues(0.594500, 0.995000, 0.003900),
    565: CMFValues(0.678400, 0.978600, 0.002750),
    570: CMFValues(0.762100, 0.952000, 0.002100),
    575: CMFValues(0.842500, 0.915400, 0.001800),
    580: CMFValues(0.916300, 0.870000, 0.001650),
    585: CMFValues(0.978600, 0.816300, 0.001400),
    590: CMFValues(1.026300, 0.757000, 0.001100),
    595: CMFValues(1.056700, 0.694900, 0.001000),
    600: CMFValues(1.062200, 0.631000, 0.000800),
    605: CMFValues(1.045600, 0.566800, 0.000600),
    610: CMFValues(1.002600, 0.503000, 0.000340),
    615: CMFValues(0.938400, 0.441200, 0.000240),
    620: CMFValues(0.854450, 0.381000, 0.000190),
    625: CMFValues(0.751400, 0.321000, 0.000100),
    630: CMFValues(0.642400, 0.265000, 0.000050),
    635: CMFValues(0.541900, 0.217000, 0.000030),
    640: CMFValues(0.447900, 0.175000, 0.000020),
    645: CMFValues(0.360800, 0.138200, 0.000010),
    650: CMFValues(0.283500, 0.107000, 0.000000),
    655: CMFValues(0.218700, 0.081600, 0.000000),
    660: CMFValues(0.164900, 0.061000, 0.000000),
    665: CMFValues(0.121200, 0.044580, 0.000000),
    670: CMFValues(0.087400, 0.032000, 0.000000),
    675: CMFValues(0.063600, 0.023200, 0.000000),
    680: CMFValues(0.046770, 0.017000, 0.000000),
    685: CMFValues(0.032900, 0.011920, 0.000000),
    690: CMFValues(0.022700, 0.008210, 0.000000),
    695: CMFValues(0.015840, 0.005723, 0.000000),
    700: CMFValues(0.011359, 0.004102, 0.000000),
    705: CMFValues(0.008111, 0.002929, 0.000000),
    710: CMFValues(0.005790, 0.002091, 0.000000),
    715: CMFValues(0.004109, 0.001484, 0.000000),
    720: CMFValues(0.002899, 0.001047, 0.000000),
    725: CMFValues(0.002049, 0.000740, 0.000000),
    730: CMFValues(0.001440, 0.000520, 0.000000),
    735: CMFValues(0.001000, 0.000361, 0.000000),
    740: CMFValues(0.000690, 0.000249, 0.000000),
    745: CMFValues(0.000476, 0.000172, 0.000000),
    750: CMFValues(0.000332, 0.000120, 0.000000),
    755: CMFValues(0.000235, 0.000085, 0.000000),
    760: CMFValues(0.000166, 0.000060, 0.000000),
    765: CMFValues(0.000117, 0.000042, 0.000000),
    770: CMFValues(0.000083, 0.000030, 0.000000),
    775: CMFValues(0.000059, 0.000021, 0.000000),
    780: CMFValues(0.000042, 0.000015, 0.000000),
    785: CMFValues(0.0000293, 0.0000106, 0.000000),
    790: CMFValues(0.0000207, 0.0000075, 0.000000),
    795: CMFValues(0.0000146, 0.0000053, 0.000000),
    800: CMFValues(0.0000103, 0.0000037, 0.000000),
    805: CMFValues(0.0000072, 0.0000026, 0.000000),
    810: CMFValues(0.0000051, 0.0000018, 0.000000),
    815: CMFValues(0.0000036, 0.0000013, 0.000000),
    820: CMFValues(0.0000026, 0.0000009, 0.000000),
    825: CMFValues(0.0000018, 0.0000007, 0.000000),
    830: CMFValues(0.0000013, 0.0000005, 0.000000),
}


# =============================================================================
# CIE Standard Illuminant D65, relative SPD (100 at 560 nm), 5 nm, 360-780 nm
# =============================================================================
# The resampler holds the 780 nm value flat beyond the table.
CIE_D65_SPD: Final[Dict[int, float]] = {
    360: 46.6383,
    365: 49.3637,
    370: 52.0891,
    375: 51.0323,
    380: 49.9755,
    385: 52.3118,
    390: 54.6482,
    395: 68.7015,
    400: 82.7549,
    405: 87.1204,
    410: 91.486,
    415: 92.4589,
    420: 93.4318,
    425: 90.057,
    430: 86.6823,
    435: 95.7736,
    440: 104.865,
    445: 110.936,
    450: 117.008,
    455: 117.410,
    460: 117.812,
    465: 116.336,
    470: 114.861,
    475: 115.392,
    480: 115.923,
    485: 112.367,
    490: 108.811,
    495: 109.082,
    500: 109.354,
    505: 108.578,
    510: 107.802,
    515: 106.296,
    520: 104.790,
    525: 106.239,
    530: 107.689,
    535: 106.047,
    540: 104.405,
    545: 104.225,
    550: 104.046,
    555: 102.023,
    560: 100.000,
    565: 98.1671,
    570: 96.3342,
    575: 96.0611,
    580: 95.788,
    585: 92.2368,
    590: 88.6856,
    595: 89.3459,
    600: 90.0062,
    605: 89.8026,
    610: 89.5991,
    615: 88.6489,
    620: 87.6987,
    625: 85.4936,
    630: 83.2886,
    635: 83.4939,
    640: 83.6992,
    645: 81.8630,
    650: 80.0268,
    655: 80.1207,
    660: 80.2146,
    665: 81.2462,
    670: 82.2778,
    675: 80.2810,
    680: 78.2842,
    685: 74.0027,
    690: 69.7213,
    695: 70.6652,
    700: 71.6091,
    705: 72.979,
    710: 74.349,
    715: 67.9765,
    720: 61.604,
    725: 65.7448,
    730: 69.8856,
    735: 72.4863,
    740: 75.087,
    745: 69.3398,
    750: 63.5927,
    755: 55.0054,
    760: 46.4182,
    765: 56.6118,
    770: 66.8054,
    775: 65.0941,
    780: 63.3828,
}


# =============================================================================
# Smits basis reflectances, ten equal bands over 380-720 nm
# =============================================================================
# Each band value is sampled at its band centre; the resampler interpolates
# linearly between centres and holds the end bands flat.
SMITS_BAND_CENTERS: Final[Tuple[float, ...]] = tuple(380.0 + 34.0 * (i + 0.5) for i in range(10))

SMITS_REFLECTANCE: Final[Dict[str, Tuple[float, ...]]] = {
    "white":   (1.0000, 1.0000, 0.9999, 0.9993, 0.9992, 0.9998, 1.0000, 1.0000, 1.0000, 1.0000),
    "cyan":    (0.9710, 0.9426, 1.0007, 1.0007, 1.0007, 1.0007, 0.1564, 0.0000, 0.0000, 0.0000),
    "magenta": (1.0000, 1.0000, 0.9685, 0.2229, 0.0000, 0.0458, 0.8369, 1.0000, 1.0000, 0.9959),
    "yellow":  (0.0001, 0.0000, 0.1088, 0.6651, 1.0000, 1.0000, 0.9996, 0.9586, 0.9685, 0.9840),
    "red":     (0.1012, 0.0515, 0.0000, 0.0000, 0.0000, 0.0000, 0.8325, 1.0149, 1.0149, 1.0149),
    "green":   (0.0000, 0.0000, 0.0273, 0.7937, 1.0000, 0.9418, 0.1719, 0.0000, 0.0000, 0.0025),
    "blue":    (1.0000, 1.0000, 0.8916, 0.3323, 0.0000, 0.0000, 0.0003, 0.0369, 0.0483, 0.0496),
}
