# -*- coding: utf-8 -*-
"""
Prism: Spectral colour engine for physically based rendering
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Three-component colour coefficients
===================================

RGB and XYZ triples share one representation.  No range constraints are
enforced: negative or >1 components are legal here, gamut handling
belongs to the tonemapping stage.
"""

from __future__ import annotations

from typing import Iterator, Sequence, TypeAlias, Union

import numpy as np

from prism_spectrum import ArrayFloat

__all__ = ["Coefficients", "RGBCoefficients", "XYZCoefficients"]


class Coefficients:
    """
    Exactly three float components with scalar scale/divide.

    ``Coefficients(v)`` fills all three components with *v*;
    ``Coefficients(a, b, c)`` sets them individually.  Two values are
    rejected with ValueError instead of zero-filling the third component,
    so a dropped argument cannot pass unnoticed.
    """

    __slots__ = ("_data",)

    def __init__(self, a: float = 0.0, b: float | None = None, c: float | None = None) -> None:
        # Single argument fills all three components.
        if b is None and c is None:
            b = c = a
        elif b is None or c is None:
            raise ValueError("Coefficients: pass either one value or three")
        self._data: ArrayFloat = np.array([a, b, c], dtype=np.float64)

    @classmethod
    def from_array(cls, values: Union[Sequence[float], ArrayFloat]) -> Coefficients:
        arr = np.asarray(values, dtype=np.float64).ravel()
        if arr.shape[0] != 3:
            raise ValueError(f"Coefficients: expected 3 components, got {arr.shape[0]}")
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    def to_array(self) -> ArrayFloat:
        return self._data.copy()

    def __array__(self, dtype=None, copy=None) -> ArrayFloat:
        if dtype is None:
            return self._data.copy()
        return self._data.astype(dtype)

    def __getitem__(self, i: int) -> float:
        return float(self._data[i])

    def __setitem__(self, i: int, value: float) -> None:
        self._data[i] = value

    def __len__(self) -> int:
        return 3

    def __iter__(self) -> Iterator[float]:
        return (float(v) for v in self._data)

    def __mul__(self, scale: float) -> Coefficients:
        return Coefficients.from_array(self._data * scale)

    __rmul__ = __mul__

    def __truediv__(self, div: float) -> Coefficients:
        with np.errstate(divide="ignore", invalid="ignore"):
            return Coefficients.from_array(self._data / div)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Coefficients):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        a, b, c = self._data
        return f"Coefficients({a:.6g}, {b:.6g}, {c:.6g})"


RGBCoefficients: TypeAlias = Coefficients
XYZCoefficients: TypeAlias = Coefficients
