"""
3-vector and 3x3-matrix helpers used by the conversion formulas.

Two products are kept deliberately apart:

- ``vec_times_mat(v, M)`` is the row-vector product ``v @ M``. The RGB working-space
  matrices and the Bradford adaptation matrices are laid out for this order.
- ``mat_times_vec(M, v)`` is the column-vector product ``M @ v``. The broadcast
  luma/chroma matrices (YPbPr, YCbCr) are laid out for this order.

All helpers return plain lists of floats.
"""
import math
from typing import List, Sequence

import numpy as np

from ..types.color_types import Color3, Matrix3x3


def vec_times_mat(v: Sequence[float], m: Matrix3x3) -> Color3:
    """Row vector times matrix: ``v @ M``."""
    return (np.asarray(v, dtype=float) @ np.asarray(m, dtype=float)).tolist()


def mat_times_vec(m: Matrix3x3, v: Sequence[float]) -> Color3:
    """Matrix times column vector: ``M @ v``."""
    return (np.asarray(m, dtype=float) @ np.asarray(v, dtype=float)).tolist()


def mat_times_mat(a: Matrix3x3, b: Matrix3x3) -> List[List[float]]:
    """Matrix product ``A @ B``."""
    return (np.asarray(a, dtype=float) @ np.asarray(b, dtype=float)).tolist()


def add3(a: Sequence[float], b: Sequence[float]) -> Color3:
    return [a[0] + b[0], a[1] + b[1], a[2] + b[2]]


def pow3(v: Sequence[float], p: float) -> Color3:
    """Elementwise power."""
    return np.power(np.asarray(v, dtype=float), p).tolist()


def apow(x: float, p: float) -> float:
    """Signed power ``sign(x) * |x| ** p``; stays real for negative ``x``."""
    if x >= 0:
        return math.pow(x, p)
    return -math.pow(-x, p)


def min3(*values: float) -> float:
    return min(values)


def max3(*values: float) -> float:
    return max(values)


def delta3(a: Sequence[float], b: Sequence[float]) -> float:
    """L1 distance between two 3-vectors."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) + abs(a[2] - b[2])
