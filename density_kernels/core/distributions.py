"""
Statistical kernel functions evaluated on scalars or arrays.

This module provides the Gaussian, box, triangular, trigonometric and
Epanechnikov kernels. Each kernel is a pure function of its inputs: scalar
calls return a float, array calls return a float64 ndarray of the input's
shape. No kernel validates its inputs; non-finite values propagate through
the arithmetic instead of raising.

Notes:
    The compact kernels are reproduced with their exact shapes, e.g. the
    trigonometric kernel 1 + cos(2πx) peaks at 2.0. They are not rescaled
    to textbook normalized forms.
"""

import math
from typing import Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from density_kernels.core.lifting import lift_distribution
from density_kernels.utils.constants import (
    BOX_HALF_WIDTH,
    EPANECHNIKOV_HALF_WIDTH,
    EPANECHNIKOV_SCALE,
    GAUSS_ZERO_SIGMA_SENTINEL,
    SQRT_2PI,
    TRIANGULAR_HALF_WIDTH,
    TRIGONOMETRIC_HALF_WIDTH,
)
from density_kernels.utils.types import Real


def _gauss_scalar(x: Real, mean: Real, sigma: Real, normalize: bool) -> float:
    if sigma == 0:
        return GAUSS_ZERO_SIGMA_SENTINEL

    arg = (float(x) - float(mean)) / float(sigma)
    res = math.exp(-0.5 * arg * arg)
    if not normalize:
        return res
    return res / (float(sigma) * SQRT_2PI)


def gauss(
    x: Union[Real, ArrayLike],
    mean: Real,
    sigma: Real,
    normalize: bool = False,
) -> Union[float, NDArray[np.float64]]:
    """
    Value of the Gaussian described by `mean` and `sigma` at position `x`.

    When `x` is array-like (anything with at least one dimension, such as an
    ndarray, list, range or pandas Series) the scalar Gaussian is applied to
    every element with `mean`, `sigma` and `normalize` held fixed, and an
    array of the same shape is returned. A 0-d array is treated as a scalar.

    Args:
        x: Position, or array of positions
        mean: Centre of the Gaussian
        sigma: Width of the Gaussian
        normalize: Scale the result by 1 / (sigma * sqrt(2π)) so that it
            integrates to 1

    Returns:
        Kernel value(s) as float64

    Examples:
        >>> gauss(1.0, 1.0, 2.0)
        1.0
        >>> gauss(3.0, 0.0, 0.0)  # Degenerate width
        1e+30

    Notes:
        A zero `sigma` yields the sentinel 1.0e30 regardless of the other
        arguments. Based on the ROOT implementation of TMath::Gaus.
    """
    if np.ndim(x) > 0:
        return gauss_array(x, mean, sigma, normalize=normalize)
    return _gauss_scalar(x, mean, sigma, normalize)


def gauss_array(
    x: ArrayLike,
    mean: Real,
    sigma: Real,
    normalize: bool = False,
) -> NDArray[np.float64]:
    """Gaussian evaluated at every element of `x`, same shape as `x`."""

    def gauss_at(value: float) -> float:
        return _gauss_scalar(value, mean, sigma, normalize)

    return lift_distribution(gauss_at)(x)


def box(x: float) -> float:
    """Box kernel: 1.0 on [-0.5, 0.5], 0.0 elsewhere."""
    return 1.0 if abs(float(x)) <= BOX_HALF_WIDTH else 0.0


def triangular(x: float) -> float:
    """Triangular kernel: 1 - |x| on [-1, 1], 0.0 elsewhere."""
    val = abs(float(x))
    return 1.0 - val if val <= TRIANGULAR_HALF_WIDTH else 0.0


def trigonometric(x: float) -> float:
    """Trigonometric kernel: 1 + cos(2π|x|) on [-0.5, 0.5], 0.0 elsewhere."""
    val = abs(float(x))
    return 1.0 + math.cos(2 * math.pi * val) if val <= TRIGONOMETRIC_HALF_WIDTH else 0.0


def epanechnikov(x: float) -> float:
    """Epanechnikov kernel: 3/4 * (1 - x²) on [-1, 1], 0.0 elsewhere."""
    val = abs(float(x))
    return EPANECHNIKOV_SCALE * (1 - val * val) if val <= EPANECHNIKOV_HALF_WIDTH else 0.0


# Array versions of the compact kernels
box_array = lift_distribution(box)
triangular_array = lift_distribution(triangular)
trigonometric_array = lift_distribution(trigonometric)
epanechnikov_array = lift_distribution(epanechnikov)
