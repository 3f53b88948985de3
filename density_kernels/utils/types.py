"""
Data types used throughout the density kernels toolkit.

This module defines the type aliases for kernel callables and the result
containers returned by the registry.
"""

from dataclasses import dataclass, field
from typing import Callable, Literal, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

KernelName = Literal["gauss", "box", "triangular", "trigonometric", "epanechnikov"]

ScalarKernel = Callable[[float], float]
ArrayKernel = Callable[[ArrayLike], NDArray[np.float64]]

Real = Union[int, float]


@dataclass(frozen=True)
class KernelEvaluation:
    """
    Values of a kernel sampled at a set of points.

    Attributes:
        name: Kernel name as registered
        points: Evaluation points widened to float64
        values: Kernel values, same shape as points
        params: Gaussian parameters used (mean, sigma, normalize), empty otherwise
    """
    name: str
    points: NDArray[np.float64]
    values: NDArray[np.float64]
    params: dict[str, float] = field(default_factory=dict)


@dataclass
class KernelProfile:
    """
    Shape summary of a kernel.

    Attributes:
        name: Kernel name as registered
        support: Lower and upper bound outside which the kernel is zero
        peak: Value at the centre of the kernel
        area: Integral of the kernel over its support
    """
    name: str
    support: tuple[float, float]
    peak: float
    area: float
