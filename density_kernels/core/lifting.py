"""
Elementwise lifting of scalar kernels to array kernels.

A scalar kernel maps one float to one float. Lifting it produces a function
that accepts any array-like input, widens it to float64 and applies the
scalar kernel to every element, returning an array of the same shape.
Elements are evaluated independently, so the scalar and array versions of a
kernel always agree value for value.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray

from density_kernels.utils.types import ArrayKernel, ScalarKernel


def lift_distribution(fn: ScalarKernel) -> ArrayKernel:
    """
    Build the array version of a scalar kernel.

    Args:
        fn: Scalar kernel taking and returning a float

    Returns:
        Function mapping an array-like to a float64 ndarray of the same shape

    Examples:
        >>> from density_kernels.core.distributions import box
        >>> box_array = lift_distribution(box)
        >>> box_array([0.0, 0.4, 0.6]).tolist()
        [1.0, 1.0, 0.0]
    """
    # otypes fixes the output dtype, which also makes empty inputs work
    mapped = np.vectorize(fn, otypes=[np.float64])

    def lifted(t: ArrayLike) -> NDArray[np.float64]:
        # Non-finite elements are valid input and must not warn
        with np.errstate(invalid="ignore"):
            return mapped(np.asarray(t, dtype=np.float64))

    name = getattr(fn, "__name__", "kernel")
    lifted.__name__ = f"{name}_array"
    lifted.__qualname__ = lifted.__name__
    lifted.__doc__ = f"Elementwise version of `{name}` over an array.\n\n{fn.__doc__ or ''}"
    return lifted
