"""Unit tests for the elementwise lifting adapter."""

import pytest
import numpy as np
from density_kernels.core.lifting import lift_distribution


def step(x: float) -> float:
    """Unit step at zero."""
    return 1.0 if x >= 0 else 0.0


def test_lift_applies_elementwise():
    """Lifted function applies the scalar function to each element in order."""
    lifted = lift_distribution(step)
    assert lifted([-1.0, 0.0, 2.0, -0.5]).tolist() == [0.0, 1.0, 1.0, 0.0]


def test_lift_widens_to_float64():
    """Integer input reaches the scalar function as float64."""
    seen = []

    def record(x):
        seen.append(type(x))
        return x

    result = lift_distribution(record)(np.array([1, 2, 3], dtype=np.int8))
    assert result.dtype == np.float64
    assert result.tolist() == [1.0, 2.0, 3.0]
    assert all(issubclass(t, float) for t in seen)


@pytest.mark.parametrize("shape", [(5,), (2, 3), (2, 2, 2)])
def test_lift_preserves_shape(shape):
    """Output shape equals input shape."""
    data = np.arange(np.prod(shape), dtype=np.float64).reshape(shape)
    result = lift_distribution(lambda x: x * 2.0)(data)
    assert result.shape == shape
    np.testing.assert_array_equal(result, data * 2.0)


def test_lift_name_and_doc():
    """Lifted function is named after the scalar function and keeps its docstring."""
    lifted = lift_distribution(step)
    assert lifted.__name__ == "step_array"
    assert "Unit step at zero." in lifted.__doc__
