"""
Numerical constants for kernel evaluation.

This module collects the fixed values every kernel relies on: the Gaussian's
degenerate-width sentinel, the sqrt(2π) literal used for normalization, the
half-widths of the compactly supported kernels, and the defaults used by the
interfaces when sampling a kernel over a grid.
"""

# Gaussian kernel
GAUSS_ZERO_SIGMA_SENTINEL = 1.0e30  # Returned as-is whenever sigma == 0
SQRT_2PI = 2.50662827463100024  # sqrt(2*Pi), kept as a literal for reproducibility
GAUSS_INTEGRATION_WIDTH = 12.0  # Beyond ±12σ the unnormalized Gaussian is below 1e-31

# Compact kernel supports (half-width around zero)
BOX_HALF_WIDTH = 0.5
TRIANGULAR_HALF_WIDTH = 1.0
TRIGONOMETRIC_HALF_WIDTH = 0.5
EPANECHNIKOV_HALF_WIDTH = 1.0

# Kernel scale factors
EPANECHNIKOV_SCALE = 0.75  # 3/4

# Interface defaults
DEFAULT_GRID_START = -2.0
DEFAULT_GRID_STOP = 2.0
DEFAULT_GRID_POINTS = 9
DEFAULT_PLOT_POINTS = 401
