"""
Command-line interface for the density kernels toolkit.

This CLI provides access to:
- Kernel evaluation at individual points
- Tabulation of a kernel over an evenly spaced grid
- Kernel profiles (support, peak, area)
"""

import click
import numpy as np
import pandas as pd

from density_kernels.core.registry import KERNELS, evaluate_kernel, kernel_profile
from density_kernels.utils.constants import (
    DEFAULT_GRID_POINTS,
    DEFAULT_GRID_START,
    DEFAULT_GRID_STOP,
)


def gauss_options(fn):
    """Attach the Gaussian parameter options shared by every command."""
    fn = click.option("--normalize/--no-normalize", default=False, help="Normalize the Gaussian")(fn)
    fn = click.option("--sigma", "-s", type=float, default=1.0, help="Gaussian width")(fn)
    fn = click.option("--mean", "-m", type=float, default=0.0, help="Gaussian centre")(fn)
    fn = click.option("--kernel", "-k", type=click.Choice(list(KERNELS)), default="gauss")(fn)
    return fn


@click.group()
@click.version_option(version="1.0.0")
def cli():
    """Density Kernels - evaluate statistical kernels on points and grids."""
    pass


@cli.command(name="eval")
@gauss_options
@click.option("--x", "-x", "points", type=float, multiple=True, required=True, help="Evaluation point")
def evaluate(kernel, mean, sigma, normalize, points):
    """Evaluate a kernel at one or more points."""
    try:
        result = evaluate_kernel(kernel, list(points), mean=mean, sigma=sigma, normalize=normalize)
    except ValueError as e:
        click.echo(f"\nError: {e}", err=True)
        return

    click.echo(f"\n{kernel.capitalize()} kernel:")
    for x, value in zip(result.points, result.values):
        click.echo(f"  K({x:g}) = {value:.10g}")


@cli.command()
@gauss_options
@click.option("--start", type=float, default=DEFAULT_GRID_START, help="First grid point")
@click.option("--stop", type=float, default=DEFAULT_GRID_STOP, help="Last grid point")
@click.option("--num", "-n", type=click.IntRange(min=1), default=DEFAULT_GRID_POINTS, help="Number of grid points")
def table(kernel, mean, sigma, normalize, start, stop, num):
    """Tabulate a kernel over an evenly spaced grid."""
    grid = np.linspace(start, stop, num)
    result = evaluate_kernel(kernel, grid, mean=mean, sigma=sigma, normalize=normalize)

    df = pd.DataFrame({"x": result.points, kernel: result.values})
    click.echo(f"\n{df.to_string(index=False)}")


@cli.command()
@gauss_options
def profile(kernel, mean, sigma, normalize):
    """Show the support, peak and area of a kernel."""
    result = kernel_profile(kernel, mean=mean, sigma=sigma, normalize=normalize)

    lower, upper = result.support
    click.echo(f"\nProfile of {kernel.capitalize()} kernel:")
    click.echo(f"  Support: [{lower:g}, {upper:g}]")
    click.echo(f"  Peak:    {result.peak:>12.6g}")
    click.echo(f"  Area:    {result.area:>12.6g}")


if __name__ == "__main__":
    cli()
