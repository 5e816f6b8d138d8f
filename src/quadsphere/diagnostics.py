"""Distortion diagnostics.

This module measures the closure error of the CSC distortion
polynomials, i.e. how far a point on a face moves after being distorted
and undistorted again. See :mod:`quadsphere.distortion` for the figures
these functions reproduce.
"""

import numpy as np
import xarray as xr
from scipy.stats import describe
from quadsphere.distortion import closure_error


def _check_grid(grid):
    if isinstance(grid, bool) or not isinstance(grid, (int, np.integer)):
        raise TypeError("grid must be an integer")
    if grid < 2:
        raise ValueError("grid must be at least 2. Not {}".format(grid))


def closure_error_map(grid=200):
    """Calculate the closure error on a regular lattice over a face.

    Parameters
    ----------
    grid : int, optional
        Number of lattice points along each axis. The lattice spans
        [-1, 1] inclusive in both directions.

    Returns
    -------
    xarray.DataArray
        Closure errors with dimensions ``('psi', 'chi')``.

    Raises
    ------
    TypeError
        If `grid` is not an integer.
    ValueError
        If `grid` is smaller than 2.
    """
    _check_grid(grid)

    d = 2.0 / (grid - 1)
    axis = np.arange(grid) * d - 1.0
    psi, chi = np.meshgrid(axis, axis, indexing="ij")

    return xr.DataArray(
        closure_error(chi, psi),
        dims=("psi", "chi"),
        coords={"psi": axis, "chi": axis},
        name="closure_error",
        attrs={"description": "Distance from (chi, psi) to its image after forward and inverse distortion"},
    )


def closure_error_statistics(grid=200):
    """Summarize the closure error over a face.

    Parameters
    ----------
    grid : int, optional
        Number of lattice points along each axis, see
        :func:`closure_error_map`.

    Returns
    -------
    dict
        Dictionary with keys ``'samples'``, ``'mean'``, ``'min'``,
        ``'max'`` and ``'std'``.
    """
    errors = closure_error_map(grid).values.ravel()
    result = describe(errors)

    return {
        "samples": int(result.nobs),
        "mean": float(result.mean),
        "min": float(result.minmax[0]),
        "max": float(result.minmax[1]),
        "std": float(np.sqrt(result.variance)),
    }


def closure_error_histogram(grid=200, bins=10):
    """Calculate a histogram of the closure error over a face.

    Parameters
    ----------
    grid : int, optional
        Number of lattice points along each axis, see
        :func:`closure_error_map`.
    bins : int or sequence of scalars, optional
        Passed on to :func:`numpy.histogram`.

    Returns
    -------
    counts : ndarray
        Number of samples in each bin.
    edges : ndarray
        Bin edges, one more than `counts`.
    """
    return np.histogram(closure_error_map(grid).values.ravel(), bins=bins)


def print_closure_report(grid=200):
    """Print closure error statistics and histogram."""
    stats = closure_error_statistics(grid)
    print(
        "samples: %d mean: %8g min: %8g max: %8g std_dev: %8g"
        % (stats["samples"], stats["mean"], stats["min"], stats["max"], stats["std"])
    )

    counts, edges = closure_error_histogram(grid)
    for count, low, high in zip(counts, edges[:-1], edges[1:]):
        print("[%8g, %8g) %d" % (low, high, count))

    return stats
