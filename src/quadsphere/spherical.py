"""Spherical Coordinate Utilities.

This module provides functions for converting between spherical and Cartesian coordinates, and between geodetic and geocentric latitude.

All angles are in radians, with `phi` the longitude and `theta` the latitude.
"""

import numpy as np
from quadsphere.constants import WGS84_E2


def sph_to_car(phi, theta):
    """
    Convert from spherical coordinates to direction cosines.

    Parameters
    ----------
    phi : array-like
        Longitude in radians.
    theta : array-like
        Latitude in radians.

    Returns
    -------
    ndarray
        A 3 x N array containing the direction cosines [l, m, n], with N the broadcast size of the input.
    """
    phi, theta = np.broadcast_arrays(phi, theta)
    phi, theta = phi.flatten(), theta.flatten()
    return np.vstack(
        (
            np.cos(theta) * np.cos(phi),
            np.cos(theta) * np.sin(phi),
            np.sin(theta),
        )
    )


def car_to_sph(car):
    """
    Convert from Cartesian to spherical coordinates.

    Parameters
    ----------
    car : array-like
        A 3 x N array containing the Cartesian coordinates [x, y, z]. The vectors need not have unit length.

    Returns
    -------
    ndarray
        A 2 x N array containing the spherical coordinates [phi, theta], with phi from -pi to pi.
    """
    x, y, z = car
    r = np.sqrt(x**2 + y**2 + z**2)
    return np.vstack((np.arctan2(y, x), np.arcsin(z / r)))


def geodetic_to_geocentric(lat):
    """
    Convert geodetic latitude to geocentric latitude on the WGS84 ellipsoid.

    The projections work on a sphere, so geographic (geodetic) latitudes should be converted before they are projected.

    Parameters
    ----------
    lat : array-like
        Geodetic latitude in radians.

    Returns
    -------
    float or ndarray
        Geocentric latitude in radians.
    """
    return np.arctan((1 - WGS84_E2) * np.tan(lat))
