"""Cube projection module.

This module contains the CubeProjection class, which applies the
tangential or CSC projection to arrays of points.
"""

import warnings
import numpy as np
from quadsphere import csc, tangential
from quadsphere.constants import ANGLE_TOLERANCE, HALF_PI
from quadsphere.faces import FACES
from quadsphere.spherical import geodetic_to_geocentric, sph_to_car

PROJECTIONS = {"csc": csc, "tangential": tangential}


class CubeProjection(object):
    """Class for projecting arrays of points onto the spherical cube.

    Wraps the scalar functions of :mod:`quadsphere.csc` or
    :mod:`quadsphere.tangential` so that they take and return numpy
    arrays. Every element is computed by the scalar function, so results
    are identical to calling it point by point, including the choice of
    face for points on cube edges.

    Attributes
    ----------
    kind : str
        Projection used, ``'csc'`` or ``'tangential'``.
    deg : bool
        Whether angles are given and returned in degrees.
    geodetic : bool
        Whether input latitudes are geodetic.

    Notes
    -----
    Longitudes are returned from -180 to 180 degrees (-pi to pi).
    Faces are numbered as in :mod:`quadsphere.faces`.
    """

    def __init__(self, kind="csc", deg=False, geodetic=False):
        """Initialize the projection.

        Parameters
        ----------
        kind : {'csc', 'tangential'}, optional
            Projection to use.
        deg : bool, optional
            Set to ``True`` to give and receive angles in degrees
            instead of radians.
        geodetic : bool, optional
            Set to ``True`` if latitudes passed to :meth:`forward` are
            geodetic (WGS84). They will be converted to geocentric
            latitudes before projecting.

        Raises
        ------
        ValueError
            If `kind` is not a known projection.
        """
        if kind not in PROJECTIONS:
            raise ValueError(
                "kind must be one of {}. Not {}".format(sorted(PROJECTIONS), kind)
            )

        self.kind = kind
        self.deg = deg
        self.geodetic = geodetic

        projection = PROJECTIONS[kind]

        # Elements are passed on as Python numbers, not numpy scalars.
        self._forward = np.vectorize(
            lambda phi, theta: projection.forward(float(phi), float(theta)),
            otypes=[int, float, float],
        )
        self._inverse = np.vectorize(
            lambda face, x, y: projection.inverse(int(face), float(x), float(y)),
            otypes=[float, float],
        )

    def forward(self, lon, lat):
        """Project points on the sphere onto the cube faces.

        Parameters
        ----------
        lon : array-like
            Longitudes.
        lat : array-like
            Latitudes, from -90 to 90 degrees (-pi/2 to pi/2).

        Returns
        -------
        face : ndarray
            Integer array of face identifiers.
        x : ndarray
            Horizontal face coordinates, from -1 to 1.
        y : ndarray
            Vertical face coordinates, from -1 to 1.

        All arrays have the broadcast shape of `lon` and `lat`.

        Raises
        ------
        ValueError
            If any latitude is outside [-90, 90] degrees.
        """
        lon, lat = np.broadcast_arrays(np.asarray(lon, dtype=float), np.asarray(lat, dtype=float))

        if self.deg:
            lon, lat = np.deg2rad(lon), np.deg2rad(lat)

        # Geodetic conversion folds latitudes beyond the poles back into range.
        if np.any(np.abs(lat) > HALF_PI + ANGLE_TOLERANCE):
            raise ValueError("Latitudes must be within [-90, 90] degrees ([-pi/2, pi/2] radians)")

        if self.geodetic:
            lat = geodetic_to_geocentric(lat)

        return self._forward(lon, lat)

    def inverse(self, face, x, y):
        """Project points on the cube faces back onto the sphere.

        Parameters
        ----------
        face : array-like
            Integer face identifiers.
        x : array-like
            Horizontal face coordinates, from -1 to 1.
        y : array-like
            Vertical face coordinates, from -1 to 1.

        Returns
        -------
        lon : ndarray
            Longitudes, from -180 to 180 degrees (-pi to pi).
        lat : ndarray
            Geocentric latitudes, from -90 to 90 degrees (-pi/2 to
            pi/2).

        Raises
        ------
        TypeError
            If `face` is not an integer array.
        ValueError
            If any face is not a valid face identifier.
        """
        lon, lat = self._inverse(*self._check_face_coordinates(face, x, y))

        if self.deg:
            lon, lat = np.rad2deg(lon), np.rad2deg(lat)

        return (lon, lat)

    def _check_face_coordinates(self, face, x, y):
        """Broadcast and validate face coordinates for the inverse."""
        face, x, y = np.broadcast_arrays(np.asarray(face), np.asarray(x, dtype=float), np.asarray(y, dtype=float))

        if not np.issubdtype(face.dtype, np.integer):
            raise TypeError("face must be an integer array, not {}".format(face.dtype))
        if not np.all(np.isin(face, FACES)):
            raise ValueError("face values must be in {}".format(FACES))
        if np.any(np.abs(x) > 1) or np.any(np.abs(y) > 1):
            warnings.warn(
                "Face coordinates outside [-1, 1] are projected beyond the face edges",
                RuntimeWarning,
            )

        return face, x, y

    def get_gridpoints(self, N, flat=False):
        """Return face coordinates of the centres of an ``N x N`` grid.

        Parameters
        ----------
        N : int
            Number of grid cells along each edge of a face.
        flat : bool, optional
            Set to ``True`` to return flat arrays.

        Returns
        -------
        face : ndarray
            Array of face identifiers.
        x : ndarray
            Array of horizontal face coordinates of cell centres.
        y : ndarray
            Array of vertical face coordinates of cell centres.

        The arrays have shape ``(6, N, N)``, or ``(6 * N * N,)`` if
        `flat` is ``True``.

        Raises
        ------
        TypeError
            If `N` is not an integer.
        ValueError
            If `N` is not positive.
        """
        if isinstance(N, bool) or not isinstance(N, (int, np.integer)):
            raise TypeError("N must be an integer")
        if N < 1:
            raise ValueError("N must be positive")

        centres = -1 + (np.arange(N) + 0.5) * 2 / N
        face, x, y = np.meshgrid(np.arange(6), centres, centres, indexing="ij")

        if flat:
            return face.flatten(), x.flatten(), y.flatten()
        else:
            return face, x, y

    def cube2cartesian(self, face, x, y):
        """Calculate unit vectors pointing at given face coordinates.

        Parameters
        ----------
        face : array-like
            Integer face identifiers.
        x : array-like
            Horizontal face coordinates.
        y : array-like
            Vertical face coordinates.

        Returns
        -------
        ndarray
            Array of shape ``(3,) + shape``, where ``shape`` is the
            broadcast shape of the input, holding the Cartesian
            components of the unit vectors.
        """
        # Radians regardless of self.deg.
        lon, lat = self._inverse(*self._check_face_coordinates(face, x, y))

        return sph_to_car(lon, lat).reshape((3,) + lon.shape)
