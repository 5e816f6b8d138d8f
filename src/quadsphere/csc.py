"""Quadrilateralized spherical cube projection.

The quadrilateralized spherical cube ("Quad Sphere", or "COBE Sky
Cube", CSC) applies a curvilinear transformation to the tangential
spherical cube projection to make it approximately equal-area. This is
useful for storing spherical data in a raster, since the data can then
be integrated directly on the cube face planes.

This implements the projection of Chan & O'Neill (1975), not the one
by Laubscher & O'Neill (1976), which is not differentiable along the
diagonals. Only the spherical projection is implemented, not the
Z-order pixel storage scheme of the COBE data format. See
:mod:`quadsphere.distortion` for the accuracy of the transformation.
"""

from quadsphere import tangential
from quadsphere.distortion import forward_distort, inverse_distort


def forward(phi, theta):
    """Project a point on the sphere onto a cube face.

    Parameters
    ----------
    phi : float
        Longitude in radians, from -pi to pi (or 0 to 2pi).
    theta : float
        Latitude in radians, from -pi/2 to pi/2.

    Returns
    -------
    face : int
        Identifier of the cube face, see :mod:`quadsphere.faces`.
    x : float
        Horizontal coordinate on the face, from -1 to 1.
    y : float
        Vertical coordinate on the face, from -1 to 1.
    """
    face, chi, psi = tangential.forward(phi, theta)

    return (face, forward_distort(chi, psi), forward_distort(psi, chi))


def inverse(face, x, y):
    """Project a point on a cube face back onto the sphere.

    As with the tangential projection, points on the cube edges are
    shared by several faces and may not project forward to the same
    face again.

    Parameters
    ----------
    face : int
        Identifier of the cube face.
    x : float
        Horizontal coordinate on the face, from -1 to 1.
    y : float
        Vertical coordinate on the face, from -1 to 1.

    Returns
    -------
    phi : float
        Longitude in radians, from -pi to pi.
    theta : float
        Latitude in radians, from -pi/2 to pi/2.
    """
    chi = inverse_distort(x, y)
    psi = inverse_distort(y, x)

    return tangential.inverse(face, chi, psi)
