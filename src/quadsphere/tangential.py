"""Tangential spherical cube projection.

Points on the sphere are projected from the centre of the sphere onto
the six faces of a circumscribed cube, so that each face holds a
gnomonic projection of one sixth of the sphere. The CSC projection in
:mod:`quadsphere.csc` is a distortion of this mapping.

Angles follow the physics convention: `phi` is the longitude (azimuth)
and `theta` the latitude (elevation), both in radians and spherical,
not geodetic.

References
----------
[1] Calabretta, M. R., and Greisen, E. W. (2002) Representations of
    celestial coordinates in FITS (Paper II). Astronomy &
    Astrophysics, 395, 1077-1122.
"""

import math
from quadsphere.constants import ANGLE_TOLERANCE, HALF_PI
from quadsphere.faces import validate_face

# Rearrange direction cosines (l, m, n) into (xi, eta, zeta) for each
# face, in face order: top, front, east, back, west, bottom.
FORWARD_PARAMETERS = (
    lambda l, m, n: (m, -l, n),
    lambda l, m, n: (m, n, l),
    lambda l, m, n: (-l, n, m),
    lambda l, m, n: (-m, n, -l),
    lambda l, m, n: (l, n, -m),
    lambda l, m, n: (m, l, -n),
)

# Recover direction cosines (l, m, n) from (xi, eta, zeta), same order.
INVERSE_PARAMETERS = (
    lambda xi, eta, zeta: (-eta, xi, zeta),
    lambda xi, eta, zeta: (zeta, xi, eta),
    lambda xi, eta, zeta: (-xi, zeta, eta),
    lambda xi, eta, zeta: (-zeta, -xi, eta),
    lambda xi, eta, zeta: (xi, -zeta, eta),
    lambda xi, eta, zeta: (eta, xi, -zeta),
)


def select_face(l, m, n):
    """Find the face hit by the direction with cosines `l`, `m`, `n`.

    The candidates ``n, l, m, -l, -m, -n`` are compared in that order
    and the first strict maximum wins. Points on an edge or a corner
    therefore always go to the same one of the faces that share them.

    Parameters
    ----------
    l, m, n : float
        Direction cosines.

    Returns
    -------
    int
        Face identifier.
    """
    best, face = None, -1
    for i, value in enumerate((n, l, m, -l, -m, -n)):
        if best is None or value > best:
            best, face = value, i

    return face


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
    chi : float
        Horizontal coordinate on the face, from -1 to 1.
    psi : float
        Vertical coordinate on the face, from -1 to 1.

    Raises
    ------
    ValueError
        If `theta` is outside [-pi/2, pi/2].
    """
    if abs(theta) > HALF_PI + ANGLE_TOLERANCE:
        raise ValueError("theta must be within [-pi/2, pi/2]. Not {}".format(theta))

    l = math.cos(theta) * math.cos(phi)
    m = math.cos(theta) * math.sin(phi)
    n = math.sin(theta)

    face = select_face(l, m, n)
    xi, eta, zeta = FORWARD_PARAMETERS[face](l, m, n)

    # zeta is the largest cosine, so it is positive here.
    chi = xi / zeta
    psi = eta / zeta

    return (face, chi, psi)


def inverse(face, chi, psi):
    """Project a point on a cube face back onto the sphere.

    The mapping is reversible inside each face, but not necessarily on
    the edges: points shared by two or three faces may be projected
    forward to a neighbouring face.

    At the centres of the polar faces the longitude is undefined. The
    value returned there (pi on the top face, 0 on the bottom face)
    should not be relied upon.

    Parameters
    ----------
    face : int
        Identifier of the cube face.
    chi : float
        Horizontal coordinate on the face, from -1 to 1.
    psi : float
        Vertical coordinate on the face, from -1 to 1.

    Returns
    -------
    phi : float
        Longitude in radians, from -pi to pi.
    theta : float
        Latitude in radians, from -pi/2 to pi/2.

    Raises
    ------
    TypeError
        If `face` is not an integer.
    ValueError
        If `face` is not a valid face identifier.
    """
    face = validate_face(face)

    zeta = 1.0 / math.sqrt(1.0 + chi**2 + psi**2)
    xi = chi * zeta
    eta = psi * zeta

    l, m, n = INVERSE_PARAMETERS[face](xi, eta, zeta)

    return (math.atan2(m, l), math.asin(n))
