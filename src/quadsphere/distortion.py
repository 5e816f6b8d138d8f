"""CSC distortion polynomials.

This module contains the curvilinear transformation that turns the
tangential projection into the quadrilateralized spherical cube (CSC)
projection, and its polynomial inverse. Both functions compute a single
coordinate; the other one is obtained by evaluating again with the
arguments swapped::

    x = forward_distort(chi, psi)
    y = forward_distort(psi, chi)

The polynomials are not symmetric in their arguments, so the order
matters. Both functions accept floats or numpy arrays, which are
broadcast against each other.

Notes
-----
The coefficients are those published by Calabretta & Greisen (2002),
which are also used by the COBE Data Analysis Software. They are based
on Laubscher's report rather than on Chan & O'Neill (1975), whose
original coefficients are not publicly available. Replacing them with
another published set changes the results.

The inverse is an approximation, so a forward-then-inverse round trip
does not close exactly. Over [-1, 1]^2 the closure error (distance from
``(chi, psi)`` to its image) has a mean of 4.15e-5, a standard
deviation of 3.72e-5 and a maximum of 2.33e-4, reached in small regions
around the face centre and the corners. On an Earth-sized sphere this
is roughly 415 m on average and 2.3 km at worst.

References
----------
[1] Calabretta, M. R., and Greisen, E. W. (2002) Representations of
    celestial coordinates in FITS (Paper II). Astronomy &
    Astrophysics, 395, 1077-1122.
[2] Chan, F. K., and O'Neill, E. M. (1975) Feasibility study of a
    quadrilateralized spherical cube earth data base. Computer
    Sciences Corp., EPRF Technical Report 2-75.
"""

import numpy as np


def forward_distort(chi, psi):
    """Distort a tangential coordinate into a CSC coordinate.

    Parameters
    ----------
    chi : float or array-like
        Tangential coordinate to distort, from -1 to 1.
    psi : float or array-like
        The other tangential coordinate of the same point.

    Returns
    -------
    float or ndarray
        CSC coordinate corresponding to `chi`.
    """
    chi2 = chi**2
    chi3 = chi**3
    psi2 = psi**2
    omchi2 = 1.0 - chi2

    return (
        chi * (1.37484847732 - 0.37484847732 * chi2)
        + chi * psi2 * omchi2 * (
            -0.13161671474
            + 0.136486206721 * chi2
            + (1.0 - psi2) * (
                0.141189631152
                + psi2 * (-0.281528535557 + 0.106959469314 * psi2)
                + chi2 * (0.0809701286525 + 0.15384112876 * psi2 - 0.178251207466 * chi2)
            )
        )
        + chi3 * omchi2 * (-0.159596235474 - (omchi2 * (0.0759196200467 - 0.0217762490699 * chi2)))
    )


def inverse_distort(x, y):
    """Undistort a CSC coordinate into a tangential coordinate.

    Evaluates the sum over ``j = 0..6``, ``i = 0..6-j`` of
    ``P_ij * x**(2i) * y**(2j)``, unrolled.

    Parameters
    ----------
    x : float or array-like
        CSC coordinate to undistort, from -1 to 1.
    y : float or array-like
        The other CSC coordinate of the same point.

    Returns
    -------
    float or ndarray
        Tangential coordinate corresponding to `x`.
    """
    x2 = x * x
    x4 = x**4
    x6 = x**6
    x8 = x**8
    x10 = x**10
    x12 = x**12
    y2 = y * y
    y4 = y**4
    y6 = y**6
    y8 = y**8
    y10 = y**10
    y12 = y**12

    return x + x * (1 - x2) * (
        -0.27292696 - 0.07629969 * x2
        - 0.22797056 * x4 + 0.54852384 * x6
        - 0.62930065 * x8 + 0.25795794 * x10
        + 0.02584375 * x12 - 0.02819452 * y2
        - 0.01471565 * x2 * y2 + 0.48051509 * x4 * y2
        - 1.74114454 * x6 * y2 + 1.71547508 * x8 * y2
        - 0.53022337 * x10 * y2 + 0.27058160 * y4
        - 0.56800938 * x2 * y4 + 0.30803317 * x4 * y4
        + 0.98938102 * x6 * y4 - 0.83180469 * x8 * y4
        - 0.60441560 * y6 + 1.50880086 * x2 * y6
        - 0.93678576 * x4 * y6 + 0.08693841 * x6 * y6
        + 0.93412077 * y8 - 1.41601920 * x2 * y8
        + 0.33887446 * x4 * y8 - 0.63915306 * y10
        + 0.52032238 * x2 * y10 + 0.14381585 * y12
    )


def closure_error(chi, psi):
    """Calculate the closure error of the distortion at given points.

    The closure error is the distance between ``(chi, psi)`` and the
    point obtained by distorting it and undistorting the result.

    Parameters
    ----------
    chi : float or array-like
        Horizontal tangential coordinates.
    psi : float or array-like
        Vertical tangential coordinates.

    Returns
    -------
    float or ndarray
        Closure error, shape determined by input according to
        broadcasting rules.
    """
    x = forward_distort(chi, psi)
    y = forward_distort(psi, chi)
    chi1 = inverse_distort(x, y)
    psi1 = inverse_distort(y, x)

    return np.sqrt((chi1 - chi)**2 + (psi1 - psi)**2)
