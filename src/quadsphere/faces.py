"""Cube face identifiers.

This module defines the identifiers of the six cube faces and a helper
for validating them.

Cube face layout::

          _______
          |     |
          |  0  |
    ______|_____|____________
    |     |     |     |     |
    |  4  |  1  |  2  |  3  |
    |_____|_____|_____|_____|
          |     |
          |  5  |
          |_____|

    0 = TOP    : North pole (theta = pi/2)
    1 = FRONT  : Equator, phi = 0
    2 = EAST   : Equator, phi = pi/2
    3 = BACK   : Equator, phi = pi
    4 = WEST   : Equator, phi = -pi/2
    5 = BOTTOM : South pole (theta = -pi/2)
"""

import numpy as np

TOP_FACE = 0
FRONT_FACE = 1
EAST_FACE = 2
BACK_FACE = 3
WEST_FACE = 4
BOTTOM_FACE = 5

FACES = (TOP_FACE, FRONT_FACE, EAST_FACE, BACK_FACE, WEST_FACE, BOTTOM_FACE)

FACE_NAMES = {
    TOP_FACE: "top",
    FRONT_FACE: "front",
    EAST_FACE: "east",
    BACK_FACE: "back",
    WEST_FACE: "west",
    BOTTOM_FACE: "bottom",
}


def validate_face(face):
    """Check that `face` is one of the six face identifiers.

    Parameters
    ----------
    face : int
        Face identifier.

    Returns
    -------
    int
        The face identifier as a plain integer.

    Raises
    ------
    TypeError
        If `face` is not an integer.
    ValueError
        If `face` is not between 0 and 5.
    """
    if isinstance(face, (bool, np.bool_)) or not isinstance(face, (int, np.integer)):
        raise TypeError("face must be an integer, not {}".format(type(face).__name__))
    if face not in FACES:
        raise ValueError("face must be one of {}. Not {}".format(FACES, face))

    return int(face)
