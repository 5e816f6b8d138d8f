"""
QuadSphere: the quadrilateralized spherical cube projection.

This package maps points on a sphere to points on the six faces of a
circumscribed cube and back, using either the tangential (gnomonic)
spherical cube projection or the approximately equal-area
quadrilateralized spherical cube (CSC) projection.

Angles are in radians, with `phi` the longitude from -pi to pi and
`theta` the latitude from -pi/2 to pi/2. Face coordinates are from -1
to 1.

Attributes
----------
CubeProjection : class
    Class for projecting arrays of points.
forward_csc : function
    Project a point on the sphere to a CSC face point.
inverse_csc : function
    Project a CSC face point to the sphere.
forward_tangential : function
    Project a point on the sphere to a tangential face point.
inverse_tangential : function
    Project a tangential face point to the sphere.
forward_distort : function
    Distort one tangential coordinate into a CSC coordinate.
inverse_distort : function
    Undistort one CSC coordinate into a tangential coordinate.
"""

from .csc import forward as forward_csc
from .csc import inverse as inverse_csc
from .distortion import forward_distort, inverse_distort
from .faces import (
    BACK_FACE,
    BOTTOM_FACE,
    EAST_FACE,
    FACE_NAMES,
    FRONT_FACE,
    TOP_FACE,
    WEST_FACE,
)
from .projection import CubeProjection
from .tangential import forward as forward_tangential
from .tangential import inverse as inverse_tangential

__all__ = [
    "CubeProjection",
    "forward_csc",
    "inverse_csc",
    "forward_tangential",
    "inverse_tangential",
    "forward_distort",
    "inverse_distort",
    "TOP_FACE",
    "FRONT_FACE",
    "EAST_FACE",
    "BACK_FACE",
    "WEST_FACE",
    "BOTTOM_FACE",
    "FACE_NAMES",
]
