"""Numeric Constants

This module defines the numeric constants used across the QuadSphere
package. For example, it provides the latitude of the cube corners and
the eccentricity of the WGS84 ellipsoid.
"""

from math import asin, pi, sqrt

# Latitude of the four northern cube corners, arcsin(1/sqrt(3)).
THETA_C = asin(1 / sqrt(3))

# First eccentricity squared of the WGS84 ellipsoid.
WGS84_E2 = 6.69437999014e-3

# Latitudes this far beyond the poles are still accepted as the pole.
ANGLE_TOLERANCE = 1e-12

HALF_PI = pi / 2
