import math

import numpy as np
import pytest

from mapping_cases import DELTA, FORWARD_CASES, INVERSE_CASES
from quadsphere import csc, tangential
from quadsphere.faces import BOTTOM_FACE, FRONT_FACE, TOP_FACE, WEST_FACE


@pytest.mark.parametrize("phi, theta, face, x, y", FORWARD_CASES)
def test_forward_mapping(phi, theta, face, x, y):
    actual_face, actual_x, actual_y = csc.forward(phi, theta)

    assert actual_face == face
    assert actual_x == pytest.approx(x, abs=DELTA, rel=0.0)
    assert actual_y == pytest.approx(y, abs=DELTA, rel=0.0)


@pytest.mark.parametrize("face, x, y, phi, theta", INVERSE_CASES)
def test_inverse_mapping(face, x, y, phi, theta):
    actual_phi, actual_theta = csc.inverse(face, x, y)

    assert actual_phi == pytest.approx(phi, abs=DELTA, rel=0.0)
    assert actual_theta == pytest.approx(theta, abs=DELTA, rel=0.0)


def test_face_centres():
    assert csc.inverse(FRONT_FACE, 0.0, 0.0) == pytest.approx((0.0, 0.0), abs=DELTA)

    phi, theta = csc.inverse(TOP_FACE, 0.0, 0.0)
    assert theta == pytest.approx(math.pi / 2, abs=DELTA)

    face, x, y = csc.forward(1.234, -math.pi / 2)
    assert face == BOTTOM_FACE
    assert abs(x) <= DELTA
    assert abs(y) <= DELTA


def test_same_face_as_tangential():
    rng = np.random.default_rng(1234)
    phis = rng.uniform(-math.pi, math.pi, 2000)
    thetas = np.arcsin(rng.uniform(-1, 1, 2000))

    for phi, theta in zip(phis, thetas):
        face, x, y = csc.forward(float(phi), float(theta))
        tangential_face, chi, psi = tangential.forward(float(phi), float(theta))

        assert face == tangential_face
        assert abs(x) <= 1.0 + DELTA
        assert abs(y) <= 1.0 + DELTA


def test_closure():
    error = 3.0e-4

    for row in range(100):
        for col in range(100):
            x = 0.005 + col / 100.0
            y = 0.005 + row / 100.0
            phi, theta = csc.inverse(WEST_FACE, x, y)
            face, x1, y1 = csc.forward(phi, theta)

            assert face == WEST_FACE
            assert x1 == pytest.approx(x, abs=error)
            assert y1 == pytest.approx(y, abs=error)


def test_forward_rejects_latitude_out_of_range():
    with pytest.raises(ValueError):
        csc.forward(0.0, 1.6)


def test_inverse_rejects_invalid_face():
    with pytest.raises(ValueError):
        csc.inverse(7, 0.5, 0.5)
