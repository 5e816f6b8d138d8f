import numpy as np
import pytest

import quadsphere
from quadsphere.faces import FACE_NAMES, FACES, validate_face


def test_face_identifiers():
    assert quadsphere.TOP_FACE == 0
    assert quadsphere.FRONT_FACE == 1
    assert quadsphere.EAST_FACE == 2
    assert quadsphere.BACK_FACE == 3
    assert quadsphere.WEST_FACE == 4
    assert quadsphere.BOTTOM_FACE == 5
    assert FACES == tuple(range(6))
    assert [FACE_NAMES[face] for face in FACES] == ["top", "front", "east", "back", "west", "bottom"]


def test_validate_face_accepts_numpy_integers():
    assert validate_face(np.int64(3)) == 3
    assert type(validate_face(np.int32(5))) is int


@pytest.mark.parametrize("face, exception", [
    (6, ValueError),
    (-1, ValueError),
    (2.0, TypeError),
    (True, TypeError),
    (None, TypeError),
])
def test_validate_face_rejects(face, exception):
    with pytest.raises(exception):
        validate_face(face)


def test_public_functions():
    assert quadsphere.forward_csc(0.0, 0.0) == (quadsphere.FRONT_FACE, 0.0, 0.0)
    assert quadsphere.inverse_csc(quadsphere.FRONT_FACE, 0.0, 0.0) == (0.0, 0.0)
    assert quadsphere.forward_tangential(0.0, 0.0) == (quadsphere.FRONT_FACE, 0.0, 0.0)
    assert quadsphere.inverse_tangential(quadsphere.FRONT_FACE, 0.0, 0.0) == (0.0, 0.0)
    assert quadsphere.forward_distort(0.0, 0.5) == 0.0
    assert quadsphere.inverse_distort(0.0, 0.5) == 0.0
