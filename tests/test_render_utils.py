import numpy as np
import pytest

from environments.cube3 import Cube3, Side, FaceRotation, Move
from utils import render_utils


@pytest.fixture(scope="module")
def env() -> Cube3:
    return Cube3()


@pytest.mark.parametrize("side,name", [(Side.TOP, "top"), (Side.BACK, "back"), (5, "bottom"), (6, "invalid side")])
def test_get_side_string(side, name):
    assert render_utils.get_side_string(side) == name


@pytest.mark.parametrize("rotation,name", [(FaceRotation.CLOCKWISE, "clockwise"), (1, "counterclockwise"),
                                           (FaceRotation.DOUBLE, "double"), (3, "invalid rotation")])
def test_get_face_rotation_string(rotation, name):
    assert render_utils.get_face_rotation_string(rotation) == name


def test_get_move_string():
    assert render_utils.get_move_string(Move(Side.FRONT, FaceRotation.DOUBLE)) == "Rotate front face double"


def test_face_to_str(env):
    assert render_utils.face_to_str(env.get_face(env.generate_solved(), Side.FRONT)) == "R R R\nR R R\nR R R"
    assert render_utils.face_to_str(env.get_face(env.generate_solved(), 9)) == ". . .\n. . .\n. . ."


def test_piece_to_str(env):
    piece = env.generate_solved().pieces[0, 0]

    assert render_utils.piece_to_str(piece) == "top: white, front: red, right: empty, left: green, back: empty, " \
                                               "bottom: empty"


def test_cube_to_ascii_solved(env):
    lines = render_utils.cube_to_ascii(env, env.generate_solved()).split("\n")

    assert len(lines) == 9
    assert lines[0] == "      W W W"
    assert lines[3] == "G G G R R R B B B O O O"
    assert lines[5] == "G G G R R R B B B O O O"
    assert lines[8] == "      Y Y Y"


def test_cube_to_ascii_after_turn(env):
    state = env.generate_solved()
    env.rotate_face(state, Side.TOP, FaceRotation.CLOCKWISE)
    lines = render_utils.cube_to_ascii(env, state).split("\n")

    assert lines[3] == "R R R B B B O O O G G G"
    assert lines[4] == "G G G R R R B B B O O O"


def test_unknown_color_char():
    assert render_utils.color_char(np.uint8(42)) == "?"
