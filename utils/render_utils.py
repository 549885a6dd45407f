from typing import List, Dict
import numpy as np

from environments.cube3 import Cube3, Cube3State, Color, Side, FaceRotation, Move

color_to_char: Dict[int, str] = {
    Color.EMPTY: ".",
    Color.WHITE: "W",
    Color.RED: "R",
    Color.BLUE: "B",
    Color.GREEN: "G",
    Color.ORANGE: "O",
    Color.YELLOW: "Y",
}


def get_side_string(side: int) -> str:
    if side in Side._value2member_map_:
        return Side(side).name.lower()

    return "invalid side"


def get_face_rotation_string(rotation: int) -> str:
    if rotation in FaceRotation._value2member_map_:
        return FaceRotation(rotation).name.lower()

    return "invalid rotation"


def get_move_string(move: Move) -> str:
    return "Rotate %s face %s" % (get_side_string(move.side), get_face_rotation_string(move.rotation))


def color_char(color: int) -> str:
    return color_to_char.get(int(color), "?")


def face_rows(face: np.ndarray, cube_len: int = 3) -> List[str]:
    return [" ".join(color_char(color) for color in face[row * cube_len:(row + 1) * cube_len])
            for row in range(cube_len)]


def face_to_str(face: np.ndarray, cube_len: int = 3) -> str:
    return "\n".join(face_rows(face, cube_len))


def piece_to_str(piece: np.ndarray) -> str:
    return ", ".join("%s: %s" % (side.name.lower(), Color(int(piece[side])).name.lower()) for side in Side)


def cube_to_ascii(env: Cube3, state: Cube3State) -> str:
    """
    Unfolded net of the cube:

          T
        L F R K
          D

    where K is the back face and D the bottom face
    """
    rows: Dict[Side, List[str]] = {side: face_rows(env.get_face(state, side), env.cube_len) for side in Side}
    row_width: int = len(rows[Side.FRONT][0])
    pad: str = " " * (row_width + 1)

    lines: List[str] = []
    for row in rows[Side.TOP]:
        lines.append(pad + row)
    for row_idx in range(env.cube_len):
        lines.append(" ".join(rows[side][row_idx] for side in [Side.LEFT, Side.FRONT, Side.RIGHT, Side.BACK]))
    for row in rows[Side.BOTTOM]:
        lines.append(pad + row)

    return "\n".join(lines)
