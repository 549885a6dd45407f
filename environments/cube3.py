from enum import IntEnum
from typing import List, Dict, Tuple, NamedTuple
import numpy as np
from random import randrange

from environments.environment_abstract import Environment, State
from environments import cube3_tables as tables


class Color(IntEnum):
    EMPTY = tables.E
    WHITE = tables.W
    RED = tables.R
    BLUE = tables.B
    GREEN = tables.G
    ORANGE = tables.O
    YELLOW = tables.Y


class Side(IntEnum):
    TOP = tables.TOP
    FRONT = tables.FRONT
    RIGHT = tables.RIGHT
    LEFT = tables.LEFT
    BACK = tables.BACK
    BOTTOM = tables.BOTTOM


class FaceRotation(IntEnum):
    CLOCKWISE = 0
    COUNTERCLOCKWISE = 1
    DOUBLE = 2


class InvalidMoveError(ValueError):
    pass


class Move(NamedTuple):
    side: Side
    rotation: FaceRotation

    def inverse(self) -> 'Move':
        if self.rotation == FaceRotation.CLOCKWISE:
            return Move(self.side, FaceRotation.COUNTERCLOCKWISE)
        elif self.rotation == FaceRotation.COUNTERCLOCKWISE:
            return Move(self.side, FaceRotation.CLOCKWISE)

        return self


class Cube3State(State):
    __slots__ = ['pieces', 'hash']

    def __init__(self, pieces: np.ndarray):
        # shape: (plane, index, facet slot)
        self.pieces: np.ndarray = pieces
        self.hash = None

    def __hash__(self):
        if self.hash is None:
            self.hash = hash(self.pieces.tobytes())

        return self.hash

    def __eq__(self, other):
        return np.array_equal(self.pieces, other.pieces)

    def copy(self) -> 'Cube3State':
        return Cube3State(self.pieces.copy())


class Cube3(Environment):
    # Moves are in groups of three per side: clockwise, counterclockwise, double.
    moves: List[Move] = [Move(side, rotation) for side in Side for rotation in FaceRotation]

    def __init__(self):
        super().__init__()
        self.cube_len = 3

        # solved state
        self.goal_pieces: np.ndarray = np.array(tables.SOLVED_PIECES, dtype=self.dtype)
        self.pieces_shape: Tuple[int, int, int] = self.goal_pieces.shape

        # face extraction
        self.face_planes: Dict[Side, np.ndarray] = dict()
        self.face_idxs: Dict[Side, np.ndarray] = dict()
        for side in Side:
            self.face_planes[side] = np.array([plane for plane, _ in tables.FACE_GATHER[side]], dtype=int)
            self.face_idxs[side] = np.array([idx for _, idx in tables.FACE_GATHER[side]], dtype=int)

        self.null_face: np.ndarray = np.full(self.cube_len ** 2, Color.EMPTY, dtype=self.dtype)

        # get idxs changed for moves
        self.subrotation_sets: Dict[Side, Dict[FaceRotation, np.ndarray]] = self._compute_subrotation_sets()

        self.rotate_idxs_new: Dict[Move, np.ndarray]
        self.rotate_idxs_old: Dict[Move, np.ndarray]
        self.rotate_idxs_new, self.rotate_idxs_old = self._compute_rotation_idxs()

        self.move_rev_idxs: List[int] = [self.moves.index(move.inverse()) for move in self.moves]

    def generate_solved(self) -> Cube3State:
        return Cube3State(self.goal_pieces.copy())

    def generate_goal_states(self, num_states: int) -> List[Cube3State]:
        return [self.generate_solved() for _ in range(num_states)]

    def next_state(self, states: List[Cube3State], action: int) -> List[Cube3State]:
        move: Move = self.moves[action]

        states_next: List[Cube3State] = []
        for state in states:
            state_next: Cube3State = state.copy()
            self.apply_move(state_next, move)
            states_next.append(state_next)

        return states_next

    def prev_state(self, states: List[Cube3State], action: int) -> List[Cube3State]:
        return self.next_state(states, self.move_rev_idxs[action])

    def get_num_moves(self) -> int:
        return len(self.moves)

    def get_face(self, state: Cube3State, side: int) -> np.ndarray:
        """ Colors seen when facing a side, row-major. An invalid side gives a face of empty colors. """
        if side not in self.face_planes:
            return self.null_face.copy()

        side = Side(side)
        return state.pieces[self.face_planes[side], self.face_idxs[side], side]

    def get_faces(self, state: Cube3State) -> np.ndarray:
        return np.stack([self.get_face(state, side) for side in Side], axis=0)

    def is_solved(self, states: List[Cube3State]) -> np.ndarray:
        return np.array([self.state_is_solved(state) for state in states], dtype=bool)

    def state_is_solved(self, state: Cube3State) -> bool:
        # every face shows a single color
        faces: np.ndarray = self.get_faces(state)

        return bool(np.all(faces == faces[:, :1]))

    def equivalence_check(self, first: Cube3State, second: Cube3State) -> bool:
        return bool(np.array_equal(first.pieces, second.pieces))

    def rotate_face(self, state: Cube3State, side: int, face_rotation: int) -> None:
        """
        Turn one side of the cube in place
        Args:
            state: cube to be turned
            side: side to turn
            face_rotation: clockwise, counterclockwise or double, as seen when facing the side
        """
        move_key: Tuple[int, int] = (side, face_rotation)
        if move_key not in self.rotate_idxs_new:
            raise InvalidMoveError("Invalid move: side %s, rotation %s" % (side, face_rotation))

        # old idx -> new idx, the right hand side is gathered before anything is written
        state.pieces.flat[self.rotate_idxs_new[move_key]] = state.pieces.flat[self.rotate_idxs_old[move_key]]
        state.hash = None

    def apply_move(self, state: Cube3State, move: Move) -> None:
        self.rotate_face(state, move.side, move.rotation)

    def unapply_move(self, state: Cube3State, move: Move) -> None:
        self.rotate_face(state, move.side, self._inverse_rotation(move.rotation))

    def generate_random_move(self) -> Move:
        side: Side = Side(randrange(len(Side)))
        rotation: FaceRotation = FaceRotation(randrange(len(FaceRotation)))

        return Move(side, rotation)

    def get_quadsets(self, side: Side) -> Tuple[List[Tuple[int, int]], List[Tuple[int, int]]]:
        return tables.CORNER_QUADSETS[side], tables.EDGE_QUADSETS[side]

    @staticmethod
    def _inverse_rotation(face_rotation: int) -> int:
        if face_rotation == FaceRotation.CLOCKWISE:
            return FaceRotation.COUNTERCLOCKWISE
        elif face_rotation == FaceRotation.COUNTERCLOCKWISE:
            return FaceRotation.CLOCKWISE

        return face_rotation

    @staticmethod
    def _quadset_shift(face_rotation: FaceRotation) -> int:
        # positions moved along the clockwise cycle of a quadset
        if face_rotation == FaceRotation.CLOCKWISE:
            return 1
        elif face_rotation == FaceRotation.COUNTERCLOCKWISE:
            return tables.PIECES_PER_QUADSET - 1
        else:
            return 2

    def _compute_subrotation_sets(self) -> Dict[Side, Dict[FaceRotation, np.ndarray]]:
        """ For each side and rotation, the facet slot relabeling shared by all pieces the turn moves.
        new_piece[slot] = old_piece[subrotation[slot]]
        """
        subrotation_sets: Dict[Side, Dict[FaceRotation, np.ndarray]] = dict()
        for side in Side:
            cycle: List[int] = tables.FACET_CYCLES[side]
            subrotation_sets[side] = dict()
            for face_rotation in FaceRotation:
                shift: int = self._quadset_shift(face_rotation)

                subrotation: np.ndarray = np.arange(tables.NUM_SLOTS)
                for cycle_idx, slot_old in enumerate(cycle):
                    slot_new: int = cycle[(cycle_idx + shift) % len(cycle)]
                    subrotation[slot_new] = slot_old

                subrotation_sets[side][face_rotation] = subrotation

        return subrotation_sets

    def _compute_rotation_idxs(self) -> Tuple[Dict[Move, np.ndarray], Dict[Move, np.ndarray]]:
        rotate_idxs_new: Dict[Move, np.ndarray] = dict()
        rotate_idxs_old: Dict[Move, np.ndarray] = dict()

        for move in self.moves:
            shift: int = self._quadset_shift(move.rotation)
            subrotation: np.ndarray = self.subrotation_sets[move.side][move.rotation]

            idxs_new: List[int] = []
            idxs_old: List[int] = []
            for quadset in self.get_quadsets(move.side):
                for quad_idx in range(tables.PIECES_PER_QUADSET):
                    plane_old, idx_old = quadset[quad_idx]
                    plane_new, idx_new = quadset[(quad_idx + shift) % tables.PIECES_PER_QUADSET]
                    for slot in range(tables.NUM_SLOTS):
                        idxs_new.append(np.ravel_multi_index((plane_new, idx_new, slot), self.pieces_shape))
                        idxs_old.append(np.ravel_multi_index((plane_old, idx_old, subrotation[slot]),
                                                             self.pieces_shape))

            rotate_idxs_new[move] = np.array(idxs_new, dtype=int)
            rotate_idxs_old[move] = np.array(idxs_old, dtype=int)

        return rotate_idxs_new, rotate_idxs_old
