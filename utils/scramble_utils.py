from typing import List, Optional
import numpy as np

from environments.cube3 import Cube3, Cube3State, Move, Side, FaceRotation, InvalidMoveError

SCRAMBLE_INTENSITY: int = 50
SEED_BITS: int = 64
SEED_MASK: int = (1 << SEED_BITS) - 1


class Scramble:
    __slots__ = ['moves', 'seed']

    def __init__(self, moves: List[Move], seed: int):
        self.moves: List[Move] = list(moves)
        self.seed: int = seed

    def __len__(self):
        return len(self.moves)

    def __repr__(self):
        return "Scramble(seed=%i, moves=%i)" % (self.seed, len(self.moves))


def get_default_scramble_intensity() -> int:
    return SCRAMBLE_INTENSITY


def generate_seed() -> int:
    # fresh OS entropy, drawn once per call
    return int(np.random.SeedSequence().entropy) & SEED_MASK


def _get_seeded_rng(seed: int) -> np.random.RandomState:
    if isinstance(seed, bool) or not isinstance(seed, (int, np.integer)):
        raise ValueError("Seed must be an integer, got %r" % (seed,))

    seed = int(seed)
    if seed < 0 or seed > SEED_MASK:
        raise ValueError("Seed must be in [0, 2**%i), got %i" % (SEED_BITS, seed))

    # RandomState streams are stable across numpy versions and platforms
    return np.random.RandomState([seed & 0xFFFFFFFF, seed >> 32])


def generate_moves_from_seed(env: Cube3, seed: int, number_of_moves: int) -> List[Move]:
    """ Deterministic move sequence. The global random state is never touched, and the first k moves for a
    seed are the same regardless of how many are generated.

    @param env: Cube environment
    @param seed: Seed in [0, 2**64)
    @param number_of_moves: Number of moves to generate
    @return: List of moves
    """
    assert number_of_moves >= 0, "Number of moves must be non-negative"

    rng: np.random.RandomState = _get_seeded_rng(seed)
    num_env_moves: int = env.get_num_moves()

    moves: List[Move] = []
    for _ in range(number_of_moves):
        moves.append(env.moves[rng.randint(num_env_moves)])

    return moves


def generate_scramble(env: Cube3, seed: Optional[int] = None,
                      intensity: int = SCRAMBLE_INTENSITY) -> Scramble:
    if seed is None:
        seed = generate_seed()

    return Scramble(generate_moves_from_seed(env, seed, intensity), seed)


def apply_scramble(env: Cube3, state: Cube3State, scramble: Scramble) -> None:
    for move in scramble.moves:
        env.apply_move(state, move)


def unapply_scramble(env: Cube3, state: Cube3State, scramble: Scramble) -> None:
    for move in reversed(scramble.moves):
        env.unapply_move(state, move)


def generate_scrambled(env: Cube3, seed: int, intensity: int = SCRAMBLE_INTENSITY) -> Cube3State:
    state: Cube3State = env.generate_solved()
    for move in generate_moves_from_seed(env, seed, intensity):
        env.apply_move(state, move)

    return state


def solve_scrambled_from_seed(env: Cube3, state: Cube3State, seed: int,
                              intensity: int = SCRAMBLE_INTENSITY) -> None:
    # last move undone first
    for move in reversed(generate_moves_from_seed(env, seed, intensity)):
        env.unapply_move(state, move)


def move_from_strings(side: str, rotation: str) -> Move:
    """ Parse a move received as text, e.g. ("top", "clockwise") """
    side_key: str = side.strip().upper()
    rotation_key: str = rotation.strip().upper()

    if side_key not in Side.__members__:
        raise InvalidMoveError("Invalid move: unknown side %r" % side)
    if rotation_key not in FaceRotation.__members__:
        raise InvalidMoveError("Invalid move: unknown rotation %r" % rotation)

    return Move(Side[side_key], FaceRotation[rotation_key])
