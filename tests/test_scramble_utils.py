import random

import numpy as np
import pytest

from environments.cube3 import Cube3, Move, Side, FaceRotation, InvalidMoveError
from utils import scramble_utils
from utils.scramble_utils import Scramble


@pytest.fixture(scope="module")
def env() -> Cube3:
    return Cube3()


def test_default_intensity():
    assert scramble_utils.get_default_scramble_intensity() == 50


@pytest.mark.parametrize("seed", [0, 1, 12345, 2 ** 32, 2 ** 64 - 1])
def test_moves_from_seed_are_reproducible(env, seed):
    moves_first = scramble_utils.generate_moves_from_seed(env, seed, 50)
    moves_second = scramble_utils.generate_moves_from_seed(env, seed, 50)

    assert len(moves_first) == 50
    assert moves_first == moves_second
    assert all(move in env.moves for move in moves_first)


def test_moves_from_seed_are_prefix_stable(env):
    moves_short = scramble_utils.generate_moves_from_seed(env, 99, 10)
    moves_long = scramble_utils.generate_moves_from_seed(env, 99, 50)

    assert moves_long[:10] == moves_short


def test_different_seeds_give_different_moves(env):
    assert scramble_utils.generate_moves_from_seed(env, 1, 50) != scramble_utils.generate_moves_from_seed(env, 2, 50)
    assert scramble_utils.generate_moves_from_seed(env, 1, 50) != \
        scramble_utils.generate_moves_from_seed(env, 1 + 2 ** 32, 50)


def test_zero_moves(env):
    assert scramble_utils.generate_moves_from_seed(env, 5, 0) == []


def test_seeded_moves_do_not_touch_global_random_state(env):
    np.random.seed(5)
    random.seed(5)
    expected = (np.random.rand(), random.random())

    np.random.seed(5)
    random.seed(5)
    scramble_utils.generate_moves_from_seed(env, 3, 50)
    assert (np.random.rand(), random.random()) == expected


@pytest.mark.parametrize("seed", [-1, 2 ** 64, "7", 1.5, True, None])
def test_invalid_seed(env, seed):
    with pytest.raises(ValueError, match="Seed"):
        scramble_utils.generate_moves_from_seed(env, seed, 5)


def test_generate_seed():
    seeds = [scramble_utils.generate_seed() for _ in range(5)]

    assert all(0 <= seed < 2 ** 64 for seed in seeds)
    assert len(set(seeds)) > 1


@pytest.mark.parametrize("seed", [0, 7, 42, 2 ** 64 - 1])
def test_solve_scrambled_from_seed(env, seed):
    state = scramble_utils.generate_scrambled(env, seed)
    assert not env.state_is_solved(state)

    scramble_utils.solve_scrambled_from_seed(env, state, seed)
    assert env.equivalence_check(state, env.generate_solved())


def test_solve_scrambled_with_intensity(env):
    state = scramble_utils.generate_scrambled(env, 8, intensity=5)
    scramble_utils.solve_scrambled_from_seed(env, state, 8, intensity=5)

    assert env.state_is_solved(state)


def test_scramble_round_trip(env):
    scramble = scramble_utils.generate_scramble(env, 21)
    state = env.generate_solved()

    scramble_utils.apply_scramble(env, state, scramble)
    assert state == scramble_utils.generate_scrambled(env, 21)

    scramble_utils.unapply_scramble(env, state, scramble)
    assert env.state_is_solved(state)


def test_generate_scramble_without_seed(env):
    scramble = scramble_utils.generate_scramble(env)

    assert len(scramble) == 50
    assert 0 <= scramble.seed < 2 ** 64
    assert scramble.moves == scramble_utils.generate_moves_from_seed(env, scramble.seed, 50)


def test_scramble_owns_its_moves(env):
    moves = [Move(Side.TOP, FaceRotation.CLOCKWISE)]
    scramble = Scramble(moves, 3)
    moves.append(Move(Side.FRONT, FaceRotation.DOUBLE))

    assert len(scramble) == 1
    assert repr(scramble) == "Scramble(seed=3, moves=1)"


def test_failed_scramble_leaves_applied_prefix(env):
    prefix = [Move(Side.TOP, FaceRotation.CLOCKWISE), Move(Side.RIGHT, FaceRotation.DOUBLE)]
    scramble = Scramble(prefix + [Move(9, FaceRotation.CLOCKWISE), Move(Side.LEFT, FaceRotation.CLOCKWISE)], 0)

    state = env.generate_solved()
    with pytest.raises(InvalidMoveError):
        scramble_utils.apply_scramble(env, state, scramble)

    expected = env.generate_solved()
    for move in prefix:
        env.apply_move(expected, move)
    assert env.equivalence_check(state, expected)


@pytest.mark.parametrize("side,rotation,move", [
    ("top", "clockwise", Move(Side.TOP, FaceRotation.CLOCKWISE)),
    (" Back ", "DOUBLE", Move(Side.BACK, FaceRotation.DOUBLE)),
    ("bottom", "CounterClockwise", Move(Side.BOTTOM, FaceRotation.COUNTERCLOCKWISE)),
])
def test_move_from_strings(side, rotation, move):
    assert scramble_utils.move_from_strings(side, rotation) == move


@pytest.mark.parametrize("side,rotation", [("up", "clockwise"), ("top", "half"), ("", "")])
def test_move_from_strings_invalid(side, rotation):
    with pytest.raises(InvalidMoveError, match="Invalid move"):
        scramble_utils.move_from_strings(side, rotation)
