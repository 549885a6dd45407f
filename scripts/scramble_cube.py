from typing import Optional
from argparse import ArgumentParser
import sys

from environments.cube3 import Cube3, Cube3State
from utils import env_utils, render_utils, scramble_utils
from utils.log_utils import Logger


def print_cube(env: Cube3, state: Cube3State, title: str):
    print("%s (solved: %s)" % (title, env.state_is_solved(state)))
    print(render_utils.cube_to_ascii(env, state))
    print("")


def main(argv: Optional[list] = None):
    parser: ArgumentParser = ArgumentParser()
    parser.add_argument('--env', type=str, default='cube3', help="Environment")
    parser.add_argument('--seed', type=int, default=None, help="Scramble seed, a fresh one is drawn if not given")
    parser.add_argument('--intensity', type=int, default=scramble_utils.get_default_scramble_intensity(),
                        help="Number of moves in the scramble")
    parser.add_argument('--show_moves', action='store_true', default=False, help="Print the scramble moves")
    parser.add_argument('--log_file', type=str, default='', help="Also write output to this file")

    args = parser.parse_args(argv)

    assert args.intensity >= 0, "Scramble intensity must be non-negative"

    logger: Optional[Logger] = None
    if args.log_file:
        logger = Logger(args.log_file, "a")
        sys.stdout = logger

    try:
        env: Cube3 = env_utils.get_environment(args.env)

        seed: int = args.seed if args.seed is not None else scramble_utils.generate_seed()
        print("Seed: %i, intensity: %i\n" % (seed, args.intensity))

        # solved
        state: Cube3State = env.generate_solved()
        print_cube(env, state, "Solved")

        # scramble
        state = scramble_utils.generate_scrambled(env, seed, args.intensity)
        if args.show_moves:
            scramble = scramble_utils.generate_scramble(env, seed, args.intensity)
            for move_idx, move in enumerate(scramble.moves):
                print("%i: %s" % (move_idx, render_utils.get_move_string(move)))
            print("")
        print_cube(env, state, "Scrambled")

        # solve
        scramble_utils.solve_scrambled_from_seed(env, state, seed, args.intensity)
        print_cube(env, state, "Unscrambled")

        if not env.equivalence_check(state, env.generate_solved()):
            print("Unscrambled cube does not match the solved cube")
    finally:
        if logger is not None:
            sys.stdout = logger.terminal
            logger.close()


if __name__ == "__main__":
    main()
