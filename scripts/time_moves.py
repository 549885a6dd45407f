from typing import List
from argparse import ArgumentParser
from random import randrange

from environments.cube3 import Cube3, Cube3State
from utils import env_utils, scramble_utils

import time


def main():
    # parse arguments
    parser: ArgumentParser = ArgumentParser()
    parser.add_argument('--env', type=str, default='cube3', help="")
    parser.add_argument('--num_states', type=int, default=100, help="")
    parser.add_argument('--num_moves', type=int, default=30, help="")

    args = parser.parse_args()

    # get environment
    env: Cube3 = env_utils.get_environment(args.env)

    # generate goal states
    start_time = time.time()
    states: List[Cube3State] = env.generate_goal_states(args.num_states)

    elapsed_time = time.time() - start_time
    states_per_sec = len(states)/elapsed_time
    print("Generated %i goal states in %s seconds (%.2f/second)" % (len(states), elapsed_time, states_per_sec))

    # turn
    start_time = time.time()
    for _ in range(args.num_moves):
        states = env.next_state(states, randrange(env.get_num_moves()))

    elapsed_time = time.time() - start_time
    moves_per_sec = len(states) * args.num_moves/elapsed_time
    print("Made %i moves in %s seconds (%.2f/second)" % (len(states) * args.num_moves, elapsed_time,
                                                           moves_per_sec))

    # scramble and solve from seed
    start_time = time.time()
    num_solved: int = 0
    for seed in range(args.num_states):
        state: Cube3State = scramble_utils.generate_scrambled(env, seed)
        scramble_utils.solve_scrambled_from_seed(env, state, seed)
        num_solved += int(env.state_is_solved(state))

    elapsed_time = time.time() - start_time
    print("Scrambled and solved %i cubes in %s seconds, %i/%i back to solved" % (args.num_states, elapsed_time,
                                                                               num_solved, args.num_states))


if __name__ == "__main__":
    main()
