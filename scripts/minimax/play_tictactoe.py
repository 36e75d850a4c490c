import random
from typing import List, Optional

import tap
import numpy as np

import minimax


LINES = np.array(
    [
        [0, 1, 2], [3, 4, 5], [6, 7, 8],
        [0, 3, 6], [1, 4, 7], [2, 5, 8],
        [0, 4, 8], [2, 4, 6],
    ]
)


class ArgumentParser(tap.Tap):
    search_depth: int = 9
    """Number of plies the computer looks ahead."""

    seed: Optional[int] = None
    """Seed used when choosing among equally good moves."""

    human_first: bool = False
    """If set, the human player makes the first move."""


class TicTacToe(minimax.Hooks):
    """Tic-tac-toe hooks. States hold the nine cells followed by the player to move.
    The computer plays 1, the human -1 and empty cells are 0."""

    def transitions(self, state: np.ndarray, maximizing: bool) -> List[int]:
        return np.flatnonzero(state[:-1] == 0).tolist()

    def apply(self, state: np.ndarray, transition: int):
        state[transition] = state[-1]
        state[-1] = -state[-1]

    def undo(self, state: np.ndarray, transition: int):
        state[transition] = 0
        state[-1] = -state[-1]

    def evaluate(self, state: np.ndarray) -> float:
        lines = state[LINES]
        if np.any(lines.sum(1) == 3):
            return 100.0
        if np.any(lines.sum(1) == -3):
            return -100.0
        # Lines still open to one side only.
        mine = np.all(lines >= 0, axis=1) & np.any(lines > 0, axis=1)
        theirs = np.all(lines <= 0, axis=1) & np.any(lines < 0, axis=1)
        return float(mine.sum() - theirs.sum())

    def end_state(self, state: np.ndarray) -> float:
        sums = state[LINES].sum(1)
        if np.any(sums == 3):
            return 1
        if np.any(sums == -3):
            return -1
        return 0


def render(state: np.ndarray):
    symbols = {1: "X", -1: "O", 0: "."}
    for row in state[:-1].reshape((3, 3)):
        print(" ".join(symbols[int(x)] for x in row))
    print()


def main(args: ArgumentParser):
    hooks = TicTacToe()
    rng = random.Random(args.seed)

    state = np.zeros(10, dtype=np.int8)
    state[-1] = -1 if args.human_first else 1

    while hooks.end_state(state) == 0 and np.any(state[:-1] == 0):
        render(state)

        if state[-1] == 1:
            # A full board is never expanded, draws have no end state value.
            depth = max(1, min(args.search_depth, int((state[:-1] == 0).sum())))
            action = minimax.minimax(state, depth, hooks, rng=rng).transition
            print(f"Computer plays {action}.")
        else:
            action = int(input("Action: "))
            if action not in hooks.transitions(state, False):
                print("Illegal action.")
                continue
        hooks.apply(state, action)

    render(state)
    print({1: "Computer wins.", -1: "You win.", 0: "Draw."}[int(hooks.end_state(state))])


if __name__ == "__main__":
    args = ArgumentParser().parse_args()
    main(args)
