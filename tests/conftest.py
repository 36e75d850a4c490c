import pytest

import minimax


class TreeGame(minimax.Hooks):
    """Game played on a hand-built tree.

    Inner nodes are lists of children and leaves are numbers. The strings "W" and "L"
    are end states, won and lost respectively by the maximizing side. States are
    lists of child indices, i.e. the path from the root."""

    def __init__(self, tree, heuristic: float = 0.0):
        self.tree = tree
        self.heuristic = heuristic
        self.turns = []
        self.applied = []
        self.undone = []
        self.evaluated = []

    def node(self, state):
        node = self.tree
        for i in state:
            node = node[i]
        return node

    def transitions(self, state, maximizing):
        self.turns.append((len(state), maximizing))
        node = self.node(state)
        if isinstance(node, list):
            return list(range(len(node)))
        return []

    def apply(self, state, transition):
        self.applied.append(tuple(state) + (transition,))
        state.append(transition)

    def undo(self, state, transition):
        assert state[-1] == transition
        state.pop()
        self.undone.append(tuple(state) + (transition,))

    def evaluate(self, state):
        self.evaluated.append(tuple(state))
        node = self.node(state)
        if node == "W":
            return 100
        if node == "L":
            return -100
        if isinstance(node, list):
            return self.heuristic
        return node

    def end_state(self, state):
        node = self.node(state)
        if node == "W":
            return 1
        if node == "L":
            return -1
        return 0


@pytest.fixture
def tree_game():
    return TreeGame
