import random
from typing import Callable, Generic, List, Optional, Sequence

from ._errors import NoTransitionsError
from ._hooks import Hooks, Callbacks, T, U
from ._result import SearchResult
from ._statistics import Statistics
from ._values import WIN_VALUE, LOSS_VALUE, ALPHA_INIT, BETA_INIT
from .utils import pylogging


_LOGGER = pylogging.get_logger(__name__)


class _Search(Generic[T, U]):
    def __init__(
        self,
        hooks: Hooks[T, U],
        max_depth: int,
        rng: random.Random,
        prune: bool,
        statistics: Statistics,
    ):
        self._hooks = hooks
        self._max_depth = max_depth
        self._rng = rng
        self._prune = prune
        self._statistics = statistics

    def run(
        self, state: T, depth: int, maximizing: bool, alpha: float, beta: float
    ) -> SearchResult:
        self._statistics.nodes += 1

        if depth == self._max_depth:
            self._statistics.evaluations += 1
            return SearchResult(self._hooks.evaluate(state))

        end_state = self._hooks.end_state(state)
        if end_state < 0:
            self._statistics.terminals += 1
            return SearchResult(LOSS_VALUE)
        elif end_state > 0:
            self._statistics.terminals += 1
            return SearchResult(WIN_VALUE)

        transitions = list(self._hooks.transitions(state, maximizing))
        if len(transitions) == 0:
            raise NoTransitionsError(state, depth)

        best = ALPHA_INIT if maximizing else BETA_INIT
        best_transitions: List[U] = []

        for transition in transitions:
            if self._prune and alpha > beta:
                self._statistics.cutoffs += 1
                break

            self._hooks.apply(state, transition)
            try:
                value = self.run(state, depth + 1, not maximizing, alpha, beta).value
            finally:
                self._hooks.undo(state, transition)

            if value == best:
                best_transitions.append(transition)
            elif (maximizing and value > best) or (not maximizing and value < best):
                best = value
                best_transitions = [transition]
                if maximizing:
                    alpha = max(alpha, best)
                else:
                    beta = min(beta, best)

        if len(best_transitions) == 0:
            return SearchResult(best)

        if depth == 0 and len(best_transitions) > 1:
            _LOGGER.debug(
                "Picking randomly among %d transitions of value %s.",
                len(best_transitions),
                best,
            )
        return SearchResult(best, self._rng.choice(best_transitions))


def minimax(
    state: T,
    max_depth: int,
    hooks: Hooks[T, U],
    rng: Optional[random.Random] = None,
    prune: bool = True,
    statistics: Optional[Statistics] = None,
) -> SearchResult:
    """Runs the minimax algorithm with alpha-beta pruning from the given state.

    The searching side is the maximizing side, and moves first. Turns then alternate
    every ply. The state is modified during the search, but is restored before this
    function returns, also when an exception is raised.

    Args:
        state (T): State to search from.
        max_depth (int): Number of plies to look ahead. If zero, the state is
            evaluated without lookahead.
        hooks (Hooks[T, U]): Game specific behavior.
        rng (Optional[random.Random], optional): Random number generator used to
            choose among equally valued transitions. Defaults to the `random` module.
        prune (bool, optional): If False, alpha-beta pruning is disabled and the full
            tree is searched. Defaults to True.
        statistics (Optional[Statistics], optional): If given, search counters are
            added to this object. Defaults to None.

    Raises:
        ValueError: If `max_depth` is negative.
        NoTransitionsError: If no transitions are found from a state that is not an
            end state.

    Returns:
        SearchResult: Value of the state and the best transition, if any.
    """
    if max_depth < 0:
        raise ValueError(f"Search depth must be non-negative, got {max_depth}.")

    if rng is None:
        rng = random
    if statistics is None:
        statistics = Statistics()

    search = _Search(hooks, max_depth, rng, prune, statistics)
    result = search.run(state, 0, True, ALPHA_INIT, BETA_INIT)

    _LOGGER.debug(
        "Searched depth %d: value %s, %d nodes, %d evaluations, %d end states, "
        "%d cutoffs.",
        max_depth,
        result.value,
        statistics.nodes,
        statistics.evaluations,
        statistics.terminals,
        statistics.cutoffs,
    )
    return result


def find_best_move(
    state: T,
    max_depth: int,
    calculate_transitions: Callable[[T, bool], Sequence[U]],
    apply_transition: Callable[[T, U], None],
    undo_transition: Callable[[T, U], None],
    evaluate: Callable[[T], float],
    check_end_state: Callable[[T], float],
    rng: Optional[random.Random] = None,
) -> Optional[U]:
    """Returns the best transition to make from the given state.

    See `Callbacks` for the functions required, and `minimax` for the search itself.

    Returns:
        Optional[U]: Best transition. `None` if the state is an end state or
        `max_depth` is zero.
    """
    hooks = Callbacks(
        calculate_transitions,
        apply_transition,
        undo_transition,
        evaluate,
        check_end_state,
    )
    return minimax(state, max_depth, hooks, rng=rng).transition
