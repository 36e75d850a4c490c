"""Minimax with alpha and beta pruning.

The search is generic over the caller's state and transition types. States are
mutated in place through `Hooks.apply` and restored through `Hooks.undo`, so the
state passed to a search is left unchanged once the search returns."""

from . import utils
from ._errors import NoTransitionsError
from ._hooks import Hooks, Callbacks
from ._minimax import minimax, find_best_move
from ._result import SearchResult
from ._statistics import Statistics
from ._values import WIN_VALUE, LOSS_VALUE


__all__ = [
    "Hooks",
    "Callbacks",
    "minimax",
    "find_best_move",
    "SearchResult",
    "Statistics",
    "NoTransitionsError",
    "WIN_VALUE",
    "LOSS_VALUE",
    "utils",
]
