import abc
from typing import Callable, Generic, Sequence, TypeVar


T = TypeVar("T")
"""State type."""

U = TypeVar("U")
"""Transition type."""


class Hooks(abc.ABC, Generic[T, U]):
    """Game specific behavior needed by the search.

    The search never inspects states or transitions itself, it only passes them
    between these hooks. States are modified in place; every call to `apply` is
    followed by a call to `undo` with the same transition."""

    @abc.abstractmethod
    def transitions(self, state: T, maximizing: bool) -> Sequence[U]:
        """Computes all transitions that can be made from the given state.

        Args:
            state (T): State.
            maximizing (bool): If True, the transitions of the maximizing (searching)
                side are requested, otherwise those of the opponent.

        Returns:
            Sequence[U]: Transitions. Must not be empty, states without transitions
            must be reported by `end_state` instead.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def apply(self, state: T, transition: U):
        """Makes a transition, altering the state in place."""
        raise NotImplementedError

    @abc.abstractmethod
    def undo(self, state: T, transition: U):
        """Reverses a transition previously applied to the state, restoring it to the
        exact value it had before `apply`."""
        raise NotImplementedError

    @abc.abstractmethod
    def evaluate(self, state: T) -> float:
        """Computes the value of a state. Higher values are better for the maximizing
        side.

        Args:
            state (T): State, reached at the depth limit.

        Returns:
            float: Value of the state.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def end_state(self, state: T) -> float:
        """Checks whether the game is over.

        Args:
            state (T): State.

        Returns:
            float: Negative if the maximizing side has lost, positive if it has won,
            zero if the state is not an end state.
        """
        raise NotImplementedError


class Callbacks(Hooks[T, U]):
    """Hooks backed by plain functions."""

    def __init__(
        self,
        calculate_transitions: Callable[[T, bool], Sequence[U]],
        apply_transition: Callable[[T, U], None],
        undo_transition: Callable[[T, U], None],
        evaluate: Callable[[T], float],
        check_end_state: Callable[[T], float],
    ):
        """
        Args:
            calculate_transitions (Callable[[T, bool], Sequence[U]]): Returns all
                transitions from a state, for the side indicated by the flag.
            apply_transition (Callable[[T, U], None]): Makes a transition in place.
            undo_transition (Callable[[T, U], None]): Reverses a transition in place.
            evaluate (Callable[[T], float]): Value of a state, higher is better.
            check_end_state (Callable[[T], float]): Negative if lost, zero if not an
                end state, positive if won.
        """
        super().__init__()
        self._calculate_transitions = calculate_transitions
        self._apply_transition = apply_transition
        self._undo_transition = undo_transition
        self._evaluate = evaluate
        self._check_end_state = check_end_state

    def transitions(self, state: T, maximizing: bool) -> Sequence[U]:
        return self._calculate_transitions(state, maximizing)

    def apply(self, state: T, transition: U):
        self._apply_transition(state, transition)

    def undo(self, state: T, transition: U):
        self._undo_transition(state, transition)

    def evaluate(self, state: T) -> float:
        return self._evaluate(state)

    def end_state(self, state: T) -> float:
        return self._check_end_state(state)
