from typing import Any


class NoTransitionsError(RuntimeError):
    """Raised when no transitions are returned from a state that is neither an end
    state nor at the depth limit. This is likely an error in the end state hook."""

    def __init__(self, state: Any, depth: int):
        """
        Args:
            state (Any): State from which no transitions were found.
            depth (int): Ply at which the state was reached.
        """
        super().__init__(
            f"No transitions could be found from {state!r} (depth {depth}). This is "
            "likely an error state; please check your end state function."
        )
        self.state = state
        self.depth = depth
