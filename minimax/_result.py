from typing import Any, NamedTuple, Optional


class SearchResult(NamedTuple):
    """Outcome of a search from one state."""

    value: float
    """Backed up value of the state, from the maximizing side's point of view."""

    transition: Optional[Any] = None
    """Best transition from the state. `None` at the depth limit, in end states, and
    when every transition was pruned."""
