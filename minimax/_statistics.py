import dataclasses


@dataclasses.dataclass
class Statistics:
    """Counters collected during a search."""

    nodes: int = 0
    """Number of states visited, the root included."""

    evaluations: int = 0
    """Number of states evaluated at the depth limit."""

    terminals: int = 0
    """Number of end states reached."""

    cutoffs: int = 0
    """Number of times the remaining transitions of a state were pruned."""

    def reset(self):
        self.nodes = 0
        self.evaluations = 0
        self.terminals = 0
        self.cutoffs = 0
