import sys


WIN_VALUE: float = sys.float_info.max
"""Value of a state in which the maximizing side has won."""

LOSS_VALUE: float = -sys.float_info.max
"""Value of a state in which the maximizing side has lost."""


# Window bounds; the end state values above lie strictly inside them.
ALPHA_INIT: float = -float("inf")
BETA_INIT: float = float("inf")
