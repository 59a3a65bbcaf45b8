"""
Exceptions raised by the simulation core
"""


class PacmazeError(Exception):
    """Base class for all pacmaze errors"""


class MazeLayoutError(PacmazeError, ValueError):
    """Layout is ragged, empty or holds an unknown cell code"""


class SimulationError(PacmazeError, RuntimeError):
    """A simulation invariant was violated (logic error, not recoverable)"""
