# Core module
from .maze_model import ORIGIN, Coordinate, Direction, Survey
from .knowledge import KnowledgeBase
from .solver import (
    DEAD_END_WEIGHT,
    DecisionEngine,
    Explorer,
    SolverError,
    WalledInError,
)

__all__ = [
    "ORIGIN",
    "Coordinate",
    "Direction",
    "Survey",
    "KnowledgeBase",
    "DEAD_END_WEIGHT",
    "DecisionEngine",
    "Explorer",
    "SolverError",
    "WalledInError",
]
