"""
Icarus Solver

Randomized Trémaux exploration with one-cell-ahead visibility.

The agent only ever sees the walls of the cell it stands on. Every passage
carries a crossing counter; at each cell the engine prefers the least
crossed open passage, widening an acceptance threshold w = 0, 1, 2, ...
until some direction qualifies. Candidates are shuffled at every level so
repeated attempts on the same maze explore different routes.

A fresh passage leading into an already visited junction is closed off
locally (counted as crossed twice) instead of being walked there and back.
"""

import logging
import random
from typing import TYPE_CHECKING, Optional

from .knowledge import KnowledgeBase
from .maze_model import ORIGIN, Coordinate, Direction, Survey

if TYPE_CHECKING:
    from icarus.client import MazeClient, MoveResult

logger = logging.getLogger(__name__)

# Counter bump for a passage closed off without being walked.
DEAD_END_WEIGHT = 2


class SolverError(Exception):
    """Exception raised when exploration cannot continue."""

    pass


class WalledInError(SolverError):
    """Exception raised when the current cell has no usable opening."""

    pass


class DecisionEngine:
    """Chooses the next direction from a survey and the knowledge base."""

    def __init__(self, knowledge: KnowledgeBase, rng: Optional[random.Random] = None):
        self.knowledge = knowledge
        self.rng = rng or random.Random()

    def candidates(self, at: Coordinate, survey: Survey) -> list[Direction]:
        """Directions open in the survey and not refused by the host."""
        return [
            d for d in survey.open_directions()
            if not self.knowledge.is_rejected(at, d)
        ]

    def choose(self, at: Coordinate, survey: Survey) -> Direction:
        """
        Select the direction to move from `at`.

        May close off fresh passages into visited junctions along the way;
        the returned direction always warrants a physical move.

        Raises:
            WalledInError: If no direction is open.
        """
        while True:
            open_dirs = self.candidates(at, survey)
            if not open_dirs:
                raise WalledInError(f"No open direction at {at} ({survey})")

            direction = self._threshold_search(at, open_dirs)

            target = at.step(direction)
            if (
                self.knowledge.passage_count(at, direction) == 0
                and self.knowledge.is_visited(target)
            ):
                self.knowledge.cross(at, direction, times=DEAD_END_WEIGHT)
                logger.debug(f"Closed passage {direction.value} from {at} into visited {target}")
                continue

            return direction

    def _threshold_search(self, at: Coordinate, open_dirs: list[Direction]) -> Direction:
        # The largest counter among candidates always qualifies, bounding w.
        ceiling = self.knowledge.max_count(at, open_dirs)
        for w in range(ceiling + 1):
            for direction in self.rng.sample(open_dirs, len(open_dirs)):
                if self.knowledge.passage_count(at, direction) <= w:
                    return direction
        raise WalledInError(f"Threshold search exhausted at {at}")


class Explorer:
    """
    One attempt's walk through the maze.

    Example usage:
        explorer = Explorer(client, client.wake(), rng=random.Random(7))
        while not explorer.step().is_completed:
            pass
    """

    def __init__(
        self,
        client: "MazeClient",
        survey: Survey,
        rng: Optional[random.Random] = None,
    ):
        self.client = client
        self.survey = survey
        self.position = ORIGIN
        self.knowledge = KnowledgeBase(ORIGIN)
        self.engine = DecisionEngine(self.knowledge, rng)
        self.moves = 0
        self.rejections = 0

    def step(self) -> "MoveResult":
        """
        Choose a direction, record the traversal and move.

        The traversal is recorded before the request goes out, so the
        knowledge base stays consistent even if the host never answers.
        """
        direction = self.engine.choose(self.position, self.survey)
        target = self.position.step(direction)

        self.knowledge.cross(self.position, direction)
        self.knowledge.visit(target)

        self.moves += 1
        result = self.client.move(direction)

        if result.is_blocked:
            self.rejections += 1
            self.knowledge.reject(self.position, direction)
            logger.warning(
                f"Host rejected move {direction.value} from {self.position}: {result.message}"
            )
            return result

        self.position = target
        self.survey = result.survey
        return result
