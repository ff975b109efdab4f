"""Session controller: runs solve attempts against the maze host."""

import logging
import random
import time
from dataclasses import dataclass
from typing import Literal, Optional

from icarus.client import MazeClient, MazeClientError
from icarus.core.solver import Explorer, SolverError

logger = logging.getLogger(__name__)


@dataclass
class AttemptResult:
    """Outcome of one solve attempt."""

    attempt: int
    status: Literal["completed", "abandoned"]
    moves: int = 0
    rejections: int = 0
    message: Optional[str] = None
    elapsed_seconds: float = 0.0

    @property
    def completed(self) -> bool:
        return self.status == "completed"

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "attempt": self.attempt,
            "status": self.status,
            "moves": self.moves,
            "rejections": self.rejections,
            "message": self.message,
            "elapsed_seconds": round(self.elapsed_seconds, 3),
        }


class SessionController:
    """
    Drives solve attempts from wake to victory.

    Each attempt gets its own Explorer and therefore its own knowledge base;
    nothing learnt in one attempt carries over to the next.
    """

    def __init__(
        self,
        client: MazeClient,
        times: int = 1,
        max_moves: int = 0,
        rng: Optional[random.Random] = None,
    ):
        self.client = client
        self.times = times
        self.max_moves = max_moves
        self.rng = rng or random.Random()

    def run(self) -> list[AttemptResult]:
        """Solve the maze `times` times, then announce completion once."""
        logger.info(f"Solving {self.times} times")
        results = []
        try:
            for attempt in range(1, self.times + 1):
                results.append(self.solve(attempt))
        finally:
            self.client.announce_done()
        return results

    def solve(self, attempt: int = 1) -> AttemptResult:
        """
        Run a single attempt.

        Transport failures, walled-in cells and an exhausted move budget
        abandon the attempt; they are logged, not raised.
        """
        start_time = time.monotonic()
        result = AttemptResult(attempt=attempt, status="abandoned")
        explorer: Optional[Explorer] = None

        try:
            explorer = Explorer(self.client, self.client.wake(), rng=self.rng)
            while True:
                if self.max_moves and explorer.moves >= self.max_moves:
                    logger.error(
                        f"Attempt {attempt} abandoned after {explorer.moves} moves (limit reached)"
                    )
                    break

                move = explorer.step()
                if move.is_completed:
                    result.status = "completed"
                    result.message = move.message
                    logger.info(f"Attempt {attempt}: {move.message}")
                    break

        except (MazeClientError, SolverError) as e:
            logger.error(f"Attempt {attempt} abandoned: {type(e).__name__}: {e}")
            result.message = str(e)

        if explorer is not None:
            result.moves = explorer.moves
            result.rejections = explorer.rejections
        result.elapsed_seconds = time.monotonic() - start_time

        logger.info(
            f"Attempt {attempt} {result.status} in {result.moves} moves "
            f"({result.rejections} rejected, {result.elapsed_seconds:.2f}s)"
        )
        return result
