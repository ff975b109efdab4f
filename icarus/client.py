"""
Icarus Maze Client

Talks to the maze host (daedalus) over its three GET endpoints:

    /awake            survey of the start cell
    /move/{direction} survey of the new cell, or victory, or a refusal
    /done             all attempts finished

Usage:
    with MazeClient("http://127.0.0.1:1337") as client:
        survey = client.wake()
        result = client.move(Direction.UP)
        if result.is_completed:
            print(result.message)
"""

import logging
from dataclasses import dataclass
from typing import Literal, Optional, Union

import requests

from icarus.core.maze_model import Direction, Survey
from icarus.schemas.reply import Reply, parse_reply

logger = logging.getLogger(__name__)


@dataclass
class MoveResult:
    """Result from a move action."""
    status: Literal["moved", "blocked", "completed"]
    survey: Survey
    message: Optional[str] = None

    @property
    def is_completed(self) -> bool:
        """Check if the maze is solved."""
        return self.status == "completed"

    @property
    def is_blocked(self) -> bool:
        """Check if the host refused the move."""
        return self.status == "blocked"

    @classmethod
    def from_reply(cls, reply: Reply) -> "MoveResult":
        survey = reply.survey.to_survey()
        if reply.victory:
            return cls(status="completed", survey=survey, message=reply.message)
        if reply.message:
            return cls(status="blocked", survey=survey, message=reply.message)
        return cls(status="moved", survey=survey)

    def __repr__(self) -> str:
        return f"MoveResult(status={self.status}, survey={self.survey})"


class MazeClientError(Exception):
    """Base exception for maze client errors."""
    pass


class TransportError(MazeClientError):
    """The host could not be reached or did not answer."""
    pass


class MazeClient:
    """
    Client for the maze host.

    Holds nothing between calls except the host address, the request
    timeout and the underlying HTTP session.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the maze client.

        Args:
            base_url: Host URL, e.g. "http://127.0.0.1:1337".
            timeout: Seconds to wait for each reply.
            session: HTTP session to use. A new one is created if omitted.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()

    def _request(self, endpoint: str) -> bytes:
        """GET an endpoint and return the raw body."""
        url = f"{self.base_url}{endpoint}"
        try:
            response = self._session.get(url, timeout=self.timeout)
            return response.content
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Request to {url} failed: {e}") from e

    def wake(self) -> Survey:
        """
        Wake up in the labyrinth.

        Returns:
            Survey of the start cell.

        Raises:
            TransportError: If the host does not answer.
        """
        reply = parse_reply(self._request("/awake"))
        return reply.survey.to_survey()

    def move(self, direction: Union[Direction, str]) -> MoveResult:
        """
        Move one cell.

        Args:
            direction: Direction.UP/DOWN/LEFT/RIGHT or its label.

        Returns:
            MoveResult with status "moved", "blocked" or "completed".

        Raises:
            ValueError: If direction is invalid.
            TransportError: If the host does not answer.
        """
        direction = Direction.from_label(direction)
        reply = parse_reply(self._request(f"/move/{direction.value}"))
        return MoveResult.from_reply(reply)

    def announce_done(self) -> None:
        """Tell the host every attempt is finished. Failures are not retried."""
        try:
            self._request("/done")
        except TransportError as e:
            logger.warning(f"Could not announce completion: {e}")

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "MazeClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
