"""Pytest configuration and fixtures."""

import json
import random
from typing import Callable, Optional
from urllib.parse import urlparse

import pytest
import requests
from requests.adapters import BaseAdapter

from icarus.client import MazeClient

BASE_URL = "http://daedalus.test:1337"

# X = wall, S = start, E = exit, . = open
SAMPLE_MAZE = """XXXXXXXXXX
XS.......X
X.XXXXXX.X
X.X....X.X
X.X.XX.X.X
X.X.XX.X.X
X.X....X.X
X.XXXXXX.X
X........E
XXXXXXXXXX"""

LOOPED_MAZE = """XXXXXXXXX
X.......X
X.X.X.X.X
X...S...X
X.X.X.X.X
X.......X
XXXXEXXXX"""

CORRIDOR_MAZE = """XXXXX
XS.EX
XXXXX"""


def reply(
    top: bool = False,
    right: bool = False,
    bottom: bool = False,
    left: bool = False,
    victory: bool = False,
    message: str = "",
) -> dict:
    """Build a host reply payload."""
    return {
        "Survey": {"Top": top, "Right": right, "Bottom": bottom, "Left": left},
        "Victory": victory,
        "Message": message,
    }


class GridMazeHost:
    """
    In-memory maze host serving a text grid.

    Every attempt starts again from S; stepping onto E wins.
    """

    DELTAS = {"up": (0, -1), "down": (0, 1), "left": (-1, 0), "right": (1, 0)}

    def __init__(self, maze_text: str):
        self.grid = [list(line) for line in maze_text.strip().split("\n")]
        self.start = next(
            (x, y)
            for y, row in enumerate(self.grid)
            for x, cell in enumerate(row)
            if cell == "S"
        )
        self.position = self.start
        self.paths: list[str] = []
        self.done_calls = 0
        self.wins = 0

    def _cell(self, x: int, y: int) -> str:
        if 0 <= y < len(self.grid) and 0 <= x < len(self.grid[y]):
            return self.grid[y][x]
        return "X"

    def _survey(self) -> dict:
        x, y = self.position
        return reply(
            top=self._cell(x, y - 1) == "X",
            right=self._cell(x + 1, y) == "X",
            bottom=self._cell(x, y + 1) == "X",
            left=self._cell(x - 1, y) == "X",
        )

    def handle(self, path: str) -> dict:
        self.paths.append(path)

        if path == "/awake":
            self.position = self.start
            return self._survey()

        if path == "/done":
            self.done_calls += 1
            return {}

        direction = path.rsplit("/", 1)[-1]
        dx, dy = self.DELTAS[direction]
        x, y = self.position
        target = self._cell(x + dx, y + dy)

        if target == "X":
            payload = self._survey()
            payload["Message"] = "wall"
            return payload

        self.position = (x + dx, y + dy)
        if target == "E":
            self.wins += 1
            return reply(victory=True, message="You solved it!")
        return self._survey()

    @property
    def move_count(self) -> int:
        return sum(1 for p in self.paths if p.startswith("/move/"))


class ScriptedHost:
    """Host answering each path from a queue of canned replies; the last one repeats."""

    def __init__(self, routes: dict[str, list]):
        self.routes = {path: list(bodies) for path, bodies in routes.items()}
        self.paths: list[str] = []

    def handle(self, path: str):
        self.paths.append(path)
        bodies = self.routes.get(path, [{}])
        return bodies.pop(0) if len(bodies) > 1 else bodies[0]


class FakeHostAdapter(BaseAdapter):
    """Transport adapter dispatching requests to an in-memory host."""

    def __init__(self, handler: Callable[[str], object]):
        super().__init__()
        self.handler = handler
        self.timeouts: list[Optional[float]] = []

    def send(self, request, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        self.timeouts.append(timeout)
        body = self.handler(urlparse(request.url).path)
        if isinstance(body, Exception):
            raise body

        response = requests.Response()
        response.status_code = 200
        response.url = request.url
        response.request = request
        response.headers["Content-Type"] = "application/json"
        response._content = body if isinstance(body, bytes) else json.dumps(body).encode("utf-8")
        return response

    def close(self):
        pass


class FixedOrderRandom(random.Random):
    """Random source whose permutations keep the input order."""

    def sample(self, population, k, *, counts=None):
        return list(population)[:k]


def make_client(handler: Callable[[str], object]) -> tuple[MazeClient, FakeHostAdapter]:
    """Create a MazeClient wired to an in-memory host."""
    adapter = FakeHostAdapter(handler)
    session = requests.Session()
    session.mount("http://", adapter)
    return MazeClient(BASE_URL, timeout=2.5, session=session), adapter


@pytest.fixture
def sample_host() -> GridMazeHost:
    """Host serving the sample 10x10 maze."""
    return GridMazeHost(SAMPLE_MAZE)


@pytest.fixture
def sample_client(sample_host):
    """Client talking to the sample maze host."""
    client, _ = make_client(sample_host.handle)
    yield client
    client.close()


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; reset around each test."""
    from icarus.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
