"""Icarus entry point: wake up in the labyrinth and find the way out."""

import logging
import random

from pydantic import ValidationError

from icarus.client import MazeClient
from icarus.config import Settings, get_settings
from icarus.session import SessionController

logger = logging.getLogger("icarus")


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def run(settings: Settings) -> int:
    """
    Run every configured attempt against the host.

    Returns:
        0 if all attempts reached the exit, 1 otherwise.
    """
    rng = random.Random(settings.seed)

    with MazeClient(settings.base_url, timeout=settings.request_timeout) as client:
        controller = SessionController(
            client,
            times=settings.times,
            max_moves=settings.max_moves,
            rng=rng,
        )
        results = controller.run()

    solved = [r for r in results if r.completed]
    if solved:
        average = sum(r.moves for r in solved) / len(solved)
        logger.info(f"Solved {len(solved)}/{len(results)} attempts, {average:.1f} moves on average")
    else:
        logger.info(f"Solved 0/{len(results)} attempts")

    return 0 if len(solved) == len(results) else 1


def main() -> int:
    """Main entry point."""
    try:
        settings = get_settings()
    except ValidationError as e:
        configure_logging()
        logger.error(f"Invalid configuration: {e}")
        return 2

    configure_logging(settings.log_level)
    logger.info(f"Connecting to maze host at {settings.base_url}")
    return run(settings)


if __name__ == "__main__":
    raise SystemExit(main())
