import logging
import random
import threading
from kruskal_maze.core.grid import Grid
from kruskal_maze.algo.kruskal import generate

logger = logging.getLogger(__name__)


class MazeBuilder:
    """
    Host side of the generator: owns a grid created once and rebuilds the
    maze in it on every build request.
    """

    def __init__(self, width: int, height: int, seed: int = None, listener=None):
        self.grid = Grid(width, height, listener=listener)
        self.rng = random.Random(seed)
        self.generation = 0
        self._lock = threading.Lock()

    @property
    def busy(self) -> bool:
        return self._lock.locked()

    def create_maze(self) -> int:
        removed = generate(self.grid, self.grid.width, self.grid.height, self.rng)
        self.generation += 1
        logger.info(f"Built maze #{self.generation} ({self.grid.width}x{self.grid.height}, {removed} passages)")
        return removed

    def request_build(self) -> bool:
        """
        Trigger entry point. A request that arrives while a build is running
        is dropped and False is returned.
        """
        if not self._lock.acquire(blocking=False):
            logger.debug("Build already in progress, request ignored")
            return False
        try:
            self.create_maze()
        finally:
            self._lock.release()
        return True
