import random
from abc import ABC, abstractmethod
from kruskal_maze.core.grid import Grid

class Generator(ABC):
    def __init__(self, grid: Grid, seed: int = None, rng: random.Random = None):
        self.grid = grid
        self.seed = seed
        # An injected rng wins over the seed
        self.rng = rng if rng is not None else random.Random(seed)
        self.step_count = 0

    @abstractmethod
    def run(self) -> int:
        """
        Carves the maze into self.grid in place and returns once it is complete.
        Returns the number of walls removed.
        """
        pass
