import logging
import random
from typing import List, NamedTuple, Tuple
from kruskal_maze.core.grid import Grid, InvalidConfigurationError
from kruskal_maze.algo.base import Generator
from kruskal_maze.algo.disjoint_set import DisjointSet

logger = logging.getLogger(__name__)


class Edge(NamedTuple):
    a: Tuple[int, int]
    b: Tuple[int, int]
    direction: int  # from a to b
    weight: float


def build_edges(width: int, height: int, rng: random.Random) -> List[Edge]:
    """
    One edge per internal adjacency: each cell links to its RIGHT and TOP
    neighbour when those exist, so no pair is listed twice.
    Count is width*(height-1) + height*(width-1).
    """
    edges: List[Edge] = []
    for x in range(width):
        for y in range(height):
            if x + 1 < width:
                edges.append(Edge((x, y), (x + 1, y), Grid.RIGHT, rng.random()))
            if y + 1 < height:
                edges.append(Edge((x, y), (x, y + 1), Grid.TOP, rng.random()))
    return edges


class KruskalGenerator(Generator):
    def run(self) -> int:
        """
        Closes every wall, then carves a perfect maze with the entrance at
        (0,0) BOTTOM and the exit at (width-1,height-1) RIGHT.
        Returns the number of internal walls removed (cells - 1).
        """
        grid = self.grid
        grid.reset()
        width, height = grid.width, grid.height

        edges = build_edges(width, height, self.rng)
        # Tie order between equal weights is unspecified
        edges.sort(key=lambda e: e.weight)

        ds = DisjointSet(width * height)
        self.step_count = 0
        target = width * height - 1

        for edge in edges:
            (ax, ay), (bx, by) = edge.a, edge.b
            index_a = ay * width + ax
            index_b = by * width + bx

            # Already joined: this edge would close a cycle, drop it for good
            if ds.connected(index_a, index_b):
                continue

            ds.union(index_a, index_b)
            grid.remove_wall(ax, ay, edge.direction)
            self.step_count += 1

            if self.step_count % 10000 == 0:
                logger.debug(f"Carved {self.step_count}/{target} walls")

        # Entrance and exit lead outside the grid
        grid.remove_wall(0, 0, Grid.BOTTOM)
        grid.remove_wall(width - 1, height - 1, Grid.RIGHT)

        logger.debug(f"Kruskal done: {len(edges)} edges, {self.step_count} walls removed")
        return self.step_count


def reset_grid(grid: Grid):
    grid.reset()


def generate(grid: Grid, num_x: int, num_y: int, rng: random.Random) -> int:
    """
    Resets 'grid' and carves a fresh perfect maze into it.
    Dimensions are checked before the grid is touched.
    The grid is the result; the return value is only the passage count
    (num_x*num_y - 1), kept for logging.
    """
    if num_x <= 0 or num_y <= 0:
        raise InvalidConfigurationError(f"Maze dimensions must be positive, got {num_x}x{num_y}")
    if (num_x, num_y) != (grid.width, grid.height):
        raise InvalidConfigurationError(
            f"Maze dimensions {num_x}x{num_y} do not match grid {grid.width}x{grid.height}"
        )

    return KruskalGenerator(grid, rng=rng).run()
