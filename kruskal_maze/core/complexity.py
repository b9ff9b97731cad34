from collections import deque
from typing import Dict, List, Optional, Tuple
import numpy as np
from kruskal_maze.core.grid import Grid

class MazePostProcessor:
    @staticmethod
    def popcount_walls(cells: np.ndarray) -> np.ndarray:
        """Number of closed walls per cell."""
        return (
            ((cells & Grid.TOP) != 0).astype(np.int32)
            + ((cells & Grid.RIGHT) != 0)
            + ((cells & Grid.BOTTOM) != 0)
            + ((cells & Grid.LEFT) != 0)
        )

    @staticmethod
    def calculate_stats(grid: Grid) -> Dict[str, float]:
        walls = MazePostProcessor.popcount_walls(grid.to_numpy())

        dead_ends = int(np.count_nonzero(walls == 3))
        corridors = int(np.count_nonzero(walls == 2))
        intersections = int(np.count_nonzero(walls <= 1))

        total = grid.width * grid.height
        return {
            "dead_ends": dead_ends,
            "corridors": corridors,
            "intersections": intersections,
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
        }

    @staticmethod
    def count_open_internal_walls(grid: Grid) -> int:
        """
        Open walls between two in-grid cells, each counted once
        (looking RIGHT and TOP only). Boundary openings are not counted.
        """
        cells = grid.to_numpy()
        open_right = (cells[:, :-1] & Grid.RIGHT) == 0
        open_top = (cells[:-1, :] & Grid.TOP) == 0
        return int(np.count_nonzero(open_right) + np.count_nonzero(open_top))

    @staticmethod
    def is_symmetric(grid: Grid) -> bool:
        """True if every internal wall reads the same from both sides."""
        cells = grid.to_numpy()
        right = (cells[:, :-1] & Grid.RIGHT) != 0
        left = (cells[:, 1:] & Grid.LEFT) != 0
        top = (cells[:-1, :] & Grid.TOP) != 0
        bottom = (cells[1:, :] & Grid.BOTTOM) != 0
        return bool(np.array_equal(right, left) and np.array_equal(top, bottom))

    @staticmethod
    def reachable_count(grid: Grid, start: Tuple[int, int] = (0, 0)) -> int:
        """Flood fill through open internal walls."""
        seen = {start}
        queue = deque([start])
        while queue:
            cx, cy = queue.popleft()
            for nxt in grid.get_open_neighbors(cx, cy):
                if nxt not in seen:
                    seen.add(nxt)
                    queue.append(nxt)
        return len(seen)

    @staticmethod
    def is_connected(grid: Grid) -> bool:
        return MazePostProcessor.reachable_count(grid) == grid.width * grid.height

    @staticmethod
    def is_perfect(grid: Grid) -> bool:
        """Connected with exactly cells-1 passages, i.e. a spanning tree."""
        total = grid.width * grid.height
        return (
            MazePostProcessor.count_open_internal_walls(grid) == total - 1
            and MazePostProcessor.is_connected(grid)
        )

    @staticmethod
    def entrance_and_exit_open(grid: Grid) -> bool:
        return (
            not grid.has_wall(0, 0, Grid.BOTTOM)
            and not grid.has_wall(grid.width - 1, grid.height - 1, Grid.RIGHT)
        )

    @staticmethod
    def solve(grid: Grid, start: Tuple[int, int], end: Tuple[int, int]) -> List[Tuple[int, int]]:
        """
        BFS shortest path from start to end, both included.
        Returns [] when end cannot be reached.
        """
        grid.get_index(*start)
        grid.get_index(*end)

        parents: Dict[Tuple[int, int], Optional[Tuple[int, int]]] = {start: None}
        queue = deque([start])
        while queue:
            current = queue.popleft()
            if current == end:
                break
            for nxt in grid.get_open_neighbors(*current):
                if nxt not in parents:
                    parents[nxt] = current
                    queue.append(nxt)

        if end not in parents:
            return []

        path = []
        curr = end
        while curr is not None:
            path.append(curr)
            curr = parents[curr]
        path.reverse()
        return path
