import unittest
import sys
import os
import random

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from kruskal_maze.algo.kruskal import generate
from kruskal_maze.core.grid import Grid
from kruskal_maze.core.complexity import MazePostProcessor

class TestComplexity(unittest.TestCase):
    def create_corridor(self):
        # 3x2, single corridor: (0,0) -> (1,0) -> (2,0) -> (2,1) -> (1,1) -> (0,1)
        grid = Grid(3, 2)
        grid.remove_wall(0, 0, Grid.RIGHT)
        grid.remove_wall(1, 0, Grid.RIGHT)
        grid.remove_wall(2, 0, Grid.TOP)
        grid.remove_wall(2, 1, Grid.LEFT)
        grid.remove_wall(1, 1, Grid.LEFT)
        return grid

    def test_stats(self):
        grid = self.create_corridor()
        stats = MazePostProcessor.calculate_stats(grid)
        self.assertEqual(stats["dead_ends"], 2)
        self.assertEqual(stats["corridors"], 4)
        self.assertEqual(stats["intersections"], 0)
        self.assertAlmostEqual(stats["dead_end_percent"], 100 * 2 / 6)

    def test_closed_grid(self):
        grid = Grid(4, 4)
        self.assertEqual(MazePostProcessor.count_open_internal_walls(grid), 0)
        self.assertFalse(MazePostProcessor.is_connected(grid))
        self.assertFalse(MazePostProcessor.is_perfect(grid))
        self.assertFalse(MazePostProcessor.entrance_and_exit_open(grid))
        self.assertTrue(MazePostProcessor.is_symmetric(grid))

    def test_single_cell_is_perfect(self):
        grid = Grid(1, 1)
        self.assertTrue(MazePostProcessor.is_perfect(grid))

    def test_perfect_corridor(self):
        grid = self.create_corridor()
        self.assertEqual(MazePostProcessor.count_open_internal_walls(grid), 5)
        self.assertTrue(MazePostProcessor.is_perfect(grid))

        # One extra passage makes a loop
        grid.remove_wall(0, 0, Grid.TOP)
        self.assertTrue(MazePostProcessor.is_connected(grid))
        self.assertFalse(MazePostProcessor.is_perfect(grid))

    def test_asymmetric_wall_detected(self):
        grid = Grid(3, 3)
        # Open (1,1) RIGHT without touching (2,1) LEFT
        grid.cells[grid.get_index(1, 1)] &= ~Grid.RIGHT
        self.assertFalse(MazePostProcessor.is_symmetric(grid))

    def test_solve(self):
        grid = self.create_corridor()
        path = MazePostProcessor.solve(grid, (0, 0), (0, 1))
        self.assertEqual(path, [(0, 0), (1, 0), (2, 0), (2, 1), (1, 1), (0, 1)])
        self.assertEqual(MazePostProcessor.solve(grid, (1, 1), (1, 1)), [(1, 1)])

    def test_solve_no_path(self):
        grid = Grid(5, 5) # All walls
        self.assertEqual(MazePostProcessor.solve(grid, (0, 0), (4, 4)), [])

    def test_solve_generated_maze(self):
        w, h = 15, 10
        grid = Grid(w, h)
        generate(grid, w, h, random.Random(8))
        path = MazePostProcessor.solve(grid, (0, 0), (w - 1, h - 1))
        self.assertEqual(path[0], (0, 0))
        self.assertEqual(path[-1], (w - 1, h - 1))
        # Consecutive cells are adjacent through an open wall
        for (ax, ay), (bx, by) in zip(path, path[1:]):
            self.assertIn((bx, by), list(grid.get_open_neighbors(ax, ay)))

        stats = MazePostProcessor.calculate_stats(grid)
        self.assertGreater(stats["dead_ends"], 0)

if __name__ == '__main__':
    unittest.main()
