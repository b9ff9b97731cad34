from array import array
import numpy as np
from typing import Iterator, Tuple


class InvalidConfigurationError(ValueError):
    """Raised for grid dimensions a maze cannot be built on."""


class Grid:
    # Bitmask Constants (set bit = wall present)
    TOP    = 0b0001
    RIGHT  = 0b0010
    BOTTOM = 0b0100
    LEFT   = 0b1000

    # No-op direction, never touches a wall
    NONE = 0

    ALL_WALLS = TOP | RIGHT | BOTTOM | LEFT
    DIRECTIONS = (TOP, RIGHT, BOTTOM, LEFT)

    # Direction Helpers (y grows upward)
    DX = {TOP: 0, BOTTOM: 0, RIGHT: 1, LEFT: -1}
    DY = {TOP: 1, BOTTOM: -1, RIGHT: 0, LEFT: 0}
    OPPOSITE = {TOP: BOTTOM, BOTTOM: TOP, RIGHT: LEFT, LEFT: RIGHT}
    NAMES = {TOP: "TOP", RIGHT: "RIGHT", BOTTOM: "BOTTOM", LEFT: "LEFT", NONE: "NONE"}

    __slots__ = ('width', 'height', 'cells', 'listener')

    def __init__(self, width: int, height: int, listener=None):
        if width <= 0 or height <= 0:
            raise InvalidConfigurationError(f"Grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.listener = listener
        # 1 byte per cell, all walls closed
        self.cells = array('B', [self.ALL_WALLS] * (width * height))

    def __len__(self) -> int:
        return self.width * self.height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_index(self, x: int, y: int) -> int:
        if 0 <= x < self.width and 0 <= y < self.height:
            return y * self.width + x
        raise IndexError(f"Coordinate ({x}, {y}) out of bounds")

    def _set_wall(self, x: int, y: int, dir_bit: int, closed: bool):
        """Writes a single wall flag on one cell only."""
        if dir_bit == self.NONE:
            return
        idx = self.get_index(x, y)
        if closed:
            self.cells[idx] |= dir_bit
        else:
            self.cells[idx] &= ~dir_bit

        if self.listener is not None:
            self.listener.on_wall_set(x, y, dir_bit, closed)

    def remove_wall(self, x: int, y: int, dir_bit: int):
        """
        Opens the wall of (x,y) in 'dir_bit' and the OPPOSITE wall of the neighbour.
        A neighbour outside the grid is skipped, which is how boundary
        openings (entrance/exit) are carved.
        This is the only method that opens walls.
        """
        if dir_bit == self.NONE:
            return
        self._set_wall(x, y, dir_bit, False)

        nx = x + self.DX[dir_bit]
        ny = y + self.DY[dir_bit]
        if self.in_bounds(nx, ny):
            self._set_wall(nx, ny, self.OPPOSITE[dir_bit], False)

    def add_wall(self, x: int, y: int, dir_bit: int):
        """Closes the wall of (x,y) in 'dir_bit' and the matching wall of the neighbour."""
        if dir_bit == self.NONE:
            return
        self._set_wall(x, y, dir_bit, True)

        nx = x + self.DX[dir_bit]
        ny = y + self.DY[dir_bit]
        if self.in_bounds(nx, ny):
            self._set_wall(nx, ny, self.OPPOSITE[dir_bit], True)

    def reset(self):
        """Closes all four walls of every cell."""
        if self.listener is None:
            self.cells[:] = array('B', [self.ALL_WALLS]) * len(self.cells)
            return
        for y in range(self.height):
            for x in range(self.width):
                for dir_bit in self.DIRECTIONS:
                    self._set_wall(x, y, dir_bit, True)

    def has_wall(self, x: int, y: int, dir_bit: int) -> bool:
        return (self.cells[self.get_index(x, y)] & dir_bit) != 0

    def get_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int, int]]:
        """
        Yields (nx, ny, direction_to_neighbor) for all valid grid neighbors.
        Does NOT check walls.
        """
        if y < self.height - 1:
            yield (x, y + 1, self.TOP)
        if x < self.width - 1:
            yield (x + 1, y, self.RIGHT)
        if y > 0:
            yield (x, y - 1, self.BOTTOM)
        if x > 0:
            yield (x - 1, y, self.LEFT)

    def get_open_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int]]:
        """
        Yields (nx, ny) for in-grid neighbors that are NOT blocked by a wall.
        Boundary openings lead outside and are not yielded.
        """
        val = self.cells[self.get_index(x, y)]
        for nx, ny, dir_bit in self.get_neighbors(x, y):
            if not (val & dir_bit):
                yield (nx, ny)

    def to_numpy(self):
        """(height, width) uint8 copy of the wall bits, row y holds cells (0..width-1, y)."""
        return np.frombuffer(self.cells.tobytes(), dtype=np.uint8).reshape(self.height, self.width).copy()
