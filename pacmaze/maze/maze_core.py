"""
Core maze model - static tile grid plus mutable collectible state
"""

from enum import IntEnum

from loguru import logger

from pacmaze.game.errors import MazeLayoutError
from pacmaze.maze.layout import CLASSIC_LAYOUT
from pacmaze.utils.constants import (
    CELL_EMPTY, CELL_WALL, CELL_PELLET, CELL_POWER_PELLET, WRAP_ROWS
)


class CellKind(IntEnum):
    """Tile kinds, valued by their layout codes"""
    EMPTY = CELL_EMPTY
    WALL = CELL_WALL
    PELLET = CELL_PELLET
    POWER_PELLET = CELL_POWER_PELLET


COLLECTIBLES = (CellKind.PELLET, CellKind.POWER_PELLET)


class Maze:
    """
    Tile maze with collectibles

    The original layout is frozen as a tuple of tuples; the playable grid is
    a list of lists rebuilt from it on reset, so no row is ever shared
    between the two.
    """
    def __init__(self, layout=CLASSIC_LAYOUT, wrap_rows=WRAP_ROWS):
        """
        Args:
            layout: Rows of cell codes (0-3), all rows the same length
            wrap_rows: Inclusive (first, last) row range of the side tunnel,
                or None for a maze without one
        """
        self.original = self._freeze(layout)
        self.height = len(self.original)
        self.width = len(self.original[0])
        self.wrap_rows = wrap_rows

        self.grid = []
        self.remaining = 0
        self.reset()

    @staticmethod
    def _freeze(layout):
        """Validate a layout and return it as an immutable tuple of CellKind rows"""
        rows = [tuple(row) for row in layout]
        if not rows or not rows[0]:
            raise MazeLayoutError("maze layout must have at least one cell")

        width = len(rows[0])
        frozen = []
        for y, row in enumerate(rows):
            if len(row) != width:
                raise MazeLayoutError(
                    f"row {y} has {len(row)} cells, expected {width}"
                )
            try:
                frozen.append(tuple(CellKind(code) for code in row))
            except ValueError as exc:
                raise MazeLayoutError(f"row {y}: {exc}") from exc
        return tuple(frozen)

    def in_bounds(self, x, y):
        """Check if coordinates are within grid bounds"""
        return 0 <= x < self.width and 0 <= y < self.height

    def get_cell(self, x, y):
        """Get the current cell kind, or None outside the grid"""
        if self.in_bounds(x, y):
            return self.grid[y][x]
        return None

    def is_wrap_row(self, y):
        """Check if a row belongs to the side tunnel"""
        if self.wrap_rows is None:
            return False
        first, last = self.wrap_rows
        return first <= y <= last

    def can_move_to(self, x, y):
        """
        Check if an agent may occupy a cell

        Columns outside the grid are passable only inside the wrap corridor,
        which is what makes the side tunnel work.
        """
        if y < 0 or y >= self.height:
            return False

        if x < 0 or x >= self.width:
            return self.is_wrap_row(y)

        return self.grid[y][x] != CellKind.WALL

    def _collect(self, x, y, kind):
        if self.get_cell(x, y) != kind:
            return False
        self.grid[y][x] = CellKind.EMPTY
        self.remaining -= 1
        logger.debug(f"Collected {kind.name.lower()} at ({x},{y}), {self.remaining} left")
        return True

    def collect_pellet(self, x, y):
        """
        Collect a pellet

        Returns:
            True if a pellet was at (x, y) and is now gone
        """
        return self._collect(x, y, CellKind.PELLET)

    def collect_power_pellet(self, x, y):
        """
        Collect a power pellet

        Returns:
            True if a power pellet was at (x, y) and is now gone
        """
        return self._collect(x, y, CellKind.POWER_PELLET)

    def count_collectibles(self):
        """Count cells still holding a pellet or power pellet"""
        return sum(1 for row in self.grid for cell in row if cell in COLLECTIBLES)

    def all_collected(self):
        """Check if every collectible has been eaten"""
        return self.remaining <= 0

    def reset(self):
        """Restore the original layout"""
        self.grid = [list(row) for row in self.original]
        self.remaining = self.count_collectibles()

    def iter_cells(self):
        """Yield (x, y, kind) for every cell, row by row"""
        for y, row in enumerate(self.grid):
            for x, cell in enumerate(row):
                yield x, y, cell

    def random_cell(self, rng):
        """Get random in-bounds cell coordinates"""
        return rng.randrange(self.width), rng.randrange(self.height)

    def __repr__(self):
        return f"Maze(size={self.width}x{self.height}, remaining={self.remaining})"
