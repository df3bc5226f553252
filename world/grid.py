# world/grid.py
import logging
import random
from enum import Enum
from typing import Iterable, Optional, Sequence, Tuple

import pygame

from core.errors import ConfigurationError, ObstaclePlacementError
from core.settings import CELL_SIZE, OBSTACLE_GOAL_MARGIN, OBSTACLE_MAX_ATTEMPTS
from core.utils import Cell

logger = logging.getLogger(__name__)


class CellKind(Enum):
    EMPTY = "."
    GOAL = "C"
    OBSTACLE = "#"


class Grid:
    """
    Static board the enemies walk on.
    - One full column is the castle (GOAL); enemies advance toward it
    - OBSTACLE cells block movement; only EMPTY cells are walkable
    - Immutable after construction

    Layout chars (see from_layout):
      '.' -> empty
      '#' -> obstacle
      'C' -> castle / goal
    """

    def __init__(self, cells: Sequence[Sequence[CellKind]], cell_size: int = CELL_SIZE):
        self.rows = len(cells)
        self.cols = len(cells[0]) if self.rows else 0
        if self.rows == 0 or self.cols < 2:
            raise ConfigurationError(f"grid must be at least 1x2 cells, got {self.rows}x{self.cols}")
        if any(len(row) != self.cols for row in cells):
            raise ConfigurationError("grid rows must all have the same length")
        if cell_size <= 0:
            raise ConfigurationError(f"cell_size must be positive, got {cell_size}")

        self._cells: Tuple[Tuple[CellKind, ...], ...] = tuple(tuple(row) for row in cells)
        self.cell_size = cell_size

        self.goal_column = self._find_goal_column()
        # +1: goal on the right, enemies walk right. -1: mirrored board.
        self.advance = 1 if self.goal_column == self.cols - 1 else -1
        self.spawn_column = 0 if self.advance > 0 else self.cols - 1

        self.width_px = self.cols * cell_size
        self.height_px = self.rows * cell_size

    # ------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------
    @classmethod
    def from_layout(cls, lines: Iterable[str], cell_size: int = CELL_SIZE) -> "Grid":
        legend = {kind.value: kind for kind in CellKind}
        cells = []
        for y, line in enumerate(lines):
            row = []
            for x, ch in enumerate(line):
                if ch not in legend:
                    raise ConfigurationError(f"unknown layout char {ch!r} at ({x}, {y})")
                row.append(legend[ch])
            cells.append(row)
        return cls(cells, cell_size=cell_size)

    @classmethod
    def generate(cls, rows: int, cols: int, obstacle_count: int, rng: Optional[random.Random] = None,
                 cell_size: int = CELL_SIZE, goal_column: int = -1,
                 goal_margin: int = OBSTACLE_GOAL_MARGIN,
                 max_attempts: int = OBSTACLE_MAX_ATTEMPTS) -> "Grid":
        """
        Castle column + randomly scattered obstacles.

        Obstacles are rejection-sampled (retry on an occupied cell) inside the
        columns that are at least `goal_margin` away from the goal, so the
        last stretch before the castle stays open. Placement gives up after
        `max_attempts` draws and raises ObstaclePlacementError.
        """
        if rows <= 0 or cols < 2:
            raise ConfigurationError(f"grid must be at least 1x2 cells, got {rows}x{cols}")
        rng = rng if rng is not None else random.Random()
        goal_x = cols - 1 if goal_column < 0 else goal_column
        if goal_x not in (0, cols - 1):
            raise ConfigurationError(f"goal column must be the first or last column, got {goal_column}")

        cells = [[CellKind.EMPTY for _ in range(cols)] for _ in range(rows)]
        for y in range(rows):
            cells[y][goal_x] = CellKind.GOAL

        if goal_x == cols - 1:
            lo_x, hi_x = 0, cols - 1 - goal_margin
        else:
            lo_x, hi_x = goal_margin, cols - 1

        region = max(0, hi_x - lo_x + 1) * rows
        if obstacle_count > region:
            raise ObstaclePlacementError(
                f"cannot place {obstacle_count} obstacles in a region of {region} cells"
            )

        placed = 0
        attempts = 0
        while placed < obstacle_count:
            if attempts >= max_attempts:
                raise ObstaclePlacementError(
                    f"placed {placed}/{obstacle_count} obstacles after {attempts} attempts"
                )
            attempts += 1
            x = rng.randint(lo_x, hi_x)
            y = rng.randint(0, rows - 1)
            if cells[y][x] != CellKind.EMPTY:
                continue
            cells[y][x] = CellKind.OBSTACLE
            placed += 1

        logger.debug(f"generated {rows}x{cols} board, {placed} obstacles in {attempts} draws")
        return cls(cells, cell_size=cell_size)

    def _find_goal_column(self) -> int:
        full = [
            x for x in range(self.cols)
            if all(self._cells[y][x] == CellKind.GOAL for y in range(self.rows))
        ]
        goal_cells = sum(row.count(CellKind.GOAL) for row in self._cells)

        if len(full) != 1 or goal_cells != self.rows:
            raise ConfigurationError("grid needs exactly one full castle column")
        if full[0] not in (0, self.cols - 1):
            raise ConfigurationError(f"castle column must be on the board edge, got column {full[0]}")
        return full[0]

    # ------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------
    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.cols and 0 <= y < self.rows

    def kind(self, x: int, y: int) -> CellKind:
        if not self.in_bounds(x, y):
            return CellKind.OBSTACLE
        return self._cells[y][x]

    def walkable(self, x: int, y: int) -> bool:
        return self.kind(x, y) == CellKind.EMPTY

    def is_goal(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and self._cells[y][x] == CellKind.GOAL

    @property
    def cells(self) -> Tuple[Tuple[CellKind, ...], ...]:
        return self._cells

    @property
    def obstacle_count(self) -> int:
        return sum(row.count(CellKind.OBSTACLE) for row in self._cells)

    # ------------------------------------------------------------
    # World <-> cell
    # ------------------------------------------------------------
    def cell_at(self, pos) -> Cell:
        return int(pos[0] // self.cell_size), int(pos[1] // self.cell_size)

    def cell_center(self, cell: Cell) -> pygame.Vector2:
        cx, cy = cell
        half = self.cell_size * 0.5
        return pygame.Vector2(cx * self.cell_size + half, cy * self.cell_size + half)

    def contains_point(self, x: float, y: float) -> bool:
        return 0 <= x < self.width_px and 0 <= y < self.height_px

    @property
    def goal_edge(self) -> float:
        """Pixel x of the castle column's side facing the enemies."""
        if self.advance > 0:
            return float(self.goal_column * self.cell_size)
        return float((self.goal_column + 1) * self.cell_size)

    def past_goal_edge(self, x: float) -> bool:
        if self.advance > 0:
            return x >= self.goal_edge
        return x <= self.goal_edge
