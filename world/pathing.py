# world/pathing.py
import random
from typing import Optional

from core.utils import Cell
from world.grid import Grid


class GreedyPathing:
    """
    Local waypoint picker (no search, no flow field):
    1) straight ahead toward the castle
    2) sideways (random pick when both sides are open)
    3) diagonally ahead, up first
    4) stay put

    A castle cell straight ahead is taken as the final approach; that is the
    only way a castle cell ever becomes a target.
    """

    def __init__(self, grid: Grid, rng: Optional[random.Random] = None):
        self.grid = grid
        self.rng = rng if rng is not None else random.Random()

    def next_cell(self, cell: Cell) -> Cell:
        g = self.grid
        x, y = cell
        ahead = x + g.advance

        if g.walkable(ahead, y) or g.is_goal(ahead, y):
            return (ahead, y)

        can_up = g.walkable(x, y - 1)
        can_down = g.walkable(x, y + 1)

        if can_up and can_down:
            return (x, y - 1) if self.rng.randint(0, 1) == 0 else (x, y + 1)
        if can_up:
            return (x, y - 1)
        if can_down:
            return (x, y + 1)

        if g.walkable(ahead, y - 1):
            return (ahead, y - 1)
        if g.walkable(ahead, y + 1):
            return (ahead, y + 1)

        return cell

    def needs_retarget(self, target: Cell, distance: float, threshold: float) -> bool:
        if distance < threshold:
            return True
        tx, ty = target
        return not (self.grid.walkable(tx, ty) or self.grid.is_goal(tx, ty))
