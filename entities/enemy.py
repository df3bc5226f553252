# entities/enemy.py
import pygame

from core.settings import (
    ENEMY_HEALTH, ENEMY_RADIUS, ENEMY_WORTH, MAX_WAYPOINTS_PER_STEP, RETARGET_DISTANCE,
)
from core.utils import Cell


class Enemy:
    """
    One pool slot.
    - Walks cell centre to cell centre in straight lines
    - Asks the pathing policy for the next cell only when it is close to the
      current target (or the target got blocked)
    - active=False means the slot is free for the next spawn
    """

    def __init__(self, slot: int, radius: int = ENEMY_RADIUS):
        self.slot = slot
        self.radius = radius

        self.pos = pygame.Vector2(0, 0)
        self.target_cell: Cell = (0, 0)

        self.health = 0
        self.speed = 0.0
        self.worth = 0
        self.active = False

    def reset(self, pos: pygame.Vector2, cell: Cell, speed: float,
              worth: int = ENEMY_WORTH, health: int = ENEMY_HEALTH):
        self.pos.update(pos)
        self.target_cell = cell
        self.health = int(health)
        self.speed = float(speed)
        self.worth = int(worth)
        self.active = True

    def deactivate(self):
        self.active = False

    def hit_by(self, point, hit_radius: float) -> bool:
        return self.pos.distance_squared_to(point) <= hit_radius * hit_radius

    # ------------------------------------------------------------
    # Update
    # ------------------------------------------------------------
    def update(self, dt: float, grid, pathing, retarget_distance: float = RETARGET_DISTANCE):
        """
        Walk for dt seconds. Reaching a waypoint spends the leftover time on
        the next one, at most MAX_WAYPOINTS_PER_STEP waypoints per call; time
        left after that is dropped (the enemy waits on the last waypoint).
        """
        if not self.active or dt <= 0.0 or self.speed <= 0.0:
            return

        remaining = dt
        for _ in range(MAX_WAYPOINTS_PER_STEP):
            target = grid.cell_center(self.target_cell)
            if pathing.needs_retarget(self.target_cell, self.pos.distance_to(target), retarget_distance):
                self.target_cell = pathing.next_cell(grid.cell_at(self.pos))
                target = grid.cell_center(self.target_cell)

            offset = target - self.pos
            dist = offset.length()
            if dist <= 0.0:
                # stalled on its own cell centre
                return

            step = self.speed * remaining
            if step < dist:
                self.pos += offset / dist * step
                return

            # reached the waypoint; spend what is left on the next one
            self.pos.update(target)
            remaining -= dist / self.speed
            if remaining <= 0.0:
                return
