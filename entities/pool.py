# entities/pool.py
import logging
import random
from typing import Iterator, List, Optional

from core.settings import (
    ENEMY_BASE_SPEED, ENEMY_HEALTH, ENEMY_RADIUS, ENEMY_SPEED_PER_WAVE, ENEMY_WORTH, MAX_ENEMIES,
)
from entities.enemy import Enemy
from world.grid import Grid

logger = logging.getLogger(__name__)


class EnemyPool:
    """
    Fixed number of Enemy slots, reused in place.
    spawn() takes the first free slot; a full pool drops the spawn.
    """

    def __init__(self, grid: Grid, rng: Optional[random.Random] = None, capacity: int = MAX_ENEMIES,
                 base_speed: float = ENEMY_BASE_SPEED, speed_per_wave: float = ENEMY_SPEED_PER_WAVE,
                 worth: int = ENEMY_WORTH, health: int = ENEMY_HEALTH, radius: int = ENEMY_RADIUS):
        self.grid = grid
        self.rng = rng if rng is not None else random.Random()
        self.base_speed = float(base_speed)
        self.speed_per_wave = float(speed_per_wave)
        self.worth = int(worth)
        self.health = int(health)

        self.slots: List[Enemy] = [Enemy(i, radius=radius) for i in range(int(capacity))]

    @property
    def capacity(self) -> int:
        return len(self.slots)

    def speed_for_wave(self, wave_number: int) -> float:
        return self.base_speed + wave_number * self.speed_per_wave

    def spawn(self, wave_number: int) -> bool:
        for enemy in self.slots:
            if enemy.active:
                continue

            row = self.rng.randrange(self.grid.rows)
            cell = (self.grid.spawn_column, row)
            enemy.reset(
                self.grid.cell_center(cell),
                cell,
                speed=self.speed_for_wave(wave_number),
                worth=self.worth,
                health=self.health,
            )
            return True

        logger.debug(f"pool full ({self.capacity} slots), spawn dropped")
        return False

    def eliminate(self, enemy: Enemy):
        enemy.deactivate()

    def active(self) -> List[Enemy]:
        return [e for e in self.slots if e.active]

    def __iter__(self) -> Iterator[Enemy]:
        return iter(self.slots)
