# core/config.py
from __future__ import annotations
from dataclasses import dataclass

from core import settings
from core.errors import ConfigurationError


@dataclass(frozen=True)
class SimConfig:
    """
    Every number the simulation reads.
    - Defaults come from core.settings (the shipped 5-wave game)
    - Tests build smaller/odd boards by overriding single fields
    """

    # Board
    rows: int = settings.GRID_ROWS
    cols: int = settings.GRID_COLS
    cell_size: int = settings.CELL_SIZE
    goal_column: int = -1                  # -1 = right-most column
    obstacle_count: int = settings.OBSTACLE_COUNT
    obstacle_goal_margin: int = settings.OBSTACLE_GOAL_MARGIN
    obstacle_max_attempts: int = settings.OBSTACLE_MAX_ATTEMPTS

    # Castle / waves
    structure_health: int = settings.CASTLE_HEALTH
    final_wave: int = settings.FINAL_WAVE
    enemies_per_wave: int = settings.ENEMIES_PER_WAVE
    spawn_interval: float = settings.SPAWN_INTERVAL
    wave_cooldown: float = settings.WAVE_COOLDOWN

    # Enemies
    pool_capacity: int = settings.MAX_ENEMIES
    base_speed: float = settings.ENEMY_BASE_SPEED
    speed_per_wave: float = settings.ENEMY_SPEED_PER_WAVE
    enemy_worth: int = settings.ENEMY_WORTH
    enemy_health: int = settings.ENEMY_HEALTH
    enemy_radius: int = settings.ENEMY_RADIUS
    hit_radius: float = settings.CLICK_HIT_RADIUS
    retarget_distance: float = settings.RETARGET_DISTANCE

    @property
    def resolved_goal_column(self) -> int:
        return self.cols - 1 if self.goal_column < 0 else self.goal_column

    def validate(self) -> "SimConfig":
        if self.rows <= 0 or self.cols < 2:
            raise ConfigurationError(f"board must be at least 1x2 cells, got {self.rows}x{self.cols}")
        if self.cell_size <= 0:
            raise ConfigurationError(f"cell_size must be positive, got {self.cell_size}")
        if self.resolved_goal_column not in (0, self.cols - 1):
            raise ConfigurationError(f"goal column must be the first or last column, got {self.goal_column}")
        if self.obstacle_count < 0:
            raise ConfigurationError(f"obstacle_count must be >= 0, got {self.obstacle_count}")
        if self.obstacle_max_attempts <= 0:
            raise ConfigurationError("obstacle_max_attempts must be positive")
        if self.structure_health <= 0:
            raise ConfigurationError(f"structure_health must be positive, got {self.structure_health}")
        if self.final_wave <= 0 or self.enemies_per_wave <= 0:
            raise ConfigurationError("final_wave and enemies_per_wave must be positive")
        if self.spawn_interval < 0.0 or self.wave_cooldown < 0.0:
            raise ConfigurationError("timers must be non-negative")
        if self.pool_capacity <= 0:
            raise ConfigurationError(f"pool_capacity must be positive, got {self.pool_capacity}")
        if self.base_speed <= 0.0 or self.speed_per_wave < 0.0:
            raise ConfigurationError("enemy speed must be positive")
        if self.hit_radius < 0.0 or self.retarget_distance < 0.0:
            raise ConfigurationError("radii must be non-negative")
        return self
