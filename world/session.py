# world/session.py
import logging
import random
from dataclasses import dataclass
from typing import Optional, Tuple

from core.config import SimConfig
from entities.pool import EnemyPool
from world.grid import CellKind, Grid
from world.pathing import GreedyPathing
from world.waves import WaveManager
from world.waves_defs import build_waves

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EnemyView:
    slot: int
    pos: Tuple[float, float]
    radius: int


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only copy of everything the renderer needs for one frame."""
    cells: Tuple[Tuple[CellKind, ...], ...]
    cell_size: int
    enemies: Tuple[EnemyView, ...]
    structure_health: int
    max_structure_health: int
    wave_number: int
    final_wave: int
    score: int
    kills: int
    breaches: int
    wave_countdown: float
    wave_in_progress: bool
    show_countdown: bool
    lost: bool
    won: bool

    @property
    def terminal(self) -> bool:
        return self.lost or self.won


class Session:
    """
    One game from first wave to win/loss.

    tick(dt, click) order:
      1) nothing at all once lost/won
      2) click -> first active enemy under the pointer is eliminated
      3) wave timers / releases
      4) enemy movement
      5) breaches (x past the castle edge)
      6) wave completion, then win/loss
    """

    def __init__(self, config: Optional[SimConfig] = None, rng: Optional[random.Random] = None,
                 grid: Optional[Grid] = None):
        self.config = (config or SimConfig()).validate()
        self.rng = rng if rng is not None else random.Random()
        self._fixed_grid = grid
        self.reset()

    def reset(self):
        cfg = self.config
        if self._fixed_grid is not None:
            self.grid = self._fixed_grid
        else:
            self.grid = Grid.generate(
                cfg.rows, cfg.cols, cfg.obstacle_count, self.rng,
                cell_size=cfg.cell_size,
                goal_column=cfg.goal_column,
                goal_margin=cfg.obstacle_goal_margin,
                max_attempts=cfg.obstacle_max_attempts,
            )

        self.pathing = GreedyPathing(self.grid, self.rng)
        self.pool = EnemyPool(
            self.grid, self.rng,
            capacity=cfg.pool_capacity,
            base_speed=cfg.base_speed,
            speed_per_wave=cfg.speed_per_wave,
            worth=cfg.enemy_worth,
            health=cfg.enemy_health,
            radius=cfg.enemy_radius,
        )
        self.waves = WaveManager(
            build_waves(cfg.final_wave, cfg.enemies_per_wave),
            cooldown=cfg.wave_cooldown,
            spawn_interval=cfg.spawn_interval,
        )

        self.structure_health = cfg.structure_health
        self.score = 0
        self.kills = 0
        self.breaches = 0
        self._outcome_logged = False

        logger.debug(
            f"board {self.grid.rows}x{self.grid.cols}, {self.grid.obstacle_count} obstacles, "
            f"castle column {self.grid.goal_column}"
        )

    def restart(self):
        logger.info("session restarted")
        self.reset()

    # ------------------------------------------------------------
    # State
    # ------------------------------------------------------------
    @property
    def wave_number(self) -> int:
        return self.waves.wave_number

    @property
    def enemies_alive(self) -> int:
        return self.waves.alive

    @property
    def lost(self) -> bool:
        return self.structure_health <= 0

    @property
    def won(self) -> bool:
        return not self.lost and self.waves.state == WaveManager.COMPLETE

    @property
    def terminal(self) -> bool:
        return self.lost or self.won

    # ------------------------------------------------------------
    # Update
    # ------------------------------------------------------------
    def tick(self, dt: float, click=None):
        if dt < 0.0:
            raise ValueError(f"dt must be non-negative, got {dt}")
        if self.terminal:
            return

        if click is not None:
            self._resolve_click(click)

        self.waves.update(dt, self.pool.spawn)

        for enemy in self.pool:
            enemy.update(dt, self.grid, self.pathing, self.config.retarget_distance)

        for enemy in self.pool:
            if enemy.active and self.grid.past_goal_edge(enemy.pos.x):
                self._breach(enemy)

        self.waves.finish_if_cleared()
        self._log_outcome()

    def _resolve_click(self, click):
        x, y = click[0], click[1]
        if not self.grid.contains_point(x, y):
            return

        for enemy in self.pool:
            if enemy.active and enemy.hit_by((x, y), self.config.hit_radius):
                self.pool.eliminate(enemy)
                self.waves.resolve()
                self.score += enemy.worth
                self.kills += 1
                logger.debug(f"enemy {enemy.slot} eliminated at ({x:.0f}, {y:.0f}), score {self.score}")
                break

    def _breach(self, enemy):
        enemy.deactivate()
        self.waves.resolve()
        self.structure_health -= 1
        self.breaches += 1
        logger.info(
            f"castle breached by enemy {enemy.slot}, health {self.structure_health}/{self.config.structure_health}"
        )

    def _log_outcome(self):
        if self._outcome_logged or not self.terminal:
            return
        self._outcome_logged = True
        if self.lost:
            logger.info(f"game over on wave {self.wave_number}, score {self.score}")
        else:
            logger.info(f"all {self.waves.final_wave} waves cleared, final score {self.score}")

    # ------------------------------------------------------------
    # Output
    # ------------------------------------------------------------
    def snapshot(self) -> SessionSnapshot:
        enemies = tuple(
            EnemyView(e.slot, (e.pos.x, e.pos.y), e.radius)
            for e in self.pool.active()
        )
        return SessionSnapshot(
            cells=self.grid.cells,
            cell_size=self.grid.cell_size,
            enemies=enemies,
            structure_health=self.structure_health,
            max_structure_health=self.config.structure_health,
            wave_number=self.wave_number,
            final_wave=self.waves.final_wave,
            score=self.score,
            kills=self.kills,
            breaches=self.breaches,
            wave_countdown=self.waves.countdown,
            wave_in_progress=self.waves.active,
            show_countdown=(self.waves.state == WaveManager.IDLE),
            lost=self.lost,
            won=self.won,
        )
