# world/waves.py
import logging
from typing import Callable, Dict, List, Optional

from core.settings import SPAWN_INTERVAL, WAVE_COOLDOWN

logger = logging.getLogger(__name__)


class WaveManager:
    """
    Dedicated wave system.
    - IDLE: counting down to the next wave
    - SPAWNING: releasing one enemy every `spawn_interval` until the wave's
      count is out, then waiting for every released enemy to be resolved
    - COMPLETE: last wave started and cleared (derived, not stored)

    The Session owns enemy movement; it reports each kill/breach through
    resolve() and calls finish_if_cleared() once per tick after movement.
    """

    IDLE = "idle"
    SPAWNING = "spawning"
    COMPLETE = "complete"

    def __init__(self, wave_defs: List[Dict], cooldown: float = WAVE_COOLDOWN,
                 spawn_interval: float = SPAWN_INTERVAL, first_delay: Optional[float] = None):
        self.wave_defs = wave_defs
        self.cooldown = float(cooldown)
        self.spawn_interval = float(spawn_interval)

        self.wave_index = 0          # waves started so far (== wave number)
        self.active = False          # wave in progress
        self.timer = self.cooldown if first_delay is None else float(first_delay)
        self.spawn_timer = 0.0
        self.pending = 0             # still to release this wave
        self.alive = 0               # released or pending, not yet resolved

    @property
    def wave_number(self) -> int:
        return self.wave_index

    @property
    def final_wave(self) -> int:
        return len(self.wave_defs)

    @property
    def state(self) -> str:
        if self.active:
            return self.SPAWNING
        if self.is_finished():
            return self.COMPLETE
        return self.IDLE

    @property
    def countdown(self) -> float:
        return max(0.0, self.timer)

    def is_finished(self) -> bool:
        return self.wave_index >= self.final_wave and self.alive == 0 and not self.active

    def update(self, dt: float, release: Callable[[int], bool]) -> int:
        """
        Advance timers by dt. `release(wave_number)` spawns one enemy and
        returns False when it could not (full pool). Returns how many enemies
        were released this tick.
        """
        if self.is_finished():
            return 0

        if not self.active:
            self.timer -= dt
            if self.timer <= 0.0 and self.wave_index < self.final_wave:
                self._start_next_wave()
            return 0

        released = 0
        if self.pending > 0 and self.spawn_timer <= 0.0:
            if release(self.wave_index):
                released = 1
            else:
                # dropped, nothing left to resolve for it
                self.alive = max(0, self.alive - 1)
            self.pending -= 1
            self.spawn_timer = self.spawn_interval
        self.spawn_timer -= dt
        return released

    def resolve(self, count: int = 1):
        self.alive = max(0, self.alive - count)

    def finish_if_cleared(self) -> bool:
        if self.active and self.pending == 0 and self.alive == 0:
            self.active = False
            self.timer = self.cooldown
            logger.info(f"wave {self.wave_index}/{self.final_wave} cleared")
            return True
        return False

    def _start_next_wave(self):
        self.wave_index += 1
        wave = self.wave_defs[self.wave_index - 1]
        self.pending = int(wave["count"])
        self.alive = self.pending
        self.spawn_timer = self.spawn_interval
        self.active = True
        logger.info(f"{wave['name']} ({wave['number']}/{self.final_wave}) started: {self.pending} enemies")
