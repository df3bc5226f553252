"""Wave scheduler state machine."""

import pytest

from world.waves import WaveManager
from world.waves_defs import build_waves


class Releases:
    def __init__(self, ok=True):
        self.ok = ok
        self.calls = []

    def __call__(self, wave_number):
        self.calls.append(wave_number)
        return self.ok


def start_wave(wm, release):
    while not wm.active:
        wm.update(0.25, release)


def drain(wm, release):
    """Tick until every enemy of the current wave has been released."""
    while wm.pending > 0:
        wm.update(0.25, release)


# --------------------------------------------------------------------------
# Definitions
# --------------------------------------------------------------------------

class TestWaveDefs:
    def test_five_waves(self):
        assert len(build_waves()) == 5

    def test_wave_n_has_3n_enemies(self):
        waves = build_waves()
        assert [w["count"] for w in waves] == [3, 6, 9, 12, 15]
        assert [w["number"] for w in waves] == [1, 2, 3, 4, 5]

    def test_custom_defs(self):
        waves = build_waves(final_wave=2, per_wave=4)
        assert [w["count"] for w in waves] == [4, 8]
        assert waves[1]["name"] == "Wave 2"


# --------------------------------------------------------------------------
# Transitions
# --------------------------------------------------------------------------

class TestWaveManager:
    def test_initial_state(self):
        wm = WaveManager(build_waves())
        assert wm.state == WaveManager.IDLE
        assert wm.wave_number == 0
        assert wm.countdown == 3.0

    def test_idle_to_spawning_after_countdown(self):
        wm = WaveManager(build_waves())
        rel = Releases()
        for _ in range(2):
            wm.update(1.0, rel)
        assert wm.state == WaveManager.IDLE

        wm.update(1.0, rel)
        assert wm.state == WaveManager.SPAWNING
        assert wm.wave_number == 1
        assert wm.pending == 3
        assert wm.alive == 3
        assert wm.spawn_timer == 0.5
        assert rel.calls == []

    def test_cadence(self):
        wm = WaveManager(build_waves(), first_delay=0.0)
        rel = Releases()
        wm.update(0.0, rel)
        assert wm.active

        # first release once the 0.5 s cadence has run down
        assert wm.update(0.5, rel) == 0
        assert wm.update(0.5, rel) == 1
        assert wm.update(0.5, rel) == 1
        assert wm.update(0.5, rel) == 1
        assert wm.update(0.5, rel) == 0
        assert rel.calls == [1, 1, 1]
        assert wm.pending == 0

    def test_not_idle_until_all_resolved(self):
        wm = WaveManager(build_waves(), first_delay=0.0)
        rel = Releases()
        start_wave(wm, rel)
        drain(wm, rel)

        wm.resolve(2)
        assert wm.finish_if_cleared() is False
        assert wm.state == WaveManager.SPAWNING

        wm.resolve()
        assert wm.finish_if_cleared() is True
        assert wm.state == WaveManager.IDLE
        assert wm.countdown == 3.0
        assert wm.alive == 0
        assert wm.pending == 0

    def test_not_idle_while_pending(self):
        wm = WaveManager(build_waves(), first_delay=0.0)
        rel = Releases()
        start_wave(wm, rel)
        wm.resolve(3)
        assert wm.pending == 3
        assert wm.finish_if_cleared() is False

    @pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
    def test_wave_releases_3n(self, n):
        wm = WaveManager(build_waves(), first_delay=0.0)
        rel = Releases()
        for _ in range(n):
            rel.calls.clear()
            start_wave(wm, rel)
            drain(wm, rel)
            wm.resolve(wm.alive)
            wm.finish_if_cleared()
        assert len(rel.calls) == 3 * n
        assert set(rel.calls) == {n}

    def test_dropped_release_still_counts_down(self):
        wm = WaveManager(build_waves(), first_delay=0.0)
        rel = Releases(ok=False)
        start_wave(wm, rel)
        drain(wm, rel)
        assert wm.pending == 0
        assert wm.alive == 0
        assert wm.finish_if_cleared() is True

    def test_resolve_never_negative(self):
        wm = WaveManager(build_waves())
        wm.resolve(5)
        assert wm.alive == 0

    def test_complete_after_final_wave(self):
        wm = WaveManager(build_waves(final_wave=2), first_delay=0.0)
        rel = Releases()
        for _ in range(2):
            start_wave(wm, rel)
            drain(wm, rel)
            wm.resolve(wm.alive)
            wm.finish_if_cleared()

        assert wm.state == WaveManager.COMPLETE
        assert wm.is_finished()
        timer = wm.timer
        wm.update(10.0, rel)
        assert wm.wave_number == 2
        assert wm.timer == timer
