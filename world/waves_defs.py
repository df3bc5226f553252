# world/waves_defs.py
"""
Wave definitions live here so you can edit without touching Session code.

Each wave is a dict:
{
  "name": "Wave 2",
  "number": 2,
  "count": 6,
}

Wave n releases n * ENEMIES_PER_WAVE enemies; enemy speed scales with the
wave number in the pool, not here.
"""
from typing import Dict, List

from core.settings import ENEMIES_PER_WAVE, FINAL_WAVE


def build_waves(final_wave: int = FINAL_WAVE, per_wave: int = ENEMIES_PER_WAVE) -> List[Dict]:
    return [
        {"name": f"Wave {n}", "number": n, "count": n * per_wave}
        for n in range(1, final_wave + 1)
    ]
