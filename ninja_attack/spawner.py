from __future__ import annotations

import random

from .constants import SPAWN_INTERVAL, MIN_MONSTER_DURATION, MAX_MONSTER_DURATION
from .models import SpawnPlan
from .vector import Point


class MonsterSpawner:
    """
    Decides where and how fast each new monster crosses the play area.

    Notes
    - The spawn cadence itself is a repeating action on the game scene; this
      class only supplies ``interval`` and the randomized per-monster values.
    - Pass a seeded ``random.Random`` for reproducible spawns.
    """

    def __init__(self, rng: random.Random | None = None, interval: float = SPAWN_INTERVAL,
                 min_duration: float = MIN_MONSTER_DURATION,
                 max_duration: float = MAX_MONSTER_DURATION) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.interval = interval
        self.min_duration = min_duration
        self.max_duration = max_duration

    def random_y(self, play_height: float, monster_height: float) -> float:
        """
        Row for a new monster, keeping the whole sprite on screen vertically.
        """
        return self.rng.uniform(monster_height / 2, play_height - monster_height / 2)

    def random_duration(self) -> float:
        return self.rng.uniform(self.min_duration, self.max_duration)

    def plan(self, play_size: tuple[float, float], monster_size: tuple[float, float]) -> SpawnPlan:
        """
        Pick a row and a duration for the next monster.

        Parameters
        ----------
        play_size : tuple[float, float]
            Width and height of the play area
        monster_size : tuple[float, float]
            Width and height of the monster sprite

        Returns
        -------
        SpawnPlan
            Entry just off the right edge, exit just off the left edge.
        """
        width, height = play_size
        monster_w, monster_h = monster_size
        y = self.random_y(height, monster_h)
        return SpawnPlan(
            start=Point(width + monster_w / 2, y),
            end=Point(-monster_w / 2, y),
            duration=self.random_duration(),
        )
