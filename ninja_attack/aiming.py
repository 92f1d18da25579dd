"""Turning a touch into a projectile flight path."""

from __future__ import annotations

from .constants import PROJECTILE_DURATION, SHOT_DISTANCE_FACTOR
from .models import ShotPlan
from .vector import Point


def plan_shot(player_pos: Point, touch: Point, play_width: float,
              duration: float = PROJECTILE_DURATION) -> ShotPlan | None:
    """
    Aim from the player towards ``touch``.

    Returns None for touches level with or behind the player, since the
    player only shoots forward. Otherwise the destination lies
    ``SHOT_DISTANCE_FACTOR`` play-area widths away along the aim, far enough
    to leave the screen from anywhere.
    """
    offset = touch - player_pos
    if offset.x <= 0:
        return None

    direction = offset.normalized()
    shot_amount = direction * (play_width * SHOT_DISTANCE_FACTOR)
    return ShotPlan(
        start=player_pos,
        direction=direction,
        destination=player_pos + shot_amount,
        duration=duration,
    )
