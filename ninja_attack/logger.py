"""Markdown logger for gameplay events (shots, hits, game over, restarts)."""

from __future__ import annotations

import datetime

from .vector import Point


class GameLogger:
    """Handles logging of game events to markdown file."""

    def __init__(self, log_file: str):
        """
        Initialize the game logger.

        Parameters
        ----------
        log_file : str
            Path to the log file
        """
        self.log_file = log_file
        self.setup_log()

    def setup_log(self) -> None:
        """Initialize the log file with headers."""
        try:
            with open(self.log_file, 'w', encoding='utf-8') as f:
                f.write("# Ninja Attack Game Log\n\n")
                f.write(f"Log started at: {datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n\n")
                f.write("## Game Events\n\n")
                f.write("| Timestamp | Event | Position (x,y) | Details |\n")
                f.write("|-----------|-------|----------------|---------|\n")
        except OSError as e:
            print(f"Failed to initialize log file: {e}")

    def log_event(self, event: str, pos: Point | None = None, details: str = "") -> None:
        """
        Append one row to the event table.

        Parameters
        ----------
        event : str
            Short upper-case event name, e.g. ``SHOT``
        pos : Point | None
            Scene position the event happened at, if any
        details : str, optional
            Additional details about the event
        """
        try:
            timestamp = datetime.datetime.now().strftime('%H:%M:%S.%f')[:-3]  # Include milliseconds
            where = f"({pos.x:.0f}, {pos.y:.0f})" if pos is not None else "-"

            with open(self.log_file, 'a', encoding='utf-8') as f:
                f.write(f"| {timestamp} | {event} | {where} | {details} |\n")

        except OSError as e:
            print(f"Failed to log {event.lower()}: {e}")

    def log_shot(self, touch: Point, destination: Point) -> None:
        self.log_event("SHOT", touch, f"Projectile heading to ({destination.x:.0f}, {destination.y:.0f})")

    def log_rejected_shot(self, touch: Point) -> None:
        self.log_event("REJECTED", touch, "Touch is behind the player")

    def log_hit(self, monster_pos: Point, projectile_pos: Point) -> None:
        self.log_event("HIT", monster_pos, f"Projectile at ({projectile_pos.x:.0f}, {projectile_pos.y:.0f})")

    def log_game_over(self, won: bool, monsters_destroyed: int) -> None:
        result = "WON" if won else "LOST"
        self.log_event("GAME OVER", None, f"{result} after {monsters_destroyed} hits")

    def log_restart(self) -> None:
        self.log_event("RESTART", None, "New game scene presented")
