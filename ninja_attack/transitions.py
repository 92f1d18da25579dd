from __future__ import annotations

import pygame


class Transition:
    """
    Visual effect used when the view swaps one scene for another.

    Both scenes are paused while the transition plays.
    """

    FLIP_HORIZONTAL = "flip_horizontal"

    def __init__(self, kind: str, duration: float) -> None:
        self.kind = kind
        self.duration = duration

    @classmethod
    def flip_horizontal(cls, duration: float) -> Transition:
        return cls(cls.FLIP_HORIZONTAL, duration)

    def render(self, surf: pygame.Surface, outgoing: pygame.Surface, incoming: pygame.Surface,
               progress: float) -> None:
        """
        Draw one frame of the effect.

        The first half squeezes ``outgoing`` to a vertical line around the
        screen's center; the second half opens ``incoming`` from it.
        """
        width, height = surf.get_size()
        surf.fill((0, 0, 0))
        if progress < 0.5:
            image, scale = outgoing, 1.0 - progress * 2
        else:
            image, scale = incoming, progress * 2 - 1.0
        scaled_w = int(width * scale)
        if scaled_w <= 0:
            return
        squeezed = pygame.transform.scale(image, (scaled_w, height))
        surf.blit(squeezed, squeezed.get_rect(center=(width // 2, height // 2)))


class ActiveTransition:
    """A transition in progress between two scenes."""

    def __init__(self, transition: Transition, outgoing, incoming) -> None:
        self.transition = transition
        self.outgoing = outgoing
        self.incoming = incoming
        self.elapsed = 0.0

    @property
    def progress(self) -> float:
        if self.transition.duration <= 0:
            return 1.0
        return min(1.0, self.elapsed / self.transition.duration)

    def advance(self, dt: float) -> bool:
        """Returns True once the transition is complete."""
        self.elapsed += dt
        return self.progress >= 1.0
