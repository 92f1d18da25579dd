"""Window, run loop and scene presentation."""

from __future__ import annotations

import pygame

from .constants import WIDTH, HEIGHT, FPS
from .transitions import ActiveTransition, Transition
from .vector import Point


class View:
    """
    Hosts one scene at a time: opens the window, runs the loop, turns input
    events into touches, updates and draws the presented scene.

    The window is only created by ``open()`` / ``run()``, so scenes can be
    presented and driven without a display.
    """

    def __init__(self, size: tuple[int, int] = (WIDTH, HEIGHT), title: str = "Ninja Attack") -> None:
        self.size = size
        self.title = title
        self.scene = None
        self.transition: ActiveTransition | None = None
        self.screen: pygame.Surface | None = None
        self.clock: pygame.time.Clock | None = None
        self.running = False

    # --------------------------------- Setup -----------------------------------------

    def open(self) -> None:
        """Initialize pygame and create the window."""
        pygame.init()
        pygame.display.set_caption(self.title)
        self.screen = pygame.display.set_mode(self.size)
        self.clock = pygame.time.Clock()

    def present_scene(self, scene, transition: Transition | None = None) -> None:
        """
        Make ``scene`` the active scene, optionally animating away from the
        current one.
        """
        outgoing = self.scene
        if outgoing is not None:
            outgoing.view = None
        scene.view = self
        self.scene = scene
        scene.did_move_to(self)

        if transition is not None and outgoing is not None:
            self.transition = ActiveTransition(transition, outgoing, scene)
        else:
            self.transition = None

    # --------------------------------- Loop ------------------------------------------

    def run(self) -> None:
        """Main loop: process events, update, render; exits on quit request."""
        if self.screen is None:
            self.open()
        self.running = True
        while self.running:
            dt = self.clock.tick(FPS) / 1000.0

            for event in pygame.event.get():
                self.handle_event(event)

            self.step(dt)
            self.draw()

        pygame.quit()

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.running = False
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            # SDL also synthesizes mouse events for touches; FINGERUP handles those
            if getattr(event, "touch", False):
                return
            self.touches_ended([Point(*event.pos)])
        elif event.type == pygame.FINGERUP:
            self.touches_ended([Point(event.x * self.size[0], event.y * self.size[1])])

    def touches_ended(self, touches: list[Point]) -> None:
        """Deliver released touches to the scene; ignored mid-transition."""
        if self.scene is None or self.transition is not None:
            return
        self.scene.touches_ended(touches)

    def step(self, dt: float) -> None:
        if self.transition is not None:
            if self.transition.advance(dt):
                self.transition = None
            return
        if self.scene is not None:
            self.scene.update(dt)

    # ------------------------------- Rendering ---------------------------------------

    def draw(self) -> None:
        if self.screen is None or self.scene is None:
            return

        if self.transition is not None:
            outgoing = pygame.Surface(self.size)
            incoming = pygame.Surface(self.size)
            self.transition.outgoing.draw(outgoing)
            self.transition.incoming.draw(incoming)
            self.transition.transition.render(self.screen, outgoing, incoming, self.transition.progress)
        else:
            self.scene.draw(self.screen)

        pygame.display.flip()
