"""
Category-filtered contact detection between sprite bodies.

There is no force integration: sprites are moved by their actions, and the
world only reports when two bodies whose bit masks ask for it start to
overlap.
"""

from __future__ import annotations

import math
import pygame
from dataclasses import dataclass
from typing import Protocol, TYPE_CHECKING

from .vector import Point

if TYPE_CHECKING:
    from .nodes import Node


class PhysicsCategory:
    NONE = 0
    ALL = 0xFFFFFFFF
    MONSTER = 0b1       # 1
    PROJECTILE = 0b10   # 2


class PhysicsBody:
    """
    Collision shape attached to a sprite.

    Attributes
    ----------
    shape : str
        ``"rectangle"`` (uses ``size``) or ``"circle"`` (uses ``radius``).
    category_bit_mask : int
        Categories this body belongs to.
    contact_test_bit_mask : int
        Categories that trigger a contact report when they touch this body.
    collision_bit_mask : int
        Categories this body would bounce off. Kept for completeness; the
        world does not resolve collisions.
    is_dynamic : bool
        Kept for completeness; bodies are moved by their actions only, so
        this has no effect.
    uses_precise_collision_detection : bool
        Also test the positions swept since the previous step, so fast
        bodies cannot skip over thin ones.
    """

    RECTANGLE = "rectangle"
    CIRCLE = "circle"

    def __init__(self, shape: str, size: tuple[float, float] = (0.0, 0.0), radius: float = 0.0) -> None:
        self.shape = shape
        self.size = size
        self.radius = radius
        self.is_dynamic = True
        self.category_bit_mask = PhysicsCategory.ALL
        self.contact_test_bit_mask = PhysicsCategory.NONE
        self.collision_bit_mask = PhysicsCategory.ALL
        self.uses_precise_collision_detection = False
        self.node: Node | None = None
        self.last_position: Point | None = None

    @classmethod
    def rectangle(cls, size: tuple[float, float]) -> PhysicsBody:
        return cls(cls.RECTANGLE, size=size)

    @classmethod
    def circle(cls, radius: float) -> PhysicsBody:
        return cls(cls.CIRCLE, radius=radius)

    def frame_at(self, center: Point) -> pygame.Rect:
        """Bounding rectangle of this body if it were centered at ``center``."""
        if self.shape == self.CIRCLE:
            side = round(self.radius * 2)
            rect = pygame.Rect(0, 0, side, side)
        else:
            rect = pygame.Rect(0, 0, round(self.size[0]), round(self.size[1]))
        rect.center = (round(center.x), round(center.y))
        return rect

    def wants_contact_with(self, other: PhysicsBody) -> bool:
        return bool(self.category_bit_mask & other.contact_test_bit_mask
                    or other.category_bit_mask & self.contact_test_bit_mask)

    def sample_positions(self) -> list[Point]:
        """Positions to test this step, oldest first, ending at the current one."""
        current = self.node.position
        if not self.uses_precise_collision_detection or self.last_position is None:
            return [current]
        travel = current - self.last_position
        extent = self.radius if self.shape == self.CIRCLE else min(self.size) / 2
        steps = max(1, math.ceil(travel.length() / max(extent, 1.0)))
        return [self.last_position + travel * (i / steps) for i in range(1, steps + 1)]


@dataclass(frozen=True)
class Contact:
    """Two bodies that started touching during the last physics step."""
    body_a: PhysicsBody
    body_b: PhysicsBody


class ContactDelegate(Protocol):
    def did_begin(self, contact: Contact) -> None: ...


def shapes_overlap(a: PhysicsBody, pa: Point, b: PhysicsBody, pb: Point) -> bool:
    """Overlap test for two bodies centered at ``pa`` and ``pb``."""
    if a.shape == PhysicsBody.CIRCLE and b.shape == PhysicsBody.CIRCLE:
        return pygame.Vector2(pa.x, pa.y).distance_to((pb.x, pb.y)) < a.radius + b.radius
    if a.shape == PhysicsBody.RECTANGLE and b.shape == PhysicsBody.RECTANGLE:
        return a.frame_at(pa).colliderect(b.frame_at(pb))
    if a.shape == PhysicsBody.CIRCLE:
        circle, center, rect = a, pa, b.frame_at(pb)
    else:
        circle, center, rect = b, pb, a.frame_at(pa)
    # pygame has no circle/rect test: clamp the center onto the rect
    nearest = (min(max(center.x, rect.left), rect.right),
               min(max(center.y, rect.top), rect.bottom))
    return pygame.Vector2(center.x, center.y).distance_to(nearest) < circle.radius


class PhysicsWorld:
    """Finds newly started contacts among the bodies in a scene.

    ``gravity`` is kept for completeness and has no effect: no forces are
    integrated.
    """

    def __init__(self) -> None:
        self.gravity = Point(0.0, -9.8)
        self.contact_delegate: ContactDelegate | None = None
        self.active_pairs: set[tuple[int, int]] = set()

    def bodies_in(self, scene: Node) -> list[PhysicsBody]:
        bodies = []
        for node in scene.descendants():
            body = getattr(node, "physics_body", None)
            if body is not None:
                bodies.append(body)
        return bodies

    def touching(self, a: PhysicsBody, b: PhysicsBody) -> bool:
        pb = b.node.position
        for pa in a.sample_positions():
            if shapes_overlap(a, pa, b, pb):
                return True
        if b.uses_precise_collision_detection:
            pa = a.node.position
            return any(shapes_overlap(a, pa, b, p) for p in b.sample_positions())
        return False

    def step(self, scene: Node) -> list[Contact]:
        """
        Test every pair of bodies in ``scene`` and report the ones that began
        touching since the previous step.

        Returns
        -------
        list[Contact]
            The begun contacts whose nodes were still in the scene when their
            turn came, in the order they were passed to the delegate.
        """
        bodies = self.bodies_in(scene)
        touching_now: set[tuple[int, int]] = set()
        begun: list[Contact] = []

        for i, a in enumerate(bodies):
            for b in bodies[i + 1:]:
                if not a.wants_contact_with(b):
                    continue
                if not self.touching(a, b):
                    continue
                pair = (min(id(a), id(b)), max(id(a), id(b)))
                touching_now.add(pair)
                if pair not in self.active_pairs:
                    begun.append(Contact(a, b))

        self.active_pairs = touching_now
        for body in bodies:
            body.last_position = body.node.position

        delivered = []
        for contact in begun:
            # An earlier contact in this step may have removed one of the nodes
            if contact.body_a.node.root() is not scene or contact.body_b.node.root() is not scene:
                continue
            delivered.append(contact)
            if self.contact_delegate is not None:
                self.contact_delegate.did_begin(contact)
        return delivered
