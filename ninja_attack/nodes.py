from __future__ import annotations

# enables forward references and delayed evaluation of type annotations.

import os
import pygame

from .actions import Action
from .constants import ASSETS_DIR, TEXT_COLOR
from .vector import Point


class Node:
    """
    A scene-graph element: a position, a size, an ordered list of children
    and the actions currently running on it.

    A node is only updated and drawn while it is reachable from the presented
    scene, so removing it from its parent also stops its actions.
    """

    def __init__(self, size: tuple[float, float] = (0.0, 0.0), position: Point | None = None) -> None:
        self.size = size
        self.position = position if position is not None else Point()
        self.parent: Node | None = None
        self.children: list[Node] = []
        self.actions: list[Action] = []

    # ------------------------------- Scene graph -------------------------------------

    def add_child(self, node: Node) -> None:
        if node.parent is not None:
            raise ValueError("node already has a parent")
        node.parent = self
        self.children.append(node)

    def remove_from_parent(self) -> None:
        """Detach from the parent. Does nothing for a node without one."""
        if self.parent is None:
            return
        self.parent.children.remove(self)
        self.parent = None

    def root(self) -> Node:
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def descendants(self) -> list[Node]:
        """All nodes below this one, depth first."""
        found = []
        for child in self.children:
            found.append(child)
            found.extend(child.descendants())
        return found

    # ------------------------------- Update ------------------------------------------

    def run(self, action: Action) -> None:
        self.actions.append(action)

    def has_actions(self) -> bool:
        return bool(self.actions)

    def update(self, dt: float) -> None:
        """Advance running actions, then the children that existed before them."""
        children = list(self.children)

        for action in list(self.actions):
            if action.update(self, dt) and action in self.actions:
                self.actions.remove(action)

        for child in children:
            if child.parent is self:
                child.update(dt)

    # ------------------------------- Rendering ---------------------------------------

    def draw(self, surf: pygame.Surface) -> None:
        for child in self.children:
            child.draw(surf)


class SpriteNode(Node):
    """
    A textured rectangle. The texture is ``assets/<image_name>.png`` scaled to
    the node size; when it cannot be loaded a solid ``color`` rectangle is
    drawn instead.
    """

    # Class variables for image management
    image_cache: dict[tuple[str, tuple[int, int]], pygame.Surface | None] = {}

    def __init__(self, image_name: str, size: tuple[float, float],
                 color: tuple[int, int, int] = (0, 0, 255)) -> None:
        super().__init__(size)
        self.image_name = image_name
        self.color = color
        self._physics_body = None

    @property
    def physics_body(self):
        return self._physics_body

    @physics_body.setter
    def physics_body(self, body) -> None:
        if self._physics_body is not None:
            self._physics_body.node = None
        self._physics_body = body
        if body is not None:
            body.node = self

    @property
    def frame(self) -> pygame.Rect:
        """Bounding rectangle centered on ``position``."""
        w, h = int(self.size[0]), int(self.size[1])
        rect = pygame.Rect(0, 0, w, h)
        rect.center = (round(self.position.x), round(self.position.y))
        return rect

    @classmethod
    def load_image(cls, image_name: str, size: tuple[int, int]) -> pygame.Surface | None:
        """Load and scale a sprite image once; cache misses as None."""
        key = (image_name, size)
        if key in cls.image_cache:
            return cls.image_cache[key]

        image = None
        path = os.path.join(ASSETS_DIR, f"{image_name}.png")
        if os.path.exists(path):
            try:
                raw = pygame.image.load(path).convert_alpha()
                image = pygame.transform.smoothscale(raw, size)
            except pygame.error as e:
                print(f"Failed to load sprite {path}: {e}")
        else:
            print(f"Sprite image not found: {path}")

        cls.image_cache[key] = image
        return image

    def draw(self, surf: pygame.Surface) -> None:
        rect = self.frame
        image = self.load_image(self.image_name, rect.size)
        if image:
            surf.blit(image, rect)
        else:
            pygame.draw.rect(surf, self.color, rect)
        super().draw(surf)


class LabelNode(Node):
    """Single line of text drawn centered on ``position``."""

    def __init__(self, text: str = "", font_name: str | None = None, font_size: int = 32,
                 font_color: tuple[int, int, int] = TEXT_COLOR) -> None:
        super().__init__()
        self.text = text
        self.font_name = font_name
        self.font_size = font_size
        self.font_color = font_color
        self._font: pygame.font.Font | None = None

    def font(self) -> pygame.font.Font:
        # SysFont falls back to pygame's default font when the name is unknown
        if self._font is None:
            self._font = pygame.font.SysFont(self.font_name, self.font_size)
        return self._font

    def draw(self, surf: pygame.Surface) -> None:
        text_surf = self.font().render(self.text, True, self.font_color)
        text_rect = text_surf.get_rect(center=(round(self.position.x), round(self.position.y)))
        surf.blit(text_surf, text_rect)
        super().draw(surf)
