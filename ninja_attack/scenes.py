"""Play scene and game-over scene."""

from __future__ import annotations

import pygame

from .actions import MoveTo, RemoveFromParent, RepeatForever, RunBlock, Sequence, Wait
from .aiming import plan_shot
from .constants import (
    WIDTH, HEIGHT, BG_COLOR, TEXT_COLOR,
    PLAYER_COLOR, MONSTER_COLOR, PROJECTILE_COLOR,
    PLAYER_SIZE, MONSTER_SIZE, PROJECTILE_SIZE,
    PLAYER_X_FRACTION, PLAYER_Y_FRACTION,
    WIN_MESSAGE, LOSE_MESSAGE, LABEL_FONT_NAME, LABEL_FONT_SIZE, TRANSITION_DURATION
)
from .logger import GameLogger
from .nodes import Node, SpriteNode, LabelNode
from .physics import Contact, PhysicsBody, PhysicsCategory, PhysicsWorld
from .spawner import MonsterSpawner
from .transitions import Transition
from .vector import Point


class Scene(Node):
    """
    Root of a scene graph. Owns the physics world and knows the view that
    presents it (None while not presented).
    """

    def __init__(self, size: tuple[float, float] = (WIDTH, HEIGHT)) -> None:
        super().__init__(size)
        self.background_color = BG_COLOR
        self.physics_world = PhysicsWorld()
        self.view = None

    def did_move_to(self, view) -> None:
        """Called once when a view starts presenting this scene."""

    def touches_ended(self, touches: list[Point]) -> None:
        """Called with the scene positions of touches / clicks just released."""

    def update(self, dt: float) -> None:
        super().update(dt)
        self.physics_world.step(self)

    def draw(self, surf: pygame.Surface) -> None:
        surf.fill(self.background_color)
        super().draw(surf)

    def presenting_view(self):
        if self.view is None:
            raise RuntimeError("scene is not presented in a view")
        return self.view


class GameScene(Scene):
    """
    The play field: a player on the left, monsters walking in from the right,
    and projectiles fired towards wherever the player touches.
    """

    def __init__(self, size: tuple[float, float] = (WIDTH, HEIGHT), logger: GameLogger | None = None,
                 spawner: MonsterSpawner | None = None) -> None:
        super().__init__(size)
        self.logger = logger
        self.spawner = spawner if spawner is not None else MonsterSpawner()
        self.player = SpriteNode("player", PLAYER_SIZE, color=PLAYER_COLOR)
        self.monsters_destroyed = 0

    def did_move_to(self, view) -> None:
        self.background_color = BG_COLOR
        width, height = self.size
        self.player.position = Point(width * PLAYER_X_FRACTION, height * PLAYER_Y_FRACTION)
        self.add_child(self.player)

        self.run(RepeatForever(Sequence([
            RunBlock(self.add_monster),
            Wait(self.spawner.interval),
        ])))

        self.physics_world.gravity = Point(0.0, 0.0)
        self.physics_world.contact_delegate = self

    # ------------------------------- Spawning ----------------------------------------

    def add_monster(self) -> SpriteNode:
        """Send one monster across the screen from right to left."""
        monster = SpriteNode("monster", MONSTER_SIZE, color=MONSTER_COLOR)
        plan = self.spawner.plan(self.size, monster.size)

        monster.position = plan.start
        self.add_child(monster)

        monster.run(Sequence([MoveTo(plan.end, plan.duration), RemoveFromParent()]))

        body = PhysicsBody.rectangle(monster.size)
        body.is_dynamic = True
        body.category_bit_mask = PhysicsCategory.MONSTER
        body.contact_test_bit_mask = PhysicsCategory.PROJECTILE
        body.collision_bit_mask = PhysicsCategory.NONE
        monster.physics_body = body
        return monster

    # --------------------------------- Input -----------------------------------------

    def touches_ended(self, touches: list[Point]) -> SpriteNode | None:
        """
        Fire a projectile from the player towards the first released touch.

        Returns the new projectile, or None when there is no touch or the
        touch is not in front of the player.
        """
        if not touches:
            return None
        touch_location = touches[0]

        shot = plan_shot(self.player.position, touch_location, self.size[0])
        if shot is None:
            if self.logger:
                self.logger.log_rejected_shot(touch_location)
            return None

        projectile = SpriteNode("projectile", PROJECTILE_SIZE, color=PROJECTILE_COLOR)
        projectile.position = shot.start
        self.add_child(projectile)

        projectile.run(Sequence([MoveTo(shot.destination, shot.duration), RemoveFromParent()]))

        body = PhysicsBody.circle(projectile.size[0] / 2)
        body.is_dynamic = True
        body.category_bit_mask = PhysicsCategory.PROJECTILE
        body.contact_test_bit_mask = PhysicsCategory.MONSTER
        body.collision_bit_mask = PhysicsCategory.NONE
        body.uses_precise_collision_detection = True
        projectile.physics_body = body

        if self.logger:
            self.logger.log_shot(touch_location, shot.destination)
        return projectile

    # ------------------------------- Contacts ----------------------------------------

    def did_begin(self, contact: Contact) -> None:
        # Monsters have the lower category, so ordering by mask fixes the roles
        if contact.body_a.category_bit_mask < contact.body_b.category_bit_mask:
            monster_body, projectile_body = contact.body_a, contact.body_b
        else:
            monster_body, projectile_body = contact.body_b, contact.body_a

        if not (monster_body.category_bit_mask & PhysicsCategory.MONSTER
                and projectile_body.category_bit_mask & PhysicsCategory.PROJECTILE):
            return
        monster, projectile = monster_body.node, projectile_body.node
        if monster is None or projectile is None:
            return

        self.projectile_did_collide_with_monster(projectile, monster)

    def projectile_did_collide_with_monster(self, projectile: Node, monster: Node) -> None:
        if projectile.parent is None or monster.parent is None:
            return
        monster.remove_from_parent()
        projectile.remove_from_parent()
        self.monsters_destroyed += 1
        if self.logger:
            self.logger.log_hit(monster.position, projectile.position)

    # ------------------------------- Game over ---------------------------------------

    def end_game(self, won: bool) -> GameOverScene:
        """
        Leave play for the game-over screen.

        Nothing in the play scene decides the outcome; whoever calls this
        does.
        """
        view = self.presenting_view()
        if self.logger:
            self.logger.log_game_over(won, self.monsters_destroyed)
        game_over = GameOverScene(self.size, won, logger=self.logger)
        view.present_scene(game_over, Transition.flip_horizontal(TRANSITION_DURATION))
        return game_over


class GameOverScene(Scene):
    """Win / lose message. Any touch starts a brand-new game."""

    def __init__(self, size: tuple[float, float], won: bool, logger: GameLogger | None = None) -> None:
        super().__init__(size)
        self.won = won
        self.logger = logger
        self.background_color = BG_COLOR

        self.message = WIN_MESSAGE if won else LOSE_MESSAGE
        self.label = LabelNode(self.message, LABEL_FONT_NAME, LABEL_FONT_SIZE, TEXT_COLOR)
        self.label.position = Point(size[0] / 2, size[1] / 2)
        self.add_child(self.label)

    def restart_game(self) -> GameScene:
        view = self.presenting_view()
        transition = Transition.flip_horizontal(TRANSITION_DURATION)
        scene = GameScene(self.size, logger=self.logger)
        if self.logger:
            self.logger.log_restart()
        view.present_scene(scene, transition)
        return scene

    def touches_ended(self, touches: list[Point]) -> None:
        self.restart_game()
