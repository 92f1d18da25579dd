import pygame
import pytest

from ninja_attack.constants import BG_COLOR, PLAYER_COLOR
from ninja_attack.nodes import SpriteNode
from ninja_attack.scenes import GameOverScene, GameScene
from ninja_attack.transitions import ActiveTransition, Transition
from ninja_attack.vector import Point
from ninja_attack.view import View


class TouchRecorder(GameScene):
    def __init__(self, size):
        super().__init__(size)
        self.touches = []

    def touches_ended(self, touches):
        self.touches.append(touches)


def test_present_without_transition():
    view = View((400, 600))
    scene = GameScene((400, 600))
    view.present_scene(scene)
    assert view.scene is scene
    assert scene.view is view
    assert view.transition is None
    assert view.screen is None


def test_mouse_release_becomes_touch():
    view = View((400, 600))
    scene = TouchRecorder((400, 600))
    view.present_scene(scene)

    view.handle_event(pygame.event.Event(pygame.MOUSEBUTTONUP, pos=(440, 300), button=1))
    view.handle_event(pygame.event.Event(pygame.MOUSEBUTTONUP, pos=(10, 10), button=3))
    view.handle_event(pygame.event.Event(pygame.FINGERUP, x=0.5, y=0.25, touch_id=0, finger_id=0))

    assert scene.touches == [[Point(440, 300)], [Point(200.0, 150.0)]]


def test_quit_and_escape_stop_loop():
    view = View()
    view.running = True
    view.handle_event(pygame.event.Event(pygame.QUIT))
    assert not view.running

    view.running = True
    view.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
    assert not view.running


def test_transition_pauses_scenes_and_input():
    view = View((400, 600))
    game = GameScene((400, 600))
    view.present_scene(game)
    game_over = game.end_game(False)

    view.touches_ended([Point(1, 1)])
    assert view.scene is game_over

    view.step(0.25)
    assert view.transition is not None
    assert game_over.children == [game_over.label]
    view.step(0.25)
    assert view.transition is None

    view.touches_ended([Point(1, 1)])
    assert isinstance(view.scene, GameScene)


def test_transition_progress():
    active = ActiveTransition(Transition.flip_horizontal(0.5), None, None)
    assert active.progress == 0.0
    assert not active.advance(0.25)
    assert active.progress == 0.5
    assert active.advance(0.5)
    assert active.progress == 1.0


def test_flip_render_draws_each_half():
    surf = pygame.Surface((40, 20))
    red = pygame.Surface((40, 20))
    red.fill((255, 0, 0))
    blue = pygame.Surface((40, 20))
    blue.fill((0, 0, 255))
    flip = Transition.flip_horizontal(0.5)

    flip.render(surf, red, blue, 0.25)
    assert surf.get_at((20, 10))[:3] == (255, 0, 0)
    assert surf.get_at((0, 10))[:3] == (0, 0, 0)

    flip.render(surf, red, blue, 1.0)
    assert surf.get_at((0, 10))[:3] == (0, 0, 255)


def test_game_over_scene_ignores_updates_without_crashing():
    scene = GameOverScene((400, 600), True)
    scene.update(1.0)
    assert scene.label.parent is scene


# ------------------------------- Rendering ----------------------------------------

@pytest.fixture
def open_view(tmp_path, monkeypatch):
    """A real (dummy-driver) window with no sprite images available."""
    monkeypatch.setattr("ninja_attack.nodes.ASSETS_DIR", str(tmp_path))
    monkeypatch.setattr(SpriteNode, "image_cache", {})
    view = View((400, 600))
    view.open()
    yield view
    pygame.quit()


def test_missing_sprite_drawn_as_colored_rect(open_view, capsys):
    scene = GameScene((400, 600))
    open_view.present_scene(scene)
    scene.update(0.0)

    open_view.draw()

    assert open_view.screen.get_at((40, 300))[:3] == PLAYER_COLOR
    assert open_view.screen.get_at((200, 300))[:3] == BG_COLOR
    assert "Sprite image not found" in capsys.readouterr().out


def test_game_over_label_drawn_centered(open_view):
    open_view.present_scene(GameOverScene((400, 600), False))

    open_view.draw()

    screen = open_view.screen
    dark = [(x, y) for x in range(400) for y in range(250, 350)
            if sum(screen.get_at((x, y))[:3]) < 200]
    assert dark
    mean_x = sum(x for x, _ in dark) / len(dark)
    assert abs(mean_x - 200) < 40
    assert sum(screen.get_at((5, 5))[:3]) == 3 * 255


def test_draw_during_transition(open_view):
    game = GameScene((400, 600))
    open_view.present_scene(game)
    game.end_game(True)
    open_view.step(0.1)

    open_view.draw()

    # outgoing play scene is squeezed towards the middle, black behind it
    assert open_view.screen.get_at((0, 300))[:3] == (0, 0, 0)
