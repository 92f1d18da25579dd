import os

# pygame must never need a real display or audio device under test
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import random

import pytest

from ninja_attack.scenes import GameScene
from ninja_attack.spawner import MonsterSpawner
from ninja_attack.view import View


@pytest.fixture
def view():
    return View((400, 600))


@pytest.fixture
def game_scene(view):
    """A presented 400x600 play scene with a seeded spawner."""
    scene = GameScene((400, 600), spawner=MonsterSpawner(random.Random(7)))
    view.present_scene(scene)
    return scene
