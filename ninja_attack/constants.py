"""
Screen dimensions, colors, font settings, tuning knobs for spawning and
shooting, asset paths, and logging configuration.
"""

import os

WIDTH, HEIGHT = 1024, 768
FPS = 60
BG_COLOR = (255, 255, 255)         # SKColor.white equivalent
TEXT_COLOR = (0, 0, 0)

# Fallback colors when a sprite image is missing
PLAYER_COLOR = (40, 40, 40)
MONSTER_COLOR = (120, 170, 60)
PROJECTILE_COLOR = (90, 90, 90)

# Sprite sizes (w, h) in scene units
PLAYER_SIZE = (54, 80)
MONSTER_SIZE = (54, 80)
PROJECTILE_SIZE = (20, 20)

# Spawning
SPAWN_INTERVAL = 1.0               # seconds between monsters
MIN_MONSTER_DURATION = 2.0
MAX_MONSTER_DURATION = 4.0

# Shooting
PROJECTILE_DURATION = 2.0
SHOT_DISTANCE_FACTOR = 2           # multiples of the play-area width

# Player anchor as fractions of the play area
PLAYER_X_FRACTION = 0.1
PLAYER_Y_FRACTION = 0.5

# Game over screen
WIN_MESSAGE = "You Won!"
LOSE_MESSAGE = "You Lose :["
LABEL_FONT_NAME = "Chalkduster"
LABEL_FONT_SIZE = 50
TRANSITION_DURATION = 0.5

# Log file settings
LOG_FILE = os.path.join(os.path.dirname(os.path.dirname(__file__)), "log.md")
ASSETS_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "assets")
