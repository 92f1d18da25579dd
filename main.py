"""Game entry point"""

from ninja_attack.constants import WIDTH, HEIGHT, LOG_FILE
from ninja_attack.logger import GameLogger
from ninja_attack.scenes import GameScene
from ninja_attack.view import View


def main() -> None:
    """Open the window and start playing."""
    view = View((WIDTH, HEIGHT))
    scene = GameScene((WIDTH, HEIGHT), logger=GameLogger(LOG_FILE))
    view.present_scene(scene)
    view.run()


if __name__ == "__main__":
    main()
