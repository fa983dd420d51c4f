"""
Main game application with PyGame GUI
"""

import random

import pygame

from classic_pong.core.entities import create_game_state
from classic_pong.core.game_engine import GameEngine
from classic_pong.core.input import InputMapper
from classic_pong.core.physics import PhysicsEngine
from classic_pong.core.renderer import Renderer
from classic_pong.gui.keyboard import PygameInputSource
from classic_pong.gui.pygame_renderer import WINDOW_TITLE
from classic_pong.gui.pygame_renderer import CaptionScoreDisplay
from classic_pong.gui.pygame_renderer import PygameSurface
from classic_pong.utils.config import GameConfig
from classic_pong.utils.config import game_config
from classic_pong.utils.keyboard_layout import auto_configure_layout
from classic_pong.utils.keyboard_layout import describe_controls


class PongApp:
    """Main application class for Classic Pong with PyGame GUI"""

    def __init__(self, config: GameConfig = game_config, rng: random.Random | None = None):
        """Initialize the application"""
        self.config = config

        pygame.init()
        self.screen = pygame.display.set_mode((config.FIELD_WIDTH, config.FIELD_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()

        # Game components
        self.state = create_game_state(config)
        self.physics = PhysicsEngine(config, rng)
        self.renderer = Renderer(PygameSurface(self.screen), config, CaptionScoreDisplay())
        self.input_source = PygameInputSource(
            InputMapper(self.state.player1, self.state.player2, config=config)
        )
        self.game_engine = GameEngine(self.state, self.physics, self.renderer)

        self.running = False

    def run(self) -> None:
        """Main loop, one tick per display frame until the window is closed"""
        self.running = True
        self.renderer.draw_score(self.state)

        try:
            while self.running:
                # Input is handled between ticks, never during one
                if not self.input_source.process_events(pygame.event.get()):
                    self.running = False
                    break

                self.game_engine.tick()
                pygame.display.flip()
                self.clock.tick(self.config.FPS)
        finally:
            pygame.quit()

        score = self.game_engine.get_score()
        print(f"Game closed. Final score: {score[0]} - {score[1]}")


def main() -> None:
    """Entry point of the graphical game"""
    print("=== CLASSIC PONG ===")
    print()

    layout = auto_configure_layout(game_config)
    print(f"Detected keyboard configuration: {layout.upper()}")
    print()
    print("CONTROLS:")
    for line in describe_controls(game_config):
        print(line)
    print()
    print("Starting game...")

    app = PongApp(game_config)
    app.run()


if __name__ == "__main__":
    main()
