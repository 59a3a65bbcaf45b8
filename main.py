"""
Pacmaze - pygame front-end
Keyboard in, session ticks, drawing out
"""

import sys

import pygame
from loguru import logger

from pacmaze.config import GAME_TITLE, GAME_VERSION
from pacmaze.game.renderer import MazeRenderer
from pacmaze.game.session import GameSession
from pacmaze.game.ui_manager import UIManager
from pacmaze.utils.colors import COLOR_BG
from pacmaze.utils.constants import (
    FPS, MAX_FRAME_DT, PANEL_H, TILE_SIZE, UP, DOWN, LEFT, RIGHT
)
from pacmaze.utils.helpers import frame_delta

KEY_DIRECTIONS = {
    pygame.K_UP: UP,
    pygame.K_w: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_d: RIGHT,
}


class PacmanApp:
    """
    Main game class
    """
    def __init__(self):
        pygame.init()

        self.session = GameSession()
        self.renderer = MazeRenderer(TILE_SIZE)
        self.ui_manager = UIManager()

        maze = self.session.maze
        self.screen_w = maze.width * TILE_SIZE
        self.screen_h = maze.height * TILE_SIZE + PANEL_H
        self.screen = pygame.display.set_mode((self.screen_w, self.screen_h))
        pygame.display.set_caption(f"{GAME_TITLE} v{GAME_VERSION}")

        self.clock = pygame.time.Clock()
        self.running = True

    def handle_events(self):
        """Handle input events"""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                return
            if event.type == pygame.KEYDOWN:
                self._handle_keydown(event.key)

    def _handle_keydown(self, key):
        """Handle key press"""
        if key in KEY_DIRECTIONS:
            self.session.set_direction(*KEY_DIRECTIONS[key])
        elif key == pygame.K_SPACE:
            if self.session.is_over:
                self.session.restart()
            else:
                self.session.toggle_pause()
        elif key in (pygame.K_F5, pygame.K_r):
            self.session.restart()
        elif key == pygame.K_ESCAPE:
            self.running = False

    def render(self):
        """Draw one frame"""
        self.screen.fill(COLOR_BG)
        self.renderer.draw(self.screen, self.session)
        self.ui_manager.draw_hud(
            self.screen, self.session,
            self.screen_h - PANEL_H, self.screen_w, PANEL_H
        )
        self.ui_manager.draw_state_overlay(self.screen, self.session.state)
        pygame.display.flip()

    def run(self):
        """Main game loop"""
        logger.info(f"{GAME_TITLE} v{GAME_VERSION} started")
        logger.info("Controls: arrows/WASD move, SPACE pause (restart once over), F5/R restart, ESC quit")

        while self.running:
            dt = frame_delta(self.clock.tick(FPS), MAX_FRAME_DT)

            self.handle_events()
            self.session.update(dt)
            self.render()

        pygame.quit()
        sys.exit()


def main():
    """Entry point"""
    app = PacmanApp()
    app.run()


if __name__ == "__main__":
    main()
