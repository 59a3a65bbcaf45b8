"""
UI Manager - handles HUD and overlay rendering
"""

import pygame

from pacmaze.game.game_state import GameState
from pacmaze.utils.colors import (
    COLOR_TEXT, COLOR_TEXT_DIM, COLOR_PANEL_BG, COLOR_GAME_OVER,
    COLOR_VICTORY, COLOR_MENU_OVERLAY, COLOR_PLAYER
)
from pacmaze.utils.helpers import format_score


class UIManager:
    """
    Manages all UI rendering
    """
    def __init__(self):
        # Fonts
        self.font_small = None
        self.font_medium = None
        self.font_large = None
        self._init_fonts()

    def _init_fonts(self):
        """Initialize fonts"""
        pygame.font.init()
        self.font_small = pygame.font.SysFont("consolas", 14)
        self.font_medium = pygame.font.SysFont("consolas", 18)
        self.font_large = pygame.font.SysFont("arial", 24, bold=True)

    def draw_hud(self, screen, session, panel_y, screen_w, panel_h):
        """
        Draw HUD (score and lives)

        Args:
            screen: Pygame screen
            session: GameSession
            panel_y: Y position of panel
            screen_w: Screen width
            panel_h: Panel height
        """
        pygame.draw.rect(screen, COLOR_PANEL_BG, (0, panel_y, screen_w, panel_h))

        score = self.font_medium.render(f"SCORE {format_score(session.score)}", True, COLOR_TEXT)
        screen.blit(score, (10, panel_y + (panel_h - score.get_height()) // 2))

        # One small disc per remaining life
        radius = 7
        center_y = panel_y + panel_h // 2
        for i in range(session.lives):
            center_x = screen_w - 20 - i * (radius * 2 + 6)
            pygame.draw.circle(screen, COLOR_PLAYER, (center_x, center_y), radius)

    def draw_state_overlay(self, screen, state):
        """Draw the banner for non-playing states"""
        if state == GameState.PAUSED:
            self.draw_paused(screen)
        elif state == GameState.GAME_OVER:
            self._draw_banner(screen, "GAME OVER", COLOR_GAME_OVER)
        elif state == GameState.VICTORY:
            self._draw_banner(screen, "CLEAR!", COLOR_VICTORY)

    def draw_paused(self, screen):
        """Draw paused overlay"""
        screen_w, screen_h = screen.get_size()

        # Semi-transparent overlay
        overlay = pygame.Surface((screen_w, screen_h), pygame.SRCALPHA)
        overlay.fill(COLOR_MENU_OVERLAY)
        screen.blit(overlay, (0, 0))

        text = self.font_large.render("PAUSED - press SPACE to resume", True, COLOR_TEXT)
        text_rect = text.get_rect(center=(screen_w // 2, screen_h // 2))
        screen.blit(text, text_rect)

    def _draw_banner(self, screen, title_text, color):
        screen_w, screen_h = screen.get_size()

        title = self.font_large.render(title_text, True, color)
        title_rect = title.get_rect(center=(screen_w // 2, screen_h // 2 - 20))
        screen.blit(title, title_rect)

        hint = self.font_small.render("Press SPACE, F5 or R to restart", True, COLOR_TEXT_DIM)
        hint_rect = hint.get_rect(center=(screen_w // 2, screen_h // 2 + 20))
        screen.blit(hint, hint_rect)
