"""
Maze renderer - draws tiles, pellets, the player and the ghosts with pygame
"""

import math

import pygame

from pacmaze.maze.maze_core import CellKind
from pacmaze.utils.colors import (
    COLOR_WALL, COLOR_PELLET, COLOR_PLAYER, COLOR_EYE_WHITE, COLOR_EYE_PUPIL
)
from pacmaze.utils.constants import TILE_SIZE


class MazeRenderer:
    """
    Draws a GameSession onto a pygame surface; reads state, never mutates it
    """
    def __init__(self, tile_size=TILE_SIZE):
        self.tile_size = tile_size

    def cell_center(self, x, y):
        """Continuous cell coordinates to pixel center"""
        return (x * self.tile_size + self.tile_size / 2,
                y * self.tile_size + self.tile_size / 2)

    def draw(self, screen, session):
        """Draw maze, player and ghosts"""
        self.draw_maze(screen, session.maze)
        self.draw_player(screen, session.player)
        for ghost in session.ghosts:
            self.draw_ghost(screen, ghost)

    def draw_maze(self, screen, maze):
        """Draw walls, pellets and the maze border"""
        ts = self.tile_size
        for x, y, cell in maze.iter_cells():
            if cell == CellKind.WALL:
                pygame.draw.rect(screen, COLOR_WALL, (x * ts, y * ts, ts, ts))
            elif cell == CellKind.PELLET:
                pygame.draw.circle(screen, COLOR_PELLET, self.cell_center(x, y), 2)
            elif cell == CellKind.POWER_PELLET:
                pygame.draw.circle(screen, COLOR_PELLET, self.cell_center(x, y), 6)

        pygame.draw.rect(screen, COLOR_WALL, (0, 0, maze.width * ts, maze.height * ts), 2)

    def draw_player(self, screen, player):
        """Draw the player as a disc with an opening mouth wedge"""
        cx, cy = self.cell_center(player.x, player.y)
        radius = self.tile_size / 2 - 2
        angle = player.facing_angle()
        mouth = player.mouth_angle()

        # Body outline, going around from one lip to the other
        points = [(cx, cy)]
        steps = 24
        start = angle + mouth / 2
        sweep = 2 * math.pi - mouth
        for i in range(steps + 1):
            a = start + sweep * i / steps
            points.append((cx + radius * math.cos(a), cy + radius * math.sin(a)))
        pygame.draw.polygon(screen, COLOR_PLAYER, points)

        # Eye, rotated with the heading
        ex, ey = -radius / 3, -radius / 2
        eye_x = cx + ex * math.cos(angle) - ey * math.sin(angle)
        eye_y = cy + ex * math.sin(angle) + ey * math.cos(angle)
        pygame.draw.circle(screen, COLOR_EYE_PUPIL, (eye_x, eye_y), 2)

    def draw_ghost(self, screen, ghost):
        """Draw a ghost body with a wavy hem and eyes"""
        cx, cy = self.cell_center(ghost.x, ghost.y)
        radius = self.tile_size / 2 - 2
        color = ghost.display_color()

        # Dome
        dome_y = cy - radius / 4
        pygame.draw.circle(screen, color, (cx, dome_y), radius, draw_top_left=True, draw_top_right=True)

        # Skirt
        wave_h = radius / 3
        wave_w = radius / 2
        hem_y = cy + radius / 2
        pygame.draw.polygon(screen, color, [
            (cx - radius, dome_y),
            (cx + radius, dome_y),
            (cx + radius, hem_y),
            (cx + radius - wave_w, hem_y - wave_h),
            (cx, hem_y),
            (cx - radius + wave_w, hem_y - wave_h),
            (cx - radius, hem_y),
        ])

        # Eyes
        for side in (-1, 1):
            ex = cx + side * radius / 3
            ey = cy - radius / 3
            pygame.draw.circle(screen, COLOR_EYE_WHITE, (ex, ey), radius / 4)
            pygame.draw.circle(screen, COLOR_EYE_PUPIL, (ex, ey), radius / 8)
