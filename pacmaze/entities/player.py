"""
Player entity with buffered direction input
"""

import math

from loguru import logger

from pacmaze.entities.agent import Agent
from pacmaze.utils.constants import (
    STOP, DIRECTIONS, PLAYER_SPEED, PLAYER_ANIMATION_SPEED
)
from pacmaze.utils.helpers import grid_round


class Player(Agent):
    """
    Player entity

    Direction input is buffered in a one-slot request. The request is
    retried every tick until the cell one step along it opens up, so a key
    pressed just before an intersection takes effect right at it.
    """
    def __init__(self, x, y, maze, speed=PLAYER_SPEED):
        super().__init__(x, y, maze, speed)
        self.next_direction = STOP
        self.animation_frame = 0.0

    def set_direction(self, dx, dy):
        """
        Buffer a direction request

        Args:
            dx, dy: One of the four unit vectors, or (0, 0) to cancel
        """
        if (dx, dy) not in DIRECTIONS and (dx, dy) != STOP:
            raise ValueError(f"invalid direction ({dx}, {dy})")
        self.next_direction = (dx, dy)

    def has_pending_direction(self):
        """Check if a direction request is still waiting"""
        return self.next_direction != STOP

    def _try_commit_direction(self):
        """Adopt the buffered direction if the cell one step along it is open"""
        if not self.has_pending_direction():
            return False

        dx, dy = self.next_direction
        next_x = grid_round(self.x + dx)
        next_y = grid_round(self.y + dy)
        if not self.maze.can_move_to(next_x, next_y):
            return False

        logger.debug(f"Player turns {self.next_direction} at ({self.x:.2f},{self.y:.2f})")
        self.direction = self.next_direction
        self.next_direction = STOP
        return True

    def on_blocked(self):
        # Stop against the wall; a pending request stays buffered
        self.direction = STOP

    def update(self, dt):
        """
        Update player state
        dt: delta time in seconds
        """
        self.animation_frame += PLAYER_ANIMATION_SPEED * dt
        self._try_commit_direction()
        self.move(dt)
        self.handle_screen_wrap()

    def facing_angle(self):
        """Heading in radians for drawing (screen y points down)"""
        dx, dy = self.direction
        if dx > 0:
            return 0.0
        if dx < 0:
            return math.pi
        if dy > 0:
            return math.pi / 2
        if dy < 0:
            return -math.pi / 2
        return 0.0

    def mouth_angle(self):
        """Opening of the mouth wedge in radians, driven by the animation phase"""
        return abs(math.sin(self.animation_frame)) * math.pi / 3

    def reset(self):
        """Reset player to starting position"""
        super().reset()
        self.next_direction = STOP

    def __repr__(self):
        return (f"Player(pos=({self.x:.2f},{self.y:.2f}), dir={self.direction}, "
                f"next={self.next_direction})")
