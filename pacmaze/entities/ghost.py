"""
Ghost AI entities
Mode state machine, targeting and intersection choice for the adversaries
"""

import random
from enum import Enum

from loguru import logger

from pacmaze.entities.agent import Agent
from pacmaze.utils.colors import (
    GHOST_COLORS, COLOR_GHOST_FRIGHTENED, COLOR_GHOST_BLINK
)
from pacmaze.utils.constants import (
    UP, DIRECTIONS, GHOST_SPEED, FRIGHTENED_DURATION, FRIGHTENED_SPEED_FACTOR,
    BEHAVIOR_DURATION, BLINK_THRESHOLD, DEFAULT_SCATTER_TARGET
)
from pacmaze.utils.helpers import distance, reverse


class GhostMode(Enum):
    """Ghost behaviour modes"""
    CHASE = 'chase'
    SCATTER = 'scatter'
    FRIGHTENED = 'frightened'
    EATEN = 'eaten'


class Ghost(Agent):
    """
    Ghost adversary

    Every tick the ghost picks a target cell from its mode, then at cell
    centers turns toward (or, when frightened, away from) that target.
    """
    initial_direction = UP

    def __init__(self, x, y, maze, player, name, scatter_target=None,
                 speed=GHOST_SPEED, rng=None,
                 frightened_duration=FRIGHTENED_DURATION,
                 frightened_speed_factor=FRIGHTENED_SPEED_FACTOR,
                 behavior_duration=BEHAVIOR_DURATION):
        """
        Args:
            x, y: Start cell (also the target when eaten)
            maze: Maze object
            player: Anything with get_grid_position(); only read, never moved
            name: Ghost name ('blinky', 'pinky', 'inky', 'clyde')
            scatter_target: Home corner cell used in scatter mode
            speed: Base speed in cells per second
            rng: random.Random used for frightened wandering
        """
        super().__init__(x, y, maze, speed)
        self.player = player
        self.name = name
        self.color = GHOST_COLORS.get(name, (255, 100, 100))
        self.scatter_target = scatter_target or DEFAULT_SCATTER_TARGET
        self.rng = rng or random.Random()

        self.frightened_duration = frightened_duration
        self.frightened_speed_factor = frightened_speed_factor
        self.behavior_duration = behavior_duration

        # AI state
        self.mode = GhostMode.CHASE
        self.phase = GhostMode.CHASE  # chase/scatter alternation, kept through frightened
        self.mode_timer = 0.0       # frightened countdown
        self.behavior_timer = 0.0   # chase/scatter alternation
        self.target = (0, 0)

    def current_speed(self):
        if self.mode == GhostMode.FRIGHTENED:
            return self.speed * self.frightened_speed_factor
        return self.speed

    def frighten(self):
        """
        Enter frightened mode (power pellet eaten)

        Eaten ghosts ignore it. The ghost turns around on the spot.
        """
        if self.mode == GhostMode.EATEN:
            return False

        self.mode = GhostMode.FRIGHTENED
        self.mode_timer = self.frightened_duration
        self.direction = reverse(self.direction)
        return True

    def _update_timers(self, dt):
        if self.mode == GhostMode.FRIGHTENED:
            self.mode_timer -= dt
            if self.mode_timer <= 0:
                self.mode_timer = 0.0
                self.mode = GhostMode.CHASE
                logger.debug(f"{self.name} recovers, back to chase")

        # Runs through frightened/eaten too; those modes only move the phase
        self.behavior_timer += dt
        if self.behavior_timer >= self.behavior_duration:
            self.behavior_timer = 0.0
            if self.phase == GhostMode.CHASE:
                self.phase = GhostMode.SCATTER
            else:
                self.phase = GhostMode.CHASE
            if self.mode in (GhostMode.CHASE, GhostMode.SCATTER):
                self.mode = self.phase
            logger.debug(f"{self.name} behaviour flip, phase={self.phase.value} mode={self.mode.value}")

    def set_target(self):
        """Pick the target cell for the current mode"""
        if self.mode == GhostMode.CHASE:
            self.target = self.player.get_grid_position()
        elif self.mode == GhostMode.SCATTER:
            self.target = self.scatter_target
        elif self.mode == GhostMode.FRIGHTENED:
            self.target = self.maze.random_cell(self.rng)
        elif self.mode == GhostMode.EATEN:
            self.target = (self.start_x, self.start_y)
        return self.target

    def _distance_to_target(self, x, y):
        return distance(x, y, self.target[0], self.target[1])

    def valid_directions(self):
        """Passable directions from the current cell, reverse excluded unless frightened"""
        cx, cy = self.get_grid_position()
        backwards = reverse(self.direction)
        valid = []
        for dx, dy in DIRECTIONS:
            if not self.maze.can_move_to(cx + dx, cy + dy):
                continue
            if self.mode != GhostMode.FRIGHTENED and (dx, dy) == backwards:
                continue
            valid.append((dx, dy))
        return valid

    def choose_direction(self):
        """
        Choose a heading at cell centers

        Off-center ghosts keep going. With no way forward the ghost reverses,
        the only reversal allowed outside frightened mode. Otherwise the
        candidate whose next cell is closest to the target wins (farthest
        when frightened); ties keep the earlier of up, down, left, right.
        """
        if not self.is_aligned():
            return self.direction

        valid = self.valid_directions()
        if not valid:
            self.direction = reverse(self.direction)
            return self.direction

        cx, cy = self.get_grid_position()
        frightened = self.mode == GhostMode.FRIGHTENED

        best = valid[0]
        best_distance = self._distance_to_target(cx + best[0], cy + best[1])
        for dx, dy in valid[1:]:
            d = self._distance_to_target(cx + dx, cy + dy)
            if (frightened and d > best_distance) or (not frightened and d < best_distance):
                best = (dx, dy)
                best_distance = d

        self.direction = best
        return self.direction

    def update(self, dt):
        """
        Update ghost AI

        Args:
            dt: Delta time in seconds
        """
        self._update_timers(dt)
        self.set_target()
        self.choose_direction()
        self.move(dt)
        self.handle_screen_wrap()

    def is_blinking(self):
        """Check if the frightened body should flash white this frame"""
        return (self.mode == GhostMode.FRIGHTENED
                and self.mode_timer < BLINK_THRESHOLD
                and int(self.mode_timer * 10) % 2 == 0)

    def display_color(self):
        """Get RGB color for rendering"""
        if self.mode == GhostMode.FRIGHTENED:
            return COLOR_GHOST_BLINK if self.is_blinking() else COLOR_GHOST_FRIGHTENED
        return self.color

    def reset(self):
        """Reset ghost to starting position in chase mode"""
        super().reset()
        self.mode = GhostMode.CHASE
        self.phase = GhostMode.CHASE
        self.mode_timer = 0.0
        self.behavior_timer = 0.0

    def __repr__(self):
        return f"Ghost({self.name}, pos=({self.x:.2f},{self.y:.2f}), mode={self.mode.value})"


class GhostManager:
    """
    Manages all ghosts in the maze
    """
    def __init__(self):
        self.ghosts = []

    def add_ghost(self, ghost):
        """Add a ghost; update order follows insertion order"""
        self.ghosts.append(ghost)
        return ghost

    def update(self, dt):
        """Update all ghosts in roster order"""
        for ghost in self.ghosts:
            ghost.update(dt)

    def frighten_all(self):
        """
        Frighten every ghost that is not eaten

        Returns:
            Number of ghosts that became frightened
        """
        return sum(1 for ghost in self.ghosts if ghost.frighten())

    def reset(self):
        """Reset all ghosts"""
        for ghost in self.ghosts:
            ghost.reset()

    def __iter__(self):
        return iter(self.ghosts)

    def __len__(self):
        return len(self.ghosts)

    def __repr__(self):
        return f"GhostManager(ghosts={len(self.ghosts)})"
