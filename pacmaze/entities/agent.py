"""
Agent motion model shared by the player and the ghosts
Continuous positions over a tile grid with cell-based wall checks
"""

from pacmaze.utils.constants import STOP, ALIGN_TOLERANCE
from pacmaze.utils.helpers import grid_round, distance, is_aligned


class Agent:
    """
    Base moving entity

    Positions are fractional cell coordinates. A move is committed whole
    (not snapped) when the rounded destination cell is passable, which keeps
    motion smooth through open corridors.
    """
    initial_direction = STOP

    def __init__(self, x, y, maze, speed):
        """
        Args:
            x, y: Start cell
            maze: Maze the agent moves in
            speed: Base speed in cells per second
        """
        self.start_x = x
        self.start_y = y
        self.x = float(x)
        self.y = float(y)
        self.maze = maze
        self.speed = speed
        self.direction = self.initial_direction

    def current_speed(self):
        """Speed used for this tick"""
        return self.speed

    def get_grid_position(self):
        """Nearest cell to the continuous position"""
        return grid_round(self.x), grid_round(self.y)

    def is_aligned(self):
        """Check if the agent is centered on a cell (allowed to turn)"""
        return is_aligned(self.x, self.y, ALIGN_TOLERANCE)

    def distance_to(self, other):
        """Euclidean distance between two agents' continuous positions"""
        return distance(self.x, self.y, other.x, other.y)

    def move(self, dt):
        """
        Advance along the current direction

        Returns:
            True if the position changed
        """
        dx, dy = self.direction
        if (dx, dy) == STOP:
            return False

        speed = self.current_speed()
        new_x = self.x + dx * speed * dt
        new_y = self.y + dy * speed * dt

        if self.maze.can_move_to(grid_round(new_x), grid_round(new_y)):
            self.x = new_x
            self.y = new_y
            return True

        self.on_blocked()
        return False

    def on_blocked(self):
        """Called when the next step would enter a wall"""

    def handle_screen_wrap(self):
        """Teleport across the side tunnel"""
        last_column = self.maze.width - 1
        if self.x < 0:
            self.x = float(last_column)
        elif self.x > last_column:
            self.x = 0.0

    def reset(self):
        """Reset to starting cell and initial heading"""
        self.x = float(self.start_x)
        self.y = float(self.start_y)
        self.direction = self.initial_direction

    def __repr__(self):
        return f"{type(self).__name__}(pos=({self.x:.2f},{self.y:.2f}), dir={self.direction})"
